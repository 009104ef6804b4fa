from __future__ import annotations

"""Common interface for model backends.

A provider only has to know how to enumerate the models its backend
serves. Anything satisfying ``ModelProvider`` can be registered with the
factory in ``llm_settings.llm``; no base class is required.
"""

from typing import List, Protocol, runtime_checkable

from llm_settings.settings.models import ModelDescriptor


@runtime_checkable
class ModelProvider(Protocol):
    async def get_available_models(self) -> List[ModelDescriptor]:
        """Return the models the backend currently offers, in backend order."""
        ...

from __future__ import annotations

"""Reloading the model list and keeping the selected model consistent.

A reload asks the configured provider for its models and writes the
result back with a single ``update`` so readers never see a list that
disagrees with the selection:

* models found: keep the current selection if the backend still offers
  it, otherwise select the first model;
* no models, or the query failed: clear both the list and the selection.

Reloads are single-flight. While one is running, further ``reload`` calls
wait for it and receive its result instead of querying the backend again.
"""

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence, Tuple

from llm_settings.exceptions import NetworkError, UnsupportedProviderError
from llm_settings.llm import ModelProvider, create_provider
from llm_settings.settings.models import ModelDescriptor, ProviderConfig
from llm_settings.settings.store import SettingsStore

logger = logging.getLogger(__name__)

MSG_RELOADED = "Models reloaded"
MSG_EMPTY = "No models found"
MSG_FAILED = "Failed to load models. Check your endpoint URL."


class ReloadOutcome(str, enum.Enum):
    RELOADED = "reloaded"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class ReloadResult:
    outcome: ReloadOutcome
    message: str
    notice: str | None = None
    models: Tuple[ModelDescriptor, ...] = ()
    selected: ModelDescriptor | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "message": self.message,
            "notice": self.notice,
            "models": [m.model_dump() for m in self.models],
            "selected": self.selected.model_dump() if self.selected else None,
        }


def resolve_selection(
    previous: ModelDescriptor | None, models: Sequence[ModelDescriptor]
) -> ModelDescriptor | None:
    """Keep ``previous`` if ``models`` still has it, else fall back to the first model."""
    if previous is not None:
        for model in models:
            if model.name == previous.name:
                return model
    return models[0] if models else None


def cleared_update() -> Dict[str, Any]:
    return {"llm": {"model": None, "availableModels": []}}


def selection_update(models: Sequence[ModelDescriptor], selected: ModelDescriptor) -> Dict[str, Any]:
    return {
        "llm": {
            "model": {"name": selected.name},
            "availableModels": [{"name": m.name} for m in models],
        }
    }


class ModelReloader:
    def __init__(
        self,
        store: SettingsStore,
        provider_factory: Callable[[ProviderConfig], ModelProvider] = create_provider,
    ):
        self.store = store
        self.provider_factory = provider_factory
        self._inflight: asyncio.Future | None = None

    @property
    def in_progress(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def reload(self, notify: bool = True) -> ReloadResult:
        if self.in_progress:
            logger.debug("[models] reload already running, joining it")
            result = await asyncio.shield(self._inflight)
        else:
            self._inflight = asyncio.ensure_future(self._reload())
            try:
                result = await asyncio.shield(self._inflight)
            finally:
                if self._inflight is not None and self._inflight.done():
                    self._inflight = None
        notice = result.message if notify else None
        return ReloadResult(result.outcome, result.message, notice, result.models, result.selected)

    async def _reload(self) -> ReloadResult:
        configuration = self.store.get_settings().llm
        try:
            provider = self.provider_factory(configuration)
            models = await provider.get_available_models()
        except (NetworkError, UnsupportedProviderError) as exc:
            logger.error(
                "[models] reload failed provider=%s endpoint=%s: %s",
                configuration.provider,
                configuration.auth.endpoint,
                exc,
                extra={
                    "event": "models.reload_failed",
                    "provider": configuration.provider,
                    "endpoint": configuration.auth.endpoint,
                    "error_type": type(exc).__name__,
                },
            )
            await self.store.update(cleared_update())
            return ReloadResult(ReloadOutcome.FAILED, MSG_FAILED)

        logger.info("[models] provider=%s models_found=%d", configuration.provider, len(models))
        if not models:
            await self.store.update(cleared_update())
            return ReloadResult(ReloadOutcome.EMPTY, MSG_EMPTY)

        # the selection may have changed while the request was in flight
        previous = self.store.get_settings().llm.model
        selected = resolve_selection(previous, models)
        await self.store.update(selection_update(models, selected))
        return ReloadResult(ReloadOutcome.RELOADED, MSG_RELOADED, models=tuple(models), selected=selected)

from __future__ import annotations

import logging
from typing import Any, List

from llm_settings import config
from llm_settings.settings.models import ModelDescriptor, ProviderConfig
from llm_settings.utils.http_client import HttpClient

logger = logging.getLogger(__name__)


class OllamaProvider:
    """Lists models from an Ollama server via ``GET /api/tags``."""

    TAGS_PATH = "/api/tags"

    def __init__(self, configuration: ProviderConfig):
        self.configuration = configuration
        self.http = HttpClient(
            base_url=configuration.auth.endpoint,
            timeout=config.PROVIDER_TIMEOUT,
        )

    async def get_available_models(self) -> List[ModelDescriptor]:
        resp = await self.http.get(self.TAGS_PATH)
        entries = resp.data.get("models") if isinstance(resp.data, dict) else None
        if not isinstance(entries, list):
            return []
        return [ModelDescriptor(name=name) for name in _names(entries)]


def _names(entries: List[Any]):
    for entry in entries:
        name = entry.get("name") if isinstance(entry, dict) else None
        if isinstance(name, str):
            yield name
        else:
            logger.debug("[ollama] skipping tag entry without a name: %r", entry)

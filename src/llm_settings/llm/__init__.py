from __future__ import annotations

"""Factory helpers for model providers."""

from typing import Callable, Dict, List, Tuple

from llm_settings.exceptions import UnsupportedProviderError
from llm_settings.settings.models import LLMProviderType, ProviderConfig

from .base import ModelProvider
from .ollama_provider import OllamaProvider

__all__ = [
    "ModelProvider",
    "OllamaProvider",
    "available_providers",
    "create_provider",
]

_PROVIDERS: Dict[str, Tuple[str, Callable[[ProviderConfig], ModelProvider]]] = {
    LLMProviderType.OLLAMA.value: ("Ollama", OllamaProvider),
}


def create_provider(configuration: ProviderConfig) -> ModelProvider:
    """Return a provider instance for ``configuration.provider``."""
    try:
        _, factory = _PROVIDERS[configuration.provider]
    except KeyError:
        raise UnsupportedProviderError(configuration.provider) from None
    return factory(configuration)


def available_providers() -> List[Tuple[str, str]]:
    """(identifier, display label) pairs for every registered provider."""
    return [(provider_id, label) for provider_id, (label, _) in _PROVIDERS.items()]

from .merge import deep_merge
from .models import (
    AuthConfig,
    LLMProviderType,
    ModelDescriptor,
    ProviderConfig,
    Settings,
    default_settings,
)
from .store import SettingsStore

__all__ = [
    "AuthConfig",
    "LLMProviderType",
    "ModelDescriptor",
    "ProviderConfig",
    "Settings",
    "SettingsStore",
    "deep_merge",
    "default_settings",
]

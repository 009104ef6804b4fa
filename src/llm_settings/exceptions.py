from __future__ import annotations

"""Error types shared across the settings store, transport and providers."""

from typing import Any


class LLMSettingsError(Exception):
    """Base class for every error raised by this package."""


class UnsupportedProviderError(LLMSettingsError, ValueError):
    def __init__(self, provider: str):
        super().__init__(f"Unsupported LLM provider: {provider}")
        self.provider = provider


class SettingsValidationError(LLMSettingsError, ValueError):
    """A merged settings document does not fit the settings schema."""


class NetworkError(LLMSettingsError):
    """Any failure talking to a remote backend (connection, status, timeout)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class HttpError(NetworkError):
    def __init__(self, message: str, *, status: int, url: str | None = None, data: Any = None):
        super().__init__(message, url=url)
        self.status = status
        self.data = data


class RequestTimeoutError(NetworkError):
    def __init__(self, url: str, timeout: float):
        super().__init__(f"Request to url {url} timed out after {int(timeout * 1000)}ms", url=url)
        self.timeout = timeout

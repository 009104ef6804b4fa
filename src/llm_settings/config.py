from __future__ import annotations

"""Environment-driven configuration.

Values come from the process environment, optionally seeded from a local
``.env`` file. They are read on every call so tests and hosts can change
the environment after import.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load env first so the getters below see values from .env
load_dotenv(".env", override=False)

DEFAULT_ENDPOINT = "http://localhost:11434"
DEFAULT_SETTINGS_PATH = Path.home() / ".llm_settings" / "settings.json"

# Fixed network budget for listing models on a backend, in seconds.
PROVIDER_TIMEOUT = 3.0


def default_endpoint() -> str:
    return os.getenv("LLM_SETTINGS_DEFAULT_ENDPOINT", DEFAULT_ENDPOINT)


def settings_path() -> Path:
    raw = os.getenv("LLM_SETTINGS_PATH")
    return Path(raw).expanduser() if raw else DEFAULT_SETTINGS_PATH


def log_level() -> str:
    return os.getenv("LLM_SETTINGS_LOG_LEVEL", "INFO").upper()


def server_host() -> str:
    return os.getenv("LLM_SETTINGS_HOST", "127.0.0.1")


def server_port() -> int:
    return int(os.getenv("LLM_SETTINGS_PORT", "8000"))

from __future__ import annotations

"""Persistence primitives for the one settings document.

The store only needs ``load_raw``/``save_raw``; hosts can supply their own
implementation of ``SettingsStorage``.
"""

import asyncio
import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Protocol

logger = logging.getLogger(__name__)


class SettingsStorage(Protocol):
    async def load_raw(self) -> Any:
        ...

    async def save_raw(self, data: Dict[str, Any]) -> None:
        ...


class JsonFileStorage:
    """Keeps the settings document in a single JSON file."""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    async def load_raw(self) -> Any:
        return await asyncio.to_thread(self._read)

    async def save_raw(self, data: Dict[str, Any]) -> None:
        await asyncio.to_thread(self._write, data)

    def _read(self) -> Any:
        if not self.path.exists():
            logger.info("[storage] no settings file at %s, using defaults", self.path)
            return None
        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            return None
        return json.loads(text)

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # write-then-rename so a crash never leaves a truncated document
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".settings-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise


class MemoryStorage:
    """In-process storage, handy for embedding and tests."""

    def __init__(self, initial: Any = None):
        self.data = copy.deepcopy(initial)
        self.save_count = 0

    async def load_raw(self) -> Any:
        return copy.deepcopy(self.data)

    async def save_raw(self, data: Dict[str, Any]) -> None:
        self.data = copy.deepcopy(data)
        self.save_count += 1

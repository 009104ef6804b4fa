from __future__ import annotations

"""Settings store: the single owner of the current settings snapshot.

The snapshot is a frozen ``Settings`` instance that is replaced, never
edited, on every ``update``. Updates are not serialized against each
other: each one merges onto whatever snapshot is current when it is
called and the last one to replace the snapshot wins.
"""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from llm_settings.exceptions import SettingsValidationError
from llm_settings.settings.merge import deep_merge
from llm_settings.settings.models import Settings, default_settings, to_wire_keys
from llm_settings.storage import SettingsStorage

logger = logging.getLogger(__name__)


class SettingsStore:
    def __init__(self, storage: SettingsStorage):
        self.storage = storage
        self._settings = _validate(default_settings())

    async def load(self) -> Settings:
        """Read persisted data and layer it over the defaults."""
        raw = await self.storage.load_raw()
        if raw is None:
            raw = {}
        elif not isinstance(raw, Mapping):
            logger.warning("[settings] ignoring persisted data of type %s", type(raw).__name__)
            raw = {}
        self._settings = _validate(deep_merge(default_settings(), to_wire_keys(raw)))
        logger.debug("[settings] loaded %s", self._settings.to_dict())
        return self._settings

    def get_settings(self) -> Settings:
        return self._settings

    async def update(self, partial: Mapping[str, Any]) -> Settings:
        settings = _validate(deep_merge(self._settings.to_dict(), to_wire_keys(partial)))
        self._settings = settings
        logger.debug("[settings] updated %s", settings.to_dict())
        await self.storage.save_raw(settings.to_dict())
        return settings

    async def save(self) -> None:
        await self.storage.save_raw(self._settings.to_dict())


def _validate(document: Mapping[str, Any]) -> Settings:
    try:
        return Settings.model_validate(document)
    except ValidationError as exc:
        raise SettingsValidationError(str(exc)) from exc

from __future__ import annotations

import asyncio
import sys

from llm_settings import config
from llm_settings.reconcile import ModelReloader
from llm_settings.settings import SettingsStore
from llm_settings.storage import JsonFileStorage
from llm_settings.utils.logger import setup_logger


async def main(endpoint: str | None = None):
    setup_logger()
    store = SettingsStore(JsonFileStorage(config.settings_path()))
    await store.load()
    if endpoint:
        await store.update({"llm": {"auth": {"endpoint": endpoint}}})

    result = await ModelReloader(store).reload()
    print(result.notice)
    llm = store.get_settings().llm
    for model in llm.available_models or []:
        marker = "*" if llm.model and model.name == llm.model.name else " "
        print(f" {marker} {model.name}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))

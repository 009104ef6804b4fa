from __future__ import annotations

"""HTTP surface for a settings screen.

The app owns one ``SettingsStore`` and one ``ModelReloader``. On startup it
loads persisted settings and silently reloads the model list, the same
thing a settings tab does the first time it is shown.
"""

import logging
from typing import Any, Callable, Dict

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel

from llm_settings import config
from llm_settings.exceptions import SettingsValidationError
from llm_settings.llm import ModelProvider, create_provider
from llm_settings.reconcile import ModelReloader
from llm_settings.settings.models import LLMProviderType, ProviderConfig
from llm_settings.settings.store import SettingsStore
from llm_settings.storage import JsonFileStorage, SettingsStorage
from llm_settings.utils.logger import setup_logger
from llm_settings.view import SettingsView, build_settings_view

logger = setup_logger()


class ProviderPatch(BaseModel):
    provider: LLMProviderType


class EndpointPatch(BaseModel):
    endpoint: str


class ModelPatch(BaseModel):
    name: str


def create_app(
    storage: SettingsStorage | None = None,
    provider_factory: Callable[[ProviderConfig], ModelProvider] = create_provider,
) -> FastAPI:
    store = SettingsStore(storage or JsonFileStorage(config.settings_path()))
    reloader = ModelReloader(store, provider_factory=provider_factory)

    app = FastAPI(title="LLM Backend Settings", version="0.1.0")
    app.state.store = store
    app.state.reloader = reloader

    @app.on_event("startup")
    async def _load_settings():
        settings = await store.load()
        logger.info(
            "[startup] provider=%s endpoint=%s", settings.llm.provider, settings.llm.auth.endpoint
        )
        await reloader.reload(notify=False)

    async def _apply(partial: Dict[str, Any]) -> Dict[str, Any]:
        try:
            settings = await store.update(partial)
        except SettingsValidationError as e:
            raise HTTPException(status_code=400, detail=str(e))
        logger.info("[settings] %s", settings.to_dict())
        return settings.to_dict()

    @app.get("/settings")
    async def get_settings():
        return store.get_settings().to_dict()

    @app.patch("/settings")
    async def patch_settings(partial: Dict[str, Any] = Body(...)):
        return await _apply(partial)

    @app.put("/settings/provider")
    async def set_provider(p: ProviderPatch):
        return await _apply({"llm": {"provider": p.provider.value}})

    @app.put("/settings/endpoint")
    async def set_endpoint(p: EndpointPatch):
        return await _apply({"llm": {"auth": {"endpoint": p.endpoint}}})

    @app.put("/settings/model")
    async def set_model(p: ModelPatch):
        return await _apply({"llm": {"model": {"name": p.name}}})

    @app.get("/settings/view", response_model=SettingsView)
    async def settings_view():
        return build_settings_view(store.get_settings())

    @app.post("/models/reload")
    async def reload_models(notify: bool = True):
        result = await reloader.reload(notify=notify)
        return result.to_dict()

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=config.server_host(), port=config.server_port())


if __name__ == "__main__":
    run()

from __future__ import annotations

"""Presentation model for a settings screen.

Building a view never writes to the store. A selected model that the
current list does not contain (for example right after the endpoint was
edited) is left in the settings until the next reload; the view just
shows what the model dropdown would display.
"""

from typing import List, Sequence

from pydantic import BaseModel, Field

from llm_settings import config
from llm_settings.llm import available_providers
from llm_settings.settings.models import ModelDescriptor, Settings


class Option(BaseModel):
    value: str
    label: str


class SettingsView(BaseModel):
    provider: str
    provider_options: List[Option]
    endpoint: str
    endpoint_placeholder: str = Field(default_factory=config.default_endpoint)
    model: str
    model_options: List[Option]


def resolve_model_name(current: str | None, models: Sequence[ModelDescriptor]) -> str:
    if current and any(m.name == current for m in models):
        return current
    return models[0].name if models else ""


def build_settings_view(settings: Settings) -> SettingsView:
    llm = settings.llm
    models = llm.available_models or []
    if models:
        model_options = [Option(value=m.name, label=m.name) for m in models]
        value = resolve_model_name(llm.model.name if llm.model else None, models)
    else:
        model_options = [Option(value="", label="None")]
        value = ""
    return SettingsView(
        provider=llm.provider,
        provider_options=[Option(value=pid, label=label) for pid, label in available_providers()],
        endpoint=llm.auth.endpoint,
        model=value,
        model_options=model_options,
    )

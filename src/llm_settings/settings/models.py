from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from llm_settings import config


class LLMProviderType(str, Enum):
    OLLAMA = "ollama"


class ModelDescriptor(BaseModel):
    """A selectable model; two descriptors are the same model iff names match."""

    model_config = ConfigDict(frozen=True)

    name: str


class AuthConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    endpoint: str


class ProviderConfig(BaseModel):
    """Connection and model selection for the configured backend.

    ``provider`` stays a plain string so a document naming a provider this
    build does not know still loads; ``create_provider`` rejects it later.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    provider: str = LLMProviderType.OLLAMA.value
    auth: AuthConfig
    model: ModelDescriptor | None = None
    available_models: Tuple[ModelDescriptor, ...] | None = Field(default=None, alias="availableModels")

    @field_validator("provider", mode="before")
    @classmethod
    def _provider_value(cls, value: Any) -> Any:
        return value.value if isinstance(value, Enum) else value

    @field_validator("model", mode="before")
    @classmethod
    def _nameless_model_is_none(cls, value: Any) -> Any:
        # older documents cleared the selection as {"name": null}
        if isinstance(value, dict) and value.get("name") is None:
            return None
        return value


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    llm: ProviderConfig

    def to_dict(self) -> Dict[str, Any]:
        """Wire/persisted shape: camelCase keys, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_wire_keys(partial: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename Python field names under ``llm`` to their wire aliases.

    Merging happens on the wire-shaped document, so ``available_models``
    must land on ``availableModels`` rather than next to it.
    """
    llm = partial.get("llm")
    if not isinstance(llm, Mapping):
        return dict(partial)
    renamed = {}
    for key, value in llm.items():
        field = ProviderConfig.model_fields.get(key)
        renamed[field.alias if field is not None and field.alias else key] = value
    return {**partial, "llm": renamed}


def default_settings() -> Dict[str, Any]:
    return {
        "llm": {
            "provider": LLMProviderType.OLLAMA.value,
            "auth": {"endpoint": config.default_endpoint()},
        }
    }

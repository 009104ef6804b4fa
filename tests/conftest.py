import asyncio
from typing import List

import pytest

from llm_settings.exceptions import NetworkError
from llm_settings.settings.models import ModelDescriptor


class FakeProvider:
    """Returns a canned model list, or raises, and counts calls."""

    def __init__(self, names: List[str] | None = None, error: Exception | None = None, gate: asyncio.Event | None = None):
        self.names = names or []
        self.error = error
        self.gate = gate
        self.calls = 0

    async def get_available_models(self):
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return [ModelDescriptor(name=n) for n in self.names]


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture
def network_error():
    return NetworkError("connection refused", url="http://localhost:11434/api/tags")

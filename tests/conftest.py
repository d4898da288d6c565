"""Shared fixtures for gateway tests."""
from __future__ import annotations

from typing import Callable

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from backend.config import ProviderCredentials, get_credentials
from backend.main import app


class FakeChatOpenAI:
    """Stand-in for langchain_openai.ChatOpenAI that records how it was built and called."""

    instances: list["FakeChatOpenAI"] = []
    reply: str | Exception = "fake completion"

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs
        self.messages = None
        FakeChatOpenAI.instances.append(self)

    async def ainvoke(self, messages):
        self.messages = messages
        if isinstance(FakeChatOpenAI.reply, Exception):
            raise FakeChatOpenAI.reply
        return AIMessage(content=FakeChatOpenAI.reply)


@pytest.fixture
def fake_llm(monkeypatch) -> type[FakeChatOpenAI]:
    """Route provider clients to FakeChatOpenAI."""
    FakeChatOpenAI.instances = []
    FakeChatOpenAI.reply = "fake completion"
    monkeypatch.setattr("backend.providers.clients.ChatOpenAI", FakeChatOpenAI)
    return FakeChatOpenAI


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Build a TestClient whose requests see the given provider keys."""

    def _make(**keys: str) -> TestClient:
        credentials = ProviderCredentials(**keys)
        app.dependency_overrides[get_credentials] = lambda: credentials
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client) -> TestClient:
    """Client with no provider keys configured (mock mode)."""
    return make_client()

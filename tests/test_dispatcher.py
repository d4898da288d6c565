"""Tests for operation classification and dispatch."""
from __future__ import annotations

import asyncio
import math
from datetime import datetime

import pytest

from backend.config import ProviderCredentials
from backend.gateway import OPERATIONS, classify, dispatch
from backend.gateway.dispatcher import UNSUPPORTED_OPERATION

NO_KEYS = ProviderCredentials()


def _dispatch(query: str, variables: dict | None = None, credentials: ProviderCredentials = NO_KEYS) -> dict:
    return asyncio.run(dispatch(query, variables, credentials)).to_payload()


def test_operation_table_order() -> None:
    assert [op.name for op in OPERATIONS] == ["GetGreeting", "GetMCPData", "chatWithAI"]


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("query GetGreeting { greeting timestamp }", "GetGreeting"),
        ("query GetMCPData { mcpWeather { city } }", "GetMCPData"),
        ('mutation { chatWithAI(message: "hi") { response } }', "chatWithAI"),
        # Greeting is checked before MCP data
        ("query GetGreeting GetMCPData { greeting }", "GetGreeting"),
        # Markers are matched anywhere, even inside unrelated text
        ("query Other { note(text: \"GetMCPData\") }", "GetMCPData"),
    ],
)
def test_classify_matches_first_operation(query: str, expected: str) -> None:
    operation = classify(query)
    assert operation is not None
    assert operation.name == expected


@pytest.mark.parametrize(
    "query",
    [
        "query Unknown { foo }",
        "mutation { somethingElse }",
        # Markers need their keyword
        "GetGreeting { greeting }",
        "chatWithAI(message: \"hi\")",
        # Case-sensitive
        "query getgreeting { greeting }",
        "",
    ],
)
def test_classify_returns_none_for_unrecognized(query: str) -> None:
    assert classify(query) is None


def test_greeting_query() -> None:
    payload = _dispatch("query GetGreeting { greeting timestamp }")

    assert "errors" not in payload
    data = payload["data"]
    assert isinstance(data["greeting"], str) and data["greeting"]
    datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))


def test_mcp_data_query() -> None:
    payload = _dispatch("query GetMCPData { mcpWeather { temperature } mcpNews { title } }")

    data = payload["data"]
    assert math.isfinite(data["mcpWeather"]["temperature"])
    assert data["mcpWeather"]["city"]
    assert data["mcpNews"]["title"]
    assert set(data) == {"mcpWeather", "mcpNews"}


def test_repeated_queries_are_structurally_identical() -> None:
    first = _dispatch("query GetMCPData { mcpWeather { city } }")
    second = _dispatch("query GetMCPData { mcpWeather { city } }")
    assert first == second

    a = _dispatch("query GetGreeting { greeting }")["data"]
    b = _dispatch("query GetGreeting { greeting }")["data"]
    assert a.keys() == b.keys()
    assert a["greeting"] == b["greeting"]


def test_chat_mutation_with_variables_uses_mock() -> None:
    payload = _dispatch(
        "mutation ChatWithAI($message: String!) { chatWithAI(message: $message) { response model } }",
        {"message": "hello"},
    )

    result = payload["data"]["chatWithAI"]
    assert result["model"] == "Mock"
    assert "hello" in result["response"]
    datetime.fromisoformat(result["timestamp"].replace("Z", "+00:00"))


def test_chat_mutation_with_inline_literal() -> None:
    payload = _dispatch('mutation { chatWithAI(message: "hi") }', {})

    result = payload["data"]["chatWithAI"]
    assert result["model"] == "Mock"
    assert '"hi"' in result["response"]


def test_chat_mutation_without_message_still_answers() -> None:
    payload = _dispatch("mutation { chatWithAI { response } }", None)

    result = payload["data"]["chatWithAI"]
    assert result["model"] == "Mock"
    assert 'You said: ""' in result["response"]


def test_unsupported_operation_returns_errors_only() -> None:
    payload = _dispatch("query Unknown { foo }")
    assert payload == {"errors": [{"message": UNSUPPORTED_OPERATION}]}
    assert UNSUPPORTED_OPERATION == "unsupported GraphQL operation"


def test_chat_provider_failure_is_data(fake_llm) -> None:
    fake_llm.reply = ConnectionError("connection refused")

    payload = _dispatch(
        'mutation { chatWithAI(message: "hi") }',
        credentials=ProviderCredentials(deepseek_api_key="sk-test"),
    )

    result = payload["data"]["chatWithAI"]
    assert result["model"] == "Error"
    assert result["response"] == "AI call failed: connection refused"

"""Tests for chat argument extraction."""
from backend.gateway.arguments import resolve_message


def test_variables_take_precedence_over_inline_literal() -> None:
    query = 'mutation { chatWithAI(message: "inline") { response } }'
    assert resolve_message({"message": "from vars"}, query) == "from vars"


def test_inline_literal_used_when_variables_missing() -> None:
    query = 'mutation { chatWithAI(message: "hi") { response } }'
    assert resolve_message({}, query) == "hi"


def test_empty_variable_falls_back_to_inline_literal() -> None:
    query = 'mutation { chatWithAI(message:"fallback") }'
    assert resolve_message({"message": ""}, query) == "fallback"


def test_first_inline_literal_wins() -> None:
    query = 'mutation { a: chatWithAI(message: "one") b: chatWithAI(message: "two") }'
    assert resolve_message({}, query) == "one"


def test_inline_literal_stops_at_quote() -> None:
    query = r'mutation { chatWithAI(message: "say \"hi\"") }'
    assert resolve_message({}, query) == "say \\"


def test_no_message_anywhere_returns_none() -> None:
    query = "mutation ChatWithAI($message: String!) { chatWithAI(message: $message) }"
    assert resolve_message({}, query) is None

"""
Operation dispatcher for POST /graphql.

This is not a GraphQL engine. An operation is recognized by plain,
case-sensitive substring checks against the raw query text: the keyword
for its kind ("query" / "mutation") plus its marker (e.g. "GetGreeting").
The table below is walked top-down and the first match wins. A marker
that appears inside an unrelated query still matches.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Literal
from backend.config import ProviderCredentials
from backend.gateway.arguments import resolve_message
from backend.gateway.resolvers import chat_with_ai, greeting, mcp_data
from backend.gateway.state import ResponseEnvelope
from backend.logging import log_error, log_operation


UNSUPPORTED_OPERATION = "unsupported GraphQL operation"

Handler = Callable[[str, dict[str, Any], ProviderCredentials], Awaitable[dict[str, Any]]]


@dataclass(frozen=True)
class Operation:
    """One recognizable operation."""
    name: str
    kind: Literal["query", "mutation"]
    marker: str
    handler: Handler

    def matches(self, query: str) -> bool:
        return self.kind in query and self.marker in query


async def _greeting(query: str, variables: dict[str, Any], credentials: ProviderCredentials) -> dict:
    return greeting().model_dump()


async def _mcp_data(query: str, variables: dict[str, Any], credentials: ProviderCredentials) -> dict:
    result = await mcp_data()
    return result.model_dump(by_alias=True)


async def _chat_with_ai(query: str, variables: dict[str, Any], credentials: ProviderCredentials) -> dict:
    message = resolve_message(variables, query)
    result = await chat_with_ai(message, credentials)
    return {"chatWithAI": result.model_dump()}


OPERATIONS: tuple[Operation, ...] = (
    Operation(name="GetGreeting", kind="query", marker="GetGreeting", handler=_greeting),
    Operation(name="GetMCPData", kind="query", marker="GetMCPData", handler=_mcp_data),
    Operation(name="chatWithAI", kind="mutation", marker="chatWithAI", handler=_chat_with_ai),
)


def classify(query: str) -> Operation | None:
    """Return the first operation whose predicate matches the query text."""
    for operation in OPERATIONS:
        if operation.matches(query):
            return operation
    return None


async def dispatch(
    query: str,
    variables: dict[str, Any] | None,
    credentials: ProviderCredentials,
) -> ResponseEnvelope:
    """
    Route a request to its operation handler.

    Args:
        query: Raw query text
        variables: Request variables (None is treated as empty)
        credentials: Provider keys for the chat mutation

    Returns:
        ResponseEnvelope with `data`, or with `errors` when the operation
        is not recognized
    """
    variables = variables or {}

    operation = classify(query)
    if operation is None:
        log_operation("unsupported", query)
        log_error(UNSUPPORTED_OPERATION)
        return ResponseEnvelope.failure(UNSUPPORTED_OPERATION)

    log_operation(operation.name, query, variables)
    data = await operation.handler(query, variables, credentials)
    return ResponseEnvelope.ok(data)

"""
GraphQL-shaped gateway.

Recognizes a small, fixed set of operations by inspecting the raw query
text and routes each one to its handler:
- query GetGreeting: static greeting + timestamp
- query GetMCPData: mocked weather and news
- mutation chatWithAI: LLM chat with provider fallback

Usage:
    from backend.gateway import dispatch

    envelope = await dispatch(query, variables, credentials)
"""
from backend.gateway.dispatcher import OPERATIONS, Operation, classify, dispatch
from backend.gateway.arguments import resolve_message
from backend.gateway.state import GraphQLRequest, ResponseEnvelope

__all__ = [
    "dispatch",
    "classify",
    "Operation",
    "OPERATIONS",
    "resolve_message",
    "GraphQLRequest",
    "ResponseEnvelope",
]

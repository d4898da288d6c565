"""
Argument extraction for operations.

Callers either send `variables` or inline the literal in the query text
(`chatWithAI(message: "hi")`). Variables win; the inline literal is a
regex scan, not a GraphQL literal parse, so escaped quotes end the match.
"""
import re
from typing import Any

INLINE_MESSAGE_PATTERN = re.compile(r'message:\s*"([^"]*)"')


def resolve_message(variables: dict[str, Any], query: str) -> str | None:
    """
    Resolve the `message` argument of the chat mutation.

    Args:
        variables: Request variables
        query: Raw query text

    Returns:
        The message, or None if neither source provides one
    """
    message = variables.get("message")
    if message:
        return str(message)

    match = INLINE_MESSAGE_PATTERN.search(query)
    if match:
        return match.group(1)

    return None

"""
Handlers for the operations the gateway recognizes.
"""
from datetime import datetime, timezone
from backend.config import ProviderCredentials
from backend.gateway.state import ChatResult, GreetingResult, MCPDataResult, News, Weather
from backend.providers import chat


GREETING = "✅ GraphQL gateway connected successfully!"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2025-01-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def greeting() -> GreetingResult:
    return GreetingResult(greeting=GREETING, timestamp=utc_timestamp())


async def mcp_weather() -> Weather:
    # Sample data until a real weather MCP server is wired in
    return Weather(temperature=22.5, condition="Sunny", city="Beijing")


async def mcp_news() -> News:
    # Sample data until a real news MCP server is wired in
    return News(
        title="Web3 technology is moving fast",
        summary="Edge runtimes and serverless workers are changing how web apps are built",
    )


async def mcp_data() -> MCPDataResult:
    return MCPDataResult(mcpWeather=await mcp_weather(), mcpNews=await mcp_news())


async def chat_with_ai(message: str | None, credentials: ProviderCredentials) -> ChatResult:
    """
    Resolve the chatWithAI mutation.

    Provider failures come back as model="Error"; this never raises for them.
    """
    reply = await chat(message, credentials)
    return ChatResult(response=reply.response, model=reply.model, timestamp=utc_timestamp())

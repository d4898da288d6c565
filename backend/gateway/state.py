"""
Request, response and result models for the GraphQL gateway.
"""
from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from backend.providers.selector import ModelLabel


class GraphQLRequest(BaseModel):
    """POST /graphql body."""
    query: str
    variables: dict[str, Any] | None = Field(default_factory=dict)

    def resolved_variables(self) -> dict[str, Any]:
        """Variables with an explicit null treated as empty."""
        return self.variables or {}


class GraphQLError(BaseModel):
    """A single entry of the envelope's errors list."""
    message: str


class ResponseEnvelope(BaseModel):
    """
    Top-level response. Exactly one of `data` / `errors` is serialized.
    """
    data: dict[str, Any] | None = None
    errors: list[GraphQLError] | None = None

    @classmethod
    def ok(cls, data: dict[str, Any]) -> "ResponseEnvelope":
        return cls(data=data)

    @classmethod
    def failure(cls, message: str) -> "ResponseEnvelope":
        return cls(errors=[GraphQLError(message=message)])

    def to_payload(self) -> dict:
        """Serialize to the JSON body, keeping only the populated key."""
        if self.errors is not None:
            return {"errors": [e.model_dump() for e in self.errors]}
        return {"data": self.data}


class GreetingResult(BaseModel):
    greeting: str
    timestamp: str


class Weather(BaseModel):
    temperature: float
    condition: str
    city: str


class News(BaseModel):
    title: str
    summary: str


class MCPDataResult(BaseModel):
    """Mocked MCP weather + news lookup."""
    model_config = ConfigDict(populate_by_name=True)

    mcp_weather: Weather | None = Field(default=None, alias="mcpWeather")
    mcp_news: News | None = Field(default=None, alias="mcpNews")


class ChatResult(BaseModel):
    """Result of the chatWithAI mutation."""
    response: str
    model: ModelLabel
    timestamp: str

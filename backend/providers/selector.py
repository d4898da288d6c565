"""
Provider selection for the chatWithAI mutation.

The fallback chain is plain data: an ordered list of providers, each
with the credential it needs. The first provider whose credential is
set handles the message. Mock needs no credential, so it always
terminates the chain.

A failing provider never fails the request: the exception is turned
into an "Error" reply that travels back to the caller as data.
"""
from dataclasses import dataclass
from typing import Awaitable, Callable, Literal
from pydantic import BaseModel
from backend.config import ProviderCredentials
from backend.logging import log_decision, log_error, log_provider_call, log_provider_result
from backend.providers.clients import request_deepseek, request_openai


ModelLabel = Literal["DeepSeek", "OpenAI", "Mock", "Error"]


class ProviderReply(BaseModel):
    """What the selector hands back to the chat handler."""
    response: str
    model: ModelLabel


MOCK_TEMPLATE = (
    'This is a mock response. You said: "{message}"\n\n'
    "Configure DEEPSEEK_API_KEY or OPENAI_API_KEY to enable real AI conversations."
)


async def mock_response(message: str, api_key: str | None = None) -> str:
    """Deterministic echo used when no provider key is configured."""
    return MOCK_TEMPLATE.format(message=message)


@dataclass(frozen=True)
class Provider:
    """One entry of the fallback chain."""
    label: str
    invoke: Callable[[str, str | None], Awaitable[str]]
    credential: str | None = None  # ProviderCredentials field; None = always available

    def api_key(self, credentials: ProviderCredentials) -> str | None:
        if self.credential is None:
            return None
        return getattr(credentials, self.credential)

    def is_available(self, credentials: ProviderCredentials) -> bool:
        return self.credential is None or bool(self.api_key(credentials))


PROVIDER_CHAIN: tuple[Provider, ...] = (
    Provider(label="DeepSeek", invoke=request_deepseek, credential="deepseek_api_key"),
    Provider(label="OpenAI", invoke=request_openai, credential="openai_api_key"),
    Provider(label="Mock", invoke=mock_response),
)


def select_provider(
    credentials: ProviderCredentials,
    providers: tuple[Provider, ...] | None = None,
) -> Provider | None:
    """Return the first available provider in the chain."""
    chain = PROVIDER_CHAIN if providers is None else providers
    for provider in chain:
        if provider.is_available(credentials):
            return provider
    return None


async def chat(
    message: str | None,
    credentials: ProviderCredentials,
    providers: tuple[Provider, ...] | None = None,
) -> ProviderReply:
    """
    Answer a chat message with the first available provider.

    Args:
        message: User message (None when the request carried none)
        credentials: Provider keys for this request
        providers: Override the fallback chain (defaults to PROVIDER_CHAIN)

    Returns:
        ProviderReply with the response text and the provider label,
        or model="Error" if the provider call raised
    """
    text = message or ""

    provider = select_provider(credentials, providers)
    if provider is None:
        log_error("No provider available in the fallback chain")
        return ProviderReply(response="AI call failed: no provider available", model="Error")

    log_decision(provider.label, reason="first provider with a configured credential")

    try:
        log_provider_call(provider.label, text)
        response = await provider.invoke(text, provider.api_key(credentials))
    except Exception as e:
        log_error(f"{provider.label} call failed", e)
        return ProviderReply(response=f"AI call failed: {e}", model="Error")

    log_provider_result(provider.label, response)
    return ProviderReply(response=response, model=provider.label)

"""
LLM providers for the chat mutation.

Usage:
    from backend.providers import chat

    reply = await chat("Hello!", credentials)
"""
from backend.providers.clients import ProviderResponseError, request_deepseek, request_openai
from backend.providers.selector import PROVIDER_CHAIN, Provider, ProviderReply, chat, mock_response, select_provider

__all__ = [
    "chat",
    "select_provider",
    "Provider",
    "ProviderReply",
    "PROVIDER_CHAIN",
    "mock_response",
    "request_deepseek",
    "request_openai",
    "ProviderResponseError",
]

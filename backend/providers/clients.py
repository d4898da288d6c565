"""
Chat-completion clients for the external LLM providers.

Both DeepSeek and OpenAI speak the OpenAI chat API, so each client is a
langchain ChatOpenAI pointed at the right endpoint. One non-streaming
call per invocation; failures propagate to the selector.
"""
from langchain_openai import ChatOpenAI
from langchain_core.messages import HumanMessage, SystemMessage
from backend.config import get_settings


class ProviderResponseError(RuntimeError):
    """Provider answered but returned no usable completion text."""


def _completion_text(provider: str, response) -> str:
    content = response.content
    # Some models return content blocks instead of a plain string
    if isinstance(content, list):
        content = "".join(
            block.get("text", "") if isinstance(block, dict) else str(block)
            for block in content
        )
    if not content:
        raise ProviderResponseError(f"{provider} returned no completion content")
    return content


async def request_deepseek(message: str, api_key: str) -> str:
    """
    Ask DeepSeek for a single chat completion.

    Args:
        message: User message
        api_key: DeepSeek API key

    Returns:
        Text of the first completion
    """
    settings = get_settings()

    llm = ChatOpenAI(
        model=settings.DEEPSEEK_MODEL,
        api_key=api_key,
        base_url=settings.DEEPSEEK_BASE_URL,
        max_retries=0,
    )

    response = await llm.ainvoke([
        SystemMessage(content=settings.DEEPSEEK_SYSTEM_PROMPT),
        HumanMessage(content=message),
    ])
    return _completion_text("DeepSeek", response)


async def request_openai(message: str, api_key: str) -> str:
    """Ask OpenAI for a single chat completion."""
    settings = get_settings()

    llm = ChatOpenAI(
        model=settings.OPENAI_MODEL,
        api_key=api_key,
        max_retries=0,
    )

    response = await llm.ainvoke([
        SystemMessage(content=settings.OPENAI_SYSTEM_PROMPT),
        HumanMessage(content=message),
    ])
    return _completion_text("OpenAI", response)

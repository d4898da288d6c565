"""
Configuration management for the gateway.
"""
import os
from functools import lru_cache
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()


class ProviderCredentials(BaseModel):
    """
    Provider API keys available to a request.

    Frozen: the dispatcher only ever reads these.
    """
    model_config = ConfigDict(frozen=True)

    deepseek_api_key: str | None = None
    openai_api_key: str | None = None


class Settings:
    """Application settings loaded from environment variables."""

    # DeepSeek (OpenAI-compatible endpoint)
    DEEPSEEK_BASE_URL: str = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com")
    DEEPSEEK_MODEL: str = os.getenv("DEEPSEEK_MODEL", "deepseek-chat")
    DEEPSEEK_SYSTEM_PROMPT: str = "You are a helpful assistant."

    # OpenAI
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o")
    OPENAI_SYSTEM_PROMPT: str = "You are a coding assistant that talks like a pirate"

    # API settings
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8787"))

    def credentials(self) -> ProviderCredentials:
        """
        Read provider API keys from the environment.

        Keys are read on every call so each request sees the current
        process-wide values. Nothing here writes them back.
        """
        return ProviderCredentials(
            deepseek_api_key=os.getenv("DEEPSEEK_API_KEY") or None,
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        )

    def validate(self) -> list[str]:
        """Validate provider settings. Returns list of missing keys."""
        creds = self.credentials()
        missing = []
        if not creds.deepseek_api_key:
            missing.append("DEEPSEEK_API_KEY")
        if not creds.openai_api_key:
            missing.append("OPENAI_API_KEY")
        return missing


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_credentials() -> ProviderCredentials:
    """FastAPI dependency: provider credentials for the current request."""
    return get_settings().credentials()

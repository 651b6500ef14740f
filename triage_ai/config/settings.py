from typing import Optional

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8001
    debug: bool = False

    # LLM Provider Selection
    llm_provider: str = "openai"

    # OpenAI Configuration (any OpenAI-compatible endpoint via base_url)
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.0
    openai_max_tokens: int = 256

    # Timeouts
    llm_timeout_seconds: int = 30

    # Use the provider's native JSON-schema output instead of JSON mode + extraction
    llm_native_structured_output: bool = True

    # Logging
    log_level: str = "INFO"

    # Classification rate limit (token bucket, process-wide)
    # Long-run average of one classification every 2 seconds, bursts up to 100
    rate_limit_token_limit: int = 100
    rate_limit_tokens_per_period: int = 5
    rate_limit_replenishment_period_seconds: float = 10.0
    rate_limit_auto_replenishment: bool = True

    @field_validator("llm_provider")
    @classmethod
    def normalize_provider(cls, v: str) -> str:
        return v.strip().lower()

    model_config = ConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()

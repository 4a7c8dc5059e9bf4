"""
Completion model configuration settings.

Model identifier and sampling parameters for the chat completion provider.

Dependencies: pydantic, pydantic_settings
System role: LLM configuration for the completion gateway
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CompletionSettings(BaseSettings):
    """OpenAI chat completion settings."""

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="OpenAI API key (falls back to the client library's own lookup)",
    )
    model: str = Field(
        default="gpt-4o-mini",
        description="Chat model identifier",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    max_tokens: int = Field(
        default=400,
        gt=0,
        description="Maximum tokens in the generated reply",
    )
    timeout_seconds: float | None = Field(
        default=None,
        description="Request timeout; None keeps the client library default",
    )

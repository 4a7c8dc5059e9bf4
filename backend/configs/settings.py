"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from backend.configs.base import BaseSettings
from backend.configs.completion import CompletionSettings
from backend.configs.document_service import DocumentServiceSettings
from backend.configs.observability import ObservabilitySettings
from backend.configs.prompt import PromptSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    document_service: DocumentServiceSettings = Field(default_factory=DocumentServiceSettings)
    completion: CompletionSettings = Field(default_factory=CompletionSettings)
    prompt: PromptSettings = Field(default_factory=PromptSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()

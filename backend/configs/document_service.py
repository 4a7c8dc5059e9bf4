"""
Document service configuration settings.

Connection settings for the external document-management backend that
serves the per-user document index and document records.

Dependencies: pydantic, pydantic_settings
System role: Upstream context service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentServiceSettings(BaseSettings):
    """Settings for the document context endpoint."""

    model_config = SettingsConfigDict(
        env_prefix="DOCUMENT_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the document-management backend",
    )
    context_path: str = Field(
        default="/api/ai/contexto/",
        description="Path of the context endpoint returning index text and documents",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Upper bound on the wait for the context endpoint",
    )
    fallback_url_template: str = Field(
        default="#doc-{id}",
        description="Link target used when a cited document has no URL; {id} is replaced",
    )

"""
Prompt policy configuration settings.

Points at the versioned policy document that defines the assistant's
system preamble.

Dependencies: pydantic, pydantic_settings
System role: Prompt policy location
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_POLICY_PATH = (
    Path(__file__).resolve().parent.parent / "prompts" / "workspace_assistant.json"
)


class PromptSettings(BaseSettings):
    """Prompt policy settings."""

    model_config = SettingsConfigDict(
        env_prefix="PROMPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    policy_path: Path = Field(
        default=DEFAULT_POLICY_PATH,
        description="JSON file holding the assistant policy preamble",
    )
    registry_name: str = Field(
        default="workspace-assistant",
        description="Prompt name used when publishing the policy to Langfuse",
    )

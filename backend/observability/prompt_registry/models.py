"""
Pydantic models for prompt registry configuration.

Defines the model configuration tracked alongside a published prompt.

Dependencies: pydantic
System role: Configuration validation for prompt-model pairs
"""

from typing import Any

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """
    LLM configuration tracked with a prompt version.

    Attributes:
        model: Completion model identifier (e.g., "gpt-4o-mini")
        temperature: Sampling temperature (0.0-2.0)
        max_tokens: Output length ceiling
        policy_version: Revision of the policy document the prompt was rendered from
    """

    model: str = Field(description="LLM model identifier")
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    max_tokens: int | None = Field(
        default=None,
        gt=0,
        description="Maximum tokens in response",
    )
    policy_version: str | None = Field(
        default=None,
        description="Prompt policy revision",
    )

    def to_langfuse_config(self) -> dict[str, Any]:
        """
        Convert to Langfuse config dictionary.

        Returns:
            dict: Configuration dict for Langfuse prompt creation
        """
        config: dict[str, Any] = {"model": self.model}

        if self.temperature is not None:
            config["temperature"] = self.temperature
        if self.max_tokens is not None:
            config["max_tokens"] = self.max_tokens
        if self.policy_version:
            config["policy_version"] = self.policy_version

        return config

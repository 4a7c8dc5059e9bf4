"""
Observability module.

Provides structured logging, correlation ID tracking and prompt policy
version publishing.
"""

from backend.observability.prompt_registry import ModelConfig, PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]

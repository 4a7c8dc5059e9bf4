"""
Langfuse prompt registry module.

Publishes the assistant policy template to Langfuse with the model
configuration it runs under, one prompt version per policy revision.

Dependencies: langfuse, langchain_core, pydantic
System role: Prompt version tracking
"""

from backend.observability.prompt_registry.models import ModelConfig
from backend.observability.prompt_registry.registry import PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]

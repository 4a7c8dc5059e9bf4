"""
Completion result model.

Dependencies: pydantic
System role: Completion gateway output contract
"""

from typing import Any

from pydantic import BaseModel, Field


class CompletionResult(BaseModel):
    """Generated reply and provider usage counters."""

    text: str
    usage: dict[str, Any] = Field(default_factory=dict)

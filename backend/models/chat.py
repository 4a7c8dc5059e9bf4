"""
Chat domain models and schemas.

Request/response schemas for the chat endpoint.

Dependencies: pydantic
System role: Chat API contracts
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.models.citation import DocumentReference


class ConversationTurn(BaseModel):
    """Single prior turn supplied by the client."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    role: Literal["user", "assistant", "system"] = Field(description="Message role")
    content: str = Field(description="Message content")


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    model_config = ConfigDict(extra="ignore")

    mensaje: str = Field(min_length=1, description="New user utterance")
    historial: list[ConversationTurn] = Field(
        default_factory=list,
        description="Prior turns in chronological order",
    )

    @field_validator("historial", mode="before")
    @classmethod
    def _null_history_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    respuesta: str
    documentos: list[DocumentReference]
    usage: dict[str, Any] = Field(default_factory=dict)
    todosDocumentos: list[DocumentReference] = Field(
        default_factory=list,
        description="Every workspace document with its link target",
    )

"""
Citation domain models.

Citation markers parsed from model output and the resolved document
references returned to the client.

Dependencies: pydantic, dataclasses
System role: Citation data structures
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class CitationMarker:
    """A ``[Doc <id>: <name>]`` token found in generated text."""

    id: int
    name: str


class DocumentReference(BaseModel):
    """Document link returned to the client for a citation."""

    id: int = Field(description="Document identifier")
    nombre: str = Field(description="Document name as cited")
    url: str = Field(description="Resolved URL or fallback link target")

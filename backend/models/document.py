"""
Document domain models.

Document records and workspace context as served by the external
document-management backend.

Dependencies: pydantic
System role: Upstream document contracts
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DocumentRecord(BaseModel):
    """Authoritative document record owned by the document service."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(ge=0, description="Stable document identifier")
    nombre: str | None = Field(
        default=None,
        validation_alias=AliasChoices("nombre", "name", "titulo"),
        description="Display name",
    )
    url: str | None = Field(default=None, description="Canonical access URL, if computed")


class WorkspaceContext(BaseModel):
    """Index text and document list for one caller."""

    indice: str = Field(description="Pre-rendered document index text")
    documentos: list[DocumentRecord] = Field(default_factory=list)


class ContextPayload(BaseModel):
    """Raw body of the context endpoint."""

    model_config = ConfigDict(extra="ignore")

    success: bool
    indice: str | None = None
    documentos: list[DocumentRecord] | None = None
    error: str | None = None

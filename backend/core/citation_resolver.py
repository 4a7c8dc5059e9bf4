"""
Citation resolution against authoritative document records.

Maps each parsed marker to a document reference carrying a link target.
Resolution never fails: markers without a matching record, or whose record
has no URL yet, get a deterministic fallback link built from the id.

Dependencies: backend.models
System role: Citation to document link resolution
"""

import logging
from collections.abc import Iterable

from backend.models.citation import CitationMarker, DocumentReference
from backend.models.document import DocumentRecord

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_TEMPLATE = "#doc-{id}"


class DocumentResolver:
    """Resolves citation markers to document references."""

    def __init__(self, fallback_template: str = DEFAULT_FALLBACK_TEMPLATE) -> None:
        """
        Initialize resolver.

        Args:
            fallback_template: Link target for unresolved ids; ``{id}`` is replaced
        """
        self._fallback_template = fallback_template

    def fallback_url(self, document_id: int) -> str:
        """Return the fallback link target for ``document_id``."""
        return self._fallback_template.replace("{id}", str(document_id))

    def resolve(
        self,
        markers: Iterable[CitationMarker],
        documents: Iterable[DocumentRecord],
    ) -> list[DocumentReference]:
        """
        Resolve markers to references, one per marker, in marker order.

        Args:
            markers: Parsed citation markers
            documents: Caller's authoritative document records

        Returns:
            list[DocumentReference]: Same length and order as ``markers``
        """
        by_id: dict[int, DocumentRecord] = {}
        for record in documents:
            by_id.setdefault(record.id, record)

        references: list[DocumentReference] = []
        unresolved = 0
        for marker in markers:
            record = by_id.get(marker.id)
            if record is not None and record.url:
                url = record.url
            else:
                url = self.fallback_url(marker.id)
                unresolved += 1
            references.append(
                DocumentReference(id=marker.id, nombre=marker.name, url=url)
            )

        if unresolved:
            logger.info(
                "Resolved %d citations, %d without a document URL",
                len(references),
                unresolved,
            )
        return references

    def reference_for(self, record: DocumentRecord) -> DocumentReference:
        """Build the reference for a workspace document listing."""
        return DocumentReference(
            id=record.id,
            nombre=record.nombre or f"Documento {record.id}",
            url=record.url or self.fallback_url(record.id),
        )

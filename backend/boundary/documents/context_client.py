"""
Client for the document-management backend's context endpoint.

Fetches the caller's pre-rendered document index and document records in a
single bounded request. Every transport or payload failure collapses into
ContextUnavailableError; a reachable service reporting an empty workspace
raises NoDocumentsError instead.

Dependencies: httpx, pydantic, backend.models
System role: Upstream context retrieval
"""

import logging

import httpx
from pydantic import ValidationError

from backend.core.exceptions import ContextUnavailableError, NoDocumentsError
from backend.models.document import ContextPayload, WorkspaceContext

logger = logging.getLogger(__name__)


class DocumentContextClient:
    """Single-attempt client for the context endpoint."""

    def __init__(
        self,
        base_url: str,
        context_path: str = "/api/ai/contexto/",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize context client.

        Args:
            base_url: Document service base URL
            context_path: Path of the context endpoint
            timeout: Seconds to wait for the whole exchange
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.context_path = "/" + context_path.lstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def context_url(self) -> str:
        """Absolute URL of the context endpoint."""
        return f"{self.base_url}{self.context_path}"

    async def fetch_context(self, credential: str) -> WorkspaceContext:
        """
        Fetch index text and document records for the credential's owner.

        Args:
            credential: Bearer token forwarded unchanged

        Returns:
            WorkspaceContext: Index text and at least one document record

        Raises:
            ContextUnavailableError: Timeout, network error, bad status or payload
            NoDocumentsError: Service reachable but the workspace is empty
        """
        headers = {
            "Authorization": f"Bearer {credential}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self.context_url, headers=headers, json={})
        except httpx.TimeoutException as e:
            logger.warning("Context request timed out after %ss: %s", self.timeout, type(e).__name__)
            raise ContextUnavailableError(
                "El servicio de documentos no respondió a tiempo",
                reason="timeout",
            ) from e
        except httpx.RequestError as e:
            logger.warning("Context request failed: %s: %s", type(e).__name__, e)
            raise ContextUnavailableError(
                "No se pudo conectar con el servicio de documentos",
                reason="network",
            ) from e

        if not response.is_success:
            logger.warning("Context endpoint returned status %d", response.status_code)
            raise ContextUnavailableError(
                f"El servicio de documentos respondió con estado {response.status_code}",
                reason="status",
                status=response.status_code,
            )

        try:
            payload = ContextPayload.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("Context payload rejected: %d validation errors", e.error_count())
            raise ContextUnavailableError(
                "Respuesta inválida del servicio de documentos",
                reason="payload",
            ) from e

        if not payload.success:
            logger.warning("Context endpoint reported failure: %s", payload.error)
            raise ContextUnavailableError(
                payload.error or "El servicio de documentos no pudo generar el contexto",
                reason="upstream",
            )

        if payload.indice is None or payload.documentos is None:
            raise ContextUnavailableError(
                "Respuesta incompleta del servicio de documentos",
                reason="payload",
            )

        if not payload.documentos:
            logger.info("Context fetched: workspace has no documents")
            raise NoDocumentsError()

        logger.info(
            "Context fetched: documents=%d index_len=%d",
            len(payload.documentos),
            len(payload.indice),
        )
        return WorkspaceContext(indice=payload.indice, documentos=payload.documentos)

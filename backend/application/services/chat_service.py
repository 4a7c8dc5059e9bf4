"""
Chat service for workspace document Q&A.

Orchestrates one chat request end to end: input validation, document context
retrieval, prompt assembly, completion, citation parsing and citation
resolution. The service holds no per-conversation state; the client supplies
the full history on every call.

Flow:
    Validating -> FetchingContext -> BuildingPrompt -> Completing
    -> ParsingCitations -> ResolvingReferences -> Responding

Dependencies: pydantic, backend.boundary, backend.core
System role: Chat service orchestration layer
"""

import logging
from typing import Any

from pydantic import ValidationError

from backend.boundary.documents.context_client import DocumentContextClient
from backend.boundary.llm.completion_gateway import CompletionGateway
from backend.core.citation_parser import CitationMarkers
from backend.core.citation_resolver import DocumentResolver
from backend.core.exceptions import InvalidRequestError, MissingCredentialError
from backend.core.prompt_builder import PromptBuilder
from backend.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def parse_bearer_credential(authorization: str | None) -> str | None:
    """
    Extract the token from an ``Authorization`` header value.

    Args:
        authorization: Raw header value

    Returns:
        str | None: Token, or None when absent, blank or under another scheme
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        return token.strip() or None
    if token.strip():
        return None
    return scheme or None


def validate_chat_payload(payload: Any) -> ChatRequest:
    """
    Validate a decoded request body.

    Args:
        payload: Decoded JSON body (any type)

    Returns:
        ChatRequest: Validated request

    Raises:
        InvalidRequestError: If ``mensaje`` is missing, not a non-empty string,
            or ``historial`` is malformed
    """
    if not isinstance(payload, dict):
        raise InvalidRequestError("El cuerpo de la solicitud debe ser un objeto JSON")

    mensaje = payload.get("mensaje")
    if not isinstance(mensaje, str) or not mensaje:
        raise InvalidRequestError(field="mensaje")

    try:
        return ChatRequest.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise InvalidRequestError("Historial inválido", field=field) from e


class ChatService:
    """
    Chat service for workspace Q&A.

    Coordinates the context client, prompt builder, completion gateway and
    citation resolver. Each collaborator is called exactly once per request.
    """

    def __init__(
        self,
        context_client: DocumentContextClient,
        prompt_builder: PromptBuilder,
        completion_gateway: CompletionGateway,
        resolver: DocumentResolver,
    ) -> None:
        """
        Initialize chat service.

        Args:
            context_client: Client for the document context endpoint
            prompt_builder: Builder holding the assistant policy
            completion_gateway: Completion provider wrapper
            resolver: Citation resolver
        """
        self.context_client = context_client
        self.prompt_builder = prompt_builder
        self.completion_gateway = completion_gateway
        self.resolver = resolver

    async def process_chat(
        self,
        payload: Any,
        authorization: str | None,
    ) -> ChatResponse:
        """
        Process one chat request.

        Args:
            payload: Decoded request body ``{mensaje, historial}``
            authorization: ``Authorization`` header value

        Returns:
            ChatResponse: Reply, cited document references, usage and the
                workspace document listing

        Raises:
            InvalidRequestError: Invalid body (checked before the credential)
            MissingCredentialError: No bearer credential
            ContextUnavailableError: Context service unreachable or failing
            NoDocumentsError: Workspace has no documents
            CompletionError: Completion provider failed
        """
        request = validate_chat_payload(payload)

        credential = parse_bearer_credential(authorization)
        if credential is None:
            raise MissingCredentialError()

        logger.info(
            f"{__name__}:process_chat - START message_len={len(request.mensaje)} "
            f"history={len(request.historial)}"
        )

        context = await self.context_client.fetch_context(credential)
        logger.info(f"{__name__}:process_chat - Context OK: documents={len(context.documentos)}")

        messages = self.prompt_builder.build(
            indice=context.indice,
            historial=request.historial,
            mensaje=request.mensaje,
        )

        completion = await self.completion_gateway.complete(messages)

        markers = CitationMarkers(completion.text)
        documentos = self.resolver.resolve(markers, context.documentos)
        logger.info(f"{__name__}:process_chat - END citations={len(documentos)}")

        return ChatResponse(
            respuesta=completion.text,
            documentos=documentos,
            usage=completion.usage,
            todosDocumentos=[
                self.resolver.reference_for(record) for record in context.documentos
            ],
        )

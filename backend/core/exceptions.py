"""
Exception hierarchy for the workspace chat application.

Provides layered exception structure for domain-specific errors.
Client-facing errors carry their HTTP status and retry hint so the
chat boundary can render them without inspecting exception types.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class WorkspaceChatException(Exception):
    """Base exception for all workspace chat application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ChatRequestError(WorkspaceChatException):
    """
    Base class for failures that terminate a chat request.

    Subclasses set the HTTP status, the public error string and, where the
    client should be told whether retrying makes sense, a retry hint.
    """

    status_code: int = 500
    error: str = "Error al procesar la solicitud"
    retry: bool | None = None
    include_details: bool = True

    def to_response(self) -> dict[str, Any]:
        """
        Render the client-facing JSON body.

        Returns:
            dict: ``{"error": ...}`` plus ``details`` and ``retry`` when applicable
        """
        body: dict[str, Any] = {"error": self.error}
        if self.include_details:
            body["details"] = self.message
        if self.retry is not None:
            body["retry"] = self.retry
        return body


class InvalidRequestError(ChatRequestError):
    """Raised when the chat payload is missing or malformed."""

    status_code = 400
    error = "Mensaje inválido"
    include_details = False

    def __init__(
        self,
        message: str = "Mensaje inválido",
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid request error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class MissingCredentialError(ChatRequestError):
    """Raised when the request carries no bearer credential."""

    status_code = 401
    error = "No autenticado"
    include_details = False

    def __init__(self, message: str = "Falta el token de autenticación") -> None:
        super().__init__(message)


class ContextUnavailableError(ChatRequestError):
    """Raised when the document context service cannot provide context."""

    status_code = 503
    error = "Servicio de documentos no disponible"
    retry = True

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize context unavailable error.

        Args:
            message: Error message safe to show to the client
            reason: Failure class (timeout, network, status, payload, upstream)
            status: Upstream HTTP status when one was received
            details: Additional context
        """
        details = details or {}
        if reason:
            details["reason"] = reason
        if status is not None:
            details["status"] = status
        super().__init__(message, details)


class NoDocumentsError(ChatRequestError):
    """Raised when the caller's workspace has no indexed documents."""

    status_code = 404
    error = "No tienes documentos en tu workspace"
    retry = False

    def __init__(
        self,
        message: str = "Sube documentos a tu workspace para poder consultarlos",
    ) -> None:
        super().__init__(message)


class CompletionError(ChatRequestError):
    """Raised when the completion provider fails."""

    status_code = 500

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize completion error.

        Args:
            message: Error message
            model: Model identifier that was called
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class PolicyConfigError(WorkspaceChatException):
    """Raised when the prompt policy document cannot be loaded."""

    def __init__(self, message: str, path: str | None = None) -> None:
        details = {"path": path} if path else None
        super().__init__(message, details)

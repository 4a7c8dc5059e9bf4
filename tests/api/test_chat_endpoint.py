"""
Test suite for chat API endpoint.

Tests POST /chat with FastAPI TestClient over a real ChatService whose
upstream collaborators are mocked. Covers the success body and every error
status.

System role: Verification of chat HTTP API endpoint
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import ClientDisconnect

from backend.api.deps import get_chat_service
from backend.api.routers.chat import chat, router
from backend.api.routers.router_utils import CLIENT_CLOSED_REQUEST
from backend.application.services.chat_service import ChatService
from backend.boundary.documents.context_client import DocumentContextClient
from backend.core.citation_resolver import DocumentResolver
from backend.core.exceptions import (
    CompletionError,
    ContextUnavailableError,
    NoDocumentsError,
)
from backend.core.prompt_builder import PromptBuilder


@pytest.fixture
def chat_service(
    mock_context_client: MagicMock,
    prompt_builder: PromptBuilder,
    mock_completion_gateway: MagicMock,
    resolver: DocumentResolver,
) -> ChatService:
    """Provide ChatService with mocked upstream collaborators."""
    return ChatService(
        context_client=mock_context_client,
        prompt_builder=prompt_builder,
        completion_gateway=mock_completion_gateway,
        resolver=resolver,
    )


@pytest.fixture
def app(chat_service: ChatService) -> FastAPI:
    """Create FastAPI test application with chat router."""
    app = FastAPI()
    app.include_router(router, prefix="/api")
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def auth_headers(credential: str) -> dict[str, str]:
    """Authorization header for a signed-in caller."""
    return {"Authorization": f"Bearer {credential}"}


class TestChatEndpointSuccess:
    """Test suite for successful chat requests."""

    def test_chat_should_return_reply_and_references(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test a valid request returns reply, citations, usage and document listing."""
        # Act
        response = client.post(
            "/api/chat",
            json={"mensaje": "¿Tengo testamentos?", "historial": []},
            headers=auth_headers,
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["respuesta"] == "Puedes usar [Doc 7: Testamento] para la sucesión."
        assert body["documentos"] == [{"id": 7, "nombre": "Testamento", "url": "https://x/7"}]
        assert body["usage"] == {"prompt_tokens": 120, "completion_tokens": 18, "total_tokens": 138}
        assert len(body["todosDocumentos"]) == 3

    def test_chat_should_accept_history(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        mock_completion_gateway: MagicMock,
    ) -> None:
        """Test history turns reach the completion call."""
        # Act
        response = client.post(
            "/api/chat",
            json={
                "mensaje": "¿Y el otro?",
                "historial": [{"role": "user", "content": "Hola"}, {"role": "assistant", "content": "Hola"}],
            },
            headers=auth_headers,
        )

        # Assert
        assert response.status_code == 200
        messages = mock_completion_gateway.complete.await_args.args[0]
        assert len(messages) == 4


class TestChatEndpointClientErrors:
    """Test suite for 4xx responses."""

    @pytest.mark.parametrize("with_auth", [True, False])
    def test_chat_should_return_400_without_message(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        mock_context_client: MagicMock,
        with_auth: bool,
    ) -> None:
        """Test a missing message is 400 whether or not a credential is present."""
        # Act
        response = client.post(
            "/api/chat",
            json={"historial": []},
            headers=auth_headers if with_auth else {},
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"error": "Mensaje inválido"}
        mock_context_client.fetch_context.assert_not_awaited()

    def test_chat_should_return_400_for_empty_message(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test an empty message is 400."""
        response = client.post("/api/chat", json={"mensaje": ""}, headers=auth_headers)

        assert response.status_code == 400

    def test_chat_should_return_400_for_non_json_body(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test a body that is not JSON is 400."""
        response = client.post(
            "/api/chat",
            content=b"mensaje=hola",
            headers={**auth_headers, "Content-Type": "text/plain"},
        )

        assert response.status_code == 400

    def test_chat_should_return_401_without_credential(
        self, client: TestClient, mock_context_client: MagicMock
    ) -> None:
        """Test a valid body without Authorization is 401."""
        response = client.post("/api/chat", json={"mensaje": "hola"})

        assert response.status_code == 401
        assert "error" in response.json()
        mock_context_client.fetch_context.assert_not_awaited()

    def test_chat_should_return_404_for_empty_workspace(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        mock_context_client: MagicMock,
    ) -> None:
        """Test an empty workspace is 404 with retry false."""
        # Arrange
        mock_context_client.fetch_context = AsyncMock(side_effect=NoDocumentsError())

        # Act
        response = client.post("/api/chat", json={"mensaje": "hola"}, headers=auth_headers)

        # Assert
        assert response.status_code == 404
        assert response.json()["retry"] is False


class TestChatEndpointServerErrors:
    """Test suite for 5xx responses."""

    def test_chat_should_return_503_when_context_unavailable(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        mock_context_client: MagicMock,
        mock_completion_gateway: MagicMock,
    ) -> None:
        """Test a context outage is 503 with retry true and no completion call."""
        # Arrange
        mock_context_client.fetch_context = AsyncMock(
            side_effect=ContextUnavailableError("sin conexión", reason="network")
        )

        # Act
        response = client.post("/api/chat", json={"mensaje": "hola"}, headers=auth_headers)

        # Assert
        assert response.status_code == 503
        body = response.json()
        assert body["retry"] is True
        assert body["details"] == "sin conexión"
        mock_completion_gateway.complete.assert_not_awaited()

    def test_chat_should_return_500_on_completion_error(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        mock_completion_gateway: MagicMock,
    ) -> None:
        """Test a completion failure is 500 with details."""
        mock_completion_gateway.complete = AsyncMock(
            side_effect=CompletionError("Error del servicio de completado: APIError", model="gpt-4o-mini")
        )

        response = client.post("/api/chat", json={"mensaje": "hola"}, headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["details"] == "Error del servicio de completado: APIError"

    def test_chat_should_return_500_on_unexpected_error(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        mock_context_client: MagicMock,
    ) -> None:
        """Test an unexpected exception is reported as a generic 500."""
        mock_context_client.fetch_context = AsyncMock(side_effect=KeyError("boom"))

        response = client.post("/api/chat", json={"mensaje": "hola"}, headers=auth_headers)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Error al procesar la solicitud"
        assert "boom" in body["details"]


class TestChatEndpointCredentials:
    """Test suite for Authorization header handling."""

    def test_chat_should_return_401_for_non_bearer_scheme(
        self, client: TestClient, mock_context_client: MagicMock
    ) -> None:
        """Test a Basic credential is treated as missing and never forwarded."""
        # Act
        response = client.post(
            "/api/chat",
            json={"mensaje": "hola"},
            headers={"Authorization": "Basic dXNlcjpwYXNz"},
        )

        # Assert
        assert response.status_code == 401
        assert "retry" not in response.json()
        mock_context_client.fetch_context.assert_not_awaited()


class TestChatEndpointContextTimeout:
    """Test suite for a context timeout through the real client."""

    def test_chat_should_return_503_retry_when_context_times_out(
        self,
        prompt_builder: PromptBuilder,
        mock_completion_gateway: MagicMock,
        resolver: DocumentResolver,
        auth_headers: dict[str, str],
    ) -> None:
        """Test an upstream timeout becomes 503 with retry true."""
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        service = ChatService(
            context_client=DocumentContextClient(
                base_url="http://docs.test",
                timeout=1.0,
                transport=httpx.MockTransport(handler),
            ),
            prompt_builder=prompt_builder,
            completion_gateway=mock_completion_gateway,
            resolver=resolver,
        )
        app = FastAPI()
        app.include_router(router, prefix="/api")
        app.dependency_overrides[get_chat_service] = lambda: service

        # Act
        response = TestClient(app).post("/api/chat", json={"mensaje": "hola"}, headers=auth_headers)

        # Assert
        assert response.status_code == 503
        assert response.json()["retry"] is True
        mock_completion_gateway.complete.assert_not_awaited()


class TestChatEndpointBodyDisconnect:
    """Test suite for clients leaving while the body is read."""

    @pytest.mark.asyncio
    async def test_chat_should_return_499_when_body_read_disconnects(self) -> None:
        """Test a disconnect during body read ends the request without calling the service."""
        # Arrange
        request = MagicMock()
        request.json = AsyncMock(side_effect=ClientDisconnect())
        service = MagicMock(spec=ChatService)

        # Act
        response = await chat(request=request, authorization="Bearer t", chat_service=service)

        # Assert
        assert response.status_code == CLIENT_CLOSED_REQUEST
        service.process_chat.assert_not_called()

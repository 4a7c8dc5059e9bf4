"""
Shared test fixtures and configuration for entire test suite.

Provides: document records, workspace context, prompt policy and builder,
mocked collaborators for the chat pipeline
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from backend.boundary.documents.context_client import DocumentContextClient
from backend.boundary.llm.completion_gateway import CompletionGateway
from backend.configs.prompt import DEFAULT_POLICY_PATH
from backend.configs.prompt_policy import PromptPolicy, load_prompt_policy
from backend.core.citation_resolver import DocumentResolver
from backend.core.prompt_builder import PromptBuilder
from backend.models.completion import CompletionResult
from backend.models.document import DocumentRecord, WorkspaceContext

SAMPLE_INDEX = """
ID 5: Poder_Judicial_Marcos_Gonzales.docx
Tipo: Poder
Resumen: Poder judicial amplio para representación en procesos.
Keywords: poder, judicial, representación

ID 7: Testamento_Abierto.docx
Tipo: Testamento
Resumen: Testamento abierto con disposiciones de bienes.
Keywords: testamento, herederos, legados

ID 12: Contrato_Arrendamiento.docx
Tipo: Contrato
Resumen: Contrato de arrendamiento de inmueble.
Keywords: arrendamiento, alquiler, renta
"""


@pytest.fixture
def sample_documents() -> list[DocumentRecord]:
    """Document records as returned by the document service."""
    return [
        DocumentRecord(id=5, nombre="Poder judicial Marcos Gonzales", url="https://docs.example/5"),
        DocumentRecord(id=7, nombre="Testamento", url="https://x/7"),
        DocumentRecord(id=12, nombre="Contrato", url=None),
    ]


@pytest.fixture
def sample_context(sample_documents: list[DocumentRecord]) -> WorkspaceContext:
    """Workspace context with index text and three documents."""
    return WorkspaceContext(indice=SAMPLE_INDEX, documentos=sample_documents)


@pytest.fixture
def policy() -> PromptPolicy:
    """Packaged assistant policy."""
    return load_prompt_policy(DEFAULT_POLICY_PATH)


@pytest.fixture
def prompt_builder(policy: PromptPolicy) -> PromptBuilder:
    """Prompt builder over the packaged policy."""
    return PromptBuilder(policy)


@pytest.fixture
def resolver() -> DocumentResolver:
    """Resolver with the default fallback template."""
    return DocumentResolver()


@pytest.fixture
def mock_context_client(sample_context: WorkspaceContext) -> MagicMock:
    """
    Create mock DocumentContextClient.

    Returns:
        MagicMock: Client whose fetch_context returns sample_context
    """
    client = MagicMock(spec=DocumentContextClient)
    client.fetch_context = AsyncMock(return_value=sample_context)
    return client


@pytest.fixture
def mock_completion_gateway() -> MagicMock:
    """
    Create mock CompletionGateway.

    Returns:
        MagicMock: Gateway whose complete returns a reply citing document 7
    """
    gateway = MagicMock(spec=CompletionGateway)
    gateway.complete = AsyncMock(return_value=CompletionResult(
        text="Puedes usar [Doc 7: Testamento] para la sucesión.",
        usage={"prompt_tokens": 120, "completion_tokens": 18, "total_tokens": 138},
    ))
    return gateway


@pytest.fixture
def credential() -> str:
    """Bearer token used in requests."""
    return "test-jwt-token"

"""
Dependency injection container.

Factory functions for FastAPI dependencies. Collaborators are stateless and
built once from settings; a ChatService is assembled per request.

Dependencies: backend.configs, backend.application, backend.boundary, backend.core
System role: DI container for service injection
"""

from backend.application.services import ChatService
from backend.boundary.documents.context_client import DocumentContextClient
from backend.boundary.llm.completion_gateway import CompletionGateway
from backend.configs import Settings, get_settings
from backend.configs.prompt_policy import PromptPolicy, load_prompt_policy
from backend.core.citation_resolver import DocumentResolver
from backend.core.prompt_builder import PromptBuilder


class ServiceCache:
    """Container for cached collaborator instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._policy = None
        self._prompt_builder = None
        self._context_client = None
        self._completion_gateway = None
        self._resolver = None

    @property
    def settings(self) -> Settings:
        """Get settings, defaulting to the process-wide singleton."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def policy(self) -> PromptPolicy:
        """Get the loaded prompt policy."""
        if self._policy is None:
            self._policy = load_prompt_policy(self.settings.prompt.policy_path)
        return self._policy

    @property
    def prompt_builder(self) -> PromptBuilder:
        """Get cached prompt builder."""
        if self._prompt_builder is None:
            self._prompt_builder = PromptBuilder(self.policy)
        return self._prompt_builder

    @property
    def context_client(self) -> DocumentContextClient:
        """Get cached document context client."""
        if self._context_client is None:
            doc_settings = self.settings.document_service
            self._context_client = DocumentContextClient(
                base_url=doc_settings.base_url,
                context_path=doc_settings.context_path,
                timeout=doc_settings.timeout_seconds,
            )
        return self._context_client

    @property
    def completion_gateway(self) -> CompletionGateway:
        """Get cached completion gateway."""
        if self._completion_gateway is None:
            completion = self.settings.completion
            self._completion_gateway = CompletionGateway(
                model_id=completion.model,
                temperature=completion.temperature,
                max_tokens=completion.max_tokens,
                api_key=completion.api_key,
                timeout=completion.timeout_seconds,
            )
        return self._completion_gateway

    @property
    def resolver(self) -> DocumentResolver:
        """Get cached citation resolver."""
        if self._resolver is None:
            self._resolver = DocumentResolver(
                fallback_template=self.settings.document_service.fallback_url_template,
            )
        return self._resolver

    def clear(self) -> None:
        """Clear all cached instances."""
        self._policy = None
        self._prompt_builder = None
        self._context_client = None
        self._completion_gateway = None
        self._resolver = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_chat_service() -> ChatService:
    """
    Get chat service instance.

    Returns:
        ChatService: Chat service wired to the cached collaborators
    """
    cache = get_service_cache()
    return ChatService(
        context_client=cache.context_client,
        prompt_builder=cache.prompt_builder,
        completion_gateway=cache.completion_gateway,
        resolver=cache.resolver,
    )

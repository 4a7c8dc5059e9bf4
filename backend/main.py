"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, backend.api, backend.observability, backend.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api import api_router
from backend.api.deps import get_service_cache
from backend.configs import get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from backend.observability.prompt_registry import ModelConfig, PromptRegistry

logger = logging.getLogger(__name__)


def publish_prompt_policy() -> None:
    """Publish the active policy template and model parameters to Langfuse."""
    settings = get_settings()
    cache = get_service_cache()
    try:
        registry = PromptRegistry(settings.observability)
        if not registry.is_enabled:
            return
        registry.publish(
            name=settings.prompt.registry_name,
            template=cache.prompt_builder.template,
            config=ModelConfig(
                model=settings.completion.model,
                temperature=settings.completion.temperature,
                max_tokens=settings.completion.max_tokens,
                policy_version=cache.policy.version,
            ),
            labels=[settings.environment],
        )
    except Exception as e:
        logger.warning("Prompt policy publish failed: %s: %s", type(e).__name__, e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, loads the prompt policy (failing startup if it is
    invalid) and pre-builds the stateless collaborators.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    try:
        policy = cache.policy
        _ = cache.prompt_builder
        _ = cache.context_client
        _ = cache.completion_gateway
        _ = cache.resolver
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    logger.info(
        "Application startup complete: policy=%s model=%s context_url=%s",
        policy.version,
        settings.completion.model,
        cache.context_client.context_url,
    )

    publish_prompt_policy()

    yield

    # Shutdown
    cache.clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Workspace Documents Chat API",
        description="Chat assistant over a notary's legal document workspace",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Added first = innermost; correlation wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=8082,
        reload=get_settings().debug,
    )

"""
Langfuse prompt registry for policy version tracking.

Publishes the chat template rendered from the current prompt policy, with
its model configuration, so each behavioural revision of the assistant is
recorded in Langfuse.

Dependencies: langfuse, backend.configs, backend.observability.prompt_registry
System role: Prompt version publishing
"""

import logging
from typing import Any

from langchain_core.prompts import ChatPromptTemplate
from langfuse import Langfuse

from backend.configs.observability import ObservabilitySettings
from backend.observability.prompt_registry.converter import convert_chat_template
from backend.observability.prompt_registry.models import ModelConfig

logger = logging.getLogger(__name__)


class PromptRegistry:
    """
    Langfuse-backed prompt registry.

    Inactive when tracing is disabled or keys are missing; every call is then
    a no-op returning None.

    Example:
        >>> registry = PromptRegistry(settings.observability)
        >>> registry.publish(
        ...     name="workspace-assistant",
        ...     template=builder.template,
        ...     config=ModelConfig(model="gpt-4o-mini", policy_version="1.2.0"),
        ... )
    """

    def __init__(self, settings: ObservabilitySettings) -> None:
        """
        Initialize Langfuse client from settings.

        Args:
            settings: Observability settings
        """
        self._client: Langfuse | None = None

        if not settings.enable_tracing:
            logger.info("Langfuse tracing disabled, prompt registry inactive")
            return

        if not settings.public_key or not settings.secret_key:
            logger.info("Langfuse keys not configured, prompt registry inactive")
            return

        self._client = Langfuse(
            public_key=settings.public_key,
            secret_key=settings.secret_key,
            host=settings.host,
        )
        logger.info("Prompt registry initialized: host=%s", settings.host)

    @property
    def is_enabled(self) -> bool:
        """Check if registry is active."""
        return self._client is not None

    def publish(
        self,
        name: str,
        template: ChatPromptTemplate,
        config: ModelConfig,
        labels: list[str] | None = None,
    ) -> Any:
        """
        Publish a chat template as a new Langfuse prompt version.

        Args:
            name: Prompt identifier
            template: Chat template rendered from the policy
            config: Model configuration stored with the prompt
            labels: Optional labels; a ``policy-<version>`` label is always added

        Returns:
            The created Langfuse prompt, or None when inactive
        """
        if self._client is None:
            logger.debug("Prompt registry disabled, skipping publish: name=%s", name)
            return None

        labels = list(labels or [])
        if config.policy_version:
            policy_label = f"policy-{config.policy_version}"
            if policy_label not in labels:
                labels.append(policy_label)

        prompt = self._client.create_prompt(
            name=name,
            type="chat",
            prompt=convert_chat_template(template),
            config=config.to_langfuse_config(),
            labels=labels,
        )
        logger.info(
            "Published prompt: name=%s version=%s labels=%s",
            name, getattr(prompt, "version", None), labels,
        )
        return prompt

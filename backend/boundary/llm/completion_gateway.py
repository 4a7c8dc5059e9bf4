"""
Chat completion gateway.

Sends an assembled message sequence to the completion provider once and
returns the generated text with the provider's usage counters. Provider
failures surface as CompletionError; nothing is retried here.

Dependencies: langchain_openai, langchain_core, backend.models
System role: LLM invocation boundary
"""

import logging
from collections.abc import Sequence
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI

from backend.core.exceptions import CompletionError
from backend.models.completion import CompletionResult

logger = logging.getLogger(__name__)

EMPTY_COMPLETION_PLACEHOLDER = "No pude generar una respuesta."


def _content_to_text(content: Any) -> str:
    """Flatten string or content-block message content to plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content) if content is not None else ""


def _extract_usage(message: BaseMessage) -> dict[str, Any]:
    """
    Read usage counters from a model reply.

    Prefers the provider's raw ``token_usage`` block so the client sees the
    same shape the provider reports; falls back to LangChain's normalized
    ``usage_metadata``.
    """
    metadata = getattr(message, "response_metadata", None) or {}
    usage = metadata.get("token_usage") or metadata.get("usage")
    if usage:
        return dict(usage)

    usage_metadata = getattr(message, "usage_metadata", None)
    if usage_metadata:
        return {
            "prompt_tokens": usage_metadata.get("input_tokens", 0),
            "completion_tokens": usage_metadata.get("output_tokens", 0),
            "total_tokens": usage_metadata.get("total_tokens", 0),
        }
    return {}


class CompletionGateway:
    """Single-call wrapper around a LangChain chat model."""

    def __init__(
        self,
        model: BaseChatModel | None = None,
        model_id: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: int = 400,
        api_key: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize completion gateway.

        Args:
            model: Prebuilt chat model; when None an OpenAI model is created on first use
            model_id: OpenAI model identifier
            temperature: Sampling temperature
            max_tokens: Output length ceiling
            api_key: OpenAI API key; None lets the client read OPENAI_API_KEY
            timeout: Request timeout; None keeps the client default
        """
        self._model = model
        self.model_id = model_id
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._api_key = api_key
        self._timeout = timeout

    def _get_model(self) -> BaseChatModel:
        if self._model is None:
            kwargs: dict[str, Any] = {
                "model": self.model_id,
                "temperature": self.temperature,
                "max_tokens": self.max_tokens,
                "max_retries": 0,
            }
            if self._api_key:
                kwargs["api_key"] = self._api_key
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._model = ChatOpenAI(**kwargs)
        return self._model

    async def complete(self, messages: Sequence[BaseMessage]) -> CompletionResult:
        """
        Generate a reply for ``messages``.

        Args:
            messages: Prompt built by PromptBuilder

        Returns:
            CompletionResult: Generated text (placeholder when empty) and usage

        Raises:
            CompletionError: If the provider call fails
        """
        try:
            model = self._get_model()
            reply = await model.ainvoke(list(messages))
        except Exception as e:
            logger.error("Completion failed: model=%s %s: %s", self.model_id, type(e).__name__, e)
            raise CompletionError(
                f"Error del servicio de completado: {type(e).__name__}",
                model=self.model_id,
            ) from e

        text = _content_to_text(reply.content)
        if not text.strip():
            logger.warning("Completion returned empty content: model=%s", self.model_id)
            text = EMPTY_COMPLETION_PLACEHOLDER

        usage = _extract_usage(reply)
        logger.info(
            "Completion finished: model=%s reply_len=%d total_tokens=%s",
            self.model_id,
            len(text),
            usage.get("total_tokens"),
        )
        return CompletionResult(text=text, usage=usage)

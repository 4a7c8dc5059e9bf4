"""
Prompt assembly for the workspace assistant.

Builds the message sequence sent to the completion provider: the policy
preamble with the document index as a system message, the client-supplied
history in its original order, then the new user utterance.

History is forwarded in full; no token budgeting is applied.

Dependencies: langchain_core, backend.configs.prompt_policy
System role: Prompt template for assistant behavior
"""

import logging
from collections.abc import Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from backend.configs.prompt_policy import INDEX_SLOT, PromptPolicy
from backend.models.chat import ConversationTurn

logger = logging.getLogger(__name__)

_TURN_MESSAGE_TYPES: dict[str, type[BaseMessage]] = {
    "user": HumanMessage,
    "assistant": AIMessage,
    "system": SystemMessage,
}


def turn_to_message(turn: ConversationTurn) -> BaseMessage:
    """Convert a client turn to the LangChain message for its role."""
    return _TURN_MESSAGE_TYPES[turn.role](content=turn.content)


class PromptBuilder:
    """Assembles prompts from a fixed policy."""

    def __init__(self, policy: PromptPolicy) -> None:
        """
        Initialize prompt builder.

        Args:
            policy: Loaded assistant policy
        """
        self._policy = policy
        self._template = ChatPromptTemplate.from_messages([
            ("system", policy.system_template()),
            MessagesPlaceholder("historial", optional=True),
            ("human", "{mensaje}"),
        ])

    @property
    def policy(self) -> PromptPolicy:
        """Policy the builder renders."""
        return self._policy

    @property
    def template(self) -> ChatPromptTemplate:
        """Underlying chat template, as published to the prompt registry."""
        return self._template

    def build(
        self,
        indice: str,
        historial: Sequence[ConversationTurn],
        mensaje: str,
    ) -> list[BaseMessage]:
        """
        Build the message sequence for one request.

        Args:
            indice: Document index text, embedded verbatim
            historial: Prior turns in chronological order
            mensaje: New user utterance

        Returns:
            list[BaseMessage]: System preamble, history, then the new message
        """
        messages = self._template.invoke({
            INDEX_SLOT: indice,
            "historial": [turn_to_message(turn) for turn in historial],
            "mensaje": mensaje,
        }).to_messages()

        logger.debug(
            "Built prompt: policy=%s messages=%d history=%d",
            self._policy.version,
            len(messages),
            len(historial),
        )
        return messages

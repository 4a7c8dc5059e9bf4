"""
LangChain to Langfuse prompt converter.

Converts a ChatPromptTemplate (including history placeholders) to the
Langfuse chat prompt format.

Dependencies: langchain_core.prompts
System role: Template format conversion for prompt registry
"""

import re
from typing import Any

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder
from langchain_core.prompts.chat import (
    AIMessagePromptTemplate,
    HumanMessagePromptTemplate,
    SystemMessagePromptTemplate,
)

_ROLES: tuple[tuple[type, str], ...] = (
    (SystemMessagePromptTemplate, "system"),
    (HumanMessagePromptTemplate, "user"),
    (AIMessagePromptTemplate, "assistant"),
)


def convert_variables(content: str) -> str:
    """
    Convert LangChain template syntax to Langfuse syntax.

    ``{slot}`` becomes ``{{slot}}`` and escaped ``{{``/``}}`` become literal
    single braces.

    Args:
        content: LangChain f-string template

    Returns:
        str: Langfuse template
    """
    slot = re.compile(r"(?<!\{)\{([A-Za-z_][A-Za-z0-9_]*)\}(?!\})")
    marked = slot.sub(lambda m: "\x00" + m.group(1) + "\x01", content)
    literal = marked.replace("{{", "{").replace("}}", "}")
    return literal.replace("\x00", "{{").replace("\x01", "}}")


def convert_chat_template(template: ChatPromptTemplate) -> list[dict[str, Any]]:
    """
    Convert a ChatPromptTemplate to Langfuse chat messages.

    Args:
        template: LangChain chat template

    Returns:
        list[dict]: Langfuse messages; placeholders become ``{"type": "placeholder"}`` entries

    Raises:
        ValueError: If the template contains an unsupported message type
    """
    messages: list[dict[str, Any]] = []

    for message in template.messages:
        if isinstance(message, MessagesPlaceholder):
            messages.append({"type": "placeholder", "name": message.variable_name})
            continue

        for message_type, role in _ROLES:
            if isinstance(message, message_type):
                content = convert_variables(str(message.prompt.template))
                messages.append({"role": role, "content": content})
                break
        else:
            raise ValueError(f"Unsupported message type: {type(message)}")

    return messages

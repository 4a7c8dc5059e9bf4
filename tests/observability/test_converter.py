"""Tests for LangChain to Langfuse prompt conversion."""

import pytest
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from backend.observability.prompt_registry.converter import (
    convert_chat_template,
    convert_variables,
)


class TestVariableConversion:
    """Tests for convert_variables."""

    def test_single_variable(self) -> None:
        assert convert_variables("Hola {nombre}") == "Hola {{nombre}}"

    def test_multiple_variables(self) -> None:
        assert convert_variables("{a} y {b}") == "{{a}} y {{b}}"

    def test_no_variables(self) -> None:
        assert convert_variables("Texto plano") == "Texto plano"

    def test_escaped_braces_become_literal(self) -> None:
        """Escaped braces are not variables."""
        assert convert_variables("Usa {{llaves}} y {indice}") == "Usa {llaves} y {{indice}}"

    def test_citation_format_untouched(self) -> None:
        assert convert_variables("[Doc ID: nombre]") == "[Doc ID: nombre]"


class TestChatTemplateConversion:
    """Tests for convert_chat_template."""

    def test_simple_chat_template(self) -> None:
        template = ChatPromptTemplate.from_messages([
            ("system", "Índice: {indice}"),
            ("human", "{mensaje}"),
        ])

        assert convert_chat_template(template) == [
            {"role": "system", "content": "Índice: {{indice}}"},
            {"role": "user", "content": "{{mensaje}}"},
        ]

    def test_chat_template_all_roles(self) -> None:
        template = ChatPromptTemplate.from_messages([
            ("system", "s"),
            ("human", "h"),
            ("ai", "a"),
        ])

        roles = [m["role"] for m in convert_chat_template(template)]

        assert roles == ["system", "user", "assistant"]

    def test_history_placeholder(self) -> None:
        """Message placeholders become Langfuse placeholder entries."""
        template = ChatPromptTemplate.from_messages([
            ("system", "s"),
            MessagesPlaceholder("historial", optional=True),
            ("human", "{mensaje}"),
        ])

        assert convert_chat_template(template)[1] == {"type": "placeholder", "name": "historial"}

    def test_policy_template(self, prompt_builder) -> None:
        """The policy template converts with the index as its only system variable."""
        messages = convert_chat_template(prompt_builder.template)

        assert messages[0]["role"] == "system"
        assert "{{indice}}" in messages[0]["content"]
        assert "[Doc ID: nombre]" in messages[0]["content"]
        assert messages[-1] == {"role": "user", "content": "{{mensaje}}"}

    def test_unsupported_message_type(self) -> None:
        template = ChatPromptTemplate.from_messages([("system", "s")])
        template.messages.append(object())

        with pytest.raises(ValueError):
            convert_chat_template(template)

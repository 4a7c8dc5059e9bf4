"""
Assistant policy preamble.

The system preamble is versioned configuration data rather than code: a JSON
document with named slots, validated here and rendered into the system
message template used by the prompt builder.

Dependencies: pydantic
System role: Prompt policy schema and loader
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from backend.core.exceptions import PolicyConfigError

logger = logging.getLogger(__name__)

INDEX_SLOT = "indice"


def _escape(text: str) -> str:
    """Escape braces so policy text is never read as a template slot."""
    return text.replace("{", "{{").replace("}", "}}")


class PromptPolicy(BaseModel):
    """Named slots of the assistant's system preamble."""

    version: str = Field(min_length=1, description="Policy revision identifier")
    persona: str = Field(min_length=1)
    scope: str = Field(min_length=1)
    citation_format: str = Field(min_length=1, description="Literal citation format shown to the model")
    citation_rules: list[str] = Field(default_factory=list)
    refusal_script: str = Field(min_length=1)
    length_ceiling_words: int = Field(gt=0)
    guidance: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)

    def system_template(self) -> str:
        """
        Render the preamble as a template whose only slot is ``{indice}``.

        Returns:
            str: f-string style template for the system message
        """
        lines = [
            _escape(self.persona),
            "",
            "DOCUMENTOS DISPONIBLES:",
            "{" + INDEX_SLOT + "}",
            "",
            "INSTRUCCIONES:",
            f"- {_escape(self.scope)}",
            f"- Si mencionas documentos, usa el formato: {_escape(self.citation_format)}",
        ]
        lines.extend(f"- {_escape(rule)}" for rule in self.citation_rules)
        lines.append(
            f"- Responde de forma CONCISA (máximo {self.length_ceiling_words} palabras)"
        )
        lines.append("- Si te preguntan algo NO relacionado con el workspace, responde:")
        lines.append(f'  "{_escape(self.refusal_script)}"')
        lines.extend(f"- {_escape(item)}" for item in self.guidance)

        if self.examples:
            lines.extend(["", "EJEMPLOS DE CITAS CORRECTAS:"])
            for example in self.examples:
                lines.append("")
                lines.append(_escape(example))

        return "\n".join(lines)


def load_prompt_policy(path: Path | str) -> PromptPolicy:
    """
    Load and validate a policy document.

    Args:
        path: JSON policy file

    Returns:
        PromptPolicy: Validated policy

    Raises:
        PolicyConfigError: If the file is missing or does not match the schema
    """
    policy_path = Path(path)
    try:
        raw = policy_path.read_text(encoding="utf-8")
    except OSError as e:
        raise PolicyConfigError(f"Cannot read prompt policy: {e}", path=str(policy_path)) from e

    try:
        policy = PromptPolicy.model_validate_json(raw)
    except ValidationError as e:
        raise PolicyConfigError(
            f"Invalid prompt policy ({e.error_count()} errors)",
            path=str(policy_path),
        ) from e

    logger.info("Loaded prompt policy: version=%s path=%s", policy.version, policy_path)
    return policy

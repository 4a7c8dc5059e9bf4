"""
Core business logic module.

Contains the exception hierarchy, citation parsing and resolution, and
prompt assembly. All domain rules for the chat pipeline reside here.
"""

from backend.core.exceptions import (
    WorkspaceChatException,
    ChatRequestError,
    InvalidRequestError,
    MissingCredentialError,
    ContextUnavailableError,
    NoDocumentsError,
    CompletionError,
    PolicyConfigError,
)

__all__ = [
    "WorkspaceChatException",
    "ChatRequestError",
    "InvalidRequestError",
    "MissingCredentialError",
    "ContextUnavailableError",
    "NoDocumentsError",
    "CompletionError",
    "PolicyConfigError",
]

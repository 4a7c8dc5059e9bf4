"""
Completion provider boundary modules.

Exports: CompletionGateway
"""

from .completion_gateway import CompletionGateway, EMPTY_COMPLETION_PLACEHOLDER

__all__ = ["CompletionGateway", "EMPTY_COMPLETION_PLACEHOLDER"]

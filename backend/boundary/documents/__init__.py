"""
Document service boundary modules.

Exports: DocumentContextClient
"""

from .context_client import DocumentContextClient

__all__ = ["DocumentContextClient"]

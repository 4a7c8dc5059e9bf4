"""
Router utility functions.

Contains helpers extracted from router endpoints to keep them clean.
"""

from backend.api.routers.router_utils.disconnect import (
    CLIENT_CLOSED_REQUEST,
    ClientDisconnectedError,
    run_until_disconnected,
)

__all__ = [
    "CLIENT_CLOSED_REQUEST",
    "ClientDisconnectedError",
    "run_until_disconnected",
]

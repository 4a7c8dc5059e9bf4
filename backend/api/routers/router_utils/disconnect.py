"""
Client disconnect handling for request handlers.

Runs a handler coroutine as a task and cancels it as soon as the client goes
away, so in-flight upstream calls are abandoned instead of orphaned.

Dependencies: asyncio, starlette
System role: Request cancellation propagation
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from starlette.requests import Request

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Non-standard status used by nginx for "client closed request"
CLIENT_CLOSED_REQUEST = 499


class ClientDisconnectedError(Exception):
    """Raised when the client disconnects before the handler finishes."""


async def run_until_disconnected(
    request: Request,
    awaitable: Awaitable[T],
    poll_interval: float = 0.25,
) -> T:
    """
    Await ``awaitable`` while watching the client connection.

    Args:
        request: Incoming request whose connection is polled
        awaitable: Handler work to run
        poll_interval: Seconds between disconnect checks

    Returns:
        The awaitable's result

    Raises:
        ClientDisconnectedError: If the client disconnected first; the work is cancelled
    """
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info("Client disconnected, cancelling %s %s", request.method, request.url.path)
                task.cancel()
                raise ClientDisconnectedError()
    finally:
        if not task.done():
            task.cancel()

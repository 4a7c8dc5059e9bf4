"""Chat API endpoint.

Routes:
- POST /chat - Answer a question about the caller's document workspace

Every failure is returned as a structured JSON error; see ChatRequestError
subclasses for the status and retry hint of each category.

Dependencies: backend.application.services.chat_service
System role: Chat messaging HTTP API
"""

import json
import logging

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse, Response
from starlette.requests import ClientDisconnect

from backend.api.deps import get_chat_service
from backend.api.routers.router_utils import (
    CLIENT_CLOSED_REQUEST,
    ClientDisconnectedError,
    run_until_disconnected,
)
from backend.application.services.chat_service import ChatService
from backend.core.exceptions import ChatRequestError
from backend.models.chat import ChatResponse
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

GENERIC_ERROR = "Error al procesar la solicitud"


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: Request,
    authorization: str | None = Header(default=None),
    chat_service: ChatService = Depends(get_chat_service),
):
    """Answer a workspace question with resolved document citations.

    Flow:
    1. Decode the JSON body (non-JSON bodies are treated as invalid input)
    2. Run ChatService.process_chat, cancelled if the client disconnects
    3. Map domain errors to their status code and JSON body

    Args:
        request: Raw request (body decoded here so validation yields 400, not 422)
        authorization: ``Authorization: Bearer <token>`` header
        chat_service: Injected ChatService

    Returns:
        ChatResponse on success, JSONResponse with ``error`` otherwise
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None
    except ClientDisconnect:
        logger.info(f"{__name__}:chat - Client disconnected while sending body")
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    try:
        return await run_until_disconnected(
            request,
            chat_service.process_chat(payload=payload, authorization=authorization),
        )
    except ChatRequestError as e:
        logger.warning(
            f"{__name__}:chat - {type(e).__name__} status={e.status_code}: {e}"
        )
        return JSONResponse(status_code=e.status_code, content=e.to_response())
    except ClientDisconnectedError:
        return Response(status_code=CLIENT_CLOSED_REQUEST)
    except Exception as e:
        log_exception_with_context(logger, f"{__name__}:chat - Unhandled error", e)
        return JSONResponse(
            status_code=500,
            content={"error": GENERIC_ERROR, "details": str(e)},
        )

"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import chat_router, health_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(chat_router)

__all__ = ["api_router"]

"""API routers for the status service."""

from fastapi import APIRouter

from .routes import status_router

api_router = APIRouter()
api_router.include_router(status_router, tags=["status"])

__all__ = ["api_router"]

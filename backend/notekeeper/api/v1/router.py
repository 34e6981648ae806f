from __future__ import annotations

from fastapi import APIRouter

from .endpoints import health, metadata, notes

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(notes.router, prefix="/notes", tags=["notes"])
api_router.include_router(metadata.router, prefix="/metadata", tags=["metadata"])

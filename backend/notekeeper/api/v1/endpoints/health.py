from __future__ import annotations

import asyncio

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from notekeeper import __version__
from notekeeper.config import settings
from notekeeper.db.base import create_request_supabase_client
from notekeeper.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "notekeeper-api",
            "version": __version__,
        }
    )


@router.get("/ready")
async def readiness_check():
    """Readiness check endpoint."""
    db_status = "connected"
    try:
        client = create_request_supabase_client()
        await asyncio.to_thread(
            lambda: client.table(settings.notes_table).select("id").limit(1).execute()
        )
    except Exception as e:
        logger.warning("Readiness check could not reach the database", extra={"error": str(e)})
        db_status = f"error: {str(e)}"

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "database": db_status,
            "api_prefix": settings.api_prefix,
        }
    )

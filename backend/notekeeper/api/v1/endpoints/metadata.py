from __future__ import annotations

from fastapi import APIRouter

from notekeeper.core.models.note import Tag

router = APIRouter()


@router.get("/tags", response_model=list[str])
async def list_tags() -> list[str]:
    """Return all supported tags for client-side filtering."""
    return [t.value for t in Tag]

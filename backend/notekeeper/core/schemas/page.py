from __future__ import annotations

from pydantic import Field

from notekeeper.core.models.base import AppBaseModel
from notekeeper.core.models.note import NoteSummary  # noqa: TCH001


class NotePage(AppBaseModel):
    """One newest-first slice of a user's notes with pagination metadata."""

    items: list[NoteSummary] = Field(default_factory=list)
    page: int = Field(..., ge=0)
    size: int = Field(..., ge=1)
    total_items: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)

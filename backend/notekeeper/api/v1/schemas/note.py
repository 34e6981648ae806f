from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from uuid import UUID  # noqa: TCH003

from pydantic import Field, field_validator

from notekeeper.core.models.base import AppBaseModel
from notekeeper.core.models.note import Tag, normalize_tags  # noqa: TCH001


class NoteRequest(AppBaseModel):
    """Payload for creating a note or replacing one wholesale."""

    title: str = Field(..., max_length=255, description="Note title")
    text: str = Field(..., description="Note body")
    tags: list[Tag] | None = Field(default=None, description="Tags for categorization")

    @field_validator("title", "text")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[Tag] | None) -> list[Tag]:
        return normalize_tags(v)


class NoteRead(AppBaseModel):
    id: UUID
    user_id: UUID
    title: str
    text: str
    tags: list[Tag]
    created_at: datetime
    updated_at: datetime | None


class NoteListItem(AppBaseModel):
    id: UUID
    user_id: UUID
    title: str
    tags: list[Tag]
    created_at: datetime
    updated_at: datetime | None


class NotesPageRead(AppBaseModel):
    """Page of list items; the counters are emitted as camelCase keys."""

    items: list[NoteListItem]
    page: int
    size: int
    total_items: int = Field(..., serialization_alias="totalItems")
    total_pages: int = Field(..., serialization_alias="totalPages")


class NoteTextRead(AppBaseModel):
    id: UUID
    user_id: UUID
    text: str


class NoteStatsRead(AppBaseModel):
    """Word frequencies, most frequent first; equal counts in alphabetical order."""

    stats: dict[str, int]

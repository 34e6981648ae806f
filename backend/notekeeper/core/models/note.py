from __future__ import annotations

from enum import Enum
from uuid import UUID, uuid4

from pydantic import Field, field_validator

from .base import TimestampedModel


class Tag(str, Enum):
    """Closed set of categories a note can be filed under."""

    BUSINESS = "BUSINESS"
    PERSONAL = "PERSONAL"
    IMPORTANT = "IMPORTANT"


def normalize_tags(tags: list[Tag] | None) -> list[Tag]:
    """Deduplicate tags and put them in declaration order.

    A missing tag collection becomes an empty list so every response shape
    carries ``tags: []`` instead of ``null``.
    """
    if not tags:
        return []
    present = {Tag(t) for t in tags}
    return [t for t in Tag if t in present]


class Note(TimestampedModel):
    """Note domain model, always owned by exactly one user."""

    id: UUID | None = Field(default=None, description="Assigned by the repository on first save")
    user_id: UUID = Field(..., description="Owner of the note")

    title: str = Field(..., max_length=255, description="Note title")
    text: str = Field(default="", description="Free-form note body")
    tags: list[Tag] = Field(default_factory=list, description="Tags for categorization")

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: list[Tag] | None) -> list[Tag]:
        return normalize_tags(v)

    def without_text(self) -> NoteSummary:
        """Return the list-view projection of this note."""
        return NoteSummary(
            id=self.id,
            user_id=self.user_id,
            title=self.title,
            tags=list(self.tags),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": str(uuid4()),
                    "user_id": str(uuid4()),
                    "title": "Quarterly planning",
                    "text": "Budget review on Monday. Budget sign-off on Friday.",
                    "tags": ["BUSINESS", "IMPORTANT"],
                }
            ]
        }
    }


class NoteSummary(TimestampedModel):
    """Note without its text body, as returned by list views."""

    id: UUID | None
    user_id: UUID
    title: str
    tags: list[Tag] = Field(default_factory=list)

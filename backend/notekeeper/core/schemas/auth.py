from __future__ import annotations

from uuid import UUID  # noqa: TCH003

from notekeeper.core.models.base import AppBaseModel


class AuthUser(AppBaseModel):
    """Authenticated user extracted from the Supabase JWT; owns the notes it touches."""

    id: UUID
    email: str
    role: str | None = None

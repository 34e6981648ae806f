from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from notekeeper.core.models.note import Note, Tag


class NoteRepository(ABC):
    """Abstract repository interface for notes.

    Contract used by services and dependency injection. Every read and write
    is scoped by the owning user's id. Implementations perform I/O and
    therefore expose async methods.
    """

    @abstractmethod
    async def find_one(self, note_id: UUID, user_id: UUID) -> Note | None:  # pragma: no cover - interface only
        """Fetch a note by id and owner, or return None if there is no such pair."""

    @abstractmethod
    async def find_page(
        self,
        user_id: UUID,
        *,
        tag: Tag | None = None,
        page: int,
        size: int,
    ) -> tuple[Sequence[Note], int]:  # pragma: no cover
        """Return one page of the user's notes and the total number of matches.

        Notes are ordered by creation time descending, ties broken by id, and
        optionally restricted to those carrying ``tag``.
        """

    @abstractmethod
    async def save(self, note: Note) -> Note:  # pragma: no cover
        """Persist a note and return the stored entity.

        A note without an id is inserted and receives its id and creation
        time; otherwise the stored row owned by ``note.user_id`` is replaced.
        """

    @abstractmethod
    async def delete_one(self, note_id: UUID, user_id: UUID) -> bool:  # pragma: no cover
        """Delete a note by id and owner. Return True if a row was removed."""

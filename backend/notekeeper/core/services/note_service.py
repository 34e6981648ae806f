from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID

from notekeeper.core.exceptions import NoteNotFoundError
from notekeeper.core.models.note import Note, normalize_tags
from notekeeper.core.services.listing import assemble, validate_page_request
from notekeeper.core.services.word_stats import count_words
from notekeeper.utils.logging import get_logger

if TYPE_CHECKING:
    from notekeeper.api.v1.schemas.note import NoteRequest
    from notekeeper.core.models.note import Tag
    from notekeeper.core.repositories.note_repository import NoteRepository
    from notekeeper.core.schemas.page import NotePage
    from notekeeper.core.services.word_stats import FrequencyTable

logger = get_logger(__name__)


class NoteService:
    """Service for managing notes with user-scoped access.

    Every note-scoped operation looks the note up by (id, user_id) before
    doing anything else, so a foreign note and a missing note fail the same
    way.
    """

    def __init__(self, repo: NoteRepository) -> None:
        self._repo = repo

    async def create_note(self, request: NoteRequest, user_id: UUID) -> Note:
        note = Note(
            user_id=user_id,
            title=request.title,
            text=request.text,
            tags=normalize_tags(request.tags),
        )
        saved = await self._repo.save(note)
        logger.info("Note created", extra={"note_id": str(saved.id), "user_id": str(user_id)})
        return saved

    async def get_note(self, note_id: str | UUID, user_id: UUID) -> Note:
        """Return the note if it exists and belongs to the user.

        Raises:
            NoteNotFoundError: if the id is malformed, unknown, or owned by
                another user.
        """
        try:
            note_uuid = UUID(str(note_id))
        except ValueError as err:
            raise NoteNotFoundError() from err
        note = await self._repo.find_one(note_uuid, user_id)
        if note is None:
            raise NoteNotFoundError()
        return note

    async def get_note_text(self, note_id: str | UUID, user_id: UUID) -> Note:
        return await self.get_note(note_id, user_id)

    async def get_note_stats(self, note_id: str | UUID, user_id: UUID) -> FrequencyTable:
        note = await self.get_note(note_id, user_id)
        return count_words(note.text)

    async def list_notes(
        self,
        user_id: UUID,
        page: int = 0,
        size: int = 10,
        tag: Tag | None = None,
    ) -> NotePage:
        """List the user's notes newest first, optionally only those tagged ``tag``."""
        validate_page_request(page, size)
        items, total = await self._repo.find_page(user_id, tag=tag, page=page, size=size)
        return assemble(items, page, size, total)

    async def update_note(self, note_id: str | UUID, request: NoteRequest, user_id: UUID) -> Note:
        """Replace title, text and tags of a user's note."""
        existing = await self.get_note(note_id, user_id)
        changed = existing.model_copy(
            update={
                "title": request.title,
                "text": request.text,
                "tags": normalize_tags(request.tags),
                "updated_at": datetime.now(UTC),
            }
        )
        saved = await self._repo.save(changed)
        logger.info("Note updated", extra={"note_id": str(saved.id), "user_id": str(user_id)})
        return saved

    async def delete_note(self, note_id: str | UUID, user_id: UUID) -> None:
        note = await self.get_note(note_id, user_id)
        deleted = await self._repo.delete_one(note.id, user_id)
        if not deleted:
            # removed between lookup and delete
            raise NoteNotFoundError()
        logger.info("Note deleted", extra={"note_id": str(note.id), "user_id": str(user_id)})

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from postgrest.exceptions import APIError

from notekeeper.config import settings
from notekeeper.core.models.note import Note
from notekeeper.core.repositories.note_repository import NoteRepository
from notekeeper.core.services.listing import page_bounds
from notekeeper.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from uuid import UUID

    from supabase import Client

    from notekeeper.core.models.note import Tag


class SupabaseNoteRepository(NoteRepository):
    """Supabase implementation of the NoteRepository.

    Uses Supabase's PostgREST client for CRUD. Assumes a `notes` table with
    columns matching the `Note` model fields and `tags` stored as a text array.
    Every query filters on `user_id` so that a foreign note looks exactly like
    a missing one.
    """

    # PostgREST answers 416 with this code when the requested range starts
    # past the last matching row
    RANGE_NOT_SATISFIABLE = "PGRST103"

    def __init__(self, client: Client, table_name: str | None = None) -> None:
        self._client: Client = client
        self._table = table_name or settings.notes_table

    async def find_one(self, note_id: UUID, user_id: UUID) -> Note | None:
        resp = await self._run(
            lambda: self._client.table(self._table)
            .select("*")
            .eq("id", str(note_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_note(items[0])

    async def find_page(
        self,
        user_id: UUID,
        *,
        tag: Tag | None = None,
        page: int,
        size: int,
    ) -> tuple[Sequence[Note], int]:
        start, end = page_bounds(page, size)

        def _query():
            return (
                self._filtered(user_id, tag, "*")
                .order("created_at", desc=True)
                .order("id")
                .range(start, end)
                .execute()
            )

        try:
            resp = await self._run(_query)
        except APIError as err:
            if err.code != self.RANGE_NOT_SATISFIABLE:
                raise
            logger.debug("Page %s is past the last note of user %s", page, user_id)
            return [], await self._count(user_id, tag)

        items = resp.data or []
        total = resp.count if resp.count is not None else len(items)
        return [self._row_to_note(i) for i in items], total

    async def save(self, note: Note) -> Note:
        if note.id is None:
            return await self._insert(note)
        return await self._replace(note)

    async def delete_one(self, note_id: UUID, user_id: UUID) -> bool:
        resp = await self._run(
            lambda: self._client.table(self._table)
            .delete()
            .eq("id", str(note_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        items = resp.data or []
        return len(items) > 0

    async def _insert(self, note: Note) -> Note:
        stored = note.model_copy(update={"id": uuid4(), "created_at": datetime.now(UTC)})
        row = self._note_to_row(stored)
        resp = await self._run(
            lambda: self._client.table(self._table)
            .insert(row)
            .execute()
        )
        data = self._first(resp.data)
        if not data:
            raise RuntimeError("Insert into notes returned no row")
        return self._row_to_note(data)

    async def _replace(self, note: Note) -> Note:
        # id, owner and creation time are immutable once stored
        row = self._note_to_row(note)
        changes = {k: v for k, v in row.items() if k not in {"id", "user_id", "created_at"}}
        resp = await self._run(
            lambda: self._client.table(self._table)
            .update(changes)
            .eq("id", str(note.id))
            .eq("user_id", str(note.user_id))
            .execute()
        )
        data = self._first(resp.data)
        if not data:
            raise RuntimeError(f"Update of note {note.id} matched no row")
        return self._row_to_note(data)

    def _filtered(self, user_id: UUID, tag: Tag | None, columns: str, **select_kwargs: Any):
        q = (
            self._client.table(self._table)
            .select(columns, count="exact", **select_kwargs)
            .eq("user_id", str(user_id))
        )
        if tag is not None:
            q = q.contains("tags", [tag.value])
        return q

    async def _count(self, user_id: UUID, tag: Tag | None) -> int:
        resp = await self._run(lambda: self._filtered(user_id, tag, "id", head=True).execute())
        return resp.count or 0

    @staticmethod
    async def _run(func: Callable[[], Any]) -> Any:
        import asyncio
        return await asyncio.to_thread(func)

    @staticmethod
    def _first(data: Any) -> dict[str, Any]:
        if isinstance(data, list) and data:
            return data[0]
        if isinstance(data, dict):
            return data
        return {}

    @staticmethod
    def _row_to_note(row: dict[str, Any]) -> Note:
        normalized = dict(row)
        if normalized.get("tags") is None:
            normalized["tags"] = []
        if normalized.get("text") is None:
            normalized["text"] = ""
        return Note.model_validate(normalized)

    @staticmethod
    def _note_to_row(note: Note) -> dict[str, Any]:
        data = note.model_dump(mode="json")
        if data.get("updated_at") is None:
            data.pop("updated_at", None)
        return data

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Response, status

from notekeeper.api.v1.schemas.note import (
    NoteRead,
    NoteRequest,
    NotesPageRead,
    NoteStatsRead,
    NoteTextRead,
)
from notekeeper.config import settings
from notekeeper.core.models.note import Tag  # noqa: TCH001
from notekeeper.dependencies import get_current_user, get_note_service

if TYPE_CHECKING:
    from notekeeper.core.schemas.auth import AuthUser
    from notekeeper.core.services.note_service import NoteService

router = APIRouter(
    responses={
        401: {"description": "Unauthorized"},
        404: {"description": "Note not found"},
    }
)


@router.post("/", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
async def create_note(
    payload: NoteRequest,
    response: Response,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    note = await service.create_note(payload, user_id=current_user.id)
    response.headers["Location"] = f"{settings.api_prefix}/notes/{note.id}"
    return NoteRead.model_validate(note)


@router.get("/", response_model=NotesPageRead)
async def list_notes(
    page: int = Query(default=0, ge=0),
    size: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    tag: Tag | None = None,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    """List the caller's notes newest first, without their text."""
    result = await service.list_notes(user_id=current_user.id, page=page, size=size, tag=tag)
    return NotesPageRead.model_validate(result)


@router.get("/{note_id}", response_model=NoteRead)
async def get_note(
    note_id: str,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    note = await service.get_note(note_id, user_id=current_user.id)
    return NoteRead.model_validate(note)


@router.get("/{note_id}/text", response_model=NoteTextRead)
async def get_note_text(
    note_id: str,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    note = await service.get_note_text(note_id, user_id=current_user.id)
    return NoteTextRead(id=note.id, user_id=note.user_id, text=note.text)


@router.get("/{note_id}/stats", response_model=NoteStatsRead)
async def get_note_stats(
    note_id: str,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    """Word frequency report for one note."""
    table = await service.get_note_stats(note_id, user_id=current_user.id)
    return NoteStatsRead(stats=dict(table))


@router.put("/{note_id}", response_model=NoteRead)
async def update_note(
    note_id: str,
    payload: NoteRequest,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    note = await service.update_note(note_id, payload, user_id=current_user.id)
    return NoteRead.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: str,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    await service.delete_note(note_id, user_id=current_user.id)
    return None

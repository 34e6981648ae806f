from uuid import UUID

import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from notekeeper.config import settings
from notekeeper.core.models.note import Note, Tag
from notekeeper.core.schemas.auth import AuthUser
from notekeeper.core.services.note_service import NoteService
from notekeeper.dependencies import get_current_user, get_note_repository
from notekeeper.main import create_app
from tests.fakes import FakeNoteRepository
from tests.helpers import TEST_USER_HEADER, USER_1


@pytest.fixture
def fake_repo() -> FakeNoteRepository:
    return FakeNoteRepository()


@pytest.fixture
def note_service(fake_repo: FakeNoteRepository) -> NoteService:
    return NoteService(fake_repo)


@pytest.fixture
def sample_note() -> Note:
    return Note(
        user_id=USER_1,
        title="Quarterly planning",
        text="Budget review on Monday. Budget sign-off on Friday.",
        tags=[Tag.IMPORTANT, Tag.BUSINESS],
    )


def _fake_current_user(request: Request) -> AuthUser:
    user_id = UUID(request.headers.get(TEST_USER_HEADER, str(USER_1)))
    return AuthUser(id=user_id, email=f"{user_id.hex[-4:]}@example.com")


@pytest.fixture
def test_client(fake_repo: FakeNoteRepository) -> TestClient:
    """Create test client backed by the in-memory repository."""
    app = create_app()
    app.dependency_overrides[get_note_repository] = lambda: fake_repo
    app.dependency_overrides[get_current_user] = _fake_current_user
    return TestClient(app)


@pytest.fixture
def notes_url() -> str:
    return f"{settings.api_prefix}/notes/"

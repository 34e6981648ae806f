from tests.fakes.fake_note_repository import FakeNoteRepository, ticking_clock

__all__ = ["FakeNoteRepository", "ticking_clock"]

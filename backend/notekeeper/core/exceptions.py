from __future__ import annotations


class NoteNotFoundError(Exception):
    """Raised when no note matches the requested (id, user_id) pair.

    The message is identical whether the note does not exist or belongs to
    somebody else.
    """

    def __init__(self, message: str = "Note not found") -> None:
        super().__init__(message)
        self.message = message


class InvalidPageRequestError(ValueError):
    """Raised for pagination arguments outside their valid range."""

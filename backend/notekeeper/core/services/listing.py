from __future__ import annotations

import math
from typing import TYPE_CHECKING

from notekeeper.core.exceptions import InvalidPageRequestError
from notekeeper.core.schemas.page import NotePage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from notekeeper.core.models.note import Note


def validate_page_request(page: int, size: int) -> None:
    if page < 0:
        raise InvalidPageRequestError(f"page must be >= 0, got {page}")
    if size < 1:
        raise InvalidPageRequestError(f"size must be >= 1, got {size}")


def total_pages(total_items: int, size: int) -> int:
    if size < 1:
        raise InvalidPageRequestError(f"size must be >= 1, got {size}")
    if total_items == 0:
        return 0
    return math.ceil(total_items / size)


def page_bounds(page: int, size: int) -> tuple[int, int]:
    """Inclusive row range ``(start, end)`` covering one page."""
    validate_page_request(page, size)
    start = page * size
    return start, start + size - 1


def assemble(raw_items: Sequence[Note], page: int, size: int, total_items: int) -> NotePage:
    """Shape one page of stored notes into the list-view contract.

    The items must already be scoped to the owner, tag-filtered and sorted
    newest first by the repository; this only drops the text body and
    computes the page counters.
    """
    validate_page_request(page, size)
    if total_items < 0:
        raise InvalidPageRequestError(f"total_items must be >= 0, got {total_items}")
    if len(raw_items) > size:
        raise InvalidPageRequestError(
            f"page holds {len(raw_items)} items but size is {size}"
        )
    if total_items < len(raw_items):
        raise InvalidPageRequestError(
            f"page holds {len(raw_items)} items but total_items is {total_items}"
        )

    return NotePage(
        items=[note.without_text() for note in raw_items],
        page=page,
        size=size,
        total_items=total_items,
        total_pages=total_pages(total_items, size),
    )

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notekeeper.core.exceptions import InvalidPageRequestError, NoteNotFoundError
from notekeeper.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = get_logger(__name__)


async def note_not_found_handler(request: Request, exc: NoteNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message},
    )


async def invalid_page_request_handler(request: Request, exc: InvalidPageRequestError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Flatten validation errors into a field -> message mapping."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    logger.info(
        "Rejected invalid request",
        extra={"path": request.url.path, "method": request.method, "fields": sorted(errors)},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NoteNotFoundError, note_not_found_handler)
    app.add_exception_handler(InvalidPageRequestError, invalid_page_request_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

# cinecatalog/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus
from typing import Callable, NoReturn

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from cinecatalog.common.logging import get_logger

logger = get_logger(__name__)


def storage_failure(message: str) -> NoReturn:
    """
    Log the active storage exception and raise a generic 500. Call from an
    `except SQLAlchemyError` block; the raw error never reaches the client.
    """
    logger.exception(message)
    raise HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=message)


def count_or_zero(counter: Callable[[str], int], search: str, what: str) -> int:
    """Totals are best-effort: a failed COUNT yields 0 instead of failing the listing."""
    try:
        return counter(search)
    except SQLAlchemyError:
        logger.warning("Failed to count %s; reporting total=0", what, exc_info=True)
        return 0


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid request: {loc}: {first.get('msg')}" if loc else f"Invalid request: {first.get('msg')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, content={"error": message})


async def _storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Unhandled storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content={"error": "Internal server error"})


def install_error_handlers(app: FastAPI) -> None:
    """Render every error as {"error": "<message>"}."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _storage_exception_handler)

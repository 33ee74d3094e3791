"""Mapping of domain errors and request parsing failures onto HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..domain.errors import DomainError, StorageError, UserNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def http_error_from_domain_error(exc: DomainError) -> HTTPException:
    """Translate a domain error raised by the service into an ``HTTPException``."""
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, UserNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, StorageError):
        logger.error("storage failure: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal error")


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed JSON and body schema violations as 400 instead of 422."""
    logger.info("rejected malformed request %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "malformed request body", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": str(error.get("msg", ""))}
        for error in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Install the request-validation handler on ``app``."""
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

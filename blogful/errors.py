"""
Error responses.

Every failure leaves the API as ``{"error": {"message": "<text>"}}``.
Routers and dependencies raise :class:`ApiError`; anything else that escapes
a handler is logged and answered with a generic 500.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blogful.config import settings

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "server error"


class ApiError(StarletteHTTPException):
    """An HTTP error carrying the message shown to the client."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code=status_code, detail=message)
        self.message = message


def error_body(message: str) -> dict:
    return {"error": {"message": message}}


def validation_message(errors) -> str:
    """Name the first offending body field of a pydantic error list."""
    for error in errors:
        fields = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
        if fields:
            return f"Invalid '{fields[-1]}' in request body"
    return "Invalid request body"


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = validation_message(exc.errors())
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content=error_body(message))


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = SERVER_ERROR_MESSAGE if settings.is_production else str(exc)
    return JSONResponse(status_code=500, content=error_body(message))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    # Datastore faults are answered here; any other exception reaches the
    # same handler through Starlette's ServerErrorMiddleware.
    app.add_exception_handler(SQLAlchemyError, server_error_handler)
    app.add_exception_handler(Exception, server_error_handler)

"""
Exception handlers translating domain errors into JSON responses.

Unexpected exceptions are logged with their traceback and answered with a
generic 500 body; the exception itself never reaches the client.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from passvault.core.errors import PassVaultError, ServerError

logger = logging.getLogger(__name__)


def build_error_response(status_code: int, code: str, message: str) -> JSONResponse:
    """Build the ``{"error", "message"}`` body shared by all failures."""
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content={"error": code, "message": message},
        headers=headers,
    )


async def passvault_error_handler(request: Request, exc: PassVaultError) -> JSONResponse:
    """Handle domain errors raised by services and dependencies."""
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)

    return build_error_response(exc.status_code, exc.code, exc.message)


async def catch_unhandled_exceptions(request: Request, call_next) -> Response:
    """
    Middleware turning anything else into a 500 with minimal info.

    Runs inside CORSMiddleware, so the 500 still carries CORS headers.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)

        error = ServerError()
        return build_error_response(error.status_code, error.code, error.message)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the handlers on an application.

    Must be called before CORSMiddleware is added so CORS wraps the catch-all.
    """
    app.add_exception_handler(PassVaultError, passvault_error_handler)
    app.middleware("http")(catch_unhandled_exceptions)

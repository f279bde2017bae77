"""Render every failure as a JSON body with a human-readable ``error``."""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = "Method not allowed"


def error_response(
    request: Request,
    status_code: int,
    message: str,
    exc: BaseException | None = None,
) -> JSONResponse:
    body = {"error": message}
    if exc is not None and request.app.state.settings.debug:
        body["trace"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=status_code, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = METHOD_NOT_ALLOWED if exc.status_code == 405 else str(exc.detail)
    response = error_response(request, exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(
        part for part in first.get("loc", ()) if isinstance(part, str) and part != "body"
    )
    detail = first.get("msg", "malformed request")
    message = f"Invalid request body: {field + ': ' if field else ''}{detail}"
    logger.info("Rejected request body: %s", message)
    return error_response(request, 400, message, exc)


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return error_response(request, 429, f"Rate limit exceeded: {exc.detail}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

"""Error responses for the API

Every error body has the same shape: {"status": <http status>, "message":
<human readable>, "error": <taxonomy name>}.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from app.validation.result import Failure

logger = structlog.get_logger()


class ApiError(Exception):
    """A rejected rule, raised at the HTTP boundary"""

    def __init__(self, failure: Failure):
        self.failure = failure
        super().__init__(failure.message)

    @property
    def status_code(self) -> int:
        return self.failure.status_code


def raise_for(failure: Optional[Failure]) -> None:
    """Stop request handling if a rule rejected the request"""
    if failure is not None:
        raise ApiError(failure)


def error_body(status_code: int, message: str, error: Optional[str] = None) -> dict:
    return {"status": status_code, "message": message, "error": error}


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    failure = exc.failure
    logger.warning(
        "Request rejected",
        path=request.url.path,
        error=failure.code.value,
        field=failure.field,
        message=failure.message,
    )
    return JSONResponse(
        status_code=failure.status_code,
        content=error_body(failure.status_code, failure.message, failure.code.value),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning("Request validation failed", path=request.url.path, errors=str(errors))
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"{location}: {first.get('msg', 'invalid request')}" if location else "invalid request"
    return JSONResponse(
        status_code=422,
        content=error_body(422, message, "InvalidRequest"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
    )


EXCEPTION_HANDLERS = {
    ApiError: api_error_handler,
    StarletteHTTPException: http_exception_handler,
    RequestValidationError: validation_error_handler,
    Exception: unhandled_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)

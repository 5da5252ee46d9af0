"""
Error taxonomy and application-wide exception handlers.

Four kinds of failure end a request:

* ``NotFoundError`` – a path id does not resolve to a stored record (404);
* ``ValidationFailed`` – one or more field rules failed (400);
* no route matches the method and path (404, ``"Route not found"``);
* anything else raised by a handler (500, logged server side only).

All error bodies have the shape ``{"error": <message or violations>}``.
None of them is retried or recovered from once raised.
"""

import logging
from typing import Any, Dict, Iterable, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mock_users_api.app.schemas.errors import Violation


logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
INTERNAL_SERVER_ERROR = "Internal Server Error"

_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationFailed(ApiError):
    """Raised with every violation collected for a request."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, violations: Iterable[Violation]) -> None:
        self.violations: List[Violation] = list(violations)
        super().__init__("; ".join(f"{v.field}: {v.message}" for v in self.violations))

    def payload(self) -> Dict[str, Any]:
        return {"error": [violation.model_dump() for violation in self.violations]}


def violations_from_request_error(exc: RequestValidationError) -> List[Violation]:
    """Translate FastAPI's parsing errors into field violations.

    These arise when a request body is not valid JSON or is not a JSON
    object.  The location prefix (``body``, ``query``...) is dropped
    from the reported field name.
    """
    violations = []
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            location = loc.pop(0)
        else:
            location = "body"
        if err.get("type") == "json_invalid":
            loc = []
        field = ".".join(str(part) for part in loc) or location
        violations.append(Violation(field=field, message=err.get("msg", "Invalid value")))
    return violations


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    failed = ValidationFailed(violations_from_request_error(exc))
    return JSONResponse(status_code=failed.status_code, content=failed.payload())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Answer routing failures with the fallback 404 body.

    A known path requested with an unsupported method is treated the
    same as an unknown path.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": ROUTE_NOT_FOUND})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # ServerErrorMiddleware re-raises after this handler returns and the
    # server logs the traceback then, so only the summary is logged here.
    logger.error("Server Error: %s %s: %r", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_SERVER_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the fallback and error handlers on ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

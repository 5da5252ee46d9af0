"""
Request logging middleware.

Two HTTP middlewares run for every request, before any route
specific logic: the first logs the request line, the second logs a
completion marker.  Both always pass the request on unchanged.
"""

import logging

from fastapi import FastAPI, Request


logger = logging.getLogger(__name__)


def _request_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


async def log_request_line(request: Request, call_next):
    logger.info("%s %s", request.method, _request_url(request))
    return await call_next(request)


async def log_finished(request: Request, call_next):
    logger.info("Finished Logging...")
    return await call_next(request)


def register_logging_middleware(app: FastAPI) -> None:
    """Attach the logging middlewares to ``app``.

    Starlette runs the most recently added middleware first, so the
    completion marker is registered before the request line logger.
    """
    app.middleware("http")(log_finished)
    app.middleware("http")(log_request_line)

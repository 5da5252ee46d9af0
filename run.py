"""Entry point for the Mock Users API.

Starts the FastAPI application under Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); ``LOG_LEVEL`` controls verbosity.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from mock_users_api.app.core.config import settings
from mock_users_api.app.core.logging_config import PACKAGE_LOGGER
from mock_users_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(PACKAGE_LOGGER).info("Server running on http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

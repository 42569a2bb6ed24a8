"""Entry point for the Ride Share API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example in Docker,
where you only specify a single Python file to run.

Host, port, route variant and log level are read from environment
variables (``HOST``, ``PORT``, ``ROUTE_VARIANT``, ``LOG_LEVEL``).  See
``rideshare_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from rideshare_api.app.core.config import settings
from rideshare_api.app.main import app


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
    logging.getLogger(__name__).info(
        "REST API server running on port %s, try http://localhost:%s/v1/list",
        settings.port,
        settings.port,
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

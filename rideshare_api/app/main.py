"""
Main entrypoint for the Ride Share API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn rideshare_api.app.main:app --reload

Each application owns a fresh :class:`RideStore` on ``app.state``;
its contents live as long as the application does.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .schemas.ride import HealthRead
from .services.ride_store import RideStore


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Ride Share API starting with %s routes",
        app.state.settings.route_variant,
    )
    try:
        yield
    finally:
        app.state.ride_store.clear()
        logger.info("Ride Share API stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment
        at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the routers can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.ride_store = RideStore()

    app.include_router(v1_router, prefix="/v1")

    @app.get("/health", response_model=HealthRead, tags=["health"])
    async def health_check(request: Request) -> HealthRead:
        return HealthRead(
            status="ok",
            rides=len(request.app.state.ride_store),
            routeVariant=request.app.state.settings.route_variant,
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

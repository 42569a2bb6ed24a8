"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers served under ``/v1``.  The
ride router defines its own ``/list`` and ``/ride`` paths, so it is
included without a further prefix.
"""

from fastapi import APIRouter

from .endpoints import rides

router = APIRouter()

router.include_router(rides.router, tags=["rides"])

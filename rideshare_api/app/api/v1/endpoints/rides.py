"""
Ride endpoints for API v1.

These routes list ride offers and create, read, replace and delete a
single ride.  Request bodies are read as raw JSON and turned into a
:class:`Ride` entity, whose validation result decides between a 400
response and a call to the store.  Store lookups that miss are mapped
to 404.

The store and the active route variant are taken from ``app.state``
through dependencies, so every application built by ``create_app``
owns its own store.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from rideshare_api.app.core.exceptions import RideNotFoundError
from rideshare_api.app.models.ride import Ride
from rideshare_api.app.schemas.ride import ErrorResponse, RideEnvelope, RideRecord
from rideshare_api.app.services.ride_store import RideStore


logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = {"error": "Ride not found"}


def get_ride_store(request: Request) -> RideStore:
    return request.app.state.ride_store


def get_route_variant(request: Request) -> str:
    return request.app.state.settings.route_variant


def _error(status_code: int, error: str, details: Any = None) -> JSONResponse:
    body: Dict[str, Any] = {"error": error}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


async def _read_ride(request: Request, route_variant: str, failure: str):
    """Parse the body and build a valid ride.

    Returns ``(ride, None)`` on success or ``(None, response)`` with
    the 400 response to send back.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        logger.warning("Rejected unreadable ride body: %s", exc)
        return None, _error(status.HTTP_400_BAD_REQUEST, failure, f"Malformed JSON body: {exc}")

    built = Ride.build(payload, route_variant)
    if not built.ok:
        logger.warning("Rejected ride body: %s", built.error)
        return None, _error(status.HTTP_400_BAD_REQUEST, failure, built.error)

    validation = built.ride.validate()
    if not validation.is_valid:
        logger.info("Ride failed validation with %d error(s)", len(validation.errors))
        return None, _error(status.HTTP_400_BAD_REQUEST, "Invalid ride data", validation.errors)
    return built.ride, None


@router.get("/list", responses={200: {"model": List[RideRecord]}})
async def list_rides(store: RideStore = Depends(get_ride_store)) -> JSONResponse:
    """Return every stored ride."""
    return JSONResponse(content=store.list_rides())


@router.post(
    "/ride",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": RideEnvelope}, 400: {"model": ErrorResponse}},
)
async def create_ride(
    request: Request,
    store: RideStore = Depends(get_ride_store),
    route_variant: str = Depends(get_route_variant),
) -> JSONResponse:
    """Create a ride from the request body.

    Any ``id`` in the body is ignored; the service assigns one.
    """
    ride, failure = await _read_ride(request, route_variant, "Failed to create ride")
    if failure is not None:
        return failure
    stored = store.create_ride(ride.to_plain_record())
    logger.info("Created ride %s", stored["id"])
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"message": "Ride created successfully", "ride": stored},
    )


@router.get("/ride/{ride_id}", responses={200: {"model": RideRecord}, 404: {"model": ErrorResponse}})
async def get_ride(ride_id: str, store: RideStore = Depends(get_ride_store)) -> JSONResponse:
    """Retrieve a single ride by its identifier."""
    try:
        return JSONResponse(content=store.get_ride(ride_id))
    except RideNotFoundError:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND)


@router.put(
    "/ride/{ride_id}",
    responses={200: {"model": RideEnvelope}, 400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_ride(
    ride_id: str,
    request: Request,
    store: RideStore = Depends(get_ride_store),
    route_variant: str = Depends(get_route_variant),
) -> JSONResponse:
    """Replace a ride wholesale.

    The stored ride keeps ``ride_id``; all other fields are taken from
    the body.  Unknown identifiers are reported before the body is
    looked at.
    """
    if ride_id not in store:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND)

    ride, failure = await _read_ride(request, route_variant, "Failed to update ride")
    if failure is not None:
        return failure
    try:
        stored = store.replace_ride(ride_id, ride.to_plain_record())
    except RideNotFoundError:
        # deleted while the body was being read
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND)
    logger.info("Updated ride %s", ride_id)
    return JSONResponse(content={"message": "Ride updated successfully", "ride": stored})


@router.delete("/ride/{ride_id}", responses={200: {"model": RideEnvelope}, 404: {"model": ErrorResponse}})
async def delete_ride(ride_id: str, store: RideStore = Depends(get_ride_store)) -> JSONResponse:
    """Delete a ride and return it as it was before removal."""
    try:
        removed = store.delete_ride(ride_id)
    except RideNotFoundError:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND)
    logger.info("Deleted ride %s", ride_id)
    return JSONResponse(content={"message": "Ride deleted successfully", "ride": removed})

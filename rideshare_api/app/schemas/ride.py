"""
Pydantic models describing ride documents on the wire.

These schemas document the JSON returned by the ride endpoints in
the OpenAPI description.  Validation of incoming ride bodies is done
by :class:`rideshare_api.app.models.ride.Ride` rather than by these
models, because the API must report every violated rule at once with
its own messages and must never reject a body before the entity has
a chance to describe what is wrong with it.

``RideRecord`` carries the route fields of both deployment variants
as optional members; a given deployment only ever fills one pair.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class ContactRead(BaseModel):
    name: str = Field(..., description="Name of the person offering the ride")
    email: Optional[str] = Field(None, description="Contact email, null when not given")
    phone: Optional[str] = Field(None, description="Contact phone, null when not given")


class LocationRead(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class RideRecord(BaseModel):
    """Plain record of a stored ride."""

    id: str = Field(..., description="Identifier assigned by the service")
    contact: ContactRead
    startDateTime: str = Field(..., description="ISO 8601 start date and time")
    startTown: Optional[str] = None
    destinationTown: Optional[str] = None
    startLocation: Optional[LocationRead] = None
    destination: Optional[LocationRead] = None
    availableSeats: int = Field(..., ge=0)


class RideEnvelope(BaseModel):
    """Response body for successful create, update and delete calls."""

    message: str
    ride: RideRecord


class ErrorResponse(BaseModel):
    """Error body.

    ``details`` is the list of violated rules for invalid rides, or a
    single message when the body could not be read at all.
    """

    error: str
    details: Optional[Union[List[str], str]] = None


class HealthRead(BaseModel):
    status: str
    rides: int
    routeVariant: str

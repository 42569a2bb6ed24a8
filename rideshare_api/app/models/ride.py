"""
Ride entity for the ride share listing service.

A :class:`Ride` is built from the loosely structured JSON body of a
request.  Construction never validates: it only normalises the input
(missing nested objects become empty, missing optional contact fields
become ``None``) and assigns a fresh UUID.  Callers must run
:meth:`Ride.validate` before storing the ride and expose it through
:meth:`Ride.to_plain_record` only.

Two route shapes are supported and chosen per deployment:

* ``towns`` – ``startTown`` and ``destinationTown`` strings;
* ``coordinates`` – ``startLocation`` and ``destination`` objects
  with ``lat``/``lng`` numbers.
"""

from __future__ import annotations

import copy
import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..core.config import ROUTE_VARIANTS


EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class Contact:
    name: Any = None
    email: Any = None
    phone: Any = None


@dataclass
class Location:
    lat: Any = None
    lng: Any = None


@dataclass
class ValidationResult:
    """Outcome of :meth:`Ride.validate`.

    ``errors`` lists every violated rule in evaluation order; it is
    empty exactly when ``is_valid`` is true.
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class RideBuildResult:
    """Outcome of :meth:`Ride.build`: either a ride or an error message."""

    ride: Optional["Ride"] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.ride is not None


def _as_mapping(value: Any, label: str) -> Dict[str, Any]:
    """Return ``value`` as a dict, treating ``None`` as an empty object."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"{label} must be an object")
    return value


def _is_number(value: Any) -> bool:
    # bool is a subclass of int but never a valid coordinate or count
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_filled_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def is_valid_email(email: Any) -> bool:
    return isinstance(email, str) and EMAIL_RE.fullmatch(email) is not None


def is_valid_latitude(lat: Any) -> bool:
    return _is_number(lat) and -90 <= lat <= 90


def is_valid_longitude(lng: Any) -> bool:
    return _is_number(lng) and -180 <= lng <= 180


def is_valid_date_time(value: Any) -> bool:
    """Check that ``value`` is an ISO 8601 string a calendar can represent."""
    if not _is_filled_string(value):
        return False
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def is_valid_seat_count(seats: Any) -> bool:
    if not _is_number(seats):
        return False
    if isinstance(seats, float) and not seats.is_integer():
        return False
    return seats >= 0


class Ride:
    """A single ride offer.

    The identifier is generated here and never read from ``ride_data``;
    a caller supplying ``id`` in a request body has it ignored.
    """

    def __init__(self, ride_data: Dict[str, Any], route_variant: str = "towns") -> None:
        if route_variant not in ROUTE_VARIANTS:
            raise ValueError(f"Unknown route variant {route_variant!r}")
        if not isinstance(ride_data, dict):
            raise TypeError("Ride data must be a JSON object")

        self.id = str(uuid.uuid4())
        self.route_variant = route_variant

        contact = _as_mapping(ride_data.get("contact"), "contact")
        self.contact = Contact(
            name=contact.get("name"),
            email=contact.get("email"),
            phone=contact.get("phone"),
        )
        self.start_date_time = ride_data.get("startDateTime")

        if route_variant == "coordinates":
            start = _as_mapping(ride_data.get("startLocation"), "startLocation")
            dest = _as_mapping(ride_data.get("destination"), "destination")
            self.start_location = Location(lat=start.get("lat"), lng=start.get("lng"))
            self.destination = Location(lat=dest.get("lat"), lng=dest.get("lng"))
        else:
            self.start_town = ride_data.get("startTown")
            self.destination_town = ride_data.get("destinationTown")

        self.available_seats = ride_data.get("availableSeats")

    @classmethod
    def build(cls, ride_data: Any, route_variant: str = "towns") -> RideBuildResult:
        """Construct a ride without raising.

        Payloads that cannot be read at all (a list instead of an
        object, a string where ``contact`` should be) produce a
        failed result whose ``error`` describes the problem.
        """
        try:
            return RideBuildResult(ride=cls(ride_data, route_variant))
        except (TypeError, ValueError) as exc:
            return RideBuildResult(error=str(exc))

    def validate(self) -> ValidationResult:
        """Check every field rule and collect all violations."""
        errors: List[str] = []

        if not _is_filled_string(self.contact.name):
            errors.append("Contact name is required and must be a string")
        if _is_present(self.contact.email) and not is_valid_email(self.contact.email):
            errors.append("Contact email must be a valid email address when provided")
        if _is_present(self.contact.phone) and not isinstance(self.contact.phone, str):
            errors.append("Contact phone must be a string when provided")

        if not is_valid_date_time(self.start_date_time):
            errors.append("Valid start date/time is required (ISO 8601 format)")

        if self.route_variant == "coordinates":
            if not is_valid_latitude(self.start_location.lat):
                errors.append("Start location latitude must be between -90 and 90")
            if not is_valid_longitude(self.start_location.lng):
                errors.append("Start location longitude must be between -180 and 180")
            if not is_valid_latitude(self.destination.lat):
                errors.append("Destination latitude must be between -90 and 90")
            if not is_valid_longitude(self.destination.lng):
                errors.append("Destination longitude must be between -180 and 180")
        else:
            if not _is_filled_string(self.start_town):
                errors.append("Start town is required and must be a non-empty string")
            if not _is_filled_string(self.destination_town):
                errors.append("Destination town is required and must be a non-empty string")

        if not is_valid_seat_count(self.available_seats):
            errors.append("Available seats must be a non-negative integer")

        return ValidationResult(is_valid=not errors, errors=errors)

    def to_plain_record(self) -> Dict[str, Any]:
        """Return a JSON-serialisable snapshot of the ride, ``id`` included."""
        record: Dict[str, Any] = {
            "id": self.id,
            "contact": {
                "name": self.contact.name,
                "email": self.contact.email,
                "phone": self.contact.phone,
            },
            "startDateTime": self.start_date_time,
        }
        if self.route_variant == "coordinates":
            record["startLocation"] = {"lat": self.start_location.lat, "lng": self.start_location.lng}
            record["destination"] = {"lat": self.destination.lat, "lng": self.destination.lng}
        else:
            record["startTown"] = self.start_town
            record["destinationTown"] = self.destination_town
        record["availableSeats"] = self.available_seats
        # field values may themselves be containers taken from the request
        return copy.deepcopy(record)

    def __repr__(self) -> str:
        return f"Ride(id={self.id!r}, route_variant={self.route_variant!r})"

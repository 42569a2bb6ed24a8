"""
In‑memory storage for ride records.

``RideStore`` keeps plain ride records in a dictionary keyed by ride
identifier, so lookups, replacements and deletions do not scan the
collection.  Records live for the lifetime of the process only.

Every public method runs under a single lock, which linearises
concurrent writers on the same identifier and keeps ``list_rides``
from observing a half‑applied change.  Records are deep‑copied on
the way in and out, so callers can never mutate stored state.
"""

import copy
import logging
import threading
from typing import Any, Dict, List

from ..core.exceptions import DuplicateRideError, RideNotFoundError


logger = logging.getLogger(__name__)

RideRecord = Dict[str, Any]


class RideStore:
    """Keyed collection of ride records."""

    def __init__(self) -> None:
        self._rides: Dict[str, RideRecord] = {}
        self._lock = threading.Lock()

    def create_ride(self, ride: RideRecord) -> RideRecord:
        """Insert ``ride`` under its own ``id`` and return the stored record.

        Raises ``DuplicateRideError`` if the identifier is taken.
        """
        ride_id = ride["id"]
        with self._lock:
            if ride_id in self._rides:
                raise DuplicateRideError(ride_id)
            self._rides[ride_id] = copy.deepcopy(ride)
            stored = copy.deepcopy(self._rides[ride_id])
        logger.debug("Stored ride %s", ride_id)
        return stored

    def get_ride(self, ride_id: str) -> RideRecord:
        """Return the record for ``ride_id`` or raise ``RideNotFoundError``."""
        with self._lock:
            try:
                return copy.deepcopy(self._rides[ride_id])
            except KeyError:
                raise RideNotFoundError(ride_id) from None

    def list_rides(self) -> List[RideRecord]:
        """Return all records in insertion order."""
        with self._lock:
            return [copy.deepcopy(ride) for ride in self._rides.values()]

    def replace_ride(self, ride_id: str, ride: RideRecord) -> RideRecord:
        """Overwrite the whole record at ``ride_id`` with ``ride``.

        The stored record always keeps ``ride_id`` as its identifier,
        whatever ``id`` the replacement carries.
        """
        replacement = copy.deepcopy(ride)
        replacement["id"] = ride_id
        with self._lock:
            if ride_id not in self._rides:
                raise RideNotFoundError(ride_id)
            self._rides[ride_id] = replacement
            stored = copy.deepcopy(replacement)
        logger.debug("Replaced ride %s", ride_id)
        return stored

    def delete_ride(self, ride_id: str) -> RideRecord:
        """Remove ``ride_id`` and return the record as it was before removal."""
        with self._lock:
            try:
                removed = self._rides.pop(ride_id)
            except KeyError:
                raise RideNotFoundError(ride_id) from None
        logger.debug("Deleted ride %s", ride_id)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._rides.clear()

    def __contains__(self, ride_id: object) -> bool:
        with self._lock:
            return ride_id in self._rides

    def __len__(self) -> int:
        with self._lock:
            return len(self._rides)

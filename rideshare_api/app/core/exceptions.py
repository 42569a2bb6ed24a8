"""Exceptions raised by the ride store."""


class RideNotFoundError(Exception):
    """Raised when no ride is stored under the requested identifier."""

    def __init__(self, ride_id: str, message: str = None):
        self.ride_id = ride_id
        self.message = message or f"Ride '{ride_id}' not found"
        super().__init__(self.message)


class DuplicateRideError(Exception):
    """Raised when attempting to store a ride under an identifier already in use."""

    def __init__(self, ride_id: str, message: str = None):
        self.ride_id = ride_id
        self.message = message or f"Ride with ID '{ride_id}' already exists"
        super().__init__(self.message)

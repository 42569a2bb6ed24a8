"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any
from fastapi.testclient import TestClient

from rideshare_api.app.core.config import Settings
from rideshare_api.app.main import create_app
from rideshare_api.app.services.ride_store import RideStore


@pytest.fixture
def town_ride_data() -> Dict[str, Any]:
    """Valid ride body for the town route variant."""
    return {
        "contact": {"name": "Ann"},
        "startDateTime": "2024-01-01T10:00:00Z",
        "startTown": "A",
        "destinationTown": "B",
        "availableSeats": 2,
    }


@pytest.fixture
def coordinate_ride_data() -> Dict[str, Any]:
    """Valid ride body for the coordinate route variant."""
    return {
        "contact": {
            "name": "Bob",
            "email": "bob@example.com",
            "phone": "+1 555 0100",
        },
        "startDateTime": "2024-03-15T08:30:00+01:00",
        "startLocation": {"lat": 52.52, "lng": 13.405},
        "destination": {"lat": 48.1351, "lng": 11.582},
        "availableSeats": 3,
    }


@pytest.fixture
def store() -> RideStore:
    return RideStore()


@pytest.fixture
def client() -> TestClient:
    """Test client for an app serving town routes."""
    return TestClient(create_app(Settings(route_variant="towns")))


@pytest.fixture
def coordinate_client() -> TestClient:
    """Test client for an app serving coordinate routes."""
    return TestClient(create_app(Settings(route_variant="coordinates")))

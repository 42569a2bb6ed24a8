"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration.  Tests construct their own
``Settings`` instances and pass them to ``create_app``.
"""

import os
from dataclasses import dataclass
from typing import Optional


# Route shapes a deployment can choose from.  ``towns`` stores plain
# town names, ``coordinates`` stores latitude/longitude pairs.
ROUTE_VARIANTS = ("towns", "coordinates")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Ride Share API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8081"))

    # Which route representation rides carry.  This is a deployment
    # choice: a running service only ever accepts one of the shapes.
    route_variant: str = os.getenv("ROUTE_VARIANT", "towns").lower()

    def __post_init__(self) -> None:
        if self.route_variant not in ROUTE_VARIANTS:
            raise ValueError(
                f"Unsupported ROUTE_VARIANT {self.route_variant!r}; "
                f"expected one of {', '.join(ROUTE_VARIANTS)}"
            )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  The ride entity lives in ``models``, the in‑memory store
in ``services``, response schemas in ``schemas`` and the HTTP routes
in ``api/v1/endpoints``.  Versioning is handled by grouping routers
under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401

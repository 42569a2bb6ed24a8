"""
Service layer abstraction.

The ride store encapsulates keyed storage of ride records.  Routes
receive the store through a dependency, so the in‑memory mapping used
here can be swapped for another backing without changing handlers.
"""

"""
Version 1 of the API.

This subpackage bundles the endpoints served under the ``/v1``
prefix: listing ride offers and creating, reading, replacing and
deleting a single ride.
"""

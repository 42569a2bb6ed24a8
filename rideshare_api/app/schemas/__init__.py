"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON documents returned by the API.  They are
kept apart from the ride entity in ``models`` so that the wire
representation can evolve without touching validation rules.
"""

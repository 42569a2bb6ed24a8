"""
Top‑level package for the Ride Share API.

This file makes ``rideshare_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``rideshare_api.app.main``.  Tests and the ``run.py`` launcher rely
on these absolute imports.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

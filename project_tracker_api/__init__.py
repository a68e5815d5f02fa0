"""
Top‑level package for the Project Tracker API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``project_tracker_api.app.main:app``.
"""

__all__ = []

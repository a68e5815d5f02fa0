"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from project_tracker_api.app.services.project_store import ProjectStore


def get_store(request: Request) -> ProjectStore:
    """Return the store owned by the running application."""
    return request.app.state.store

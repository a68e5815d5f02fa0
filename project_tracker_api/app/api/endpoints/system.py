"""
Root level endpoints: welcome message and health check.

These are mounted without the ``/api`` prefix.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from project_tracker_api.app.api.deps import get_store
from project_tracker_api.app.core.config import settings
from project_tracker_api.app.schemas.common import ApiResponse
from project_tracker_api.app.services.project_store import ProjectStore


router = APIRouter()


@router.get("/", response_model=ApiResponse[Dict[str, Any]], response_model_exclude_none=True)
def welcome() -> ApiResponse[Dict[str, Any]]:
    return ApiResponse(
        success=True,
        data={
            "message": f"Welcome to {settings.project_name}",
            "description": settings.description,
            "version": settings.api_version,
            "endpoints": {
                "health": "/health",
                "dashboard": "/api/dashboard",
                "backlogs": "/api/backlogs",
                "stories": "/api/stories",
                "subtasks": "/api/subtasks",
            },
        },
    )


@router.get("/health", response_model=ApiResponse[Dict[str, Any]], response_model_exclude_none=True)
def health(store: ProjectStore = Depends(get_store)) -> ApiResponse[Dict[str, Any]]:
    backlogs, stories, subtasks = store.counts()
    return ApiResponse(
        success=True,
        data={
            "status": "healthy",
            "backlogs": backlogs,
            "stories": stories,
            "subtasks": subtasks,
        },
    )

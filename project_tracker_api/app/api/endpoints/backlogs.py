"""
Backlog endpoints.

Routes:

* ``GET /api/backlogs`` – every backlog, hydrated with stories and
  subtasks.
* ``POST /api/backlogs`` – create a backlog.
* ``GET /api/backlogs/{backlog_id}`` – one hydrated backlog, 404 if
  unknown.
* ``GET /api/backlogs/{backlog_id}/stories`` – stories of a backlog.
  An unknown backlog yields an empty list, not a 404.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from project_tracker_api.app.api.deps import get_store
from project_tracker_api.app.schemas.backlog import BacklogCreate, BacklogRead
from project_tracker_api.app.schemas.common import ApiResponse
from project_tracker_api.app.schemas.story import StoryRead
from project_tracker_api.app.services.project_store import ProjectStore


router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[List[BacklogRead]],
    response_model_exclude_none=True,
)
def list_backlogs(store: ProjectStore = Depends(get_store)) -> ApiResponse[List[BacklogRead]]:
    backlogs = store.list_backlogs()
    return ApiResponse(success=True, data=[BacklogRead.model_validate(b) for b in backlogs])


@router.post(
    "",
    response_model=ApiResponse[BacklogRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_backlog(
    payload: BacklogCreate,
    store: ProjectStore = Depends(get_store),
) -> ApiResponse[BacklogRead]:
    backlog = store.create_backlog(payload.title, payload.description)
    return ApiResponse(success=True, data=BacklogRead.model_validate(backlog))


@router.get(
    "/{backlog_id}",
    response_model=ApiResponse[BacklogRead],
    response_model_exclude_none=True,
)
def get_backlog(backlog_id: str, store: ProjectStore = Depends(get_store)) -> ApiResponse[BacklogRead]:
    """Retrieve a backlog with its stories and their subtasks.

    ``NotFoundError`` propagates to the application handler, which
    answers 404.
    """
    backlog = store.get_backlog(backlog_id)
    return ApiResponse(success=True, data=BacklogRead.model_validate(backlog))


@router.get(
    "/{backlog_id}/stories",
    response_model=ApiResponse[List[StoryRead]],
    response_model_exclude_none=True,
)
def list_backlog_stories(
    backlog_id: str,
    store: ProjectStore = Depends(get_store),
) -> ApiResponse[List[StoryRead]]:
    stories = store.list_stories_by_backlog(backlog_id)
    return ApiResponse(success=True, data=[StoryRead.model_validate(s) for s in stories])

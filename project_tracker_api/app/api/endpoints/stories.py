"""
Story endpoints.

Routes:

* ``POST /api/stories`` – create a story in an existing backlog
  (404 when the backlog is unknown).
* ``GET /api/stories/{story_id}`` – one story with its subtasks.
* ``PUT /api/stories/{story_id}/status`` – change the status.
* ``GET /api/stories/{story_id}/subtasks`` – subtasks of a story; an
  unknown story yields an empty list.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from project_tracker_api.app.api.deps import get_store
from project_tracker_api.app.schemas.common import ApiResponse, MessageRead, StatusUpdate
from project_tracker_api.app.schemas.story import StoryCreate, StoryRead
from project_tracker_api.app.schemas.subtask import SubTaskRead
from project_tracker_api.app.services.project_store import ProjectStore


router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[StoryRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_story(payload: StoryCreate, store: ProjectStore = Depends(get_store)) -> ApiResponse[StoryRead]:
    story = store.create_story(**payload.model_dump())
    return ApiResponse(success=True, data=StoryRead.model_validate(story))


@router.get(
    "/{story_id}",
    response_model=ApiResponse[StoryRead],
    response_model_exclude_none=True,
)
def get_story(story_id: str, store: ProjectStore = Depends(get_store)) -> ApiResponse[StoryRead]:
    story = store.get_story(story_id)
    return ApiResponse(success=True, data=StoryRead.model_validate(story))


@router.put(
    "/{story_id}/status",
    response_model=ApiResponse[MessageRead],
    response_model_exclude_none=True,
)
def update_story_status(
    story_id: str,
    payload: StatusUpdate,
    store: ProjectStore = Depends(get_store),
) -> ApiResponse[MessageRead]:
    """Set a story's status.

    Any status may follow any other.  The first move into
    ``IN_PROGRESS`` records ``actual_start`` and the first move into
    ``DONE`` records ``actual_end``; neither is overwritten later.
    """
    store.update_story_status(story_id, payload.status)
    return ApiResponse(success=True, data=MessageRead(message="Status updated successfully"))


@router.get(
    "/{story_id}/subtasks",
    response_model=ApiResponse[List[SubTaskRead]],
    response_model_exclude_none=True,
)
def list_story_subtasks(
    story_id: str,
    store: ProjectStore = Depends(get_store),
) -> ApiResponse[List[SubTaskRead]]:
    subtasks = store.list_subtasks_by_story(story_id)
    return ApiResponse(success=True, data=[SubTaskRead.model_validate(s) for s in subtasks])

"""
Subtask endpoints.
"""

from fastapi import APIRouter, Depends, status

from project_tracker_api.app.api.deps import get_store
from project_tracker_api.app.schemas.common import ApiResponse, MessageRead, StatusUpdate
from project_tracker_api.app.schemas.subtask import SubTaskCreate, SubTaskRead
from project_tracker_api.app.services.project_store import ProjectStore


router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[SubTaskRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_subtask(payload: SubTaskCreate, store: ProjectStore = Depends(get_store)) -> ApiResponse[SubTaskRead]:
    subtask = store.create_subtask(**payload.model_dump())
    return ApiResponse(success=True, data=SubTaskRead.model_validate(subtask))


@router.get(
    "/{subtask_id}",
    response_model=ApiResponse[SubTaskRead],
    response_model_exclude_none=True,
)
def get_subtask(subtask_id: str, store: ProjectStore = Depends(get_store)) -> ApiResponse[SubTaskRead]:
    subtask = store.get_subtask(subtask_id)
    return ApiResponse(success=True, data=SubTaskRead.model_validate(subtask))


@router.put(
    "/{subtask_id}/status",
    response_model=ApiResponse[MessageRead],
    response_model_exclude_none=True,
)
def update_subtask_status(
    subtask_id: str,
    payload: StatusUpdate,
    store: ProjectStore = Depends(get_store),
) -> ApiResponse[MessageRead]:
    store.update_subtask_status(subtask_id, payload.status)
    return ApiResponse(success=True, data=MessageRead(message="Status updated successfully"))

"""
Dashboard endpoint.

``GET /api/dashboard`` returns entity totals and per‑status counts for
stories and subtasks, recomputed on every request.
"""

from fastapi import APIRouter, Depends

from project_tracker_api.app.api.deps import get_store
from project_tracker_api.app.schemas.common import ApiResponse
from project_tracker_api.app.schemas.dashboard import DashboardRead
from project_tracker_api.app.services.project_store import ProjectStore


router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[DashboardRead],
    response_model_exclude_none=True,
)
def get_dashboard(store: ProjectStore = Depends(get_store)) -> ApiResponse[DashboardRead]:
    stats = store.dashboard_stats()
    return ApiResponse(success=True, data=DashboardRead.model_validate(stats))

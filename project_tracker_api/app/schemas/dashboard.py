"""
Pydantic model for the dashboard statistics payload.

Status histograms are sparse: statuses that no story (or subtask)
currently has are absent from the mapping rather than reported as 0.
"""

from typing import Dict

from pydantic import BaseModel

from project_tracker_api.app.models import Status


class DashboardRead(BaseModel):
    total_backlogs: int
    total_stories: int
    total_subtasks: int
    story_status: Dict[Status, int]
    subtask_status: Dict[Status, int]

    model_config = {
        "from_attributes": True,
    }

"""
Pydantic models for story data.

A story belongs to a backlog.  ``StoryCreate`` carries the fields a
client may set; status, actual dates and timestamps are managed by the
server.  ``actual_start`` and ``actual_end`` stay ``None`` (and are
left out of responses) until the corresponding status transition
happens.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from project_tracker_api.app.models import Status
from project_tracker_api.app.schemas.subtask import SubTaskRead


class StoryCreate(BaseModel):
    backlog_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, example="Login with SSO")
    description: str = ""
    jira_url: str = Field("", example="https://jira.example.com/browse/PRJ-42")
    effort_origin: int = Field(0, example=5)
    pic: str = Field("", example="alice")
    plan_start: Optional[datetime] = Field(None, example="2025-09-01T09:00:00Z")
    plan_end: Optional[datetime] = Field(None, example="2025-09-12T18:00:00Z")


class StoryRead(BaseModel):
    """Schema for reading a story, with its subtasks."""

    id: str
    backlog_id: str
    title: str
    description: str
    jira_url: str
    effort_origin: int
    pic: str
    plan_start: Optional[datetime] = None
    plan_end: Optional[datetime] = None
    actual_start: Optional[datetime] = None
    actual_end: Optional[datetime] = None
    status: Status
    subtasks: List[SubTaskRead] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }

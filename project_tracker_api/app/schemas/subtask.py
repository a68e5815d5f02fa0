"""
Pydantic models for subtask data.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from project_tracker_api.app.models import Status


class SubTaskCreate(BaseModel):
    story_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, example="Add SAML callback route")
    description: str = ""
    effort: int = Field(0, example=2)
    jira_url: str = ""
    pic: str = ""
    plan_start: Optional[datetime] = None
    plan_end: Optional[datetime] = None


class SubTaskRead(BaseModel):
    id: str
    story_id: str
    title: str
    description: str
    effort: int
    jira_url: str
    pic: str
    plan_start: Optional[datetime] = None
    plan_end: Optional[datetime] = None
    actual_start: Optional[datetime] = None
    actual_end: Optional[datetime] = None
    status: Status
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }

"""
Pydantic models for backlog data.

``BacklogCreate`` is the request body for creating a backlog and
``BacklogRead`` is what the API returns, including the backlog's
stories (each with its subtasks) as they are at the time of the read.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from project_tracker_api.app.schemas.story import StoryRead


class BacklogCreate(BaseModel):
    title: str = Field(..., min_length=1, example="Q3 platform work")
    description: str = Field("", example="Everything planned for the third quarter")


class BacklogRead(BaseModel):
    """Schema for reading a backlog from the API."""

    id: str
    title: str
    description: str
    stories: List[StoryRead] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }

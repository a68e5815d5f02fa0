"""
Response envelope shared by every endpoint.

All responses, successful or not, have the shape::

    {"success": true,  "data": ...}
    {"success": false, "error": "..."}

Exactly one of ``data`` and ``error`` is present.  Endpoints declare
``ApiResponse[<schema>]`` as their response model and serialize with
``response_model_exclude_none`` so the absent member is dropped.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field, model_validator

from project_tracker_api.app.models import Status

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    success: bool
    data: Optional[DataT] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "ApiResponse[DataT]":
        if self.error is not None and self.data is not None:
            raise ValueError("an envelope carries either data or error, not both")
        if self.success and self.error is not None:
            raise ValueError("a successful envelope cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("a failed envelope must carry an error message")
        return self

    @classmethod
    def failure(cls, message: str) -> "ApiResponse":
        return cls(success=False, error=message)


class MessageRead(BaseModel):
    message: str = Field(..., example="Status updated successfully")


class StatusUpdate(BaseModel):
    """Body of ``PUT /api/stories/{id}/status`` and its subtask twin."""

    status: Status = Field(..., example="IN_PROGRESS")

"""
Entity records held by the in‑memory store.

These dataclasses are the canonical, stored representation of
backlogs, stories and subtasks.  They carry no behaviour: the store
creates them, mutates status and timestamp fields, and hands out
copies.  The child collections (``Backlog.stories`` and
``Story.subtasks``) are never populated on the stored instances; they
are filled on copies at read time from the store's child maps.

API payloads are described separately in ``schemas`` so that the
wire representation can evolve independently of the stored one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class Status(str, Enum):
    """Work state shared by stories and subtasks.

    Any value may follow any other value; there is no ordering between
    states.
    """

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    BLOCKED = "BLOCKED"


@dataclass
class SubTask:
    id: str
    story_id: str
    title: str
    description: str
    effort: int
    jira_url: str
    pic: str
    plan_start: Optional[datetime]
    plan_end: Optional[datetime]
    status: Status
    created_at: datetime
    updated_at: datetime
    actual_start: Optional[datetime] = None
    actual_end: Optional[datetime] = None


@dataclass
class Story:
    id: str
    backlog_id: str
    title: str
    description: str
    jira_url: str
    effort_origin: int
    pic: str
    plan_start: Optional[datetime]
    plan_end: Optional[datetime]
    status: Status
    created_at: datetime
    updated_at: datetime
    actual_start: Optional[datetime] = None
    actual_end: Optional[datetime] = None
    subtasks: List[SubTask] = field(default_factory=list)


@dataclass
class Backlog:
    id: str
    title: str
    description: str
    created_at: datetime
    updated_at: datetime
    stories: List[Story] = field(default_factory=list)


@dataclass
class DashboardStats:
    """Point‑in‑time aggregate over the whole store.

    The status maps are sparse: a status with no entities has no key.
    """

    total_backlogs: int
    total_stories: int
    total_subtasks: int
    story_status: dict[Status, int] = field(default_factory=dict)
    subtask_status: dict[Status, int] = field(default_factory=dict)

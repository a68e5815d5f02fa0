"""
In‑memory store for backlogs, stories and subtasks.

``ProjectStore`` owns three maps (id → record), one per entity type,
and guards all of them with a single readers/writer lock:

* creations and status updates take the lock exclusively for their
  whole duration, including the parent existence check and the
  timestamp they record;
* reads (get, list, dashboard) take it in shared mode and finish the
  whole parent/child join under that one acquisition, so a hydrated
  backlog always reflects a single consistent state.

Parents never keep their children.  ``get_backlog`` and friends build
the child lists from the canonical maps on every call and return
detached copies, so values handed to callers are unaffected by later
mutations and vice versa.

Referential integrity is checked only when a story or subtask is
created.  Listing children of an unknown parent is not an error and
simply yields an empty list, unlike ``get_backlog`` which raises
``NotFoundError`` for an unknown id.

A store instance is created explicitly (see ``main.create_app``) and
shared by the request handlers of one application.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from project_tracker_api.app.core.exceptions import NotFoundError
from project_tracker_api.app.core.rwlock import ReadWriteLock
from project_tracker_api.app.models import Backlog, DashboardStats, Status, Story, SubTask
from project_tracker_api.app.services.statistics_service import build_dashboard_stats
from project_tracker_api.app.services.status_service import apply_status


logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class ProjectStore:
    """Thread‑safe, memory‑resident store of the project hierarchy."""

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._clock = clock
        self._new_id = id_factory
        self._lock = ReadWriteLock()
        self._backlogs: Dict[str, Backlog] = {}
        self._stories: Dict[str, Story] = {}
        self._subtasks: Dict[str, SubTask] = {}

    # ------------------------------------------------------------------
    # Hydration helpers (caller holds the lock)
    # ------------------------------------------------------------------
    def _subtasks_of(self, story_id: str) -> List[SubTask]:
        return [replace(st) for st in self._subtasks.values() if st.story_id == story_id]

    def _hydrate_story(self, story: Story) -> Story:
        return replace(story, subtasks=self._subtasks_of(story.id))

    def _stories_of(self, backlog_id: str) -> List[Story]:
        return [
            self._hydrate_story(story)
            for story in self._stories.values()
            if story.backlog_id == backlog_id
        ]

    def _hydrate_backlog(self, backlog: Backlog) -> Backlog:
        return replace(backlog, stories=self._stories_of(backlog.id))

    # ------------------------------------------------------------------
    # Backlogs
    # ------------------------------------------------------------------
    def create_backlog(self, title: str, description: str = "") -> Backlog:
        with self._lock.write():
            now = self._clock()
            backlog = Backlog(
                id=self._new_id(),
                title=title,
                description=description,
                created_at=now,
                updated_at=now,
            )
            self._backlogs[backlog.id] = backlog
            logger.info("Created backlog %s", backlog.id)
            return replace(backlog, stories=[])

    def get_backlog(self, backlog_id: str) -> Backlog:
        """Return the backlog with its stories and their subtasks.

        Raises
        ------
        NotFoundError
            If no backlog has this id.
        """
        with self._lock.read():
            backlog = self._backlogs.get(backlog_id)
            if backlog is None:
                raise NotFoundError("backlog", backlog_id)
            return self._hydrate_backlog(backlog)

    def list_backlogs(self) -> List[Backlog]:
        with self._lock.read():
            return [self._hydrate_backlog(b) for b in self._backlogs.values()]

    # ------------------------------------------------------------------
    # Stories
    # ------------------------------------------------------------------
    def create_story(
        self,
        backlog_id: str,
        title: str,
        description: str = "",
        jira_url: str = "",
        effort_origin: int = 0,
        pic: str = "",
        plan_start: Optional[datetime] = None,
        plan_end: Optional[datetime] = None,
    ) -> Story:
        """Create a story under an existing backlog.

        The new story starts in ``TODO`` with no actual dates.  When the
        backlog does not exist nothing is stored.

        Raises
        ------
        NotFoundError
            If ``backlog_id`` does not reference a stored backlog.
        """
        with self._lock.write():
            if backlog_id not in self._backlogs:
                logger.warning("Rejected story for unknown backlog %s", backlog_id)
                raise NotFoundError("backlog", backlog_id)
            now = self._clock()
            story = Story(
                id=self._new_id(),
                backlog_id=backlog_id,
                title=title,
                description=description,
                jira_url=jira_url,
                effort_origin=effort_origin,
                pic=pic,
                plan_start=plan_start,
                plan_end=plan_end,
                status=Status.TODO,
                created_at=now,
                updated_at=now,
            )
            self._stories[story.id] = story
            logger.info("Created story %s in backlog %s", story.id, backlog_id)
            return replace(story, subtasks=[])

    def get_story(self, story_id: str) -> Story:
        with self._lock.read():
            story = self._stories.get(story_id)
            if story is None:
                raise NotFoundError("story", story_id)
            return self._hydrate_story(story)

    def list_stories_by_backlog(self, backlog_id: str) -> List[Story]:
        # No existence check on the backlog: unknown ids give [].
        with self._lock.read():
            return self._stories_of(backlog_id)

    def update_story_status(self, story_id: str, status: Status) -> Story:
        with self._lock.write():
            story = self._stories.get(story_id)
            if story is None:
                raise NotFoundError("story", story_id)
            previous = story.status
            apply_status(story, status, self._clock())
            logger.info("Story %s status %s -> %s", story_id, previous.value, story.status.value)
            return self._hydrate_story(story)

    # ------------------------------------------------------------------
    # Subtasks
    # ------------------------------------------------------------------
    def create_subtask(
        self,
        story_id: str,
        title: str,
        description: str = "",
        effort: int = 0,
        jira_url: str = "",
        pic: str = "",
        plan_start: Optional[datetime] = None,
        plan_end: Optional[datetime] = None,
    ) -> SubTask:
        """Create a subtask under an existing story.

        Raises
        ------
        NotFoundError
            If ``story_id`` does not reference a stored story.
        """
        with self._lock.write():
            if story_id not in self._stories:
                logger.warning("Rejected subtask for unknown story %s", story_id)
                raise NotFoundError("story", story_id)
            now = self._clock()
            subtask = SubTask(
                id=self._new_id(),
                story_id=story_id,
                title=title,
                description=description,
                effort=effort,
                jira_url=jira_url,
                pic=pic,
                plan_start=plan_start,
                plan_end=plan_end,
                status=Status.TODO,
                created_at=now,
                updated_at=now,
            )
            self._subtasks[subtask.id] = subtask
            logger.info("Created subtask %s in story %s", subtask.id, story_id)
            return replace(subtask)

    def get_subtask(self, subtask_id: str) -> SubTask:
        with self._lock.read():
            subtask = self._subtasks.get(subtask_id)
            if subtask is None:
                raise NotFoundError("subtask", subtask_id)
            return replace(subtask)

    def list_subtasks_by_story(self, story_id: str) -> List[SubTask]:
        with self._lock.read():
            return self._subtasks_of(story_id)

    def update_subtask_status(self, subtask_id: str, status: Status) -> SubTask:
        with self._lock.write():
            subtask = self._subtasks.get(subtask_id)
            if subtask is None:
                raise NotFoundError("subtask", subtask_id)
            previous = subtask.status
            apply_status(subtask, status, self._clock())
            logger.info("Subtask %s status %s -> %s", subtask_id, previous.value, subtask.status.value)
            return replace(subtask)

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------
    def dashboard_stats(self) -> DashboardStats:
        with self._lock.read():
            return build_dashboard_stats(self._backlogs, self._stories, self._subtasks)

    def counts(self) -> Tuple[int, int, int]:
        """Return ``(backlogs, stories, subtasks)`` sizes."""
        with self._lock.read():
            return len(self._backlogs), len(self._stories), len(self._subtasks)

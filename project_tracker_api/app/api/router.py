"""
Top‑level API router.

Aggregates the entity routers under the ``/api`` prefix applied by
``main.create_app``.  The welcome and health routes are mounted at the
application root separately.  Story and subtask listings are nested
under their parent (``/backlogs/{id}/stories``,
``/stories/{id}/subtasks``) and are defined in the parent's module.
"""

from fastapi import APIRouter

from .endpoints import backlogs, dashboard, stories, subtasks

router = APIRouter()

router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
router.include_router(backlogs.router, prefix="/backlogs", tags=["backlogs"])
router.include_router(stories.router, prefix="/stories", tags=["stories"])
router.include_router(subtasks.router, prefix="/subtasks", tags=["subtasks"])

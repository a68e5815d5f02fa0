"""
Status transition rules for stories and subtasks.

Every status change is accepted; the enumeration imposes no ordering.
What this module adds is the handling of the ``actual_start`` and
``actual_end`` markers, which are write‑once:

* the first transition into ``IN_PROGRESS`` stamps ``actual_start``;
* the first transition into ``DONE`` stamps ``actual_end``.

Later transitions never reset or re‑stamp them.  Moving straight from
``TODO`` to ``DONE`` stamps only ``actual_end`` and leaves
``actual_start`` empty; nothing back‑fills it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Union

from project_tracker_api.app.models import Status, Story, SubTask


def apply_status(record: Union[Story, SubTask], status: Status, now: datetime) -> None:
    """Set ``status`` on ``record`` in place and stamp its markers.

    The caller must hold the store's write lock.  ``status`` may be a
    ``Status`` member or its string value; anything else raises
    ``ValueError``.
    """
    status = Status(status)
    record.status = status
    record.updated_at = now
    if status is Status.IN_PROGRESS and record.actual_start is None:
        record.actual_start = now
    elif status is Status.DONE and record.actual_end is None:
        record.actual_end = now

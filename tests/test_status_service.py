from datetime import datetime, timedelta, timezone

import pytest

from project_tracker_api.app.models import Status, SubTask
from project_tracker_api.app.services.status_service import apply_status


T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _subtask() -> SubTask:
    return SubTask(
        id="st-1",
        story_id="s-1",
        title="t",
        description="",
        effort=1,
        jira_url="",
        pic="",
        plan_start=None,
        plan_end=None,
        status=Status.TODO,
        created_at=T0,
        updated_at=T0,
    )


def test_in_progress_stamps_actual_start_once():
    st = _subtask()
    first = T0 + timedelta(minutes=1)
    apply_status(st, Status.IN_PROGRESS, first)
    apply_status(st, Status.IN_PROGRESS, first + timedelta(minutes=5))
    assert st.actual_start == first
    assert st.actual_end is None
    assert st.updated_at == first + timedelta(minutes=5)


def test_done_from_todo_leaves_actual_start_empty():
    st = _subtask()
    done_at = T0 + timedelta(hours=1)
    apply_status(st, Status.DONE, done_at)
    assert st.status is Status.DONE
    assert st.actual_start is None
    assert st.actual_end == done_at


def test_reopening_does_not_restamp_markers():
    st = _subtask()
    apply_status(st, Status.IN_PROGRESS, T0 + timedelta(minutes=1))
    apply_status(st, Status.DONE, T0 + timedelta(minutes=2))
    apply_status(st, Status.TODO, T0 + timedelta(minutes=3))
    apply_status(st, Status.IN_PROGRESS, T0 + timedelta(minutes=4))
    apply_status(st, Status.DONE, T0 + timedelta(minutes=5))
    assert st.actual_start == T0 + timedelta(minutes=1)
    assert st.actual_end == T0 + timedelta(minutes=2)
    assert st.status is Status.DONE


def test_blocked_only_touches_status_and_updated_at():
    st = _subtask()
    apply_status(st, Status.BLOCKED, T0 + timedelta(minutes=1))
    assert st.status is Status.BLOCKED
    assert st.actual_start is None and st.actual_end is None


def test_string_values_are_accepted_and_unknown_rejected():
    st = _subtask()
    apply_status(st, "IN_PROGRESS", T0)
    assert st.status is Status.IN_PROGRESS
    with pytest.raises(ValueError):
        apply_status(st, "ARCHIVED", T0)

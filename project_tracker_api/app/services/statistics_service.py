"""
Aggregated statistics for the dashboard.

The dashboard reports total counts of backlogs, stories and subtasks
together with a status histogram for stories and one for subtasks.
Nothing is cached: every call walks the live maps once, so the cost is
linear in the number of stored entities.  Histograms are sparse and
only contain statuses that occur at least once.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping

from project_tracker_api.app.models import Backlog, DashboardStats, Status, Story, SubTask


def status_histogram(records: Iterable[Story | SubTask]) -> dict[Status, int]:
    """Count records per status, omitting statuses with no records."""
    return dict(Counter(record.status for record in records))


def build_dashboard_stats(
    backlogs: Mapping[str, Backlog],
    stories: Mapping[str, Story],
    subtasks: Mapping[str, SubTask],
) -> DashboardStats:
    """Compute a fresh ``DashboardStats`` from the store's maps.

    The caller must hold the store's read lock so that the totals and
    both histograms describe the same moment.
    """
    return DashboardStats(
        total_backlogs=len(backlogs),
        total_stories=len(stories),
        total_subtasks=len(subtasks),
        story_status=status_histogram(stories.values()),
        subtask_status=status_histogram(subtasks.values()),
    )

from project_tracker_api.app.models import Status
from project_tracker_api.app.services.statistics_service import build_dashboard_stats


def test_empty_store_has_zero_totals_and_empty_histograms():
    stats = build_dashboard_stats({}, {}, {})
    assert (stats.total_backlogs, stats.total_stories, stats.total_subtasks) == (0, 0, 0)
    assert stats.story_status == {}
    assert stats.subtask_status == {}


def test_dashboard_counts_and_sparse_histograms(store, clock):
    b1 = store.create_backlog("one")
    store.create_backlog("two")
    s1 = store.create_story(b1.id, "a")
    store.create_story(b1.id, "b")
    s3 = store.create_story(b1.id, "c")
    store.update_story_status(s3.id, Status.DONE)
    store.create_subtask(s1.id, "x")

    stats = store.dashboard_stats()

    assert stats.total_backlogs == 2
    assert stats.total_stories == 3
    assert stats.total_subtasks == 1
    assert stats.story_status == {Status.TODO: 2, Status.DONE: 1}
    assert Status.BLOCKED not in stats.story_status
    assert Status.IN_PROGRESS not in stats.story_status
    assert stats.subtask_status == {Status.TODO: 1}


def test_returned_stats_are_not_affected_by_later_mutations(store):
    backlog = store.create_backlog("one")
    story = store.create_story(backlog.id, "a")
    stats = store.dashboard_stats()

    store.update_story_status(story.id, Status.IN_PROGRESS)
    store.create_backlog("two")

    assert stats.total_backlogs == 1
    assert stats.story_status == {Status.TODO: 1}
    assert store.dashboard_stats().story_status == {Status.IN_PROGRESS: 1}

import requests
from fastapi.testclient import TestClient

from project_tracker_client import ProjectTrackerAPI


def _api(app) -> ProjectTrackerAPI:
    return ProjectTrackerAPI(base_url="http://testserver/", session=TestClient(app), timeout=None)


def test_client_round_trip(app):
    api = _api(app)

    backlog, error = api.create_backlog("Q3", "platform")
    assert error is None
    story, error = api.create_story(backlog["id"], "Login", effort_origin=3, pic="alice")
    assert error is None
    subtask, error = api.create_subtask(story["id"], "Callback", effort=1)
    assert error is None

    result, error = api.update_story_status(story["id"], "IN_PROGRESS")
    assert error is None
    assert result == {"message": "Status updated successfully"}
    _, error = api.update_subtask_status(subtask["id"], "BLOCKED")
    assert error is None

    fetched, _ = api.get_story(story["id"])
    assert fetched["status"] == "IN_PROGRESS"
    assert fetched["subtasks"][0]["status"] == "BLOCKED"
    assert api.get_subtask(subtask["id"])[0]["title"] == "Callback"
    assert len(api.get_backlog(backlog["id"])[0]["stories"]) == 1

    assert [b["id"] for b in api.list_backlogs()[0]] == [backlog["id"]]
    assert [s["id"] for s in api.list_stories(backlog["id"])[0]] == [story["id"]]
    assert [s["id"] for s in api.list_subtasks(story["id"])[0]] == [subtask["id"]]

    stats, error = api.dashboard()
    assert error is None
    assert stats["story_status"] == {"IN_PROGRESS": 1}
    assert api.health()[0]["status"] == "healthy"


def test_client_reports_envelope_errors(app):
    api = _api(app)
    data, error = api.get_backlog("missing")
    assert data is None
    assert error == {"status_code": 404, "message": "backlog not found"}

    listed, error = api.list_stories("missing")
    assert listed == [] and error is None


class _BrokenSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_client_reports_transport_errors():
    api = ProjectTrackerAPI(base_url="http://localhost:1", session=_BrokenSession())
    backlogs, error = api.list_backlogs()
    assert backlogs == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


class _RecordingSession:
    def __init__(self):
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        raise requests.ConnectionError("offline")


def test_client_passes_timeout_only_when_set():
    session = _RecordingSession()
    ProjectTrackerAPI(base_url="http://x", session=session, timeout=3).health()
    ProjectTrackerAPI(base_url="http://x", session=session, timeout=None).health()
    assert session.calls[0]["timeout"] == 3
    assert "timeout" not in session.calls[1]

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from project_tracker_api.app.main import create_app
from project_tracker_api.app.services.project_store import ProjectStore


class FakeClock:
    """Manually advanced clock so timestamp assertions are exact."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 9, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    return ProjectStore(clock=clock)


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)

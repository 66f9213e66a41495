from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.main import app, get_store
from app.store import TaskStore

START = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeClock:
    """
    Deterministic clock for the store.

    Hands out the queued timestamps first, then keeps stepping one second
    past the last value handed out.
    """

    def __init__(self, start=START, step=timedelta(seconds=1)):
        self.now = start
        self.step = step
        self.queued = []

    def __call__(self):
        if self.queued:
            self.now = self.queued.pop(0)
            return self.now
        value = self.now
        self.now = value + self.step
        return value


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def store(clock):
    return TaskStore(clock=clock)


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

"""
Shared fixtures for the study group tests.
"""

import pytest
from fastapi.testclient import TestClient

from study_groups.config.settings import Settings
from study_groups.main import create_app
from study_groups.services.domain.group_store import GroupStore
from study_groups.services.domain.message_view import MessageView

CREATOR = "creator-principal"
MEMBER = "member-principal"
OUTSIDER = "outsider-principal"


class FakeClock:
    """Millisecond clock under test control."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    """An initialized, empty group store."""
    group_store = GroupStore(clock=clock)
    group_store.initialize()
    return group_store


@pytest.fixture
def view(store):
    message_view = MessageView(store)
    message_view.initialize()
    return message_view


@pytest.fixture
def group_id(store):
    """A group created by CREATOR with MEMBER already joined."""
    new_id = store.create_group("Linear Algebra", "Weekly problem sets", CREATOR).unwrap()
    store.join_group(new_id, MEMBER).unwrap()
    return new_id


@pytest.fixture
def app_settings():
    return Settings(seed_demo_data=False, max_group_members=3, default_page_size=2)


@pytest.fixture
def client(app_settings, clock):
    """Test client over a fresh application and store."""
    app = create_app(app_settings, clock=clock)
    with TestClient(app) as test_client:
        yield test_client


def as_caller(principal: str) -> dict:
    """Request headers identifying the caller."""
    return {"X-Principal": principal}

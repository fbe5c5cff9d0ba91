"""
Tests for MessageView pagination.
"""

import pytest

from study_groups.services.base import NotFoundError, ValidationError
from tests.conftest import CREATOR, MEMBER


@pytest.fixture
def posted(store, group_id, clock):
    """Post ten messages and return their contents in order."""
    contents = []
    for i in range(10):
        content = f"message {i}"
        store.post_message(group_id, content, MEMBER if i % 2 else CREATOR).unwrap()
        contents.append(content)
        clock.advance()
    return contents


class TestGetGroupDiscussions:
    """Test windowed reads of a group's discussion."""

    @pytest.mark.parametrize("skip, limit", [(0, 3), (3, 3), (8, 5), (0, 10), (0, 100), (9, 1)])
    def test_returns_exact_slice(self, view, group_id, posted, skip, limit):
        page = view.get_group_discussions(group_id, skip, limit).unwrap()

        assert [m.content for m in page] == posted[skip:skip + limit]

    @pytest.mark.parametrize("skip", [10, 11, 1000])
    def test_skip_past_end_is_empty(self, view, group_id, posted, skip):
        result = view.get_group_discussions(group_id, skip, 5)

        assert result.success
        assert result.data == []
        assert result.metadata["total"] == 10

    def test_zero_limit_is_empty(self, view, group_id, posted):
        assert view.get_group_discussions(group_id, 0, 0).unwrap() == []

    def test_empty_log(self, view, group_id):
        assert view.get_group_discussions(group_id, 0, 10).unwrap() == []

    def test_round_trip_returns_all_in_post_order(self, store, view, group_id, clock):
        for i in range(25):
            store.post_message(group_id, f"note {i}", CREATOR)
            clock.advance(3)

        page = view.get_group_discussions(group_id, 0, 25).unwrap()

        assert [m.content for m in page] == [f"note {i}" for i in range(25)]
        assert all(m.sender == CREATOR for m in page)

    def test_repeated_reads_are_identical(self, view, group_id, posted):
        first = view.get_group_discussions(group_id, 2, 4).unwrap()
        second = view.get_group_discussions(group_id, 2, 4).unwrap()

        assert first == second

    def test_page_is_not_a_live_view(self, store, view, group_id, posted):
        page = view.get_group_discussions(group_id, 0, 20).unwrap()

        store.post_message(group_id, "late arrival", CREATOR)

        assert len(page) == 10
        assert page[-1].content == "message 9"

    def test_unknown_group(self, view):
        result = view.get_group_discussions(99, 0, 10)

        assert isinstance(result.error, NotFoundError)

    @pytest.mark.parametrize("skip, limit", [(-1, 5), (0, -1)])
    def test_negative_window(self, view, group_id, skip, limit):
        result = view.get_group_discussions(group_id, skip, limit)

        assert isinstance(result.error, ValidationError)

"""Tests for ordered sub-resource helpers."""

import pytest

from syntax_club.models.enums import MoveDirection
from syntax_club.utils.ordering import find_index, move_by_id, move_item, reorder_by_ids


@pytest.fixture
def items():
    return [{"id": "a"}, {"id": "b"}, {"id": "c"}]


def ids(items):
    return [item["id"] for item in items]


class TestMoveItem:
    def test_moves_and_copies(self, items):
        result = move_item(items, 0, 2)
        assert ids(result) == ["b", "c", "a"]
        assert ids(items) == ["a", "b", "c"]

    @pytest.mark.parametrize("from_index, to_index", [(0, -1), (2, 3), (5, 0)])
    def test_out_of_range_is_unchanged(self, items, from_index, to_index):
        assert move_item(items, from_index, to_index) == items


class TestMoveById:
    def test_up_and_down(self, items):
        assert ids(move_by_id(items, "b", MoveDirection.UP)) == ["b", "a", "c"]
        assert ids(move_by_id(items, "b", MoveDirection.DOWN)) == ["a", "c", "b"]

    def test_edges_are_noop(self, items):
        assert ids(move_by_id(items, "a", MoveDirection.UP)) == ["a", "b", "c"]
        assert ids(move_by_id(items, "c", MoveDirection.DOWN)) == ["a", "b", "c"]

    def test_unknown_id(self, items):
        with pytest.raises(KeyError):
            move_by_id(items, "z", MoveDirection.UP)


class TestReorderByIds:
    def test_reorders(self, items):
        assert ids(reorder_by_ids(items, ["c", "a", "b"])) == ["c", "a", "b"]

    @pytest.mark.parametrize("order", [["a", "b"], ["a", "b", "c", "c"], ["a", "b", "z"], ["a", "a", "b"]])
    def test_rejects_non_permutations(self, items, order):
        with pytest.raises(ValueError):
            reorder_by_ids(items, order)

    def test_empty_list(self):
        assert reorder_by_ids([], []) == []


def test_find_index_by_key(items):
    assert find_index(items, "c") == 2
    assert find_index([{"name": "Acme"}], "Acme", key="name") == 0
    assert find_index(items, "missing") is None

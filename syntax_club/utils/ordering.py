"""Helpers for ordered sub-resource lists (guidelines, prizes, guests)."""

from typing import Any, Dict, List, Optional, Sequence

from syntax_club.models.enums import MoveDirection


def move_item(items: Sequence[Any], from_index: int, to_index: int) -> List[Any]:
    """Return a copy with one item moved; out-of-range targets leave the order unchanged."""
    result = list(items)
    if not (0 <= from_index < len(result)) or not (0 <= to_index < len(result)):
        return result
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return result


def find_index(items: Sequence[Dict[str, Any]], item_id: str, key: str = "id") -> Optional[int]:
    for index, item in enumerate(items):
        if str(item.get(key)) == str(item_id):
            return index
    return None


def move_by_id(items: Sequence[Dict[str, Any]], item_id: str, direction: MoveDirection) -> List[Dict[str, Any]]:
    """Move one item a single step up or down.

    Raises KeyError when the id is unknown.
    """
    index = find_index(items, item_id)
    if index is None:
        raise KeyError(item_id)
    step = -1 if direction == MoveDirection.UP else 1
    return move_item(items, index, index + step)


def reorder_by_ids(items: Sequence[Dict[str, Any]], order: Sequence[str], key: str = "id") -> List[Dict[str, Any]]:
    """Rearrange items to follow ``order``.

    Raises ValueError unless ``order`` names every existing id exactly once.
    """
    by_id = {str(item.get(key)): item for item in items}
    wanted = [str(item_id) for item_id in order]
    if len(by_id) != len(items) or sorted(wanted) != sorted(by_id):
        raise ValueError("order must be a permutation of the existing ids")
    return [by_id[item_id] for item_id in wanted]

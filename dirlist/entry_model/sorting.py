"""Entry ordering by name, modification time, or size.

Name order is ascending by default while time and size default to
newest/largest first. ``reverse`` flips whichever direction is active.
Equal keys keep their traversal order in both directions.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from .types import Entry


class SortKey(Enum):
    NAME = "name"
    TIME = "time"
    SIZE = "size"


def resolve_sort_key(sort_by_time: bool, sort_by_size: bool) -> SortKey:
    """Pick the active sort key; time wins when both flags are set."""
    if sort_by_time:
        return SortKey.TIME
    if sort_by_size:
        return SortKey.SIZE
    return SortKey.NAME


def _name_key(entry: Entry) -> str:
    return entry.name.lower()


def _time_key(entry: Entry) -> int:
    return entry.mtime_ns


def _size_key(entry: Entry) -> int:
    return entry.size


# key function and whether the default presentation is descending
_SORT_RULES: dict[SortKey, tuple[Callable[[Entry], object], bool]] = {
    SortKey.NAME: (_name_key, False),
    SortKey.TIME: (_time_key, True),
    SortKey.SIZE: (_size_key, True),
}


def sort_entries(entries: Sequence[Entry], key: SortKey = SortKey.NAME, reverse: bool = False) -> list[Entry]:
    """Return ``entries`` ordered by ``key`` as a new list."""
    key_func, descending_by_default = _SORT_RULES[key]
    return sorted(entries, key=key_func, reverse=descending_by_default != reverse)


__all__ = ["SortKey", "resolve_sort_key", "sort_entries"]

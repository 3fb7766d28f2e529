"""Rendering of listing entries as compact names or long detail lines."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from .attributes import AttributeModel, current_attribute_model
from .types import Entry

KB = 1024
MB = KB * 1024
GB = MB * 1024

NAME_FIELD_WIDTH = 20
SIZE_FIELD_WIDTH = 10
TIMESTAMP_FIELD_WIDTH = 15
TIMESTAMP_FORMAT = "%b %d %H:%M"


def format_size(size: int) -> str:
    """Scale ``size`` to the largest of G/M/K it reaches, else plain bytes."""
    if size >= GB:
        return f"{size / GB:.1f}G"
    if size >= MB:
        return f"{size / MB:.1f}M"
    if size >= KB:
        return f"{size / KB:.1f}K"
    return f"{size}B"


def format_bytes(size: int) -> str:
    return f"{size}B"


def format_timestamp(mtime_ns: int) -> str:
    """Render a nanosecond timestamp in local time, e.g. ``Mar 04 17:09``."""
    return datetime.fromtimestamp(mtime_ns / 1_000_000_000).strftime(TIMESTAMP_FORMAT)


def format_long_entry(entry: Entry, human_readable: bool, attribute_model: AttributeModel) -> str:
    size_text = format_size(entry.size) if human_readable else format_bytes(entry.size)
    return (
        f"{entry.name:<{NAME_FIELD_WIDTH}}  "
        f"{size_text:>{SIZE_FIELD_WIDTH}} size  "
        f"modified: {format_timestamp(entry.mtime_ns):<{TIMESTAMP_FIELD_WIDTH}} "
        f"attributes: {attribute_model.summarize(entry.attribute)}"
    )


def format_entries(
    entries: Sequence[Entry],
    long_format: bool,
    human_readable: bool = False,
    attribute_model: AttributeModel | None = None,
) -> list[str]:
    """Render one display string per entry, in input order."""
    if not long_format:
        return [entry.name for entry in entries]
    model = attribute_model if attribute_model is not None else current_attribute_model()
    return [format_long_entry(entry, human_readable, model) for entry in entries]


__all__ = [
    "KB",
    "MB",
    "GB",
    "format_size",
    "format_bytes",
    "format_timestamp",
    "format_long_entry",
    "format_entries",
]

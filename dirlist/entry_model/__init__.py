"""Entry pipeline primitives for directory listings.

This package contains the non-UI listing stages:
- traversal of one directory level or a whole subtree
- normalization of raw entries into immutable ``Entry`` records
- platform attribute models (POSIX mode, Windows flags, unknown)
- visibility filtering, sorting, and text formatting
"""

from __future__ import annotations

from .attributes import (
    AttributeModel,
    POSIX_ATTRIBUTES,
    UNKNOWN_ATTRIBUTES,
    WINDOWS_ATTRIBUTES,
    PosixAttributes,
    UnknownAttributes,
    WindowsAttributes,
    attribute_model_for,
    current_attribute_model,
)
from .errors import ListingError, MetadataError, TraversalError
from .formatting import format_entries, format_size, format_timestamp
from .fs import collect_entries, display_name, normalize_entry, scan_directory, walk_entries
from .sorting import SortKey, resolve_sort_key, sort_entries
from .types import Entry
from .visibility import filter_visible, is_visible

__all__ = [
    "Entry",
    "ListingError",
    "TraversalError",
    "MetadataError",
    "AttributeModel",
    "PosixAttributes",
    "WindowsAttributes",
    "UnknownAttributes",
    "POSIX_ATTRIBUTES",
    "WINDOWS_ATTRIBUTES",
    "UNKNOWN_ATTRIBUTES",
    "attribute_model_for",
    "current_attribute_model",
    "display_name",
    "scan_directory",
    "walk_entries",
    "normalize_entry",
    "collect_entries",
    "filter_visible",
    "is_visible",
    "SortKey",
    "resolve_sort_key",
    "sort_entries",
    "format_entries",
    "format_size",
    "format_timestamp",
]

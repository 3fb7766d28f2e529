"""Filesystem traversal and metadata normalization for directory listings."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable, Iterator
from pathlib import Path

from .attributes import AttributeModel, current_attribute_model
from .errors import ListingError, MetadataError, TraversalError, describe_os_error
from .types import Entry

logger = logging.getLogger(__name__)


def scan_directory(directory: Path) -> list[os.DirEntry[str]]:
    """Return the immediate children of ``directory`` in scan order.

    Raises ``TraversalError`` when ``directory`` is missing, unreadable, or
    not a directory.
    """
    try:
        with os.scandir(directory) as entries:
            return list(entries)
    except OSError as exc:
        raise TraversalError(directory, describe_os_error(exc)) from exc


def display_name(name: str) -> str:
    """Return ``name`` with undecodable filesystem bytes replaced by U+FFFD."""
    return os.fsencode(name).decode("utf-8", "replace")


def _is_directory(dir_entry: os.DirEntry[str]) -> bool:
    try:
        return dir_entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def walk_entries(
    root: Path,
    recursive: bool,
    on_error: Callable[[ListingError], None],
) -> Iterator[os.DirEntry[str]]:
    """Yield raw entries below ``root`` in pre-order.

    Without ``recursive`` only direct children are yielded. Symlinked
    directories are listed but never descended into. The root itself is never
    yielded; failing to open it raises ``TraversalError`` before anything is
    produced, while unreadable subdirectories are passed to ``on_error`` and
    skipped.
    """
    pending: list[Iterator[os.DirEntry[str]]] = [iter(scan_directory(root))]
    while pending:
        child = next(pending[-1], None)
        if child is None:
            pending.pop()
            continue
        yield child
        if recursive and _is_directory(child):
            try:
                pending.append(iter(scan_directory(Path(child.path))))
            except TraversalError as exc:
                on_error(exc)


def normalize_entry(dir_entry: os.DirEntry[str], attribute_model: AttributeModel | None = None) -> Entry:
    """Build an ``Entry`` from one raw entry's own (non-followed) metadata."""
    model = attribute_model if attribute_model is not None else current_attribute_model()
    try:
        st = dir_entry.stat(follow_symlinks=False)
    except OSError as exc:
        raise MetadataError(dir_entry.path, describe_os_error(exc)) from exc

    name = display_name(dir_entry.name)
    if stat.S_ISDIR(st.st_mode):
        name = f"{name}{os.sep}"
    return Entry(
        name=name,
        mtime_ns=int(st.st_mtime_ns),
        size=int(st.st_size),
        attribute=model.extract(st),
    )


def collect_entries(
    root: Path,
    recursive: bool = False,
    attribute_model: AttributeModel | None = None,
) -> tuple[list[Entry], list[ListingError]]:
    """Traverse ``root`` and normalize every reachable entry.

    Returns ``(entries, errors)`` where ``errors`` holds the per-entry
    failures that were skipped. Raises ``TraversalError`` when ``root``
    itself cannot be listed.
    """
    model = attribute_model if attribute_model is not None else current_attribute_model()
    entries: list[Entry] = []
    errors: list[ListingError] = []

    def record_error(exc: ListingError) -> None:
        logger.warning("%s '%s': %s", exc.kind, display_name(str(exc.path)), exc.reason)
        errors.append(exc)

    for dir_entry in walk_entries(root, recursive, record_error):
        try:
            entries.append(normalize_entry(dir_entry, model))
        except MetadataError as exc:
            record_error(exc)

    logger.debug("collected %d entries from %s (%d skipped)", len(entries), root, len(errors))
    return entries, errors


__all__ = [
    "display_name",
    "scan_directory",
    "walk_entries",
    "normalize_entry",
    "collect_entries",
]

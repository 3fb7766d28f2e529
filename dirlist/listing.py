"""Per-path listing runs and path-group output.

Each requested path goes through traverse, filter, sort, and format on its
own; a failure in one path never hides output already written for another.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .entry_model import (
    AttributeModel,
    Entry,
    ListingError,
    TraversalError,
    collect_entries,
    current_attribute_model,
    display_name,
    filter_visible,
    format_entries,
    sort_entries,
)
from .options import ListingOptions
from .ui_theme import ListingTheme, PLAIN_THEME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathListing:
    """Outcome of one path's pipeline run."""

    path: str
    entries: tuple[Entry, ...] = ()
    lines: tuple[str, ...] = ()
    errors: tuple[ListingError, ...] = ()
    failure: TraversalError | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and not self.errors


def list_path(
    path: str,
    options: ListingOptions,
    attribute_model: AttributeModel | None = None,
) -> PathListing:
    """Run the entry pipeline for ``path``.

    A root that cannot be opened is returned as ``failure`` rather than
    raised, so callers can keep going with later paths.
    """
    model = attribute_model if attribute_model is not None else current_attribute_model()
    try:
        collected, errors = collect_entries(Path(path), options.recursive, model)
    except TraversalError as exc:
        return PathListing(path=path, failure=exc)

    visible = filter_visible(collected, options.show_all, model)
    ordered = sort_entries(visible, options.sort_key, options.reverse)
    lines = format_entries(ordered, options.long_format, options.human_readable, model)
    return PathListing(
        path=path,
        entries=tuple(ordered),
        lines=tuple(lines),
        errors=tuple(errors),
    )


def decorate_lines(entries: Sequence[Entry], lines: Sequence[str], theme: ListingTheme) -> list[str]:
    """Color the leading directory name of each rendered line."""
    if not theme.directory:
        return list(lines)
    out: list[str] = []
    for entry, line in zip(entries, lines):
        if entry.is_dir and line.startswith(entry.name):
            line = theme.paint(entry.name, theme.directory) + line[len(entry.name) :]
        out.append(line)
    return out


def render_body(listing: PathListing, options: ListingOptions, theme: ListingTheme = PLAIN_THEME) -> str:
    """Join one path's rendered lines with the mode's separator."""
    return options.separator.join(decorate_lines(listing.entries, listing.lines, theme))


def write_listings(
    options: ListingOptions,
    out: TextIO,
    theme: ListingTheme = PLAIN_THEME,
    attribute_model: AttributeModel | None = None,
) -> int:
    """List every requested path to ``out`` and return the exit status.

    With explicit paths each group gets a ``<path>:`` header and a trailing
    blank line. The status is ``1`` when any path or entry failed.
    """
    status = 0
    show_headers = options.explicit_paths
    for path in options.target_paths():
        if show_headers:
            out.write(theme.paint(f"{display_name(path)}:", theme.header) + "\n")
            out.flush()

        listing = list_path(path, options, attribute_model)
        if listing.failure is not None:
            failure = listing.failure
            logger.warning("%s '%s': %s", failure.kind, display_name(str(failure.path)), failure.reason)
            status = 1
        else:
            out.write(render_body(listing, options, theme) + "\n")
            if listing.errors:
                status = 1

        if show_headers:
            out.write("\n")
        out.flush()
    return status


__all__ = [
    "PathListing",
    "list_path",
    "decorate_lines",
    "render_body",
    "write_listings",
]

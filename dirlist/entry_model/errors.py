"""Error types raised while traversing and normalizing directory entries."""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for recoverable listing failures tied to one path."""

    kind = "error"

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class TraversalError(ListingError):
    """A path could not be opened as a directory."""

    kind = "cannot open directory"


class MetadataError(ListingError):
    """Metadata for one entry could not be read."""

    kind = "cannot read metadata"


def describe_os_error(exc: OSError) -> str:
    """Return the short human reason for ``exc`` without the path suffix."""
    if exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


__all__ = [
    "ListingError",
    "TraversalError",
    "MetadataError",
    "describe_os_error",
]

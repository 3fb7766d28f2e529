"""Domain datatypes for normalized directory-listing entries."""

from __future__ import annotations

import os
from dataclasses import dataclass

DIR_MARKERS = tuple({"/", os.sep})


@dataclass(frozen=True)
class Entry:
    """One listed filesystem object with platform-independent metadata.

    ``name`` is the base name, with a single trailing separator when the
    object is a directory. ``attribute`` keeps the raw platform bits so the
    filter and formatter can interpret them per attribute model.
    """

    name: str
    mtime_ns: int
    size: int
    attribute: int = 0

    @property
    def is_dir(self) -> bool:
        """Return whether ``name`` carries the directory marker."""
        return len(self.name) > 1 and self.name.endswith(DIR_MARKERS)


__all__ = ["DIR_MARKERS", "Entry"]

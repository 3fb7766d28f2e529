"""Platform attribute models for raw ``Entry.attribute`` bits.

Each model answers the same two questions about a bit field: whether it marks
an entry as hidden, and how to summarize it in long listings. The active model
is picked from the running platform by ``current_attribute_model``.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import Protocol

FILE_ATTRIBUTE_READONLY = 0x1
FILE_ATTRIBUTE_HIDDEN = 0x2
FILE_ATTRIBUTE_SYSTEM = 0x4
FILE_ATTRIBUTE_ARCHIVE = 0x20

POSIX_PERMISSION_MASK = 0o777


class AttributeModel(Protocol):
    """Interpretation of raw attribute bits for one platform family."""

    name: str

    def extract(self, st: os.stat_result) -> int:
        """Return the raw attribute bits carried by ``st``."""
        ...

    def is_hidden(self, bits: int) -> bool:
        """Return whether ``bits`` carry a hidden flag."""
        ...

    def summarize(self, bits: int) -> str:
        """Return the long-listing attribute summary for ``bits``."""
        ...


@dataclass(frozen=True)
class PosixAttributes:
    """POSIX permission mode bits (owner/group/other plus suid/sgid/sticky)."""

    name: str = "posix"

    def extract(self, st: os.stat_result) -> int:
        return stat.S_IMODE(st.st_mode)

    def is_hidden(self, bits: int) -> bool:
        return False

    def summarize(self, bits: int) -> str:
        return f"{bits & POSIX_PERMISSION_MASK:03o}"


@dataclass(frozen=True)
class WindowsAttributes:
    """Windows ``FILE_ATTRIBUTE_*`` flag bitmask."""

    name: str = "windows"
    flag_names: tuple[tuple[int, str], ...] = (
        (FILE_ATTRIBUTE_READONLY, "READONLY"),
        (FILE_ATTRIBUTE_HIDDEN, "HIDDEN"),
        (FILE_ATTRIBUTE_SYSTEM, "SYSTEM"),
        (FILE_ATTRIBUTE_ARCHIVE, "ARCHIVE"),
    )

    def extract(self, st: os.stat_result) -> int:
        return int(getattr(st, "st_file_attributes", 0))

    def is_hidden(self, bits: int) -> bool:
        return bool(bits & FILE_ATTRIBUTE_HIDDEN)

    def summarize(self, bits: int) -> str:
        present = [label for flag, label in self.flag_names if bits & flag]
        if not present:
            return "NORMAL"
        return ", ".join(present)


@dataclass(frozen=True)
class UnknownAttributes:
    """Fallback for platforms without a known attribute model."""

    name: str = "unknown"

    def extract(self, st: os.stat_result) -> int:
        return 0

    def is_hidden(self, bits: int) -> bool:
        return False

    def summarize(self, bits: int) -> str:
        return "UNKNOWN"


POSIX_ATTRIBUTES = PosixAttributes()
WINDOWS_ATTRIBUTES = WindowsAttributes()
UNKNOWN_ATTRIBUTES = UnknownAttributes()


def attribute_model_for(os_name: str) -> AttributeModel:
    """Return the attribute model for an ``os.name`` value."""
    if os_name == "posix":
        return POSIX_ATTRIBUTES
    if os_name == "nt":
        return WINDOWS_ATTRIBUTES
    return UNKNOWN_ATTRIBUTES


def current_attribute_model() -> AttributeModel:
    """Return the attribute model for the running interpreter's platform."""
    return attribute_model_for(os.name)


__all__ = [
    "FILE_ATTRIBUTE_READONLY",
    "FILE_ATTRIBUTE_HIDDEN",
    "FILE_ATTRIBUTE_SYSTEM",
    "FILE_ATTRIBUTE_ARCHIVE",
    "AttributeModel",
    "PosixAttributes",
    "WindowsAttributes",
    "UnknownAttributes",
    "POSIX_ATTRIBUTES",
    "WINDOWS_ATTRIBUTES",
    "UNKNOWN_ATTRIBUTES",
    "attribute_model_for",
    "current_attribute_model",
]

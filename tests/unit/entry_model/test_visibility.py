"""Tests for dotfile and hidden-attribute filtering."""

from __future__ import annotations

import unittest

from dirlist.entry_model import (
    POSIX_ATTRIBUTES,
    UNKNOWN_ATTRIBUTES,
    WINDOWS_ATTRIBUTES,
    Entry,
    filter_visible,
)
from dirlist.entry_model.attributes import FILE_ATTRIBUTE_ARCHIVE, FILE_ATTRIBUTE_HIDDEN


def _entry(name: str, attribute: int = 0) -> Entry:
    return Entry(name=name, mtime_ns=0, size=0, attribute=attribute)


class VisibilityFilterTests(unittest.TestCase):
    def test_dotfiles_are_dropped_unless_show_all(self) -> None:
        entries = [_entry(".hidden"), _entry("visible"), _entry(".config/")]

        self.assertEqual(filter_visible(entries, show_all=False, attribute_model=POSIX_ATTRIBUTES), [entries[1]])
        self.assertEqual(filter_visible(entries, show_all=True, attribute_model=POSIX_ATTRIBUTES), entries)

    def test_filter_preserves_input_order(self) -> None:
        entries = [_entry("zeta"), _entry(".dot"), _entry("alpha"), _entry("mid")]

        filtered = filter_visible(entries, show_all=False, attribute_model=UNKNOWN_ATTRIBUTES)

        self.assertEqual([entry.name for entry in filtered], ["zeta", "alpha", "mid"])

    def test_windows_hidden_flag_is_dropped_without_dot_prefix(self) -> None:
        entries = [
            _entry("desktop.ini", FILE_ATTRIBUTE_HIDDEN | FILE_ATTRIBUTE_ARCHIVE),
            _entry("notes.txt", FILE_ATTRIBUTE_ARCHIVE),
        ]

        filtered = filter_visible(entries, show_all=False, attribute_model=WINDOWS_ATTRIBUTES)

        self.assertEqual([entry.name for entry in filtered], ["notes.txt"])
        self.assertEqual(len(filter_visible(entries, show_all=True, attribute_model=WINDOWS_ATTRIBUTES)), 2)

    def test_hidden_bit_is_ignored_on_posix(self) -> None:
        entries = [_entry("plain", FILE_ATTRIBUTE_HIDDEN)]

        self.assertEqual(filter_visible(entries, show_all=False, attribute_model=POSIX_ATTRIBUTES), entries)

    def test_show_all_returns_a_new_list(self) -> None:
        entries = (_entry("a"), _entry(".b"))

        result = filter_visible(entries, show_all=True)

        self.assertEqual(result, list(entries))
        self.assertIsInstance(result, list)


if __name__ == "__main__":
    unittest.main()

"""Tests for listing option resolution."""

from __future__ import annotations

import unittest

from dirlist.cli import build_parser
from dirlist.entry_model import SortKey
from dirlist.options import ListingOptions


class ListingOptionsTests(unittest.TestCase):
    def test_defaults_list_current_directory_by_name(self) -> None:
        options = ListingOptions()

        self.assertEqual(options.target_paths(), (".",))
        self.assertFalse(options.explicit_paths)
        self.assertIs(options.sort_key, SortKey.NAME)
        self.assertEqual(options.separator, " ")

    def test_long_format_uses_newline_separator(self) -> None:
        self.assertEqual(ListingOptions(long_format=True).separator, "\n")

    def test_from_namespace_maps_short_flags(self) -> None:
        args = build_parser().parse_args(["-a", "-R", "-t", "-S", "-r", "-l", "-H", "one", "two"])

        options = ListingOptions.from_namespace(args)

        self.assertEqual(options.paths, ("one", "two"))
        self.assertTrue(options.show_all)
        self.assertTrue(options.recursive)
        self.assertTrue(options.reverse)
        self.assertTrue(options.long_format)
        self.assertTrue(options.human_readable)
        self.assertIs(options.sort_key, SortKey.TIME)

    def test_persisted_defaults_only_switch_flags_on(self) -> None:
        args = build_parser().parse_args(["-l"])

        options = ListingOptions.from_namespace(
            args,
            defaults={"show_all": True, "long_format": False, "human_readable": True},
            theme="ocean",
        )

        self.assertTrue(options.show_all)
        self.assertTrue(options.long_format)
        self.assertTrue(options.human_readable)
        self.assertFalse(options.no_color)
        self.assertEqual(options.theme, "ocean")

    def test_cli_theme_overrides_persisted_theme(self) -> None:
        args = build_parser().parse_args(["--theme", "default"])

        self.assertEqual(ListingOptions.from_namespace(args, theme="ocean").theme, "default")


if __name__ == "__main__":
    unittest.main()

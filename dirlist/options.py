"""Listing options shared by the CLI and the per-path pipeline."""

from __future__ import annotations

import argparse
from collections.abc import Mapping
from dataclasses import dataclass

from .entry_model.sorting import SortKey, resolve_sort_key


@dataclass(frozen=True)
class ListingOptions:
    """Resolved flags for one invocation.

    An empty ``paths`` tuple means the current working directory.
    """

    paths: tuple[str, ...] = ()
    show_all: bool = False
    recursive: bool = False
    sort_by_time: bool = False
    sort_by_size: bool = False
    reverse: bool = False
    long_format: bool = False
    human_readable: bool = False
    no_color: bool = False
    theme: str | None = None

    @property
    def sort_key(self) -> SortKey:
        return resolve_sort_key(self.sort_by_time, self.sort_by_size)

    @property
    def separator(self) -> str:
        """Return the join string between rendered entries."""
        return "\n" if self.long_format else " "

    @property
    def explicit_paths(self) -> bool:
        return bool(self.paths)

    def target_paths(self) -> tuple[str, ...]:
        """Return requested paths, defaulting to the current directory."""
        return self.paths if self.paths else (".",)

    @classmethod
    def from_namespace(
        cls,
        args: argparse.Namespace,
        defaults: Mapping[str, bool] | None = None,
        theme: str | None = None,
    ) -> ListingOptions:
        """Combine parsed CLI flags with persisted defaults.

        Persisted defaults can only switch flags on; a flag given on the
        command line is always honored.
        """
        persisted = defaults or {}

        def flag(name: str) -> bool:
            return bool(getattr(args, name, False)) or bool(persisted.get(name, False))

        return cls(
            paths=tuple(args.paths or ()),
            show_all=flag("show_all"),
            recursive=bool(args.recursive),
            sort_by_time=bool(args.sort_by_time),
            sort_by_size=bool(args.sort_by_size),
            reverse=bool(args.reverse),
            long_format=flag("long_format"),
            human_readable=flag("human_readable"),
            no_color=flag("no_color"),
            theme=args.theme if args.theme is not None else theme,
        )


__all__ = ["ListingOptions"]

"""Command-line front door for dirlist.

Parses listing flags, merges persisted defaults, configures warning output,
and runs the per-path listing loop.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from . import config
from .listing import write_listings
from .options import ListingOptions
from .ui_theme import available_theme_names, resolve_theme

EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.APP_NAME,
        description="List directory contents with optional sorting and detail.",
    )
    parser.add_argument("paths", nargs="*", help="Paths of directories to list. Defaults to the current directory.")
    parser.add_argument("-a", "--all", dest="show_all", action="store_true", help="Show all files including hidden files.")
    parser.add_argument("-R", "--recursive", action="store_true", help="List directories recursively.")
    parser.add_argument("-t", "--sort-by-time", action="store_true", help="Sort by modification time, newest first.")
    parser.add_argument("-S", "--sort-by-size", action="store_true", help="Sort by size, largest first.")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the order of the sort.")
    parser.add_argument("-l", "--long-format", action="store_true", help="Long format listing.")
    parser.add_argument("-H", "--human-readable", action="store_true", help="Human-readable sizes in long format.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist -a/-l/-H/--no-color/--theme as defaults for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def configure_logging(verbose: bool) -> logging.Logger:
    """Route package log records to stderr, prefixed so they stand apart."""
    package_logger = logging.getLogger(__package__ or config.APP_NAME)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(f"{config.APP_NAME}: %(levelname)s: %(message)s"))
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    return package_logger


def _color_disabled(options: ListingOptions) -> bool:
    if options.no_color or os.environ.get("NO_COLOR"):
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return not (callable(isatty) and isatty())


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush stays quiet."""
    try:
        fileno = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fileno)
    os.close(devnull)


def _save_defaults(args: argparse.Namespace, package_logger: logging.Logger) -> None:
    flags = {key: bool(getattr(args, key)) for key in config.DEFAULT_FLAG_KEYS}
    saved = config.save_default_flags(flags)
    if saved and args.theme is not None:
        saved = config.save_theme_name(args.theme)
    if not saved:
        package_logger.warning("could not write config '%s'", config.CONFIG_PATH)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI arguments, list each requested path, and return exit status.

    Returns ``0`` when everything listed cleanly, ``1`` when any path or
    entry failed or stdout closed early, and ``130`` when interrupted.
    """
    args = build_parser().parse_args(argv)
    package_logger = configure_logging(args.verbose)

    if args.save_defaults:
        _save_defaults(args, package_logger)

    options = ListingOptions.from_namespace(
        args,
        defaults=config.load_default_flags(),
        theme=config.load_theme_name(),
    )
    theme = resolve_theme(options.theme, no_color=_color_disabled(options))

    try:
        return write_listings(options, sys.stdout, theme)
    except KeyboardInterrupt:
        sys.stdout.flush()
        return EXIT_INTERRUPTED
    except BrokenPipeError:
        _silence_stdout()
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

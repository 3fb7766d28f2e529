"""Listing color themes and selection helpers.

Themes are ANSI palettes for path headers and directory names.
Formatting never embeds color; palettes are applied to finished lines.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used when printing listings."""

    name: str
    reset: str
    header: str
    directory: str

    def paint(self, text: str, color: str) -> str:
        """Wrap ``text`` in ``color`` when the palette defines one."""
        if not color:
            return text
        return f"{color}{text}{self.reset}"


DEFAULT_THEME = ListingTheme(
    name="default",
    reset="\033[0m",
    header="\033[32m",
    directory="\033[1;34m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    directory="\033[1;38;5;39m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    reset="",
    header="",
    directory="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]

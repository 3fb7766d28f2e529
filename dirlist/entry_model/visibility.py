"""Dotfile and hidden-attribute suppression for listing entries."""

from __future__ import annotations

from collections.abc import Sequence

from .attributes import AttributeModel, current_attribute_model
from .types import Entry


def is_visible(entry: Entry, attribute_model: AttributeModel) -> bool:
    """Return whether ``entry`` is shown when hidden entries are suppressed."""
    if entry.name.startswith("."):
        return False
    return not attribute_model.is_hidden(entry.attribute)


def filter_visible(
    entries: Sequence[Entry],
    show_all: bool,
    attribute_model: AttributeModel | None = None,
) -> list[Entry]:
    """Drop hidden entries unless ``show_all``, preserving input order."""
    if show_all:
        return list(entries)
    model = attribute_model if attribute_model is not None else current_attribute_model()
    return [entry for entry in entries if is_visible(entry, model)]


__all__ = ["is_visible", "filter_visible"]

"""Diagnostics for text that may not fit a target encoding."""

from __future__ import annotations

from ..exceptions import UnmappableCharacterError
from ..registry import EncodingRegistry, resolve
from ..validation import validate_label, validate_text_input
from .pipeline import encode


def find_unmappable(text: str, label: str, registry: EncodingRegistry | None = None) -> list[str]:
    """Get the characters of ``text`` that the target encoding cannot represent.

    Useful for warning users before a strict encode fails.

    Args:
        text: Text to check.
        label: Target encoding label.
        registry: Registry to resolve against, the default one if omitted.

    Returns:
        Unique unmappable characters, in order of first appearance.

    Raises:
        UnsupportedLabelError: If the label does not resolve.
    """
    validate_text_input(text)
    validate_label(label)
    definition = resolve(label, registry)
    unmappable: list[str] = []

    for char in dict.fromkeys(text):
        if "\ud800" <= char <= "\udfff":
            unmappable.append(char)
            continue
        try:
            definition.encode(char)
        except UnicodeEncodeError:
            unmappable.append(char)

    return unmappable


def can_encode(text: str, label: str, registry: EncodingRegistry | None = None) -> bool:
    """Return True if ``text`` encodes strictly into the target encoding."""
    try:
        encode(text, label, registry)
    except UnmappableCharacterError:
        return False
    return True

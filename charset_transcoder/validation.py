"""Argument validation for transcoder entry points."""

from __future__ import annotations

from typing import Any

BytesLike = bytes | bytearray | memoryview


def validate_text_input(text: Any) -> str:
    """Validate text passed to an encode operation.

    Args:
        text: Value to validate.

    Returns:
        The text unchanged.

    Raises:
        TypeError: If text is not a str.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    return text


def validate_bytes_input(data: Any) -> BytesLike:
    """Validate a byte payload passed to a decode or transcode operation."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like, not {type(data).__name__}")
    return data


def validate_label(label: Any, argument: str = "label") -> str:
    """Validate an encoding label argument."""
    if not isinstance(label, str):
        raise TypeError(f"{argument} must be a str, not {type(label).__name__}")
    return label

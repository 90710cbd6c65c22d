"""Exceptions raised by the charset transcoder."""

from __future__ import annotations

from .const import DIRECTION_DECODE, Direction, Side


class TranscodeError(Exception):
    """Base class for all transcoder errors."""


class ConfigError(TranscodeError, ValueError):
    """Raised when a transcoder configuration is invalid."""


class UnsupportedLabelError(TranscodeError, LookupError):
    """Raised when a label does not resolve to a known encoding."""

    def __init__(self, label: str, side: Side | None = None) -> None:
        self.label = label
        self.side = side
        if side:
            message = f"Unsupported {side} encoding label: {label}"
        else:
            message = f"Unsupported encoding label: {label}"
        super().__init__(message)


class UnmappableCharacterError(TranscodeError, ValueError):
    """Raised when a strict encode or decode meets data it cannot map.

    Attributes:
        label: The label of the encoding that failed, as given by the caller.
        direction: ``"decode"`` or ``"encode"``.
        side: ``"source"`` or ``"target"`` when raised by a transcode.
        start: Index of the first offending character or byte.
        end: Index just past the last offending character or byte.
        fragment: The offending slice of the input (``str`` or ``bytes``).
        reason: The codec's description of the failure.
    """

    def __init__(
        self,
        label: str,
        direction: Direction,
        *,
        side: Side | None = None,
        start: int = 0,
        end: int = 0,
        fragment: str | bytes = "",
        reason: str = "",
    ) -> None:
        self.label = label
        self.direction = direction
        self.side = side
        self.start = start
        self.end = end
        self.fragment = fragment
        self.reason = reason
        super().__init__(self._build_message())

    @classmethod
    def from_unicode_error(
        cls,
        err: UnicodeError,
        label: str,
        direction: Direction,
        side: Side | None = None,
    ) -> UnmappableCharacterError:
        """Build an error from a codec's UnicodeDecodeError/UnicodeEncodeError."""
        start = getattr(err, "start", 0)
        end = getattr(err, "end", start)
        obj = getattr(err, "object", b"" if direction == DIRECTION_DECODE else "")
        return cls(
            label,
            direction,
            side=side,
            start=start,
            end=end,
            fragment=obj[start:end],
            reason=getattr(err, "reason", str(err)),
        )

    def _build_message(self) -> str:
        if self.direction == DIRECTION_DECODE:
            message = f"Decoding from {self.label} had unmappable characters"
            detail = self.fragment.hex(" ") if isinstance(self.fragment, bytes) else ""
        else:
            message = f"Encoding to {self.label} had unmappable characters"
            detail = repr(self.fragment) if self.fragment else ""
        if detail:
            message += f": {detail} at position {self.start}"
        if self.reason:
            message += f" ({self.reason})"
        if self.side:
            message = f"{self.side.capitalize()} side failed: {message}"
        return message

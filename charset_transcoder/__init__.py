"""Charset transcoding between Python text and byte-level encodings.

Encoding Strategy:
------------------
Labels are resolved against a closed table of encodings backed by Python
codecs. Every conversion is strict: a character or byte sequence with no
mapping raises UnmappableCharacterError and nothing is returned.

- encode(text, label): text -> bytes
- decode(data, label): bytes -> text
- transcode(data, from_label, to_label): bytes -> bytes, returning the input
  unchanged when both labels name the same encoding, and skipping the
  intermediate text for ASCII payloads between ASCII-compatible encodings.

The module-level functions use the default registry (strict GB2312). Use a
Transcoder to change the GB2312 policy, add aliases or disable the ASCII
shortcut.
"""

from __future__ import annotations

from .config import TranscoderConfig
from .const import VERSION
from .exceptions import (
    ConfigError,
    TranscodeError,
    UnmappableCharacterError,
    UnsupportedLabelError,
)
from .registry import (
    EncodingDefinition,
    is_supported,
    labels_for,
    normalize_label,
    resolve,
    supported_encodings,
)
from .transcoder import Transcoder
from .transcoding import can_encode, decode, encode, find_unmappable, transcode

__version__ = VERSION

__all__ = [
    "ConfigError",
    "EncodingDefinition",
    "TranscodeError",
    "Transcoder",
    "TranscoderConfig",
    "UnmappableCharacterError",
    "UnsupportedLabelError",
    "can_encode",
    "decode",
    "encode",
    "find_unmappable",
    "is_supported",
    "labels_for",
    "normalize_label",
    "resolve",
    "supported_encodings",
    "transcode",
]

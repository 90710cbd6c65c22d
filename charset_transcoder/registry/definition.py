"""Encoding definitions and the registry that holds them."""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, eq=False)
class EncodingDefinition:
    """One supported character encoding.

    Definitions are compared by identity: two labels name the same encoding
    exactly when they resolve to the same definition object.
    """

    name: str
    codec: str
    labels: frozenset[str] = field(default=frozenset(), repr=False)
    ascii_compatible: bool = False

    @property
    def codec_info(self) -> codecs.CodecInfo:
        """Return the Python codec backing this definition."""
        return codecs.lookup(self.codec)

    def encode(self, text: str) -> bytes:
        """Encode text strictly, raising UnicodeEncodeError on failure."""
        return codecs.encode(text, self.codec, "strict")

    def decode(self, data: bytes | bytearray | memoryview) -> str:
        """Decode bytes strictly, raising UnicodeDecodeError on failure."""
        return codecs.decode(data, self.codec, "strict")


@dataclass(frozen=True)
class EncodingRegistry:
    """Immutable lookup table from normalized labels to definitions."""

    definitions: Mapping[str, EncodingDefinition]
    labels: Mapping[str, EncodingDefinition]
    gb2312_policy: str

    def get(self, key: str) -> EncodingDefinition | None:
        """Return the definition for a normalized label key, if any."""
        return self.labels.get(key)

    def names(self) -> list[str]:
        """Return the sorted canonical names of all definitions."""
        return sorted(self.definitions, key=str.lower)

    def __contains__(self, key: object) -> bool:
        return key in self.labels

    def __len__(self) -> int:
        return len(self.definitions)

"""Encoding registry for the charset transcoder.

The registry is a closed table of encoding definitions, each backed by a
Python codec, together with every label that resolves to it. It is built
once per GB2312 policy and never mutated afterwards.
"""

from __future__ import annotations

from .definition import EncodingDefinition, EncodingRegistry
from .loader import build_registry, clear_registry_cache, normalize_label
from .resolver import is_supported, labels_for, resolve, supported_encodings

__all__ = [
    "EncodingDefinition",
    "EncodingRegistry",
    "build_registry",
    "clear_registry_cache",
    "is_supported",
    "labels_for",
    "normalize_label",
    "resolve",
    "supported_encodings",
]

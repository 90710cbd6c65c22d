"""Transcoding pipeline: strict encode, decode and transcode."""

from __future__ import annotations

from .diagnostics import can_encode, find_unmappable
from .pipeline import decode, encode, transcode

__all__ = [
    "can_encode",
    "decode",
    "encode",
    "find_unmappable",
    "transcode",
]

"""Configured transcoder bound to one encoding registry."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from .config import TranscoderConfig
from .registry import (
    EncodingDefinition,
    EncodingRegistry,
    build_registry,
    is_supported,
    labels_for,
    resolve,
    supported_encodings,
)
from .transcoding import can_encode, decode, encode, find_unmappable, transcode
from .validation import BytesLike

_LOGGER = logging.getLogger(__name__)


class Transcoder:
    """Encode, decode and transcode with a fixed label policy.

    Every label given to one instance is resolved against the same
    registry, so a label always means the same encoding across encode,
    decode and transcode.
    """

    def __init__(self, config: TranscoderConfig | None = None) -> None:
        """Initialize the transcoder and build (or reuse) its registry.

        Raises:
            ConfigError: If the configured policy or aliases are invalid.
        """
        self._config = config or TranscoderConfig()
        self._registry = build_registry(self._config.gb2312_policy, self._config.alias_pairs())
        _LOGGER.debug("Transcoder created with %s", self._config)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> Transcoder:
        """Create a transcoder from a mapping of options."""
        return cls(TranscoderConfig.from_dict(options))

    @property
    def config(self) -> TranscoderConfig:
        return self._config

    @property
    def registry(self) -> EncodingRegistry:
        return self._registry

    def resolve(self, label: str) -> EncodingDefinition:
        return resolve(label, self._registry)

    def is_supported(self, label: str) -> bool:
        return is_supported(label, self._registry)

    def supported_encodings(self) -> list[str]:
        return supported_encodings(self._registry)

    def labels_for(self, label: str) -> list[str]:
        return labels_for(label, self._registry)

    def encode(self, text: str, label: str) -> bytes:
        return encode(text, label, self._registry)

    def decode(self, data: BytesLike, label: str) -> str:
        return decode(data, label, self._registry)

    def transcode(self, data: BytesLike, from_label: str, to_label: str) -> BytesLike:
        return transcode(
            data,
            from_label,
            to_label,
            self._registry,
            ascii_fast_path=self._config.ascii_fast_path,
        )

    def find_unmappable(self, text: str, label: str) -> list[str]:
        return find_unmappable(text, label, self._registry)

    def can_encode(self, text: str, label: str) -> bool:
        return can_encode(text, label, self._registry)

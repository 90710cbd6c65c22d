"""Configuration for transcoder instances."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import voluptuous as vol

from .const import (
    CONF_ALIASES,
    CONF_ASCII_FAST_PATH,
    CONF_GB2312_POLICY,
    DEFAULT_ASCII_FAST_PATH,
    DEFAULT_GB2312_POLICY,
    GB2312_POLICIES,
)
from .exceptions import ConfigError

_LABEL = vol.All(str, vol.Length(min=1))

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_GB2312_POLICY, default=DEFAULT_GB2312_POLICY): vol.All(
            str, vol.Lower, vol.In(GB2312_POLICIES)
        ),
        vol.Optional(CONF_ASCII_FAST_PATH, default=DEFAULT_ASCII_FAST_PATH): vol.Boolean(),
        vol.Optional(CONF_ALIASES, default=dict): {_LABEL: _LABEL},
    }
)


@dataclass(frozen=True)
class TranscoderConfig:
    """Options for a Transcoder.

    Instances are immutable and ``aliases`` is stored as a read-only mapping.
    """

    gb2312_policy: str = DEFAULT_GB2312_POLICY
    ascii_fast_path: bool = DEFAULT_ASCII_FAST_PATH
    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TranscoderConfig:
        """Build a config from a mapping of options.

        Args:
            data: Options keyed by ``gb2312_policy``, ``ascii_fast_path``
                and ``aliases``. Missing keys take their defaults.

        Returns:
            The validated config.

        Raises:
            ConfigError: If an option is unknown or has an invalid value.
        """
        try:
            validated = CONFIG_SCHEMA(dict(data))
        except vol.Invalid as err:
            raise ConfigError(f"Invalid transcoder configuration: {err}") from err
        return cls(
            gb2312_policy=validated[CONF_GB2312_POLICY],
            ascii_fast_path=validated[CONF_ASCII_FAST_PATH],
            aliases=dict(validated[CONF_ALIASES]),
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the config as a plain mapping."""
        return {
            CONF_GB2312_POLICY: self.gb2312_policy,
            CONF_ASCII_FAST_PATH: self.ascii_fast_path,
            CONF_ALIASES: dict(self.aliases),
        }

    def alias_pairs(self) -> tuple[tuple[str, str], ...]:
        """Return the extra aliases as a sorted, hashable tuple."""
        return tuple(sorted(self.aliases.items()))

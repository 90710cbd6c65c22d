"""Registry loader for the closed encoding table."""

from __future__ import annotations

from collections.abc import Iterable
import encodings.aliases
from functools import lru_cache
import logging
import re
import threading
from types import MappingProxyType

from ..const import DEFAULT_GB2312_POLICY, GB2312_POLICIES, GB2312_POLICY_GB18030
from ..exceptions import ConfigError
from .constants import (
    ASCII_PROBE,
    ENCODING_TABLE,
    GB18030_REDIRECTS,
    STATEFUL_CODECS,
    EncodingEntry,
)
from .definition import EncodingDefinition, EncodingRegistry

_LOGGER = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[-_.]+")
_KEY = re.compile(r"[0-9a-z]+(?:_[0-9a-z]+)*")


def normalize_label(label: str) -> str:
    """Return the matching key for a label.

    Matching is case-insensitive and ignores surrounding whitespace. Runs of
    ``-``, ``_`` and ``.`` between letters or digits are equivalent, so
    ``"ISO-8859-1"`` and ``"iso_8859_1"`` share one key, while ``"iso88591"``
    only matches because it is a label of its own. Labels with non-ASCII
    characters, interior whitespace or any other punctuation get an empty
    key, which never matches.

    Args:
        label: Encoding label as given by the caller.

    Returns:
        Normalized key, or an empty string if the label can never match.
    """
    stripped = label.strip()
    if not stripped.isascii():
        return ""
    key = _SEPARATORS.sub("_", stripped.lower())
    if _KEY.fullmatch(key) is None:
        return ""
    return key


def _is_ascii_compatible(codec: str) -> bool:
    """Check that ASCII bytes and ASCII text map onto each other unchanged."""
    if codec in STATEFUL_CODECS:
        return False
    expected = ASCII_PROBE.decode("ascii")
    try:
        return ASCII_PROBE.decode(codec) == expected and expected.encode(codec) == ASCII_PROBE
    except UnicodeError:
        return False


def _python_aliases() -> dict[str, list[str]]:
    """Group Python's codec aliases by the codec module they point to."""
    grouped: dict[str, list[str]] = {}
    for alias, codec in sorted(encodings.aliases.aliases.items()):
        grouped.setdefault(codec, []).append(alias)
    return grouped


class _TableBuilder:
    """Collects labels per definition, first registration wins."""

    def __init__(self, redirects: dict[str, str]) -> None:
        self._redirects = redirects
        self._owner: dict[str, str] = {}
        self._labels: dict[str, set[str]] = {}

    def target(self, entry: EncodingEntry) -> str:
        return self._redirects.get(entry.name, entry.name)

    def add(self, name: str, labels: Iterable[str]) -> None:
        for label in labels:
            key = normalize_label(label)
            if not key:
                continue
            owner = self._owner.setdefault(key, name)
            if owner == name:
                self._labels.setdefault(name, set()).add(label.lower())
            else:
                _LOGGER.debug("Label %r already claimed by %s, not adding to %s", label, owner, name)

    def owner(self, key: str) -> str | None:
        return self._owner.get(key)

    def build(self, entries: Iterable[EncodingEntry]) -> dict[str, EncodingDefinition]:
        definitions: dict[str, EncodingDefinition] = {}
        for entry in entries:
            if entry.name in self._redirects:
                continue
            definitions[entry.name] = EncodingDefinition(
                name=entry.name,
                codec=entry.codec,
                labels=frozenset(self._labels.get(entry.name, ())),
                ascii_compatible=_is_ascii_compatible(entry.codec),
            )
        return definitions

    def keys(self) -> dict[str, str]:
        return dict(self._owner)


_BUILD_LOCK = threading.Lock()
_BUILT: dict[tuple[str, tuple[tuple[str, str], ...]], EncodingRegistry] = {}


@lru_cache(maxsize=8)
def build_registry(
    gb2312_policy: str = DEFAULT_GB2312_POLICY,
    extra_aliases: tuple[tuple[str, str], ...] = (),
) -> EncodingRegistry:
    """Build the registry of supported encodings (cached).

    Labels are registered in three passes: canonical and codec names, then
    Python's codec aliases, then web labels. A label already claimed by an
    earlier pass is not reassigned.

    Cached calls return without locking. The lock only serializes first
    builds, so concurrent first calls still build the registry once and
    every caller sees the same definition objects.

    Args:
        gb2312_policy: ``"strict"`` keeps GB2312 as its own encoding,
            ``"gb18030"`` resolves every GB2312 label to GB18030.
        extra_aliases: Additional ``(label, existing_label)`` pairs.

    Returns:
        An immutable registry.

    Raises:
        ConfigError: If the policy is unknown or an extra alias is invalid.
    """
    with _BUILD_LOCK:
        key = (gb2312_policy, extra_aliases)
        registry = _BUILT.get(key)
        if registry is None:
            registry = _BUILT[key] = _build_registry(gb2312_policy, extra_aliases)
        return registry


def _build_registry(
    gb2312_policy: str,
    extra_aliases: tuple[tuple[str, str], ...],
) -> EncodingRegistry:
    if gb2312_policy not in GB2312_POLICIES:
        raise ConfigError(f"Unknown GB2312 policy: {gb2312_policy}")

    redirects = GB18030_REDIRECTS if gb2312_policy == GB2312_POLICY_GB18030 else {}
    builder = _TableBuilder(redirects)
    python_aliases = _python_aliases()

    for entry in ENCODING_TABLE:
        builder.add(builder.target(entry), (entry.name, entry.codec))
    for entry in ENCODING_TABLE:
        builder.add(builder.target(entry), python_aliases.get(entry.codec, ()))
    for entry in ENCODING_TABLE:
        builder.add(builder.target(entry), entry.web_labels)

    for alias, existing in extra_aliases:
        alias_key = normalize_label(alias)
        if not alias_key:
            raise ConfigError(f"Alias {alias!r} is not a valid label")
        target = builder.owner(normalize_label(existing))
        if target is None:
            raise ConfigError(f"Alias {alias!r} points to unsupported label {existing!r}")
        current = builder.owner(alias_key)
        if current is not None and current != target:
            raise ConfigError(f"Alias {alias!r} already resolves to {current}")
        builder.add(target, (alias,))

    definitions = builder.build(ENCODING_TABLE)
    labels = {key: definitions[name] for key, name in builder.keys().items()}

    _LOGGER.debug(
        "Built encoding registry: %d encodings, %d labels (gb2312 policy %s)",
        len(definitions),
        len(labels),
        gb2312_policy,
    )
    return EncodingRegistry(
        definitions=MappingProxyType(definitions),
        labels=MappingProxyType(labels),
        gb2312_policy=gb2312_policy,
    )


def clear_registry_cache() -> None:
    """Clear the registry cache.

    Useful for testing.
    """
    with _BUILD_LOCK:
        _BUILT.clear()
        build_registry.cache_clear()

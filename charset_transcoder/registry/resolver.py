"""Label resolution against the encoding registry."""

from __future__ import annotations

import logging

from ..exceptions import UnsupportedLabelError
from .definition import EncodingDefinition, EncodingRegistry
from .loader import build_registry, normalize_label

_LOGGER = logging.getLogger(__name__)


def resolve(label: str, registry: EncodingRegistry | None = None) -> EncodingDefinition:
    """Resolve a label to its encoding definition.

    Args:
        label: Encoding label (e.g. "gbk", "ISO-8859-1", "utf8").
        registry: Registry to resolve against, the default one if omitted.

    Returns:
        The matching definition. Labels naming the same encoding return the
        same object.

    Raises:
        UnsupportedLabelError: If the label is not in the registry.
    """
    if registry is None:
        registry = build_registry()
    definition = registry.get(normalize_label(label))
    if definition is None:
        _LOGGER.debug("Unsupported encoding label %r", label)
        raise UnsupportedLabelError(label)
    return definition


def is_supported(label: str, registry: EncodingRegistry | None = None) -> bool:
    """Return True if the label resolves to a supported encoding."""
    if registry is None:
        registry = build_registry()
    return normalize_label(label) in registry


def supported_encodings(registry: EncodingRegistry | None = None) -> list[str]:
    """Get the canonical names of all supported encodings.

    Returns:
        Case-insensitively sorted list of canonical names.
    """
    if registry is None:
        registry = build_registry()
    return registry.names()


def labels_for(label: str, registry: EncodingRegistry | None = None) -> list[str]:
    """Get every label that resolves to the same encoding as ``label``.

    Args:
        label: Any label of the encoding of interest.
        registry: Registry to resolve against, the default one if omitted.

    Returns:
        Sorted list of lowercase labels.

    Raises:
        UnsupportedLabelError: If the label is not in the registry.
    """
    return sorted(resolve(label, registry).labels)

"""Strict encode, decode and transcode operations.

All three operations resolve labels against an encoding registry and run the
backing codec in strict mode: any character or byte sequence without a
mapping aborts the whole operation, and no partial output is returned.

Transcoding takes two shortcuts before falling back to decode-then-encode:

1. Identity: if both labels resolve to the same definition, the input is
   returned as is, without validating it.
2. ASCII: if both encodings are ASCII supersets and the payload is pure
   ASCII, the output is byte-identical to the input, so no intermediate
   text is built.
"""

from __future__ import annotations

import codecs
import logging
import re

from ..const import (
    DEFAULT_ASCII_FAST_PATH,
    DIRECTION_DECODE,
    DIRECTION_ENCODE,
    SIDE_SOURCE,
    SIDE_TARGET,
    Side,
)
from ..exceptions import UnmappableCharacterError, UnsupportedLabelError
from ..registry import EncodingDefinition, EncodingRegistry, build_registry, resolve
from ..validation import BytesLike, validate_bytes_input, validate_label, validate_text_input

_LOGGER = logging.getLogger(__name__)

# Some codecs (UTF-7) pass lone surrogates through in both directions.
_SURROGATE = re.compile("[\ud800-\udfff]")
_NON_ASCII = re.compile(rb"[\x80-\xff]")


def _resolve_side(label: str, registry: EncodingRegistry | None, side: Side) -> EncodingDefinition:
    try:
        return resolve(label, registry)
    except UnsupportedLabelError:
        raise UnsupportedLabelError(label, side=side) from None


def _byte_span(codec: str, data: bytes, index: int) -> tuple[int, int]:
    """Map a character index of decoded ``data`` back to the bytes producing it."""
    decoder = codecs.getincrementaldecoder(codec)()
    produced = 0
    start = 0
    for offset in range(len(data)):
        count = len(decoder.decode(data[offset : offset + 1]))
        if not count:
            continue
        produced += count
        if produced > index:
            return start, offset + 1
        start = offset + 1
    return start, len(data)


def _encode_with(
    definition: EncodingDefinition, text: str, label: str, side: Side | None = None
) -> bytes:
    match = _SURROGATE.search(text)
    if match is not None:
        raise UnmappableCharacterError(
            label,
            DIRECTION_ENCODE,
            side=side,
            start=match.start(),
            end=match.end(),
            fragment=match.group(),
            reason="lone surrogate",
        )
    try:
        return definition.encode(text)
    except UnicodeEncodeError as err:
        raise UnmappableCharacterError.from_unicode_error(err, label, DIRECTION_ENCODE, side) from err


def _decode_with(
    definition: EncodingDefinition, data: BytesLike, label: str, side: Side | None = None
) -> str:
    try:
        text = definition.decode(data)
    except UnicodeDecodeError as err:
        raise UnmappableCharacterError.from_unicode_error(err, label, DIRECTION_DECODE, side) from err
    match = _SURROGATE.search(text)
    if match is not None:
        raw = bytes(data)
        start, end = _byte_span(definition.codec, raw, match.start())
        raise UnmappableCharacterError(
            label,
            DIRECTION_DECODE,
            side=side,
            start=start,
            end=end,
            fragment=raw[start:end],
            reason="lone surrogate",
        )
    return text


def _is_ascii(data: BytesLike) -> bool:
    if isinstance(data, memoryview):
        return _NON_ASCII.search(data) is None
    return data.isascii()


def encode(text: str, label: str, registry: EncodingRegistry | None = None) -> bytes:
    """Encode text into the encoding named by ``label``.

    Args:
        text: Text to encode.
        label: Target encoding label.
        registry: Registry to resolve against, the default one if omitted.

    Returns:
        The encoded bytes.

    Raises:
        UnsupportedLabelError: If the label does not resolve.
        UnmappableCharacterError: If a character has no representation in
            the target encoding.
    """
    validate_text_input(text)
    validate_label(label)
    definition = resolve(label, registry)
    return _encode_with(definition, text, label)


def decode(data: BytesLike, label: str, registry: EncodingRegistry | None = None) -> str:
    """Decode bytes from the encoding named by ``label``.

    Args:
        data: Bytes to decode.
        label: Source encoding label.
        registry: Registry to resolve against, the default one if omitted.

    Returns:
        The decoded text.

    Raises:
        UnsupportedLabelError: If the label does not resolve.
        UnmappableCharacterError: If a byte sequence is invalid for the
            source encoding.
    """
    validate_bytes_input(data)
    validate_label(label)
    definition = resolve(label, registry)
    return _decode_with(definition, data, label)


def transcode(
    data: BytesLike,
    from_label: str,
    to_label: str,
    registry: EncodingRegistry | None = None,
    *,
    ascii_fast_path: bool = DEFAULT_ASCII_FAST_PATH,
) -> BytesLike:
    """Convert bytes from one encoding to another.

    Args:
        data: Bytes in the source encoding.
        from_label: Source encoding label, resolved first.
        to_label: Target encoding label.
        registry: Registry to resolve against, the default one if omitted.
        ascii_fast_path: Return pure-ASCII payloads unchanged when both
            encodings are ASCII supersets.

    Returns:
        Bytes in the target encoding. When no conversion is needed this is
        the input object itself.

    Raises:
        UnsupportedLabelError: If either label does not resolve; ``side``
            says which one.
        UnmappableCharacterError: If the decode (``side="source"``) or the
            encode (``side="target"``) stage fails.
    """
    validate_bytes_input(data)
    validate_label(from_label, "from_label")
    validate_label(to_label, "to_label")

    if registry is None:
        registry = build_registry()
    source = _resolve_side(from_label, registry, SIDE_SOURCE)
    target = _resolve_side(to_label, registry, SIDE_TARGET)

    if source is target:
        _LOGGER.debug("Transcode %r -> %r is an identity, passing through", from_label, to_label)
        return data

    if ascii_fast_path and source.ascii_compatible and target.ascii_compatible and _is_ascii(data):
        _LOGGER.debug("Transcode %r -> %r of ASCII payload, passing through", from_label, to_label)
        return data if isinstance(data, bytes) else bytes(data)

    text = _decode_with(source, data, from_label, SIDE_SOURCE)
    return _encode_with(target, text, to_label, SIDE_TARGET)

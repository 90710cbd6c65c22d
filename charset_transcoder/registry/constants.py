"""The closed table of supported encodings.

Each entry names a canonical encoding, the Python codec backing it, and the
web (WHATWG-style) labels that are accepted for it in addition to the
aliases Python's own codec registry already knows. Where a web label and
the Python registry disagree, Python's meaning wins (e.g. ``latin1`` is true
ISO-8859-1, not windows-1252).
"""

from __future__ import annotations

from typing import NamedTuple


class EncodingEntry(NamedTuple):
    """Static description of one supported encoding."""

    name: str
    codec: str
    web_labels: tuple[str, ...] = ()


ENCODING_TABLE: tuple[EncodingEntry, ...] = (
    # Unicode
    EncodingEntry(
        "UTF-8",
        "utf_8",
        ("unicode-1-1-utf-8", "unicode11utf8", "unicode20utf8", "x-unicode20utf8"),
    ),
    EncodingEntry("UTF-8-SIG", "utf_8_sig"),
    EncodingEntry("UTF-16", "utf_16"),
    EncodingEntry(
        "UTF-16LE",
        "utf_16_le",
        ("csunicode", "iso-10646-ucs-2", "ucs-2", "unicode", "unicodefeff"),
    ),
    EncodingEntry("UTF-16BE", "utf_16_be", ("unicodefffe",)),
    EncodingEntry("UTF-32", "utf_32"),
    EncodingEntry("UTF-32LE", "utf_32_le"),
    EncodingEntry("UTF-32BE", "utf_32_be"),
    EncodingEntry("UTF-7", "utf_7", ("unicode-1-1-utf-7", "csunicode11utf7")),
    # ASCII and ISO-8859
    EncodingEntry("US-ASCII", "ascii"),
    EncodingEntry("ISO-8859-1", "latin_1", ("iso88591",)),
    EncodingEntry("ISO-8859-2", "iso8859_2", ("iso88592", "iso-ir-101")),
    EncodingEntry("ISO-8859-3", "iso8859_3", ("iso88593", "iso-ir-109")),
    EncodingEntry("ISO-8859-4", "iso8859_4", ("iso88594", "iso-ir-110")),
    EncodingEntry("ISO-8859-5", "iso8859_5", ("iso88595", "iso-ir-144")),
    EncodingEntry(
        "ISO-8859-6",
        "iso8859_6",
        ("iso88596", "asmo-708", "ecma-114", "iso-8859-6-e", "iso-8859-6-i"),
    ),
    EncodingEntry("ISO-8859-7", "iso8859_7", ("iso88597", "ecma-118", "elot_928", "sun_eu_greek")),
    EncodingEntry(
        "ISO-8859-8",
        "iso8859_8",
        ("iso88598", "iso-8859-8-e", "iso-8859-8-i", "csiso88598i", "visual"),
    ),
    EncodingEntry("ISO-8859-9", "iso8859_9", ("iso88599",)),
    EncodingEntry("ISO-8859-10", "iso8859_10", ("iso885910", "iso-ir-157")),
    EncodingEntry("ISO-8859-11", "iso8859_11", ("iso885911",)),
    EncodingEntry("ISO-8859-13", "iso8859_13", ("iso885913",)),
    EncodingEntry("ISO-8859-14", "iso8859_14", ("iso885914",)),
    EncodingEntry("ISO-8859-15", "iso8859_15", ("iso885915", "csisolatin9", "l9")),
    EncodingEntry("ISO-8859-16", "iso8859_16", ("iso885916",)),
    # Windows code pages
    EncodingEntry("windows-874", "cp874", ("dos-874",)),
    EncodingEntry("windows-1250", "cp1250", ("x-cp1250",)),
    EncodingEntry("windows-1251", "cp1251", ("x-cp1251",)),
    EncodingEntry("windows-1252", "cp1252", ("x-cp1252",)),
    EncodingEntry("windows-1253", "cp1253", ("x-cp1253",)),
    EncodingEntry("windows-1254", "cp1254", ("x-cp1254",)),
    EncodingEntry("windows-1255", "cp1255", ("x-cp1255",)),
    EncodingEntry("windows-1256", "cp1256", ("x-cp1256",)),
    EncodingEntry("windows-1257", "cp1257", ("x-cp1257",)),
    EncodingEntry("windows-1258", "cp1258", ("x-cp1258",)),
    # DOS code pages common on receipt printers
    EncodingEntry("CP437", "cp437"),
    EncodingEntry("CP850", "cp850"),
    EncodingEntry("CP852", "cp852"),
    EncodingEntry("CP858", "cp858"),
    EncodingEntry("CP860", "cp860"),
    EncodingEntry("CP863", "cp863"),
    EncodingEntry("CP865", "cp865"),
    EncodingEntry("IBM866", "cp866"),
    # Cyrillic and Macintosh
    EncodingEntry("KOI8-R", "koi8_r", ("koi", "koi8")),
    EncodingEntry("KOI8-U", "koi8_u", ("koi8-ru",)),
    EncodingEntry("macintosh", "mac_roman", ("csmacintosh", "mac", "x-mac-roman")),
    EncodingEntry("x-mac-cyrillic", "mac_cyrillic", ("x-mac-ukrainian",)),
    # Chinese
    EncodingEntry("GBK", "gbk", ("x-gbk",)),
    EncodingEntry("GB2312", "gb2312", ("csgb2312",)),
    EncodingEntry("GB18030", "gb18030"),
    EncodingEntry("HZ-GB-2312", "hz"),
    EncodingEntry("Big5", "big5", ("cn-big5", "x-x-big5")),
    EncodingEntry("Big5-HKSCS", "big5hkscs"),
    # Japanese
    EncodingEntry("EUC-JP", "euc_jp", ("cseucpkdfmtjapanese", "x-euc-jp")),
    EncodingEntry("ISO-2022-JP", "iso2022_jp"),
    EncodingEntry("Shift_JIS", "shift_jis", ("x-sjis",)),
    EncodingEntry("CP932", "cp932", ("windows-31j",)),
    # Korean
    EncodingEntry("EUC-KR", "euc_kr", ("cseuckr", "iso-ir-149")),
    EncodingEntry("CP949", "cp949", ("windows-949",)),
    EncodingEntry("ISO-2022-KR", "iso2022_kr", ("csiso2022kr",)),
)

# Definitions whose labels are folded into another definition under the
# forward-compatible GB2312 policy.
GB18030_REDIRECTS: dict[str, str] = {"GB2312": "GB18030"}

# Bytes 0x00-0x7F, used to probe whether an encoding is a superset of ASCII.
ASCII_PROBE = bytes(range(0x80))

# Codecs that switch state on escape or shift sequences made of ASCII bytes.
STATEFUL_CODECS = frozenset({"utf_7", "hz", "iso2022_jp", "iso2022_kr"})

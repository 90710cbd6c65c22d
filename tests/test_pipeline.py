"""Tests for the strict encode/decode/transcode pipeline."""

import pytest

from charset_transcoder import (
    can_encode,
    decode,
    encode,
    find_unmappable,
    supported_encodings,
    transcode,
)
from charset_transcoder.exceptions import (
    TranscodeError,
    UnmappableCharacterError,
    UnsupportedLabelError,
)
from charset_transcoder.registry import build_registry


class TestEncodeDecode:
    """Tests for encode and decode."""

    @pytest.mark.parametrize(
        ("text", "label"),
        [
            ("你好世界Hello World", "GBK"),
            ("你好世界Hello World", "UTF-8"),
            ("测试中文Test", "utf8"),
            ("中文测试", "GB2312"),
            ("繁體中文測試", "BIG5"),
            ("Hello World àèìòù", "ISO-8859-1"),
            ("ASCII text 中文字符 αβγδ 123 ©®™", "UTF-8"),
            ("日本語のテキスト", "Shift_JIS"),
            ("한국어 텍스트", "EUC-KR"),
            ("Привет, мир", "KOI8-R"),
            ("😀 and 中文", "GB18030"),
            ("😀 and 中文", "UTF-16"),
        ],
    )
    def test_round_trip(self, text: str, label: str) -> None:
        encoded = encode(text, label)
        assert isinstance(encoded, bytes)
        assert decode(encoded, label) == text

    @pytest.mark.parametrize("name", supported_encodings())
    def test_ascii_round_trip_in_every_encoding(self, name: str) -> None:
        text = "Hello, world! 0123456789"
        assert decode(encode(text, name), name) == text

    def test_gbk_expected_bytes(self) -> None:
        assert encode("中", "GBK") == bytes([0xD6, 0xD0])

    def test_decode_gbk_bytes(self) -> None:
        assert decode(bytes([0xC4, 0xE3, 0xBA, 0xC3]), "GBK") == "你好"
        assert decode(bytes([0xD6, 0xD0, 0xB9, 0xFA, 0x61, 0x62, 0x63]), "gbk") == "中国abc"

    def test_empty_input(self) -> None:
        assert encode("", "GBK") == b""
        assert decode(b"", "GBK") == ""

    def test_long_text(self) -> None:
        text = (
            "这是一段很长的中文文本，包含各种中文字符。"
            "测试编码和解码的性能和正确性。"
            "包括标点符号：，。！？；：“”‘’《》【】"
            "以及数字和英文混合：123abc456def。"
        ) * 200
        assert decode(encode(text, "GBK"), "GBK") == text

    def test_bytes_like_inputs(self) -> None:
        assert decode(bytearray(b"\xd6\xd0"), "gbk") == "中"
        assert decode(memoryview(b"\xd6\xd0"), "gbk") == "中"

    def test_bom_handling(self) -> None:
        assert encode("a", "utf-8-sig") == b"\xef\xbb\xbfa"
        assert decode(b"\xef\xbb\xbfa", "utf-8-sig") == "a"
        assert decode(b"\xef\xbb\xbfa", "utf-8") == "\ufeffa"
        assert decode(b"\xfe\xff\x00a", "utf-16") == "a"


class TestStrictFailures:
    """Tests for strict failure on unmappable data."""

    def test_encode_unmappable_character(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            encode("abc日", "latin1")
        err = exc_info.value
        assert err.label == "latin1"
        assert err.direction == "encode"
        assert err.side is None
        assert err.start == 3
        assert err.end == 4
        assert err.fragment == "日"
        assert "Encoding to latin1 had unmappable characters" in str(err)

    def test_encode_lone_surrogate(self) -> None:
        with pytest.raises(UnmappableCharacterError):
            encode("a\ud800b", "utf-8")

    def test_utf7_lone_surrogates_rejected(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            encode("a\ud800b", "utf-7")
        assert exc_info.value.start == 1
        with pytest.raises(UnmappableCharacterError):
            decode(b"+2D0-", "utf-7")

    def test_utf7_lone_surrogate_reports_byte_offsets(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            decode(b"ab+2D0-cd", "utf-7")
        err = exc_info.value
        assert err.direction == "decode"
        assert err.reason == "lone surrogate"
        assert (err.start, err.end) == (2, 7)
        assert err.fragment == b"+2D0-"
        assert "2b 32 44 30 2d at position 2" in str(err)

    def test_decode_lone_ff_under_gbk(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            decode(b"\xff", "gbk")
        err = exc_info.value
        assert err.label == "gbk"
        assert err.direction == "decode"
        assert err.fragment == b"\xff"

    def test_decode_reports_position_after_valid_prefix(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            decode(b"ab\xff", "gbk")
        assert exc_info.value.start == 2
        assert "Decoding from gbk had unmappable characters: ff at position 2" in str(exc_info.value)

    def test_decode_truncated_sequence(self) -> None:
        with pytest.raises(UnmappableCharacterError):
            decode(b"\xd6", "gbk")

    def test_decode_invalid_utf8(self) -> None:
        with pytest.raises(UnmappableCharacterError):
            decode(b"\xc3\x28", "utf-8")

    def test_traditional_characters_not_in_strict_gb2312(self) -> None:
        with pytest.raises(UnmappableCharacterError):
            encode("繁體", "gb2312")
        assert decode(encode("繁體", "gb18030"), "gb18030") == "繁體"

    def test_errors_are_classified(self) -> None:
        with pytest.raises(TranscodeError):
            encode("日", "latin1")
        with pytest.raises(ValueError):
            encode("日", "latin1")
        with pytest.raises(LookupError):
            encode("a", "nope")

    def test_original_codec_error_is_chained(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            encode("日", "latin1")
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)


class TestUnsupportedLabels:
    """Tests for unsupported labels in every operation."""

    def test_encode(self) -> None:
        with pytest.raises(UnsupportedLabelError) as exc_info:
            encode("text", "nope")
        assert exc_info.value.label == "nope"

    def test_decode(self) -> None:
        with pytest.raises(UnsupportedLabelError):
            decode(b"text", "nope")

    def test_transcode_source_checked_first(self) -> None:
        with pytest.raises(UnsupportedLabelError) as exc_info:
            transcode(b"text", "nope", "also-nope")
        assert exc_info.value.label == "nope"
        assert exc_info.value.side == "source"
        assert str(exc_info.value) == "Unsupported source encoding label: nope"

    def test_transcode_target(self) -> None:
        with pytest.raises(UnsupportedLabelError) as exc_info:
            transcode(b"text", "utf-8", "nope")
        assert exc_info.value.label == "nope"
        assert exc_info.value.side == "target"


class TestTranscode:
    """Tests for transcode."""

    def test_gbk_to_big5(self) -> None:
        big5 = transcode(encode("你好世界", "GBK"), "GBK", "BIG5")
        assert decode(big5, "BIG5") == "你好世界"

    def test_gbk_to_utf8(self) -> None:
        utf8 = transcode(encode("中文测试", "GBK"), "GBK", "UTF-8")
        assert utf8 == "中文测试".encode("utf-8")

    def test_utf8_to_gbk(self) -> None:
        gbk = transcode("测试文本".encode("utf-8"), "UTF-8", "GBK")
        assert decode(gbk, "GBK") == "测试文本"

    def test_same_label_returns_same_object(self) -> None:
        data = b"Hello World"
        assert transcode(data, "UTF-8", "UTF-8") is data

    def test_aliases_of_one_encoding_return_same_object(self) -> None:
        data = b"\xe9t\xe9"
        assert transcode(data, "latin1", "iso-8859-1") is data

    def test_identity_skips_validation(self) -> None:
        data = b"\xff\xff\xd6"
        assert transcode(data, "gbk", "GBK") is data
        assert transcode(data, "gbk", "x-gbk") is data
        assert transcode(data, "cp936", "ms936") is data

    def test_identity_keeps_mutable_input(self) -> None:
        data = bytearray(b"\xff")
        assert transcode(data, "utf-8", "utf8") is data

    def test_ascii_payload_is_byte_identical(self) -> None:
        data = b"plain ASCII payload 123"
        result = transcode(data, "utf-8", "gbk")
        assert result == data
        assert result is data

    def test_ascii_payload_from_bytearray_is_bytes(self) -> None:
        result = transcode(bytearray(b"abc"), "utf-8", "gbk")
        assert result == b"abc"
        assert isinstance(result, bytes)

    def test_ascii_payload_from_memoryview(self) -> None:
        view = memoryview(b"--plain ASCII--")[2:-2]
        result = transcode(view, "utf-8", "gbk")
        assert result == b"plain ASCII"
        assert isinstance(result, bytes)

    def test_non_ascii_memoryview_is_converted(self) -> None:
        view = memoryview(b"ab\xd6\xd0")
        assert transcode(view, "gbk", "utf-8") == "ab中".encode("utf-8")

    def test_ascii_payload_without_fast_path(self) -> None:
        data = b"plain ASCII payload 123"
        result = transcode(data, "utf-8", "gbk", ascii_fast_path=False)
        assert result == data

    def test_ascii_payload_to_utf16_is_converted(self) -> None:
        assert transcode(b"ab", "utf-8", "utf-16le") == b"a\x00b\x00"

    def test_latin1_to_gbk(self) -> None:
        gbk = transcode(encode("Hello", "ISO-8859-1"), "ISO-8859-1", "GBK")
        assert decode(gbk, "GBK") == "Hello"

    def test_decode_stage_failure(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            transcode(b"\xff", "gbk", "utf-8")
        err = exc_info.value
        assert err.side == "source"
        assert err.direction == "decode"
        assert err.label == "gbk"
        assert str(err).startswith("Source side failed: Decoding from gbk")

    def test_encode_stage_failure(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            transcode("日".encode("utf-8"), "utf-8", "latin1")
        err = exc_info.value
        assert err.side == "target"
        assert err.direction == "encode"
        assert err.label == "latin1"
        assert err.fragment == "日"

    def test_uses_given_registry(self) -> None:
        registry = build_registry("gb18030")
        data = b"\xd6\xd0"
        assert transcode(data, "gb2312", "gb18030", registry) is data


class TestArgumentTypes:
    """Tests for argument type validation."""

    def test_encode_requires_str(self) -> None:
        with pytest.raises(TypeError, match="text must be a str"):
            encode(123, "GBK")  # type: ignore[arg-type]

    def test_decode_requires_bytes(self) -> None:
        with pytest.raises(TypeError, match="data must be bytes-like"):
            decode("not bytes", "GBK")  # type: ignore[arg-type]

    def test_label_must_be_str(self) -> None:
        with pytest.raises(TypeError, match="label must be a str"):
            encode("test", 123)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="label must be a str"):
            decode(b"test", None)  # type: ignore[arg-type]

    def test_transcode_arguments(self) -> None:
        with pytest.raises(TypeError, match="data must be bytes-like"):
            transcode("text", "GBK", "UTF-8")  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="from_label must be a str"):
            transcode(b"text", 123, "UTF-8")  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="to_label must be a str"):
            transcode(b"text", "GBK", 456)  # type: ignore[arg-type]


class TestDiagnostics:
    """Tests for find_unmappable and can_encode."""

    def test_find_unmappable(self) -> None:
        assert find_unmappable("Héllo 日本 日", "latin1") == ["日", "本"]

    def test_find_unmappable_all_mappable(self) -> None:
        assert find_unmappable("Héllo", "latin1") == []
        assert find_unmappable("", "gbk") == []

    def test_find_unmappable_unknown_label(self) -> None:
        with pytest.raises(UnsupportedLabelError):
            find_unmappable("text", "nope")

    def test_can_encode(self) -> None:
        assert can_encode("中文", "gbk")
        assert not can_encode("中文", "latin1")

    def test_find_unmappable_reports_lone_surrogates(self) -> None:
        assert find_unmappable("a\ud800", "utf-7") == ["\ud800"]

"""Command line interface for the charset transcoder."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
import platform
import sys
from typing import BinaryIO

from .config import TranscoderConfig
from .const import (
    CONF_ALIASES,
    CONF_ASCII_FAST_PATH,
    CONF_GB2312_POLICY,
    GB2312_POLICY_GB18030,
    GB2312_POLICY_STRICT,
    VERSION,
)
from .exceptions import TranscodeError
from .transcoder import Transcoder

_LOGGER = logging.getLogger(__name__)


def _alias_pair(value: str) -> tuple[str, str]:
    alias, sep, existing = value.partition("=")
    if not sep or not alias or not existing:
        raise argparse.ArgumentTypeError(f"expected LABEL=EXISTING_LABEL, got '{value}'")
    return alias, existing


argparser = argparse.ArgumentParser(
    prog="charset-transcoder",
    description="Strictly convert text and bytes between character encodings",
)
argparser.add_argument("-o", "--output", metavar="outfile", type=str, default="-", help="output file (default: stdout)")
argparser.add_argument("--gb2312-as-gb18030", action="store_true", help="resolve GB2312 labels to GB18030")
argparser.add_argument("--no-ascii-fast-path", action="store_true", help="always decode and re-encode when transcoding")
argparser.add_argument("--alias", metavar="LABEL=EXISTING", type=_alias_pair, action="append", default=[], help="accept LABEL as another name for EXISTING (repeatable)")
argparser.add_argument("-v", "--verbose", action="store_true", help="log debug information to stderr")
argparser.add_argument("--version", action="version", version=f"%(prog)s {VERSION} running on {platform.python_implementation()} {platform.python_version()}")

subparsers = argparser.add_subparsers(dest="command", metavar="command", required=True)

encode_parser = subparsers.add_parser("encode", help="encode UTF-8 text into an encoding")
encode_parser.add_argument("-t", "--to", dest="to_label", metavar="label", required=True, help="target encoding label")
encode_parser.add_argument("infile", nargs="?", default="-", help="UTF-8 input file (default: stdin)")

decode_parser = subparsers.add_parser("decode", help="decode bytes into UTF-8 text")
decode_parser.add_argument("-f", "--from", dest="from_label", metavar="label", required=True, help="source encoding label")
decode_parser.add_argument("infile", nargs="?", default="-", help="input file (default: stdin)")

transcode_parser = subparsers.add_parser("transcode", help="convert bytes between two encodings")
transcode_parser.add_argument("-f", "--from", dest="from_label", metavar="label", required=True, help="source encoding label")
transcode_parser.add_argument("-t", "--to", dest="to_label", metavar="label", required=True, help="target encoding label")
transcode_parser.add_argument("infile", nargs="?", default="-", help="input file (default: stdin)")

resolve_parser = subparsers.add_parser("resolve", help="show the encoding a label resolves to")
resolve_parser.add_argument("label", help="encoding label")

labels_parser = subparsers.add_parser("labels", help="list supported encodings, or the labels of one")
labels_parser.add_argument("label", nargs="?", help="any label of the encoding to describe")


def _read_input(path: str, stdin: BinaryIO) -> bytes:
    if path == "-":
        return stdin.read()
    with open(path, "rb") as f:
        return f.read()


def _write_output(path: str, data: bytes, stdout: BinaryIO) -> None:
    if path == "-":
        stdout.write(data)
        stdout.flush()
        return
    with open(path, "wb") as f:
        f.write(data)


def _build_transcoder(args: argparse.Namespace) -> Transcoder:
    config = TranscoderConfig.from_dict(
        {
            CONF_GB2312_POLICY: GB2312_POLICY_GB18030 if args.gb2312_as_gb18030 else GB2312_POLICY_STRICT,
            CONF_ASCII_FAST_PATH: not args.no_ascii_fast_path,
            CONF_ALIASES: dict(args.alias),
        }
    )
    return Transcoder(config)


def _run(args: argparse.Namespace, stdin: BinaryIO, stdout: BinaryIO) -> None:
    transcoder = _build_transcoder(args)
    _LOGGER.debug("Running %s with %s", args.command, transcoder.config)

    if args.command == "resolve":
        definition = transcoder.resolve(args.label)
        _write_output(args.output, f"{definition.name} (codec: {definition.codec})\n".encode(), stdout)
        return

    if args.command == "labels":
        names = transcoder.labels_for(args.label) if args.label else transcoder.supported_encodings()
        _write_output(args.output, "".join(f"{name}\n" for name in names).encode(), stdout)
        return

    data = _read_input(args.infile, stdin)
    if args.command == "encode":
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise TranscodeError(f"Input is not valid UTF-8: {err}") from err
        result = transcoder.encode(text, args.to_label)
    elif args.command == "decode":
        result = transcoder.decode(data, args.from_label).encode("utf-8")
    else:
        result = bytes(transcoder.transcode(data, args.from_label, args.to_label))
    _write_output(args.output, result, stdout)


def main(
    argv: Sequence[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> int:
    """Run the command line interface.

    Returns:
        Process exit status: 0 on success, 1 on a conversion or I/O error.
    """
    args = argparser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        _run(args, stdin or sys.stdin.buffer, stdout or sys.stdout.buffer)
    except (TranscodeError, OSError) as err:
        print(f"charset-transcoder: {err}", file=sys.stderr)
        return 1
    return 0


def main_cli() -> None:
    sys.exit(main())

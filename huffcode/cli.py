"""
Command line entry point.

    huffcode encode "some ascii text"
    huffcode decode 0000...0101
    huffcode stats --file notes.txt
    huffcode batch --input-root data --output-root out
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from huffcode.pipeline.config import CodecConfig
from huffcode.pipeline.runner import decode_bitstring, encode_text
from huffcode.pipeline.validation import validate_plain


def _read_input(args: argparse.Namespace) -> str:
    if args.file:
        try:
            return Path(args.file).read_text(encoding="utf-8")
        except OSError as exc:
            raise ValueError(f"cannot read {args.file}: {exc.strerror or exc}") from exc
    if args.value is None:
        raise ValueError("provide a value or --file")
    return args.value


def _add_input_arguments(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument("value", nargs="?", help=help_text)
    parser.add_argument("--file", default="", help="Read the input from this file instead.")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="huffcode",
        description="Encode/Decode text by huffman coding.",
    )
    parser.add_argument(
        "--allow-non-ascii",
        action="store_true",
        help="Accept input bytes >= 128 (decoded output is read back as UTF-8).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    encode_parser = sub.add_parser("encode", help="Encode plain text.")
    _add_input_arguments(encode_parser, "Text to encode.")

    decode_parser = sub.add_parser("decode", help="Decode a bit string.")
    _add_input_arguments(decode_parser, "Envelope made of '0' and '1' characters.")

    stats_parser = sub.add_parser("stats", help="Print envelope size statistics as JSON.")
    _add_input_arguments(stats_parser, "Text to analyse.")

    batch_parser = sub.add_parser("batch", help="Round-trip every file in a folder and report.")
    batch_parser.add_argument("--input-root", required=True, help="Folder with input files.")
    batch_parser.add_argument("--output-root", required=True, help="Folder for encoded/decoded output.")
    batch_parser.add_argument(
        "--report-dir",
        default="",
        help="Output directory for reports (default: <output-root>/report).",
    )
    batch_parser.add_argument(
        "--formats",
        default="",
        help="Comma-separated list of formats: csv,json (default: CodecConfig.report_formats).",
    )

    return parser.parse_args(argv)


def _run_batch(args: argparse.Namespace, cfg: CodecConfig) -> None:
    # Imported here so plain encode/decode never loads the reporting stack.
    from huffcode.reporting.report import generate_report
    from huffcode.utils.batch import run_batch_on_folder

    input_root = Path(args.input_root)
    output_root = Path(args.output_root)
    report_dir = Path(args.report_dir) if args.report_dir else output_root / "report"
    run_batch_on_folder(input_root, output_root, cfg)
    generate_report(
        input_root=input_root,
        output_root=output_root,
        report_dir=report_dir,
        formats=cfg.report_formats,
    )
    print(f"Report written to {report_dir}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    cfg = CodecConfig(ascii_only=not args.allow_non_ascii)
    if getattr(args, "formats", ""):
        cfg.report_formats = tuple(fmt.strip() for fmt in args.formats.split(",") if fmt.strip())

    try:
        if args.command == "encode":
            print(encode_text(_read_input(args), cfg))
        elif args.command == "decode":
            print(decode_bitstring(_read_input(args), cfg))
        elif args.command == "stats":
            from huffcode.reporting.report import envelope_stats

            data = _read_input(args).encode("utf-8")
            validate_plain(data, cfg)
            print(json.dumps(envelope_stats(data), indent=2))
        else:
            _run_batch(args, cfg)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

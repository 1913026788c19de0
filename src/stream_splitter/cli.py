"""Command-line interface for stream splitter."""

import argparse
import logging
import sys

from stream_splitter.combine import combine_files
from stream_splitter.config import DEFAULT_PREFIX, parse_limit
from stream_splitter.errors import SplitterError
from stream_splitter.splitter import ByteLimit, open_input, split_stream
from stream_splitter.splitter.types import line_unit

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--input",
        help="Input file (default: stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        default=DEFAULT_PREFIX,
        help=f"Output file prefix (default: {DEFAULT_PREFIX!r})",
    )
    parser.add_argument(
        "-n",
        "--numerical-suffix",
        action="store_true",
        help="Use numerical suffixes ('0', '1', ...) instead of 'aa', 'ab', ...",
    )
    parser.add_argument(
        "--extra-suffix",
        default="",
        help="Extra suffix appended to every output file name",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="stream-splitter",
        description="Binary/text splitter.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    binary = subparsers.add_parser("binary", aliases=["b"], help="Split by byte count")
    binary.add_argument(
        "max_size",
        help="Max bytes per output file, optionally suffixed with k, m or g",
    )
    _add_output_arguments(binary)
    binary.add_argument(
        "--buffer-size",
        help="Read buffer size in bytes (default: 1024)",
    )
    binary.set_defaults(mode="binary")

    text = subparsers.add_parser("text", aliases=["t"], help="Split by line count")
    text.add_argument("max_lines", help="Max lines per output file")
    text.add_argument("--max-chars", help="Max characters per line")
    text.add_argument(
        "-e",
        "--encoding",
        help="Input text encoding (default: utf-8)",
    )
    _add_output_arguments(text)
    text.set_defaults(mode="text")

    combine = subparsers.add_parser("combine", aliases=["c"], help="Combine file data")
    combine.add_argument(
        "inputs",
        nargs="*",
        help="Input files, glob patterns allowed (default: read paths from stdin)",
    )
    combine.add_argument(
        "-o",
        "--output",
        help="Output file path (default: stdout)",
    )
    combine.add_argument(
        "--notruncate",
        action="store_true",
        help="Do not truncate the output file when it already exists",
    )
    combine.set_defaults(mode="combine")

    return parser


def run(args: argparse.Namespace) -> None:
    """Execute the parsed command."""
    if args.mode == "combine":
        combine_files(args.inputs, output=args.output, no_truncate=args.notruncate)
        return

    if args.mode == "binary":
        unit = ByteLimit(parse_limit(args.max_size, "max-size", allow_multiplier=True))
        buffer_size = parse_limit(args.buffer_size, "buffer-size") if args.buffer_size else None
        encoding = None
    else:
        max_chars = parse_limit(args.max_chars, "max-chars") if args.max_chars else None
        unit = line_unit(parse_limit(args.max_lines, "max-lines"), max_chars)
        buffer_size = None
        encoding = args.encoding

    with open_input(args.input) as source:
        split_stream(
            unit,
            source,
            output_dir=args.output,
            prefix=args.prefix,
            extra_suffix=args.extra_suffix,
            numeric_suffix=args.numerical_suffix,
            encoding=encoding,
            buffer_size=buffer_size,
        )


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    configure_logging(getattr(logging, args.log_level))

    try:
        run(args)
    except SplitterError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Test resource generator for split benchmarks.

Writes a newline-delimited file of numbered lines containing multi-byte
text, so that text-mode splitting exercises decoding across read chunks.
"""

import argparse
import sys
from pathlib import Path

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

LINE_ENDINGS = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}


def generate_test_resource(
    output_path: str,
    num_lines: int,
    text: str,
    encoding: str,
    line_ending: str,
) -> int:
    """
    Write num_lines lines of the form "<index>: <text>".

    Returns:
        Total number of bytes written.
    """
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    total_bytes = 0

    with open(output_path, "wb", buffering=BUFFER_SIZE) as f:
        for i in range(num_lines):
            data = f"{i}: {text}{line_ending}".encode(encoding)
            f.write(data)
            total_bytes += len(data)

            if (i + 1) % 1_000_000 == 0:
                print(f"  Generated {i + 1}/{num_lines} lines...", file=sys.stderr)

    return total_bytes


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a multi-byte text file for split tests.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 1024 lines of UTF-8 text (default)
  python generate_test_resource.py --out tmp/largefile.txt

  # Shift_JIS with CRLF line endings
  python generate_test_resource.py --out tmp/sjis.txt --encoding shift_jis --line-ending crlf
""",
    )

    parser.add_argument(
        "--out",
        default="tmp/largefile.txt",
        help="Output file path (default: tmp/largefile.txt)",
    )
    parser.add_argument(
        "--lines",
        type=int,
        default=1024,
        help="Number of lines (default: 1024)",
    )
    parser.add_argument(
        "--text",
        default="あああ",
        help="Text written after each line number (default: あああ)",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Output encoding (default: utf-8)",
    )
    parser.add_argument(
        "--line-ending",
        choices=sorted(LINE_ENDINGS),
        default="lf",
        help="Line terminator (default: lf)",
    )

    args = parser.parse_args()

    if args.lines < 0:
        parser.error("--lines must not be negative")

    total_bytes = generate_test_resource(
        output_path=args.out,
        num_lines=args.lines,
        text=args.text,
        encoding=args.encoding,
        line_ending=LINE_ENDINGS[args.line_ending],
    )

    print(f"Done! Wrote {args.lines:,} lines ({total_bytes:,} bytes) to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()

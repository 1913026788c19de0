"""Combine files or globbed file sets into a single output."""

import glob
import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO, TextIO

from stream_splitter.errors import PatternError, SplitIOError
from stream_splitter.output.types import WRITE_BUFFER_SIZE

logger = logging.getLogger(__name__)

# Read size when copying one source file into the output.
COPY_BUFFER_SIZE = 64 * 1024


def expand_patterns(patterns: Iterable[str]) -> Iterator[Path]:
    """
    Expand each glob pattern in turn, matches in sorted order.

    Raises PatternError for a pattern that matches nothing.
    """
    for pattern in patterns:
        matches = sorted(glob.glob(pattern, recursive=True))
        if not matches:
            raise PatternError(pattern, "no files matched")
        for match in matches:
            yield Path(match)


def read_path_list(lines: Iterable[str]) -> Iterator[Path]:
    """Yield one path per non-blank line."""
    for line in lines:
        stripped = line.strip()
        if stripped:
            yield Path(stripped)


def _open_output(path: str, no_truncate: bool) -> BinaryIO:
    # Without truncation existing bytes are overwritten from the start.
    mode = "r+b" if no_truncate and Path(path).exists() else "wb"
    try:
        return open(path, mode, buffering=WRITE_BUFFER_SIZE)  # noqa: SIM115
    except OSError as e:
        raise SplitIOError("failed to create output file", e) from e


def transfer_file_content(path: Path, output: BinaryIO) -> int:
    """Append the whole content of path to output, returning the byte count."""
    try:
        handle = open(path, "rb")  # noqa: SIM115
    except OSError as e:
        raise SplitIOError(f"failed to read source file {path}", e) from e

    copied = 0
    with handle:
        while True:
            try:
                chunk = handle.read(COPY_BUFFER_SIZE)
            except OSError as e:
                raise SplitIOError(f"failed to read source file {path}", e) from e
            if not chunk:
                return copied
            try:
                output.write(chunk)
            except OSError as e:
                raise SplitIOError("failed to write to output", e) from e
            copied += len(chunk)


def combine_files(
    patterns: list[str],
    output: str | None = None,
    no_truncate: bool = False,
    path_source: TextIO | None = None,
) -> int:
    """
    Concatenate inputs into output (a file path, or stdout when None).

    With no patterns, input paths are read one per line from path_source,
    which defaults to stdin.
    """
    if patterns:
        paths = expand_patterns(patterns)
    else:
        paths = read_path_list(path_source if path_source is not None else sys.stdin)

    out = _open_output(output, no_truncate) if output is not None else sys.stdout.buffer
    total = 0
    files = 0
    try:
        for path in paths:
            copied = transfer_file_content(path, out)
            logger.debug("Copied %d bytes from %s", copied, path)
            total += copied
            files += 1
        try:
            out.flush()
        except OSError as e:
            raise SplitIOError("failed to write to output", e) from e
    finally:
        if output is not None:
            out.close()

    logger.info("Combined %d files, %d bytes", files, total)
    return total

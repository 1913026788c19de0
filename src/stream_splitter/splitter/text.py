"""Line-count splitting of encoded text."""

import logging
import time
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from stream_splitter.codec import CodecAdapter, resolve_codec
from stream_splitter.config import DEFAULT_PREFIX, get_buffer_size
from stream_splitter.output import RollingFileAllocator, SplitStats, ensure_directory
from stream_splitter.output.types import LINE_ENDING
from stream_splitter.segment import (
    CarryState,
    PendingLine,
    flush_lines,
    segment_lines,
    split_by_chars,
)
from stream_splitter.splitter.inputs import read_chunks
from stream_splitter.splitter.types import LineCharLimit, line_unit

logger = logging.getLogger(__name__)


def iter_lines(
    source: BinaryIO,
    codec: CodecAdapter,
    chunk_size: int,
    stats: SplitStats | None = None,
) -> Iterator[PendingLine]:
    """
    Decode source chunk by chunk and yield its lines in order.

    Incomplete multi-byte sequences and unfinished lines are carried into
    the next chunk; only the very last line can come out unterminated.
    """
    remainder = b""
    carry = CarryState()

    for chunk in read_chunks(source, chunk_size):
        if stats is not None:
            stats.bytes_read += len(chunk)
        data = remainder + chunk if remainder else chunk
        consumed, text = codec.decode(data)
        remainder = data[consumed:]
        lines, carry = segment_lines(text, carry)
        yield from lines

    _, text = codec.decode(remainder, final=True)
    lines, carry = segment_lines(text, carry)
    yield from lines
    yield from flush_lines(carry)


def split_text(
    max_lines: int,
    source: BinaryIO,
    max_chars: int | None = None,
    output_dir: str | Path | None = None,
    prefix: str = DEFAULT_PREFIX,
    extra_suffix: str = "",
    numeric_suffix: bool = False,
    encoding: str | None = None,
    buffer_size: int | None = None,
    line_ending: str = LINE_ENDING,
) -> SplitStats:
    """
    Split text into files of at most max_lines lines.

    With max_chars, a line longer than max_chars characters is broken into
    several physical lines and each of them counts against max_lines.
    Output is written in the input encoding.
    """
    unit = line_unit(max_lines, max_chars)
    codec = resolve_codec(encoding)
    chunk_size = get_buffer_size(buffer_size)
    directory = Path(output_dir) if output_dir is not None else Path.cwd()
    ensure_directory(directory)

    logger.info(
        "Starting text split: max_lines=%d, max_chars=%s, encoding=%s, output=%s, suffix=%s",
        unit.max_lines,
        max_chars if isinstance(unit, LineCharLimit) else "none",
        codec.name,
        directory,
        "numeric" if numeric_suffix else "alphabetic",
    )
    start = time.perf_counter()

    stats = SplitStats()
    allocator = RollingFileAllocator(
        directory,
        unit.max_lines,
        prefix,
        extra_suffix,
        numeric_suffix,
        stats,
        on_open=lambda _path: codec.reset_encoder(),
    )
    with allocator:
        for line in iter_lines(source, codec, chunk_size, stats):
            if isinstance(unit, LineCharLimit):
                records = split_by_chars(line, unit.max_chars, line_ending)
            else:
                records = [line]

            for record in records:
                if allocator.needs_roll:
                    allocator.write(codec.flush_encoder())
                allocator.ensure_capacity()
                allocator.write(codec.encode(record.text))
                stats.records_written += 1
                # An unterminated final fragment is written but not counted.
                if record.terminated:
                    allocator.consume(1)

        allocator.write(codec.flush_encoder())

    logger.info(
        "Done: %d lines into %d files in %.2fs",
        stats.records_written,
        stats.files_written,
        time.perf_counter() - start,
    )
    return stats

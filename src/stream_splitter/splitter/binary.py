"""Byte-count splitting."""

import logging
import time
from pathlib import Path
from typing import BinaryIO

from stream_splitter.config import DEFAULT_PREFIX, get_buffer_size
from stream_splitter.output import RollingFileAllocator, SplitStats, ensure_directory
from stream_splitter.splitter.inputs import read_chunks
from stream_splitter.splitter.types import ByteLimit

logger = logging.getLogger(__name__)


def split_binary(
    max_size: int,
    source: BinaryIO,
    output_dir: str | Path | None = None,
    prefix: str = DEFAULT_PREFIX,
    extra_suffix: str = "",
    numeric_suffix: bool = False,
    buffer_size: int | None = None,
) -> SplitStats:
    """
    Copy source into files of exactly max_size bytes, the last one possibly shorter.

    An empty input still produces one empty file.
    """
    limit = ByteLimit(max_size)
    chunk_size = get_buffer_size(buffer_size)
    directory = Path(output_dir) if output_dir is not None else Path.cwd()
    ensure_directory(directory)

    logger.info(
        "Starting binary split: max_size=%d, buffer=%d, output=%s, suffix=%s",
        limit.max_bytes,
        chunk_size,
        directory,
        "numeric" if numeric_suffix else "alphabetic",
    )
    start = time.perf_counter()

    stats = SplitStats()
    with RollingFileAllocator(
        directory, limit.max_bytes, prefix, extra_suffix, numeric_suffix, stats
    ) as allocator:
        for chunk in read_chunks(source, chunk_size):
            stats.bytes_read += len(chunk)
            allocator.write_bytes(chunk)

    logger.info(
        "Done: %d bytes into %d files in %.2fs",
        stats.bytes_written,
        stats.files_written,
        time.perf_counter() - start,
    )
    return stats

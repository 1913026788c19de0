"""Route a split request to the driver matching its unit."""

from pathlib import Path
from typing import BinaryIO

from stream_splitter.config import DEFAULT_PREFIX
from stream_splitter.output import SplitStats
from stream_splitter.splitter.binary import split_binary
from stream_splitter.splitter.text import split_text
from stream_splitter.splitter.types import ByteLimit, LineCharLimit, LineLimit, SplitUnit


def split_stream(
    unit: SplitUnit,
    source: BinaryIO,
    output_dir: str | Path | None = None,
    prefix: str = DEFAULT_PREFIX,
    extra_suffix: str = "",
    numeric_suffix: bool = False,
    encoding: str | None = None,
    buffer_size: int | None = None,
) -> SplitStats:
    """Run the binary or text splitter depending on the kind of limit."""
    naming = {
        "output_dir": output_dir,
        "prefix": prefix,
        "extra_suffix": extra_suffix,
        "numeric_suffix": numeric_suffix,
        "buffer_size": buffer_size,
    }
    match unit:
        case ByteLimit(max_bytes):
            return split_binary(max_bytes, source, **naming)
        case LineLimit(max_lines):
            return split_text(max_lines, source, encoding=encoding, **naming)
        case LineCharLimit(max_lines, max_chars):
            return split_text(max_lines, source, max_chars=max_chars, encoding=encoding, **naming)
    raise TypeError(f"unsupported split unit: {unit!r}")

"""Split drivers for binary and text input."""

from stream_splitter.splitter.binary import split_binary
from stream_splitter.splitter.dispatch import split_stream
from stream_splitter.splitter.inputs import open_input
from stream_splitter.splitter.text import split_text
from stream_splitter.splitter.types import ByteLimit, LineCharLimit, LineLimit, SplitUnit

__all__ = [
    "ByteLimit",
    "LineCharLimit",
    "LineLimit",
    "SplitUnit",
    "open_input",
    "split_binary",
    "split_stream",
    "split_text",
]

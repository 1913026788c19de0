"""Stream Splitter - split streams into size or line bounded files, and combine them back."""

from stream_splitter.combine import combine_files
from stream_splitter.errors import ArgumentError, PatternError, SplitIOError, SplitterError
from stream_splitter.splitter import split_binary, split_stream, split_text

__all__ = [
    "ArgumentError",
    "PatternError",
    "SplitIOError",
    "SplitterError",
    "combine_files",
    "split_binary",
    "split_stream",
    "split_text",
]

"""Output file naming and rollover."""

from stream_splitter.output.allocator import RollingFileAllocator, ensure_directory
from stream_splitter.output.suffix import initial_suffix, next_suffix
from stream_splitter.output.types import SplitStats

__all__ = [
    "RollingFileAllocator",
    "SplitStats",
    "ensure_directory",
    "initial_suffix",
    "next_suffix",
]

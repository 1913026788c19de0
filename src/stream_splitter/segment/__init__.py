"""Line segmentation of decoded text."""

from stream_splitter.segment.lines import flush_lines, segment_lines, split_by_chars
from stream_splitter.segment.types import CarryState, PendingLine

__all__ = ["CarryState", "PendingLine", "flush_lines", "segment_lines", "split_by_chars"]

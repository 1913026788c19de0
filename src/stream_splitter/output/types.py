"""Shared constants and statistics for output files."""

import os
from dataclasses import dataclass, field
from pathlib import Path

# 1MB write buffer per output file.
WRITE_BUFFER_SIZE = 1024 * 1024

# Terminator appended to records created by splitting a long line.
LINE_ENDING = os.linesep

ALPHABETIC_START = "aa"
NUMERIC_START = "0"


@dataclass
class SplitStats:
    """Statistics from a split run."""

    bytes_read: int = 0
    files_written: int = 0
    bytes_written: int = 0
    records_written: int = 0
    paths: list[Path] = field(default_factory=list)

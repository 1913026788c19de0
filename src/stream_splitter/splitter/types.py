"""Split limits for one run."""

from dataclasses import dataclass
from typing import TypeAlias

from stream_splitter.errors import ArgumentError


@dataclass(frozen=True, slots=True)
class ByteLimit:
    max_bytes: int

    def __post_init__(self) -> None:
        if self.max_bytes <= 0:
            raise ArgumentError("max-size", f"must be greater than zero, got {self.max_bytes}")


@dataclass(frozen=True, slots=True)
class LineLimit:
    max_lines: int

    def __post_init__(self) -> None:
        if self.max_lines <= 0:
            raise ArgumentError("max-lines", f"must be greater than zero, got {self.max_lines}")


@dataclass(frozen=True, slots=True)
class LineCharLimit:
    """Line budget per file plus a cap on characters per physical line."""

    max_lines: int
    max_chars: int

    def __post_init__(self) -> None:
        if self.max_lines <= 0:
            raise ArgumentError("max-lines", f"must be greater than zero, got {self.max_lines}")
        if self.max_chars <= 0:
            raise ArgumentError("max-chars", f"must be greater than zero, got {self.max_chars}")


SplitUnit: TypeAlias = ByteLimit | LineLimit | LineCharLimit


def line_unit(max_lines: int, max_chars: int | None) -> LineLimit | LineCharLimit:
    if max_chars is None:
        return LineLimit(max_lines)
    return LineCharLimit(max_lines, max_chars)

"""Rolling output files bounded by a unit budget."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

from stream_splitter.errors import SplitIOError
from stream_splitter.output.suffix import initial_suffix, next_suffix
from stream_splitter.output.types import WRITE_BUFFER_SIZE, SplitStats

logger = logging.getLogger(__name__)


def ensure_directory(directory: Path) -> None:
    """Create directory (and parents) unless it already exists as a directory."""
    if directory.exists() and not directory.is_dir():
        raise SplitIOError(
            "checking output directory",
            FileExistsError(f"{directory} already exists and is not a directory"),
        )
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SplitIOError("creating output directory", e) from e


class RollingFileAllocator:
    """
    Owns the single open output file and the capacity left in it.

    Capacity is counted in whatever unit the driver consumes (bytes or
    lines). A new file is opened only when a write is about to happen and
    the current one is full, so no empty trailing file is ever created.
    """

    def __init__(
        self,
        directory: Path,
        limit: int,
        prefix: str,
        extra_suffix: str = "",
        numeric_suffix: bool = False,
        stats: SplitStats | None = None,
        on_open: Callable[[Path], None] | None = None,
    ):
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        self._directory = directory
        self._limit = limit
        self._prefix = prefix
        self._extra_suffix = extra_suffix
        self._numeric = numeric_suffix
        self._suffix = initial_suffix(numeric_suffix)
        self._handle: BinaryIO | None = None
        self._path: Path | None = None
        self._available = 0
        self._on_open = on_open
        self._closed = False
        self.stats = stats if stats is not None else SplitStats()

    def __enter__(self) -> "RollingFileAllocator":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def available(self) -> int:
        return self._available

    @property
    def needs_roll(self) -> bool:
        """True when the open file is full and the next unit needs a new file."""
        return self._handle is not None and self._available == 0

    @property
    def suffix(self) -> str:
        """Suffix of the file currently open."""
        return self._suffix

    @property
    def current_path(self) -> Path | None:
        return self._path

    def _path_for(self, suffix: str) -> Path:
        return self._directory / f"{self._prefix}{suffix}{self._extra_suffix}"

    def open(self) -> BinaryIO:
        """Open the first output file. Opening twice is a no-op."""
        if self._closed:
            raise ValueError("allocator is closed")
        if self._handle is None:
            self._open_current()
        return self._handle

    def _open_current(self) -> None:
        path = self._path_for(self._suffix)
        try:
            self._handle = open(path, "wb", buffering=WRITE_BUFFER_SIZE)  # noqa: SIM115
        except OSError as e:
            raise SplitIOError(f"opening output file {path}", e) from e

        self._path = path
        self._available = self._limit
        self.stats.files_written += 1
        self.stats.paths.append(path)
        logger.debug("Opened %s", path)
        if self._on_open is not None:
            self._on_open(path)

    def _finalize(self) -> None:
        handle, self._handle = self._handle, None
        if handle is None:
            return
        try:
            handle.close()
        except OSError as e:
            raise SplitIOError(f"closing output file {self._path}", e) from e
        logger.debug("Finalized %s", self._path)

    def ensure_capacity(self) -> BinaryIO:
        """Return a handle with room for at least one unit, rolling over if full."""
        if self._handle is None:
            return self.open()
        if self._available > 0:
            return self._handle

        self._finalize()
        self._suffix = next_suffix(self._suffix, self._numeric)
        logger.debug("Rolling over, next suffix = %s", self._suffix)
        self._open_current()
        return self._handle

    def consume(self, units: int) -> None:
        if units > self._available:
            raise ValueError(f"cannot consume {units} units, only {self._available} available")
        self._available -= units

    def write(self, data: bytes) -> None:
        """Write data to the current file without touching the capacity counter."""
        handle = self.open()
        try:
            handle.write(data)
        except OSError as e:
            raise SplitIOError(f"writing output file {self._path}", e) from e
        self.stats.bytes_written += len(data)

    def write_bytes(self, data: bytes) -> None:
        """
        Write data counting each byte against capacity.

        The buffer is spread over as many files as it takes, filling each
        one exactly to the limit.
        """
        view = memoryview(data)
        offset = 0
        while offset < len(view):
            self.ensure_capacity()
            count = min(len(view) - offset, self._available)
            self.write(view[offset : offset + count])
            self.consume(count)
            offset += count

    def close(self) -> None:
        self._closed = True
        self._finalize()

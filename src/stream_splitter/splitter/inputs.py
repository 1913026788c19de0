"""Input sources: a named file or standard input."""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from stream_splitter.errors import SplitIOError


@contextmanager
def open_input(path: str | None) -> Iterator[BinaryIO]:
    """
    Open path for binary reading, or yield stdin's buffer when path is None or "-".

    Standard input is not closed on exit.
    """
    if path is None or path == "-":
        yield sys.stdin.buffer
        return

    if Path(path).is_dir():
        raise SplitIOError("opening input file", IsADirectoryError(f"{path} is a directory"))
    try:
        handle = open(path, "rb")  # noqa: SIM115
    except OSError as e:
        raise SplitIOError("opening input file", e) from e
    with handle:
        yield handle


def read_chunks(source: BinaryIO, size: int) -> Iterator[bytes]:
    """Yield chunks of up to size bytes until a read returns nothing."""
    while True:
        try:
            chunk = source.read(size)
        except OSError as e:
            raise SplitIOError("reading from input", e) from e
        if not chunk:
            return
        yield chunk

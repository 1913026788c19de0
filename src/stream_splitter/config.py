"""Run configuration defaults and environment overrides."""

import os

from stream_splitter.errors import ArgumentError

# Environment variable to override the default read chunk size.
BUFFER_SIZE_ENV = "STREAM_SPLITTER_BUFFER_SIZE"

DEFAULT_BUFFER_SIZE = 1024
DEFAULT_PREFIX = "x"

_MULTIPLIERS = {"k": 1024, "m": 1024**2, "g": 1024**3}


def parse_limit(value: str, name: str, allow_multiplier: bool = False) -> int:
    """
    Parse a positive integer limit such as a byte, line or char count.

    With allow_multiplier, a trailing k/m/g scales the value by 1024, 1024**2
    or 1024**3.
    """
    text = value.strip().lower()
    multiplier = 1
    if allow_multiplier and text[-1:] in _MULTIPLIERS:
        multiplier = _MULTIPLIERS[text[-1]]
        text = text[:-1]

    # ASCII digits only.
    if not (text.isascii() and text.isdigit()):
        raise ArgumentError(name, f"parse error: invalid digit found in {value!r}")

    limit = int(text) * multiplier
    if limit == 0:
        raise ArgumentError(name, "must be greater than zero")
    return limit


def get_buffer_size(explicit: int | None = None) -> int:
    """
    Resolve the read chunk size.

    Priority:
    1. Explicit value from the caller
    2. STREAM_SPLITTER_BUFFER_SIZE env var
    3. DEFAULT_BUFFER_SIZE
    """
    if explicit is not None:
        if explicit <= 0:
            raise ArgumentError("buffer-size", f"must be greater than zero, got {explicit}")
        return explicit

    override = os.environ.get(BUFFER_SIZE_ENV, "")
    if override:
        return parse_limit(override, "buffer-size")
    return DEFAULT_BUFFER_SIZE

"""Line boundary detection across chunk boundaries."""

import re

from stream_splitter.segment.types import CarryState, PendingLine

_LINE_END = re.compile(r"\r\n|\r|\n")
_TRAILING_LINE_END = re.compile(r"(?:\r\n|\r|\n)\Z")


def segment_lines(text: str, carry: CarryState) -> tuple[list[PendingLine], CarryState]:
    """
    Split decoded text into terminated lines.

    LF, CR+LF and lone CR all end a line. The unfinished tail, and a CR at
    the very end of text, are returned in the new CarryState rather than
    emitted, so a CR+LF split across two chunks still forms one terminator.
    """
    lines: list[PendingLine] = []
    if not text:
        return lines, carry

    pieces = carry.pieces
    start = 0

    if carry.pending_cr:
        if text[0] == "\n":
            pieces.append("\n")
            start = 1
        lines.append(PendingLine("".join(pieces), True))
        pieces = []

    for match in _LINE_END.finditer(text, start):
        end = match.end()
        if end == len(text) and match.group() == "\r":
            pieces.append(text[start:])
            return lines, CarryState(pieces, pending_cr=True)
        if pieces:
            pieces.append(text[start:end])
            lines.append(PendingLine("".join(pieces), True))
            pieces = []
        else:
            lines.append(PendingLine(text[start:end], True))
        start = end

    if start < len(text):
        pieces.append(text[start:])
    return lines, CarryState(pieces)


def flush_lines(carry: CarryState) -> list[PendingLine]:
    """Emit whatever is left once the input is exhausted."""
    partial = carry.partial
    if not partial:
        return []
    # A trailing bare CR is a complete terminator at end of stream.
    return [PendingLine(partial, carry.pending_cr)]


def split_by_chars(line: PendingLine, max_chars: int, line_ending: str) -> list[PendingLine]:
    """
    Break a line whose body is longer than max_chars into physical records.

    Each record holds at most max_chars body characters. All but the last
    get line_ending appended; the last keeps the original terminator.
    """
    match = _TRAILING_LINE_END.search(line.text) if line.terminated else None
    terminator = match.group() if match else ""
    body = line.text[: len(line.text) - len(terminator)]
    if len(body) <= max_chars:
        return [line]

    pieces = [body[i : i + max_chars] for i in range(0, len(body), max_chars)]
    records = [PendingLine(piece + line_ending, True) for piece in pieces[:-1]]
    records.append(PendingLine(pieces[-1] + terminator, line.terminated))
    return records

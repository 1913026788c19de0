"""Output filename suffix sequences."""

from stream_splitter.output.types import ALPHABETIC_START, NUMERIC_START


def initial_suffix(numeric: bool) -> str:
    return NUMERIC_START if numeric else ALPHABETIC_START


def next_suffix(current: str, numeric: bool) -> str:
    """
    Return the suffix following current.

    Numeric suffixes count up in decimal. Alphabetic suffixes count in
    base 26 with digits a..z: "az" -> "ba". When every letter is "z" the
    letters wrap to "a" and "aa" is appended, so "zz" -> "aaaa", which no
    earlier suffix of the run can equal.
    """
    if numeric:
        return str(int(current) + 1)

    letters = list(current)
    for pos in range(len(letters) - 1, -1, -1):
        if letters[pos] != "z":
            letters[pos] = chr(ord(letters[pos]) + 1)
            return "".join(letters)
        letters[pos] = "a"

    return "".join(letters) + ALPHABETIC_START

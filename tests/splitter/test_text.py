"""Tests for line-count splitting."""

import io
import os
from pathlib import Path

import pytest

from stream_splitter.errors import ArgumentError
from stream_splitter.splitter import split_text


def _read_outputs(paths: list[Path]) -> list[bytes]:
    return [path.read_bytes() for path in paths]


def test_splits_lines_into_files(tmp_path: Path) -> None:
    stats = split_text(2, io.BytesIO(b"a\nb\nc\nd\n"), output_dir=tmp_path)

    assert [p.name for p in stats.paths] == ["xaa", "xab"]
    assert _read_outputs(stats.paths) == [b"a\nb\n", b"c\nd\n"]
    assert stats.records_written == 4


def test_unterminated_last_line_is_written_but_not_counted(tmp_path: Path) -> None:
    stats = split_text(3, io.BytesIO(b"a\nb\nc"), output_dir=tmp_path)
    assert _read_outputs(stats.paths) == [b"a\nb\nc"]

    other = tmp_path / "other"
    stats = split_text(2, io.BytesIO(b"a\nb\nc"), output_dir=other)
    assert _read_outputs(stats.paths) == [b"a\nb\n", b"c"]


def test_crlf_split_between_reads_stays_one_line(tmp_path: Path) -> None:
    # Reads of 3 bytes cut between CR and LF: b"ab\r", b"\ncd", b"\r\n"
    stats = split_text(1, io.BytesIO(b"ab\r\ncd\r\n"), output_dir=tmp_path, buffer_size=3)

    assert _read_outputs(stats.paths) == [b"ab\r\n", b"cd\r\n"]


def test_mixed_terminators_are_preserved(tmp_path: Path) -> None:
    data = b"1\r2\n3\r\n\r\r4"
    stats = split_text(2, io.BytesIO(data), output_dir=tmp_path, buffer_size=1)

    assert _read_outputs(stats.paths) == [b"1\r2\n", b"3\r\n\r", b"\r4"]


def test_multibyte_text_across_reads(tmp_path: Path) -> None:
    data = "".join(f"{i}: あああ\n" for i in range(1024)).encode()
    stats = split_text(100, io.BytesIO(data), output_dir=tmp_path, buffer_size=7)

    outputs = _read_outputs(stats.paths)
    assert len(outputs) == 11
    assert b"".join(outputs) == data
    assert outputs[0].decode().splitlines()[-1] == "99: あああ"
    assert stats.bytes_read == len(data)


def test_output_keeps_input_encoding(tmp_path: Path) -> None:
    data = "あいう\nえお\n".encode("shift_jis")
    stats = split_text(
        1, io.BytesIO(data), output_dir=tmp_path, encoding="shift_jis", buffer_size=1
    )

    assert _read_outputs(stats.paths) == [
        "あいう\n".encode("shift_jis"),
        "えお\n".encode("shift_jis"),
    ]


def test_each_utf16_file_is_decodable_on_its_own(tmp_path: Path) -> None:
    data = "a\nb\n".encode("utf-16")
    stats = split_text(1, io.BytesIO(data), output_dir=tmp_path, encoding="utf-16")

    assert [p.read_bytes().decode("utf-16") for p in stats.paths] == ["a\n", "b\n"]


def test_malformed_input_is_replaced(tmp_path: Path) -> None:
    stats = split_text(10, io.BytesIO(b"a\xff\n"), output_dir=tmp_path)

    assert _read_outputs(stats.paths) == ["a�\n".encode()]


def test_long_lines_are_broken_by_max_chars(tmp_path: Path) -> None:
    stats = split_text(
        2,
        io.BytesIO(b"abcdefg\nhi\n"),
        max_chars=3,
        output_dir=tmp_path,
        line_ending="\n",
    )

    assert _read_outputs(stats.paths) == [b"abc\ndef\n", b"g\nhi\n"]
    assert stats.records_written == 4


def test_max_chars_uses_native_line_ending_by_default(tmp_path: Path) -> None:
    stats = split_text(10, io.BytesIO(b"abc\n"), max_chars=2, output_dir=tmp_path)

    assert _read_outputs(stats.paths) == [b"ab" + os.linesep.encode() + b"c\n"]


def test_max_chars_counts_characters_not_bytes(tmp_path: Path) -> None:
    stats = split_text(
        1,
        io.BytesIO("ああああ\n".encode()),
        max_chars=2,
        output_dir=tmp_path,
        line_ending="\n",
    )

    assert _read_outputs(stats.paths) == ["ああ\n".encode(), "ああ\n".encode()]


def test_invalid_encoding_fails_before_any_output(tmp_path: Path) -> None:
    target = tmp_path / "out"
    with pytest.raises(ArgumentError) as excinfo:
        split_text(1, io.BytesIO(b"a\n"), output_dir=target, encoding="bogus-encoding")

    assert excinfo.value.name == "encoding"
    assert not target.exists()


@pytest.mark.parametrize(
    ("max_lines", "max_chars", "name"),
    [(0, None, "max-lines"), (1, 0, "max-chars")],
)
def test_limits_must_be_positive(tmp_path: Path, max_lines: int, max_chars, name: str) -> None:
    with pytest.raises(ArgumentError) as excinfo:
        split_text(max_lines, io.BytesIO(b"a\n"), max_chars=max_chars, output_dir=tmp_path)
    assert excinfo.value.name == name


def test_multi_megabyte_single_line(tmp_path: Path) -> None:
    data = b"x" * (8 * 1024 * 1024) + b"\n"
    stats = split_text(10, io.BytesIO(data), output_dir=tmp_path)

    assert _read_outputs(stats.paths) == [data]
    assert stats.records_written == 1


def test_multi_megabyte_unterminated_line_with_max_chars(tmp_path: Path) -> None:
    data = b"y" * (4 * 1024 * 1024)
    stats = split_text(
        1024,
        io.BytesIO(data),
        max_chars=4096,
        output_dir=tmp_path,
        line_ending="\n",
    )

    outputs = _read_outputs(stats.paths)
    assert stats.records_written == 1024
    assert len(outputs) == 1
    assert outputs[0].replace(b"\n", b"") == data

"""Tests for the command-line interface."""

import io
import logging
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from stream_splitter import cli


def test_text_subcommand(tmp_path: Path) -> None:
    source = tmp_path / "input.txt"
    source.write_bytes(b"a\nb\nc\nd\n")
    out_dir = tmp_path / "out"

    assert cli.main(["text", "2", "-i", str(source), "-o", str(out_dir)]) == 0

    assert (out_dir / "xaa").read_bytes() == b"a\nb\n"
    assert (out_dir / "xab").read_bytes() == b"c\nd\n"


def test_text_subcommand_with_max_chars(tmp_path: Path) -> None:
    source = tmp_path / "input.txt"
    source.write_bytes("あいうえお\n".encode("euc_jp"))

    exit_code = cli.main(
        [
            "t",
            "10",
            "--max-chars",
            "5",
            "-e",
            "euc_jp",
            "-i",
            str(source),
            "-o",
            str(tmp_path),
            "-p",
            "jp_",
        ]
    )

    assert exit_code == 0
    assert (tmp_path / "jp_aa").read_bytes() == source.read_bytes()


def test_binary_subcommand_with_multiplier(tmp_path: Path) -> None:
    source = tmp_path / "input.bin"
    source.write_bytes(b"\x00" * 2049)

    exit_code = cli.main(
        [
            "binary",
            "1k",
            "-i",
            str(source),
            "-o",
            str(tmp_path / "out"),
            "-n",
            "--extra-suffix",
            ".part",
            "--buffer-size",
            "300",
        ]
    )

    assert exit_code == 0
    sizes = {p.name: p.stat().st_size for p in (tmp_path / "out").iterdir()}
    assert sizes == {"x0.part": 1024, "x1.part": 1024, "x2.part": 1}


def test_binary_reads_stdin(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdin", SimpleNamespace(buffer=io.BytesIO(b"abcdef")))

    assert cli.main(["b", "4", "-o", str(tmp_path)]) == 0

    assert (tmp_path / "xaa").read_bytes() == b"abcd"
    assert (tmp_path / "xab").read_bytes() == b"ef"


def test_split_then_combine_round_trip(tmp_path: Path) -> None:
    data = bytes(range(256)) * 10
    source = tmp_path / "input.bin"
    source.write_bytes(data)
    parts = tmp_path / "parts"
    combined = tmp_path / "combined.bin"

    assert cli.main(["binary", "700", "-i", str(source), "-o", str(parts)]) == 0
    assert cli.main(["combine", str(parts / "x*"), "-o", str(combined)]) == 0

    assert combined.read_bytes() == data


def test_invalid_limit_exits_nonzero(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR):
        exit_code = cli.main(["binary", "lots", "-o", str(tmp_path)])

    assert exit_code == 1
    assert "max-size" in caplog.text


def test_unknown_encoding_exits_nonzero(tmp_path: Path) -> None:
    source = tmp_path / "input.txt"
    source.write_bytes(b"a\n")

    exit_code = cli.main(["text", "1", "-e", "klingon", "-i", str(source), "-o", str(tmp_path)])

    assert exit_code == 1


def test_missing_input_exits_nonzero(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR):
        exit_code = cli.main(["text", "1", "-i", str(tmp_path / "missing.txt")])

    assert exit_code == 1
    assert "opening input file" in caplog.text


def test_output_path_that_is_a_file_exits_nonzero(tmp_path: Path) -> None:
    source = tmp_path / "input.bin"
    source.write_bytes(b"abc")
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    assert cli.main(["binary", "1", "-i", str(source), "-o", str(blocker)]) == 1


def test_subcommand_is_required() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_non_ascii_digit_limit_exits_nonzero(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR):
        exit_code = cli.main(["binary", "²", "-o", str(tmp_path)])

    assert exit_code == 1
    assert "max-size" in caplog.text

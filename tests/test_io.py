"""Pillow dimension reader and line report writer."""

from __future__ import annotations

from pathlib import Path

import pytest

from aspect_scanner.core.dimension_reader import PillowDimensionReader
from aspect_scanner.core.report_writer import LineReportWriter
from aspect_scanner.domain.errors import DecodeError, OutputWriteError


def test_reader_returns_width_and_height(tmp_path: Path, make_image) -> None:
    path = make_image(tmp_path / "wide.jpg", 64, 36)

    assert PillowDimensionReader().read_dimensions(path) == (64, 36)


def test_reader_ignores_extension_and_reads_container(tmp_path: Path, make_image) -> None:
    path = make_image(tmp_path / "actually_png.jpg", 30, 20, fmt="PNG")

    assert PillowDimensionReader().read_dimensions(path) == (30, 20)


def test_reader_raises_decode_error_for_garbage(tmp_path: Path) -> None:
    path = tmp_path / "corrupt.jpg"
    path.write_bytes(b"this is not an image")

    with pytest.raises(DecodeError) as excinfo:
        PillowDimensionReader().read_dimensions(path)

    assert excinfo.value.path == path
    assert excinfo.value.cause


def test_reader_raises_decode_error_for_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "gone.jpg"

    with pytest.raises(DecodeError) as excinfo:
        PillowDimensionReader().read_dimensions(path)

    assert excinfo.value.path == path


def test_writer_writes_one_line_per_entry(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"

    LineReportWriter().write(target, ["/media/a.jpg", "/media/Ünïcode.jpg"])

    assert target.read_bytes() == "/media/a.jpg\n/media/Ünïcode.jpg\n".encode("utf-8")


def test_writer_creates_empty_file_for_empty_list(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out.txt"

    LineReportWriter().write(target, [])

    assert target.exists()
    assert target.read_text(encoding="utf-8") == ""


def test_writer_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    target.write_text("stale\nlines\n", encoding="utf-8")

    LineReportWriter().write(target, ["fresh"])

    assert target.read_text(encoding="utf-8") == "fresh\n"


def test_writer_wraps_os_errors(tmp_path: Path) -> None:
    # A directory at the destination path cannot be opened for writing
    target = tmp_path / "taken"
    target.mkdir()

    with pytest.raises(OutputWriteError) as excinfo:
        LineReportWriter().write(target, ["x"])

    assert excinfo.value.path == target

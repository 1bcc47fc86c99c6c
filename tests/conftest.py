"""Shared fixtures and fakes for scanner tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from PIL import Image

from aspect_scanner.domain.errors import DecodeError


class FakeWalker:
    """Yields a fixed list of paths regardless of root."""

    def __init__(self, paths: list[Path]) -> None:
        self.paths = paths
        self.calls: list[tuple[Path, int | None]] = []

    def walk(self, root: Path, max_depth: int | None = None) -> Iterator[Path]:
        self.calls.append((root, max_depth))
        yield from self.paths


class FakeReader:
    """Returns canned dimensions; a string entry is raised as a DecodeError cause."""

    def __init__(self, dimensions: dict[str, tuple[int, int] | str]) -> None:
        self.dimensions = dimensions
        self.read: list[Path] = []

    def read_dimensions(self, path: Path) -> tuple[int, int]:
        self.read.append(path)
        entry = self.dimensions[path.name]
        if isinstance(entry, str):
            raise DecodeError(path, entry)
        return entry


@pytest.fixture
def make_image():
    """Create a small real image file with the given size."""

    def _make(path: Path, width: int, height: int, fmt: str = "JPEG") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", (width, height), color=(40, 80, 120)).save(path, fmt)
        return path

    return _make

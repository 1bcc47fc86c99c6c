"""ScanConfiguration validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from aspect_scanner.domain.errors import ConfigurationError
from aspect_scanner.domain.models import ScanConfiguration


def test_defaults(tmp_path: Path) -> None:
    config = ScanConfiguration.create(tmp_path)

    assert config.root_directory == tmp_path.resolve()
    assert config.root_directory.is_absolute()
    assert config.target_ratio == pytest.approx(16 / 9)
    assert config.tolerance_percent == 2.0
    assert config.extension == ".jpg"
    assert config.name_pattern == ""
    assert config.output_path == Path("non_conforming.txt")
    assert config.max_depth is None
    assert config.workers == 1


def test_window_properties(tmp_path: Path) -> None:
    config = ScanConfiguration.create(tmp_path, target_ratio=2.0, tolerance_percent=10)

    assert config.min_acceptable == pytest.approx(1.8)
    assert config.max_acceptable == pytest.approx(2.2)


def test_missing_root_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="does not exist"):
        ScanConfiguration.create(tmp_path / "missing")


def test_file_root_is_rejected(tmp_path: Path) -> None:
    target = tmp_path / "file.jpg"
    target.write_bytes(b"")

    with pytest.raises(ConfigurationError, match="not a directory"):
        ScanConfiguration.create(target)


@pytest.mark.parametrize("ratio", [0, -1.0, float("nan"), float("inf")])
def test_invalid_target_ratio(tmp_path: Path, ratio: float) -> None:
    with pytest.raises(ConfigurationError):
        ScanConfiguration.create(tmp_path, target_ratio=ratio)


@pytest.mark.parametrize("tolerance", [-0.1, float("nan")])
def test_invalid_tolerance(tmp_path: Path, tolerance: float) -> None:
    with pytest.raises(ConfigurationError):
        ScanConfiguration.create(tmp_path, tolerance_percent=tolerance)


def test_zero_tolerance_is_allowed(tmp_path: Path) -> None:
    config = ScanConfiguration.create(tmp_path, tolerance_percent=0)

    assert config.min_acceptable == config.max_acceptable == config.target_ratio


@pytest.mark.parametrize(("given", "expected"), [("JPG", ".jpg"), (".PNG", ".png"), (" jpeg ", ".jpeg")])
def test_extension_is_normalized(tmp_path: Path, given: str, expected: str) -> None:
    assert ScanConfiguration.create(tmp_path, extension=given).extension == expected


@pytest.mark.parametrize("extension", ["", ".", "  "])
def test_empty_extension_is_rejected(tmp_path: Path, extension: str) -> None:
    with pytest.raises(ConfigurationError):
        ScanConfiguration.create(tmp_path, extension=extension)


def test_negative_depth_and_zero_workers_are_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        ScanConfiguration.create(tmp_path, max_depth=-1)
    with pytest.raises(ConfigurationError):
        ScanConfiguration.create(tmp_path, workers=0)


def test_configuration_is_immutable(tmp_path: Path) -> None:
    config = ScanConfiguration.create(tmp_path)

    with pytest.raises(AttributeError):
        config.tolerance_percent = 5.0  # type: ignore[misc]

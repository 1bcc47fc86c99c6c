"""
Aspect Scanner Domain Models.

Immutable value objects representing the core domain concepts.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

DEFAULT_TARGET_RATIO = 16 / 9
DEFAULT_TOLERANCE_PERCENT = 2.0
DEFAULT_EXTENSION = '.jpg'
DEFAULT_OUTPUT_NAME = 'non_conforming.txt'


@dataclass(frozen=True)
class ImageDescriptor:
    """
    Immutable representation of a decoded image's dimensions.

    Attributes:
        path: Absolute path to the image file
        width: Width in pixels
        height: Height in pixels
    """

    path: Path
    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        """Get width divided by height."""
        return self.width / self.height


@dataclass(frozen=True)
class DecodeFailure:
    """
    Immutable record of a file whose dimensions could not be read.

    Attributes:
        path: Path to the file
        cause: Why it failed
    """

    path: Path
    cause: str


@dataclass(frozen=True)
class ScanConfiguration:
    """
    Immutable configuration for one scan.

    Use create() to build a validated instance.

    Attributes:
        root_directory: Absolute directory to scan
        output_path: Where the non-conforming list is written
        name_pattern: Case-insensitive substring the file name must contain
        target_ratio: Expected width / height
        tolerance_percent: Allowed deviation as a percentage of target_ratio
        extension: Lower-case file extension including the dot
        max_depth: Maximum depth (None for unlimited, 0 for root only)
        workers: Number of dimension-reading threads (1 for sequential)
    """

    root_directory: Path
    output_path: Path
    name_pattern: str = ""
    target_ratio: float = DEFAULT_TARGET_RATIO
    tolerance_percent: float = DEFAULT_TOLERANCE_PERCENT
    extension: str = DEFAULT_EXTENSION
    max_depth: Optional[int] = None
    workers: int = 1

    @classmethod
    def create(
        cls,
        root_directory: Path | str,
        output_path: Path | str | None = None,
        name_pattern: str = "",
        target_ratio: float = DEFAULT_TARGET_RATIO,
        tolerance_percent: float = DEFAULT_TOLERANCE_PERCENT,
        extension: str = DEFAULT_EXTENSION,
        max_depth: int | None = None,
        workers: int = 1,
    ) -> 'ScanConfiguration':
        """
        Validate inputs and build a configuration.

        Args:
            root_directory: Directory to scan (must exist)
            output_path: Output file (defaults to non_conforming.txt in cwd)
            name_pattern: Filename substring filter
            target_ratio: Expected aspect ratio (positive)
            tolerance_percent: Allowed deviation in percent (non-negative)
            extension: File extension to match, with or without the dot
            max_depth: Maximum depth (None for unlimited)
            workers: Thread count for dimension reading

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If any value is invalid
        """
        root = Path(root_directory).expanduser()
        if not root.exists():
            raise ConfigurationError(f"Path does not exist: {root}")
        if not root.is_dir():
            raise ConfigurationError(f"Path is not a directory: {root}")

        if not _is_finite_number(target_ratio) or target_ratio <= 0:
            raise ConfigurationError(
                f"Target ratio must be a positive number, got {target_ratio!r}"
            )
        if not _is_finite_number(tolerance_percent) or tolerance_percent < 0:
            raise ConfigurationError(
                f"Tolerance percent must be a non-negative number, got {tolerance_percent!r}"
            )
        if max_depth is not None and max_depth < 0:
            raise ConfigurationError(f"Max depth must be >= 0, got {max_depth}")
        if workers < 1:
            raise ConfigurationError(f"Workers must be >= 1, got {workers}")

        extension = extension.strip().lower()
        if not extension or extension == '.':
            raise ConfigurationError("Extension must not be empty")
        if not extension.startswith('.'):
            extension = '.' + extension

        output = Path(output_path) if output_path is not None else Path(DEFAULT_OUTPUT_NAME)

        return cls(
            root_directory=root.resolve(),
            output_path=output.expanduser(),
            name_pattern=name_pattern,
            target_ratio=float(target_ratio),
            tolerance_percent=float(tolerance_percent),
            extension=extension,
            max_depth=max_depth,
            workers=workers,
        )

    @property
    def min_acceptable(self) -> float:
        """Get the lowest conforming ratio."""
        return self.target_ratio * (1 - self.tolerance_percent / 100)

    @property
    def max_acceptable(self) -> float:
        """Get the highest conforming ratio."""
        return self.target_ratio * (1 + self.tolerance_percent / 100)


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


@dataclass(frozen=True)
class ScanStats:
    """
    Immutable scan statistics.

    Attributes:
        files_discovered: Files matching extension and name filter
        non_conforming: Files outside the tolerance window
        failed: Files whose dimensions could not be read
    """

    files_discovered: int = 0
    non_conforming: int = 0
    failed: int = 0

    @property
    def conforming(self) -> int:
        """Get number of files inside the tolerance window."""
        return self.files_discovered - self.non_conforming - self.failed


@dataclass(frozen=True)
class ScanResult:
    """
    Immutable result of a scan.

    Attributes:
        non_conforming: Paths outside the tolerance window, in discovery order
        failures: Files that could not be decoded
        files_discovered: Number of files that matched the filters
        configuration: Configuration used for the scan
    """

    non_conforming: list[Path] = field(default_factory=list)
    failures: list[DecodeFailure] = field(default_factory=list)
    files_discovered: int = 0
    configuration: Optional[ScanConfiguration] = None

    @property
    def stats(self) -> ScanStats:
        """Get summary counts."""
        return ScanStats(
            files_discovered=self.files_discovered,
            non_conforming=len(self.non_conforming),
            failed=len(self.failures),
        )

    @property
    def failed_count(self) -> int:
        """Get number of files skipped due to decode failure."""
        return len(self.failures)

    @property
    def has_non_conforming(self) -> bool:
        """Check if any non-conforming files were found."""
        return bool(self.non_conforming)

    @property
    def has_failures(self) -> bool:
        """Check if any files failed to decode."""
        return bool(self.failures)

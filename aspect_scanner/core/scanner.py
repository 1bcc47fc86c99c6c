"""
Aspect Ratio Scanner.

Scans directories for images whose aspect ratio deviates from a target.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from ..domain.errors import DecodeError
from ..domain.models import (
    DecodeFailure,
    ImageDescriptor,
    ScanConfiguration,
    ScanResult,
)
from ..protocols import DimensionReaderProtocol, FileWalkerProtocol
from .classifier import is_conforming
from .dimension_reader import PillowDimensionReader
from .name_filter import ImageNameFilter
from .walker import FilesystemWalker

logger = logging.getLogger(__name__)


class AspectRatioScanner:
    """
    Finds images outside the configured tolerance window.

    Following Single Responsibility Principle and Dependency Injection.
    """

    def __init__(
        self,
        walker: FileWalkerProtocol | None = None,
        reader: DimensionReaderProtocol | None = None,
    ):
        """
        Initialize scanner.

        Args:
            walker: File walker to use (creates default if None)
            reader: Dimension reader to use (creates default if None)
        """
        self.walker = walker or FilesystemWalker()
        self.reader = reader or PillowDimensionReader()

    def scan(self, config: ScanConfiguration) -> ScanResult:
        """
        Scan the configured directory.

        Three steps:
        1. Discover files matching extension and name pattern
        2. Read dimensions of each file, collecting failures
        3. Classify and keep non-conforming paths

        Args:
            config: Validated scan configuration

        Returns:
            Scan result with non-conforming paths, failures and counts
        """
        candidates = self.discover(config)

        if not candidates:
            logger.info("No matching files found")
            return ScanResult(configuration=config)

        logger.info(f"Found {len(candidates)} matching file(s)")

        non_conforming: list[Path] = []
        failures: list[DecodeFailure] = []

        for path, outcome in self._read_all(candidates, config.workers):
            if isinstance(outcome, DecodeFailure):
                logger.warning(f"Skipping {path}: {outcome.cause}")
                failures.append(outcome)
                continue

            if not is_conforming(
                outcome.width,
                outcome.height,
                config.target_ratio,
                config.tolerance_percent,
            ):
                logger.debug(
                    f"Non-conforming: {path.name} "
                    f"({outcome.width}x{outcome.height}, ratio {outcome.aspect_ratio:.4f})"
                )
                non_conforming.append(path)

        logger.info(
            f"Scan complete: {len(non_conforming)} non-conforming, "
            f"{len(failures)} failed, {len(candidates)} total"
        )

        return ScanResult(
            non_conforming=non_conforming,
            failures=failures,
            files_discovered=len(candidates),
            configuration=config,
        )

    def discover(self, config: ScanConfiguration) -> list[Path]:
        """
        Find candidate files under the root directory.

        Args:
            config: Scan configuration

        Returns:
            Matching file paths in walk order
        """
        name_filter = ImageNameFilter(config.name_pattern, config.extension)
        return [
            path
            for path in self.walker.walk(config.root_directory, config.max_depth)
            if name_filter.matches(path)
        ]

    def describe(self, path: Path) -> ImageDescriptor:
        """
        Read dimensions of one file.

        Args:
            path: Image file

        Returns:
            Image descriptor

        Raises:
            DecodeError: If dimensions cannot be read or are not positive
        """
        width, height = self.reader.read_dimensions(path)
        if width <= 0 or height <= 0:
            raise DecodeError(path, f"invalid dimensions {width}x{height}")
        return ImageDescriptor(path=path, width=width, height=height)

    def _evaluate(self, path: Path) -> ImageDescriptor | DecodeFailure:
        try:
            return self.describe(path)
        except DecodeError as e:
            return DecodeFailure(path=path, cause=e.cause)

    def _read_all(self, paths: list[Path], workers: int):
        """
        Yield (path, descriptor or failure) for every path.

        Sequential mode preserves discovery order; threaded mode yields
        in completion order.
        """
        if workers <= 1:
            for path in paths:
                yield path, self._evaluate(path)
            return

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self._evaluate, path): path for path in paths}
            for future in as_completed(futures):
                yield futures[future], future.result()

"""Protocol interfaces for dependency injection."""

from pathlib import Path
from typing import Iterable, Iterator, Protocol

from .domain.models import ScanConfiguration, ScanResult


class FileWalkerProtocol(Protocol):
    """Interface for recursive file enumeration."""
    
    def walk(self, root: Path, max_depth: int | None = None) -> Iterator[Path]:
        """
        Yield every file under root.
        
        Args:
            root: Directory to walk
            max_depth: Maximum depth (None for unlimited, 0 for root only)
            
        Returns:
            Lazy sequence of file paths (files only)
        """
        ...


class DimensionReaderProtocol(Protocol):
    """Interface for reading image dimensions."""
    
    def read_dimensions(self, path: Path) -> tuple[int, int]:
        """
        Read pixel width and height without decoding pixel data.
        
        Args:
            path: Image file
            
        Returns:
            Tuple of (width, height)
            
        Raises:
            DecodeError: If the file cannot be read or parsed
        """
        ...


class ReportWriterProtocol(Protocol):
    """Interface for writing the result list."""
    
    def write(self, path: Path, lines: Iterable[str]) -> None:
        """
        Write lines to path, overwriting any existing file.
        
        Args:
            path: Destination file
            lines: Lines to write, without newlines
            
        Raises:
            OutputWriteError: If the destination cannot be written
        """
        ...


class ImageScannerProtocol(Protocol):
    """Interface for the scan pipeline."""
    
    def scan(self, config: ScanConfiguration) -> ScanResult:
        """
        Scan the configured directory for non-conforming images.
        
        Args:
            config: Validated scan configuration
            
        Returns:
            Non-conforming paths, failures and counts
        """
        ...

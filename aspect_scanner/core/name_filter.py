"""
Image Name Filter.

Selects candidate image files by extension and filename substring.
"""

from pathlib import Path

from ..domain.models import DEFAULT_EXTENSION


class ImageNameFilter:
    """
    Matches files by extension and case-insensitive name substring.

    Following Single Responsibility Principle.
    """

    def __init__(self, name_pattern: str = "", extension: str = DEFAULT_EXTENSION):
        """
        Initialize filter.

        Args:
            name_pattern: Substring the file name must contain (empty matches all)
            extension: Extension including the dot, compared case-insensitively
        """
        self.name_pattern = name_pattern.casefold()
        self.extension = extension.lower()

    def matches(self, path: Path) -> bool:
        """
        Check if path is a candidate image.

        Args:
            path: File path to check

        Returns:
            True if extension and name pattern both match
        """
        if path.suffix.lower() != self.extension:
            return False
        return self.name_pattern in path.name.casefold()

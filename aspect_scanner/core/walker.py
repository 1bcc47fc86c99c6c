"""
Filesystem Walker.

Enumerates files under a directory tree.
"""

import logging
import os
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


class FilesystemWalker:
    """
    Lazily yields every file below a root directory.

    Filtering is left to the caller. Directories that cannot be listed
    are logged and skipped; the rest of the tree is still walked.
    """

    def walk(self, root: Path, max_depth: int | None = None) -> Iterator[Path]:
        """
        Yield files under root.

        Args:
            root: Directory to walk
            max_depth: Maximum depth (None for unlimited, 0 for root only)

        Returns:
            Iterator of file paths
        """
        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_error):
            current = Path(dirpath)
            depth = len(current.relative_to(root).parts)

            if max_depth is not None and depth >= max_depth:
                # Files here are still within depth; subdirectories are not
                dirnames.clear()

            for name in filenames:
                item = current / name
                if item.is_file():
                    yield item

    def _on_error(self, error: OSError) -> None:
        logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror or error}")

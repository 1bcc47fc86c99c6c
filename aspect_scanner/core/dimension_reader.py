"""
Pillow Dimension Reader.

Reads image width and height from the file header.
"""

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ..domain.errors import DecodeError

logger = logging.getLogger(__name__)


class PillowDimensionReader:
    """
    Reads dimensions with Pillow.

    Image.open() only parses the header; pixel data is never loaded.
    """

    def read_dimensions(self, path: Path) -> tuple[int, int]:
        """
        Read pixel width and height.

        Args:
            path: Image file

        Returns:
            Tuple of (width, height)

        Raises:
            DecodeError: If the file is missing, unreadable or not an image
        """
        try:
            with Image.open(path) as img:
                width, height = img.size
        except UnidentifiedImageError as exc:
            raise DecodeError(path, "not a recognized image") from exc
        except Image.DecompressionBombError as exc:
            raise DecodeError(path, f"decompression bomb: {exc}") from exc
        except (OSError, ValueError, SyntaxError) as exc:
            raise DecodeError(path, f"{type(exc).__name__}: {exc}") from exc

        logger.debug(f"{path.name}: {width}x{height}")
        return width, height

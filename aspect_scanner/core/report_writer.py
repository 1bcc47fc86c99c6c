"""
Line Report Writer.

Writes the non-conforming path list as UTF-8 text, one entry per line.
"""

import logging
from pathlib import Path
from typing import Iterable

from ..domain.errors import OutputWriteError

logger = logging.getLogger(__name__)


class LineReportWriter:
    """
    Writes newline-separated lines to a file.

    Following Single Responsibility Principle.
    """

    def write(self, path: Path, lines: Iterable[str]) -> None:
        """
        Write lines to path, overwriting any existing file.

        An empty sequence produces an empty file.

        Args:
            path: Destination file
            lines: Lines to write, without newlines

        Raises:
            OutputWriteError: If the destination cannot be written
        """
        entries = [str(line) for line in lines]
        content = ''.join(f"{entry}\n" for entry in entries)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8', newline='\n')
        except OSError as e:
            raise OutputWriteError(path, str(e)) from e

        logger.info(f"Results saved to: {path} ({len(entries)} line(s))")

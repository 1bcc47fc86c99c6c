"""Core package - business logic implementations."""

from .classifier import acceptable_range, is_conforming, parse_ratio
from .dimension_reader import PillowDimensionReader
from .name_filter import ImageNameFilter
from .report_writer import LineReportWriter
from .scanner import AspectRatioScanner
from .walker import FilesystemWalker

__all__ = [
    'AspectRatioScanner',
    'FilesystemWalker',
    'ImageNameFilter',
    'LineReportWriter',
    'PillowDimensionReader',
    'acceptable_range',
    'is_conforming',
    'parse_ratio',
]

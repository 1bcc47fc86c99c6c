"""
Aspect Scanner.

Finds images in a directory tree whose aspect ratio deviates
from a target ratio beyond a tolerance.

Public API:
    - AspectRatioScanner: Scan for non-conforming images
    - ScanConfiguration: Validated, immutable scan settings
    - ScanResult: Non-conforming paths, failures and counts
    - is_conforming: Ratio classifier
"""

from .core.classifier import is_conforming
from .core.scanner import AspectRatioScanner
from .domain.models import ScanConfiguration, ScanResult

__all__ = [
    'AspectRatioScanner',
    'ScanConfiguration',
    'ScanResult',
    'is_conforming',
]

__version__ = '1.0.0'

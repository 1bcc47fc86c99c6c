"""Domain package - immutable models and errors."""

from .errors import (
    AspectScannerError,
    ConfigurationError,
    DecodeError,
    OutputWriteError,
)
from .models import (
    DecodeFailure,
    ImageDescriptor,
    ScanConfiguration,
    ScanResult,
    ScanStats,
)

__all__ = [
    'AspectScannerError',
    'ConfigurationError',
    'DecodeError',
    'DecodeFailure',
    'ImageDescriptor',
    'OutputWriteError',
    'ScanConfiguration',
    'ScanResult',
    'ScanStats',
]

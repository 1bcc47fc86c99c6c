"""
Aspect Scanner Errors.

Fatal errors (configuration, output) propagate to the caller.
Decode errors are recoverable and collected per file.
"""

from pathlib import Path


class AspectScannerError(Exception):
    """Base class for all scanner errors."""


class ConfigurationError(AspectScannerError):
    """Invalid scan configuration; the scan never starts."""


class DecodeError(AspectScannerError):
    """
    A matched file could not be read for dimensions.
    
    Attributes:
        path: File that failed
        cause: Human-readable reason
    """
    
    def __init__(self, path: Path, cause: str):
        super().__init__(f"Cannot read dimensions of {path}: {cause}")
        self.path = path
        self.cause = cause


class OutputWriteError(AspectScannerError):
    """
    The output list could not be written.
    
    Raised after the scan completed; the in-memory result is unaffected.
    """
    
    def __init__(self, path: Path, cause: str):
        super().__init__(f"Cannot write output to {path}: {cause}")
        self.path = path
        self.cause = cause

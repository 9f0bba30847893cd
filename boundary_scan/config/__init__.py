"""
Configuration for boundary scanners.
"""

from .scanner_config import ScanMode, ScannerConfig

__all__ = [
    "ScanMode",
    "ScannerConfig",
]

"""
Boundary Scan Package

Traces the boundaries of connected objects in binary images (numpy masks)
and measures the resulting contours.
"""

from .config import ScanMode, ScannerConfig
from .connectivity import ConnectivityType
from .errors import (
    BoundaryScanError,
    IllegalStateError,
    InvalidArgumentError,
    OutOfBoundsError,
    ScanInterruptedError,
)
from .matrix import BinaryMatrix, OutsidePolicy, as_binary_matrix
from .scanning import (
    BoundaryScanner,
    BoundaryScannerWrapper,
    CancellationContext,
    ContourLineType,
    Side,
    Step,
    create_scanner,
    get_all_boundaries_scanner,
    get_main_boundaries_scanner,
    get_single_boundary_scanner,
    trace_contour,
)

__all__ = [
    "ScanMode",
    "ScannerConfig",
    "ConnectivityType",
    "BoundaryScanError",
    "IllegalStateError",
    "InvalidArgumentError",
    "OutOfBoundsError",
    "ScanInterruptedError",
    "BinaryMatrix",
    "OutsidePolicy",
    "as_binary_matrix",
    "BoundaryScanner",
    "BoundaryScannerWrapper",
    "CancellationContext",
    "ContourLineType",
    "Side",
    "Step",
    "create_scanner",
    "get_all_boundaries_scanner",
    "get_main_boundaries_scanner",
    "get_single_boundary_scanner",
    "trace_contour",
]

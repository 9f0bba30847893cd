"""
Boundary scanning of 2D binary matrices.

Scanners trace the boundaries of connected objects pixel side by pixel side;
contour helpers turn the traced positions into polylines, and wrappers layer
extra behaviour (measurers) onto a scanner.
"""

from .context import CancellationContext, ScanContext
from .contour import (
    ContourLineType,
    contour_length,
    contour_point,
    contour_to_cv,
    oriented_contour_area,
    trace_contour,
)
from .geometry import ScannerPhase, ScanState, Side, Step, step_for
from .scanner import (
    AllBoundariesScanner,
    BoundaryScanner,
    MainBoundariesScanner,
    SingleBoundaryScanner,
    create_scanner,
    get_all_boundaries_scanner,
    get_main_boundaries_scanner,
    get_single_boundary_scanner,
)
from .wrapper import BoundaryScannerWrapper

__all__ = [
    "CancellationContext",
    "ScanContext",
    "ContourLineType",
    "contour_length",
    "contour_point",
    "contour_to_cv",
    "oriented_contour_area",
    "trace_contour",
    "ScannerPhase",
    "ScanState",
    "Side",
    "Step",
    "step_for",
    "AllBoundariesScanner",
    "BoundaryScanner",
    "MainBoundariesScanner",
    "SingleBoundaryScanner",
    "create_scanner",
    "get_all_boundaries_scanner",
    "get_main_boundaries_scanner",
    "get_single_boundary_scanner",
    "BoundaryScannerWrapper",
]

"""
Mapping of scanner positions to contour points.

Every elementary step of a boundary scanner defines one point of a closed
contour. Three conventions are supported:

- STRICT_BOUNDARY: the pixel vertex between the previous and the current
  boundary segments; the contour is the exact boundary of the object, so a
  single pixel gives a unit square (perimeter 4, area 1).
- PIXEL_CENTERS_POLYLINE: the center of the current pixel; a single pixel
  degenerates to a point (perimeter 0, area 0). For objects larger than a
  pixel this is the contour OpenCV's findContours() reports.
- SEGMENT_CENTERS_POLYLINE: the middle of the current boundary segment; a
  single pixel gives a diamond (perimeter 2 * sqrt(2), area 0.5).
"""

import logging
from enum import Enum
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np

from ..errors import IllegalStateError, InvalidArgumentError
from .context import validate_check_interval

if TYPE_CHECKING:
    from .context import ScanContext
    from .scanner import BoundaryScanner

logger = logging.getLogger(__name__)


class ContourLineType(Enum):
    """Style of the contour line built from the scanner positions."""
    STRICT_BOUNDARY = 0
    PIXEL_CENTERS_POLYLINE = 1
    SEGMENT_CENTERS_POLYLINE = 2

    @property
    def code(self) -> int:
        return self.value

    def x(self, scanner: "BoundaryScanner") -> float:
        return contour_point(scanner, self)[0]

    def y(self, scanner: "BoundaryScanner") -> float:
        return contour_point(scanner, self)[1]

    def point(self, scanner: "BoundaryScanner") -> Tuple[float, float]:
        return contour_point(scanner, self)

    @classmethod
    def from_name(cls, name: str) -> "ContourLineType":
        """Parse a case-insensitive name such as "pixel_centers_polyline"."""
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError) as e:
            raise InvalidArgumentError(f"Unknown contour line type: {name!r}") from e


def contour_point(scanner: "BoundaryScanner", line_type: ContourLineType) -> Tuple[float, float]:
    """
    Get the contour point of the current scanner position.

    Args:
        scanner: Positioned scanner that made at least one step
        line_type: Contour style

    Returns:
        (x, y) in pixel coordinates

    Raises:
        IllegalStateError: The scanner is not positioned or made no steps
        InvalidArgumentError: line_type is not a ContourLineType
    """
    if not scanner.is_initialized():
        raise IllegalStateError("The boundary scanner is not positioned yet")
    if not scanner.is_moved_along_boundary():
        raise IllegalStateError("The boundary scanner did not perform any steps yet")
    if line_type is ContourLineType.STRICT_BOUNDARY:
        step = scanner.last_step
        return scanner.x + step.pixel_vertex_x, scanner.y + step.pixel_vertex_y
    elif line_type is ContourLineType.PIXEL_CENTERS_POLYLINE:
        return float(scanner.x), float(scanner.y)
    elif line_type is ContourLineType.SEGMENT_CENTERS_POLYLINE:
        side = scanner.side
        return scanner.x + side.center_x, scanner.y + side.center_y
    else:
        raise InvalidArgumentError(f"Unsupported contour line type: {line_type!r}")


def trace_contour(
    scanner: "BoundaryScanner",
    line_type: Optional[ContourLineType] = None,
    context: Optional["ScanContext"] = None,
    check_interval: Optional[int] = None,
) -> np.ndarray:
    """
    Trace the current boundary and collect one contour point per step.

    The scanner must be positioned at the start of a boundary (typically by
    next_boundary()); it is left at the finished state, so its counters and
    area() / perimeter() describe the same contour.

    Args:
        scanner: Positioned scanner
        line_type: Contour style; defaults to scanner.contour_line_type
        context: Optional execution context checked between steps
        check_interval: Number of steps between interruption checks;
            defaults to scanner.check_interval

    Returns:
        (N, 2) float array of (x, y) points, N == scanner.step_count
    """
    if line_type is None:
        line_type = scanner.contour_line_type
    if check_interval is None:
        check_interval = scanner.check_interval
    validate_check_interval(check_interval)
    points = []
    while not scanner.boundary_finished():
        scanner.next()
        points.append(contour_point(scanner, line_type))
        if context is not None and len(points) % check_interval == 0:
            context.check_interruption()
    logger.debug(f"Traced {len(points)} contour points ({line_type})")
    return np.array(points, dtype=np.float64).reshape(-1, 2)


def contour_length(points: np.ndarray) -> float:
    """Perimeter of the closed polyline through points."""
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(points) < 2:
        return 0.0
    deltas = np.roll(points, -1, axis=0) - points
    return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())


def oriented_contour_area(points: np.ndarray) -> float:
    """
    Signed area of the closed polyline (shoelace formula).

    With the y axis pointing down, external boundaries produced by the
    scanners are positive and hole boundaries negative.
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)))


def contour_to_cv(points: np.ndarray) -> np.ndarray:
    """Convert (N, 2) contour points to OpenCV's (N, 1, 2) float32 contour layout."""
    return np.asarray(points, dtype=np.float32).reshape(-1, 1, 2)

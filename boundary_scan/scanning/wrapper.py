"""
Base class for scanners that add behaviour on top of another scanner.

A wrapper forwards every call to its parent. Subclasses override next(),
reset_counters() and friends to accumulate their own data (for example a
measurer collecting per-boundary statistics) and call super() to keep the
parent moving. Wrappers can be stacked.
"""

from ..connectivity import ConnectivityType
from ..errors import InvalidArgumentError
from ..matrix import BinaryMatrix
from .contour import ContourLineType
from .geometry import Side, Step
from .scanner import BoundaryScanner


class BoundaryScannerWrapper(BoundaryScanner):
    """
    Scanner delegating to a parent scanner.

    go_to() and next_boundary() call self.reset_counters() after the parent
    has moved, so a subclass only needs to extend reset_counters() to clear
    its own state whenever a new boundary starts. Exceptions raised by the
    parent propagate unchanged.

    Example:
        >>> class StepCounter(BoundaryScannerWrapper):
        ...     def __init__(self, parent):
        ...         super().__init__(parent)
        ...         self.rotations = 0
        ...     def next(self):
        ...         super().next()
        ...         self.rotations += self.last_step.is_rotation
        ...     def reset_counters(self):
        ...         super().reset_counters()
        ...         self.rotations = 0
    """

    def __init__(self, parent: BoundaryScanner):
        if parent is None:
            raise InvalidArgumentError("Null parent scanner")
        self._parent = parent

    @property
    def parent(self) -> BoundaryScanner:
        return self._parent

    @property
    def matrix(self) -> BinaryMatrix:
        return self._parent.matrix

    @property
    def connectivity_type(self) -> ConnectivityType:
        return self._parent.connectivity_type

    @property
    def check_interval(self) -> int:
        return self._parent.check_interval

    @property
    def contour_line_type(self) -> ContourLineType:
        return self._parent.contour_line_type

    def is_single_boundary_scanner(self) -> bool:
        return self._parent.is_single_boundary_scanner()

    def is_all_boundaries_scanner(self) -> bool:
        return self._parent.is_all_boundaries_scanner()

    def is_main_boundaries_scanner(self) -> bool:
        return self._parent.is_main_boundaries_scanner()

    def is_initialized(self) -> bool:
        return self._parent.is_initialized()

    def is_moved_along_boundary(self) -> bool:
        return self._parent.is_moved_along_boundary()

    @property
    def x(self) -> int:
        return self._parent.x

    @property
    def y(self) -> int:
        return self._parent.y

    @property
    def side(self) -> Side:
        return self._parent.side

    def at_matrix_boundary(self) -> bool:
        return self._parent.at_matrix_boundary()

    @property
    def nesting_level(self) -> int:
        return self._parent.nesting_level

    @property
    def current_index_in_array(self) -> int:
        return self._parent.current_index_in_array

    def go_to(self, x: int, y: int, side: Side) -> None:
        self._parent.go_to(x, y, side)
        self.reset_counters()

    def reset_counters(self) -> None:
        self._parent.reset_counters()

    def get(self) -> bool:
        return self._parent.get()

    def next_boundary(self) -> bool:
        result = self._parent.next_boundary()
        self.reset_counters()
        return result

    def next(self) -> None:
        self._parent.next()

    @property
    def last_step(self) -> Step:
        return self._parent.last_step

    def coordinates_changed(self) -> bool:
        return self._parent.coordinates_changed()

    def boundary_finished(self) -> bool:
        return self._parent.boundary_finished()

    @property
    def step_count(self) -> int:
        return self._parent.step_count

    @property
    def diagonal_step_count(self) -> int:
        return self._parent.diagonal_step_count

    @property
    def rotation_step_count(self) -> int:
        return self._parent.rotation_step_count

    @property
    def oriented_area(self) -> int:
        return self._parent.oriented_area

    def __repr__(self) -> str:
        return f"{type(self).__name__} of {self._parent!r}"

"""
2D boundary scanners.

A scanner walks along the boundary of a connected object in a binary matrix,
one pixel side at a time, keeping the object on the same hand: external
boundaries are followed clockwise on screen (y axis down) and accumulate a
positive oriented area, hole boundaries are followed counter-clockwise and
accumulate a negative one.

Three scanning modes differ only in how next_boundary() finds the next
boundary to trace:

- single boundary: every left / right edge of every horizontal run of object
  pixels, in raster order, with no memory of what was already traced;
- all boundaries: every external and internal (hole) boundary exactly once,
  with a nesting level (odd for objects, even for holes);
- main boundaries: only the external boundaries of outermost objects; the
  insides of traced objects, including their holes, are skipped.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

import numpy as np

from ..connectivity import ConnectivityType
from ..errors import (
    IllegalStateError,
    InvalidArgumentError,
    OutOfBoundsError,
    ScanInterruptedError,
)
from ..matrix import BinaryMatrix, as_binary_matrix
from .context import ScanContext, validate_check_interval
from .contour import ContourLineType
from .geometry import (
    DIAGONAL_LENGTH,
    HALF_DIAGONAL_LENGTH,
    ScannerPhase,
    ScanState,
    Side,
    Step,
)

if TYPE_CHECKING:
    from ..config.scanner_config import ScannerConfig

logger = logging.getLogger(__name__)

_SEARCH_CHUNK = 4096


class BoundaryScanner(ABC):
    """
    Contract shared by the tracing engines and by wrappers around them.

    Subclasses implement the abstract queries and operations; everything
    else (measurements, scan loop, snapshots) is derived from them, so a
    wrapper that forwards the abstract part gets the rest for free.

    Example:
        >>> scanner = get_all_boundaries_scanner(mask, ConnectivityType.STRAIGHT_AND_DIAGONAL)
        >>> while scanner.next_boundary():
        ...     scanner.scan_boundary()
        ...     print(scanner.nesting_level, scanner.oriented_area)
    """

    @property
    @abstractmethod
    def matrix(self) -> BinaryMatrix:
        """Scanned matrix."""

    @property
    def dim_x(self) -> int:
        return self.matrix.dim_x

    @property
    def dim_y(self) -> int:
        return self.matrix.dim_y

    @property
    @abstractmethod
    def connectivity_type(self) -> ConnectivityType:
        """Connectivity used to decide which pixels belong to one object."""

    @abstractmethod
    def is_single_boundary_scanner(self) -> bool:
        ...

    @abstractmethod
    def is_all_boundaries_scanner(self) -> bool:
        ...

    @abstractmethod
    def is_main_boundaries_scanner(self) -> bool:
        ...

    @abstractmethod
    def is_initialized(self) -> bool:
        """True once the scanner has been positioned."""

    @abstractmethod
    def is_moved_along_boundary(self) -> bool:
        """True if at least one step was made since the last go_to()."""

    @property
    @abstractmethod
    def x(self) -> int:
        ...

    @property
    @abstractmethod
    def y(self) -> int:
        ...

    @property
    @abstractmethod
    def side(self) -> Side:
        ...

    @abstractmethod
    def at_matrix_boundary(self) -> bool:
        """True if the current side lies on the outer border of the matrix."""

    @property
    @abstractmethod
    def nesting_level(self) -> int:
        """Nesting depth of the current boundary (all-boundaries mode only, else 0)."""

    @property
    @abstractmethod
    def current_index_in_array(self) -> int:
        """Raster index y * dim_x + x of the current pixel."""

    @abstractmethod
    def go_to(self, x: int, y: int, side: Side) -> None:
        """Move to the given pixel side and reset the counters."""

    @abstractmethod
    def reset_counters(self) -> None:
        """Zero step counters and oriented area."""

    @abstractmethod
    def get(self) -> bool:
        """Value of the matrix at the current pixel."""

    @abstractmethod
    def next_boundary(self) -> bool:
        """Go to the start of the next boundary; False if there are no more."""

    @abstractmethod
    def next(self) -> None:
        """Make one elementary step along the current boundary."""

    @property
    @abstractmethod
    def last_step(self) -> Step:
        ...

    @abstractmethod
    def coordinates_changed(self) -> bool:
        """False if the last step was a rotation inside the same pixel."""

    @abstractmethod
    def boundary_finished(self) -> bool:
        """True when the walk has returned to its start after at least one step."""

    @property
    @abstractmethod
    def step_count(self) -> int:
        ...

    @property
    @abstractmethod
    def diagonal_step_count(self) -> int:
        ...

    @property
    @abstractmethod
    def rotation_step_count(self) -> int:
        ...

    @property
    @abstractmethod
    def oriented_area(self) -> int:
        """Area inside the strict boundary passed so far; negative for holes."""

    @property
    def straight_step_count(self) -> int:
        return self.step_count - (self.diagonal_step_count + self.rotation_step_count)

    def go_to_same_position(self, other: "BoundaryScanner") -> None:
        self.go_to(other.x, other.y, other.side)

    @property
    def check_interval(self) -> int:
        """Default number of steps between interruption checks in scan_boundary()."""
        return 1

    @property
    def contour_line_type(self) -> ContourLineType:
        """Default contour style of area() and perimeter()."""
        return ContourLineType.STRICT_BOUNDARY

    def is_internal_boundary(self) -> bool:
        """True when positioned at a hole boundary found by next_boundary()."""
        return self.side is Side.X_PLUS

    def area(self, contour_line_type: Optional[ContourLineType] = None) -> float:
        """
        Oriented area of the contour passed since the last counter reset.

        Exact for a whole boundary; positive for external boundaries,
        negative for holes.

        Args:
            contour_line_type: Contour style to measure; defaults to
                self.contour_line_type

        Returns:
            Signed area in square pixels
        """
        if contour_line_type is None:
            contour_line_type = self.contour_line_type
        oriented_area = self.oriented_area
        if contour_line_type is ContourLineType.STRICT_BOUNDARY:
            return float(oriented_area)
        if contour_line_type is ContourLineType.PIXEL_CENTERS_POLYLINE:
            straight = self.straight_step_count
            return oriented_area - 0.5 * straight - 0.25 * (self.step_count - straight)
        if contour_line_type is ContourLineType.SEGMENT_CENTERS_POLYLINE:
            return oriented_area - 0.5 if oriented_area > 0 else oriented_area + 0.5
        raise InvalidArgumentError(f"Unsupported contour line type: {contour_line_type!r}")

    def perimeter(self, contour_line_type: Optional[ContourLineType] = None) -> float:
        """Length of the contour passed since the last counter reset."""
        if contour_line_type is None:
            contour_line_type = self.contour_line_type
        step_count = self.step_count
        if contour_line_type is ContourLineType.STRICT_BOUNDARY:
            return float(step_count)
        if contour_line_type is ContourLineType.PIXEL_CENTERS_POLYLINE:
            diagonal = self.diagonal_step_count
            return step_count - diagonal - self.rotation_step_count + DIAGONAL_LENGTH * diagonal
        if contour_line_type is ContourLineType.SEGMENT_CENTERS_POLYLINE:
            non_straight = self.diagonal_step_count + self.rotation_step_count
            return step_count - non_straight + HALF_DIAGONAL_LENGTH * non_straight
        raise InvalidArgumentError(f"Unsupported contour line type: {contour_line_type!r}")

    def scan_boundary(
        self,
        context: Optional[ScanContext] = None,
        check_interval: Optional[int] = None,
    ) -> int:
        """
        Step until the current boundary is closed.

        Args:
            context: Optional execution context, asked to check for
                interruption between steps
            check_interval: Number of steps between interruption checks;
                defaults to self.check_interval

        Returns:
            step_count after the boundary is finished

        Raises:
            IllegalStateError: The scanner is not positioned
            ScanInterruptedError: Raised by the context; the scanner stays at
                the last completed step
        """
        if check_interval is None:
            check_interval = self.check_interval
        validate_check_interval(check_interval)
        steps = 0
        try:
            while not self.boundary_finished():
                self.next()
                steps += 1
                if context is not None and steps % check_interval == 0:
                    context.check_interruption()
        except ScanInterruptedError:
            logger.warning(
                f"Boundary scan interrupted after {steps} steps at ({self.x}, {self.y}, {self.side.name})"
            )
            raise
        return self.step_count

    def state(self) -> ScanState:
        """Snapshot of x, y, side and the last step."""
        return ScanState(
            x=self.x,
            y=self.y,
            side=self.side,
            last_step=self.last_step if self.is_moved_along_boundary() else None,
        )

    @property
    def phase(self) -> ScannerPhase:
        if not self.is_initialized():
            return ScannerPhase.UNINITIALIZED
        if self.boundary_finished():
            return ScannerPhase.BOUNDARY_FINISHED
        if self.is_moved_along_boundary():
            return ScannerPhase.TRACING
        return ScannerPhase.POSITIONED

    def __repr__(self) -> str:
        if not self.is_initialized():
            position = "not initialized yet"
        else:
            position = f"x = {self.x}, y = {self.y}, side = {self.side.name}"
            if self.is_moved_along_boundary():
                position += f", last step: {self.last_step}"
            if self.nesting_level != 0:
                position += f", nesting level = {self.nesting_level}"
        neighbours = self.connectivity_type.number_of_neighbours(2)
        return f"2D scanner ({position}; {neighbours}-connectivity)"


class _TracingScanner(BoundaryScanner):
    """Boundary-following engine; subclasses choose how boundaries are found."""

    def __init__(self, matrix, connectivity_type: ConnectivityType):
        if not isinstance(connectivity_type, ConnectivityType):
            raise InvalidArgumentError(f"Unsupported connectivity type: {connectivity_type!r}")
        binary = as_binary_matrix(matrix)
        if binary.dim_count != 2:
            raise InvalidArgumentError(
                f"Boundary scanners can be used for 2-dimensional matrices only, got {binary.dim_count}"
            )
        self._matrix = binary
        self._connectivity_type = connectivity_type
        self._diagonal_moves = connectivity_type.number_of_neighbours(2) == 8
        self._data = binary.data
        self._flat = binary.flat
        self._size = binary.size
        self._dim_x = binary.dim_x
        self._dim_y = binary.dim_y

        self._x = 0
        self._y = 0
        self._side: Optional[Side] = None
        self._start_x = 0
        self._start_y = 0
        self._start_side: Optional[Side] = None
        self._last_step: Optional[Step] = None
        self._nesting_level = 0
        self._step_count = 0
        self._diagonal_step_count = 0
        self._rotation_step_count = 0
        self._oriented_area = 0
        self._check_interval = 1
        self._contour_line_type = ContourLineType.STRICT_BOUNDARY

    @property
    def matrix(self) -> BinaryMatrix:
        return self._matrix

    @property
    def connectivity_type(self) -> ConnectivityType:
        return self._connectivity_type

    @property
    def check_interval(self) -> int:
        return self._check_interval

    @check_interval.setter
    def check_interval(self, value: int) -> None:
        self._check_interval = validate_check_interval(value)

    @property
    def contour_line_type(self) -> ContourLineType:
        return self._contour_line_type

    @contour_line_type.setter
    def contour_line_type(self, value: ContourLineType) -> None:
        if not isinstance(value, ContourLineType):
            raise InvalidArgumentError(f"contour_line_type must be a ContourLineType, got {value!r}")
        self._contour_line_type = value

    def is_initialized(self) -> bool:
        return self._side is not None

    def is_moved_along_boundary(self) -> bool:
        return self._last_step is not None

    @property
    def x(self) -> int:
        self._check_positioned()
        return self._x

    @property
    def y(self) -> int:
        self._check_positioned()
        return self._y

    @property
    def side(self) -> Side:
        self._check_positioned()
        return self._side

    def at_matrix_boundary(self) -> bool:
        side = self._side
        if side is Side.X_MINUS:
            return self._x == 0
        if side is Side.Y_MINUS:
            return self._y == 0
        if side is Side.X_PLUS:
            return self._x == self._dim_x - 1
        if side is Side.Y_PLUS:
            return self._y == self._dim_y - 1
        return False

    @property
    def nesting_level(self) -> int:
        return 0

    @property
    def current_index_in_array(self) -> int:
        return self._y * self._dim_x + self._x

    def go_to(self, x: int, y: int, side: Side) -> None:
        if not isinstance(side, Side):
            raise InvalidArgumentError(f"side must be a Side, got {side!r}")
        for name, value in (("x", x), ("y", y)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
        if not 0 <= x < self._dim_x:
            raise OutOfBoundsError(
                f"Index x ({x}) " + ("< 0" if x < 0 else f">= dim_x ({self._dim_x})")
            )
        if not 0 <= y < self._dim_y:
            raise OutOfBoundsError(
                f"Index y ({y}) " + ("< 0" if y < 0 else f">= dim_y ({self._dim_y})")
            )
        self._x = self._start_x = int(x)
        self._y = self._start_y = int(y)
        self._side = self._start_side = side
        self._last_step = None
        self.reset_counters()

    def reset_counters(self) -> None:
        self._step_count = 0
        self._diagonal_step_count = 0
        self._rotation_step_count = 0
        self._oriented_area = 0

    def get(self) -> bool:
        return self._matrix.get(self._x, self._y)

    @property
    def last_step(self) -> Step:
        if self._last_step is None:
            raise IllegalStateError("The boundary scanner did not perform any steps yet")
        return self._last_step

    def coordinates_changed(self) -> bool:
        return not self.last_step.is_rotation

    def boundary_finished(self) -> bool:
        return (
            self._last_step is not None
            and self._x == self._start_x
            and self._y == self._start_y
            and self._side is self._start_side
        )

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def diagonal_step_count(self) -> int:
        return self._diagonal_step_count

    @property
    def rotation_step_count(self) -> int:
        return self._rotation_step_count

    @property
    def oriented_area(self) -> int:
        return self._oriented_area

    def next(self) -> None:
        self._check_positioned()
        if self.boundary_finished():
            return
        step = self._choose_step8() if self._diagonal_moves else self._choose_step4()
        self._x += step.pixel_center_dx
        self._y += step.pixel_center_dy
        self._side = side = step.new_side
        self._last_step = step
        self._step_count += 1
        if step.is_diagonal:
            self._diagonal_step_count += 1
        elif step.is_rotation:
            self._rotation_step_count += 1
        # vertical sides bound horizontal strips of the object: x - 0.5 .. x + 0.5
        if side is Side.X_PLUS:
            self._oriented_area += self._x
        elif side is Side.X_MINUS:
            self._oriented_area -= self._x - 1
        self._after_step()

    def _after_step(self) -> None:
        pass

    def _check_positioned(self) -> None:
        if self._side is None:
            raise IllegalStateError("The boundary scanner is not positioned yet")

    def _is_set(self, x: int, y: int) -> bool:
        return 0 <= x < self._dim_x and 0 <= y < self._dim_y and bool(self._data[y, x])

    def _choose_step4(self) -> Step:
        # straight neighbour first; the diagonal pixel counts only through it
        side = self._side
        along_x = self._x + side.dx_along
        along_y = self._y + side.dy_along
        if self._is_set(along_x, along_y):
            if self._is_set(along_x + side.dx_outward, along_y + side.dy_outward):
                return side.diagonal_step
            return side.straight_step
        return side.rotation_step

    def _choose_step8(self) -> Step:
        # diagonal neighbour first, then straight, then rotation
        side = self._side
        along_x = self._x + side.dx_along
        along_y = self._y + side.dy_along
        if 0 <= along_x < self._dim_x and 0 <= along_y < self._dim_y:
            if self._is_set(along_x + side.dx_outward, along_y + side.dy_outward):
                return side.diagonal_step
            if self._data[along_y, along_x]:
                return side.straight_step
        return side.rotation_step

    def _next_single_boundary(self) -> bool:
        if self._size == 0:
            return False
        index = self.current_index_in_array
        if not self.get():
            return self._go_to_next_unit_bit(index + 1)
        if not self.is_initialized():
            # unit pixel at (0, 0) of a fresh scanner
            self.go_to(0, 0, Side.X_MINUS)
            return True
        x, y = self._x, self._y
        zero = _index_of(self._flat, index + 1, index + self._dim_x - x, False)
        run = self._dim_x - x - 1 if zero == -1 else zero - (index + 1)
        if run == 0:
            # the current pixel is the last one of its run
            if self._side is not Side.X_PLUS:
                self.go_to(x, y, Side.X_PLUS)
                return True
            return self._go_to_next_unit_bit(index + 1)
        self.go_to(x + run, y, Side.X_PLUS)
        return True

    def _go_to_next_unit_bit(self, index: int) -> bool:
        found = _index_of(self._flat, index, self._size, True)
        if found == -1:
            return False
        self.go_to(found % self._dim_x, found // self._dim_x, Side.X_MINUS)
        return True

    def _get_bracket(self, buffer: np.ndarray) -> bool:
        # left brackets mark X_MINUS sides at the pixel, right brackets mark
        # X_PLUS sides at the pixel after it
        side = self._side
        if side is Side.X_MINUS:
            return bool(buffer[self.current_index_in_array])
        if side is Side.X_PLUS:
            return self._x < self._dim_x - 1 and bool(buffer[self.current_index_in_array + 1])
        return False

    def _set_bracket(self, buffer: np.ndarray) -> None:
        side = self._side
        if side is Side.X_MINUS:
            buffer[self.current_index_in_array] = 1
        elif side is Side.X_PLUS and self._x < self._dim_x - 1:
            buffer[self.current_index_in_array + 1] = 1

    def _make_buffer(self, buffer: Optional[np.ndarray], name: str) -> np.ndarray:
        shape = (self._dim_y, self._dim_x)
        if buffer is None:
            return np.zeros(self._size, dtype=bool)
        if not isinstance(buffer, np.ndarray) or buffer.shape != shape:
            raise InvalidArgumentError(
                f"matrix and {name} dimensions mismatch: matrix is {shape}, "
                f"{name} is {getattr(buffer, 'shape', type(buffer).__name__)}"
            )
        if not buffer.flags.c_contiguous or not buffer.flags.writeable:
            raise InvalidArgumentError(f"{name} must be a writeable C-contiguous array")
        return buffer.reshape(-1)


class SingleBoundaryScanner(_TracingScanner):
    """Visits every run edge in raster order without remembering traced boundaries."""

    def is_single_boundary_scanner(self) -> bool:
        return True

    def is_all_boundaries_scanner(self) -> bool:
        return False

    def is_main_boundaries_scanner(self) -> bool:
        return False

    def next_boundary(self) -> bool:
        found = self._next_single_boundary()
        self.reset_counters()
        return found


class AllBoundariesScanner(_TracingScanner):
    """
    Visits every external and internal boundary once.

    Traced boundaries leave horizontal brackets in two buffers (external and
    internal), which next_boundary() uses both to skip them and to count the
    nesting level of the region being entered.
    """

    def __init__(
        self,
        matrix,
        connectivity_type: ConnectivityType,
        buffer1: Optional[np.ndarray] = None,
        buffer2: Optional[np.ndarray] = None,
    ):
        super().__init__(matrix, connectivity_type)
        self._external_brackets = self._make_buffer(buffer1, "buffer1")
        self._internal_brackets = self._make_buffer(buffer2, "buffer2")
        self._brackets = self._external_brackets

    def is_single_boundary_scanner(self) -> bool:
        return False

    def is_all_boundaries_scanner(self) -> bool:
        return True

    def is_main_boundaries_scanner(self) -> bool:
        return False

    @property
    def nesting_level(self) -> int:
        return self._nesting_level

    def next_boundary(self) -> bool:
        brackets = self._next_any_boundary()
        if brackets is not None:
            self._brackets = brackets
            logger.debug(
                f"{'Internal' if brackets is self._internal_brackets else 'External'} boundary "
                f"at ({self._x}, {self._y}), nesting level {self._nesting_level}"
            )
        self.reset_counters()
        return brackets is not None

    def _after_step(self) -> None:
        self._set_bracket(self._brackets)

    def _next_any_boundary(self) -> Optional[np.ndarray]:
        while True:
            if not self._next_single_boundary():
                return None
            side = self._side
            external = self._get_bracket(self._external_brackets)
            internal = self._get_bracket(self._internal_brackets)
            if side is Side.X_PLUS and self._x == self._dim_x - 1:
                # no room for a right bracket: leaving the row, nothing to trace from here
                self._nesting_level = 0
                continue
            if external or internal:
                # crossing an already traced boundary
                entering = (side is Side.X_MINUS) == external
                self._nesting_level += 1 if entering else -1
                continue
            self._nesting_level += 1
            return self._external_brackets if side is Side.X_MINUS else self._internal_brackets


class MainBoundariesScanner(_TracingScanner):
    """
    Visits the external boundaries of outermost objects only.

    After a boundary is traced, next_boundary() fills the object between its
    left and right brackets in the buffer and skips everything inside.
    """

    def __init__(
        self,
        matrix,
        connectivity_type: ConnectivityType,
        buffer: Optional[np.ndarray] = None,
    ):
        super().__init__(matrix, connectivity_type)
        self._filled = self._make_buffer(buffer, "buffer")

    def is_single_boundary_scanner(self) -> bool:
        return False

    def is_all_boundaries_scanner(self) -> bool:
        return False

    def is_main_boundaries_scanner(self) -> bool:
        return True

    def next_boundary(self) -> bool:
        found = self._next_main_boundary()
        if found:
            logger.debug(f"Main boundary at ({self._x}, {self._y})")
        self.reset_counters()
        return found

    def _after_step(self) -> None:
        self._set_bracket(self._filled)

    def _next_main_boundary(self) -> bool:
        if self._size == 0:
            return False
        filled = self._filled
        index = self.current_index_in_array
        if not filled[index]:
            return self._next_single_boundary()
        x = self._x
        while True:
            # index is at a left bracket: fill up to the matching right bracket
            bracket = _index_of(filled, index + 1, index + self._dim_x - x, True)
            if bracket == -1:
                inside = self._dim_x - x - 1
            else:
                filled[bracket] = 0
                inside = bracket - (index + 1)
            filled[index + 1:index + 1 + inside] = 1
            index += inside
            index = _index_of(self._flat, index + 1, self._size, True)
            if index == -1:
                return False
            x = index % self._dim_x
            if not filled[index]:
                break
        self.go_to(x, index // self._dim_x, Side.X_MINUS)
        return True


def _index_of(flat: np.ndarray, start: int, stop: int, value: bool) -> int:
    """Index of the first element in flat[start:stop] whose truth equals value, or -1."""
    position = start
    while position < stop:
        end = min(position + _SEARCH_CHUNK, stop)
        window = flat[position:end]
        hits = np.flatnonzero(window) if value else np.flatnonzero(window == 0)
        if hits.size:
            return position + int(hits[0])
        position = end
    return -1


def get_single_boundary_scanner(matrix, connectivity_type: ConnectivityType) -> BoundaryScanner:
    """Create a scanner visiting every run edge (no memory of traced boundaries)."""
    return SingleBoundaryScanner(matrix, connectivity_type)


def get_all_boundaries_scanner(
    matrix,
    connectivity_type: ConnectivityType,
    buffer1: Optional[np.ndarray] = None,
    buffer2: Optional[np.ndarray] = None,
) -> BoundaryScanner:
    """
    Create a scanner visiting every external and internal boundary once.

    Args:
        matrix: Binary matrix or 2D array-like (non-zero = object)
        connectivity_type: Object connectivity
        buffer1: Optional work buffer for external brackets, same shape as matrix
        buffer2: Optional work buffer for internal brackets, same shape as matrix

    Returns:
        Uninitialized scanner; call next_boundary() to find the first boundary
    """
    return AllBoundariesScanner(matrix, connectivity_type, buffer1, buffer2)


def get_main_boundaries_scanner(
    matrix,
    connectivity_type: ConnectivityType,
    buffer: Optional[np.ndarray] = None,
) -> BoundaryScanner:
    """Create a scanner visiting only external boundaries of outermost objects."""
    return MainBoundariesScanner(matrix, connectivity_type, buffer)


def create_scanner(matrix, config: Optional["ScannerConfig"] = None) -> BoundaryScanner:
    """
    Create a scanner from a configuration.

    Args:
        matrix: Binary matrix or 2D array-like
        config: Scanner configuration (defaults to ScannerConfig())

    Returns:
        Uninitialized scanner of the configured mode; scan_boundary(),
        area() and perimeter() default to the configured check_interval and
        contour_line_type
    """
    from ..config.scanner_config import ScanMode, ScannerConfig

    if config is None:
        config = ScannerConfig()
    binary = as_binary_matrix(matrix, config.outside_policy)
    logger.debug(
        f"Creating {config.mode.value} scanner ({config.connectivity.value}) "
        f"for {binary.dim_x}x{binary.dim_y} matrix"
    )
    if config.mode is ScanMode.SINGLE:
        scanner = get_single_boundary_scanner(binary, config.connectivity)
    elif config.mode is ScanMode.ALL:
        scanner = get_all_boundaries_scanner(binary, config.connectivity)
    elif config.mode is ScanMode.MAIN:
        scanner = get_main_boundaries_scanner(binary, config.connectivity)
    else:
        raise InvalidArgumentError(f"Unsupported scan mode: {config.mode!r}")
    scanner.check_interval = config.check_interval
    scanner.contour_line_type = config.contour_line_type
    return scanner

"""
Value types describing the position and movement of a boundary scanner.

The scanner stands on one side (edge) of a unit pixel. Pixel (x, y) is the
square with center (x, y) and vertices (x +- 0.5, y +- 0.5); the y axis
points downward as in numpy images, so Side.Y_MINUS is the top edge.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

DIAGONAL_LENGTH = math.sqrt(2.0)
HALF_DIAGONAL_LENGTH = 0.5 * math.sqrt(2.0)


class Side(Enum):
    """Side of the current pixel where the scanner is located."""
    X_MINUS = 0  # left edge, boundary followed upward (y decreases)
    Y_MINUS = 1  # top edge, boundary followed rightward (x increases)
    X_PLUS = 2  # right edge, boundary followed downward (y increases)
    Y_PLUS = 3  # bottom edge, boundary followed leftward (x decreases)

    @property
    def code(self) -> int:
        return self.value

    @property
    def is_vertical(self) -> bool:
        """True for X_MINUS and X_PLUS (vertical edges of the square pixel)."""
        return self in (Side.X_MINUS, Side.X_PLUS)

    @property
    def is_horizontal(self) -> bool:
        """True for Y_MINUS and Y_PLUS."""
        return not self.is_vertical

    @property
    def dx_along(self) -> int:
        """x-component of the direction in which the boundary is followed."""
        return _SIDE_GEOMETRY[self][0]

    @property
    def dy_along(self) -> int:
        return _SIDE_GEOMETRY[self][1]

    @property
    def dx_outward(self) -> int:
        """x-component of the direction from the pixel through this side."""
        return _SIDE_GEOMETRY[self][2]

    @property
    def dy_outward(self) -> int:
        return _SIDE_GEOMETRY[self][3]

    @property
    def center_x(self) -> float:
        """x-offset of the middle of this side from the pixel center."""
        return 0.5 * self.dx_outward

    @property
    def center_y(self) -> float:
        return 0.5 * self.dy_outward

    @property
    def straight_step(self) -> "Step":
        """Step to the next pixel along this side, keeping the side."""
        return _SIDE_STEPS[self][0]

    @property
    def diagonal_step(self) -> "Step":
        """Step turning around an inner corner into the diagonal pixel."""
        return _SIDE_STEPS[self][1]

    @property
    def rotation_step(self) -> "Step":
        """Step around an outer corner, staying in the same pixel."""
        return _SIDE_STEPS[self][2]


# dx_along, dy_along, dx_outward, dy_outward
_SIDE_GEOMETRY: Dict[Side, Tuple[int, int, int, int]] = {
    Side.X_MINUS: (0, -1, -1, 0),
    Side.Y_MINUS: (1, 0, 0, -1),
    Side.X_PLUS: (0, 1, 1, 0),
    Side.Y_PLUS: (-1, 0, 0, 1),
}


@dataclass(frozen=True)
class Step:
    """
    One elementary movement of the scanner.

    A step is either straight (to the neighbouring pixel along the current
    side, side unchanged), diagonal (to the pixel at the diagonal, the side
    turns counter-clockwise on screen) or a rotation (same pixel, the side
    turns clockwise on screen).

    Attributes:
        code: Unique code 0..11 (see the *_CODE constants)
        pixel_center_dx: Change of x, -1..1
        pixel_center_dy: Change of y, -1..1
        old_side: Side before the step
        new_side: Side after the step
        pixel_vertex_x: x-offset (from the new pixel center) of the pixel vertex
            between the previous and the current boundary segments
        pixel_vertex_y: y-offset of the same vertex
        segment_center_dx: Change of x of the middle of the current side
        segment_center_dy: Change of y of the middle of the current side
    """
    code: int
    pixel_center_dx: int
    pixel_center_dy: int
    old_side: Side
    new_side: Side
    pixel_vertex_x: float = field(init=False)
    pixel_vertex_y: float = field(init=False)
    segment_center_dx: float = field(init=False)
    segment_center_dy: float = field(init=False)

    Y_MINUS_CODE = 0
    X_PLUS_CODE = 1
    Y_PLUS_CODE = 2
    X_MINUS_CODE = 3
    X_MINUS_Y_MINUS_CODE = 4
    X_PLUS_Y_MINUS_CODE = 5
    X_PLUS_Y_PLUS_CODE = 6
    X_MINUS_Y_PLUS_CODE = 7
    ROTATION_X_MINUS_TO_Y_MINUS_CODE = 8
    ROTATION_Y_MINUS_TO_X_PLUS_CODE = 9
    ROTATION_X_PLUS_TO_Y_PLUS_CODE = 10
    ROTATION_Y_PLUS_TO_X_MINUS_CODE = 11

    def __post_init__(self):
        """Derive vertex and segment offsets from the movement."""
        dx, dy = self.pixel_center_dx, self.pixel_center_dy
        old, new = self.old_side, self.new_side
        if self.is_straight:
            segment = (float(dx), float(dy))
            vertex_x = new.center_x if dx == 0 else -0.5 * dx
            vertex_y = new.center_y if dy == 0 else -0.5 * dy
        elif self.is_rotation:
            segment = (new.center_x - old.center_x, new.center_y - old.center_y)
            vertex_x = new.center_x if new.is_vertical else old.center_x
            vertex_y = new.center_y if new.is_horizontal else old.center_y
        else:
            segment = (0.5 * dx, 0.5 * dy)
            vertex_x = new.center_x if new.is_vertical else -old.center_x
            vertex_y = new.center_y if new.is_horizontal else -old.center_y
        if abs(abs(vertex_x) + abs(vertex_y) - 1.0) > 0.001:
            raise AssertionError(f"Pixel vertex is not a corner of the pixel: {self}")
        object.__setattr__(self, "segment_center_dx", segment[0])
        object.__setattr__(self, "segment_center_dy", segment[1])
        object.__setattr__(self, "pixel_vertex_x", vertex_x)
        object.__setattr__(self, "pixel_vertex_y", vertex_y)

    @property
    def increased_pixel_vertex_x(self) -> int:
        """0.5 + pixel_vertex_x: 0 or 1."""
        return int(round(self.pixel_vertex_x + 0.5))

    @property
    def increased_pixel_vertex_y(self) -> int:
        return int(round(self.pixel_vertex_y + 0.5))

    @property
    def is_rotation(self) -> bool:
        return self.pixel_center_dx == 0 and self.pixel_center_dy == 0

    @property
    def is_horizontal(self) -> bool:
        """Straight step changing x only."""
        return self.pixel_center_dx != 0 and self.pixel_center_dy == 0

    @property
    def is_vertical(self) -> bool:
        """Straight step changing y only."""
        return self.pixel_center_dx == 0 and self.pixel_center_dy != 0

    @property
    def is_straight(self) -> bool:
        return self.is_horizontal or self.is_vertical

    @property
    def is_diagonal(self) -> bool:
        return self.pixel_center_dx != 0 and self.pixel_center_dy != 0

    @property
    def distance_between_pixel_centers(self) -> float:
        if self.is_rotation:
            return 0.0
        return 1.0 if self.is_straight else DIAGONAL_LENGTH

    @property
    def distance_between_segment_centers(self) -> float:
        return 1.0 if self.is_straight else HALF_DIAGONAL_LENGTH

    def __str__(self) -> str:
        return (
            f"boundary scanning step from {self.old_side.name} to {self.new_side.name}"
            f" by {self.pixel_center_dx},{self.pixel_center_dy}"
            f" (pixel vertex {self.pixel_vertex_x},{self.pixel_vertex_y})"
        )


# straight, diagonal, rotation
_SIDE_STEPS: Dict[Side, Tuple[Step, Step, Step]] = {
    Side.X_MINUS: (
        Step(Step.Y_MINUS_CODE, 0, -1, Side.X_MINUS, Side.X_MINUS),
        Step(Step.X_MINUS_Y_MINUS_CODE, -1, -1, Side.X_MINUS, Side.Y_PLUS),
        Step(Step.ROTATION_X_MINUS_TO_Y_MINUS_CODE, 0, 0, Side.X_MINUS, Side.Y_MINUS),
    ),
    Side.Y_MINUS: (
        Step(Step.X_PLUS_CODE, 1, 0, Side.Y_MINUS, Side.Y_MINUS),
        Step(Step.X_PLUS_Y_MINUS_CODE, 1, -1, Side.Y_MINUS, Side.X_MINUS),
        Step(Step.ROTATION_Y_MINUS_TO_X_PLUS_CODE, 0, 0, Side.Y_MINUS, Side.X_PLUS),
    ),
    Side.X_PLUS: (
        Step(Step.Y_PLUS_CODE, 0, 1, Side.X_PLUS, Side.X_PLUS),
        Step(Step.X_PLUS_Y_PLUS_CODE, 1, 1, Side.X_PLUS, Side.Y_MINUS),
        Step(Step.ROTATION_X_PLUS_TO_Y_PLUS_CODE, 0, 0, Side.X_PLUS, Side.Y_PLUS),
    ),
    Side.Y_PLUS: (
        Step(Step.X_MINUS_CODE, -1, 0, Side.Y_PLUS, Side.Y_PLUS),
        Step(Step.X_MINUS_Y_PLUS_CODE, -1, 1, Side.Y_PLUS, Side.X_PLUS),
        Step(Step.ROTATION_Y_PLUS_TO_X_MINUS_CODE, 0, 0, Side.Y_PLUS, Side.X_MINUS),
    ),
}

ALL_STEPS: Tuple[Step, ...] = tuple(
    sorted((step for steps in _SIDE_STEPS.values() for step in steps), key=lambda s: s.code)
)

_STEPS_BY_TRANSITION: Dict[Tuple[Side, Side], Step] = {
    (step.old_side, step.new_side): step for step in ALL_STEPS
}


def step_for(old_side: Side, new_side: Side) -> Step:
    """
    Look up the step constant for a side transition.

    Raises:
        KeyError: The transition is impossible (e.g. X_MINUS to X_PLUS)
    """
    return _STEPS_BY_TRANSITION[(old_side, new_side)]


class ScannerPhase(Enum):
    """Lifecycle of a scanner, derived from its state."""
    UNINITIALIZED = "uninitialized"
    POSITIONED = "positioned"  # placed by go_to / next_boundary, no steps yet
    TRACING = "tracing"
    BOUNDARY_FINISHED = "boundary_finished"


@dataclass(frozen=True)
class ScanState:
    """
    Snapshot of the observable scanner position.

    Attributes:
        x: Current pixel column
        y: Current pixel row
        side: Current side of the pixel
        last_step: Last performed step, None right after positioning
    """
    x: int
    y: int
    side: Side
    last_step: Optional[Step] = None

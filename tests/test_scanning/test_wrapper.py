"""
Tests for scanner wrappers.
"""

import pytest
import numpy as np

from boundary_scan.config import ScannerConfig
from boundary_scan.connectivity import ConnectivityType
from boundary_scan.errors import (
    IllegalStateError,
    InvalidArgumentError,
    OutOfBoundsError,
    ScanInterruptedError,
)
from boundary_scan.scanning.context import CancellationContext
from boundary_scan.scanning.contour import ContourLineType
from boundary_scan.scanning.geometry import Side
from boundary_scan.scanning.scanner import create_scanner, get_all_boundaries_scanner
from boundary_scan.scanning.wrapper import BoundaryScannerWrapper

from tests.fixtures.mask_fixtures import create_ring_with_dot

EIGHT = ConnectivityType.STRAIGHT_AND_DIAGONAL


class RotationCounter(BoundaryScannerWrapper):
    """Wrapper counting rotations and resets on its own."""

    def __init__(self, parent):
        super().__init__(parent)
        self.rotations = 0
        self.resets = 0

    def next(self):
        super().next()
        if self.last_step.is_rotation:
            self.rotations += 1

    def reset_counters(self):
        super().reset_counters()
        self.rotations = 0
        self.resets += 1


def run(scanner):
    """Collect (start state, nesting, steps, area) for every boundary."""
    result = []
    while scanner.next_boundary():
        start = scanner.state()
        scanner.scan_boundary()
        result.append((start, scanner.nesting_level, scanner.step_count, scanner.oriented_area))
    return result


class TestBoundaryScannerWrapper:
    """Tests for BoundaryScannerWrapper."""

    def test_null_parent_rejected(self):
        """Test that a parent is required."""
        with pytest.raises(InvalidArgumentError):
            BoundaryScannerWrapper(None)

    def test_transparent_wrapper_gives_identical_results(self):
        """Test that a plain wrapper does not change the scan."""
        mask = create_ring_with_dot(9)
        plain = run(get_all_boundaries_scanner(mask, EIGHT))
        wrapped = run(BoundaryScannerWrapper(get_all_boundaries_scanner(mask, EIGHT)))
        assert wrapped == plain

    def test_stacked_wrappers(self):
        """Test that wrappers can wrap wrappers."""
        mask = create_ring_with_dot(9)
        inner = RotationCounter(get_all_boundaries_scanner(mask, EIGHT))
        outer = BoundaryScannerWrapper(inner)
        assert outer.parent is inner
        assert run(outer) == run(get_all_boundaries_scanner(mask, EIGHT))

    def test_forwarded_queries(self, l_tromino_mask):
        """Test that every query reflects the parent."""
        parent = get_all_boundaries_scanner(l_tromino_mask, EIGHT)
        wrapper = BoundaryScannerWrapper(parent)
        assert wrapper.matrix is parent.matrix
        assert wrapper.dim_x == 4 and wrapper.dim_y == 4
        assert wrapper.connectivity_type is EIGHT
        assert wrapper.is_all_boundaries_scanner()
        assert not wrapper.is_single_boundary_scanner()
        assert not wrapper.is_main_boundaries_scanner()
        assert not wrapper.is_initialized()
        assert wrapper.next_boundary()
        assert (wrapper.x, wrapper.y, wrapper.side) == (1, 1, Side.X_MINUS)
        assert wrapper.get()
        assert wrapper.current_index_in_array == 5
        assert not wrapper.at_matrix_boundary()
        wrapper.next()
        assert wrapper.last_step is parent.last_step
        assert not wrapper.coordinates_changed()
        assert wrapper.is_moved_along_boundary()
        wrapper.scan_boundary()
        assert wrapper.boundary_finished()
        assert wrapper.step_count == 8
        assert wrapper.diagonal_step_count == 1
        assert wrapper.rotation_step_count == 5
        assert wrapper.straight_step_count == 2
        assert wrapper.area(ContourLineType.SEGMENT_CENTERS_POLYLINE) == pytest.approx(2.5)
        assert "RotationCounter" not in repr(wrapper)
        assert "BoundaryScannerWrapper" in repr(wrapper)

    def test_subclass_counts_and_resets(self, l_tromino_mask):
        """Test that next_boundary and go_to reset the subclass state."""
        counter = RotationCounter(get_all_boundaries_scanner(l_tromino_mask, EIGHT))
        assert counter.next_boundary()
        assert counter.resets == 1
        counter.scan_boundary()
        assert counter.rotations == 5
        counter.go_to(1, 1, Side.X_MINUS)
        assert counter.resets == 2
        assert counter.rotations == 0
        assert counter.step_count == 0

    def test_reset_when_no_boundary_left(self, single_pixel_mask):
        """Test that the reset hook runs even when next_boundary returns False."""
        counter = RotationCounter(get_all_boundaries_scanner(single_pixel_mask, EIGHT))
        counter.next_boundary()
        counter.scan_boundary()
        assert counter.rotations == 4
        assert not counter.next_boundary()
        assert counter.rotations == 0

    def test_parent_errors_propagate(self, single_pixel_mask):
        """Test that wrappers do not swallow parent errors."""
        wrapper = RotationCounter(get_all_boundaries_scanner(single_pixel_mask, EIGHT))
        with pytest.raises(IllegalStateError):
            wrapper.next()
        with pytest.raises(OutOfBoundsError):
            wrapper.go_to(10, 0, Side.X_MINUS)
        assert wrapper.resets == 0

    def test_wrapper_nesting_level(self):
        """Test the forwarded nesting level."""
        wrapper = BoundaryScannerWrapper(
            get_all_boundaries_scanner(np.ones((3, 3), dtype=bool), EIGHT)
        )
        assert wrapper.next_boundary()
        assert wrapper.nesting_level == 1

    def test_forwarded_scan_defaults(self, l_tromino_mask):
        """Test that configured scan defaults reach the wrapper's scan loop."""
        config = ScannerConfig(check_interval=2, contour_line_type="segment_centers_polyline")
        counter = RotationCounter(create_scanner(l_tromino_mask, config))
        assert counter.check_interval == 2
        assert counter.contour_line_type is ContourLineType.SEGMENT_CENTERS_POLYLINE
        counter.next_boundary()
        with pytest.raises(ScanInterruptedError):
            counter.scan_boundary(CancellationContext(timeout=0))
        assert counter.step_count == 2

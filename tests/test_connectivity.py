"""
Tests for the connectivity model and its neighbour offset tables.
"""

import pytest
import numpy as np

from boundary_scan.connectivity import ConnectivityType, MAX_DIM_COUNT
from boundary_scan.errors import InvalidArgumentError


class TestApertureShifts:
    """Tests for ConnectivityType.aperture_shifts."""

    def test_straight_only_2d_order(self):
        """Test that straight shifts list axes one by one, +1 before -1."""
        shifts = ConnectivityType.STRAIGHT_ONLY.aperture_shifts(2)
        assert shifts == ((1, 0), (-1, 0), (0, 1), (0, -1))

    def test_straight_and_diagonal_2d_radix_order(self):
        """Test that 8-neighbourhood follows radix-3 counting with the origin skipped."""
        shifts = ConnectivityType.STRAIGHT_AND_DIAGONAL.aperture_shifts(2)
        assert shifts == (
            (-1, -1), (-1, 0), (-1, 1),
            (0, -1), (0, 1),
            (1, -1), (1, 0), (1, 1),
        )

    @pytest.mark.parametrize("dim_count", [1, 2, 3, 4, 5])
    def test_shifts_are_unique_and_exclude_origin(self, dim_count):
        """Test that no offset repeats and the zero offset is never listed."""
        for connectivity in ConnectivityType:
            shifts = connectivity.aperture_shifts(dim_count)
            assert len(set(shifts)) == len(shifts)
            assert (0,) * dim_count not in shifts
            assert all(len(shift) == dim_count for shift in shifts)
            assert all(max(abs(v) for v in shift) == 1 for shift in shifts)

    def test_shifts_are_cached(self):
        """Test that repeated calls return the same table."""
        first = ConnectivityType.STRAIGHT_AND_DIAGONAL.aperture_shifts(3)
        second = ConnectivityType.STRAIGHT_AND_DIAGONAL.aperture_shifts(3)
        assert first is second

    def test_shifts_array_is_read_only(self):
        """Test the numpy view of the shifts."""
        array = ConnectivityType.STRAIGHT_AND_DIAGONAL.aperture_shifts_array(2)
        assert array.shape == (8, 2)
        assert array.dtype == np.int8
        with pytest.raises(ValueError):
            array[0, 0] = 5

    def test_numpy_integer_dim_count_accepted(self):
        """Test that numpy integers are valid dimension counts."""
        assert ConnectivityType.STRAIGHT_ONLY.number_of_neighbours(np.int64(3)) == 6


class TestNumberOfNeighbours:
    """Tests for ConnectivityType.number_of_neighbours."""

    @pytest.mark.parametrize("dim_count", range(1, MAX_DIM_COUNT + 1))
    def test_straight_only_count(self, dim_count):
        """Test that STRAIGHT_ONLY gives 2 * dim_count neighbours."""
        assert ConnectivityType.STRAIGHT_ONLY.number_of_neighbours(dim_count) == 2 * dim_count

    @pytest.mark.parametrize("dim_count", [1, 2, 3, 4, 6])
    def test_straight_and_diagonal_count(self, dim_count):
        """Test that STRAIGHT_AND_DIAGONAL gives 3 ** dim_count - 1 neighbours."""
        expected = 3 ** dim_count - 1
        assert ConnectivityType.STRAIGHT_AND_DIAGONAL.number_of_neighbours(dim_count) == expected

    def test_2d_counts(self):
        """Test the familiar 4- and 8-connectivity."""
        assert ConnectivityType.STRAIGHT_ONLY.number_of_neighbours(2) == 4
        assert ConnectivityType.STRAIGHT_AND_DIAGONAL.number_of_neighbours(2) == 8

    @pytest.mark.parametrize("dim_count", [0, -1, MAX_DIM_COUNT + 1, 2.0, True, "2"])
    def test_invalid_dim_count_raises_error(self, dim_count):
        """Test that dimension counts outside 1..9 or non-integers are rejected."""
        with pytest.raises(InvalidArgumentError):
            ConnectivityType.STRAIGHT_ONLY.number_of_neighbours(dim_count)

    def test_invalid_dim_count_is_value_error(self):
        """Test that argument errors can be caught as ValueError."""
        with pytest.raises(ValueError, match="not in range"):
            ConnectivityType.STRAIGHT_AND_DIAGONAL.aperture_shifts(10)

"""
Connectivity model: which matrix elements are neighbours of each other.

The neighbour-offset ("aperture shift") tables are generated on first use for
every dimensionality and cached for the lifetime of the process. Tables are
tuples (and read-only numpy arrays), so they can be shared between threads
and scanners without locking.
"""

import itertools
import logging
from enum import Enum
from functools import lru_cache
from typing import Tuple

import numpy as np

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

MAX_DIM_COUNT = 9

Shift = Tuple[int, ...]


class ConnectivityType(Enum):
    """
    Kind of connectivity between matrix elements.

    STRAIGHT_ONLY: elements sharing a side (4-connectivity in 2D,
        6-connectivity in 3D).
    STRAIGHT_AND_DIAGONAL: elements sharing a side or a vertex
        (8-connectivity in 2D, 26-connectivity in 3D).
    """
    STRAIGHT_ONLY = "straight_only"
    STRAIGHT_AND_DIAGONAL = "straight_and_diagonal"

    def aperture_shifts(self, dim_count: int) -> Tuple[Shift, ...]:
        """
        Get the offsets of all neighbours of an element.

        The order is fixed: for STRAIGHT_ONLY the axes are listed one by one,
        +1 before -1; for STRAIGHT_AND_DIAGONAL the offsets follow the counting
        order of a radix-3 number with digits -1, 0, 1 (last axis changes
        fastest) with the origin skipped.

        Args:
            dim_count: Number of matrix dimensions (1..MAX_DIM_COUNT)

        Returns:
            Tuple of offset vectors, each a tuple of dim_count ints

        Example:
            >>> ConnectivityType.STRAIGHT_ONLY.aperture_shifts(2)
            ((1, 0), (-1, 0), (0, 1), (0, -1))
        """
        _check_dim_count(dim_count)
        dim_count = int(dim_count)
        if self is ConnectivityType.STRAIGHT_ONLY:
            return _straight_shifts(dim_count)
        if self is ConnectivityType.STRAIGHT_AND_DIAGONAL:
            return _straight_and_diagonal_shifts(dim_count)
        raise InvalidArgumentError(f"Unsupported connectivity type: {self}")

    def aperture_shifts_array(self, dim_count: int) -> np.ndarray:
        """Same offsets as aperture_shifts(), as a read-only (N, dim_count) int8 array."""
        _check_dim_count(dim_count)
        return _shifts_array(self, int(dim_count))

    def number_of_neighbours(self, dim_count: int) -> int:
        """
        Get the number of neighbours of an element.

        2 * dim_count for STRAIGHT_ONLY, 3 ** dim_count - 1 for
        STRAIGHT_AND_DIAGONAL.
        """
        return len(self.aperture_shifts(dim_count))


def _check_dim_count(dim_count: int) -> None:
    if isinstance(dim_count, bool) or not isinstance(dim_count, (int, np.integer)):
        raise InvalidArgumentError(f"dim_count must be an integer, got {dim_count!r}")
    if dim_count < 1 or dim_count > MAX_DIM_COUNT:
        raise InvalidArgumentError(
            f"dim_count = {dim_count} is not in range 1..{MAX_DIM_COUNT}"
        )


@lru_cache(maxsize=None)
def _straight_shifts(dim_count: int) -> Tuple[Shift, ...]:
    shifts = []
    for axis in range(dim_count):
        for delta in (1, -1):
            shift = [0] * dim_count
            shift[axis] = delta
            shifts.append(tuple(shift))
    logger.debug(f"Generated {len(shifts)} straight shifts for dim_count={dim_count}")
    return tuple(shifts)


@lru_cache(maxsize=None)
def _straight_and_diagonal_shifts(dim_count: int) -> Tuple[Shift, ...]:
    origin = (0,) * dim_count
    shifts = tuple(
        shift
        for shift in itertools.product((-1, 0, 1), repeat=dim_count)
        if shift != origin
    )
    logger.debug(
        f"Generated {len(shifts)} straight-and-diagonal shifts for dim_count={dim_count}"
    )
    return shifts


@lru_cache(maxsize=None)
def _shifts_array(connectivity: ConnectivityType, dim_count: int) -> np.ndarray:
    array = np.array(connectivity.aperture_shifts(dim_count), dtype=np.int8)
    array.flags.writeable = False
    return array

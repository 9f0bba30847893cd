"""
Binary matrix collaborator used by the boundary scanners.

Wraps a numpy array where every non-zero element belongs to an object and
zero elements are background.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Tuple, Union

import numpy as np

from .errors import InvalidArgumentError, OutOfBoundsError


class OutsidePolicy(Enum):
    """What get() returns for coordinates outside the matrix."""
    BACKGROUND = "background"  # outside elements read as background (False)
    STRICT = "strict"  # outside reads raise OutOfBoundsError


@dataclass(frozen=True, eq=False)
class BinaryMatrix:
    """
    Read-only bit matrix.

    Attributes:
        data: C-contiguous boolean array; axis 0 is y (rows), axis 1 is x
        outside_policy: Behaviour of get() outside the declared bounds
    """
    data: np.ndarray
    outside_policy: OutsidePolicy = field(default=OutsidePolicy.BACKGROUND)

    def __post_init__(self):
        """Normalize the array to a contiguous boolean view."""
        array = np.asarray(self.data)
        if array.ndim == 0:
            raise InvalidArgumentError("A matrix must have at least 1 dimension")
        if array.dtype != np.bool_:
            array = array != 0
        object.__setattr__(self, "data", np.ascontiguousarray(array))
        if isinstance(self.outside_policy, str):
            object.__setattr__(self, "outside_policy", OutsidePolicy(self.outside_policy))

    @property
    def dim_count(self) -> int:
        return self.data.ndim

    @property
    def dimensions(self) -> Tuple[int, ...]:
        """Dimensions in x, y, z... order (reverse of the numpy shape)."""
        return tuple(reversed(self.data.shape))

    @property
    def dim_x(self) -> int:
        return self.data.shape[-1]

    @property
    def dim_y(self) -> int:
        return self.data.shape[-2] if self.data.ndim >= 2 else 1

    @property
    def size(self) -> int:
        return int(self.data.size)

    @property
    def flat(self) -> np.ndarray:
        """1D view in raster order (index = y * dim_x + x)."""
        return self.data.reshape(-1)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.dim_x and 0 <= y < self.dim_y

    def get(self, x: int, y: int) -> bool:
        """
        Read the element at (x, y) of a 2D matrix.

        Args:
            x: Column index
            y: Row index

        Returns:
            True for object elements, False for background

        Raises:
            OutOfBoundsError: Outside the matrix with OutsidePolicy.STRICT
        """
        if not self.contains(x, y):
            if self.outside_policy is OutsidePolicy.STRICT:
                raise OutOfBoundsError(
                    f"({x}, {y}) is outside the {self.dim_x}x{self.dim_y} matrix"
                )
            return False
        return bool(self.data[y, x])


def as_binary_matrix(
    matrix: Union[BinaryMatrix, np.ndarray, Any],
    outside_policy: OutsidePolicy = OutsidePolicy.BACKGROUND,
) -> BinaryMatrix:
    """Wrap an array-like into a BinaryMatrix (BinaryMatrix instances pass through)."""
    if matrix is None:
        raise InvalidArgumentError("Null matrix argument")
    if isinstance(matrix, BinaryMatrix):
        return matrix
    return BinaryMatrix(np.asarray(matrix), outside_policy)

"""
Pytest configuration for the boundary scan test suite.

Puts the project root on the Python path so tests can import
boundary_scan.* and tests.fixtures.* without installing the package.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def single_pixel_mask() -> np.ndarray:
    """5x5 mask with one object pixel at (2, 2)."""
    mask = np.zeros((5, 5), dtype=np.uint8)
    mask[2, 2] = 1
    return mask


@pytest.fixture
def l_tromino_mask() -> np.ndarray:
    """Pixels (1, 1), (2, 1), (1, 2) in a 4x4 mask."""
    mask = np.zeros((4, 4), dtype=np.uint8)
    mask[1, 1] = 1
    mask[1, 2] = 1
    mask[2, 1] = 1
    return mask

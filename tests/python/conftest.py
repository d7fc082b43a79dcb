"""
Pytest configuration and shared fixtures for yalesparse tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from yalesparse import YaleSparseMatrix, reset_defaults


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_defaults():
    """Restore global defaults after every test."""
    yield
    reset_defaults()


@pytest.fixture
def empty_matrix():
    """Fresh matrix with sentinel 0."""
    return YaleSparseMatrix(0)


@pytest.fixture
def example_matrix():
    """The 4x4 example matrix.

    Matrix:
    [[0, 0, 0, 0],
     [5, 8, 0, 0],
     [0, 0, 3, 0],
     [0, 6, 0, 0]]
    """
    mat = YaleSparseMatrix(0)
    mat[1, 0] = 5
    mat[1, 1] = 8
    mat[2, 2] = 3
    mat[3, 1] = 6
    return mat


@pytest.fixture
def wide_matrix():
    """The 4x6 example matrix.

    Matrix:
    [[10, 20,  0,  0,  0,  0],
     [ 0, 30,  0, 40,  0,  0],
     [ 0,  0, 50, 60, 70,  0],
     [ 0,  0,  0,  0,  0, 80]]
    """
    mat = YaleSparseMatrix(0)
    for (row, col), value in WIDE_ENTRIES.items():
        mat[row, col] = value
    return mat


WIDE_ENTRIES = {
    (0, 0): 10, (0, 1): 20,
    (1, 1): 30, (1, 3): 40,
    (2, 2): 50, (2, 3): 60, (2, 4): 70,
    (3, 5): 80,
}


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(42)


# =============================================================================
# Helper Functions
# =============================================================================

def assert_invariants(mat):
    """Assert the packed-array invariants of a YaleSparseMatrix."""
    offsets = mat.row_offsets.tolist()
    columns = mat.columns.tolist()
    values = mat.values.tolist()

    assert offsets[0] == 0
    assert all(a <= b for a, b in zip(offsets, offsets[1:]))
    assert offsets[-1] == mat.nnz == len(values) == len(columns)

    for start, end in zip(offsets, offsets[1:]):
        row_cols = columns[start:end]
        assert all(a < b for a, b in zip(row_cols, row_cols[1:]))

"""
yalesparse - Yale (CSR) sparse matrices

A growable, generic-valued sparse matrix kept in three packed arrays:
- values:      the stored entries, row-major
- row_offsets: where each row starts in values (last slot is NNZ)
- columns:     the column index of each stored entry

Architecture:
    ┌──────────────────────────────────────────────┐
    │              YaleSparseMatrix                │
    ├──────────────────────────────────────────────┤
    │  values | row_offsets | columns | zero       │
    │  GridBuilder (lazy dense-generator builds)   │
    └──────────────────────────────────────────────┘

Example:
    >>> from yalesparse import YaleSparseMatrix
    >>>
    >>> mat = YaleSparseMatrix(0)
    >>> mat[1, 0] = 5
    >>> mat[2, 2] = 3
    >>> mat[0, 0], mat[2, 2]
    (0, 3)
    >>>
    >>> # Build eagerly from a dense generator
    >>> eye = YaleSparseMatrix.build(0, 3, 3, lambda r, c: int(r == c))
    >>> eye.nnz
    3
"""

__version__ = '0.1.0'

from ._base import SparseBase, RowSparseBase, SparseFormat
from ._builder import GridBuilder
from ._yale import YaleSparseMatrix
from ._config import (
    get_config,
    set_defaults,
    get_defaults,
    reset_defaults,
)
from ._errors import (
    SparseMatrixError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    IndexTypeError,
    # Error codes
    YALE_OK,
    YALE_ERROR_UNKNOWN,
    YALE_ERROR_INTERNAL,
    YALE_ERROR_INVALID_ARGUMENT,
    YALE_ERROR_INDEX_OUT_OF_BOUNDS,
    YALE_ERROR_TYPE_ERROR,
)

# Short alias
Yale = YaleSparseMatrix

__all__ = [
    # Version
    '__version__',

    # Core classes
    'YaleSparseMatrix',
    'Yale',
    'GridBuilder',
    'SparseBase',
    'RowSparseBase',
    'SparseFormat',

    # Configuration
    'get_config',
    'set_defaults',
    'get_defaults',
    'reset_defaults',

    # Errors
    'SparseMatrixError',
    'IndexOutOfBoundsError',
    'InvalidArgumentError',
    'IndexTypeError',
    'YALE_OK',
    'YALE_ERROR_UNKNOWN',
    'YALE_ERROR_INTERNAL',
    'YALE_ERROR_INVALID_ARGUMENT',
    'YALE_ERROR_INDEX_OUT_OF_BOUNDS',
    'YALE_ERROR_TYPE_ERROR',
]

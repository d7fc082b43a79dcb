"""
Sparse Matrix Base Classes

This module defines the abstract interface shared by the yalesparse matrix
types. It fixes the vocabulary (shape, nnz, density, row access) so that
code written against the interface does not depend on how a particular
matrix packs its entries.

Type Hierarchy:

    SparseBase (ABC)
    └── RowSparseBase (ABC) - Row-oriented sparse matrices
        └── YaleSparseMatrix - Yale / CSR with inferred column count

Unlike fixed-shape sparse containers, the dimensions here may be derived
from the stored entries, so a zero dimension is a normal state and
``density`` does not guard against it.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Tuple

import numpy as np

__all__ = [
    'SparseBase',
    'RowSparseBase',
    'SparseFormat',
]


class SparseFormat:
    """Enumeration of sparse matrix formats."""
    YALE = 'yale'


class SparseBase(ABC):
    """
    Abstract base class for all sparse matrices.

    Required Properties (subclasses must implement):
        row_count: Number of rows
        column_count: Number of columns
        nnz: Number of stored entries
        format: Sparse format name

    Required Methods (subclasses must implement):
        get(row, column): Element read, sentinel for unset cells
        copy(): Deep copy
    """

    # =========================================================================
    # Abstract Properties
    # =========================================================================

    @property
    @abstractmethod
    def row_count(self) -> int:
        """Number of rows."""
        ...

    @property
    @abstractmethod
    def column_count(self) -> int:
        """Number of columns."""
        ...

    @property
    @abstractmethod
    def nnz(self) -> int:
        """Number of stored (non-zero) elements."""
        ...

    @property
    @abstractmethod
    def format(self) -> str:
        """Sparse format name."""
        ...

    # =========================================================================
    # Derived Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return (self.row_count, self.column_count)

    @property
    def ndim(self) -> int:
        """Number of dimensions (always 2 for sparse matrices)."""
        return 2

    @property
    def size(self) -> int:
        """Total number of logical cells (rows * cols)."""
        return self.row_count * self.column_count

    @property
    def density(self) -> float:
        """Fraction of cells that are explicitly stored.

        A matrix with a zero dimension yields ``nan`` (or ``inf``);
        callers must guard that case themselves.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(self.nnz) / np.float64(self.size))

    sparsity = density

    @property
    def is_empty(self) -> bool:
        """True if no entry is stored."""
        return self.nnz == 0

    # =========================================================================
    # Abstract Methods
    # =========================================================================

    @abstractmethod
    def get(self, row: int, column: int) -> Any:
        """Return the element at (row, column), or the zero sentinel."""
        ...

    @abstractmethod
    def copy(self) -> 'SparseBase':
        """Create a deep copy of the matrix."""
        ...

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"shape={self.shape}, nnz={self.nnz}, format={self.format})")

    def __str__(self) -> str:
        return self.__repr__()

    def __len__(self) -> int:
        """Return number of rows."""
        return self.row_count

    def __bool__(self) -> bool:
        """Return True if matrix has any stored elements."""
        return self.nnz > 0


class RowSparseBase(SparseBase):
    """
    Abstract base class for row-oriented (CSR family) matrices.

    Additional Required Methods:
        row_values(i): Stored values of row i
        row_indices(i): Column indices of row i
        row_length(i): Number of stored entries in row i
    """

    @abstractmethod
    def row_values(self, i: int) -> List[Any]:
        """Get stored values for row i."""
        ...

    @abstractmethod
    def row_indices(self, i: int) -> List[int]:
        """Get column indices of the stored values of row i."""
        ...

    @abstractmethod
    def row_length(self, i: int) -> int:
        """Get number of stored entries in row i."""
        ...

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    def get_row(self, i: int) -> Tuple[List[int], List[Any]]:
        """Get row i as sparse (indices, values)."""
        return self.row_indices(i), self.row_values(i)

    def get_row_dense(self, i: int) -> List[Any]:
        """Get row i with unset cells filled by the zero sentinel."""
        return [self.get(i, j) for j in range(self.column_count)]

    def iter_rows(self) -> Iterator[Tuple[List[int], List[Any]]]:
        """Iterate over rows, yielding (indices, values) tuples."""
        for i in range(self.row_count):
            yield self.get_row(i)

"""Yale (CSR) Sparse Matrix.

This module provides YaleSparseMatrix, a growable sparse matrix that keeps
an ``m x n`` matrix in three packed arrays:

- ``values`` (A): the NNZ stored entries in row-major order.
- ``row_offsets`` (IA): ``m + 1`` offsets; row ``i`` owns
  ``values[IA[i]:IA[i + 1]]`` and ``IA[m]`` is NNZ.
- ``columns`` (JA): the column index of each entry of ``values``,
  strictly increasing inside every row.

For example the 4 x 4 matrix::

    0 0 0 0
    5 8 0 0
    0 0 3 0
    0 6 0 0

is stored as ``A = [5, 8, 3, 6]``, ``IA = [0, 0, 2, 3, 4]`` and
``JA = [0, 1, 2, 1]``: 13 entries instead of 16. Packed storage only pays
off while ``NNZ < (m (n - 1) - 1) / 2``.

The column count is never stored. It is inferred as one past the largest
column index written so far, so a matrix whose entries all sit in column 0
reports a width of 1.

Example:
    >>> mat = YaleSparseMatrix(0)
    >>> mat[1, 0] = 5
    >>> mat[1, 1] = 8
    >>> mat[3, 1] = 6
    >>> mat.row_offsets.tolist()
    [0, 0, 2, 2, 3]
    >>> mat[0, 0], mat[99, 99]
    (0, 0)
"""

import logging
from typing import Any, Callable, Iterator, List, Optional, Tuple, Union

import numpy as np

from ._base import RowSparseBase, SparseFormat
from ._builder import GridBuilder
from ._config import _UNSET, get_config
from ._errors import (
    IndexTypeError,
    InvalidArgumentError,
    as_index,
    check_callable,
    check_coordinate,
)

__all__ = ['YaleSparseMatrix']

logger = logging.getLogger("yalesparse.matrix")


def _frozen(items: List[Any], dtype: Any) -> np.ndarray:
    """Copy ``items`` into a read-only 1D array."""
    arr = np.empty(len(items), dtype=dtype)
    # Element-wise so that tuple or list values stay scalars in object arrays
    for i, item in enumerate(items):
        arr[i] = item
    arr.flags.writeable = False
    return arr


class YaleSparseMatrix(RowSparseBase):
    """Sparse matrix in Yale (compressed sparse row) format.

    Reads of unset or out-of-range cells return the ``zero`` sentinel.
    Writes past the last row grow the matrix; writes to any column are
    accepted. Storing the sentinel itself is not special-cased and creates
    an explicit entry.

    Attributes:
        zero: Sentinel returned for unset cells.
        values: Read-only snapshot of the stored values (A).
        row_offsets: Read-only snapshot of the row offsets (IA).
        columns: Read-only snapshot of the column indices (JA).
        row_count: Number of rows.
        column_count: One past the largest stored column index.
        nnz: Number of stored entries.

    Example:
        >>> mat = YaleSparseMatrix.build(0, 2, 3, lambda r, c: r + c if r else 0)
        >>> mat.inspect()
        'YaleSparseMatrix[\\n[],\\n[1, 2, 3]] # not efficient 50.00% density'
    """

    __slots__ = ('_zero', '_values', '_row_offsets', '_columns')

    # =========================================================================
    # Initialization
    # =========================================================================

    def __init__(self, zero: Any = _UNSET):
        """Create an empty matrix.

        Args:
            zero: Sentinel for unset cells. Defaults to the configured
                default zero (``None`` unless changed via ``set_defaults``).
        """
        if zero is _UNSET:
            zero = get_config().default_zero
        self._zero = zero
        self._values: List[Any] = []
        self._row_offsets: List[int] = [0]
        self._columns: List[int] = []

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def build(
        cls,
        zero: Any,
        rows: int,
        columns: int,
        generator: Optional[Callable[[int, int], Any]] = None,
    ) -> Union['YaleSparseMatrix', GridBuilder]:
        """Build a matrix from a dense generator.

        Args:
            zero: Sentinel; generated values equal to it are not stored.
            rows: Number of grid rows to walk.
            columns: Number of grid columns to walk.
            generator: ``generator(row, column) -> value``.

        Returns:
            The populated matrix, or, when ``generator`` is omitted, a
            restartable ``GridBuilder`` over the grid coordinates.
        """
        grid = GridBuilder(zero, rows, columns)
        if generator is None:
            return grid
        return grid.build(generator)

    @staticmethod
    def iter_build(
        zero: Any,
        rows: int,
        columns: int,
        generator: Callable[[int, int], Any],
    ) -> Iterator[Tuple[int, int, Any]]:
        """Lazily yield the ``(row, column, value)`` triples ``build`` would store."""
        return GridBuilder(zero, rows, columns).triples(generator)

    @classmethod
    def from_dense(cls, dense: Any, zero: Any = 0) -> 'YaleSparseMatrix':
        """Create from a dense 2D list or numpy array.

        Args:
            dense: 2D list [rows][cols] or 2D ``numpy.ndarray``.
            zero: Sentinel; cells equal to it are not stored.

        Returns:
            New matrix holding every non-zero cell of ``dense``.

        Example:
            >>> mat = YaleSparseMatrix.from_dense([[1, 0, 2], [0, 3, 0]])
            >>> mat.values.tolist()
            [1, 2, 3]
        """
        if isinstance(dense, np.ndarray):
            if dense.ndim != 2:
                raise InvalidArgumentError(f"dense must be 2D, got {dense.ndim}D")
            dense = dense.tolist()

        rows = len(dense)
        cols = len(dense[0]) if rows else 0
        return cls.build(zero, rows, cols, lambda r, c: dense[r][c])

    def copy(self) -> 'YaleSparseMatrix':
        """Create an independent copy of the three packed arrays."""
        return self._with_values(list(self._values))

    def _with_values(self, values: List[Any]) -> 'YaleSparseMatrix':
        result = YaleSparseMatrix(self._zero)
        result._values = values
        result._row_offsets = list(self._row_offsets)
        result._columns = list(self._columns)
        return result

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def zero(self) -> Any:
        """Sentinel returned for unset cells."""
        return self._zero

    @property
    def values(self) -> np.ndarray:
        """Stored values (A), as a read-only object array."""
        return _frozen(self._values, object)

    @property
    def row_offsets(self) -> np.ndarray:
        """Row offsets (IA), as a read-only int64 array."""
        return _frozen(self._row_offsets, np.int64)

    @property
    def columns(self) -> np.ndarray:
        """Column indices (JA), as a read-only int64 array."""
        return _frozen(self._columns, np.int64)

    # scipy-style and textbook names for the packed arrays
    data = a = elements = values
    indptr = ia = row_index = row_offsets
    indices = ja = index_column = columns

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return len(self._row_offsets) - 1

    m = row_count

    @property
    def column_count(self) -> int:
        """One past the largest stored column index, or 0 when empty."""
        if not self._columns:
            return 0
        return max(self._columns) + 1

    n = column_count

    @property
    def nnz(self) -> int:
        """Number of stored entries; kept as the last row offset."""
        return self._row_offsets[-1]

    nonzero_count = nonzero_element_count = nnz

    @property
    def format(self) -> str:
        """Sparse format (always 'yale')."""
        return SparseFormat.YALE

    @property
    def is_efficient(self) -> bool:
        """True if packed storage is smaller than a naive dense array.

        Not guarded: an empty matrix reports False.
        """
        m, n = self.row_count, self.column_count
        return self.nnz < (m * (n - 1) - 1) // 2

    saving_memory = is_efficient

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, row: int, column: int) -> Any:
        """Return the element at (row, column), or ``zero`` if unset.

        Rows outside ``[0, row_count)`` read as ``zero``. The scan over the
        row stops at the first larger column.
        """
        row = as_index(row, "row")
        column = as_index(column, "column")
        offsets = self._row_offsets
        if not 0 <= row < len(offsets) - 1:
            return self._zero

        columns = self._columns
        for index in range(offsets[row], offsets[row + 1]):
            current = columns[index]
            if current == column:
                return self._values[index]
            if current > column:
                break
        return self._zero

    element = component = get

    def set(self, row: int, column: int, value: Any) -> Any:
        """Store ``value`` at (row, column) and return it.

        Rows beyond the current extent are added empty first. Within the
        row the entry is appended, overwritten in place, or inserted before
        the first larger column; insertion shifts every later row offset.

        Raises:
            IndexTypeError: If a coordinate is not an integer.
            IndexOutOfBoundsError: If a coordinate is negative.
        """
        row = check_coordinate(row, "row")
        column = check_coordinate(column, "column")
        offsets = self._row_offsets
        if row >= len(offsets) - 1:
            self._add_rows(row - len(offsets) + 2)

        columns = self._columns
        index, end = offsets[row], offsets[row + 1]
        while index < end and columns[index] < column:
            index += 1

        if index < end and columns[index] == column:
            self._values[index] = value
            return value

        self._values.insert(index, value)
        columns.insert(index, column)
        for j in range(row + 1, len(offsets)):
            offsets[j] += 1
        return value

    def _add_rows(self, count: int) -> None:
        """Append ``count`` empty rows, all starting at the current NNZ."""
        self._row_offsets.extend([self._row_offsets[-1]] * count)
        logger.debug("added %d row(s), row_count=%d", count, self.row_count)

    def __getitem__(self, key) -> Any:
        """Support mat[i, j] (element) and mat[i] (dense row)."""
        if isinstance(key, tuple) and len(key) == 2:
            return self.get(*key)
        if isinstance(key, tuple):
            raise IndexTypeError(f"Expected (row, column), got {len(key)} indices")
        return self.get_row_dense(as_index(key, "row"))

    def __setitem__(self, key, value: Any) -> None:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise IndexTypeError(f"Expected (row, column), got {key!r}")
        self.set(key[0], key[1], value)

    # =========================================================================
    # Row Access
    # =========================================================================

    def _row_span(self, i: int) -> Tuple[int, int]:
        offsets = self._row_offsets
        if not 0 <= i < len(offsets) - 1:
            return 0, 0
        return offsets[i], offsets[i + 1]

    def row_length(self, i: int) -> int:
        """Number of stored entries in row i (0 outside the matrix)."""
        start, end = self._row_span(i)
        return end - start

    def row_values(self, i: int) -> List[Any]:
        """Stored values of row i, in column order."""
        start, end = self._row_span(i)
        return self._values[start:end]

    def row_indices(self, i: int) -> List[int]:
        """Column indices of row i, strictly increasing."""
        start, end = self._row_span(i)
        return self._columns[start:end]

    # =========================================================================
    # Queries
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YaleSparseMatrix):
            return NotImplemented
        return (
            self.nnz == other.nnz
            and self._values == other._values
            and self._row_offsets == other._row_offsets
            and self._columns == other._columns
        )

    __hash__ = None

    def contains(self, value: Any) -> bool:
        """True if ``value`` is among the stored entries."""
        return value in self._values

    __contains__ = contains

    def index(self, value: Any) -> Optional[Tuple[int, int]]:
        """(row, column) of the first stored entry equal to ``value``, or None."""
        for element, row, column in self.iter_items():
            if element == value:
                return row, column
        return None

    # =========================================================================
    # Traversal
    # =========================================================================

    def iter_values(self, include_zeros: bool = False) -> Iterator[Any]:
        """Yield stored values, or every cell of the dense view.

        Args:
            include_zeros: If True, walk all ``row_count x column_count``
                cells in row-major order, yielding ``zero`` for unset ones.
        """
        if not include_zeros:
            yield from list(self._values)
            return
        for value, _, _ in self.iter_items(include_zeros=True):
            yield value

    def __iter__(self) -> Iterator[Any]:
        return self.iter_values()

    def iter_items(
        self, include_zeros: bool = False
    ) -> Iterator[Tuple[Any, int, int]]:
        """Yield ``(value, row, column)`` triples in row-major order.

        Args:
            include_zeros: If True, also yield ``(zero, row, column)`` for
                every unset cell of the dense view.
        """
        values = list(self._values)
        offsets = list(self._row_offsets)
        columns = list(self._columns)

        if not include_zeros:
            for row, (start, end) in enumerate(zip(offsets, offsets[1:])):
                for k in range(start, end):
                    yield values[k], row, columns[k]
            return

        width = max(columns) + 1 if columns else 0
        zero = self._zero
        for row in range(len(offsets) - 1):
            k, end = offsets[row], offsets[row + 1]
            for column in range(width):
                if k < end and columns[k] == column:
                    yield values[k], row, column
                    k += 1
                else:
                    yield zero, row, column

    def map(self, transform: Callable[[Any], Any]) -> 'YaleSparseMatrix':
        """Return a matrix with the same sparsity pattern and mapped values.

        Offsets and columns are copied verbatim, so a value mapped to the
        sentinel stays as an explicit entry.
        """
        check_callable(transform, "transform")
        return self._with_values([transform(value) for value in self._values])

    collect = map

    # =========================================================================
    # Representation
    # =========================================================================

    def _is_zero(self, value: Any) -> bool:
        return value is self._zero or value == self._zero

    def inspect(self, include_zeros: bool = False) -> str:
        """Render the rows for debugging, with efficiency and density.

        Each row is rebuilt through ``get``. Sentinel cells are dropped
        unless ``include_zeros`` is set.
        """
        rows = []
        for row in range(self.row_count):
            cells = self.get_row_dense(row)
            if not include_zeros:
                cells = [cell for cell in cells if not self._is_zero(cell)]
            rows.append(repr(cells))

        status = 'efficient' if self.is_efficient else 'not efficient'
        precision = get_config().density_precision
        percent = format(self.density * 100.0, f'.{precision}f')
        return (f"{self.__class__.__name__}[\n" + ",\n".join(rows)
                + f"] # {status} {percent}% density")

    def __repr__(self) -> str:
        return (
            f"YaleSparseMatrix(shape={self.shape}, nnz={self.nnz}, "
            f"zero={self._zero!r})"
        )

    def info(self) -> str:
        """Get detailed information string."""
        lines = [
            "YaleSparseMatrix:",
            f"  shape: {self.shape}",
            f"  nnz: {self.nnz}",
            f"  zero: {self._zero!r}",
            f"  density: {self.density:.4f}",
            f"  efficient: {self.is_efficient}",
            f"  stored entries: {len(self._values) + len(self._row_offsets) + len(self._columns)}",
        ]
        return '\n'.join(lines)

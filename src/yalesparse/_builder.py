"""Dense-generator builders.

A ``GridBuilder`` describes a ``rows x columns`` grid and a zero sentinel
without allocating anything. It can be iterated any number of times for the
grid coordinates, drained lazily for the non-zero ``(row, column, value)``
triples, or materialized into a ``YaleSparseMatrix``.

Example:
    >>> grid = YaleSparseMatrix.build(0, 2, 3)
    >>> list(grid)[:2]
    [(0, 0), (0, 1)]
    >>> list(grid.triples(lambda r, c: r * c))
    [(1, 1, 1), (1, 2, 2)]
    >>> grid.build(lambda r, c: r * c).nnz
    2
"""

import logging
from typing import Any, Callable, Iterator, Tuple, TYPE_CHECKING

from ._errors import check_callable

if TYPE_CHECKING:
    from ._yale import YaleSparseMatrix

__all__ = ['GridBuilder']

logger = logging.getLogger("yalesparse.builder")

Generator = Callable[[int, int], Any]


class GridBuilder:
    """Restartable row-major walk over a dense grid.

    Attributes:
        zero: Sentinel whose cells are skipped.
        rows: Number of grid rows.
        columns: Number of grid columns.
    """

    __slots__ = ('zero', 'rows', 'columns')

    def __init__(self, zero: Any, rows: int, columns: int):
        self.zero = zero
        self.rows = rows
        self.columns = columns

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for row in range(self.rows):
            for column in range(self.columns):
                yield row, column

    def __len__(self) -> int:
        return max(self.rows, 0) * max(self.columns, 0)

    def triples(self, generator: Generator) -> Iterator[Tuple[int, int, Any]]:
        """Yield ``(row, column, value)`` for every non-zero generated value."""
        check_callable(generator, "generator")
        zero = self.zero
        for row, column in self:
            value = generator(row, column)
            if not (value is zero or value == zero):
                yield row, column, value

    def build(self, generator: Generator) -> 'YaleSparseMatrix':
        """Populate a new matrix from ``generator``, writing row by row."""
        from ._yale import YaleSparseMatrix

        matrix = YaleSparseMatrix(self.zero)
        for row, column, value in self.triples(generator):
            matrix.set(row, column, value)
        logger.debug(
            "built %dx%d grid into %r", self.rows, self.columns, matrix
        )
        return matrix

    def __repr__(self) -> str:
        return (f"GridBuilder(rows={self.rows}, columns={self.columns}, "
                f"zero={self.zero!r})")

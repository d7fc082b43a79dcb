"""
Tests for YaleSparseMatrix element access and packed layout.
"""

import pytest
import numpy as np
from yalesparse import YaleSparseMatrix, set_defaults

from conftest import assert_invariants, WIDE_ENTRIES


class TestDocumentedExamples:
    """Test the two worked examples."""

    def test_example_layout(self, example_matrix):
        """Test packed arrays of the 4x4 example."""
        assert example_matrix.values.tolist() == [5, 8, 3, 6]
        assert example_matrix.row_offsets.tolist() == [0, 0, 2, 3, 4]
        assert example_matrix.columns.tolist() == [0, 1, 2, 1]
        assert example_matrix.nnz == 4

    def test_example_reads(self, example_matrix):
        """Test reads of stored and unset cells of the 4x4 example."""
        assert example_matrix[1, 0] == 5
        assert example_matrix[1, 1] == 8
        assert example_matrix[2, 2] == 3
        assert example_matrix[3, 1] == 6
        for row, col in [(0, 0), (0, 1), (0, 2), (0, 3), (1, 2), (2, 1),
                         (2, 3), (3, 0), (3, 2), (4, 0), (99, 99)]:
            assert example_matrix[row, col] == 0

    def test_wide_layout(self, wide_matrix):
        """Test packed arrays of the 4x6 example."""
        assert wide_matrix.values.tolist() == [10, 20, 30, 40, 50, 60, 70, 80]
        assert wide_matrix.row_offsets.tolist() == [0, 2, 4, 7, 8]
        assert wide_matrix.columns.tolist() == [0, 1, 1, 3, 2, 3, 4, 5]
        assert wide_matrix.nnz == 8
        assert wide_matrix.shape == (4, 6)

    def test_wide_reads(self, wide_matrix):
        """Test reads of the 4x6 example."""
        for (row, col), value in WIDE_ENTRIES.items():
            assert wide_matrix[row, col] == value
        for row, col in [(0, 2), (1, 0), (1, 2), (1, 4), (2, 0), (2, 1),
                         (2, 5), (3, 0), (3, 6), (4, 0), (99, 99)]:
            assert wide_matrix[row, col] == 0


class TestEmptyMatrix:
    """Test a freshly constructed matrix."""

    def test_empty_state(self):
        """Test empty arrays and counts."""
        mat = YaleSparseMatrix()
        assert mat.row_count == 0
        assert mat.column_count == 0
        assert mat.nnz == 0
        assert mat.is_empty
        assert mat.row_offsets.tolist() == [0]
        assert mat.values.tolist() == []
        assert mat.columns.tolist() == []

    def test_empty_reads_sentinel(self):
        """Test every read of an empty matrix returns the sentinel."""
        mat = YaleSparseMatrix()
        for row in range(30):
            for col in range(30):
                assert mat[row, col] is None
        assert mat.is_empty

    def test_default_zero_from_config(self):
        """Test configured default zero is used when none is given."""
        set_defaults(zero=0.0)
        mat = YaleSparseMatrix()
        assert mat.zero == 0.0
        assert mat[5, 5] == 0.0

    def test_explicit_none_zero(self):
        """Test None can be passed explicitly as the sentinel."""
        set_defaults(zero=0)
        mat = YaleSparseMatrix(None)
        assert mat.zero is None


class TestReads:
    """Test out-of-range and edge reads."""

    def test_negative_row(self, example_matrix):
        """Test negative rows read as zero rather than wrapping."""
        assert example_matrix[-1, 1] == 0
        assert example_matrix.get(-4, 0) == 0

    def test_negative_column(self, example_matrix):
        """Test negative columns read as zero."""
        assert example_matrix[1, -1] == 0

    def test_numpy_integer_coordinates(self, example_matrix):
        """Test numpy integers are accepted as coordinates."""
        assert example_matrix[np.int64(1), np.int32(1)] == 8

    def test_aliases(self, example_matrix):
        """Test element/component aliases of get."""
        assert example_matrix.element(2, 2) == 3
        assert example_matrix.component(3, 1) == 6

    def test_row_subscript_is_dense_row(self, example_matrix):
        """Test mat[i] returns the dense row."""
        assert example_matrix[1] == [5, 8, 0]
        assert example_matrix[0] == [0, 0, 0]


class TestWrites:
    """Test the write algorithm."""

    def test_set_returns_value(self, empty_matrix):
        """Test set returns the written value."""
        assert empty_matrix.set(0, 0, 7) == 7

    def test_append_at_row_end(self, empty_matrix):
        """Test writes in increasing column order append."""
        empty_matrix[0, 1] = 1
        empty_matrix[0, 4] = 2
        assert empty_matrix.columns.tolist() == [1, 4]
        assert empty_matrix.values.tolist() == [1, 2]

    def test_insert_before_larger_column(self, empty_matrix):
        """Test a column strictly between two entries keeps order."""
        empty_matrix[0, 1] = 'a'
        empty_matrix[0, 5] = 'c'
        empty_matrix[0, 3] = 'b'
        assert empty_matrix.columns.tolist() == [1, 3, 5]
        assert empty_matrix.values.tolist() == ['a', 'b', 'c']
        assert empty_matrix.row_offsets.tolist() == [0, 3]

    def test_insert_at_row_start(self, empty_matrix):
        """Test a column smaller than all others goes first."""
        empty_matrix[0, 4] = 4
        empty_matrix[0, 0] = 1
        assert empty_matrix.columns.tolist() == [0, 4]
        assert empty_matrix[0, 0] == 1

    def test_insert_shifts_later_rows(self, wide_matrix):
        """Test inserting into an early row shifts every later offset."""
        wide_matrix[0, 3] = 25
        assert wide_matrix.row_offsets.tolist() == [0, 3, 5, 8, 9]
        assert wide_matrix[0, 3] == 25
        for (row, col), value in WIDE_ENTRIES.items():
            assert wide_matrix[row, col] == value
        assert_invariants(wide_matrix)

    def test_overwrite_in_place(self, example_matrix):
        """Test exact match overwrites without changing layout."""
        offsets = example_matrix.row_offsets.tolist()
        example_matrix[2, 2] = 99
        assert example_matrix[2, 2] == 99
        assert example_matrix.row_offsets.tolist() == offsets
        assert example_matrix.nnz == 4

    def test_idempotent_overwrite(self, example_matrix):
        """Test writing the same value twice leaves identical arrays."""
        once = example_matrix.copy()
        once[2, 1] = 4
        twice = example_matrix.copy()
        twice[2, 1] = 4
        twice[2, 1] = 4
        assert once.values.tolist() == twice.values.tolist()
        assert once.row_offsets.tolist() == twice.row_offsets.tolist()
        assert once.columns.tolist() == twice.columns.tolist()

    def test_writing_sentinel_stores_entry(self, example_matrix):
        """Test the sentinel value is stored explicitly."""
        example_matrix[0, 0] = 0
        assert example_matrix.nnz == 5
        assert 0 in example_matrix

    def test_growth_preserves_data(self, example_matrix):
        """Test writing far below the last row keeps old mappings."""
        example_matrix[10, 0] = 1
        assert example_matrix.row_count == 11
        assert example_matrix.row_offsets.tolist() == [0, 0, 2, 3, 4] + [4] * 6 + [5]
        assert example_matrix[1, 0] == 5
        assert example_matrix[3, 1] == 6
        assert example_matrix[10, 0] == 1

    def test_large_column_accepted(self, empty_matrix):
        """Test a huge column just widens the inferred column count."""
        empty_matrix[0, 10 ** 6] = 1
        assert empty_matrix.column_count == 10 ** 6 + 1
        assert empty_matrix[0, 10 ** 6] == 1

    def test_random_round_trip(self, rng):
        """Test random writes read back with the latest value."""
        mat = YaleSparseMatrix(0)
        expected = {}
        for _ in range(500):
            row = int(rng.integers(0, 40))
            col = int(rng.integers(0, 40))
            value = int(rng.integers(1, 1000))
            mat[row, col] = value
            expected[(row, col)] = value
            assert mat[row, col] == value

        for row in range(45):
            for col in range(45):
                assert mat[row, col] == expected.get((row, col), 0)
        assert mat.nnz == len(expected)
        assert_invariants(mat)

    def test_dense_fill_then_modify(self):
        """Test filling every cell then overwriting."""
        mat = YaleSparseMatrix()
        for row in range(10):
            for col in range(10):
                mat[row, col] = 1
        assert mat[0, 0] == 1
        mat[0, 0] = 1
        assert mat[0, 0] == 1
        mat[0, 0] = 2
        assert mat[0, 0] == 2
        assert mat.nnz == 100
        assert_invariants(mat)


class TestSnapshots:
    """Test the read-only array views."""

    def test_snapshots_are_read_only(self, example_matrix):
        """Test the exposed arrays cannot be written."""
        with pytest.raises(ValueError):
            example_matrix.values[0] = 1
        with pytest.raises(ValueError):
            example_matrix.row_offsets[0] = 1
        with pytest.raises(ValueError):
            example_matrix.columns[0] = 1

    def test_snapshots_are_detached(self, example_matrix):
        """Test snapshots do not follow later writes."""
        values = example_matrix.values
        example_matrix[0, 0] = 1
        assert values.tolist() == [5, 8, 3, 6]

    def test_snapshot_dtypes(self, example_matrix):
        """Test index arrays are int64 and values are objects."""
        assert example_matrix.row_offsets.dtype == np.int64
        assert example_matrix.columns.dtype == np.int64
        assert example_matrix.values.dtype == object

    def test_tuple_values_stay_scalar(self, empty_matrix):
        """Test sequence values are not unpacked into the array."""
        empty_matrix[0, 0] = (1, 2)
        assert empty_matrix.values.shape == (1,)
        assert empty_matrix.values[0] == (1, 2)

    def test_textbook_aliases(self, example_matrix):
        """Test A/IA/JA and scipy-style aliases."""
        assert example_matrix.a.tolist() == example_matrix.data.tolist()
        assert example_matrix.ia.tolist() == example_matrix.indptr.tolist()
        assert example_matrix.ja.tolist() == example_matrix.indices.tolist()


class TestRowAccess:
    """Test per-row accessors."""

    def test_row_slices(self, wide_matrix):
        """Test row values, indices and lengths."""
        assert wide_matrix.row_values(2) == [50, 60, 70]
        assert wide_matrix.row_indices(2) == [2, 3, 4]
        assert wide_matrix.row_length(2) == 3
        assert wide_matrix.get_row(1) == ([1, 3], [30, 40])

    def test_out_of_range_row_is_empty(self, wide_matrix):
        """Test rows outside the matrix are empty."""
        assert wide_matrix.row_length(10) == 0
        assert wide_matrix.row_values(-1) == []

    def test_iter_rows(self, example_matrix):
        """Test iter_rows walks every row."""
        rows = list(example_matrix.iter_rows())
        assert rows == [([], []), ([0, 1], [5, 8]), ([2], [3]), ([1], [6])]

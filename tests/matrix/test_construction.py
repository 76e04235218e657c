"""
Tests for Matrix construction, shape queries and element access.
"""

import numpy as np
import pytest

from pymat import (
    DimensionError,
    IndexOutOfRangeError,
    Matrix,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_table(self):
        M = Matrix([[1, 2, 3], [4, 5, 6]])
        assert M.shape == (2, 3)
        assert M.rows == 2
        assert M.cols == 3
        assert M.arr.dtype == np.float64

    def test_empty(self):
        for M in (Matrix(), Matrix(None), Matrix([])):
            assert M.shape == (0, 0)
            assert M.size() == 0

    def test_from_ndarray(self):
        M = Matrix(np.arange(6).reshape(2, 3))
        assert M.to_list() == [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]

    def test_table_is_copied(self):
        table = [[1.0, 2.0], [3.0, 4.0]]
        M = Matrix(table)
        M.set(0, 0, 99)
        assert table[0][0] == 1.0

    def test_copy_constructor_is_deep(self, m3):
        copy = Matrix(m3)
        copy.set(0, 0, -1)
        copy.add_row([0, 0, 0])
        assert m3.get(0, 0) == 5.0
        assert m3.shape == (3, 3)
        assert copy.shape == (4, 3)

    def test_copy_method(self, m3):
        copy = m3.copy()
        assert copy == m3
        assert copy.arr is not m3.arr

    def test_jagged_rows_rejected(self):
        with pytest.raises(ValidationError, match="same length as the first row"):
            Matrix([[1, 2], [3]])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([[1, "2"], [3, 4]])

    def test_flat_list_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([1, 2, 3])


# ═══════════════════════════════════════════════════════════════════════
# Shape queries
# ═══════════════════════════════════════════════════════════════════════


class TestShape:

    def test_size(self):
        assert Matrix([[1, 2, 3], [4, 5, 6]]).size() == 6

    @pytest.mark.parametrize("table, expected", [
        ([[1, 2, 3]], 1),
        ([[1], [2], [3]], 1),
        ([[1]], 1),
        ([[1, 2], [3, 4]], 2),
        ([[1, 2, 3], [4, 5, 6]], 2),
    ])
    def test_ndims(self, table, expected):
        assert Matrix(table).ndims == expected

    def test_is_square(self, m3):
        assert m3.is_square()
        assert not Matrix([[1, 2]]).is_square()

    def test_as_scalar(self):
        assert Matrix([[3.5]]).as_scalar() == 3.5

    def test_as_scalar_requires_one_element(self, m3):
        with pytest.raises(DimensionError, match="exactly 1 element"):
            m3.as_scalar()


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_get(self, m3):
        assert m3.get(1, 2) == 5.0
        assert isinstance(m3.get(1, 2), float)

    def test_set_returns_receiver(self, m3):
        assert m3.set(2, 0, 7.5) is m3
        assert m3.get(2, 0) == 7.5

    def test_subscript(self, m3):
        m3[0, 1] = -3
        assert m3[0, 1] == -3.0

    def test_subscript_requires_pair(self, m3):
        with pytest.raises(ValidationError, match="expected \\(row, column\\)"):
            m3[0]

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_get_out_of_range(self, m3, row, col):
        with pytest.raises(IndexOutOfRangeError):
            m3.get(row, col)

    def test_set_out_of_range(self, m3):
        with pytest.raises(IndexOutOfRangeError, match="Invalid column index 5"):
            m3.set(0, 5, 1.0)

    def test_set_rejects_non_numeric(self, m3):
        with pytest.raises(ValidationError, match="value"):
            m3.set(0, 0, "x")

    def test_get_row_is_copy(self, m3):
        row = m3.get_row(0)
        np.testing.assert_array_equal(row, [5.0, 9.0, 2.0])
        row[0] = 0.0
        assert m3.get(0, 0) == 5.0

    def test_get_column(self, m3):
        np.testing.assert_array_equal(m3.get_column(1), [9.0, 8.0, 6.0])

    def test_get_row_out_of_range(self, m3):
        with pytest.raises(IndexOutOfRangeError):
            m3.get_row(3)

    def test_get_column_out_of_range(self, m3):
        with pytest.raises(IndexOutOfRangeError):
            m3.get_column(-1)

    def test_set_row(self, m3):
        assert m3.set_row(1, [0, 0, 1]) is m3
        np.testing.assert_array_equal(m3.get_row(1), [0.0, 0.0, 1.0])

    def test_set_row_wrong_length(self, m3):
        with pytest.raises(DimensionError):
            m3.set_row(0, [1, 2])
        np.testing.assert_array_equal(m3.get_row(0), [5.0, 9.0, 2.0])

    def test_set_column(self, m3):
        m3.set_column(2, np.array([7, 8, 9]))
        np.testing.assert_array_equal(m3.get_column(2), [7.0, 8.0, 9.0])

    def test_set_column_wrong_length(self, m3):
        with pytest.raises(DimensionError):
            m3.set_column(0, [1, 2, 3, 4])

    def test_set_column_out_of_range(self, m3):
        with pytest.raises(IndexOutOfRangeError):
            m3.set_column(3, [1, 2, 3])

    def test_numpy_interop(self, m3):
        array = np.asarray(m3)
        np.testing.assert_array_equal(array, m3.arr)
        array[0, 0] = 0.0
        assert m3.get(0, 0) == 5.0

    def test_array_without_copy_shares_storage(self, m3):
        array = np.asarray(m3, copy=False)
        assert np.shares_memory(array, m3.arr)

    def test_array_without_copy_rejects_dtype_change(self, m3):
        with pytest.raises(ValueError):
            np.array(m3, dtype=np.float32, copy=False)

    def test_array_with_dtype(self, m3):
        array = np.asarray(m3, dtype=np.float32)
        assert array.dtype == np.float32
        assert array[0, 0] == 5.0

    def test_repr(self):
        text = repr(Matrix([[1, 2], [3, 4]]))
        assert text.startswith("Matrix(")
        assert "shape=(2, 2)" in text

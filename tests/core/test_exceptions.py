"""
Tests for PyMat exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatError)
    - IndexOutOfRangeError is also a builtin IndexError
    - Diagnostic attributes on IndexOutOfRangeError, NotSquareError,
      SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymat.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    NumericalError,
    PyMatError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatError."""

    def test_validation_error_is_pymat_error(self):
        with pytest.raises(PyMatError):
            raise ValidationError("bad input")

    def test_index_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("row 5")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("row 5")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_not_square_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise NotSquareError("2x3")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_numerical_error_is_pymat_error(self):
        with pytest.raises(PyMatError):
            raise NumericalError("overflow")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestIndexOutOfRangeError:

    def test_all_attributes(self):
        err = IndexOutOfRangeError("Invalid row index 4", index=4, bound=3, axis='row')
        assert str(err) == "Invalid row index 4"
        assert err.index == 4
        assert err.bound == 3
        assert err.axis == 'row'

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("bad")
        assert err.index is None
        assert err.bound is None
        assert err.axis is None


class TestNotSquareError:

    def test_shape_attribute(self):
        err = NotSquareError("not square", shape=(2, 3))
        assert err.shape == (2, 3)

    def test_shape_default(self):
        assert NotSquareError("not square").shape is None


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError("singular", determinant=0.0, threshold=1e-9)
        assert str(err) == "singular"
        assert err.determinant == 0.0
        assert err.threshold == 1e-9

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.determinant is None
        assert err.threshold is None

"""
Free functions over matrices.

Concatenation, reductions, element-wise logarithm and products that
take their operands as arguments rather than as a receiver. All of them
return new matrices and leave their inputs unmodified.
"""

from __future__ import annotations

import numpy as np

from pymat.core.exceptions import DimensionError, ValidationError
from pymat.matrix import Matrix


def _check_matrix(value: object, name: str) -> Matrix:
    if not isinstance(value, Matrix):
        raise ValidationError(f"{name}: expected Matrix, got {type(value).__name__}")
    return value


def horzcat(a: Matrix, b: Matrix) -> Matrix:
    """
    Columns of b appended to the right of a.

    Raises:
        DimensionError: If a and b have different row counts
    """
    _check_matrix(a, "a")
    _check_matrix(b, "b")
    if a.rows != b.rows:
        raise DimensionError(
            f"horzcat: both matrices must have the same number of rows, "
            f"got {a.shape} and {b.shape}"
        )
    return Matrix._wrap(np.hstack([a.arr, b.arr]))


def vertcat(a: Matrix, b: Matrix) -> Matrix:
    """
    Rows of b appended below a.

    Raises:
        DimensionError: If a and b have different column counts
    """
    _check_matrix(a, "a")
    _check_matrix(b, "b")
    if a.cols != b.cols:
        raise DimensionError(
            f"vertcat: both matrices must have the same number of columns, "
            f"got {a.shape} and {b.shape}"
        )
    return Matrix._wrap(np.vstack([a.arr, b.arr]))


def sum(a: Matrix, axis: int | None = None) -> Matrix:
    """Sum of elements; see Matrix.sum."""
    return _check_matrix(a, "a").sum(axis)


def mean(a: Matrix, axis: int | None = None) -> Matrix:
    """Mean of elements; see Matrix.mean."""
    return _check_matrix(a, "a").mean(axis)


def log(a: Matrix) -> Matrix:
    """Element-wise natural logarithm."""
    return Matrix._wrap(np.log(_check_matrix(a, "a").arr))


def inner(a: Matrix, b: Matrix) -> Matrix:
    """
    Inner product as a 1x1 matrix.

    b is reshaped to a's shape first, so a row vector and a column
    vector of the same length combine.

    Raises:
        ValidationError: If a and b hold different numbers of elements
    """
    _check_matrix(a, "a")
    _check_matrix(b, "b")
    return a.linmul(b.reshape(a.shape)).sum()


def dot(a: Matrix, b: Matrix | float) -> Matrix:
    """Dot product; see Matrix.dot."""
    return _check_matrix(a, "a").dot(b)

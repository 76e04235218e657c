"""
Matrix factories.

zeros, ones, eye, empty, rand, linspace, arange and diag build new
matrices from dimensions or ranges; from_array and from_matrix build
them from existing data.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import ArrayLike

from pymat.core.exceptions import DimensionError, ValidationError
from pymat.core.validation import check_integer, check_scalar
from pymat.matrix import Matrix


def zeros(rows: int, cols: int) -> Matrix:
    """rows x cols matrix of zeros."""
    rows = check_integer(rows, "rows", minimum=0)
    cols = check_integer(cols, "cols", minimum=0)
    return Matrix._wrap(np.zeros((rows, cols), dtype=np.float64))


def ones(rows: int, cols: int) -> Matrix:
    """rows x cols matrix of ones."""
    rows = check_integer(rows, "rows", minimum=0)
    cols = check_integer(cols, "cols", minimum=0)
    return Matrix._wrap(np.ones((rows, cols), dtype=np.float64))


def eye(size: int) -> Matrix:
    """size x size identity matrix. size must be positive."""
    size = check_integer(size, "size", minimum=1)
    return Matrix._wrap(np.eye(size, dtype=np.float64))


def empty() -> Matrix:
    """0x0 matrix."""
    return Matrix()


def rand(rows: int, cols: int, rng: np.random.Generator | None = None) -> Matrix:
    """
    rows x cols matrix of uniform random values in [0, 1).

    Args:
        rows: Number of rows
        cols: Number of columns
        rng: Random generator; a fresh default_rng() if None
    """
    rows = check_integer(rows, "rows", minimum=0)
    cols = check_integer(cols, "cols", minimum=0)
    if rng is None:
        rng = np.random.default_rng()
    return Matrix._wrap(rng.random((rows, cols)))


def from_array(table: ArrayLike) -> Matrix:
    """Matrix from a rectangular numeric table."""
    return Matrix(table)


def from_matrix(matrix: Matrix) -> Matrix:
    """Deep copy of an existing Matrix."""
    if not isinstance(matrix, Matrix):
        raise ValidationError(f"from_matrix: expected Matrix, got {type(matrix).__name__}")
    return Matrix(matrix)


def linspace(start: float, end: float, n: int) -> Matrix:
    """
    1 x n matrix of evenly spaced values from start to end inclusive.

    Raises:
        ValidationError: If end <= start or n < 1
    """
    start = check_scalar(start, "start")
    end = check_scalar(end, "end")
    n = check_integer(n, "n", minimum=1)
    if end <= start:
        raise ValidationError(f"linspace: invalid range, end ({end}) must be > start ({start})")
    return Matrix._wrap(np.linspace(start, end, n, dtype=np.float64).reshape(1, n))


def arange(start: float, end: float, step: float = 1.0) -> Matrix:
    """
    1-row matrix of start, start + step, ... up to but excluding end.

    Raises:
        ValidationError: If end <= start or step <= 0
    """
    start = check_scalar(start, "start")
    end = check_scalar(end, "end")
    step = check_scalar(step, "step")
    if end <= start:
        raise ValidationError(f"arange: invalid range, end ({end}) must be > start ({start})")
    if step <= 0:
        raise ValidationError(f"arange: step must be > 0, got {step}")
    n = math.ceil((end - start) / step)
    values = start + step * np.arange(n, dtype=np.float64)
    return Matrix._wrap(values.reshape(1, n))


def diag(vector: Matrix | ArrayLike) -> Matrix:
    """
    Square matrix with `vector` on the diagonal and zeros elsewhere.

    Args:
        vector: 1-row table (e.g. [[5, 8, 4]]) or 1-row Matrix

    Raises:
        DimensionError: If vector has more than one row
    """
    if not isinstance(vector, Matrix):
        vector = Matrix(vector)
    if vector.rows != 1:
        raise DimensionError(
            f"diag: expected vector with 1 row, got vector with {vector.rows} rows"
        )
    return Matrix._wrap(np.diag(vector.arr[0]).astype(np.float64))

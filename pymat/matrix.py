"""
Dense row-major float64 matrix.

Matrix wraps a 2D float64 NumPy array and attaches the algebra to it:
element access, arithmetic, determinant/cofactor/adjoint/inverse by
cofactor expansion, Doolittle LU, shape transformations, reductions and
iteration.

Operations return new matrices. The in-place methods are pow, apply,
shuffle, nanto, set, set_row, set_column, add_row, add_column,
delete_row and delete_column; they mutate the receiver and return it
for chaining.

Usage:
    from pymat import Matrix

    A = Matrix([[5, -2, 2, 7],
                [1, 0, 0, 3],
                [-3, 1, 5, 0],
                [3, -1, -9, 4]])
    A.det()            # 88.0
    A.inv() @ A        # identity, up to rounding
    L, U = A.lu()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any
import numbers
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymat.core.compute.linalg import (
    adjugate,
    cofactor,
    cofactor_matrix,
    det_cofactor,
    lu_doolittle,
    minor,
)
from pymat.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from pymat.core.tolerances import CPU_FP64, MIN_DET, ToleranceTier
from pymat.core.validation import (
    check_index,
    check_same_shape,
    check_scalar,
    check_shape,
    check_square,
    check_table,
    check_vector,
    is_scalar,
)


@dataclass(frozen=True)
class LUResult:
    """
    Result of Matrix.lu().

    Unpacks as a pair: ``L, U = A.lu()``.

    Attributes:
        L: Unit lower triangular factor
        U: Upper triangular factor
        zero_pivots: Pivot indices where U[i, i] == 0 was divided by
    """
    L: Matrix
    U: Matrix
    zero_pivots: tuple[int, ...] = ()

    def __iter__(self) -> Iterator[Matrix]:
        yield self.L
        yield self.U


class Matrix:
    """
    Dense 2D matrix of float64 values.

    Construct from a rectangular numeric table, from another Matrix
    (deep copy), or with no argument for an empty 0x0 matrix.

    Attributes:
        MIN_DET: Determinant magnitude at or below which the matrix is
            treated as singular
    """

    MIN_DET = MIN_DET

    __hash__ = None

    # NumPy defers binary operators to the reflected Matrix methods.
    __array_ufunc__ = None

    def __init__(self, data: Matrix | ArrayLike | None = None):
        if data is None:
            self._data = np.zeros((0, 0), dtype=np.float64)
        elif isinstance(data, Matrix):
            self._data = data._data.copy()
        else:
            self._data = check_table(data, "data")

    @classmethod
    def _wrap(cls, array: NDArray[np.floating[Any]]) -> Matrix:
        """Adopt a 2D float64 array without validating or copying it."""
        matrix = cls.__new__(cls)
        matrix._data = array
        return matrix

    # === Shape ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._data.shape[0], self._data.shape[1])

    @property
    def ndims(self) -> int:
        """1 if either dimension is 1 (a row or column vector), else 2."""
        return 1 if self.rows == 1 or self.cols == 1 else 2

    @property
    def arr(self) -> NDArray[np.floating[Any]]:
        """The underlying float64 array. Writes through to the matrix."""
        return self._data

    def size(self) -> int:
        """Number of elements."""
        return self.rows * self.cols

    def is_square(self) -> bool:
        return self.rows == self.cols

    def copy(self) -> Matrix:
        """Independent deep copy."""
        return Matrix(self)

    def to_list(self) -> list[list[float]]:
        """Rows as nested Python lists."""
        return self._data.tolist()

    def as_scalar(self) -> float:
        """
        Value of a single-element matrix.

        Raises:
            DimensionError: If the matrix does not hold exactly one element
        """
        if self.size() != 1:
            raise DimensionError(
                f"as_scalar: requires exactly 1 element, got shape {self.shape}"
            )
        return float(self._data[0, 0])

    # === Element access ===

    def get(self, row: int, col: int) -> float:
        """Element at (row, col)."""
        row = check_index(row, self.rows, 'row')
        col = check_index(col, self.cols, 'column')
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> Matrix:
        """Set element at (row, col) in place."""
        row = check_index(row, self.rows, 'row')
        col = check_index(col, self.cols, 'column')
        self._data[row, col] = check_scalar(value, "value")
        return self

    def get_row(self, index: int) -> NDArray[np.floating[Any]]:
        """Copy of row `index` as a 1D array."""
        index = check_index(index, self.rows, 'row')
        return self._data[index].copy()

    def set_row(self, index: int, row: ArrayLike) -> Matrix:
        """Replace row `index` in place."""
        index = check_index(index, self.rows, 'row')
        self._data[index] = check_vector(row, self.cols, "row")
        return self

    def get_column(self, index: int) -> NDArray[np.floating[Any]]:
        """Copy of column `index` as a 1D array."""
        index = check_index(index, self.cols, 'column')
        return self._data[:, index].copy()

    def set_column(self, index: int, column: ArrayLike) -> Matrix:
        """Replace column `index` in place."""
        index = check_index(index, self.cols, 'column')
        self._data[:, index] = check_vector(column, self.rows, "column")
        return self

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = _unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = _unpack_key(key)
        self.set(row, col, value)

    # === Arithmetic ===

    def add(self, other: Matrix | float) -> Matrix:
        """Element-wise sum with a same-shape Matrix, or scalar broadcast."""
        if isinstance(other, Matrix):
            check_same_shape(self.shape, other.shape, "add")
            return Matrix._wrap(self._data + other._data)
        return Matrix._wrap(self._data + _operand(other, "add"))

    def sub(self, other: Matrix | float) -> Matrix:
        """Element-wise difference with a same-shape Matrix, or scalar broadcast."""
        if isinstance(other, Matrix):
            check_same_shape(self.shape, other.shape, "sub")
            return Matrix._wrap(self._data - other._data)
        return Matrix._wrap(self._data - _operand(other, "sub"))

    def subtract(self, other: Matrix | float) -> Matrix:
        """Same as sub()."""
        return self.sub(other)

    def diff(self, other: Matrix | float) -> Matrix:
        """Same as sub()."""
        return self.sub(other)

    def multiply(self, other: Matrix | float) -> Matrix:
        """
        Matrix product with a Matrix, or scaling by a scalar.

        Raises:
            DimensionError: If self.cols != other.rows
            ValidationError: If other is neither a Matrix nor a real number
        """
        if isinstance(other, Matrix):
            return self.matmul(other)
        if is_scalar(other):
            return self.scale(other)
        raise ValidationError(
            f"multiply: expected Matrix or real number, got {type(other).__name__}"
        )

    def matmul(self, other: Matrix) -> Matrix:
        """Standard matrix product self x other."""
        if not isinstance(other, Matrix):
            raise ValidationError(f"matmul: expected Matrix, got {type(other).__name__}")
        if self.cols != other.rows:
            raise DimensionError(
                f"matmul: invalid matrix dimensions, got {self.shape} x {other.shape}"
            )
        return Matrix._wrap(self._data @ other._data)

    def scale(self, k: float) -> Matrix:
        """Every element multiplied by k."""
        return Matrix._wrap(self._data * check_scalar(k, "k"))

    def linmul(self, other: Matrix) -> Matrix:
        """Hadamard (element-wise) product."""
        if not isinstance(other, Matrix):
            raise ValidationError(f"linmul: expected Matrix, got {type(other).__name__}")
        check_same_shape(self.shape, other.shape, "linmul")
        return Matrix._wrap(self._data * other._data)

    def dot(self, other: Matrix | float) -> Matrix:
        """
        Dot product.

        Two vectors (ndims == 1) of the same shape give their inner
        product as a 1x1 matrix. Anything else is multiply().
        """
        if (
            isinstance(other, Matrix)
            and self.shape == other.shape
            and self.ndims == 1
            and other.ndims == 1
        ):
            return self.linmul(other.reshape(self.shape)).sum()
        return self.multiply(other)

    # === Determinant, cofactors, inverse, LU ===

    def det(self) -> float:
        """Determinant by recursive cofactor expansion along row 0."""
        check_square(self.shape, "det")
        return det_cofactor(self._data)

    def is_singular(self) -> bool:
        """True when |det| <= MIN_DET."""
        return abs(self.det()) <= self.MIN_DET

    def minor(self, i: int, j: int) -> float:
        """Determinant of the submatrix without row i and column j."""
        check_square(self.shape, "minor")
        i = check_index(i, self.rows, 'row')
        j = check_index(j, self.cols, 'column')
        return minor(self._data, i, j)

    def cofactor(self, i: int, j: int) -> float:
        """(-1)^(i+j) * minor(i, j)."""
        check_square(self.shape, "cofactor")
        i = check_index(i, self.rows, 'row')
        j = check_index(j, self.cols, 'column')
        return cofactor(self._data, i, j)

    def cof(self) -> Matrix:
        """Matrix of cofactors."""
        check_square(self.shape, "cof")
        return Matrix._wrap(cofactor_matrix(self._data))

    def adj(self) -> Matrix:
        """Adjoint: transpose of the cofactor matrix."""
        check_square(self.shape, "adj")
        return Matrix._wrap(adjugate(self._data))

    def inv(self) -> Matrix:
        """
        Inverse as adj() / det().

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If |det| <= MIN_DET
        """
        check_square(self.shape, "inv")
        determinant = det_cofactor(self._data)
        if abs(determinant) <= self.MIN_DET:
            raise SingularMatrixError(
                f"inv: matrix is singular, |det| = {abs(determinant):g} <= {self.MIN_DET:g}",
                determinant=determinant,
                threshold=self.MIN_DET,
            )
        return Matrix._wrap(adjugate(self._data) * (1.0 / determinant))

    def lu(self) -> LUResult:
        """
        Doolittle LU decomposition without pivoting.

        Returns:
            LUResult(L, U); unpack with ``L, U = A.lu()``

        Raises:
            NotSquareError: If the matrix is not square

        Warns:
            RuntimeWarning: On a zero pivot; L then holds inf/NaN
        """
        check_square(self.shape, "lu")
        factors = lu_doolittle(self._data)
        return LUResult(
            L=Matrix._wrap(factors.L),
            U=Matrix._wrap(factors.U),
            zero_pivots=factors.zero_pivots,
        )

    # === Shape transformations ===

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        """Transpose, like numpy's .T."""
        return self.transpose()

    def submat(self, start_row: int, end_row: int, start_col: int, end_col: int) -> Matrix:
        """Rectangular block with inclusive row and column ranges."""
        check_index(start_row, self.rows, 'row')
        check_index(end_row, self.rows, 'row')
        check_index(start_col, self.cols, 'column')
        check_index(end_col, self.cols, 'column')
        block = self._data[start_row:end_row + 1, start_col:end_col + 1]
        return Matrix._wrap(block.copy())

    def reshape(self, shape: tuple[int, int]) -> Matrix:
        """
        Same elements in a new shape, filled row-major.

        Raises:
            ValidationError: If shape is not two positive integers whose
                product equals size()
        """
        rows, cols = check_shape(shape, "shape", minimum=1)
        if rows * cols != self.size():
            raise ValidationError(
                f"reshape: cannot reshape {self.shape} ({self.size()} elements) "
                f"into {(rows, cols)}"
            )
        return Matrix._wrap(self._data.reshape(rows, cols).copy())

    def flatten(self) -> Matrix:
        """1 x size() matrix, row-major."""
        return Matrix._wrap(self._data.reshape(1, self.size()).copy())

    def ravel(self) -> Matrix:
        """Same as flatten()."""
        return self.flatten()

    def add_row(self, row: ArrayLike) -> Matrix:
        """
        Append a row at the bottom, in place.

        On a 0x0 matrix the row's length sets the column count.
        """
        if self.shape == (0, 0):
            values = check_vector(row, np.shape(row)[0] if np.ndim(row) == 1 else -1, "row")
            self._data = values.reshape(1, -1)
            return self
        values = check_vector(row, self.cols, "row")
        self._data = np.vstack([self._data, values])
        return self

    def add_column(self, column: ArrayLike) -> Matrix:
        """
        Append a column at the right, in place.

        On a 0x0 matrix the column's length sets the row count.
        """
        if self.shape == (0, 0):
            values = check_vector(column, np.shape(column)[0] if np.ndim(column) == 1 else -1, "column")
            self._data = values.reshape(-1, 1)
            return self
        values = check_vector(column, self.rows, "column")
        self._data = np.hstack([self._data, values.reshape(-1, 1)])
        return self

    def delete_row(self, index: int) -> Matrix:
        """Remove row `index`, in place."""
        index = check_index(index, self.rows, 'row')
        self._data = np.delete(self._data, index, axis=0)
        return self

    def delete_column(self, index: int) -> Matrix:
        """Remove column `index`, in place."""
        index = check_index(index, self.cols, 'column')
        self._data = np.delete(self._data, index, axis=1)
        return self

    # === Element-wise transforms ===

    def abs(self) -> Matrix:
        return Matrix._wrap(np.abs(self._data))

    def neg(self) -> Matrix:
        return Matrix._wrap(-self._data)

    def pow(self, n: float) -> Matrix:
        """Raise every element to the power n, in place."""
        n = check_scalar(n, "n")
        self._data = np.power(self._data, n)
        return self

    def map(self, func: Callable[[float], float]) -> Matrix:
        """New matrix with func applied to every element."""
        result = np.empty_like(self._data)
        for index, value in np.ndenumerate(self._data):
            result[index] = func(float(value))
        return Matrix._wrap(result)

    def apply(self, func: Callable[[float], float]) -> Matrix:
        """Apply func to every element, in place."""
        self._data = self.map(func)._data
        return self

    def nanto(self, value: float = 0.0) -> Matrix:
        """Replace NaN elements with `value` (default 0), in place."""
        value = check_scalar(value, "value")
        self._data[np.isnan(self._data)] = value
        return self

    def shuffle(self, rng: np.random.Generator | None = None) -> Matrix:
        """
        Permute the rows in place.

        For i = 0..rows-1, row i is swapped with row floor(u * (i + 1)),
        u uniform in [0, 1) (inside-out Fisher-Yates).

        Args:
            rng: Random generator; a fresh default_rng() if None
        """
        if rng is None:
            rng = np.random.default_rng()
        for i in range(self.rows):
            j = int(np.floor(rng.random() * (i + 1)))
            self._data[[i, j]] = self._data[[j, i]]
        return self

    # === Reductions ===

    def sum(self, axis: int | None = None) -> Matrix:
        """
        Sum of elements.

        Args:
            axis: None for the 1x1 total, 0 for column sums (1 x cols),
                1 for row sums (rows x 1)
        """
        axis = _check_axis(axis)
        if axis is None:
            return Matrix._wrap(np.array([[self._data.sum()]], dtype=np.float64))
        return Matrix._wrap(self._data.sum(axis=axis, keepdims=True))

    def mean(self, axis: int | None = None) -> Matrix:
        """
        Mean of elements.

        Args:
            axis: None for the 1x1 overall mean, 0 for per-column means
                (1 x cols), 1 for per-row means (rows x 1)

        Raises:
            ValidationError: If the reduced dimension is empty
        """
        axis = _check_axis(axis)
        count = self.size() if axis is None else self.shape[axis]
        if count == 0:
            raise ValidationError(f"mean: no elements to average in matrix of shape {self.shape}")
        return self.sum(axis).scale(1.0 / count)

    def max(self) -> float:
        """Largest element."""
        if self.size() == 0:
            raise ValidationError("max: matrix is empty")
        return float(self._data.max())

    def norm(self) -> float:
        """Frobenius norm, sqrt(sum |x|^2)."""
        return float(np.sqrt(np.sum(np.abs(self._data) ** 2)))

    def diag(self) -> NDArray[np.floating[Any]]:
        """Main diagonal as a 1D array."""
        return np.diag(self._data).copy()

    # === Comparison ===

    def equals(self, other: Matrix) -> bool:
        """
        Exact structural equality: same shape and identical elements.

        NaN equals NaN at the same position.
        """
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data, other._data, equal_nan=True))

    def allclose(self, other: Matrix, tier: ToleranceTier = CPU_FP64) -> bool:
        """Same shape and element-wise equal within a tolerance tier."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    # === Iteration ===

    def iter(self) -> Iterator[float]:
        """Elements in row-major order."""
        for value in self._data.flat:
            yield float(value)

    def iterrows(self, as_matrix: bool = False) -> Iterator[NDArray[np.floating[Any]] | Matrix]:
        """
        Rows, one at a time.

        Args:
            as_matrix: Yield 1 x cols matrices instead of 1D arrays
        """
        for i in range(self.rows):
            row = self.get_row(i)
            yield Matrix._wrap(row.reshape(1, -1)) if as_matrix else row

    def itercolumns(self, as_matrix: bool = False) -> Iterator[NDArray[np.floating[Any]] | Matrix]:
        """
        Columns, one at a time.

        Args:
            as_matrix: Yield rows x 1 matrices instead of 1D arrays
        """
        for j in range(self.cols):
            column = self.get_column(j)
            yield Matrix._wrap(column.reshape(-1, 1)) if as_matrix else column

    # === Python protocol ===

    def __iter__(self) -> Iterator[float]:
        return self.iter()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other: Matrix | float) -> Matrix:
        return self.add(other)

    def __radd__(self, other: float) -> Matrix:
        return self.add(other)

    def __sub__(self, other: Matrix | float) -> Matrix:
        return self.sub(other)

    def __rsub__(self, other: float) -> Matrix:
        return self.neg().add(other)

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self.linmul(other)
        return self.scale(other)

    def __rmul__(self, other: float) -> Matrix:
        return self.scale(other)

    def __truediv__(self, other: float) -> Matrix:
        divisor = check_scalar(other, "divisor")
        if divisor == 0:
            raise ValidationError("divisor: must be nonzero")
        return Matrix._wrap(self._data / divisor)

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.matmul(other)

    def __neg__(self) -> Matrix:
        return self.neg()

    def __abs__(self) -> Matrix:
        return self.abs()

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        if copy is False:
            if dtype is not None and np.dtype(dtype) != self._data.dtype:
                raise ValueError(
                    f"Unable to avoid copy while converting float64 Matrix to {np.dtype(dtype)}"
                )
            return self._data
        return np.array(self._data, dtype=dtype, copy=True)

    def __repr__(self) -> str:
        body = np.array2string(self._data, separator=', ', prefix='Matrix(')
        return f"Matrix({body}, shape={self.shape})"


def _unpack_key(key: Any) -> tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValidationError(f"index: expected (row, column), got {key!r}")
    return key[0], key[1]


def _operand(value: Any, operation: str) -> float:
    if not is_scalar(value):
        raise ValidationError(
            f"{operation}: expected Matrix or real number, got {type(value).__name__}"
        )
    return float(value)


def _check_axis(axis: Any) -> int | None:
    if axis is None:
        return None
    if isinstance(axis, (bool, np.bool_)) or not isinstance(axis, numbers.Integral) or axis not in (0, 1):
        raise ValidationError(f"axis: expected None, 0 or 1, got {axis!r}")
    return int(axis)

"""
Input validation utilities for PyMat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on numeric array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
import numbers
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymat.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ValidationError,
)


def is_scalar(value: Any) -> bool:
    """True for real numbers (Python or NumPy), excluding booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real scalar and return it as float.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        float(value)

    Raises:
        ValidationError: If value is not a real number
    """
    if not is_scalar(value):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_integer(value: Any, name: str, minimum: int | None = None) -> int:
    """
    Validate an integer, optionally bounded below.

    Args:
        value: Input to validate
        name: Parameter name for error messages
        minimum: Smallest accepted value, or None for no bound

    Returns:
        int(value)

    Raises:
        ValidationError: If value is not an integer or is below minimum
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    value = int(value)
    if minimum is not None and value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")
    return value


def check_table(data: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a rectangular numeric table and convert it to float64.

    Accepts a 2D numpy array or a sequence of row sequences. Every row
    must have the length of the first row and every element must be a
    real number. An empty sequence yields a 0x0 array.

    Args:
        data: Input to validate
        name: Parameter name for error messages

    Returns:
        New 2D float64 array (never a view of the input)

    Raises:
        ValidationError: If input is jagged, non-numeric, or not 2D
    """
    if isinstance(data, (str, bytes)):
        raise ValidationError(f"{name}: expected a 2D numeric table, got {type(data).__name__}")

    if not isinstance(data, np.ndarray):
        if not isinstance(data, Sequence):
            raise ValidationError(
                f"{name}: expected a 2D numeric table, got {type(data).__name__}"
            )
        if len(data) == 0:
            return np.zeros((0, 0), dtype=np.float64)
        for i, row in enumerate(data):
            if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
                raise ValidationError(
                    f"{name}: row {i} is {type(row).__name__}, expected a sequence of numbers"
                )
        width = len(data[0])
        lengths = [len(row) for row in data]
        if any(length != width for length in lengths):
            raise ValidationError(
                f"{name}: all rows must have the same length as the first row "
                f"({width}), got row lengths {lengths}"
            )

    try:
        result = np.asarray(data)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    if result.ndim != 2:
        raise ValidationError(
            f"{name}: expected a 2D table, got {result.ndim}D with shape {result.shape}"
        )

    return np.array(result, dtype=np.float64)


def check_vector(values: ArrayLike, length: int, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a 1D numeric vector of a required length.

    Args:
        values: Input to validate
        length: Required number of elements
        name: Parameter name for error messages

    Returns:
        New 1D float64 array

    Raises:
        ValidationError: If input is not numeric
        DimensionError: If input is not 1D or has the wrong length
    """
    try:
        result = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D vector, got {result.ndim}D with shape {result.shape}"
        )

    if result.shape[0] != length:
        raise DimensionError(
            f"{name}: expected {length} elements, got {result.shape[0]}"
        )

    return np.array(result, dtype=np.float64)


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are out of range; there is no wrap-around.

    Args:
        index: Index to check
        bound: Size of the indexed dimension
        axis: 'row' or 'column', used in error messages

    Returns:
        int(index)

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is negative or >= bound
    """
    index = check_integer(index, f"{axis} index")
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"Invalid {axis} index {index}: must be in [0, {bound})",
            index=index,
            bound=bound,
            axis=axis,
        )
    return index


def check_shape(shape: Any, name: str, minimum: int = 0) -> tuple[int, int]:
    """
    Validate a (rows, columns) pair.

    Args:
        shape: Pair to validate
        name: Parameter name for error messages
        minimum: Smallest accepted value for each dimension

    Returns:
        (rows, columns) as ints

    Raises:
        ValidationError: If shape is not a pair of integers >= minimum
    """
    if isinstance(shape, (str, bytes)) or not isinstance(shape, (Sequence, np.ndarray)):
        raise ValidationError(f"{name}: expected (rows, columns), got {shape!r}")
    if len(shape) != 2:
        raise ValidationError(
            f"{name}: expected 2 dimensions, got {len(shape)} in {tuple(shape)!r}"
        )
    rows = check_integer(shape[0], f"{name}[0]", minimum=minimum)
    columns = check_integer(shape[1], f"{name}[1]", minimum=minimum)
    return rows, columns


def check_same_shape(
    a_shape: tuple[int, int],
    b_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are identical.

    Raises:
        DimensionError: If shapes differ
    """
    if tuple(a_shape) != tuple(b_shape):
        raise DimensionError(
            f"{operation}: matrices must have the same shape, "
            f"got {tuple(a_shape)} and {tuple(b_shape)}"
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a shape is square.

    Raises:
        NotSquareError: If rows != columns
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation}: matrix is not square, got shape {tuple(shape)}",
            shape=tuple(shape),
        )

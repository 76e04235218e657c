"""
Cofactor-expansion kernels.

Determinant, minors, cofactors and the adjugate computed by recursive
Laplace expansion along the first row. The cost is O(n!) in the matrix
order; these kernels are exact for small matrices and are not meant for
large inputs.

Kernels take square float64 arrays and do no validation. Callers check
shapes and indices first.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def det_cofactor(A: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by Laplace expansion along row 0.

    Args:
        A: Square matrix (n x n)

    Returns:
        det(A). The 0x0 determinant is 1.0 (empty product).
    """
    n = A.shape[0]
    if n == 0:
        return 1.0
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[1, 0] * A[0, 1])

    total = 0.0
    sign = 1.0
    below = A[1:]
    for col in range(n):
        inner = np.delete(below, col, axis=1)
        total += sign * A[0, col] * det_cofactor(inner)
        sign = -sign
    return float(total)


def minor_matrix(A: NDArray[np.floating[Any]], i: int, j: int) -> NDArray[np.floating[Any]]:
    """Submatrix of A with row i and column j removed."""
    return np.delete(np.delete(A, i, axis=0), j, axis=1)


def minor(A: NDArray[np.floating[Any]], i: int, j: int) -> float:
    """Determinant of the (i, j) minor matrix."""
    return det_cofactor(minor_matrix(A, i, j))


def cofactor(A: NDArray[np.floating[Any]], i: int, j: int) -> float:
    """Signed minor: (-1)^(i+j) * minor(A, i, j)."""
    sign = 1.0 if (i + j) % 2 == 0 else -1.0
    return sign * minor(A, i, j)


def cofactor_matrix(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Matrix of all cofactors, same shape as A."""
    n = A.shape[0]
    C = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor(A, i, j)
    return C


def adjugate(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Adjoint (classical adjugate): transpose of the cofactor matrix."""
    return cofactor_matrix(A).T.copy()

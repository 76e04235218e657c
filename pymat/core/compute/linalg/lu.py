"""
Doolittle LU decomposition without pivoting.

Factors A = LU with L unit lower triangular and U upper triangular:

    U[i, k] = A[i, k] - sum_{j<i} L[i, j] U[j, k]            (k >= i)
    L[k, i] = (A[k, i] - sum_{j<i} L[k, j] U[j, i]) / U[i, i]  (k > i)

No row exchanges are performed. A zero pivot U[i, i] is not repaired:
the division produces inf/NaN entries in L and a RuntimeWarning is
issued so the caller can tell.
"""

from dataclasses import dataclass
from typing import Any
import warnings
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class LUFactors:
    """
    Raw result of LU decomposition.

    Attributes:
        L: Unit lower triangular factor (n x n)
        U: Upper triangular factor (n x n)
        zero_pivots: Indices i where U[i, i] == 0 was used as a divisor
    """
    L: NDArray[np.floating[Any]]
    U: NDArray[np.floating[Any]]
    zero_pivots: tuple[int, ...] = ()


def lu_doolittle(A: NDArray[np.floating[Any]]) -> LUFactors:
    """
    Doolittle LU decomposition of a square matrix.

    Args:
        A: Square matrix (n x n)

    Returns:
        LUFactors with L, U and the zero pivots encountered
    """
    n = A.shape[0]
    L = np.zeros((n, n), dtype=np.float64)
    U = np.zeros((n, n), dtype=np.float64)
    zero_pivots = []

    for i in range(n):
        for k in range(i, n):
            U[i, k] = A[i, k] - L[i, :i] @ U[:i, k]

        L[i, i] = 1.0
        if i == n - 1:
            break

        if U[i, i] == 0.0:
            zero_pivots.append(i)
            warnings.warn(
                f"Zero pivot at U[{i}, {i}] in LU decomposition without pivoting; "
                f"column {i} of L contains inf/NaN",
                RuntimeWarning,
                stacklevel=3,
            )

        with np.errstate(divide='ignore', invalid='ignore'):
            for k in range(i + 1, n):
                L[k, i] = (A[k, i] - L[k, :i] @ U[:i, i]) / U[i, i]

    return LUFactors(L=L, U=U, zero_pivots=tuple(zero_pivots))

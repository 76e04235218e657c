"""
Linear algebra on Matrix values, as free functions.

    from pymat import linalg

    linalg.norm(M)     # Frobenius norm
    linalg.det(M)      # cofactor-expansion determinant
    linalg.inv(M)      # adj(M) / det(M)
    L, U = linalg.lu(M)
"""

from __future__ import annotations

from pymat.core.exceptions import ValidationError
from pymat.matrix import LUResult, Matrix


def _check_matrix(value: object) -> Matrix:
    if not isinstance(value, Matrix):
        raise ValidationError(f"M: expected Matrix, got {type(value).__name__}")
    return value


def norm(M: Matrix) -> float:
    """Frobenius norm: sqrt of the sum of squared magnitudes."""
    return _check_matrix(M).norm()


def det(M: Matrix) -> float:
    """Determinant; see Matrix.det."""
    return _check_matrix(M).det()


def inv(M: Matrix) -> Matrix:
    """Inverse; see Matrix.inv."""
    return _check_matrix(M).inv()


def lu(M: Matrix) -> LUResult:
    """Doolittle LU decomposition; see Matrix.lu."""
    return _check_matrix(M).lu()


__all__ = [
    "LUResult",
    "norm",
    "det",
    "inv",
    "lu",
]

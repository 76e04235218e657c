"""
Linear algebra kernels for PyMat.

All functions follow these conventions:
    - Inputs are float64 NumPy arrays already validated by the caller
    - Outputs are new arrays or structured result dataclasses
    - Algorithms are the classical textbook ones (cofactor expansion,
      Doolittle LU without pivoting); nothing is delegated to LAPACK

Submodules:
    cofactor: Determinant, minors, cofactors, adjugate
    lu: LU decomposition
"""

from pymat.core.compute.linalg.cofactor import (
    adjugate,
    cofactor,
    cofactor_matrix,
    det_cofactor,
    minor,
    minor_matrix,
)
from pymat.core.compute.linalg.lu import LUFactors, lu_doolittle

__all__ = [
    # Cofactor expansion
    "det_cofactor",
    "minor_matrix",
    "minor",
    "cofactor",
    "cofactor_matrix",
    "adjugate",
    # LU decomposition
    "LUFactors",
    "lu_doolittle",
]

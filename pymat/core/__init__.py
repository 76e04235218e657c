"""
Core infrastructure for PyMat.

This module provides the shared abstractions used by the matrix type,
the linear algebra kernels and the I/O helpers.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Singularity threshold and comparison tolerance tiers
"""

from pymat.core.exceptions import (
    PyMatError,
    ValidationError,
    IndexOutOfRangeError,
    DimensionError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)
from pymat.core.tolerances import MIN_DET, ToleranceTier

__all__ = [
    # Exceptions
    "PyMatError",
    "ValidationError",
    "IndexOutOfRangeError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
    # Tolerances
    "MIN_DET",
    "ToleranceTier",
]

"""
PyMat: dense row-major matrices with classical linear algebra.

A small matrix library for exact, readable linear algebra on small
problems: cofactor-expansion determinants and inverses, Doolittle LU,
shape manipulation, reductions and iteration.

Submodules:
    linalg: norm, det, inv, lu as free functions
    io: Delimited text loading
    core: Exceptions, validation, tolerances, numeric kernels
"""

__version__ = "0.1.0"

from pymat.core.exceptions import (
    PyMatError,
    ValidationError,
    IndexOutOfRangeError,
    DimensionError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)
from pymat.core.tolerances import MIN_DET
from pymat.matrix import LUResult, Matrix
from pymat.construct import (
    arange,
    diag,
    empty,
    eye,
    from_array,
    from_matrix,
    linspace,
    ones,
    rand,
    zeros,
)
from pymat.functions import dot, horzcat, inner, log, mean, sum, vertcat
from pymat import linalg
from pymat.io import load_txt, read_matrix

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "LUResult",
    "MIN_DET",
    # Constructors
    "zeros",
    "ones",
    "eye",
    "empty",
    "rand",
    "from_array",
    "from_matrix",
    "linspace",
    "arange",
    "diag",
    # Functions
    "horzcat",
    "vertcat",
    "sum",
    "mean",
    "log",
    "inner",
    "dot",
    # Submodules
    "linalg",
    # I/O
    "load_txt",
    "read_matrix",
    # Exceptions
    "PyMatError",
    "ValidationError",
    "IndexOutOfRangeError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]

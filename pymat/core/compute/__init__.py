"""
Shared compute infrastructure for PyMat.

This module contains the numeric kernels that operate on raw float64
arrays. The Matrix type validates its inputs and delegates here.

Submodules:
    linalg: Linear algebra kernels (cofactor expansion, LU)
"""

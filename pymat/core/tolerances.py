"""
Numerical thresholds and tolerance tiers.

Defines the singularity threshold used by the determinant/inverse path
and the precision expectations for comparing matrices:
- CPU FP64 (reference): well-conditioned problems
- CPU FP64 ill-conditioned: cofactor-expansion inverses, least squares
  through normal equations, anything with cond > 1e4

Used by Matrix.allclose, the test suite, and the examples.
"""

from dataclasses import dataclass


# Determinant magnitude at or below which a square matrix is singular.
MIN_DET = 1e-9


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


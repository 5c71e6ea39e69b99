"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the different kinds of results the
library produces:
- exact-input arithmetic (products and sums of small integers)
- inversion round trips (A @ inv(A) against the identity)
- regression fits on exactly linear data

Used by Matrix.allclose(), the regression near-singularity check and the
test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Elementwise float64 arithmetic on well-scaled inputs
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, elementwise arithmetic',
)

# A @ inverse(A) compared to I
INVERSION_ROUND_TRIP = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='inversion_round_trip',
    description='Gauss-Jordan inverse multiplied back against the identity',
)

# Coefficients and predictions of a normal-equation fit
REGRESSION_FIT = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='regression_fit',
    description='Normal-equation coefficients on exactly linear data',
)

# Relative pivot size (in units of n * eps * max|A|) below which the
# normal matrix is reported as near-singular.
NEAR_SINGULAR_FACTOR = 1.0


def near_singular_threshold(order: int, scale: float) -> float:
    """Pivot magnitude under which a matrix of the given order and scale is near-singular."""
    return NEAR_SINGULAR_FACTOR * max(order, 1) * float(np.finfo(np.float64).eps) * scale


def select_tolerance(kind: str) -> ToleranceTier:
    """Select the tolerance tier for a kind of comparison."""
    tiers = {
        tier.name: tier
        for tier in (CPU_FP64, INVERSION_ROUND_TRIP, REGRESSION_FIT)
    }
    if kind not in tiers:
        raise ValueError(f"Unknown tolerance tier: {kind!r}. Must be one of {sorted(tiers)}")
    return tiers[kind]

"""
Shared compute infrastructure for numstat.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from numstat.core.compute.timing import Timer
from numstat.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    INVERSION_ROUND_TRIP,
    REGRESSION_FIT,
    near_singular_threshold,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "INVERSION_ROUND_TRIP",
    "REGRESSION_FIT",
    "near_singular_threshold",
    "select_tolerance",
]

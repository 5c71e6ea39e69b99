"""
Regression solution types.

Contains the parameter payload produced by backends.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends. Coefficients are
    ordered intercept first, then one slope per feature.
    """
    coefficients: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

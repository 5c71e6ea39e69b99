"""
Regression backends.

Available backends:
    CPUNormalEquationBackend: normal equation with Gauss-Jordan inversion
"""

from typing import Literal

from numstat.core.exceptions import ValidationError
from numstat.linalg.inversion import Pivoting
from numstat.regression.backends.cpu import CPUNormalEquationBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_normal_equation']


def get_backend(choice: BackendChoice, pivoting: Pivoting = 'value') -> CPUNormalEquationBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_normal_equation'):
        return CPUNormalEquationBackend(pivoting=pivoting)

    raise ValidationError(f"Unknown backend: {choice!r}")


__all__ = [
    "BackendChoice",
    "CPUNormalEquationBackend",
    "get_backend",
]

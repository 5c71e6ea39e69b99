"""
Generic result container for numstat computations.

The Result class provides a standardized envelope for backend output.
Domains define their own parameter payloads; the envelope carries the
shared metadata (timing, warnings, provenance).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivoting, pivots)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library and NumPy versions that produced a result."""
    import numpy as np
    from numstat import __version__

    return {
        'numstat_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numeric computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, fitted values, etc.)
        info: Structured metadata (method, pivoting strategy, pivots)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Version metadata; generated automatically when omitted

    Examples:
        >>> Result(
        ...     params=LinearParams(coefficients=beta, ...),
        ...     info={'method': 'normal_equation', 'pivoting': 'value'},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_normal_equation'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

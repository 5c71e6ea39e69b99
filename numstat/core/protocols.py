"""
Core protocols for numstat.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right shape can act as a backend.
"""

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from numstat.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload.

    Backends are stateless: all configuration is passed at construction
    time. This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_normal_equation'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent solution (singularity)
            ValidationError: If design is invalid for this backend
        """
        ...

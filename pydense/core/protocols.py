"""
Core protocols for PyDense.

These define structural interfaces that backend implementations must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so that alternative backends need not inherit from anything.
"""

from typing import TYPE_CHECKING, Protocol, TypeVar, Any, runtime_checkable

if TYPE_CHECKING:
    from pydense.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[P]):
    """
    Protocol for computational backends.

    A backend takes a validated design (the input matrix) and produces a
    Result envelope around a factor payload. Backends are stateless: all
    configuration is passed per call, which makes them easy to test and
    swap.

    Type Parameters:
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{family}', e.g. 'cpu_dense'.
        """
        ...

    def solve(self, design: Any, **options: Any) -> 'Result[P]':
        """
        Execute the decomposition.

        Raises:
            ValidationError: If the design is invalid for the requested method
            NumericalError: If a strict numerical check fails
        """
        ...

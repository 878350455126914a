"""
Optimizer- and parameter-related exceptions for stochopt.

This module defines custom errors used to signal misuse of the library that
Python cannot rule out statically: handing an optimizer a value it does not
know how to traverse, or using an optimizer after it has been consumed.

Shape mismatches between parameters, gradients and auxiliary state are not
represented here. They are unchecked preconditions, and their outcome depends
on the container kind (e.g. ``IndexError`` for lists, a NumPy broadcasting
error for arrays).
"""


class UnsupportedParametersError(TypeError):
    """
    Raised when a value has no parameter capability.

    This error is raised by the elementwise primitives (`zeros`,
    `zip2_mut_with`) when a value is neither a registered container kind nor
    an object implementing the `IParameters` protocol.

    Attributes
    ----------
    kind : str
        Qualified name of the offending value's type.
    """

    def __init__(self, kind: str) -> None:
        """
        Initialize the UnsupportedParametersError.

        Parameters
        ----------
        kind : str
            Name of the unsupported type (e.g., "str", "NoneType").
        """
        super().__init__(
            f"'{kind}' cannot be used as optimizer parameters; expected a real "
            "scalar, tuple, list, dict, numpy.ndarray or an IParameters object."
        )
        self.kind = kind


class OptimizerConsumedError(RuntimeError):
    """
    Raised when an optimizer is used after `into_parameters()`.

    `into_parameters()` hands ownership of the parameter container back to the
    caller and is terminal.
    """

    def __init__(self, operation: str) -> None:
        """
        Initialize the OptimizerConsumedError.

        Parameters
        ----------
        operation : str
            The method or property that was accessed (e.g., "step").
        """
        super().__init__(
            f"Cannot use {operation!r} after into_parameters() consumed the optimizer."
        )
        self.operation = operation

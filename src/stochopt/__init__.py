"""
stochopt: lightweight stochastic gradient optimizers.

The library updates caller-owned parameter containers from caller-supplied
gradients; it does no automatic differentiation.

Example
-------
Minimize ``(x - 4) ** 2``:

    >>> from stochopt import Adam
    >>> opt = Adam(-3.0, 0.1)
    >>> for _ in range(10_000):
    ...     opt.step(2.0 * opt.parameters - 8.0)
    >>> x = opt.into_parameters()

Parameters may be real scalars, tuples, lists, dicts, NumPy arrays, any
nesting of those, or objects implementing `IParameters`.
"""

from .domain import (
    IOptimizer,
    IParameters,
    OptimizerConsumedError,
    UnsupportedParametersError,
)
from .infrastructure.optimizers import (
    SGD,
    AdaGrad,
    Adam,
    AdamBuilder,
    AdamConfig,
    BaseOptimizer,
    OptimizerRegistry,
)
from .infrastructure.parameters import (
    check_parameters,
    is_parameter_kind,
    register_parameter_kind,
    zeros,
    zip2_mut_with,
    zip_mut_with,
)

__all__ = [
    "IOptimizer",
    "IParameters",
    "OptimizerConsumedError",
    "UnsupportedParametersError",
    "SGD",
    "AdaGrad",
    "Adam",
    "AdamBuilder",
    "AdamConfig",
    "BaseOptimizer",
    "OptimizerRegistry",
    "check_parameters",
    "is_parameter_kind",
    "register_parameter_kind",
    "zeros",
    "zip2_mut_with",
    "zip_mut_with",
]

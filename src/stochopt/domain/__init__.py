"""
Backend-agnostic contracts and exceptions for stochopt.
"""

from ._errors import OptimizerConsumedError, UnsupportedParametersError
from ._optimizers import IOptimizer
from ._parameters import IParameters

__all__ = [
    "IOptimizer",
    "IParameters",
    "OptimizerConsumedError",
    "UnsupportedParametersError",
]

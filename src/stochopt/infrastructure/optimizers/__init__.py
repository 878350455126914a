"""
Optimizer public API.

Importing this module registers the built-in optimizers (``"sgd"``,
``"adagrad"``, ``"adam"``) into `OptimizerRegistry`.
"""

from ._base import BaseOptimizer
from ._registry import OptimizerRegistry
from ._sgd import SGD
from ._adagrad import AdaGrad
from ._adam import Adam, AdamBuilder, AdamConfig

__all__ = [
    BaseOptimizer.__name__,
    OptimizerRegistry.__name__,
    SGD.__name__,
    AdaGrad.__name__,
    Adam.__name__,
    AdamBuilder.__name__,
    AdamConfig.__name__,
]

"""
Stochastic Gradient Descent (SGD).
"""

from __future__ import annotations

import logging
from typing import Any

from ..parameters import zip_mut_with
from ._base import BaseOptimizer
from ._registry import OptimizerRegistry

logger = logging.getLogger(__name__)


@OptimizerRegistry.register_optimizer("sgd")
class SGD(BaseOptimizer):
    """
    Stochastic Gradient Descent (SGD) optimizer.

    Update rule
    -----------
    For every scalar ``p`` with gradient ``g``:

        p <- p - lr * g

    SGD keeps no auxiliary state; momentum, Nesterov and weight decay are
    intentionally omitted.

    Parameters
    ----------
    parameters : Any
        Initial parameter container.
    learning_rate : float
        Step size.
    """

    def __init__(self, parameters: Any, learning_rate: float) -> None:
        super().__init__(parameters, learning_rate)
        logger.debug("SGD created: lr=%s", self._learning_rate)

    def _update(self, gradients: Any, timestep: int) -> None:
        lr = self._learning_rate
        self._parameters = zip_mut_with(
            self._parameters, gradients, lambda p, g: p - lr * g
        )

"""
AdaGrad optimizer.

AdaGrad scales each coordinate's step by the inverse square root of that
coordinate's accumulated squared gradient. The accumulator only grows, so the
effective per-coordinate learning rate is non-increasing over time.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from ..parameters import zeros, zip2_mut_with, zip_mut_with
from ._base import BaseOptimizer, _check_non_negative
from ._registry import OptimizerRegistry

logger = logging.getLogger(__name__)


@OptimizerRegistry.register_optimizer("adagrad")
class AdaGrad(BaseOptimizer):
    """
    AdaGrad optimizer.

    Update rule
    -----------
    At step ``t`` (starting at 1) with gradient ``g``:

        lr_t      = lr / (1 + (t - 1) * learning_rate_decay)
        state_sum = state_sum + g ** 2
        p         = p - lr_t * g / (sqrt(state_sum) + epsilon)

    Parameters
    ----------
    parameters : Any
        Initial parameter container.
    learning_rate : float
        Base learning rate.
    learning_rate_decay : float, optional
        Decay coefficient of the effective learning rate. Must be >= 0.
        Defaults to 0.0.
    epsilon : float, optional
        Term added to the denominator. Must be >= 0. Defaults to 1e-10.

    Notes
    -----
    ``state_sum`` is never decayed.
    """

    def __init__(
        self,
        parameters: Any,
        learning_rate: float,
        *,
        learning_rate_decay: float = 0.0,
        epsilon: float = 1e-10,
    ) -> None:
        self._learning_rate_decay = _check_non_negative(
            "learning_rate_decay", learning_rate_decay
        )
        self._epsilon = _check_non_negative("epsilon", epsilon)
        super().__init__(parameters, learning_rate)
        self._state_sum = zeros(parameters)
        logger.debug(
            "AdaGrad created: lr=%s learning_rate_decay=%s epsilon=%s",
            self._learning_rate,
            self._learning_rate_decay,
            self._epsilon,
        )

    @property
    def learning_rate_decay(self) -> float:
        self._ensure_live("learning_rate_decay")
        return self._learning_rate_decay

    @property
    def epsilon(self) -> float:
        self._ensure_live("epsilon")
        return self._epsilon

    @property
    def state_sum(self) -> Any:
        """Accumulated squared gradients, same shape as the parameters."""
        self._ensure_live("state_sum")
        return self._state_sum

    def _update(self, gradients: Any, timestep: int) -> None:
        lr_t = self._learning_rate / (1.0 + (timestep - 1) * self._learning_rate_decay)
        eps = self._epsilon

        self._state_sum = zip_mut_with(
            self._state_sum, gradients, lambda s, g: s + g * g
        )
        self._parameters = zip2_mut_with(
            self._parameters,
            self._state_sum,
            gradients,
            lambda p, s, g: p - lr_t * g / (np.sqrt(s) + eps),
        )

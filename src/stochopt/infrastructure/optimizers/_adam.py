"""
Adam optimizer and its configuration helpers.

Adam maintains exponentially decaying averages of past gradients (first
moment) and past squared gradients (second moment), with bias correction for
their zero initialization.

Besides the direct constructor, this module offers two configuration paths:

- `AdamConfig`, a frozen dataclass of hyperparameters with documented defaults.
- `AdamBuilder`, returned by `Adam.builder()`, with chainable setters.

Once an `Adam` instance exists only its learning rate may change.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any

import numpy as np

from ..parameters import zeros, zip2_mut_with, zip_mut_with
from ._base import BaseOptimizer, _check_decay_rate, _check_non_negative
from ._registry import OptimizerRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdamConfig:
    """
    Adam hyperparameters.

    Parameters
    ----------
    learning_rate : float, optional
        Defaults to 1e-3.
    beta1 : float, optional
        Decay rate of the first moment, in [0, 1). Defaults to 0.9.
    beta2 : float, optional
        Decay rate of the second moment, in [0, 1). Defaults to 0.999.
    epsilon : float, optional
        Term added to the denominator, >= 0. Defaults to 1e-8.

    Raises
    ------
    ValueError
        If beta1, beta2 or epsilon is outside its valid range.
    """

    learning_rate: float = 1e-3
    beta1: float = 0.9
    beta2: float = 0.999
    epsilon: float = 1e-8

    def __post_init__(self) -> None:
        object.__setattr__(self, "learning_rate", float(self.learning_rate))
        object.__setattr__(self, "beta1", _check_decay_rate("beta1", self.beta1))
        object.__setattr__(self, "beta2", _check_decay_rate("beta2", self.beta2))
        object.__setattr__(
            self, "epsilon", _check_non_negative("epsilon", self.epsilon)
        )


@OptimizerRegistry.register_optimizer("adam")
class Adam(BaseOptimizer):
    """
    Adam optimizer.

    Update rule
    -----------
    At step ``t`` (starting at 1) with gradient ``g``:

        m0 = beta1 * m0 + (1 - beta1) * g
        v0 = beta2 * v0 + (1 - beta2) * g ** 2

        bias_correction1      = 1 - beta1 ** t
        bias_correction2_sqrt = sqrt(1 - beta2 ** t)
        alpha_t               = lr / bias_correction1

        p = p - alpha_t * m0 / (sqrt(v0) / bias_correction2_sqrt + epsilon)

    Epsilon is added after dividing ``sqrt(v0)`` by the bias-correction term,
    as in PyTorch's reference implementation.

    Parameters
    ----------
    parameters : Any
        Initial parameter container.
    learning_rate : float
        Learning rate.
    beta1, beta2 : float, optional
        Moment decay rates, each in [0, 1). Default to 0.9 and 0.999.
    epsilon : float, optional
        Numerical stability term, >= 0. Defaults to 1e-8.

    Examples
    --------
    >>> opt = Adam(-3.0, 0.1)
    >>> for _ in range(10_000):
    ...     opt.step(2.0 * opt.parameters - 8.0)
    >>> round(float(opt.into_parameters()), 6)
    4.0
    """

    def __init__(
        self,
        parameters: Any,
        learning_rate: float,
        *,
        beta1: float = 0.9,
        beta2: float = 0.999,
        epsilon: float = 1e-8,
    ) -> None:
        config = AdamConfig(
            learning_rate=learning_rate, beta1=beta1, beta2=beta2, epsilon=epsilon
        )
        super().__init__(parameters, config.learning_rate)
        self._beta1 = config.beta1
        self._beta2 = config.beta2
        self._epsilon = config.epsilon
        self._m0 = zeros(parameters)
        self._v0 = zeros(parameters)
        logger.debug(
            "Adam created: lr=%s beta1=%s beta2=%s epsilon=%s",
            self._learning_rate,
            self._beta1,
            self._beta2,
            self._epsilon,
        )

    @classmethod
    def from_config(cls, parameters: Any, config: AdamConfig) -> "Adam":
        """Create an Adam optimizer from an `AdamConfig`."""
        return cls(
            parameters,
            config.learning_rate,
            beta1=config.beta1,
            beta2=config.beta2,
            epsilon=config.epsilon,
        )

    @staticmethod
    def builder(parameters: Any) -> "AdamBuilder":
        """
        Return a builder starting from the `AdamConfig` defaults
        (learning_rate=1e-3, beta1=0.9, beta2=0.999, epsilon=1e-8).

        >>> opt = Adam.builder(0.5).learning_rate(0.1).beta2(0.99).build()
        """
        return AdamBuilder(parameters)

    @property
    def beta1(self) -> float:
        self._ensure_live("beta1")
        return self._beta1

    @property
    def beta2(self) -> float:
        self._ensure_live("beta2")
        return self._beta2

    @property
    def epsilon(self) -> float:
        self._ensure_live("epsilon")
        return self._epsilon

    @property
    def config(self) -> AdamConfig:
        """Current hyperparameters, including the live learning rate."""
        self._ensure_live("config")
        return AdamConfig(
            learning_rate=self._learning_rate,
            beta1=self._beta1,
            beta2=self._beta2,
            epsilon=self._epsilon,
        )

    @property
    def m0(self) -> Any:
        """First moment estimate, same shape as the parameters."""
        self._ensure_live("m0")
        return self._m0

    @property
    def v0(self) -> Any:
        """Second (uncentered) moment estimate, same shape as the parameters."""
        self._ensure_live("v0")
        return self._v0

    def _update(self, gradients: Any, timestep: int) -> None:
        b1, b2, eps = self._beta1, self._beta2, self._epsilon

        self._m0 = zip_mut_with(
            self._m0, gradients, lambda m, g: b1 * m + (1.0 - b1) * g
        )
        self._v0 = zip_mut_with(
            self._v0, gradients, lambda v, g: b2 * v + (1.0 - b2) * g * g
        )

        bias_correction1 = 1.0 - b1**timestep
        bias_correction2_sqrt = math.sqrt(1.0 - b2**timestep)
        alpha_t = self._learning_rate / bias_correction1

        self._parameters = zip2_mut_with(
            self._parameters,
            self._m0,
            self._v0,
            lambda p, m, v: p
            - alpha_t * m / (np.sqrt(v) / bias_correction2_sqrt + eps),
        )


class AdamBuilder:
    """
    Staged configuration for `Adam`.

    Each setter returns the builder so calls can be chained; `build()` yields
    the optimizer. Unset hyperparameters keep their `AdamConfig` defaults.
    Out-of-range values raise ``ValueError`` from the setter.
    """

    def __init__(self, parameters: Any) -> None:
        self._parameters = parameters
        self._config = AdamConfig()

    def learning_rate(self, learning_rate: float) -> "AdamBuilder":
        self._config = replace(self._config, learning_rate=learning_rate)
        return self

    def beta1(self, beta1: float) -> "AdamBuilder":
        self._config = replace(self._config, beta1=beta1)
        return self

    def beta2(self, beta2: float) -> "AdamBuilder":
        self._config = replace(self._config, beta2=beta2)
        return self

    def epsilon(self, epsilon: float) -> "AdamBuilder":
        self._config = replace(self._config, epsilon=epsilon)
        return self

    def build(self) -> Adam:
        return Adam.from_config(self._parameters, self._config)

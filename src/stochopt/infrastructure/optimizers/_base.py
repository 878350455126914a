"""
Shared optimizer machinery for stochopt.

This module provides `BaseOptimizer`, the common implementation of the
`IOptimizer` contract. Concrete algorithms (SGD, AdaGrad, Adam) only
implement `_update()`, the per-step recurrence.

Design notes
------------
- The optimizer owns the parameter container it was constructed with; it is
  stored as given, not copied.
- `step()` passes the incremented timestep to `_update()`, so the first update
  sees ``t == 1``. The counter is only advanced once `_update()` returns.
- Every elementwise update goes through the shape-generic primitives in
  `stochopt.infrastructure.parameters`, which return the updated container.
  Results are always rebound, because scalars and tuples are immutable.
- `into_parameters()` is terminal. Python has no move semantics, so the
  consumed state is tracked and any further use raises
  `OptimizerConsumedError`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ...domain._errors import OptimizerConsumedError
from ..parameters import check_parameters

logger = logging.getLogger(__name__)


def _check_decay_rate(name: str, value: float) -> float:
    value = float(value)
    if not (0.0 <= value < 1.0):
        raise ValueError(f"{name} must be in [0, 1), got {value}")
    return value


def _check_non_negative(name: str, value: float) -> float:
    value = float(value)
    if value < 0.0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


class BaseOptimizer(ABC):
    """
    Base class for optimizers owning a parameter container.

    Parameters
    ----------
    parameters : Any
        Initial parameter container. Any kind supported by
        `stochopt.infrastructure.parameters` (scalars, tuples, lists, dicts,
        NumPy arrays, nestings of these, or `IParameters` objects).
    learning_rate : float
        Learning rate. Not validated.

    Raises
    ------
    UnsupportedParametersError
        If ``parameters`` (or any element inside it) cannot be optimized.

    Notes
    -----
    Gradients passed to `step()` must have the same shape as the parameters.
    This is a precondition and is not checked.
    """

    def __init__(self, parameters: Any, learning_rate: float) -> None:
        check_parameters(parameters)
        self._parameters = parameters
        self._learning_rate = float(learning_rate)
        self._timestep = 0
        self._consumed = False

    def _ensure_live(self, operation: str) -> None:
        if self._consumed:
            raise OptimizerConsumedError(operation)

    @property
    def parameters(self) -> Any:
        """Current parameter container."""
        self._ensure_live("parameters")
        return self._parameters

    def parameters_mut(self) -> Any:
        """
        Return the live parameter container for manual modification.

        Changes made to a mutable container (list, dict, ndarray) are seen by
        the next `step()`. Immutable kinds must be replaced with
        `set_parameters()` instead.
        """
        self._ensure_live("parameters_mut")
        return self._parameters

    def set_parameters(self, parameters: Any) -> None:
        """
        Replace the parameter container.

        Auxiliary state is kept, so ``parameters`` must have the same shape as
        the container used at construction.

        Raises
        ------
        UnsupportedParametersError
            If ``parameters`` cannot be optimized.
        """
        self._ensure_live("set_parameters")
        check_parameters(parameters)
        self._parameters = parameters

    @property
    def learning_rate(self) -> float:
        self._ensure_live("learning_rate")
        return self._learning_rate

    def change_learning_rate(self, learning_rate: float) -> None:
        """Overwrite the learning rate used by subsequent steps."""
        self._ensure_live("change_learning_rate")
        logger.debug(
            "%s learning rate changed: %s -> %s",
            type(self).__name__,
            self._learning_rate,
            learning_rate,
        )
        self._learning_rate = float(learning_rate)

    @property
    def timestep(self) -> int:
        """Number of `step()` calls applied so far."""
        self._ensure_live("timestep")
        return self._timestep

    def step(self, gradients: Any) -> None:
        """
        Apply one optimization step.

        Parameters
        ----------
        gradients : Any
            Gradient container with the same shape as the parameters.

        Raises
        ------
        OptimizerConsumedError
            If the optimizer was consumed.
        """
        self._ensure_live("step")
        timestep = self._timestep + 1
        self._update(gradients, timestep)
        self._timestep = timestep

    @abstractmethod
    def _update(self, gradients: Any, timestep: int) -> None:
        """Apply the algorithm's recurrence for timestep ``timestep``."""
        raise NotImplementedError

    def into_parameters(self) -> Any:
        """
        Consume the optimizer and return the final parameter container.

        Raises
        ------
        OptimizerConsumedError
            If the optimizer was already consumed.
        """
        self._ensure_live("into_parameters")
        self._consumed = True
        logger.debug(
            "%s consumed after %d steps", type(self).__name__, self._timestep
        )
        return self._parameters

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else f"t={self._timestep}"
        return (
            f"{type(self).__name__}(lr={self._learning_rate}, {state}, "
            f"parameters={type(self._parameters).__name__})"
        )

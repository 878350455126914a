"""
Domain-level optimizer contracts for stochopt.

This module defines the `IOptimizer` protocol, which specifies the uniform
interface shared by every optimization algorithm (SGD, AdaGrad, Adam).

Notes
-----
- Domain contracts are backend-agnostic and must not depend on NumPy or
  infrastructure implementations.
- Optimizers own their parameter container and update it according to
  gradients supplied by the caller. Gradient computation (automatic
  differentiation) is outside the scope of this library.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IOptimizer(Protocol):
    """
    Optimizer interface contract.

    An optimizer owns a parameter container plus optional auxiliary state of
    the same shape, and updates them in-place on every `step()`.

    Required members
    ----------------
    - `parameters` gives read access to the current parameters.
    - `parameters_mut()` returns the live container for manual intervention.
    - `set_parameters()` replaces the container (needed for immutable kinds).
    - `step()` applies one optimization update from a gradient container.
    - `into_parameters()` consumes the optimizer and returns the parameters.
    - `change_learning_rate()` overwrites the learning rate.
    - `timestep` counts the steps applied so far.
    """

    @property
    def parameters(self) -> Any:
        """
        Return the current parameter container.

        Notes
        -----
        For mutable containers this is the optimizer's own object; callers
        should treat it as read-only and use `parameters_mut()` to signal
        intent to modify it.
        """
        ...

    def parameters_mut(self) -> Any:
        """
        Return the live parameter container for in-place modification.

        Modifications must preserve the container's shape.
        """
        ...

    def set_parameters(self, parameters: Any) -> None:
        """
        Replace the parameter container.

        The new container must have the same shape as the one used at
        construction, since auxiliary state is kept.
        """
        ...

    def step(self, gradients: Any) -> None:
        """
        Apply one optimization step.

        Parameters
        ----------
        gradients : Any
            Gradient container with the same shape as the parameters.
        """
        ...

    def into_parameters(self) -> Any:
        """
        Consume the optimizer and return the final parameter container.

        No other member may be used afterwards, accessors included.
        """
        ...

    @property
    def learning_rate(self) -> float:
        """Return the current learning rate."""
        ...

    def change_learning_rate(self, learning_rate: float) -> None:
        """
        Overwrite the learning rate used by subsequent steps.

        The value is not validated.
        """
        ...

    @property
    def timestep(self) -> int:
        """
        Return the number of completed `step()` calls.

        The first update is computed with ``timestep == 1``.
        """
        ...

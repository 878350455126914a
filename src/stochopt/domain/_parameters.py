"""
Domain-level parameter capability contract for stochopt.

This module defines `IParameters`, the structural interface a custom container
of scalars must satisfy to be optimized by any stochopt optimizer.

Every optimizer update rule is expressed with exactly two primitives:

- `zeros()` creates an all-zero container of the same shape, used to
  initialize auxiliary optimizer state (momentum, squared-gradient sums).
- `zip2_mut_with(arg1, arg2, f)` walks the receiver and two other containers
  of the same shape in lock-step and replaces every scalar ``x`` with
  ``f(x, a1, a2)``.

Built-in Python and NumPy containers (floats, tuples, lists, dicts and
``numpy.ndarray``) are supported by the infrastructure layer without having to
implement this protocol. It exists for user-defined container types.

Notes
-----
- Domain contracts are backend-agnostic and must not depend on NumPy.
- Containers participating in one optimizer must share the same shape for the
  optimizer's lifetime. Shape is a precondition and is never validated.
- Python scalars are immutable, so `zip2_mut_with` returns the updated
  container. Mutable containers should update in place and return ``self``.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

ElementwiseFn = Callable[[object, object, object], object]
"""Elementwise update ``f(current, arg1, arg2) -> new`` applied per scalar."""


@runtime_checkable
class IParameters(Protocol):
    """
    Capability contract for optimizable containers of scalars.

    Implementers represent an owned collection of scalar variables with a
    fixed shape, for example a model's weight vector wrapped in a custom class.

    Required methods
    ----------------
    - `zeros()` returns a new container with identical shape, filled with 0.
    - `zip2_mut_with(arg1, arg2, f)` applies ``f`` elementwise in lock-step.
    """

    def zeros(self) -> "IParameters":
        """
        Return a new container with the same shape, every scalar set to 0.

        The returned container must not share storage with ``self``.
        """
        ...

    def zip2_mut_with(
        self, arg1: "IParameters", arg2: "IParameters", f: ElementwiseFn
    ) -> "IParameters":
        """
        Update every scalar as ``x <- f(x, a1, a2)``.

        Parameters
        ----------
        arg1, arg2 : IParameters
            Containers with the same shape as ``self``. They are read only.
        f : Callable
            Pure elementwise function. It is built from arithmetic operators
            and NumPy ufuncs, so it may also be applied to whole arrays.

        Returns
        -------
        IParameters
            The updated container (``self`` for mutable implementations).
        """
        ...

"""
Name-based optimizer construction.

Training scripts usually pick their optimizer from a configuration file, so
the algorithm arrives as a string such as ``"adam"`` together with a learning
rate and a handful of algorithm-specific keyword arguments. `OptimizerRegistry`
turns that triple into a ready optimizer:

    opt = OptimizerRegistry.create("adam", [0.0, 1.0], 0.01, beta2=0.99)

SGD, AdaGrad and Adam are added under ``"sgd"``, ``"adagrad"`` and ``"adam"``
as a side effect of importing `stochopt.infrastructure.optimizers`. User
algorithms join the same table by decorating a `BaseOptimizer` subclass:

    @OptimizerRegistry.register_optimizer("lion")
    class Lion(BaseOptimizer):
        def _update(self, gradients, timestep): ...

Notes
-----
- The table is process-wide class state. Replacing an existing entry needs
  ``overwrite=True``.
- Hyperparameter keywords are not interpreted here; the optimizer constructor
  validates them.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Type, TypeVar

from ._base import BaseOptimizer

OptimizerT = TypeVar("OptimizerT", bound=Type[BaseOptimizer])


class OptimizerRegistry:
    """
    Process-wide table from optimizer names to `BaseOptimizer` subclasses.

    Every entry must accept ``(parameters, learning_rate, **hyperparameters)``
    as its constructor signature.
    """

    OPTIMIZERS: ClassVar[Dict[str, Type[BaseOptimizer]]] = {}

    @classmethod
    def register_optimizer(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[OptimizerT], OptimizerT]:
        """
        Build a class decorator that files an optimizer under ``name``.

        The decorated class is returned unchanged.

        Parameters
        ----------
        name : str
            Name later passed to `create` or `get`.
        overwrite : bool, optional
            Replace an existing entry with the same name instead of failing.

        Raises
        ------
        ValueError
            If ``name`` is empty, or (when the decorator is applied) already
            taken and ``overwrite`` is False.
        TypeError
            If the decorated object is not a `BaseOptimizer` subclass.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Optimizer name must be a non-empty string")

        def decorator(optimizer_cls: OptimizerT) -> OptimizerT:
            if not (
                isinstance(optimizer_cls, type)
                and issubclass(optimizer_cls, BaseOptimizer)
            ):
                raise TypeError(
                    f"Only BaseOptimizer subclasses can be registered, "
                    f"got {optimizer_cls!r}"
                )
            if not overwrite and name in cls.OPTIMIZERS:
                raise ValueError(
                    f"{name!r} already names {cls.OPTIMIZERS[name].__name__}; "
                    f"pass overwrite=True to replace it"
                )
            cls.OPTIMIZERS[name] = optimizer_cls
            return optimizer_cls

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Names accepted by `create`, in alphabetical order."""
        return tuple(sorted(cls.OPTIMIZERS))

    @classmethod
    def get(cls, name: str) -> Type[BaseOptimizer]:
        """
        Look up the optimizer class filed under ``name``.

        Raises
        ------
        ValueError
            If nothing is registered under ``name``. The message lists the
            names that are.
        """
        try:
            return cls.OPTIMIZERS[name]
        except KeyError as e:
            known = ", ".join(cls.available()) or "<none>"
            raise ValueError(
                f"Unknown optimizer {name!r}; registered optimizers: {known}"
            ) from e

    @classmethod
    def create(
        cls, name: str, parameters: Any, learning_rate: float, **hyperparameters: Any
    ) -> BaseOptimizer:
        """
        Construct the optimizer registered under ``name``.

        Parameters
        ----------
        name : str
            Registered optimizer name, e.g. ``"adam"``.
        parameters : Any
            Initial parameter container, owned by the new optimizer.
        learning_rate : float
            Initial learning rate.
        **hyperparameters
            Algorithm-specific keywords such as ``learning_rate_decay`` for
            AdaGrad or ``beta1`` for Adam.

        Raises
        ------
        ValueError
            If ``name`` is unknown or a hyperparameter is out of range.
        TypeError
            If a keyword is not accepted by the optimizer.
        UnsupportedParametersError
            If ``parameters`` cannot be optimized.
        """
        return cls.get(name)(parameters, learning_rate, **hyperparameters)

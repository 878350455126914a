"""
Shape-generic elementwise primitives for optimizer parameters.

This module defines the two primitives every optimizer algorithm is built
from, as generic functions dispatched on the container kind:

- `zeros(value)` creates an all-zero container of identical shape.
- `zip2_mut_with(value, arg1, arg2, f)` replaces every scalar ``x`` of
  ``value`` with ``f(x, a1, a2)``, visiting the three containers in lock-step.

and the derived convenience `zip_mut_with(value, other, f)`.

Design
------
- Dispatch uses `functools.singledispatch` on the type of ``value``. Each
  container kind (scalar, tuple, list, dict, ndarray) is registered by a
  sibling module at import time.
- Container kinds recurse into their elements through the same generic
  functions, so arbitrary nesting works without extra code.
- Types with no registration fall back to the `IParameters` protocol and
  call the object's own ``zeros`` / ``zip2_mut_with`` methods.
- `check_parameters` validates a whole container up front, so optimizers
  reject unsupported input at construction rather than mid-step.
- Third-party container types may be registered without subclassing via
  `register_parameter_kind`.

Notes
-----
- The primitives always return the updated container. Mutable kinds update
  in place and return the same object; immutable kinds (scalars, tuples)
  return a new value. Callers must rebind to the return value.
- Shapes are never validated.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, Callable, Optional, TypeVar

from ...domain._errors import UnsupportedParametersError
from ...domain._parameters import ElementwiseFn, IParameters

P = TypeVar("P")


def _kind_name(value: object) -> str:
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


@singledispatch
def zeros(value: Any) -> Any:
    """
    Return a new all-zero container with the same shape as ``value``.

    Parameters
    ----------
    value : Any
        A parameter container of a registered kind, or an object implementing
        `IParameters`.

    Returns
    -------
    Any
        A fresh container. It never shares storage with ``value``.

    Raises
    ------
    UnsupportedParametersError
        If ``value`` has no parameter capability.
    """
    if isinstance(value, IParameters):
        return value.zeros()
    raise UnsupportedParametersError(_kind_name(value))


@singledispatch
def zip2_mut_with(value: Any, arg1: Any, arg2: Any, f: ElementwiseFn) -> Any:
    """
    Apply ``x <- f(x, a1, a2)`` to every scalar of ``value``.

    Parameters
    ----------
    value : Any
        Container being updated.
    arg1, arg2 : Any
        Read-only containers with the same shape as ``value``.
    f : Callable
        Pure elementwise function. It must only use arithmetic operators and
        NumPy ufuncs, since NumPy arrays apply it to whole arrays at once.

    Returns
    -------
    Any
        The updated container (the same object for mutable kinds).

    Raises
    ------
    UnsupportedParametersError
        If ``value`` has no parameter capability.
    """
    if isinstance(value, IParameters):
        return value.zip2_mut_with(arg1, arg2, f)
    raise UnsupportedParametersError(_kind_name(value))


def zip_mut_with(value: P, other: P, f: Callable[[Any, Any], Any]) -> P:
    """
    Apply ``x <- f(x, o)`` to every scalar of ``value``.

    Implemented in terms of `zip2_mut_with`, passing ``other`` as both
    auxiliary arguments and ignoring the second one.
    """
    return zip2_mut_with(value, other, other, lambda x, a, _: f(x, a))


@singledispatch
def check_parameters(value: Any) -> None:
    """
    Validate that every part of ``value`` can be optimized.

    Container kinds recurse into their elements, so an unsupported scalar
    nested inside a list is reported as well.

    Raises
    ------
    UnsupportedParametersError
        If ``value`` or one of its elements has no parameter capability.
    """
    if not isinstance(value, IParameters):
        raise UnsupportedParametersError(_kind_name(value))


def _accept(value: Any) -> None:
    return None


def register_parameter_kind(
    cls: type,
    *,
    zeros_fn: Callable[[Any], Any],
    zip2_mut_with_fn: Callable[[Any, Any, Any, ElementwiseFn], Any],
    check_fn: Optional[Callable[[Any], None]] = None,
) -> None:
    """
    Register parameter capability for a container type.

    Parameters
    ----------
    cls : type
        The container type (subclasses are covered as well).
    zeros_fn : Callable
        ``zeros_fn(value)`` returning a fresh all-zero container.
    zip2_mut_with_fn : Callable
        ``zip2_mut_with_fn(value, arg1, arg2, f)`` returning the updated
        container. Element recursion should go through the module-level
        `zip2_mut_with` so nested kinds keep working.
    check_fn : Callable, optional
        ``check_fn(value)`` raising `UnsupportedParametersError` for values
        of ``cls`` that cannot be optimized. Every instance is accepted when
        omitted.
    """
    zeros.register(cls, zeros_fn)
    zip2_mut_with.register(cls, zip2_mut_with_fn)
    check_parameters.register(cls, check_fn if check_fn is not None else _accept)


def is_parameter_kind(value: object) -> bool:
    """Return True if `value` and every element inside it can be optimized."""
    try:
        check_parameters(value)
    except UnsupportedParametersError:
        return False
    return True

"""
Container parameter kinds: tuples, lists and dicts.

Each container kind recurses elementwise through the generic primitives, so
any nesting of these kinds (and of scalars / NumPy arrays inside them) is
optimizable.

Kinds
-----
- ``tuple``: fixed-length array. Tuples are immutable, so a new tuple of the
  same length (and the same namedtuple type, if any) is returned.
- ``list``: variable-length sequence, updated in place by position.
- ``dict``: named parameter groups, updated in place by key. Iteration follows
  the receiver's keys; ``arg1`` / ``arg2`` are indexed by the same keys.

Notes
-----
- Lengths and keys are not checked. A shorter auxiliary argument raises
  ``IndexError`` / ``KeyError`` part-way through the update, leaving the
  receiver partially updated.
"""

from __future__ import annotations

from typing import Any, Iterable

from ._dispatch import (
    check_parameters,
    register_parameter_kind,
    zeros,
    zip2_mut_with,
)


def _rebuild_tuple(template: tuple, items: Iterable[Any]) -> tuple:
    # namedtuples keep their type
    make = getattr(template, "_make", None)
    if make is not None:
        return make(items)
    return tuple(items)


def _tuple_zeros(value: tuple) -> tuple:
    return _rebuild_tuple(value, (zeros(x) for x in value))


def _tuple_zip2_mut_with(value: tuple, arg1, arg2, f) -> tuple:
    return _rebuild_tuple(
        value,
        (zip2_mut_with(value[i], arg1[i], arg2[i], f) for i in range(len(value))),
    )


def _check_elements(value: Iterable[Any]) -> None:
    for x in value:
        check_parameters(x)


def _check_dict(value: dict) -> None:
    _check_elements(value.values())


def _list_zeros(value: list) -> list:
    return [zeros(x) for x in value]


def _list_zip2_mut_with(value: list, arg1, arg2, f) -> list:
    for i in range(len(value)):
        value[i] = zip2_mut_with(value[i], arg1[i], arg2[i], f)
    return value


def _dict_zeros(value: dict) -> dict:
    return {key: zeros(x) for key, x in value.items()}


def _dict_zip2_mut_with(value: dict, arg1, arg2, f) -> dict:
    for key in value:
        value[key] = zip2_mut_with(value[key], arg1[key], arg2[key], f)
    return value


register_parameter_kind(
    tuple,
    zeros_fn=_tuple_zeros,
    zip2_mut_with_fn=_tuple_zip2_mut_with,
    check_fn=_check_elements,
)
register_parameter_kind(
    list,
    zeros_fn=_list_zeros,
    zip2_mut_with_fn=_list_zip2_mut_with,
    check_fn=_check_elements,
)
register_parameter_kind(
    dict,
    zeros_fn=_dict_zeros,
    zip2_mut_with_fn=_dict_zip2_mut_with,
    check_fn=_check_dict,
)

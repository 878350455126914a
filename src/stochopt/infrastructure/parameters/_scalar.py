"""
Scalar parameter kind.

Real scalars are the base case of the elementwise recursion: the update
function is applied directly to the single value.

Registered for `numbers.Real`, which covers Python ``float`` and ``int`` as
well as NumPy floating scalars (``np.float32``, ``np.float64``). Floating
types are preserved by both primitives, so a Python ``float`` stays a
``float`` and single-precision parameters stay single precision. Integer
scalars are promoted to ``float`` on their first update.
"""

from __future__ import annotations

import numbers

from ._dispatch import register_parameter_kind


def _scalar_zeros(value: numbers.Real) -> numbers.Real:
    return type(value)(0)


def _scalar_zip2_mut_with(value, arg1, arg2, f):
    result = f(value, arg1, arg2)
    if isinstance(value, numbers.Integral):
        return float(result)
    return type(value)(result)


register_parameter_kind(
    numbers.Real,
    zeros_fn=_scalar_zeros,
    zip2_mut_with_fn=_scalar_zip2_mut_with,
)

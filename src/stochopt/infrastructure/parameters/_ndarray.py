"""
Dense n-dimensional array parameter kind (NumPy).

NumPy arrays are updated through NumPy's own vectorized arithmetic instead of a
Python-level loop: the elementwise function is evaluated once on the whole
arrays and the result is written back into the receiver's storage.

Because IEEE-754 addition, multiplication, division and square root are
correctly rounded, the vectorized result is bit-identical to applying the same
function scalar by scalar.

Notes
-----
- The receiver must have a floating dtype; integer arrays cannot hold the
  updated values and are rejected by every primitive.
- The shape of the result must match the receiver. NumPy broadcasting may
  silently accept some mismatched auxiliary shapes; this is not checked.
"""

from __future__ import annotations

import numpy as np

from ...domain._errors import UnsupportedParametersError
from ._dispatch import register_parameter_kind


def _check_ndarray(value: np.ndarray) -> None:
    if not np.issubdtype(value.dtype, np.inexact):
        raise UnsupportedParametersError(f"numpy.ndarray[{value.dtype}]")


def _ndarray_zeros(value: np.ndarray) -> np.ndarray:
    _check_ndarray(value)
    return np.zeros_like(value)


def _ndarray_zip2_mut_with(value: np.ndarray, arg1, arg2, f) -> np.ndarray:
    _check_ndarray(value)
    value[...] = f(value, arg1, arg2)
    return value


register_parameter_kind(
    np.ndarray,
    zeros_fn=_ndarray_zeros,
    zip2_mut_with_fn=_ndarray_zip2_mut_with,
    check_fn=_check_ndarray,
)

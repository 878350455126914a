"""
Parameter capability public API.

This module exposes the shape-generic elementwise primitives used by every
optimizer and registers the built-in container kinds (scalars, tuples, lists,
dicts and NumPy arrays) via import side effects.

Exports
-------
- zeros, zip2_mut_with, zip_mut_with:
    Generic elementwise primitives dispatched on the container kind.
- register_parameter_kind:
    Adds parameter capability to a third-party container type.
- check_parameters, is_parameter_kind:
    Validate a whole container, raising or returning a bool.
"""

from ._dispatch import (
    check_parameters,
    is_parameter_kind,
    register_parameter_kind,
    zeros,
    zip2_mut_with,
    zip_mut_with,
)
from . import _scalar, _containers, _ndarray  # noqa: F401  (registrations)

__all__ = [
    "check_parameters",
    "zeros",
    "zip2_mut_with",
    "zip_mut_with",
    "register_parameter_kind",
    "is_parameter_kind",
]

"""
Spla Mathematics: Elementwise arithmetic as functions.

Function forms of the Tensor operators, plus ``exp``. Scalars are
broadcast over the tensor operand's shape.
"""

import numpy as np

from spla import entry


def add(lhs, rhs):
    """Elementwise ``lhs + rhs``."""
    return lhs + rhs


def subtract(lhs, rhs):
    """Elementwise ``lhs - rhs``."""
    return lhs - rhs


def multiply(lhs, rhs):
    """Elementwise ``lhs * rhs``. Multiplying by scalar zero clears all entries."""
    return lhs * rhs


def power(lhs, rhs):
    """Elementwise ``lhs ** rhs``. Neither operand is modified."""
    return lhs ** rhs


def negative(tensor):
    return -tensor


def absolute(tensor):
    """Elementwise absolute value."""
    return abs(tensor)


def exp(tensor):
    """
    Elementwise exponential.

    Integer tensors give float64 tensors, the type ``numpy.exp`` returns.
    """
    entry.require_arithmetic("exp", tensor.dtype)
    return tensor.apply(np.exp)

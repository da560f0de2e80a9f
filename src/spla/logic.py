"""
Spla Logic: Elementwise comparisons.

Each function returns a boolean tensor of the operands' shape, which
``spla.all`` and ``spla.any`` reduce. ``Tensor.__eq__`` stays structural,
so elementwise equality is spelled ``equal(a, b)``.
"""

import numpy as np

from spla.tensor import Tensor


def _symmetric(op, lhs, rhs):
    if not isinstance(lhs, Tensor):
        lhs, rhs = rhs, lhs
    return lhs.combine(op, rhs)


def equal(lhs, rhs):
    """Elementwise ``lhs == rhs``."""
    return _symmetric(np.equal, lhs, rhs)


def not_equal(lhs, rhs):
    """Elementwise ``lhs != rhs``."""
    return _symmetric(np.not_equal, lhs, rhs)


def less(lhs, rhs):
    return lhs < rhs


def less_equal(lhs, rhs):
    return lhs <= rhs


def greater(lhs, rhs):
    return lhs > rhs


def greater_equal(lhs, rhs):
    return lhs >= rhs

"""
Spla Reductions: sum, all, any, dot and norm without densifying.

A reduction first accounts for every unstored index at once by combining
the default value with itself ``elements_in - sparsity`` times, using
repeated doubling so the cost is logarithmic in the count. Then each stored
entry is folded in. The operation must be associative and commutative.
"""

import numpy as np

from spla import entry


def _repeat(op, value, times):
    """Combine ``value`` with itself ``times`` times (times >= 1)."""
    result = None
    while times:
        if times & 1:
            result = value if result is None else op(result, value)
        times >>= 1
        if times:
            value = op(value, value)
    return result


def reduce(tensor, op, absorbing=None):
    """
    Fold every value of ``tensor`` (stored or not) with ``op``.

    Parameters
    ----------
    tensor : Tensor
        Tensor to reduce.
    op : callable
        Associative, commutative binary operation on entry values.
    absorbing : scalar, optional
        Value that ``op`` can never leave once reached (False for logical
        and, True for logical or). When given, the fold stops as soon as
        the accumulator equals it.

    Returns
    -------
    scalar
    """
    result = None
    unstored = tensor.elements_in() - tensor.sparsity()
    if unstored:
        result = _repeat(op, tensor.default_value, unstored)
    for _, value in tensor.items():
        if absorbing is not None and result is not None and result == absorbing:
            break
        result = value if result is None else op(result, value)
    return result


def sum(tensor):
    """Sum of all values."""
    entry.require_arithmetic("sum", tensor.dtype)
    return reduce(tensor, np.add)


def all(tensor):
    """True if every value is truthy. Stops at the first falsy value."""
    return bool(reduce(tensor, np.logical_and, absorbing=False))


def any(tensor):
    """True if some value is truthy. Stops at the first truthy value."""
    return bool(reduce(tensor, np.logical_or, absorbing=True))


def dot(lhs, rhs):
    """
    Inner product, the sum of the elementwise product.

    Raises
    ------
    ShapeMismatch
        If the shapes differ.
    """
    return sum(lhs * rhs)


def norm(tensor, ord=2):
    """
    The ``ord``-norm: ``sum(abs(tensor) ** ord) ** (1 / ord)``.

    ``ord`` must be positive; other values are not checked and give
    whatever the arithmetic gives.

    Returns
    -------
    float
    """
    total = sum(abs(tensor) ** ord)
    return float(total) ** (1.0 / ord)

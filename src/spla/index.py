"""
Spla Index Space: Shapes and index validation.

An index is a tuple of non-negative ints, one per dimension. Rank-1
containers also accept a bare int, and rank-0 (scalar) containers are
indexed by the empty tuple.
"""

import itertools
import math
import operator

import numpy as np

from spla.errors import IndexOutOfRange


def normalize_shape(shape):
    """Convert an int or iterable of ints into a shape tuple."""
    if isinstance(shape, tuple):
        dims = shape
    else:
        try:
            dims = (operator.index(shape),)
        except TypeError:
            dims = tuple(shape)
    try:
        dims = tuple(operator.index(d) for d in dims)
    except TypeError:
        raise TypeError(f"Shape must contain integers, got {shape!r}") from None
    for d in dims:
        if d <= 0:
            raise ValueError(f"Shape extents must be positive, got {dims}")
    return dims


class IndexSpace:
    """
    The set of valid indices for a shape.

    Parameters
    ----------
    shape : int or iterable of int
        Positive extent of each dimension. ``()`` is a scalar.

    Examples
    --------
    >>> space = IndexSpace((2, 3))
    >>> space.size
    6
    >>> space.normalize((1, 2))
    (1, 2)
    """

    def __init__(self, shape):
        self.shape = normalize_shape(shape)
        self.ndim = len(self.shape)
        self.size = math.prod(self.shape)

    def normalize(self, index):
        """
        Validate an index and return it as a tuple.

        Raises
        ------
        IndexOutOfRange
            Wrong number of components, or a component outside its extent.
        TypeError
            A component is not an integer.
        """
        if isinstance(index, tuple):
            key = index
        else:
            key = (index,)
        message = (f"Indices must be integers or tuples of integers, "
                   f"got {index!r}")
        # bool passes operator.index but is not a position.
        if any(isinstance(i, (bool, np.bool_)) for i in key):
            raise TypeError(message)
        try:
            key = tuple(operator.index(i) for i in key)
        except TypeError:
            raise TypeError(message) from None
        if len(key) != self.ndim:
            raise IndexOutOfRange(index, self.shape)
        for i, extent in zip(key, self.shape):
            if not 0 <= i < extent:
                raise IndexOutOfRange(index, self.shape)
        return key

    def __contains__(self, index):
        try:
            self.normalize(index)
        except (IndexOutOfRange, TypeError):
            return False
        return True

    def __iter__(self):
        """Every valid index in row-major order. Densifying use only."""
        return itertools.product(*(range(d) for d in self.shape))

    def __eq__(self, other):
        if not isinstance(other, IndexSpace):
            return NotImplemented
        return self.shape == other.shape

    def __hash__(self):
        return hash(self.shape)

    def __repr__(self):
        return f"IndexSpace(shape={self.shape})"

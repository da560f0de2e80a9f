"""
Spla Creation: Factory functions for tensors.

Each factory fixes shape, entry type and default value at once.
"""

import numpy as np

from spla import entry
from spla.tensor import Tensor

DEFAULT_DTYPE = np.float64


def full(shape, fill_value, dtype=None):
    """
    Tensor whose every index holds ``fill_value``, with no stored entries.

    Parameters
    ----------
    shape : int or tuple of int
        Positive extents; ``()`` for a scalar.
    fill_value : scalar
        The default value.
    dtype : numpy dtype-like, optional
        Entry type. Inferred from ``fill_value`` if omitted.
    """
    return Tensor(shape, fill_value, dtype=dtype)


def zeros(shape, dtype=DEFAULT_DTYPE):
    """Tensor defaulting to the additive identity."""
    dtype = entry.entry_dtype(dtype)
    return Tensor(shape, entry.zero(dtype), dtype=dtype)


def ones(shape, dtype=DEFAULT_DTYPE):
    """Tensor defaulting to the multiplicative identity."""
    dtype = entry.entry_dtype(dtype)
    return Tensor(shape, entry.one(dtype), dtype=dtype)

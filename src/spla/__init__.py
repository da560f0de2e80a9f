"""
SPLA - Sparse Arrays with a Default Value
=========================================

Vectors and tensors stored as explicit entries plus one default value for
every other index. Arithmetic, comparisons and reductions work on the
explicit entries and the defaults only, so a non-zero default costs nothing.

Quick start:
    import spla

    v = spla.zeros(10, dtype=int)
    v[1] = -7
    v[3] = 4
    v *= 2

    w = spla.zeros(10, dtype=int)
    w[3] = 2
    w[5] = 1

    v += w
    spla.dot(v, w)     # 21
    spla.norm(v, 1)    # 25.0
    print(v)           # {1: -14, 3: 10, 5: 1}

License: MIT
"""

import logging

__version__ = "0.1.0"

from spla.errors import (
    SplaError, ShapeMismatch, IndexOutOfRange, ConversionError,
)
from spla.index import IndexSpace
from spla.tensor import Tensor
from spla.creation import full, zeros, ones
from spla.mathematics import (
    add, subtract, multiply, power, negative, absolute, exp,
)
from spla.logic import (
    equal, not_equal, less, less_equal, greater, greater_equal,
)
from spla.reduction import reduce, sum, all, any, dot, norm
from spla.conversion import convert
from spla.detector import describe
from spla.interop import to_dense, from_dense, to_scipy, from_scipy
from spla import testing

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Tensor", "IndexSpace",
    "full", "zeros", "ones",
    "add", "subtract", "multiply", "power", "negative", "absolute", "exp",
    "equal", "not_equal", "less", "less_equal", "greater", "greater_equal",
    "reduce", "sum", "all", "any", "dot", "norm",
    "convert", "describe",
    "to_dense", "from_dense", "to_scipy", "from_scipy",
    "SplaError", "ShapeMismatch", "IndexOutOfRange", "ConversionError",
    "testing",
]

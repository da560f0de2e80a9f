"""
Spla Tensor: Sparse array with an implicit default value.

A Tensor stores a dict of explicit entries plus one default value that
covers every other index in its shape. Entries equal to the default are
never stored, so ``sparsity()`` always counts the indices that actually
differ from it.

Usage:
    import spla

    v = spla.zeros(10, dtype=int)
    v[1] = -7
    v[3] = 4
    v *= 2
    v.sparsity()      # 2
    spla.norm(v, 1)   # 22.0
"""

import logging
import numbers

import numpy as np

from spla import conversion, elementwise, entry, reduction
from spla.errors import ShapeMismatch
from spla.index import IndexSpace

logger = logging.getLogger(__name__)


class Tensor:
    """
    Sparse tensor over a fixed shape.

    Parameters
    ----------
    shape : int or tuple of int
        Positive extents. ``()`` is a scalar, an int or 1-tuple a vector.
    default_value : scalar
        Value of every index without an explicit entry.
    dtype : numpy dtype-like, optional
        Entry type. Inferred from ``default_value`` if omitted.

    Examples
    --------
    >>> t = Tensor((2, 2), 1.0)
    >>> t[0, 0] = 3.0
    >>> t[1, 1] = 1.0
    >>> t.sparsity()
    1
    """

    # Keep numpy scalars on the left from swallowing the operator.
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, shape, default_value=0, dtype=None):
        self._space = IndexSpace(shape)
        self._dtype = entry.entry_dtype(dtype, default_value)
        self._default = entry.cast(default_value, self._dtype)
        self._entries = {}

    @classmethod
    def _from_parts(cls, space, dtype, default, entries):
        obj = cls.__new__(cls)
        obj._space = space
        obj._dtype = dtype
        obj._default = default
        obj._entries = entries
        return obj

    @property
    def shape(self):
        return self._space.shape

    @property
    def ndim(self):
        return self._space.ndim

    @property
    def size(self):
        return self._space.size

    @property
    def dtype(self):
        return self._dtype

    @property
    def default_value(self):
        return self._default

    # ------------------------------------------------------------
    # Store
    # ------------------------------------------------------------

    def get(self, index):
        """Value at ``index``: the stored entry, or the default."""
        key = self._space.normalize(index)
        return self._entries.get(key, self._default)

    def set(self, index, value):
        """
        Write ``value`` at ``index``.

        Writing the default value removes the entry, so repeated writes
        never grow the store.

        Raises
        ------
        IndexOutOfRange
            If ``index`` is not inside the shape. Nothing is written.
        """
        key = self._space.normalize(index)
        value = entry.cast(value, self._dtype)
        if value == self._default:
            self._entries.pop(key, None)
        else:
            self._entries[key] = value

    def __getitem__(self, index):
        return self.get(index)

    def __setitem__(self, index, value):
        self.set(index, value)

    def __delitem__(self, index):
        self.set(index, self._default)

    def sparsity(self):
        """Number of explicitly stored entries."""
        return len(self._entries)

    def elements_in(self):
        """Total number of indices in the shape."""
        return self._space.size

    def items(self):
        """Iterate over ``(index, value)`` pairs of the stored entries."""
        return iter(self._entries.items())

    def copy(self):
        """Independent copy; no storage is shared."""
        return Tensor._from_parts(self._space, self._dtype, self._default,
                                  dict(self._entries))

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def astype(self, dtype):
        """Copy of this tensor with every value cast to ``dtype``."""
        return conversion.convert(self, dtype)

    def todense(self):
        """Materialize as a numpy array. Enumerates the whole shape."""
        out = np.full(self.shape, self._default, dtype=self._dtype)
        for key, value in self._entries.items():
            out[key] = value
        return out

    # ------------------------------------------------------------
    # Elementwise operations
    # ------------------------------------------------------------

    def _coerce(self, other):
        """Return ``other`` as a tensor of this shape, or None."""
        if isinstance(other, Tensor):
            return other
        if isinstance(other, (numbers.Number, np.generic)):
            dtype = np.result_type(self._dtype, other)
            return Tensor(self.shape, other, dtype=dtype)
        return None

    def _check_shape(self, operation, other):
        if self.shape != other.shape:
            raise ShapeMismatch(operation, self.shape, other.shape)

    def apply(self, op):
        """
        New tensor with the scalar function ``op`` applied to every value.

        The result entry type is the type ``op`` returns for the default.
        """
        dtype = np.asarray(op(self._default)).dtype
        default, entries = elementwise.map_entries(
            op, self._default, self._entries, dtype.type)
        return Tensor._from_parts(self._space, dtype, default, entries)

    def combine(self, op, other):
        """
        New tensor holding ``op(self[i], other[i])`` for every index.

        ``other`` may be a tensor of the same shape or a scalar.
        """
        result = self._binary("Elementwise operation", op, other,
                              arithmetic=False)
        if result is NotImplemented:
            raise TypeError(f"Cannot combine Tensor with "
                            f"{type(other).__name__}")
        return result

    def _binary(self, operation, op, other, reflected=False, arithmetic=True):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        lhs = self
        if reflected:
            lhs, rhs = rhs, lhs
        lhs._check_shape(operation, rhs)
        if arithmetic:
            entry.require_arithmetic(operation, lhs._dtype, rhs._dtype)

        default = op(lhs._default, rhs._default)
        dtype = np.asarray(default).dtype
        if op is np.multiply and _is_zero_scalar(other):
            # Every product collapses onto the new default.
            return Tensor._from_parts(self._space, dtype,
                                      dtype.type(default), {})
        default, entries = elementwise.merge(
            op, lhs._default, lhs._entries, rhs._default, rhs._entries,
            dtype.type)
        return Tensor._from_parts(self._space, dtype, default, entries)

    def _inplace(self, operation, op, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self._check_shape(operation, rhs)
        entry.require_arithmetic(operation, self._dtype, rhs._dtype)
        result_type = np.asarray(op(self._default, rhs._default)).dtype
        if not np.can_cast(result_type, self._dtype, casting="same_kind"):
            raise TypeError(f"{operation} result of type {result_type} "
                            f"cannot be stored in a {self._dtype} tensor")

        if op is np.multiply and _is_zero_scalar(other):
            logger.debug("scalar multiply by zero clears %d entries",
                         len(self._entries))
            self._entries.clear()
            self._default = self._dtype.type(op(self._default, rhs._default))
            return self
        self._default = elementwise.merge_inplace(
            op, self._entries, self._default, rhs._entries, rhs._default,
            self._dtype.type)
        return self

    def __add__(self, other):
        return self._binary("Addition", np.add, other)

    def __radd__(self, other):
        return self._binary("Addition", np.add, other, reflected=True)

    def __iadd__(self, other):
        return self._inplace("Addition", np.add, other)

    def __sub__(self, other):
        return self._binary("Subtraction", np.subtract, other)

    def __rsub__(self, other):
        return self._binary("Subtraction", np.subtract, other, reflected=True)

    def __isub__(self, other):
        return self._inplace("Subtraction", np.subtract, other)

    def __mul__(self, other):
        return self._binary("Multiplication", np.multiply, other)

    def __rmul__(self, other):
        return self._binary("Multiplication", np.multiply, other,
                            reflected=True)

    def __imul__(self, other):
        return self._inplace("Multiplication", np.multiply, other)

    def __pow__(self, other):
        return self._binary("Power", np.power, other)

    def __rpow__(self, other):
        return self._binary("Power", np.power, other, reflected=True)

    def __ipow__(self, other):
        return self._inplace("Power", np.power, other)

    def __neg__(self):
        entry.require_arithmetic("Negation", self._dtype)
        return self.apply(np.negative)

    def __pos__(self):
        return self.copy()

    def __abs__(self):
        entry.require_arithmetic("Absolute value", self._dtype)
        return self.apply(np.absolute)

    def __lt__(self, other):
        return self._binary("Comparison", np.less, other, arithmetic=False)

    def __le__(self, other):
        return self._binary("Comparison", np.less_equal, other,
                            arithmetic=False)

    def __gt__(self, other):
        return self._binary("Comparison", np.greater, other, arithmetic=False)

    def __ge__(self, other):
        return self._binary("Comparison", np.greater_equal, other,
                            arithmetic=False)

    # ------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------

    def sum(self):
        return reduction.sum(self)

    def all(self):
        return reduction.all(self)

    def any(self):
        return reduction.any(self)

    def dot(self, other):
        return reduction.dot(self, other)

    def norm(self, ord=2):
        return reduction.norm(self, ord)

    # ------------------------------------------------------------
    # Equality and display
    # ------------------------------------------------------------

    def __eq__(self, other):
        """Structural equality: shape, default and stored entries."""
        if not isinstance(other, Tensor):
            return NotImplemented
        return (self.shape == other.shape
                and bool(self._default == other._default)
                and self._entries == other._entries)

    def __str__(self):
        if self.ndim == 1:
            fmt = lambda key: str(key[0])  # noqa: E731
        else:
            fmt = str
        body = ", ".join(f"{fmt(key)}: {value}"
                         for key, value in sorted(self._entries.items()))
        return "{" + body + "}"

    def __repr__(self):
        return (f"Tensor(shape={self.shape}, dtype={self._dtype}, "
                f"default={self._default}, {self})")


def _is_zero_scalar(value):
    return (isinstance(value, (numbers.Number, np.generic))
            and entry.is_zero(value))

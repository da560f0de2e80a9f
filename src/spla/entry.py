"""
Spla Entry Types: The capability contract for container entries.

An entry type is a numpy scalar type. Arithmetic containers need add,
subtract, multiply, absolute value, exp and power, which numpy provides for
the integer, unsigned, floating and complex kinds. Boolean containers are
logical: they come out of comparisons and feed all/any, but take no part
in arithmetic.
"""

import numpy as np

from spla.errors import ConversionError

ARITHMETIC_KINDS = "iufc"
LOGICAL_KINDS = "b"


def entry_dtype(dtype=None, value=None):
    """
    Resolve the entry type of a container.

    Parameters
    ----------
    dtype : numpy dtype-like, optional
        Requested entry type. If None, inferred from ``value``.
    value : scalar, optional
        Value used for inference (normally the default value).

    Returns
    -------
    numpy.dtype
    """
    if dtype is None:
        dtype = np.asarray(value).dtype
    dtype = np.dtype(dtype)
    if dtype.kind not in ARITHMETIC_KINDS + LOGICAL_KINDS:
        raise TypeError(f"Unsupported entry type {dtype}: expected a "
                        f"numeric or boolean dtype")
    return dtype


def is_arithmetic(dtype):
    """True if ``dtype`` satisfies the full arithmetic contract."""
    return np.dtype(dtype).kind in ARITHMETIC_KINDS


def require_arithmetic(operation, *dtypes):
    """Raise TypeError unless every dtype is arithmetic."""
    for dtype in dtypes:
        if not is_arithmetic(dtype):
            raise TypeError(f"{operation} is not defined for entry type "
                            f"{np.dtype(dtype)}")


def cast(value, dtype):
    """
    Cast a scalar to the entry type ``dtype``.

    Follows numpy's unsafe casting (float to int truncates). Casts numpy
    refuses outright, such as NaN to an integer type, raise ConversionError,
    as do complex values with a nonzero imaginary part cast to a real type.
    """
    if dtype.kind != "c" and isinstance(value, (complex, np.complexfloating)):
        if value.imag != 0:
            raise ConversionError(
                f"Cannot cast {value!r} to real entry type {dtype}")
        value = value.real
    if (dtype.kind in "iu" and isinstance(value, (float, np.floating))
            and not np.isfinite(value)):
        raise ConversionError(
            f"Cannot cast {value!r} to integer entry type {dtype}")
    try:
        return dtype.type(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ConversionError(
            f"Cannot cast {value!r} to entry type {dtype}: {e}") from e


def zero(dtype):
    """Additive identity of ``dtype``."""
    return np.dtype(dtype).type(0)


def one(dtype):
    """Multiplicative identity of ``dtype``."""
    return np.dtype(dtype).type(1)


def is_zero(value):
    """True if ``value`` equals the additive identity of its own type."""
    return bool(value == 0)

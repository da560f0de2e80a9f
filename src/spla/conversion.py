"""
Spla Conversion: Cast a tensor to another entry type.

Conversion goes through the public ``items``/``set`` surface of the source
and target, so the target re-applies sparsity on its own: a narrowing cast
that lands an entry on the new default drops that entry.
"""

import logging

from spla import entry

logger = logging.getLogger(__name__)


def convert(source, dtype):
    """
    Copy ``source`` with the default and every entry cast to ``dtype``.

    Parameters
    ----------
    source : Tensor
        Tensor to convert. Not modified.
    dtype : numpy dtype-like
        Target entry type.

    Returns
    -------
    Tensor
        New tensor of the same shape; no storage is shared.

    Raises
    ------
    ConversionError
        If a value cannot be cast (e.g. NaN to an integer type).
    """
    dtype = entry.entry_dtype(dtype)
    default = entry.cast(source.default_value, dtype)
    result = type(source)(source.shape, default, dtype=dtype)
    for index, value in source.items():
        result.set(index, entry.cast(value, dtype))

    logger.debug("convert %s -> %s: %d entries -> %d", source.dtype, dtype,
                 source.sparsity(), result.sparsity())
    return result

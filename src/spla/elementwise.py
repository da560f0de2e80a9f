"""
Spla Elementwise Engine: Merge sparse entry maps under an operation.

A container is a default value plus a dict of explicit entries. Combining
two containers only touches the keys present in either dict; every
unstored index is covered by combining the defaults. The full index space
is never enumerated.

All functions work on raw ``(default, entries)`` pairs so they can be
shared by every container type. After each computed value is cast, an
entry equal to the result default is dropped instead of stored.
"""

import logging

logger = logging.getLogger(__name__)


def _store(entries, key, value, default):
    """Insert ``value`` at ``key`` unless it equals ``default``."""
    if value == default:
        entries.pop(key, None)
    else:
        entries[key] = value


def map_entries(op, default, entries, cast):
    """
    Unary merge.

    Parameters
    ----------
    op : callable
        Scalar operation, e.g. ``numpy.exp``.
    default : scalar
        Default value of the operand.
    entries : dict
        Explicit entries of the operand. Not modified.
    cast : callable
        Converts a computed value to the result entry type.

    Returns
    -------
    tuple
        ``(result_default, result_entries)``.
    """
    result_default = cast(op(default))
    result = {}
    for key, value in entries.items():
        _store(result, key, cast(op(value)), result_default)
    return result_default, result


def merge(op, lhs_default, lhs_entries, rhs_default, rhs_entries, cast):
    """
    Binary merge of two entry maps over the same index space.

    Keys only in ``lhs`` are combined with the rhs default, keys only in
    ``rhs`` with the lhs default, and shared keys with each other. Neither
    input is modified.

    Returns
    -------
    tuple
        ``(result_default, result_entries)``.
    """
    result_default = cast(op(lhs_default, rhs_default))
    result = {}
    for key, lhs_val in lhs_entries.items():
        rhs_val = rhs_entries.get(key, rhs_default)
        _store(result, key, cast(op(lhs_val, rhs_val)), result_default)
    for key, rhs_val in rhs_entries.items():
        if key not in lhs_entries:
            _store(result, key, cast(op(lhs_default, rhs_val)), result_default)

    logger.debug("merge %s: %d + %d entries -> %d",
                 getattr(op, "__name__", op), len(lhs_entries),
                 len(rhs_entries), len(result))
    return result_default, result


def merge_inplace(op, entries, default, rhs_entries, rhs_default, cast):
    """
    Binary merge that mutates ``entries``.

    Keys only in ``entries`` get ``op(value, rhs_default)``; keys of
    ``rhs_entries`` are seeded at ``default`` when absent and combined.
    Every new value is computed before ``entries`` is touched, so an
    exception from ``op`` or ``cast`` leaves it unchanged. The caller must
    have validated the operands already.

    Returns
    -------
    scalar
        The new default value, which the caller must store.
    """
    new_default = cast(op(default, rhs_default))
    updates = {}
    for key, lhs_val in entries.items():
        if key not in rhs_entries:
            updates[key] = cast(op(lhs_val, rhs_default))
    for key, rhs_val in rhs_entries.items():
        updates[key] = cast(op(entries.get(key, default), rhs_val))

    for key, value in updates.items():
        _store(entries, key, value, new_default)
    logger.debug("merge_inplace %s: %d rhs entries -> %d",
                 getattr(op, "__name__", op), len(updates), len(entries))
    return new_default

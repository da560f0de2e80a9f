"""
Spla Testing: Assertions for tensors.

``assert_tensor_equal`` checks structural equality (EXPECT_EQ on whole
containers); ``assert_tensor_near`` checks every index within an absolute
tolerance, evaluated through the elementwise engine so the tensors are
never densified.
"""

import numpy as np

from spla import reduction


def assert_tensor_equal(actual, expected):
    """Assert same shape, same default and same stored entries."""
    if actual == expected:
        return
    raise AssertionError(f"Tensors differ:\n  actual:   {actual!r}\n"
                         f"  expected: {expected!r}")


def _within(atol):
    def near(lhs, rhs):
        # Widen first: unsigned differences wrap and bool has no subtract.
        wide = np.result_type(lhs, rhs, np.float64)
        return np.abs(np.subtract(lhs, rhs, dtype=wide)) < atol
    return near


def assert_tensor_near(actual, expected, atol=1e-6):
    """
    Assert ``|actual[i] - expected[i]| < atol`` for every index ``i``.

    ``expected`` may be a tensor of the same shape or a scalar. Any entry
    type is accepted; values are compared as float (or complex).
    """
    close = actual.combine(_within(atol), expected)
    if reduction.all(close):
        return
    raise AssertionError(f"Tensors differ by {atol} or more:\n"
                         f"  actual:   {actual!r}\n"
                         f"  expected: {expected!r}")

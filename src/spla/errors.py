"""
Spla Errors: Exceptions raised by sparse containers.

Each error also derives from the builtin exception a numpy user would
expect (ValueError, IndexError), so generic handlers keep working.
"""


class SplaError(Exception):
    """Base class for all spla errors."""


class ShapeMismatch(SplaError, ValueError):
    """Operands of a binary operation have different shapes."""

    def __init__(self, operation, lhs_shape, rhs_shape):
        self.operation = operation
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape
        super().__init__(
            f"{operation} expects operands of the same shape, "
            f"got {lhs_shape} and {rhs_shape}")


class IndexOutOfRange(SplaError, IndexError):
    """Index does not lie within a container's shape."""

    def __init__(self, index, shape):
        self.index = index
        self.shape = shape
        super().__init__(f"Index {index} out of range for shape {shape}")


class ConversionError(SplaError, ValueError):
    """An entry value cannot be cast to the target entry type."""

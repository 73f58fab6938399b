"""
Exceptions raised by the transform descriptors.

Both kinds are contract violations by the caller: they are raised before any
factor computation (construction) or before the buffer is touched (execution),
so there is never a half-transformed buffer to clean up.
"""


class TransformError(ValueError):
    """Base class for transform errors."""


class InvalidSizeError(TransformError):
    """Transform length is not an integer power of two, or is less than 2."""

    def __init__(self, n):
        self.n = n
        super().__init__(f"length must be a power of 2 and at least 2: {n!r}")


class LengthMismatchError(TransformError):
    """Buffer passed to execute() does not hold exactly n elements."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid transform length: expected {expected}, got {actual}")

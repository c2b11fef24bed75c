from typing import Optional


class IntersectorError(ValueError):
    """Base class for errors raised by the endpoint intersector."""


class DimensionMismatchError(IntersectorError):
    """Raised when coordinates in a single computation differ in dimensionality."""

    def __init__(self, expected: int, actual: int, index: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        self.index = index
        where = f' at position {index}' if index is not None else ''
        super().__init__(f'expected {expected} components{where}, got {actual}')

"""
Exceptions raised by the matrix core.

Every error derives from MatrixError and from the closest builtin, so callers
can catch either the library type or the usual Python one (IndexError,
ValueError, ...).
"""


class MatrixError(Exception):
    """Base class for all matrix errors."""


class ValidationError(MatrixError, TypeError):
    """Constructor input is not a rectangular 2D sequence of finite numbers."""

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class ShapeError(MatrixError, ValueError):
    """Dimensions of the operands do not fit the operation."""

    def __init__(self, expected, got):
        super().__init__(f"Matrix size mismatch: expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class DomainError(MatrixError, ValueError):
    """A mathematical precondition does not hold (non-square, size <= 0)."""


class MatrixIndexError(MatrixError, IndexError):
    """Row or column index outside the matrix."""


class SingularMatrixError(MatrixError, ArithmeticError):
    """No usable pivot was found while inverting."""

    def __init__(self, matrix, pivot):
        super().__init__(f"Matrix is singular (no pivot in column {pivot}):\n{matrix}")
        self.matrix = matrix
        self.pivot = pivot

"""
Dense real matrices stored as column-major flat lists of floats.

Element (row, col) lives at values[col * row_count + row], the layout OpenGL
expects for uniform matrices.  Every operation returns a new Matrix with its
own buffer; use clone() when a detached working copy is needed.
"""

import math
import numbers
from collections.abc import Sequence

from .errors import DomainError, MatrixIndexError, ShapeError, ValidationError


class Matrix:
    """A row_count x col_count matrix over a column-major list of floats."""

    __slots__ = ("row_count", "col_count", "values")

    def __init__(self, values, row_count, col_count):
        _check_count(row_count, "row_count")
        _check_count(col_count, "col_count")
        values = [float(v) for v in values]
        if len(values) != row_count * col_count:
            raise ShapeError(f"{row_count * col_count} values "
                             f"for a {row_count}x{col_count} matrix",
                             f"{len(values)}")
        self.row_count = row_count
        self.col_count = col_count
        self.values = values

    @property
    def shape(self):
        return (self.row_count, self.col_count)

    @property
    def is_square(self):
        return self.row_count == self.col_count

    def __getitem__(self, index):
        row, col = index
        return at(self, row, col)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return equals(self, other)

    __hash__ = None

    def __repr__(self):
        return (f"Matrix(row_count={self.row_count}, col_count={self.col_count}, "
                f"values={self.values!r})")

    def __str__(self):
        return to_string(self)


def _check_count(count, name):
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise DomainError(f"{name} must be an integer, got {count!r}")
    if count <= 0:
        raise DomainError(f"Matrix size must be greater than 0, got {name}={count}")


def _is_real(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_sequence(value):
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _validate_2d(data):
    """
    Check that *data* is a non-empty rectangular 2D sequence of finite reals
    and return it as a list of float lists.
    """
    if not _is_sequence(data):
        raise ValidationError("Input must be a 2D sequence of numbers", data)
    if len(data) == 0:
        raise ShapeError("at least one row", "0")

    width = None
    result = []
    for index, line in enumerate(data):
        if not _is_sequence(line):
            raise ValidationError(
                f"Input must be a 2D sequence of numbers (entry {index} is "
                f"{type(line).__name__})", data)
        if width is None:
            width = len(line)
            if width == 0:
                raise ShapeError("at least one column", "0")
        elif len(line) != width:
            raise ShapeError(f"{width} entries in every line",
                             f"{len(line)} in line {index}")
        for cell in line:
            if not _is_real(cell):
                raise ValidationError(f"Matrix entries must be real numbers, got {cell!r}",
                                      cell)
            if not math.isfinite(cell):
                raise ValidationError(f"Matrix entries must be finite, got {cell!r}", cell)
        result.append([float(cell) for cell in line])
    return result


def is_matrix(value):
    return isinstance(value, Matrix)


def from_row_major(rows):
    """Build a matrix from a list of rows, transposing into column-major storage."""
    rows = _validate_2d(rows)
    row_count = len(rows)
    col_count = len(rows[0])
    values = [0.0] * (row_count * col_count)
    for row in range(row_count):
        for col in range(col_count):
            values[col * row_count + row] = rows[row][col]
    return Matrix(values, row_count, col_count)


def from_column_major(cols):
    """Build a matrix from a list of columns (already in storage order)."""
    cols = _validate_2d(cols)
    values = [v for col in cols for v in col]
    return Matrix(values, len(cols[0]), len(cols))


def from_values(values, row_count, col_count):
    """
    Wrap a flat column-major buffer.  The buffer is copied; entries must be
    real numbers but are not required to be finite.
    """
    if not _is_sequence(values):
        raise ValidationError("values must be a flat sequence of numbers", values)
    for v in values:
        if not _is_real(v):
            raise ValidationError(f"Matrix entries must be real numbers, got {v!r}", v)
    return Matrix(values, row_count, col_count)


def identity(size):
    """Return the size x size identity matrix."""
    _check_count(size, "size")
    values = [0.0] * (size * size)
    for i in range(size):
        values[i * size + i] = 1.0
    return Matrix(values, size, size)


def at(matrix, row, col):
    """Return the entry at 0-based (row, col).  Negative indices are rejected."""
    if not 0 <= row < matrix.row_count:
        raise MatrixIndexError(
            f"rowIndex {row} is out of bounds (0-{matrix.row_count - 1})")
    if not 0 <= col < matrix.col_count:
        raise MatrixIndexError(
            f"columnIndex {col} is out of bounds (0-{matrix.col_count - 1})")
    return matrix.values[col * matrix.row_count + row]


def same_size(a, b):
    return a.row_count == b.row_count and a.col_count == b.col_count


def assert_same_size(a, b):
    if not same_size(a, b):
        raise ShapeError(f"{a.row_count}x{a.col_count}", f"{b.row_count}x{b.col_count}")


def add(a, b):
    assert_same_size(a, b)
    return Matrix([x + y for x, y in zip(a.values, b.values)], a.row_count, a.col_count)


def subtract(a, b):
    assert_same_size(a, b)
    return Matrix([x - y for x, y in zip(a.values, b.values)], a.row_count, a.col_count)


def multiply_scalar(matrix, scalar):
    return Matrix([v * scalar for v in matrix.values], matrix.row_count, matrix.col_count)


def clone(matrix):
    """Deep copy: the result shares no storage with *matrix*."""
    return Matrix(list(matrix.values), matrix.row_count, matrix.col_count)


def equals(a, b, tolerance=None):
    """
    Compare two matrices.  With tolerance=None every entry must be equal;
    otherwise every entry must satisfy abs(a - b) < tolerance.
    Matrices of different shape are never equal.
    """
    if not same_size(a, b):
        return False
    if tolerance is None:
        return all(x == y for x, y in zip(a.values, b.values))
    return all(abs(x - y) < tolerance for x, y in zip(a.values, b.values))


def multiply(a, b):
    """Matrix product a * b, accumulating over k in ascending order."""
    if a.col_count != b.row_count:
        raise ShapeError(f"{b.row_count} columns on the left operand",
                         f"{a.row_count}x{a.col_count} * {b.row_count}x{b.col_count}")
    rows, inner, cols = a.row_count, a.col_count, b.col_count
    x, y = a.values, b.values
    result = [0.0] * (rows * cols)
    for row in range(rows):
        for col in range(cols):
            s = 0.0
            for k in range(inner):
                s += x[k * rows + row] * y[col * inner + k]
            result[col * rows + row] = s
    return Matrix(result, rows, cols)


def transpose(matrix):
    rows, cols = matrix.row_count, matrix.col_count
    v = matrix.values
    result = [0.0] * (rows * cols)
    for row in range(rows):
        for col in range(cols):
            result[row * cols + col] = v[col * rows + row]
    return Matrix(result, cols, rows)


def to_row_major_list(matrix):
    """Flat row-major copy of the entries."""
    rows, cols = matrix.row_count, matrix.col_count
    v = matrix.values
    return [v[col * rows + row] for row in range(rows) for col in range(cols)]


def to_row_major_2d(matrix):
    rows, cols = matrix.row_count, matrix.col_count
    v = matrix.values
    return [[v[col * rows + row] for col in range(cols)] for row in range(rows)]


def to_column_major_2d(matrix):
    rows = matrix.row_count
    v = matrix.values
    return [v[col * rows:(col + 1) * rows] for col in range(matrix.col_count)]


def to_string(matrix):
    """Tab-separated rows, one per line.  For debugging only."""
    return "\n".join("\t".join(str(v) for v in row) for row in to_row_major_2d(matrix))

"""
Gaussian elimination: matrix inverse and determinant.

Both operations work on a private clone of their input, reshaped in place with
the three elementary row operations below.  The row operations mutate the
matrix they are given and are meant for such working copies only.
"""

import logging

from .errors import DomainError, SingularMatrixError
from .matrix import clone, identity

logger = logging.getLogger(__name__)

# Largest pivot magnitude below which inverse() reports a singular matrix.
INVERSE_PIVOT_THRESHOLD = 1e-6
# determinant() searches for a better pivot when |M[p,p]| drops below this.
DETERMINANT_PIVOT_THRESHOLD = 1e-5
# Entries at or below this magnitude are treated as already eliminated.
ELIMINATION_EPSILON = 1e-8


def swap_rows(m, i, j):
    """Exchange rows i and j of *m* in place."""
    n = m.row_count
    v = m.values
    for col in range(m.col_count):
        a = col * n + i
        b = col * n + j
        v[a], v[b] = v[b], v[a]


def scale_row(m, i, scalar):
    """Multiply row i of *m* by scalar in place."""
    n = m.row_count
    v = m.values
    for col in range(m.col_count):
        v[col * n + i] *= scalar


def subtract_scaled_row(m, target, source, factor):
    """row[target] -= factor * row[source], in place."""
    n = m.row_count
    v = m.values
    for col in range(m.col_count):
        v[col * n + target] -= factor * v[col * n + source]


def _require_square(matrix, operation):
    if not matrix.is_square:
        raise DomainError(f"Matrix must be square to compute {operation}, "
                          f"got {matrix.row_count}x{matrix.col_count}")


def _max_pivot_row(m, p):
    """Row in p..n-1 with the largest |M[row, p]|; the first one wins ties."""
    n = m.row_count
    v = m.values
    base = p * n
    best_row = p
    best = abs(v[base + p])
    for row in range(p + 1, n):
        candidate = abs(v[base + row])
        if candidate > best:
            best_row = row
            best = candidate
    return best_row, best


def inverse(matrix, pivot_threshold=INVERSE_PIVOT_THRESHOLD, epsilon=ELIMINATION_EPSILON):
    """
    Invert a square matrix by Gauss-Jordan elimination with partial pivoting.

    Raises DomainError for non-square input and SingularMatrixError when a
    pivot column has no entry of magnitude pivot_threshold or more.
    """
    _require_square(matrix, "inverse")
    n = matrix.row_count
    m = clone(matrix)
    inv = identity(n)

    for p in range(n):
        max_row, max_value = _max_pivot_row(m, p)
        if max_value < pivot_threshold:
            logger.debug("inverse: largest pivot in column %d is %g, matrix is singular",
                         p, max_value)
            raise SingularMatrixError(matrix, p)

        if max_row != p:
            swap_rows(m, p, max_row)
            swap_rows(inv, p, max_row)

        factor = 1.0 / m.values[p * n + p]
        scale_row(m, p, factor)
        scale_row(inv, p, factor)

        for row in range(n):
            if row == p:
                continue
            f = m.values[p * n + row]
            if abs(f) > epsilon:
                subtract_scaled_row(m, row, p, f)
                subtract_scaled_row(inv, row, p, f)

    return inv


def determinant(matrix, pivot_threshold=DETERMINANT_PIVOT_THRESHOLD,
                epsilon=ELIMINATION_EPSILON):
    """
    Determinant by forward elimination.  A column without any non-zero entry
    at or below the diagonal gives 0.0 rather than an error.
    """
    _require_square(matrix, "determinant")
    n = matrix.row_count
    m = clone(matrix)
    v = m.values
    det = 1.0

    for p in range(n):
        if abs(v[p * n + p]) < pivot_threshold:
            max_row, max_value = _max_pivot_row(m, p)
            if max_value == 0:
                logger.debug("determinant: column %d has no pivot, returning 0", p)
                return 0.0
            if max_row != p:
                swap_rows(m, p, max_row)
                det = -det

        pivot = v[p * n + p]
        det *= pivot
        scale_row(m, p, 1.0 / pivot)

        for row in range(p + 1, n):
            f = v[p * n + row]
            if abs(f) > epsilon:
                subtract_scaled_row(m, row, p, f)

    return det

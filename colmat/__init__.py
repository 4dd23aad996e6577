"""
Column-major dense matrices for graphics transform pipelines.

The 4x4 transform builders live in colmat.mat4 and the PyOpenGL uniform
bridge in colmat.gl (imported on demand, it needs PyOpenGL).
"""

from .errors import (
    DomainError,
    MatrixError,
    MatrixIndexError,
    ShapeError,
    SingularMatrixError,
    ValidationError,
)
from .matrix import (
    Matrix,
    add,
    assert_same_size,
    at,
    clone,
    equals,
    from_column_major,
    from_row_major,
    from_values,
    identity,
    is_matrix,
    multiply,
    multiply_scalar,
    same_size,
    subtract,
    to_column_major_2d,
    to_row_major_2d,
    to_row_major_list,
    to_string,
    transpose,
)
from .elimination import determinant, inverse

__version__ = "0.1.0"

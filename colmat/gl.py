"""
Hand a 4x4 Matrix to OpenGL as a mat4 uniform.

The matrix buffer is already column-major, so it is passed with
transpose=GL_FALSE.  A current GL context is required for upload_uniform().
"""

import ctypes
import logging

from OpenGL.GL import GL_FALSE, glUniformMatrix4fv

from .errors import ShapeError

logger = logging.getLogger(__name__)


def as_float32_array(matrix):
    """Copy the column-major buffer into a ctypes float array."""
    return (ctypes.c_float * len(matrix.values))(*matrix.values)


def upload_uniform(location, matrix):
    """Upload *matrix* to the mat4 uniform at *location* of the bound program."""
    if matrix.row_count != 4 or matrix.col_count != 4:
        raise ShapeError("4x4", f"{matrix.row_count}x{matrix.col_count}")
    logger.debug("uploading mat4 uniform at location %s", location)
    glUniformMatrix4fv(location, 1, GL_FALSE, as_float32_array(matrix))

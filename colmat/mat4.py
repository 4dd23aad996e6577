"""
4x4 transform matrices for OpenGL-style pipelines.

Everything here returns a colmat Matrix of shape 4x4, column-major, ready for
glUniformMatrix4fv with transpose=GL_FALSE.  Angles are in radians.
Degenerate axes or look-at vectors are not rejected: they produce NaN entries.
"""

import math

from . import elimination
from . import matrix as core
from .errors import ShapeError
from .matrix import Matrix


def _require_4x4(m):
    if m.row_count != 4 or m.col_count != 4:
        raise ShapeError("4x4", f"{m.row_count}x{m.col_count}")


def _normalize(x, y, z):
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        return math.nan, math.nan, math.nan
    return x / length, y / length, z / length


def from_row_major(rows):
    """Build a 4x4 matrix from four rows of four numbers."""
    m = core.from_row_major(rows)
    _require_4x4(m)
    return m


def get_identity():
    return core.identity(4)


def get_translation(x, y, z):
    m = core.identity(4)
    m.values[12] = float(x)
    m.values[13] = float(y)
    m.values[14] = float(z)
    return m


def get_scale(x, y, z):
    m = core.identity(4)
    m.values[0] = float(x)
    m.values[5] = float(y)
    m.values[10] = float(z)
    return m


def get_rotate_x(radians):
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        1, 0,  0, 0,
        0, c,  s, 0,
        0, -s, c, 0,
        0, 0,  0, 1,
    ], 4, 4)


def get_rotate_y(radians):
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        c, 0, -s, 0,
        0, 1, 0,  0,
        s, 0, c,  0,
        0, 0, 0,  1,
    ], 4, 4)


def get_rotate_z(radians):
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        c,  s, 0, 0,
        -s, c, 0, 0,
        0,  0, 1, 0,
        0,  0, 0, 1,
    ], 4, 4)


def get_rotate(radians, axis):
    """Rotation by *radians* counter-clockwise about *axis* (Rodrigues)."""
    x, y, z = _normalize(*axis)
    c, s = math.cos(radians), math.sin(radians)
    t = 1.0 - c
    return Matrix([
        x * x * t + c,     y * x * t + z * s, z * x * t - y * s, 0,
        x * y * t - z * s, y * y * t + c,     z * y * t + x * s, 0,
        x * z * t + y * s, y * z * t - x * s, z * z * t + c,     0,
        0,                 0,                 0,                 1,
    ], 4, 4)


def get_look_at(eye, target, up):
    """View matrix for a camera at *eye* looking at *target*."""
    fx, fy, fz = _normalize(target[0] - eye[0], target[1] - eye[1], target[2] - eye[2])

    sx, sy, sz = _normalize(
        fy * up[2] - fz * up[1],
        fz * up[0] - fx * up[2],
        fx * up[1] - fy * up[0],
    )

    ux = sy * fz - sz * fy
    uy = sz * fx - sx * fz
    uz = sx * fy - sy * fx

    return Matrix([
        sx,  ux, -fx, 0,
        sy,  uy, -fy, 0,
        sz,  uz, -fz, 0,
        -(sx * eye[0] + sy * eye[1] + sz * eye[2]),
        -(ux * eye[0] + uy * eye[1] + uz * eye[2]),
        (fx * eye[0] + fy * eye[1] + fz * eye[2]),
        1,
    ], 4, 4)


def get_perspective(fov_y, aspect, near, far):
    """Perspective projection; fov_y is the vertical field of view in radians."""
    f = 1.0 / math.tan(fov_y / 2.0)
    nf = near - far
    return Matrix([
        f / aspect, 0,  0,                      0,
        0,          f,  0,                      0,
        0,          0,  (far + near) / nf,     -1,
        0,          0,  (2 * far * near) / nf,  0,
    ], 4, 4)


def multiply(a, b):
    _require_4x4(a)
    _require_4x4(b)
    return core.multiply(a, b)


def inverse(m):
    _require_4x4(m)
    return elimination.inverse(m)


def transform_vec4(m, v):
    """Multiply a 4x4 matrix by a 4-vector, returning a tuple."""
    _require_4x4(m)
    x, y, z, w = v
    e = m.values
    return (
        e[0] * x + e[4] * y + e[8] * z + e[12] * w,
        e[1] * x + e[5] * y + e[9] * z + e[13] * w,
        e[2] * x + e[6] * y + e[10] * z + e[14] * w,
        e[3] * x + e[7] * y + e[11] * z + e[15] * w,
    )


def to_row_major_list(m):
    _require_4x4(m)
    return core.to_row_major_list(m)

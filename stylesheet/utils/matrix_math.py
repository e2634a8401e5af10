"""4x4 matrix primitives for style transforms. No engine imports.

Matrices are (4, 4) float64 arrays in row-vector convention: a point is a row
``[x, y, z, 1]`` multiplied on the left, so translation sits in the last row
(flat indices 12, 13, 14 once flattened row-major).

In this convention ``a @ b`` applies ``a`` to a point first, then ``b``. A
transform list composed CSS-style (last operation applied first) therefore
premultiplies: ``multiply_into(result, m, result)``.

The ``reuse_*_command`` builders write into a caller-supplied buffer that is
expected to start out as identity.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

Matrix = NDArray[np.float64]


def create_identity_matrix() -> Matrix:
    return np.eye(4, dtype=np.float64)


def multiply_into(out: Matrix, a: Matrix, b: Matrix) -> None:
    """out = a × b. ``out`` may alias ``a`` or ``b``."""
    out[:] = a @ b


def from_values(values: Sequence[float]) -> Matrix:
    """Build a 4x4 matrix from 16 row-major values or a 2D 3x3 (9 values).

    The 3x3 form ``[a b c; d e f; g h i]`` uses the same row-vector convention
    and is embedded with Z passing through::

        [a b 0 c]
        [d e 0 f]
        [0 0 1 0]
        [g h 0 i]
    """
    flat = np.asarray(values, dtype=np.float64).ravel()
    if flat.size == 16:
        return flat.reshape(4, 4).copy()
    if flat.size == 9:
        m3 = flat.reshape(3, 3)
        matrix = create_identity_matrix()
        rows = (0, 1, 3)
        for i, row in enumerate(rows):
            for j, col in enumerate(rows):
                matrix[row, col] = m3[i, j]
        return matrix
    raise ValueError(f"Expected 9 or 16 matrix values, got {flat.size}")


def to_list(matrix: Matrix) -> list[float]:
    """Row-major flattening into plain Python floats."""
    return [float(v) for v in matrix.ravel()]


def reuse_rotate_z_command(matrix: Matrix, radians: float) -> None:
    c = math.cos(radians)
    s = math.sin(radians)
    matrix[0, 0] = c
    matrix[0, 1] = s
    matrix[1, 0] = -s
    matrix[1, 1] = c


def reuse_scale_command(matrix: Matrix, factor: float) -> None:
    matrix[0, 0] = factor
    matrix[1, 1] = factor
    matrix[2, 2] = factor


def reuse_scale_x_command(matrix: Matrix, factor: float) -> None:
    matrix[0, 0] = factor


def reuse_scale_y_command(matrix: Matrix, factor: float) -> None:
    matrix[1, 1] = factor


def reuse_translate_2d_command(matrix: Matrix, x: float, y: float) -> None:
    matrix[3, 0] = x
    matrix[3, 1] = y


def reuse_translate_3d_command(matrix: Matrix, x: float, y: float, z: float) -> None:
    matrix[3, 0] = x
    matrix[3, 1] = y
    matrix[3, 2] = z

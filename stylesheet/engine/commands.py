"""The built-in transform commands: matrix, rotate, scale*, translate*."""

from __future__ import annotations

from collections.abc import Sequence

from stylesheet.engine.registry import ValueKind, transform_command
from stylesheet.engine.units import convert_to_radians
from stylesheet.utils import matrix_math
from stylesheet.utils.matrix_math import Matrix


@transform_command("matrix", kind=ValueKind.SEQUENCE, lengths=(9, 16))
def matrix(m: Matrix, value: Sequence[float]) -> None:
    m[:] = matrix_math.from_values(value)


@transform_command("rotate", kind=ValueKind.ANGLE)
def rotate(m: Matrix, value: str) -> None:
    matrix_math.reuse_rotate_z_command(m, convert_to_radians(value))


@transform_command("scale", kind=ValueKind.NUMBER)
def scale(m: Matrix, value: float) -> None:
    matrix_math.reuse_scale_command(m, value)


@transform_command("scaleX", kind=ValueKind.NUMBER)
def scale_x(m: Matrix, value: float) -> None:
    matrix_math.reuse_scale_x_command(m, value)


@transform_command("scaleY", kind=ValueKind.NUMBER)
def scale_y(m: Matrix, value: float) -> None:
    matrix_math.reuse_scale_y_command(m, value)


@transform_command("translate", kind=ValueKind.SEQUENCE)
def translate(m: Matrix, value: Sequence[float]) -> None:
    # Element count is not validated: missing axes are 0, extras ignored
    x, y, z = (list(value[:3]) + [0, 0, 0])[:3]
    matrix_math.reuse_translate_3d_command(m, x, y, z)


@transform_command("translateX", kind=ValueKind.NUMBER)
def translate_x(m: Matrix, value: float) -> None:
    matrix_math.reuse_translate_2d_command(m, value, 0)


@transform_command("translateY", kind=ValueKind.NUMBER)
def translate_y(m: Matrix, value: float) -> None:
    matrix_math.reuse_translate_2d_command(m, 0, value)

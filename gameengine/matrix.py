"""4x4 matrices using the row-vector convention (translation in the last row)."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Iterator, Union

from gameengine.quaternion import Quaternion
from gameengine.vector import Vector3

Row = tuple[float, float, float, float]


class Matrix4x4:
    """An immutable 4x4 matrix of floats."""

    __slots__ = ("_rows",)

    def __init__(self, values: Iterable | None = None) -> None:
        """Build from 16 numbers in row-major order or from 4 rows of 4.

        With no values the matrix is all zeros.
        """
        if values is None:
            flat = [0.0] * 16
        else:
            items = list(values)
            if items and all(isinstance(item, Iterable) for item in items):
                rows = [list(item) for item in items]
                if any(len(row) != 4 for row in rows):
                    raise ValueError("Matrix4x4 rows must each contain 4 elements.")
                flat = [float(v) for row in rows for v in row]
            else:
                flat = [float(v) for v in items]
        if len(flat) != 16:
            raise ValueError("Matrix4x4 initializer must contain exactly 16 elements.")
        self._rows: tuple[Row, ...] = tuple(
            tuple(flat[start : start + 4]) for start in range(0, 16, 4)
        )

    def __getitem__(self, index: Union[int, tuple[int, int]]):
        """``m[i]`` gives row ``i``; ``m[i, j]`` gives one element."""
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return self._rows[index]

    def __iter__(self) -> Iterator[float]:
        for row in self._rows:
            yield from row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix4x4({[list(row) for row in self._rows]!r})"

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(a + b for a, b in zip(self, other))

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(a - b for a, b in zip(self, other))

    def __mul__(self, other: Union[Matrix4x4, float]) -> Matrix4x4:
        """Matrix product with another matrix, or scaling by a number."""
        if isinstance(other, Matrix4x4):
            columns = list(zip(*other._rows))
            return Matrix4x4(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._rows
            )
        if isinstance(other, (int, float)):
            return Matrix4x4(v * other for v in self)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Matrix4x4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self * scalar

    def rows(self) -> tuple[Row, ...]:
        """Return the four rows."""
        return self._rows


def _det3(a: list[list[float]]) -> float:
    return (
        a[0][0] * (a[1][1] * a[2][2] - a[1][2] * a[2][1])
        - a[0][1] * (a[1][0] * a[2][2] - a[1][2] * a[2][0])
        + a[0][2] * (a[1][0] * a[2][1] - a[1][1] * a[2][0])
    )


def _cofactor(rows: tuple[Row, ...], i: int, j: int) -> float:
    minor = [
        [v for c, v in enumerate(row) if c != j] for r, row in enumerate(rows) if r != i
    ]
    sign = -1.0 if (i + j) % 2 else 1.0
    return sign * _det3(minor)


def inverse(m: Matrix4x4) -> Matrix4x4:
    """Return the inverse of ``m``; raises ValueError if it is singular."""
    rows = m.rows()
    cofactors = [[_cofactor(rows, i, j) for j in range(4)] for i in range(4)]
    det = sum(a * c for a, c in zip(rows[0], cofactors[0]))
    if det == 0.0:
        raise ValueError("Cannot invert a singular matrix.")
    return Matrix4x4([c / det for c in column] for column in zip(*cofactors))


def transpose(m: Matrix4x4) -> Matrix4x4:
    """Return the transpose of ``m``."""
    return Matrix4x4(zip(*m.rows()))


def make_identity() -> Matrix4x4:
    """Return the identity matrix."""
    return Matrix4x4([1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1])


def make_translate(translate: Vector3) -> Matrix4x4:
    """Return a translation matrix."""
    return Matrix4x4(
        [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, translate.x, translate.y, translate.z, 1]
    )


def make_scale(scale: Vector3) -> Matrix4x4:
    """Return a scaling matrix."""
    return Matrix4x4(
        [scale.x, 0, 0, 0, 0, scale.y, 0, 0, 0, 0, scale.z, 0, 0, 0, 0, 1]
    )


def make_rotate_x(radian: float) -> Matrix4x4:
    """Return a rotation about the X axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4([1, 0, 0, 0, 0, c, s, 0, 0, -s, c, 0, 0, 0, 0, 1])


def make_rotate_y(radian: float) -> Matrix4x4:
    """Return a rotation about the Y axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4([c, 0, -s, 0, 0, 1, 0, 0, s, 0, c, 0, 0, 0, 0, 1])


def make_rotate_z(radian: float) -> Matrix4x4:
    """Return a rotation about the Z axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4([c, s, 0, 0, -s, c, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1])


def make_rotate_xyz(rotate: Vector3) -> Matrix4x4:
    """Return the Euler rotation composed as Y * X * Z."""
    return make_rotate_y(rotate.y) * make_rotate_x(rotate.x) * make_rotate_z(rotate.z)


def make_rotate_from_quaternion(quaternion: Quaternion) -> Matrix4x4:
    """Return the rotation matrix of ``quaternion``."""
    x, y, z, w = quaternion.x, quaternion.y, quaternion.z, quaternion.w
    return Matrix4x4(
        [
            [w * w + x * x - y * y - z * z, 2.0 * (x * y + w * z), 2.0 * (x * z - w * y), 0.0],
            [2.0 * (x * y - w * z), w * w - x * x + y * y - z * z, 2.0 * (y * z + w * x), 0.0],
            [2.0 * (x * z + w * y), 2.0 * (y * z - w * x), w * w - x * x - y * y + z * z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_affine(
    scale: Vector3, rotate: Union[Vector3, Quaternion], translate: Vector3
) -> Matrix4x4:
    """Return scale * rotate * translate.

    ``rotate`` is either Euler angles (composed X * Y * Z) or a quaternion.
    """
    if isinstance(rotate, Quaternion):
        rotation = make_rotate_from_quaternion(rotate)
    else:
        rotation = make_rotate_x(rotate.x) * make_rotate_y(rotate.y) * make_rotate_z(rotate.z)
    return make_scale(scale) * rotation * make_translate(translate)


def make_rotate_axis_angle(axis: Vector3, angle: float) -> Matrix4x4:
    """Return the rotation of ``angle`` radians about ``axis``."""
    length = axis.length()
    n = axis / length if length != 0.0 else axis
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    column_form = Matrix4x4(
        [
            [c + n.x * n.x * t, n.x * n.y * t - n.z * s, n.x * n.z * t + n.y * s, 0.0],
            [n.y * n.x * t + n.z * s, c + n.y * n.y * t, n.y * n.z * t - n.x * s, 0.0],
            [n.z * n.x * t - n.y * s, n.z * n.y * t + n.x * s, c + n.z * n.z * t, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return transpose(column_form)
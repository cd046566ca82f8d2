"""Vector transformation, projection and view matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from gameengine.matrix import Matrix4x4, make_identity
from gameengine.quaternion import Quaternion
from gameengine.vector import Vector3

COLUMN_WIDTH = 60
ROW_HEIGHT = 20

_DIRECTION_EPSILON = 1e-6


@dataclass
class EulerTransform:
    """Scale, Euler rotation and translation."""

    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotate: Vector3 = field(default_factory=Vector3)
    translate: Vector3 = field(default_factory=Vector3)


@dataclass
class QuaternionTransform:
    """Scale, quaternion rotation and translation."""

    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotate: Quaternion = field(default_factory=Quaternion)
    translate: Vector3 = field(default_factory=Vector3)


def sign_normalize(value: float) -> float:
    """Return 1.0 or -1.0 with the sign of ``value``, or 0.0 for zero."""
    if value != 0.0:
        return value / abs(value)
    return 0.0


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate between two numbers."""
    return (1.0 - t) * a + t * b


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point by ``matrix``, dividing by the resulting w.

    Raises ValueError when w is zero.
    """
    m = matrix.rows()
    x, y, z = vector

    def column(j: int) -> float:
        return x * m[0][j] + y * m[1][j] + z * m[2][j] + m[3][j]

    w = column(3)
    if w == 0.0:
        raise ValueError("Homogeneous coordinate w is zero.")
    return Vector3(column(0) / w, column(1) / w, column(2) / w)


def cotf(theta: float) -> float:
    """Return the cotangent of ``theta``."""
    return 1.0 / math.tan(theta)


def make_perspective_fov(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Return a perspective projection matrix mapping depth to [0, 1]."""
    c = cotf(fov_y / 2.0)
    depth = far_clip - near_clip
    return Matrix4x4(
        [
            1.0 / aspect_ratio * c, 0, 0, 0,
            0, c, 0, 0,
            0, 0, far_clip / depth, 1.0,
            0, 0, -near_clip * far_clip / depth, 0,
        ]
    )


def make_orthographic(
    left: float, top: float, right: float, bottom: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Return an orthographic projection matrix."""
    return Matrix4x4(
        [
            2.0 / (right - left), 0, 0, 0,
            0, 2.0 / (top - bottom), 0, 0,
            0, 0, 1.0 / (far_clip - near_clip), 0,
            (left + right) / (left - right),
            (top + bottom) / (bottom - top),
            near_clip / (near_clip - far_clip),
            1.0,
        ]
    )


def make_viewport(
    left: float, top: float, width: float, height: float, min_depth: float, max_depth: float
) -> Matrix4x4:
    """Return a viewport matrix mapping normalised device coordinates to the screen."""
    return Matrix4x4(
        [
            width / 2.0, 0, 0, 0,
            0, -height / 2.0, 0, 0,
            0, 0, max_depth - min_depth, 0,
            left + width / 2.0, top + height / 2.0, min_depth, 1.0,
        ]
    )


def cross(v1: Vector3, v2: Vector3) -> Vector3:
    """Return the cross product."""
    return Vector3(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def look_at(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4x4:
    """Return a view matrix looking from ``eye`` towards ``target``."""
    zaxis = (target - eye).normalized()
    xaxis = cross(up, zaxis).normalized()
    yaxis = cross(zaxis, xaxis)
    return Matrix4x4(
        [
            xaxis.x, yaxis.x, zaxis.x, 0,
            xaxis.y, yaxis.y, zaxis.y, 0,
            xaxis.z, yaxis.z, zaxis.z, 0,
            -xaxis.dot(eye), -yaxis.dot(eye), -zaxis.dot(eye), 1,
        ]
    )


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a direction by the upper 3x3 part of ``m``."""
    r = m.rows()
    return Vector3(
        v.x * r[0][0] + v.y * r[1][0] + v.z * r[2][0],
        v.x * r[0][1] + v.y * r[1][1] + v.z * r[2][1],
        v.x * r[0][2] + v.y * r[1][2] + v.z * r[2][2],
    )


def extract_translation(matrix: Matrix4x4) -> Vector3:
    """Return the translation part of ``matrix``."""
    x, y, z, _ = matrix.rows()[3]
    return Vector3(x, y, z)


def direction_to_direction(source: Vector3, target: Vector3) -> Matrix4x4:
    """Return a rotation taking the direction ``source`` onto ``target``.

    Parallel and opposite directions both give the identity, because
    the rotation axis vanishes for them.
    """
    from_norm = source.normalized()
    to_norm = target.normalized()

    axis = cross(from_norm, to_norm)
    sin_angle = math.sqrt(axis.dot(axis))
    cos_angle = from_norm.dot(to_norm)

    if sin_angle < _DIRECTION_EPSILON:
        return make_identity()

    if cos_angle < -1.0 + _DIRECTION_EPSILON:
        helper = Vector3(0, 1, 0) if abs(from_norm.x) > 0.9 else Vector3(1, 0, 0)
        axis = cross(from_norm, helper).normalized()
        sin_angle = 1.0
        cos_angle = -1.0
    else:
        axis = axis.normalized()

    x, y, z = axis
    t = 1.0 - cos_angle
    s = sin_angle
    c = cos_angle
    return Matrix4x4(
        [
            [c + x * x * t, x * y * t + z * s, x * z * t - y * s, 0.0],
            [y * x * t - z * s, c + y * y * t, y * z * t + x * s, 0.0],
            [z * x * t + y * s, z * y * t - x * s, c + z * z * t, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
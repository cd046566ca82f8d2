"""Quaternions for 3D rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from gameengine.vector import Vector3

_SLERP_EPSILON = 0.001


@dataclass(frozen=True, slots=True)
class Quaternion:
    """A quaternion ``x i + y j + z k + w``; defaults to the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __mul__(self, other: Union[Quaternion, float]) -> Quaternion:
        if isinstance(other, Quaternion):
            x, y, z, w = self.x, self.y, self.z, self.w
            return Quaternion(
                w * other.x + x * other.w + y * other.z - z * other.y,
                w * other.y - x * other.z + y * other.w + z * other.x,
                w * other.z + x * other.y - y * other.x + z * other.w,
                w * other.w - x * other.x - y * other.y - z * other.z,
            )
        if isinstance(other, (int, float)):
            return Quaternion(
                self.x * other, self.y * other, self.z * other, self.w * other
            )
        return NotImplemented

    def __rmul__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self * scalar

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def conjugate(self) -> Quaternion:
        """Return the conjugate."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def norm(self) -> float:
        """Return the norm."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Quaternion:
        """Return a unit quaternion; raises ValueError for a zero norm."""
        norm = self.norm()
        if norm == 0.0:
            raise ValueError("Cannot normalize a zero-norm quaternion.")
        return Quaternion(self.x / norm, self.y / norm, self.z / norm, self.w / norm)

    def inverse(self) -> Quaternion:
        """Return the multiplicative inverse; raises ValueError for a zero norm."""
        norm = self.norm()
        if norm == 0.0:
            raise ValueError("Cannot invert a zero-norm quaternion.")
        squared = norm * norm
        c = self.conjugate()
        return Quaternion(c.x / squared, c.y / squared, c.z / squared, c.w / squared)

    def dot(self, other: Quaternion) -> float:
        """Return the four-component dot product."""
        return (
            self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w
        )


def identity() -> Quaternion:
    """Return the multiplicative identity."""
    return Quaternion(0.0, 0.0, 0.0, 1.0)


def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
    """Return the rotation of ``angle`` radians about ``axis``."""
    n = axis.normalized()
    half = angle * 0.5
    s = math.sin(half)
    return Quaternion(n.x * s, n.y * s, n.z * s, math.cos(half))


def slerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
    """Spherically interpolate between two quaternions along the shorter arc."""
    dot = q0.dot(q1)
    if dot < 0.0:
        q0 = -q0
        dot = -dot

    theta = math.acos(min(dot, 1.0))
    sin_theta = math.sin(theta)

    if sin_theta > _SLERP_EPSILON:
        scale0 = math.sin((1 - t) * theta) / sin_theta
        scale1 = math.sin(t * theta) / sin_theta
        return q0 * scale0 + q1 * scale1
    return q0 * (1 - t) + q1 * t


def rotate_vector(vector: Vector3, quaternion: Quaternion) -> Vector3:
    """Rotate ``vector`` by ``quaternion``."""
    pure = Quaternion(vector.x, vector.y, vector.z, 0.0)
    rotated = quaternion * pure * quaternion.conjugate()
    return Vector3(rotated.x, rotated.y, rotated.z)
"""Double-precision rotation quaternion shared by orbits and rotation models.

Components are stored (x, y, z, w). ``a * b`` is the Hamilton product, which
as a rotation applies ``b`` first and then ``a``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

SLERP_LINEAR_THRESHOLD = 0.9995


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion (x, y, z, w)."""

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def rotate_x(cls, angle: float) -> Quaternion:
        """Rotation of angle radians about +X."""
        return cls(math.sin(0.5 * angle), 0.0, 0.0, math.cos(0.5 * angle))

    @classmethod
    def rotate_y(cls, angle: float) -> Quaternion:
        """Rotation of angle radians about +Y."""
        return cls(0.0, math.sin(0.5 * angle), 0.0, math.cos(0.5 * angle))

    @classmethod
    def rotate_z(cls, angle: float) -> Quaternion:
        """Rotation of angle radians about +Z."""
        return cls(0.0, 0.0, math.sin(0.5 * angle), math.cos(0.5 * angle))

    @classmethod
    def from_axis_angle(cls, axis: Sequence[float], angle: float) -> Quaternion:
        """Rotation of angle radians about a unit axis."""
        s = math.sin(0.5 * angle)
        return cls(axis[0] * s, axis[1] * s, axis[2] * s, math.cos(0.5 * angle))

    @classmethod
    def from_to(cls, source: Sequence[float], target: Sequence[float]) -> Quaternion:
        """Shortest rotation taking direction source onto direction target.

        Undefined for exactly opposite directions.
        """
        a = np.asarray(source, dtype=np.float64)
        b = np.asarray(target, dtype=np.float64)
        k = math.sqrt(float(np.dot(a, a)) * float(np.dot(b, b)))
        c = np.cross(a, b)
        return cls(float(c[0]), float(c[1]), float(c[2]), float(np.dot(a, b)) + k).normalized()

    def __mul__(self, other: Quaternion) -> Quaternion:
        ax, ay, az, aw = self.x, self.y, self.z, self.w
        bx, by, bz, bw = other.x, other.y, other.z, other.w
        return Quaternion(
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by + ay * bw + az * bx - ax * bz,
            aw * bz + az * bw + ax * by - ay * bx,
            aw * bw - ax * bx - ay * by - az * bz,
        )

    def rotate(self, vector: Sequence[float]) -> np.ndarray:
        """Rotate a 3-vector by this (unit) quaternion.

        Parameters:
            vector: 3 components.

        Returns:
            Rotated vector as a float64 array of shape (3,).
        """
        v = np.asarray(vector, dtype=np.float64)
        u = np.array([self.x, self.y, self.z])
        t = 2.0 * np.cross(u, v)
        return v + self.w * t + np.cross(u, t)

    def dot(self, other: Quaternion) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Quaternion:
        n = self.norm()
        return Quaternion(self.x / n, self.y / n, self.z / n, self.w / n)

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quaternion:
        """Multiplicative inverse (equal to the conjugate for unit quaternions)."""
        r = 1.0 / self.dot(self)
        return Quaternion(-self.x * r, -self.y * r, -self.z * r, self.w * r)

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def to_matrix(self) -> np.ndarray:
        """Return the equivalent 3x3 rotation matrix (acts on column vectors)."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return np.array(
            [
                [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
                [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
                [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
            ],
            dtype=np.float64,
        )


def nlerp(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
    """Normalized linear interpolation along the shorter arc."""
    if q1.dot(q2) < 0.0:
        q2 = -q2
    return Quaternion(
        q1.x + (q2.x - q1.x) * t,
        q1.y + (q2.y - q1.y) * t,
        q1.z + (q2.z - q1.z) * t,
        q1.w + (q2.w - q1.w) * t,
    ).normalized()


def slerp(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
    """Spherical linear interpolation; falls back to nlerp for nearly equal inputs."""
    d = q1.dot(q2)
    if d < 0.0:
        d = -d
        q2 = -q2
    if d >= SLERP_LINEAR_THRESHOLD:
        return nlerp(q1, q2, t)
    angle = math.acos(d)
    s = 1.0 / math.sqrt(1.0 - d * d)
    w1 = math.sin(angle * (1.0 - t)) * s
    w2 = math.sin(angle * t) * s
    return Quaternion(
        q1.x * w1 + q2.x * w2,
        q1.y * w1 + q2.y * w2,
        q1.z * w1 + q2.z * w2,
        q1.w * w1 + q2.w * w2,
    )

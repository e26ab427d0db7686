from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec3:
    """Bare 3-vector for engine internals (no time tag)."""
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> "Vec3":
        return cls(0.0, 0.0, 0.0)

    def quadrature(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.quadrature())

    def mean(self, other: "Vec3") -> "Vec3":
        return Vec3((self.x + other.x) / 2.0, (self.y + other.y) / 2.0, (self.z + other.z) / 2.0)

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, k: float) -> "Vec3":
        return Vec3(k * self.x, k * self.y, k * self.z)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vec3":
        return Vec3(self.x / k, self.y / k, self.z / k)


@dataclass(frozen=True)
class BodyState:
    """Position (au) and velocity (au/day) at dynamical time `tt`."""
    tt: float
    r: Vec3
    v: Vec3

    def __sub__(self, other: "BodyState") -> "BodyState":
        return BodyState(self.tt, self.r - other.r, self.v - other.v)

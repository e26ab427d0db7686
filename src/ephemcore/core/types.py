from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Tuple

from .errors import TimeMismatchError

if TYPE_CHECKING:
    from .time import Instant


def _check_same_time(a, b) -> None:
    if a.t.tt != b.t.tt:
        raise TimeMismatchError(f"Vectors are valid at different times: tt={a.t.tt} and tt={b.t.tt}")


@dataclass(frozen=True)
class Vector:
    """Cartesian position in au, valid at instant ``t``."""
    x: float
    y: float
    z: float
    t: "Instant"

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def with_time(self, t: "Instant") -> "Vector":
        return replace(self, t=t)

    def __add__(self, other: "Vector") -> "Vector":
        _check_same_time(self, other)
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z, self.t)

    def __sub__(self, other: "Vector") -> "Vector":
        _check_same_time(self, other)
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z, self.t)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z, self.t)

    def __mul__(self, k: float) -> "Vector":
        return Vector(k * self.x, k * self.y, k * self.z, self.t)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vector":
        return Vector(self.x / k, self.y / k, self.z / k, self.t)

    def format(self, coord_format: str) -> str:
        layout = "({:" + coord_format + "}, {:" + coord_format + "}, {:" + coord_format + "}, {})"
        return layout.format(self.x, self.y, self.z, str(self.t))


@dataclass(frozen=True)
class StateVector:
    """Position (au) and velocity (au/day) sharing one instant."""
    x: float
    y: float
    z: float
    vx: float
    vy: float
    vz: float
    t: "Instant"

    @property
    def position(self) -> Vector:
        return Vector(self.x, self.y, self.z, self.t)

    @property
    def velocity(self) -> Vector:
        return Vector(self.vx, self.vy, self.vz, self.t)

    def __add__(self, other: "StateVector") -> "StateVector":
        _check_same_time(self, other)
        return StateVector(
            self.x + other.x, self.y + other.y, self.z + other.z,
            self.vx + other.vx, self.vy + other.vy, self.vz + other.vz,
            self.t,
        )

    def __sub__(self, other: "StateVector") -> "StateVector":
        _check_same_time(self, other)
        return StateVector(
            self.x - other.x, self.y - other.y, self.z - other.z,
            self.vx - other.vx, self.vy - other.vy, self.vz - other.vz,
            self.t,
        )

    def __neg__(self) -> "StateVector":
        return StateVector(-self.x, -self.y, -self.z, -self.vx, -self.vy, -self.vz, self.t)


@dataclass(frozen=True)
class Observer:
    """Geographic location: latitude/longitude in degrees, height in metres."""
    latitude: float
    longitude: float
    height: float = 0.0

    def __str__(self) -> str:
        ns = "S" if self.latitude < 0 else "N"
        ew = "W" if self.longitude < 0 else "E"
        return f"({ns}{abs(self.latitude):0.8f}, {ew}{abs(self.longitude):0.8f}, {self.height:0.3f}m)"


@dataclass(frozen=True)
class Spherical:
    lat: float
    lon: float
    dist: float


@dataclass(frozen=True)
class Equatorial:
    """Right ascension in sidereal hours, declination in degrees, distance in au."""
    ra: float
    dec: float
    dist: float
    vec: Vector


@dataclass(frozen=True)
class EclipticCoordinates:
    vec: Vector
    elat: float
    elon: float


@dataclass(frozen=True)
class HorizontalCoordinates:
    """Azimuth/altitude in degrees plus the refraction-adjusted RA (hours) and Dec."""
    azimuth: float
    altitude: float
    ra: float
    dec: float


@dataclass(frozen=True)
class RotationMatrix:
    """
    3x3 frame rotation. Applied as ``v'[i] = sum_j rot[j][i] * v[j]``.
    """
    rot: Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]

    @classmethod
    def from_rows(cls, rows) -> "RotationMatrix":
        return cls(tuple(tuple(float(v) for v in row) for row in rows))

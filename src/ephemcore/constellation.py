"""
ephemcore.constellation
-----------------------
Constellation lookup by J2000 right ascension/declination.

The IAU boundaries are defined on the B1875 equator, so the input direction
is precessed to that epoch before the boundary table is scanned.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Optional

from .core.errors import InternalError, InvalidArgumentError
from .core.time import Instant
from .core.types import RotationMatrix, Spherical
from .engines.tables.constellations import BOUNDS, NAMES
from .frames.coords import equator_from_vector, vector_from_sphere
from .frames.matrix import rotate_vector
from .frames.rotation import rotation_eqj_eqd

# UT of the Besselian epoch B1875.0 (1874-12-31T18:12:21.950Z)
B1875_UT = -45655.74141261017


@dataclass(frozen=True)
class ConstellationInfo:
    """`ra_1875` in sidereal hours and `dec_1875` in degrees, B1875 equator."""
    symbol: str
    name: str
    ra_1875: float
    dec_1875: float


_lock = threading.Lock()
_b1875_rotation: Optional[RotationMatrix] = None


def _rotation_to_b1875() -> RotationMatrix:
    global _b1875_rotation
    rot = _b1875_rotation
    if rot is None:
        with _lock:
            if _b1875_rotation is None:
                _b1875_rotation = rotation_eqj_eqd(Instant.from_ut(B1875_UT))
            rot = _b1875_rotation
    return rot


def constellation(ra: float, dec: float) -> ConstellationInfo:
    """`ra` in sidereal hours (any value, wrapped), `dec` in degrees."""
    if dec < -90.0 or dec > +90.0:
        raise InvalidArgumentError(f"Invalid declination: {dec}")

    ra = math.fmod(ra, 24.0)
    if ra < 0.0:
        ra += 24.0

    vec2000 = vector_from_sphere(Spherical(dec, 15.0 * ra, 1.0), Instant.from_tt(0.0))
    equ1875 = equator_from_vector(rotate_vector(_rotation_to_b1875(), vec2000))

    # table units: 1/24 degree of declination, 10 seconds of time
    x_dec = 24.0 * equ1875.dec
    x_ra = (24.0 * 15.0) * equ1875.ra

    for index, ra_lo, ra_hi, dec_lo in BOUNDS:
        if dec_lo <= x_dec and ra_lo <= x_ra < ra_hi:
            symbol, name = NAMES[index]
            return ConstellationInfo(symbol, name, equ1875.ra, equ1875.dec)

    raise InternalError(f"No constellation contains ra={ra}, dec={dec}")

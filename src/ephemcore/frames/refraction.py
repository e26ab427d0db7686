"""
ephemcore.frames.refraction
---------------------------
Atmospheric refraction (Saemundsson's formula as used by JPL Horizons).
"""

from __future__ import annotations

import enum
import math

from ..core.errors import InvalidArgumentError, NoConvergeError

INVERSE_REFRACTION_ITER_LIMIT = 100


class Refraction(enum.Enum):
    AIRLESS = 0
    NORMAL = 1      # tapers to zero at the nadir
    JPL_HOR = 2     # clamps below -1 degree, matching JPL Horizons


def refraction_angle(refraction: Refraction, altitude: float) -> float:
    """
    Degrees to add to a geometric `altitude` to get the apparent altitude.
    Altitudes outside [-90, +90] are returned uncorrected (0).
    """
    if altitude < -90.0 or altitude > +90.0:
        return 0.0

    if refraction is Refraction.AIRLESS:
        return 0.0
    if refraction not in (Refraction.NORMAL, Refraction.JPL_HOR):
        raise InvalidArgumentError(f"Invalid refraction option: {refraction!r}")

    # the formula diverges near -5.11 degrees
    hd = max(altitude, -1.0)
    refr = (1.02 / math.tan(math.radians(hd + 10.3 / (hd + 5.11)))) / 60.0

    if refraction is Refraction.NORMAL and altitude < -1.0:
        # linear taper: factor 1 at -1 degree, 0 at the nadir
        refr *= (altitude + 90.0) / 89.0
    return refr


def inverse_refraction_angle(refraction: Refraction, bent_altitude: float) -> float:
    """
    Degrees to add to an apparent altitude to recover the geometric one
    (normally negative).
    """
    if bent_altitude < -90.0 or bent_altitude > +90.0:
        return 0.0
    altitude = bent_altitude - refraction_angle(refraction, bent_altitude)
    for _ in range(INVERSE_REFRACTION_ITER_LIMIT):
        diff = (altitude + refraction_angle(refraction, altitude)) - bent_altitude
        if abs(diff) < 1.0e-14:
            return altitude - bent_altitude
        altitude -= diff
    raise NoConvergeError("inverse_refraction_angle did not converge")

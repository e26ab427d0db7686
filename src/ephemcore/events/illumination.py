"""
ephemcore.events.illumination
-----------------------------
Visual magnitude, phase angle and (for Saturn) ring tilt, plus the search
for the peak brightness of Venus.

Planet photometry follows Mallama's 2005 fits for Mercury and Venus and
Schlyter's formulas for the rest.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from ..core.angles import longitude_offset
from ..core.bodies import Body, synodic_period
from ..core.constants import AU_PER_PARSEC, KM_PER_AU
from ..core.errors import EarthNotAllowedError, InternalError, InvalidBodyError
from ..core.time import Instant
from ..core.types import Vector
from ..engines import vsop
from ..engines._solver import search
from ..frames.coords import angle_between, ecliptic
from ..positions import ecliptic_longitude, geo_moon, helio_vector
from .elongation import search_relative_longitude

MOON_MEAN_DISTANCE_AU = 385000.6 / KM_PER_AU

# (c0, c1, c2, c3) of  mag = c0 + x*(c1 + x*(c2 + x*c3)),  x = phase/100
_PHASE_CURVES = {
    Body.MERCURY: (-0.60, +4.98, -4.88, +3.02),
    Body.MARS: (-1.52, +1.60, 0.0, 0.0),
    Body.JUPITER: (-9.40, +0.50, 0.0, 0.0),
    Body.URANUS: (-7.19, +0.25, 0.0, 0.0),
    Body.NEPTUNE: (-6.87, 0.0, 0.0, 0.0),
    Body.PLUTO: (-1.00, +4.00, 0.0, 0.0),
}
_VENUS_CURVE_LOW = (-4.47, +1.03, +0.57, +0.13)
_VENUS_CURVE_HIGH = (+0.98, -1.02, 0.0, 0.0)


@dataclass(frozen=True)
class IlluminationInfo:
    """
    mag: visual magnitude; phase_angle: Sun-body-Earth angle (degrees);
    hc/gc: helio- and geocentric vectors; ring_tilt: Saturn only.
    """
    time: Instant
    mag: float
    phase_angle: float
    helio_dist: float
    geo_dist: float
    hc: Vector
    gc: Vector
    ring_tilt: Optional[float] = None
    phase_fraction: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "phase_fraction", (1.0 + math.cos(math.radians(self.phase_angle))) / 2.0)


def _moon_magnitude(phase: float, helio_dist: float, geo_dist: float) -> float:
    rad = math.radians(phase)
    mag = -12.717 + 1.49 * abs(rad) + 0.0431 * (rad ** 4)
    geo_au = geo_dist / MOON_MEAN_DISTANCE_AU
    return mag + 5.0 * math.log10(helio_dist * geo_au)


def _saturn_magnitude(phase: float, helio_dist: float, geo_dist: float, gc: Vector, time: Instant):
    eclip = ecliptic(gc)
    ir = math.radians(28.06)                          # ring plane tilt to the ecliptic
    nr = math.radians(169.51 + 3.82e-5 * time.tt)     # ascending node of the rings

    lat = math.radians(eclip.elat)
    lon = math.radians(eclip.elon)
    tilt = math.asin(math.sin(lat) * math.cos(ir) - math.cos(lat) * math.sin(ir) * math.sin(lon - nr))
    sin_tilt = math.sin(abs(tilt))

    mag = -9.0 + 0.044 * phase
    mag += sin_tilt * (-2.6 + 1.2 * sin_tilt)
    mag += 5.0 * math.log10(helio_dist * geo_dist)
    return mag, math.degrees(tilt)


def _visual_magnitude(body: Body, phase: float, helio_dist: float, geo_dist: float) -> float:
    if body == Body.VENUS:
        c0, c1, c2, c3 = _VENUS_CURVE_LOW if phase < 163.6 else _VENUS_CURVE_HIGH
    elif body in _PHASE_CURVES:
        c0, c1, c2, c3 = _PHASE_CURVES[body]
    else:
        raise InvalidBodyError(body)
    x = phase / 100.0
    mag = c0 + x * (c1 + x * (c2 + x * c3))
    return mag + 5.0 * math.log10(helio_dist * geo_dist)


def illumination(body: Body, time: Instant) -> IlluminationInfo:
    if body == Body.EARTH:
        raise EarthNotAllowedError()
    e = vsop.helio_position(Body.EARTH, time.tt)
    earth = Vector(e.x, e.y, e.z, time)
    if body == Body.SUN:
        gc = -earth
        hc = Vector(0.0, 0.0, 0.0, time)
        phase = 0.0     # the Sun has no phase angle
    else:
        if body == Body.MOON:
            gc = geo_moon(time)
            hc = earth + gc
        else:
            hc = helio_vector(body, time)
            gc = hc - earth
        phase = angle_between(gc, hc)

    geo_dist = gc.length()
    helio_dist = hc.length()
    ring_tilt = None
    if body == Body.SUN:
        mag = -0.17 + 5.0 * math.log10(geo_dist / AU_PER_PARSEC)
    elif body == Body.MOON:
        mag = _moon_magnitude(phase, helio_dist, geo_dist)
    elif body == Body.SATURN:
        mag, ring_tilt = _saturn_magnitude(phase, helio_dist, geo_dist, gc, time)
    else:
        mag = _visual_magnitude(body, phase, helio_dist, geo_dist)
    return IlluminationInfo(time, mag, phase, helio_dist, geo_dist, hc, gc, ring_tilt)


def _mag_slope(body: Body, time: Instant) -> float:
    # negative while brightening, positive while fading
    dt = 0.01
    y1 = illumination(body, time.add_days(-dt / 2))
    y2 = illumination(body, time.add_days(+dt / 2))
    return (y2.mag - y1.mag) / dt


def search_peak_magnitude(body: Body, start: Instant) -> IlluminationInfo:
    """Next time Venus reaches peak brightness."""
    if body != Body.VENUS:
        raise InvalidBodyError(body)
    # relative longitudes between which the peak occurs
    s1 = 10.0
    s2 = 30.0

    for _ in range(2):
        plon = ecliptic_longitude(body, start)
        elon = ecliptic_longitude(Body.EARTH, start)
        rlon = longitude_offset(plon - elon)

        if -s1 <= rlon < +s1:
            adjust_days = 0.0
            rlon_lo, rlon_hi = +s1, +s2
        elif rlon >= +s2 or rlon < -s2:
            adjust_days = 0.0
            rlon_lo, rlon_hi = -s2, -s1
        elif rlon >= 0:
            adjust_days = -synodic_period(body) / 4
            rlon_lo, rlon_hi = +s1, +s2
        else:
            adjust_days = -synodic_period(body) / 4
            rlon_lo, rlon_hi = -s2, -s1

        t1 = search_relative_longitude(body, rlon_lo, start.add_days(adjust_days))
        t2 = search_relative_longitude(body, rlon_hi, t1)

        if _mag_slope(body, t1) >= 0.0:
            raise InternalError("Peak magnitude bracket: slope at start is not negative")
        if _mag_slope(body, t2) <= 0.0:
            raise InternalError("Peak magnitude bracket: slope at end is not positive")

        tx = search(lambda t: _mag_slope(body, t), t1, t2, 10.0)
        if tx is None:
            raise InternalError("Peak magnitude search failed inside its bracket")

        if tx.tt >= start.tt:
            return illumination(body, tx)

        start = t2.add_days(1.0)

    raise InternalError("Peak magnitude not found after two windows")

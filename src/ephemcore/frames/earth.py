"""
ephemcore.frames.earth
----------------------
Earth rotation and the geodetic <-> geocentric mapping.

Sidereal time is apparent (GAST) and cached per Instant. Observer
positions use the oblate-ellipsoid model with the constants in
`core.constants`.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.constants import (
    ANGVEL,
    EARTH_EQUATORIAL_RADIUS_KM,
    EARTH_FLATTENING,
    EARTH_FLATTENING_SQUARED,
    EARTH_POLAR_RADIUS_KM,
    KM_PER_AU,
    SECONDS_PER_DAY,
)
from ..core.errors import NoConvergeError
from ..core.time import Instant
from ..core.types import Observer
from .matrix import PrecessDirection, rotate_xyz
from .nutation import earth_tilt, nutation_rotation
from .precession import precession_rotation

INVERSE_TERRA_ITER_LIMIT = 100

XYZ = Tuple[float, float, float]


def earth_rotation_angle(time: Instant) -> float:
    """ERA in degrees, [0, 360)."""
    thet1 = 0.7790572732640 + 0.00273781191135448 * time.ut
    thet3 = math.fmod(time.ut, 1.0)
    theta = 360.0 * math.fmod(thet1 + thet3, 1.0)
    if theta < 0.0:
        theta += 360.0
    return theta


def _compute_sidereal_time(time: Instant) -> float:
    t = time.tt / 36525.0
    eqeq = 15.0 * earth_tilt(time).ee
    theta = earth_rotation_angle(time)
    st = (eqeq + 0.014506 +
          ((((-0.0000000368 * t
              - 0.000029956) * t
              - 0.00000044) * t
              + 1.3915817) * t
              + 4612.156534) * t)
    gst = math.fmod(st / 3600.0 + theta, 360.0) / 15.0
    if gst < 0.0:
        gst += 24.0
    return gst


def sidereal_time(time: Instant) -> float:
    """Greenwich apparent sidereal time in sidereal hours, [0, 24)."""
    return time.derived("gast", _compute_sidereal_time)


def terra_posvel(observer: Observer, st: float) -> Tuple[XYZ, XYZ]:
    """
    Observer position (au) and velocity (au/day) in the Earth's true
    equator-of-date frame, given sidereal time `st` in hours.
    """
    phi = math.radians(observer.latitude)
    sinphi = math.sin(phi)
    cosphi = math.cos(phi)
    c = 1.0 / math.hypot(cosphi, sinphi * EARTH_FLATTENING)
    s = EARTH_FLATTENING_SQUARED * c
    ht_km = observer.height / 1000.0
    ach = EARTH_EQUATORIAL_RADIUS_KM * c + ht_km
    ash = EARTH_EQUATORIAL_RADIUS_KM * s + ht_km
    stlocl = math.radians(15.0 * st + observer.longitude)
    sinst = math.sin(stlocl)
    cosst = math.cos(stlocl)
    pos = (
        ach * cosphi * cosst / KM_PER_AU,
        ach * cosphi * sinst / KM_PER_AU,
        ash * sinphi / KM_PER_AU,
    )
    vel = (
        -ANGVEL * ach * cosphi * sinst * SECONDS_PER_DAY / KM_PER_AU,
        +ANGVEL * ach * cosphi * cosst * SECONDS_PER_DAY / KM_PER_AU,
        0.0,
    )
    return pos, vel


def terra(observer: Observer, st: float) -> XYZ:
    return terra_posvel(observer, st)[0]


def inverse_terra(ovec: XYZ, st: float) -> Observer:
    """Geodetic observer for an equator-of-date position `ovec` (au)."""
    x = ovec[0] * KM_PER_AU
    y = ovec[1] * KM_PER_AU
    z = ovec[2] * KM_PER_AU
    p = math.hypot(x, y)
    if p < 1.0e-6:
        # within 1 mm of a pole: longitude is arbitrary
        lon_deg = 0.0
        lat_deg = +90.0 if z > 0.0 else -90.0
        height_km = abs(z) - EARTH_POLAR_RADIUS_KM
        return Observer(lat_deg, lon_deg, 1000.0 * height_km)

    stlocl = math.atan2(y, x)
    lon_deg = math.degrees(stlocl) - 15.0 * st
    while lon_deg <= -180.0:
        lon_deg += 360.0
    while lon_deg > +180.0:
        lon_deg -= 360.0

    # Newton's method on W(lat), starting from the spherical-Earth latitude
    factor = (EARTH_FLATTENING_SQUARED - 1.0) * EARTH_EQUATORIAL_RADIUS_KM
    lat = math.atan2(z, p)
    for _ in range(INVERSE_TERRA_ITER_LIMIT):
        cos = math.cos(lat)
        sin = math.sin(lat)
        cos2 = cos * cos
        sin2 = sin * sin
        radicand = cos2 + EARTH_FLATTENING_SQUARED * sin2
        denom = math.sqrt(radicand)
        w = (factor * sin * cos) / denom - z * cos + p * sin
        if abs(w) < 1.0e-12:
            break
        dw = factor * ((cos2 - sin2) / denom - sin2 * cos2 * (EARTH_FLATTENING_SQUARED - 1.0) / (factor * radicand)) + z * sin + p * cos
        lat -= w / dw
    else:
        raise NoConvergeError("inverse_terra: latitude iteration did not converge")

    adjust = EARTH_EQUATORIAL_RADIUS_KM / denom
    if abs(sin) > abs(cos):
        height_km = z / sin - EARTH_FLATTENING_SQUARED * adjust
    else:
        height_km = p / cos - adjust
    return Observer(math.degrees(lat), lon_deg, 1000.0 * height_km)


def geo_pos(time: Instant, observer: Observer) -> XYZ:
    """Geocentric observer position in EQJ (au)."""
    pos = terra(observer, sidereal_time(time))
    pos = rotate_xyz(nutation_rotation(time, PrecessDirection.INTO_2000), pos)
    return rotate_xyz(precession_rotation(time, PrecessDirection.INTO_2000), pos)


def spin(angle: float, pos: XYZ) -> XYZ:
    """Rotate about the z axis by -`angle` degrees."""
    angr = math.radians(angle)
    cosang = math.cos(angr)
    sinang = math.sin(angr)
    return (
        +cosang * pos[0] + sinang * pos[1],
        -sinang * pos[0] + cosang * pos[1],
        pos[2],
    )


def observer_gravity(latitude: float, height: float) -> float:
    """
    Effective gravitational acceleration (m/s^2) at geodetic `latitude`
    (degrees) and `height` (metres), including centrifugal effects.
    """
    s = math.sin(math.radians(latitude))
    s2 = s * s
    g0 = 9.7803253359 * (1.0 + 0.00193185265241 * s2) / math.sqrt(1.0 - 0.00669437999013 * s2)
    return g0 * (1.0 - (3.15704e-07 - 2.10269e-09 * s2) * height + 7.37452e-14 * height * height)

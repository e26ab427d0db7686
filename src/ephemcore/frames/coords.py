"""
ephemcore.frames.coords
-----------------------
Spherical/rectangular conversions, ecliptic rotation and the horizontal
(alt/az) transform.
"""

from __future__ import annotations

import math
from typing import Sequence

from ..core.constants import HOUR2RAD, RAD2HOUR
from ..core.errors import BadVectorError
from ..core.time import Instant
from ..core.types import EclipticCoordinates, Equatorial, HorizontalCoordinates, Observer, Spherical, Vector
from .earth import sidereal_time, spin
from .refraction import Refraction, inverse_refraction_angle, refraction_angle

# mean obliquity of the J2000 ecliptic, radians
OBLIQUITY_J2000 = 0.40909260059599012


def angle_between(a: Vector, b: Vector) -> float:
    """Angle in degrees between two vectors."""
    r = a.length() * b.length()
    if r < 1.0e-8:
        raise BadVectorError()
    dot = a.dot(b) / r
    if dot <= -1.0:
        return 180.0
    if dot >= +1.0:
        return 0.0
    return math.degrees(math.acos(dot))


def vector_to_radec(pos: Sequence[float], time: Instant) -> Equatorial:
    xyproj = pos[0] * pos[0] + pos[1] * pos[1]
    dist = math.sqrt(xyproj + pos[2] * pos[2])
    if xyproj == 0.0:
        if pos[2] == 0.0:
            raise BadVectorError()
        ra = 0.0
        dec = -90.0 if pos[2] < 0.0 else +90.0
    else:
        ra = RAD2HOUR * math.atan2(pos[1], pos[0])
        if ra < 0:
            ra += 24
        dec = math.degrees(math.atan2(pos[2], math.sqrt(xyproj)))
    return Equatorial(ra, dec, dist, Vector(pos[0], pos[1], pos[2], time))


# ============================================================
# Sphere <-> vector
# ============================================================

def vector_from_sphere(sphere: Spherical, time: Instant) -> Vector:
    radlat = math.radians(sphere.lat)
    radlon = math.radians(sphere.lon)
    rcoslat = sphere.dist * math.cos(radlat)
    return Vector(rcoslat * math.cos(radlon), rcoslat * math.sin(radlon), sphere.dist * math.sin(radlat), time)


def sphere_from_vector(vector: Vector) -> Spherical:
    xyproj = vector.x * vector.x + vector.y * vector.y
    dist = math.sqrt(xyproj + vector.z * vector.z)
    if xyproj == 0.0:
        if vector.z == 0.0:
            raise BadVectorError("Zero-length vector not allowed.")
        lon = 0.0
        lat = -90.0 if vector.z < 0.0 else +90.0
    else:
        lon = math.degrees(math.atan2(vector.y, vector.x))
        if lon < 0.0:
            lon += 360.0
        lat = math.degrees(math.atan2(vector.z, math.sqrt(xyproj)))
    return Spherical(lat, lon, dist)


def equator_from_vector(vec: Vector) -> Equatorial:
    sphere = sphere_from_vector(vec)
    return Equatorial(sphere.lon / 15.0, sphere.lat, sphere.dist, vec)


def _toggle_azimuth_direction(az: float) -> float:
    az = 360.0 - az
    if az >= 360.0:
        az -= 360.0
    elif az < 0.0:
        az += 360.0
    return az


def vector_from_horizon(sphere: Spherical, time: Instant, refraction: Refraction) -> Vector:
    """
    HOR vector from (altitude, azimuth) where `sphere.lon` is azimuth
    measured clockwise from north; refraction is removed from the altitude.
    """
    lon = _toggle_azimuth_direction(sphere.lon)
    lat = sphere.lat + inverse_refraction_angle(refraction, sphere.lat)
    return vector_from_sphere(Spherical(lat, lon, sphere.dist), time)


def horizon_from_vector(vector: Vector, refraction: Refraction) -> Spherical:
    sphere = sphere_from_vector(vector)
    return Spherical(
        sphere.lat + refraction_angle(refraction, sphere.lat),
        _toggle_azimuth_direction(sphere.lon),
        sphere.dist,
    )


# ============================================================
# Ecliptic
# ============================================================

def rotate_equatorial_to_ecliptic(pos: Sequence[float], obliq_radians: float, time: Instant) -> EclipticCoordinates:
    cos_ob = math.cos(obliq_radians)
    sin_ob = math.sin(obliq_radians)
    ex = +pos[0]
    ey = +pos[1] * cos_ob + pos[2] * sin_ob
    ez = -pos[1] * sin_ob + pos[2] * cos_ob
    xyproj = math.hypot(ex, ey)
    if xyproj > 0.0:
        elon = math.degrees(math.atan2(ey, ex))
        if elon < 0.0:
            elon += 360.0
    else:
        elon = 0.0
    elat = math.degrees(math.atan2(ez, xyproj))
    return EclipticCoordinates(Vector(ex, ey, ez, time), elat, elon)


def ecliptic(equ: Vector) -> EclipticCoordinates:
    """EQJ vector -> J2000 mean ecliptic coordinates."""
    return rotate_equatorial_to_ecliptic((equ.x, equ.y, equ.z), OBLIQUITY_J2000, equ.t)


# ============================================================
# Horizon
# ============================================================

def horizon(time: Instant, observer: Observer, ra: float, dec: float, refraction: Refraction) -> HorizontalCoordinates:
    """
    Horizontal coordinates of a body at equator-of-date (`ra` hours, `dec`
    degrees). Azimuth is degrees east of north. With refraction, the
    returned RA/Dec are shifted to match the refracted altitude.
    """
    if not isinstance(refraction, Refraction):
        raise TypeError(f"refraction must be a Refraction, not {type(refraction).__name__}")

    latrad = math.radians(observer.latitude)
    lonrad = math.radians(observer.longitude)
    decrad = math.radians(dec)
    rarad = ra * HOUR2RAD

    sinlat = math.sin(latrad)
    coslat = math.cos(latrad)
    sinlon = math.sin(lonrad)
    coslon = math.cos(lonrad)
    sindc = math.sin(decrad)
    cosdc = math.cos(decrad)
    sinra = math.sin(rarad)
    cosra = math.cos(rarad)

    # zenith, north and west unit vectors, before Earth rotation
    uze = (coslat * coslon, coslat * sinlon, sinlat)
    une = (-sinlat * coslon, -sinlat * sinlon, coslat)
    uwe = (sinlon, -coslon, 0.0)

    angle = -15.0 * sidereal_time(time)
    uz = spin(angle, uze)
    un = spin(angle, une)
    uw = spin(angle, uwe)

    p = (cosdc * cosra, cosdc * sinra, sindc)

    pz = p[0] * uz[0] + p[1] * uz[1] + p[2] * uz[2]
    pn = p[0] * un[0] + p[1] * un[1] + p[2] * un[2]
    pw = p[0] * uw[0] + p[1] * uw[1] + p[2] * uw[2]

    proj = math.hypot(pn, pw)
    if proj > 0.0:
        az = math.degrees(-math.atan2(pw, pn))
        if az < 0:
            az += 360
    else:
        az = 0.0

    zd = math.degrees(math.atan2(proj, pz))
    hor_ra = ra
    hor_dec = dec

    if refraction is not Refraction.AIRLESS:
        zd0 = zd
        refr = refraction_angle(refraction, 90.0 - zd)
        zd -= refr
        if refr > 0.0 and zd > 3.0e-4:
            zdrad = math.radians(zd)
            sinzd = math.sin(zdrad)
            coszd = math.cos(zdrad)
            zd0rad = math.radians(zd0)
            sinzd0 = math.sin(zd0rad)
            coszd0 = math.cos(zd0rad)

            pr = [((p[j] - coszd0 * uz[j]) / sinzd0) * sinzd + uz[j] * coszd for j in range(3)]
            proj = math.hypot(pr[0], pr[1])
            if proj > 0:
                hor_ra = RAD2HOUR * math.atan2(pr[1], pr[0])
                if hor_ra < 0:
                    hor_ra += 24
            else:
                hor_ra = 0.0
            hor_dec = math.degrees(math.atan2(pr[2], proj))

    return HorizontalCoordinates(az, 90.0 - zd, hor_ra, hor_dec)

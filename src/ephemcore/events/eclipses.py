"""
ephemcore.events.eclipses
-------------------------
Lunar eclipses, global solar eclipses and solar eclipses seen from one
observer.

Each search walks consecutive full (lunar) or new (solar) moons, prunes
those whose ecliptic latitude rules out an eclipse, and examines the shadow
geometry at closest approach.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.bodies import Body
from ..core.constants import (
    EARTH_EQUATORIAL_RADIUS_KM,
    EARTH_FLATTENING,
    EARTH_FLATTENING_SQUARED,
    EARTH_MEAN_RADIUS_KM,
    KM_PER_AU,
    MOON_MEAN_RADIUS_KM,
    MOON_POLAR_RADIUS_AU,
    MOON_POLAR_RADIUS_KM,
    SUN_RADIUS_AU,
)
from ..core.errors import InternalError, InvalidArgumentError
from ..core.time import Instant
from ..core.types import Observer, Vector
from ..engines import lunar
from ..engines._solver import search
from ..frames.coords import angle_between, horizon
from ..frames.earth import sidereal_time
from ..frames.matrix import inverse_rotation, rotate_vector
from ..frames.refraction import Refraction
from ..frames.rotation import rotation_eqj_eqd
from ..positions import equator
from .lunar_phase import search_moon_phase
from .shadow import (
    ShadowInfo,
    calc_shadow,
    earth_shadow,
    local_moon_shadow,
    peak_earth_shadow,
    peak_local_moon_shadow,
    peak_moon_shadow,
)

logger = logging.getLogger(__name__)

# Moon's ecliptic latitude (degrees) beyond which no eclipse is possible
PRUNE_LATITUDE = 1.8

GLOBAL_LUNATION_LIMIT = 12
LOCAL_LUNATION_LIMIT = 1000

# Umbra radius (km) above which an eclipse counts as total rather than
# annular; matches Espenak's published eclipse data.
UMBRA_BIAS_KM = 0.014


class EclipseKind(enum.Enum):
    INVALID = 0
    PENUMBRAL = 1
    PARTIAL = 2
    ANNULAR = 3
    TOTAL = 4


@dataclass(frozen=True)
class LunarEclipseInfo:
    """
    Semi-durations are in minutes (0 when the phase does not occur);
    obscuration is the fraction of the Moon's disc inside the umbra.
    """
    kind: EclipseKind
    obscuration: float
    peak: Instant
    sd_penum: float
    sd_partial: float
    sd_total: float


@dataclass(frozen=True)
class GlobalSolarEclipseInfo:
    """
    `latitude`/`longitude` locate the peak on the Earth's surface; they are
    NaN and `obscuration` is None for a partial eclipse.
    """
    kind: EclipseKind
    obscuration: Optional[float]
    peak: Instant
    distance: float
    latitude: float
    longitude: float


@dataclass(frozen=True)
class EclipseEvent:
    time: Instant
    altitude: float     # apparent altitude of the Sun, degrees


@dataclass(frozen=True)
class LocalSolarEclipseInfo:
    kind: EclipseKind
    obscuration: float
    partial_begin: EclipseEvent
    total_begin: Optional[EclipseEvent]
    peak: EclipseEvent
    total_end: Optional[EclipseEvent]
    partial_end: EclipseEvent


def _moon_ecliptic_latitude_degrees(time: Instant) -> float:
    return math.degrees(lunar.calc_moon(time.tt).lat)


def _eclipse_kind_from_umbra(k: float) -> EclipseKind:
    if k > UMBRA_BIAS_KM:
        return EclipseKind.TOTAL
    return EclipseKind.ANNULAR


# ============================================================
# Disc overlap
# ============================================================

def obscuration(a: float, b: float, c: float) -> float:
    """
    Fraction of a disc of radius `a` covered by a disc of radius `b` whose
    center is `c` away.
    """
    if a <= 0.0:
        raise InvalidArgumentError("Radius of first disc must be positive.")
    if b <= 0.0:
        raise InvalidArgumentError("Radius of second disc must be positive.")
    if c < 0.0:
        raise InvalidArgumentError("Distance between discs is not allowed to be negative.")

    if c >= a + b:
        return 0.0

    if c == 0.0:
        return 1.0 if a <= b else (b * b) / (a * a)

    x = (a * a - b * b + c * c) / (2.0 * c)
    radicand = a * a - x * x
    if radicand <= 0.0:
        # one disc inside the other
        return 1.0 if a <= b else (b * b) / (a * a)

    y = math.sqrt(radicand)
    lens1 = a * a * math.acos(x / a) - x * y
    lens2 = b * b * math.acos((c - x) / b) - (c - x) * y
    return (lens1 + lens2) / (math.pi * a * a)


def _solar_eclipse_obscuration(hm: Vector, lo: Vector) -> float:
    """hm: heliocentric Moon; lo: lunacentric observer."""
    ho = hm + lo
    sun_radius = math.asin(SUN_RADIUS_AU / ho.length())
    moon_radius = math.asin(MOON_POLAR_RADIUS_AU / lo.length())
    separation = math.radians(angle_between(lo, ho))
    # never called for total eclipses, so stay below 1
    return min(0.9999, obscuration(sun_radius, moon_radius, separation))


# ============================================================
# Lunar eclipses
# ============================================================

def _shadow_semi_duration_minutes(center: Instant, radius_limit: float, window_minutes: float) -> float:
    window = window_minutes / (24.0 * 60.0)

    def diff(direction: float) -> Callable[[Instant], float]:
        return lambda t: direction * (earth_shadow(t).r - radius_limit)

    t1 = search(diff(-1.0), center.add_days(-window), center, 1.0)
    t2 = search(diff(+1.0), center, center.add_days(+window), 1.0)
    if t1 is None or t2 is None:
        raise InternalError("Failed to find shadow semi-duration")
    return (t2.ut - t1.ut) * ((24.0 * 60.0) / 2.0)


def search_lunar_eclipse(start: Instant) -> LunarEclipseInfo:
    """First lunar eclipse (penumbral or deeper) after `start`."""
    fmtime = start
    for _ in range(GLOBAL_LUNATION_LIMIT):
        fullmoon = search_moon_phase(180.0, fmtime, 40.0)
        if fullmoon is None:
            raise InternalError("Cannot find the next full moon")

        if abs(_moon_ecliptic_latitude_degrees(fullmoon)) < PRUNE_LATITUDE:
            shadow = peak_earth_shadow(fullmoon)
            logger.debug("Full moon %s: shadow r=%.1f k=%.1f p=%.1f km", fullmoon, shadow.r, shadow.k, shadow.p)
            if shadow.r < shadow.p + MOON_MEAN_RADIUS_KM:
                kind = EclipseKind.PENUMBRAL
                obsc = 0.0
                sd_total = 0.0
                sd_partial = 0.0
                sd_penum = _shadow_semi_duration_minutes(shadow.time, shadow.p + MOON_MEAN_RADIUS_KM, 200.0)

                if shadow.r < shadow.k + MOON_MEAN_RADIUS_KM:
                    kind = EclipseKind.PARTIAL
                    sd_partial = _shadow_semi_duration_minutes(shadow.time, shadow.k + MOON_MEAN_RADIUS_KM, sd_penum)

                    if shadow.r + MOON_MEAN_RADIUS_KM < shadow.k:
                        kind = EclipseKind.TOTAL
                        obsc = 1.0
                        sd_total = _shadow_semi_duration_minutes(shadow.time, shadow.k - MOON_MEAN_RADIUS_KM, sd_partial)
                    else:
                        obsc = obscuration(MOON_MEAN_RADIUS_KM, shadow.k, shadow.r)

                return LunarEclipseInfo(kind, obsc, shadow.time, sd_penum, sd_partial, sd_total)

        fmtime = fullmoon.add_days(10.0)

    raise InternalError(f"Failed to find lunar eclipse within {GLOBAL_LUNATION_LIMIT} full moons")


def next_lunar_eclipse(prev_peak: Instant) -> LunarEclipseInfo:
    return search_lunar_eclipse(prev_peak.add_days(10.0))


# ============================================================
# Global solar eclipses
# ============================================================

def _geoid_intersect(shadow: ShadowInfo) -> GlobalSolarEclipseInfo:
    kind = EclipseKind.PARTIAL
    peak = shadow.time
    distance = shadow.r
    latitude = longitude = math.nan
    obsc: Optional[float] = None

    # work in EQD so the geoid is aligned with the equator of date
    rot = rotation_eqj_eqd(shadow.time)
    v = rotate_vector(rot, shadow.dir)
    e = rotate_vector(rot, shadow.target)

    # km, with z dilated so the geoid becomes a sphere
    vx, vy, vz = v.x * KM_PER_AU, v.y * KM_PER_AU, v.z * KM_PER_AU / EARTH_FLATTENING
    ex, ey, ez = e.x * KM_PER_AU, e.y * KM_PER_AU, e.z * KM_PER_AU / EARTH_FLATTENING

    radius = EARTH_EQUATORIAL_RADIUS_KM
    a = vx * vx + vy * vy + vz * vz
    b = -2.0 * (vx * ex + vy * ey + vz * ez)
    c = (ex * ex + ey * ey + ez * ez) - radius * radius
    radic = b * b - 4 * a * c

    if radic > 0.0:
        # nearer root: the day side
        u = (-b - math.sqrt(radic)) / (2 * a)

        px = u * vx - ex
        py = u * vy - ey
        pz = (u * vz - ez) * EARTH_FLATTENING

        proj = math.hypot(px, py) * EARTH_FLATTENING_SQUARED
        if proj == 0.0:
            latitude = +90.0 if pz > 0.0 else -90.0
        else:
            latitude = math.degrees(math.atan(pz / proj))

        gast = sidereal_time(peak)
        longitude = math.fmod(math.degrees(math.atan2(py, px)) - 15 * gast, 360.0)
        if longitude <= -180.0:
            longitude += 360.0
        elif longitude > +180.0:
            longitude -= 360.0

        # lunacentric EQJ position of the surface point
        o = rotate_vector(inverse_rotation(rot), Vector(px / KM_PER_AU, py / KM_PER_AU, pz / KM_PER_AU, shadow.time))
        o = o + shadow.target

        surface = calc_shadow(MOON_POLAR_RADIUS_KM, shadow.time, o, shadow.dir)
        if surface.r > 1.0e-9 or surface.r < 0.0:
            raise InternalError(f"Unexpected shadow distance from geoid intersection = {surface.r}")

        kind = _eclipse_kind_from_umbra(surface.k)
        obsc = 1.0 if kind == EclipseKind.TOTAL else _solar_eclipse_obscuration(shadow.dir, o)

    return GlobalSolarEclipseInfo(kind, obsc, peak, distance, latitude, longitude)


def search_global_solar_eclipse(start: Instant) -> GlobalSolarEclipseInfo:
    """First solar eclipse visible anywhere on Earth after `start`."""
    nmtime = start
    for _ in range(GLOBAL_LUNATION_LIMIT):
        newmoon = search_moon_phase(0.0, nmtime, 40.0)
        if newmoon is None:
            raise InternalError("Cannot find the next new moon")

        if abs(_moon_ecliptic_latitude_degrees(newmoon)) < PRUNE_LATITUDE:
            shadow = peak_moon_shadow(newmoon)
            if shadow.r < shadow.p + EARTH_MEAN_RADIUS_KM:
                return _geoid_intersect(shadow)

        nmtime = newmoon.add_days(10.0)

    raise InternalError(f"Failed to find solar eclipse within {GLOBAL_LUNATION_LIMIT} new moons")


def next_global_solar_eclipse(prev_peak: Instant) -> GlobalSolarEclipseInfo:
    return search_global_solar_eclipse(prev_peak.add_days(10.0))


# ============================================================
# Local solar eclipses
# ============================================================

def _sun_altitude(time: Instant, observer: Observer) -> float:
    equ = equator(Body.SUN, time, observer, True, True)
    return horizon(time, observer, equ.ra, equ.dec, Refraction.NORMAL).altitude


def _calc_event(observer: Observer, time: Instant) -> EclipseEvent:
    return EclipseEvent(time, _sun_altitude(time, observer))


def _local_partial_distance(shadow: ShadowInfo) -> float:
    return shadow.p - shadow.r


def _local_total_distance(shadow: ShadowInfo) -> float:
    # |k| covers annular eclipses, where k < 0
    return abs(shadow.k) - shadow.r


def _local_eclipse_transition(
    observer: Observer,
    direction: float,
    func: Callable[[ShadowInfo], float],
    t1: Instant,
    t2: Instant,
) -> EclipseEvent:
    def transition(t: Instant) -> float:
        return direction * func(local_moon_shadow(t, observer))

    tx = search(transition, t1, t2, 1.0)
    if tx is None:
        raise InternalError("Local eclipse transition search failed")
    return _calc_event(observer, tx)


def _local_eclipse(shadow: ShadowInfo, observer: Observer) -> LocalSolarEclipseInfo:
    partial_window = 0.2
    total_window = 0.01
    peak = _calc_event(observer, shadow.time)
    t1 = shadow.time.add_days(-partial_window)
    t2 = shadow.time.add_days(+partial_window)
    partial_begin = _local_eclipse_transition(observer, +1.0, _local_partial_distance, t1, shadow.time)
    partial_end = _local_eclipse_transition(observer, -1.0, _local_partial_distance, shadow.time, t2)

    total_begin: Optional[EclipseEvent] = None
    total_end: Optional[EclipseEvent] = None
    if shadow.r < abs(shadow.k):
        t1 = shadow.time.add_days(-total_window)
        t2 = shadow.time.add_days(+total_window)
        total_begin = _local_eclipse_transition(observer, +1.0, _local_total_distance, t1, shadow.time)
        total_end = _local_eclipse_transition(observer, -1.0, _local_total_distance, shadow.time, t2)
        kind = _eclipse_kind_from_umbra(shadow.k)
    else:
        kind = EclipseKind.PARTIAL

    obsc = 1.0 if kind == EclipseKind.TOTAL else _solar_eclipse_obscuration(shadow.dir, shadow.target)
    return LocalSolarEclipseInfo(kind, obsc, partial_begin, total_begin, peak, total_end, partial_end)


def search_local_solar_eclipse(start: Instant, observer: Observer) -> LocalSolarEclipseInfo:
    """
    First solar eclipse after `start` seen by `observer` with the Sun above
    the horizon at its beginning or end.
    """
    nmtime = start
    for _ in range(LOCAL_LUNATION_LIMIT):
        newmoon = search_moon_phase(0.0, nmtime, 40.0)
        if newmoon is None:
            raise InternalError("Cannot find the next new moon")

        if abs(_moon_ecliptic_latitude_degrees(newmoon)) < PRUNE_LATITUDE:
            shadow = peak_local_moon_shadow(newmoon, observer)
            if shadow.r < shadow.p:
                eclipse = _local_eclipse(shadow, observer)
                if eclipse.partial_begin.altitude > 0.0 or eclipse.partial_end.altitude > 0.0:
                    return eclipse
                logger.debug("Skipping eclipse at %s: Sun below horizon for %s", newmoon, observer)

        nmtime = newmoon.add_days(10.0)

    raise InternalError(f"No local solar eclipse within {LOCAL_LUNATION_LIMIT} new moons")


def next_local_solar_eclipse(prev_peak: Instant, observer: Observer) -> LocalSolarEclipseInfo:
    return search_local_solar_eclipse(prev_peak.add_days(10.0), observer)

"""
ephemcore.events.shadow
-----------------------
Shadow-cone geometry shared by eclipse and transit searches.

A shadow is described in the plane through the target perpendicular to the
Sun -> caster direction: ``r`` is the target's distance from the shadow
axis, ``k`` and ``p`` the umbra and penumbra radii there (all km).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from ..core.bodies import Body
from ..core.constants import EARTH_ECLIPSE_RADIUS_KM, KM_PER_AU, MOON_MEAN_RADIUS_KM, SUN_RADIUS_KM
from ..core.errors import InternalError
from ..core.time import Instant
from ..core.types import Observer, Vector
from ..engines._solver import search
from ..frames.earth import geo_pos
from ..positions import geo_moon, geo_vector


@dataclass(frozen=True)
class ShadowInfo:
    time: Instant
    u: float        # position of the shadow plane along `dir`, in units of |dir|
    r: float        # km from the target to the shadow axis
    k: float        # umbra radius, km (negative beyond the umbra's apex)
    p: float        # penumbra radius, km
    target: Vector  # caster -> target
    dir: Vector     # Sun -> caster


ShadowFunc = Callable[[Instant], ShadowInfo]


def calc_shadow(body_radius_km: float, time: Instant, target: Vector, sdir: Vector) -> ShadowInfo:
    u = sdir.dot(target) / sdir.dot(sdir)
    dx = u * sdir.x - target.x
    dy = u * sdir.y - target.y
    dz = u * sdir.z - target.z
    r = KM_PER_AU * math.sqrt(dx * dx + dy * dy + dz * dz)
    k = +SUN_RADIUS_KM - (1.0 + u) * (SUN_RADIUS_KM - body_radius_km)
    p = -SUN_RADIUS_KM + (1.0 + u) * (SUN_RADIUS_KM + body_radius_km)
    return ShadowInfo(time, u, r, k, p, target, sdir)


def earth_shadow(time: Instant) -> ShadowInfo:
    """Earth's shadow at the Moon's distance."""
    s = geo_vector(Body.SUN, time, True)
    m = geo_moon(time)
    return calc_shadow(EARTH_ECLIPSE_RADIUS_KM, time, m, -s)


def moon_shadow(time: Instant) -> ShadowInfo:
    """Moon's shadow at the Earth's center."""
    s = geo_vector(Body.SUN, time, True)
    m = geo_moon(time)
    return calc_shadow(MOON_MEAN_RADIUS_KM, time, -m, m - s)


def local_moon_shadow(time: Instant, observer: Observer) -> ShadowInfo:
    """Moon's shadow at a surface observer."""
    pos = geo_pos(time, observer)
    s = geo_vector(Body.SUN, time, True)
    m = geo_moon(time)
    lo = Vector(pos[0] - m.x, pos[1] - m.y, pos[2] - m.z, time)
    return calc_shadow(MOON_MEAN_RADIUS_KM, time, lo, m - s)


def planet_shadow(body: Body, planet_radius_km: float, time: Instant) -> ShadowInfo:
    """Shadow of a planet at the Earth's center (transits)."""
    p = geo_vector(body, time, True)
    s = geo_vector(Body.SUN, time, True)
    return calc_shadow(planet_radius_km, time, -p, p - s)


def shadow_distance_slope(shadow_func: ShadowFunc, time: Instant) -> float:
    """d(r)/dt by symmetric difference over +/- 1 second."""
    dt = 1.0 / 86400.0
    shadow1 = shadow_func(time.add_days(-dt))
    shadow2 = shadow_func(time.add_days(+dt))
    return (shadow2.r - shadow1.r) / dt


def peak_shadow(shadow_func: ShadowFunc, center: Instant, window: float) -> ShadowInfo:
    """Shadow at the time of closest approach within +/- `window` days of `center`."""
    tx = search(lambda t: shadow_distance_slope(shadow_func, t), center.add_days(-window), center.add_days(+window), 1.0)
    if tx is None:
        raise InternalError(f"Failed to find peak shadow near {center}")
    return shadow_func(tx)


def peak_earth_shadow(center: Instant) -> ShadowInfo:
    return peak_shadow(earth_shadow, center, 0.03)


def peak_moon_shadow(center: Instant) -> ShadowInfo:
    return peak_shadow(moon_shadow, center, 0.03)


def peak_local_moon_shadow(center: Instant, observer: Observer) -> ShadowInfo:
    return peak_shadow(lambda t: local_moon_shadow(t, observer), center, 0.2)


def peak_planet_shadow(body: Body, planet_radius_km: float, center: Instant) -> ShadowInfo:
    # one day either side of inferior conjunction
    return peak_shadow(lambda t: planet_shadow(body, planet_radius_km, t), center, 1.0)

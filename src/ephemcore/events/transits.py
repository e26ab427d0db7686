"""
ephemcore.events.transits
-------------------------
Transits of Mercury and Venus across the Sun, seen from the Earth's center.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.bodies import Body
from ..core.constants import MERCURY_RADIUS_KM, VENUS_RADIUS_KM
from ..core.errors import InternalError, InvalidBodyError
from ..core.time import Instant
from ..engines._solver import search
from ..positions import angle_from_sun
from .elongation import search_relative_longitude
from .shadow import peak_planet_shadow, planet_shadow

logger = logging.getLogger(__name__)

_PLANET_RADIUS_KM = {
    Body.MERCURY: MERCURY_RADIUS_KM,
    Body.VENUS: VENUS_RADIUS_KM,
}

# separation from the Sun (degrees) at conjunction below which a transit is possible
THRESHOLD_ANGLE = 0.4

# inferior conjunctions examined per search; transits of Venus can be
# more than a century apart
CONJUNCTION_LIMIT = 200


@dataclass(frozen=True)
class TransitInfo:
    """`separation` is the minimum planet-Sun angular separation, arcminutes."""
    start: Instant
    peak: Instant
    finish: Instant
    separation: float


def _transit_boundary(body: Body, planet_radius_km: float, t1: Instant, t2: Instant, direction: float) -> Instant:
    def boundary(t: Instant) -> float:
        shadow = planet_shadow(body, planet_radius_km, t)
        return direction * (shadow.r - shadow.p)

    tx = search(boundary, t1, t2, 1.0)
    if tx is None:
        raise InternalError("Planet transit boundary search failed")
    return tx


def search_transit(body: Body, start: Instant) -> TransitInfo:
    if body not in _PLANET_RADIUS_KM:
        raise InvalidBodyError(body)
    planet_radius_km = _PLANET_RADIUS_KM[body]
    dt_days = 1.0

    search_time = start
    for _ in range(CONJUNCTION_LIMIT):
        conj = search_relative_longitude(body, 0.0, search_time)
        if angle_from_sun(body, conj) < THRESHOLD_ANGLE:
            shadow = peak_planet_shadow(body, planet_radius_km, conj)
            logger.debug("%s conjunction %s: r=%.1f p=%.1f km", body.name, conj, shadow.r, shadow.p)
            if shadow.r < shadow.p:
                t_start = _transit_boundary(body, planet_radius_km, shadow.time.add_days(-dt_days), shadow.time, -1.0)
                t_finish = _transit_boundary(body, planet_radius_km, shadow.time, shadow.time.add_days(+dt_days), +1.0)
                min_separation = 60.0 * angle_from_sun(body, shadow.time)
                return TransitInfo(t_start, shadow.time, t_finish, min_separation)
        search_time = conj.add_days(10.0)

    raise InternalError(f"No transit of {body.name} within {CONJUNCTION_LIMIT} inferior conjunctions")


def next_transit(body: Body, prev_peak: Instant) -> TransitInfo:
    return search_transit(body, prev_peak.add_days(100.0))

"""
ephemcore.events.elongation
---------------------------
Elongation from the Sun, heliocentric relative longitude and greatest
elongation of Mercury and Venus.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..core.angles import longitude_offset
from ..core.bodies import Body, is_superior_planet, synodic_period
from ..core.constants import SECONDS_PER_DAY
from ..core.errors import EarthNotAllowedError, InternalError, InvalidBodyError, NoConvergeError
from ..core.time import Instant
from ..engines._solver import search
from ..positions import angle_from_sun, ecliptic_longitude, pair_longitude

RELATIVE_LONGITUDE_ITER_LIMIT = 100

# relative-longitude windows (degrees) that bracket greatest elongation
_MAX_ELONGATION_WINDOWS = {
    Body.MERCURY: (50.0, 85.0),
    Body.VENUS: (40.0, 50.0),
}


@enum.unique
class Visibility(enum.Enum):
    MORNING = 0
    EVENING = 1


@dataclass(frozen=True)
class ElongationEvent:
    """
    `elongation` is the Sun-Earth-body angle; `ecliptic_separation` the
    difference in ecliptic longitude, both in degrees.
    """
    time: Instant
    visibility: Visibility
    elongation: float
    ecliptic_separation: float


def elongation(body: Body, time: Instant) -> ElongationEvent:
    angle = pair_longitude(body, Body.SUN, time)
    if angle > 180.0:
        visibility = Visibility.MORNING
        esep = 360.0 - angle
    else:
        visibility = Visibility.EVENING
        esep = angle
    return ElongationEvent(time, visibility, angle_from_sun(body, time), esep)


def _rlon_offset(body: Body, time: Instant, direction: int, target_rel_lon: float) -> float:
    plon = ecliptic_longitude(body, time)
    elon = ecliptic_longitude(Body.EARTH, time)
    return longitude_offset(direction * (elon - plon) - target_rel_lon)


def search_relative_longitude(body: Body, target_rel_lon: float, start: Instant) -> Instant:
    """
    Next time the heliocentric ecliptic longitudes of Earth and `body`
    differ by `target_rel_lon` degrees (0 = inferior conjunction for an
    inner planet, opposition for an outer one).
    """
    if body == Body.EARTH:
        raise EarthNotAllowedError()
    if body in (Body.MOON, Body.SUN):
        raise InvalidBodyError(body)

    syn = synodic_period(body)
    direction = +1 if is_superior_planet(body) else -1

    # negative error: we are behind the target, so search forward
    error_angle = _rlon_offset(body, start, direction, target_rel_lon)
    if error_angle > 0.0:
        error_angle -= 360.0

    time = start
    for _ in range(RELATIVE_LONGITUDE_ITER_LIMIT):
        day_adjust = (-error_angle / 360.0) * syn
        time = time.add_days(day_adjust)
        if abs(day_adjust) * SECONDS_PER_DAY < 1.0:
            return time
        prev_angle = error_angle
        error_angle = _rlon_offset(body, time, direction, target_rel_lon)
        if abs(prev_angle) < 30.0 and prev_angle != error_angle:
            # rescale the period to the local relative speed (eccentric orbits)
            ratio = prev_angle / (prev_angle - error_angle)
            if 0.5 < ratio < 2.0:
                syn *= ratio
    raise NoConvergeError(f"Relative longitude search for {body.name} did not converge")


def _neg_elong_slope(body: Body, time: Instant) -> float:
    dt = 0.1
    e1 = angle_from_sun(body, time.add_days(-dt / 2.0))
    e2 = angle_from_sun(body, time.add_days(+dt / 2.0))
    return (e1 - e2) / dt


def search_max_elongation(body: Body, start: Instant) -> ElongationEvent:
    """Next greatest elongation of Mercury or Venus."""
    if body not in _MAX_ELONGATION_WINDOWS:
        raise InvalidBodyError(body)
    s1, s2 = _MAX_ELONGATION_WINDOWS[body]
    syn = synodic_period(body)

    for _ in range(2):
        plon = ecliptic_longitude(body, start)
        elon = ecliptic_longitude(Body.EARTH, start)
        rlon = longitude_offset(plon - elon)

        # the slope has cusps near 0 and 180 degrees, so bracket inside a window
        if -s1 <= rlon < +s1:
            adjust_days = 0.0
            rlon_lo, rlon_hi = +s1, +s2
        elif rlon > +s2 or rlon < -s2:
            adjust_days = 0.0
            rlon_lo, rlon_hi = -s2, -s1
        elif rlon >= 0.0:
            adjust_days = -syn / 4.0
            rlon_lo, rlon_hi = +s1, +s2
        else:
            adjust_days = -syn / 4.0
            rlon_lo, rlon_hi = -s2, -s1

        t1 = search_relative_longitude(body, rlon_lo, start.add_days(adjust_days))
        t2 = search_relative_longitude(body, rlon_hi, t1)

        if _neg_elong_slope(body, t1) >= 0.0:
            raise InternalError("Greatest elongation bracket: slope at start is not negative")
        if _neg_elong_slope(body, t2) <= 0.0:
            raise InternalError("Greatest elongation bracket: slope at end is not positive")

        tx = search(lambda t: _neg_elong_slope(body, t), t1, t2, 10.0)
        if tx is None:
            raise InternalError("Greatest elongation search failed inside its bracket")

        if tx.tt >= start.tt:
            return elongation(body, tx)

        # event precedes `start`; try the next window
        start = t2.add_days(1.0)

    raise InternalError(f"Greatest elongation of {body.name} not found after two windows")

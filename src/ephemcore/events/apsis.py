"""
ephemcore.events.apsis
----------------------
Perigee/apogee of the Moon and perihelion/aphelion of the planets.

Apsides are found where the derivative of distance changes sign. Neptune
and Pluto are sampled by brute force instead: solar wobble about the
barycenter (Neptune) and high-frequency terms in the integrated states
(Pluto) leave several local extrema near each apsis.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable

from ..core.bodies import Body, planet_orbital_period
from ..core.constants import KM_PER_AU, MEAN_SYNODIC_MONTH
from ..core.errors import InternalError, InvalidArgumentError
from ..core.time import Instant
from ..engines._solver import search
from ..engines.lunar import calc_moon
from ..positions import helio_distance

LUNAR_STEP_DAYS = 5.0
LUNAR_SKIP_DAYS = 11.0
_SLOPE_DT = 0.001


@enum.unique
class ApsisKind(enum.Enum):
    PERICENTER = 0
    APOCENTER = 1
    INVALID = 2


@dataclass(frozen=True)
class Apsis:
    time: Instant
    kind: ApsisKind
    dist_au: float
    dist_km: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "dist_km", self.dist_au * KM_PER_AU)


def _moon_distance(time: Instant) -> float:
    return calc_moon(time.tt).distance_au


def _distance_slope(distance: Callable[[Instant], float], direction: float, time: Instant) -> float:
    d1 = distance(time.add_days(-_SLOPE_DT / 2.0))
    d2 = distance(time.add_days(+_SLOPE_DT / 2.0))
    return direction * (d2 - d1) / _SLOPE_DT


def _scan_for_apsis(distance: Callable[[Instant], float], start: Instant, increment: float, span: float) -> Apsis:
    """Step forward until the distance slope changes sign, then refine."""
    t1 = start
    m1 = _distance_slope(distance, +1.0, t1)
    steps = 0
    while steps * increment < span:
        t2 = t1.add_days(increment)
        m2 = _distance_slope(distance, +1.0, t2)
        if m1 * m2 <= 0.0:
            if m1 < 0.0 or m2 > 0.0:
                direction, kind = +1.0, ApsisKind.PERICENTER
            elif m1 > 0.0 or m2 < 0.0:
                direction, kind = -1.0, ApsisKind.APOCENTER
            else:
                raise InternalError("Both distance slopes are zero")
            apsis_time = search(lambda t: _distance_slope(distance, direction, t), t1, t2, 1.0)
            if apsis_time is None:
                raise InternalError("Apsis search failed inside its bracket")
            return Apsis(apsis_time, kind, distance(apsis_time))
        t1, m1 = t2, m2
        steps += 1
    raise InternalError(f"No apsis within {span:.0f} days of {start}")


def _check_kind(apsis: Apsis) -> None:
    if apsis.kind not in (ApsisKind.PERICENTER, ApsisKind.APOCENTER):
        raise InvalidArgumentError(f"Invalid apsis kind: {apsis.kind}")


def _check_alternates(prev: Apsis, found: Apsis) -> Apsis:
    if found.kind.value + prev.kind.value != 1:
        raise InternalError(f"Expected the opposite apsis after {prev.kind.name}, found {found.kind.name}")
    return found


# ====
# Moon
# ====

def search_lunar_apsis(start: Instant) -> Apsis:
    """First perigee or apogee after `start`."""
    return _scan_for_apsis(_moon_distance, start, LUNAR_STEP_DAYS, 2.0 * MEAN_SYNODIC_MONTH)


def next_lunar_apsis(apsis: Apsis) -> Apsis:
    _check_kind(apsis)
    return _check_alternates(apsis, search_lunar_apsis(apsis.time.add_days(LUNAR_SKIP_DAYS)))


# =======
# Planets
# =======

def _planet_extreme(body: Body, kind: ApsisKind, start: Instant, dayspan: float) -> Apsis:
    direction = +1.0 if kind is ApsisKind.APOCENTER else -1.0
    npoints = 10
    while True:
        interval = dayspan / (npoints - 1)
        if interval < 1.0 / 1440.0:
            apsis_time = start.add_days(interval / 2.0)
            return Apsis(apsis_time, kind, helio_distance(body, apsis_time))
        best_i = 0
        best_dist = None
        for i in range(npoints):
            dist = direction * helio_distance(body, start.add_days(i * interval))
            if best_dist is None or dist > best_dist:
                best_i, best_dist = i, dist
        start = start.add_days((best_i - 1) * interval)
        dayspan = 2.0 * interval


def _brute_search_planet_apsis(body: Body, start: Instant) -> Apsis:
    # rewind ~30 degrees of orbit, sample 270 degrees ahead
    period = planet_orbital_period(body)
    t1 = start.add_days(period * (-30.0 / 360.0))
    t2 = start.add_days(period * (+270.0 / 360.0))
    npoints = 100
    interval = (t2.ut - t1.ut) / (npoints - 1)

    t_min = t_max = t1
    min_dist = max_dist = helio_distance(body, t1)
    for i in range(1, npoints):
        time = t1.add_days(i * interval)
        dist = helio_distance(body, time)
        if dist > max_dist:
            max_dist, t_max = dist, time
        if dist < min_dist:
            min_dist, t_min = dist, time

    perihelion = _planet_extreme(body, ApsisKind.PERICENTER, t_min.add_days(-2 * interval), 4 * interval)
    aphelion = _planet_extreme(body, ApsisKind.APOCENTER, t_max.add_days(-2 * interval), 4 * interval)
    if perihelion.time.tt >= start.tt:
        if start.tt <= aphelion.time.tt < perihelion.time.tt:
            return aphelion
        return perihelion
    if aphelion.time.tt >= start.tt:
        return aphelion
    raise InternalError(f"Brute-force apsis search for {body.name} failed")


def search_planet_apsis(body: Body, start: Instant) -> Apsis:
    """First perihelion or aphelion of `body` after `start`."""
    if body in (Body.NEPTUNE, Body.PLUTO):
        return _brute_search_planet_apsis(body, start)
    period = planet_orbital_period(body)
    return _scan_for_apsis(lambda t: helio_distance(body, t), start, period / 6.0, 2.0 * period)


def next_planet_apsis(body: Body, apsis: Apsis) -> Apsis:
    _check_kind(apsis)
    skip = 0.25 * planet_orbital_period(body)
    return _check_alternates(apsis, search_planet_apsis(body, apsis.time.add_days(skip)))

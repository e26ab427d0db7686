"""
ephemcore.events.riseset
------------------------
Hour-angle searches (culmination, lower transit) and rise/set/altitude
crossings for a surface observer.

Rise/set times refer to the top of the body's disc with a fixed horizon
refraction of 34 arcminutes; `search_altitude` uses the body's center and
no refraction.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.bodies import Body
from ..core.constants import (
    MOON_EQUATORIAL_RADIUS_AU,
    REFRACTION_NEAR_HORIZON,
    SOLAR_DAYS_PER_SIDEREAL_DAY,
    SUN_RADIUS_AU,
)
from ..core.errors import EarthNotAllowedError, InvalidArgumentError, NoConvergeError
from ..core.time import Instant
from ..core.types import HorizontalCoordinates, Observer
from ..engines._solver import search
from ..frames.coords import horizon
from ..frames.earth import sidereal_time
from ..frames.refraction import Refraction
from ..positions import equator

HOUR_ANGLE_ITER_LIMIT = 20

AltitudeFunc = Callable[[Instant], float]


@enum.unique
class Direction(enum.Enum):
    RISE = +1
    SET = -1


@dataclass(frozen=True)
class HourAngleEvent:
    time: Instant
    hor: HorizontalCoordinates


def search_hour_angle(body: Body, observer: Observer, hour_angle: float, start: Instant, direction: int = +1) -> HourAngleEvent:
    """
    Next (direction > 0) or previous (direction < 0) time `body` reaches
    `hour_angle` sidereal hours west of the observer's meridian.
    0 is culmination, 12 the lower transit.
    """
    if body == Body.EARTH:
        raise EarthNotAllowedError()
    if hour_angle < 0.0 or hour_angle >= 24.0:
        raise InvalidArgumentError(f"Invalid hour angle: {hour_angle}")
    if direction == 0:
        raise InvalidArgumentError("Direction must be positive or negative.")

    time = start
    for iter_count in range(1, HOUR_ANGLE_ITER_LIMIT + 1):
        gast = sidereal_time(time)
        ofdate = equator(body, time, observer, True, True)

        delta_sidereal_hours = math.fmod((hour_angle + ofdate.ra - observer.longitude / 15) - gast, 24.0)
        if iter_count == 1:
            # first step always goes the requested way
            if direction > 0:
                if delta_sidereal_hours < 0.0:
                    delta_sidereal_hours += 24.0
            else:
                if delta_sidereal_hours > 0.0:
                    delta_sidereal_hours -= 24.0
        else:
            if delta_sidereal_hours < -12.0:
                delta_sidereal_hours += 24.0
            elif delta_sidereal_hours > +12.0:
                delta_sidereal_hours -= 24.0

        # within 0.1 second
        if abs(delta_sidereal_hours) * 3600.0 < 0.1:
            hor = horizon(time, observer, ofdate.ra, ofdate.dec, Refraction.NORMAL)
            return HourAngleEvent(time, hor)

        time = time.add_days((delta_sidereal_hours / 24.0) * SOLAR_DAYS_PER_SIDEREAL_DAY)

    raise NoConvergeError(f"Hour angle search for {body.name} did not converge")


def _hour_angles(direction: Direction):
    """(before, after): the transits bracketing a rise or a set."""
    if direction is Direction.RISE:
        return 12.0, 0.0
    if direction is Direction.SET:
        return 0.0, 12.0
    raise InvalidArgumentError(f"Invalid direction: {direction!r}")


def _forward_search_altitude(body: Body, observer: Observer, direction: Direction, start: Instant,
                             limit_days: float, altitude_error: AltitudeFunc) -> Optional[Instant]:
    if body == Body.EARTH:
        raise EarthNotAllowedError()
    ha_before, ha_after = _hour_angles(direction)
    if limit_days <= 0.0:
        return None

    alt_before = altitude_error(start)
    if alt_before > 0.0:
        # already past the event: wait for the next bracketing transit
        time_before = search_hour_angle(body, observer, ha_before, start, +1).time
        alt_before = altitude_error(time_before)
    else:
        time_before = start

    evt_after = search_hour_angle(body, observer, ha_after, time_before, +1)
    alt_after = altitude_error(evt_after.time)

    while True:
        if alt_before <= 0.0 < alt_after:
            event_time = search(altitude_error, time_before, evt_after.time, 1.0)
            if event_time is not None:
                if event_time.ut > start.ut + limit_days:
                    return None
                return event_time
        evt_before = search_hour_angle(body, observer, ha_before, evt_after.time, +1)
        if evt_before.time.ut >= start.ut + limit_days:
            return None
        evt_after = search_hour_angle(body, observer, ha_after, evt_before.time, +1)
        time_before = evt_before.time
        alt_before = altitude_error(evt_before.time)
        alt_after = altitude_error(evt_after.time)


def _backward_search_altitude(body: Body, observer: Observer, direction: Direction, start: Instant,
                              limit_days: float, altitude_error: AltitudeFunc) -> Optional[Instant]:
    if body == Body.EARTH:
        raise EarthNotAllowedError()
    ha_before, ha_after = _hour_angles(direction)
    if limit_days >= 0.0:
        return None

    alt_after = altitude_error(start)
    if alt_after < 0.0:
        time_after = search_hour_angle(body, observer, ha_after, start, -1).time
        alt_after = altitude_error(time_after)
    else:
        time_after = start

    evt_before = search_hour_angle(body, observer, ha_before, time_after, -1)
    alt_before = altitude_error(evt_before.time)

    while True:
        if alt_before <= 0.0 < alt_after:
            event_time = search(altitude_error, evt_before.time, time_after, 1.0)
            if event_time is not None:
                if event_time.ut < start.ut + limit_days:
                    return None
                return event_time
        evt_after = search_hour_angle(body, observer, ha_after, evt_before.time, -1)
        if evt_after.time.ut <= start.ut + limit_days:
            return None
        evt_before = search_hour_angle(body, observer, ha_before, evt_after.time, -1)
        time_after = evt_after.time
        alt_before = altitude_error(evt_before.time)
        alt_after = altitude_error(evt_after.time)


def _search_altitude_crossing(body, observer, direction, start, limit_days, altitude_error):
    if limit_days < 0.0:
        return _backward_search_altitude(body, observer, direction, start, limit_days, altitude_error)
    return _forward_search_altitude(body, observer, direction, start, limit_days, altitude_error)


def search_rise_set(body: Body, observer: Observer, direction: Direction, start: Instant, limit_days: float) -> Optional[Instant]:
    """
    Next rise or set within `limit_days` (negative: search backward).
    Returns None if none occurs, e.g. during polar day or night.
    """
    if body == Body.EARTH:
        raise EarthNotAllowedError()
    if body == Body.SUN:
        body_radius_au = SUN_RADIUS_AU
    elif body == Body.MOON:
        body_radius_au = MOON_EQUATORIAL_RADIUS_AU
    else:
        body_radius_au = 0.0

    def peak_altitude(t: Instant) -> float:
        # airless altitude of the disc top, plus fixed horizon refraction
        ofdate = equator(body, t, observer, True, True)
        hor = horizon(t, observer, ofdate.ra, ofdate.dec, Refraction.AIRLESS)
        alt = hor.altitude + math.degrees(body_radius_au / ofdate.dist)
        return direction.value * (alt + REFRACTION_NEAR_HORIZON)

    return _search_altitude_crossing(body, observer, direction, start, limit_days, peak_altitude)


def search_altitude(body: Body, observer: Observer, direction: Direction, start: Instant,
                    limit_days: float, altitude: float) -> Optional[Instant]:
    """Time the body's center rises (or sets) through `altitude` degrees."""
    if not (-90.0 <= altitude <= +90.0):
        raise InvalidArgumentError(f"Invalid altitude: {altitude}")

    def altitude_error(t: Instant) -> float:
        ofdate = equator(body, t, observer, True, True)
        hor = horizon(t, observer, ofdate.ra, ofdate.dec, Refraction.AIRLESS)
        return direction.value * (hor.altitude - altitude)

    return _search_altitude_crossing(body, observer, direction, start, limit_days, altitude_error)

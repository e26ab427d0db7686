"""
ephemcore.events.lunar_phase
----------------------------
Moon phase angle and searches for phases and quarters.

The phase angle is the geocentric ecliptic longitude of the Moon minus that
of the Sun: 0 = new, 90 = first quarter, 180 = full, 270 = third quarter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..core.angles import longitude_offset
from ..core.bodies import Body
from ..core.constants import MEAN_SYNODIC_MONTH
from ..core.errors import InternalError
from ..core.time import Instant
from ..engines._solver import search
from ..positions import pair_longitude

QUARTER_NAMES = ("new moon", "first quarter", "full moon", "third quarter")

# the true quarter can be more than 0.9 day away from the mean-motion estimate
_PHASE_UNCERTAINTY_DAYS = 1.5


@dataclass(frozen=True)
class MoonQuarter:
    """quarter: 0 = new, 1 = first quarter, 2 = full, 3 = third quarter."""
    quarter: int
    time: Instant

    @property
    def name(self) -> str:
        return QUARTER_NAMES[self.quarter]


def moon_phase(time: Instant) -> float:
    """Phase angle in degrees, [0, 360)."""
    return pair_longitude(Body.MOON, Body.SUN, time)


def search_moon_phase(target_lon: float, start: Instant, limit_days: float) -> Optional[Instant]:
    """
    Next (or, with negative `limit_days`, previous) time the phase angle
    equals `target_lon`. Returns None when it falls outside the window.
    """
    def offset(t: Instant) -> float:
        return longitude_offset(moon_phase(t) - target_lon)

    ya = offset(start)
    if limit_days < 0.0:
        if ya < 0.0:
            ya += 360.0
        est_dt = -(MEAN_SYNODIC_MONTH * ya) / 360.0
        dt2 = est_dt + _PHASE_UNCERTAINTY_DAYS
        if dt2 < limit_days:
            return None
        dt1 = max(limit_days, est_dt - _PHASE_UNCERTAINTY_DAYS)
    else:
        if ya > 0.0:
            ya -= 360.0
        est_dt = -(MEAN_SYNODIC_MONTH * ya) / 360.0
        dt1 = est_dt - _PHASE_UNCERTAINTY_DAYS
        if dt1 > limit_days:
            return None
        dt2 = min(limit_days, est_dt + _PHASE_UNCERTAINTY_DAYS)
    return search(offset, start.add_days(dt1), start.add_days(dt2), 0.1)


def search_moon_quarter(start: Instant) -> MoonQuarter:
    angle = moon_phase(start)
    quarter = int(1 + math.floor(angle / 90.0)) % 4
    time = search_moon_phase(90.0 * quarter, start, 10.0)
    if time is None:
        raise InternalError("Cannot find the next lunar quarter")
    return MoonQuarter(quarter, time)


def next_moon_quarter(mq: MoonQuarter) -> MoonQuarter:
    # quarters are observed 6.5 to 8.3 days apart
    next_mq = search_moon_quarter(mq.time.add_days(6.0))
    if next_mq.quarter != (1 + mq.quarter) % 4:
        raise InternalError(f"Expected quarter {(1 + mq.quarter) % 4}, found {next_mq.quarter}")
    return next_mq

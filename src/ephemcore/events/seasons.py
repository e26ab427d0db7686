"""
ephemcore.events.seasons
------------------------
Equinoxes and solstices from the apparent ecliptic longitude of the Sun.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.angles import longitude_offset
from ..core.errors import InternalError
from ..core.time import Instant
from ..engines._solver import search
from ..positions import sun_position


@dataclass(frozen=True)
class SeasonsInfo:
    mar_equinox: Instant
    jun_solstice: Instant
    sep_equinox: Instant
    dec_solstice: Instant


def search_sun_longitude(target_lon: float, start: Instant, limit_days: float) -> Optional[Instant]:
    """
    First time after `start` (within `limit_days`) when the Sun's apparent
    ecliptic longitude reaches `target_lon` degrees.
    """
    def offset(t: Instant) -> float:
        return longitude_offset(sun_position(t).elon - target_lon)

    return search(offset, start, start.add_days(limit_days), 0.01)


def _find_season_change(target_lon: float, year: int, month: int, day: int) -> Instant:
    # the window is wide because the dates drift with precession over long spans
    time = search_sun_longitude(target_lon, Instant.from_calendar(year, month, day), 20.0)
    if time is None:
        raise InternalError(f"Cannot find season change {target_lon} in year {year}")
    return time


def seasons(year: int) -> SeasonsInfo:
    return SeasonsInfo(
        _find_season_change(0.0, year, 3, 10),
        _find_season_change(90.0, year, 6, 10),
        _find_season_change(180.0, year, 9, 10),
        _find_season_change(270.0, year, 12, 10),
    )

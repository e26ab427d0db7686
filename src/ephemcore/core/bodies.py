from __future__ import annotations

import enum

from . import constants as c
from .errors import EarthNotAllowedError, InvalidBodyError


@enum.unique
class Body(enum.Enum):
    """Solar System bodies known to the engine."""
    INVALID = -1
    MERCURY = 0
    VENUS = 1
    EARTH = 2
    MARS = 3
    JUPITER = 4
    SATURN = 5
    URANUS = 6
    NEPTUNE = 7
    PLUTO = 8
    SUN = 9
    MOON = 10
    EMB = 11
    SSB = 12

    @classmethod
    def from_name(cls, name: str) -> "Body":
        """Case-insensitive lookup; unknown names give ``Body.INVALID``."""
        key = name.strip().upper()
        if key not in cls.__members__:
            return cls.INVALID
        return cls[key]


def body_code(name: str) -> Body:
    return Body.from_name(name)


_ORBITAL_PERIODS = (
    87.969,
    224.701,
    c.EARTH_ORBITAL_PERIOD,
    686.980,
    4332.589,
    10759.22,
    30685.4,
    c.NEPTUNE_ORBITAL_PERIOD,
    90560.0,
)

_SUPERIOR = frozenset({Body.MARS, Body.JUPITER, Body.SATURN, Body.URANUS, Body.NEPTUNE, Body.PLUTO})

_GM = {
    Body.SUN: c.SUN_GM,
    Body.MERCURY: c.MERCURY_GM,
    Body.VENUS: c.VENUS_GM,
    Body.EARTH: c.EARTH_GM,
    Body.MOON: c.MOON_GM,
    Body.EMB: c.EARTH_GM + c.MOON_GM,
    Body.MARS: c.MARS_GM,
    Body.JUPITER: c.JUPITER_GM,
    Body.SATURN: c.SATURN_GM,
    Body.URANUS: c.URANUS_GM,
    Body.NEPTUNE: c.NEPTUNE_GM,
    Body.PLUTO: c.PLUTO_GM,
}


def is_superior_planet(body: Body) -> bool:
    return body in _SUPERIOR


def planet_orbital_period(body: Body) -> float:
    """Mean sidereal orbital period in days (Mercury..Pluto)."""
    if isinstance(body, Body) and 0 <= body.value < len(_ORBITAL_PERIODS):
        return _ORBITAL_PERIODS[body.value]
    raise InvalidBodyError(body)


def synodic_period(body: Body) -> float:
    if body == Body.EARTH:
        raise EarthNotAllowedError()
    if body == Body.MOON:
        return c.MEAN_SYNODIC_MONTH
    if not (0 <= body.value < len(_ORBITAL_PERIODS)):
        raise InvalidBodyError(body)
    return abs(c.EARTH_ORBITAL_PERIOD / (c.EARTH_ORBITAL_PERIOD / _ORBITAL_PERIODS[body.value] - 1.0))


def mass_product(body: Body) -> float:
    """GM of ``body`` in au^3/day^2."""
    try:
        return _GM[body]
    except KeyError:
        raise InvalidBodyError(body) from None

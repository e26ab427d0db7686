"""
ephemcore.engines.vsop
----------------------
Truncated VSOP87 evaluator: heliocentric positions and analytic velocities
for Mercury..Neptune in the J2000 equatorial frame (EQJ).

Each model has three formulas (longitude, latitude, radius). A formula is a
power series in t (Julian millennia of TT) whose coefficients are sums of
``A * cos(B + C*t)``.
"""

from __future__ import annotations

import math
from typing import Sequence

from ..core.bodies import Body
from ..core.constants import DAYS_PER_MILLENNIUM, PI2
from ..core.errors import InvalidBodyError
from ._vec3 import BodyState, Vec3
from .tables.vsop87 import MODELS

Formula = Sequence[Sequence[Sequence[float]]]


def model_for(body: Body):
    if isinstance(body, Body) and 0 <= body.value < len(MODELS):
        return MODELS[body.value]
    raise InvalidBodyError(body)


def eval_formula(formula: Formula, t: float, clamp_angle: bool) -> float:
    """
    Σ_s t^s Σ A cos(B + C t). With `clamp_angle`, each power's increment
    is reduced modulo 2π to keep longitudes small over long spans.
    """
    tpower = 1.0
    coord = 0.0
    for series in formula:
        incr = tpower * sum(a * math.cos(b + c * t) for (a, b, c) in series)
        if clamp_angle:
            incr = math.fmod(incr, PI2)
        coord += incr
        tpower *= t
    return coord


def eval_derivative(formula: Formula, t: float) -> float:
    """d/dt of `eval_formula`, per millennium."""
    tpower = 1.0      # t**s
    dpower = 0.0      # t**(s-1)
    deriv = 0.0
    for s, series in enumerate(formula):
        sin_sum = 0.0
        cos_sum = 0.0
        for (ampl, phas, freq) in series:
            angle = phas + t * freq
            sin_sum += ampl * freq * math.sin(angle)
            if s > 0:
                cos_sum += ampl * math.cos(angle)
        deriv += (s * dpower * cos_sum) - (tpower * sin_sum)
        dpower = tpower
        tpower *= t
    return deriv


def ecliptic_to_equatorial(e: Vec3) -> Vec3:
    """VSOP87 ecliptic (J2000 dynamical) -> EQJ, including frame bias."""
    return Vec3(
        e.x + 0.000000440360 * e.y - 0.000000190919 * e.z,
        -0.000000479966 * e.x + 0.917482137087 * e.y - 0.397776982902 * e.z,
        0.397776982902 * e.y + 0.917482137087 * e.z,
    )


def sphere_to_rect(lon: float, lat: float, rad: float) -> Vec3:
    r_coslat = rad * math.cos(lat)
    return Vec3(r_coslat * math.cos(lon), r_coslat * math.sin(lon), rad * math.sin(lat))


def helio_position(body: Body, tt: float) -> Vec3:
    model = model_for(body)
    t = tt / DAYS_PER_MILLENNIUM
    lon = eval_formula(model[0], t, True)
    lat = eval_formula(model[1], t, False)
    rad = eval_formula(model[2], t, False)
    return ecliptic_to_equatorial(sphere_to_rect(lon, lat, rad))


def helio_state(body: Body, tt: float) -> BodyState:
    model = model_for(body)
    t = tt / DAYS_PER_MILLENNIUM

    lon = eval_formula(model[0], t, True)
    lat = eval_formula(model[1], t, False)
    rad = eval_formula(model[2], t, False)
    dlon, dlat, drad = (eval_derivative(f, t) for f in model)

    coslon = math.cos(lon)
    sinlon = math.sin(lon)
    coslat = math.cos(lat)
    sinlat = math.sin(lat)

    vx = drad * coslat * coslon - rad * sinlat * coslon * dlat - rad * coslat * sinlon * dlon
    vy = drad * coslat * sinlon - rad * sinlat * sinlon * dlat + rad * coslat * coslon * dlon
    vz = drad * sinlat + rad * coslat * dlat

    # au/millennium -> au/day
    vel = Vec3(vx, vy, vz) / DAYS_PER_MILLENNIUM
    return BodyState(tt, ecliptic_to_equatorial(sphere_to_rect(lon, lat, rad)), ecliptic_to_equatorial(vel))


def helio_distance(body: Body, tt: float) -> float:
    """Heliocentric distance from the radius formula alone."""
    return eval_formula(model_for(body)[2], tt / DAYS_PER_MILLENNIUM, False)

"""
ephemcore.frames.nutation
-------------------------
IAU 2000B nutation, mean obliquity and the per-instant Earth "tilt".
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..core.constants import ASEC2RAD, ASEC360
from ..core.time import Instant
from ..core.types import RotationMatrix
from ..engines.tables.nutation_terms import TERMS
from .matrix import PrecessDirection


def _fundamental_arguments(t: float) -> Tuple[float, float, float, float, float]:
    """Delaunay arguments (l, l', F, D, Om) in radians, t in Julian centuries."""
    el = math.fmod(485868.249036 + t * 1717915923.2178, ASEC360) * ASEC2RAD
    elp = math.fmod(1287104.79305 + t * 129596581.0481, ASEC360) * ASEC2RAD
    f = math.fmod(335779.526232 + t * 1739527262.8478, ASEC360) * ASEC2RAD
    d = math.fmod(1072260.70369 + t * 1602961601.2090, ASEC360) * ASEC2RAD
    om = math.fmod(450160.398036 - t * 6962890.5431, ASEC360) * ASEC2RAD
    return el, elp, f, d, om


def iau2000b(tt: float) -> Tuple[float, float]:
    """Nutation in longitude and obliquity, (dpsi, deps) in arcseconds."""
    t = tt / 36525.0
    el, elp, f, d, om = _fundamental_arguments(t)
    dp = 0.0
    de = 0.0
    for (nl, nlp, nf, nd, nom, ps, pst, pc, ec, ect, es) in TERMS:
        arg = nl * el + nlp * elp + nf * f + nd * d + nom * om
        sarg = math.sin(arg)
        carg = math.cos(arg)
        dp += (ps + pst * t) * sarg + pc * carg
        de += (ec + ect * t) * carg + es * sarg
    # fixed offsets standing in for the omitted planetary terms
    return -0.000135 + dp * 1.0e-7, 0.000388 + de * 1.0e-7


def mean_obliquity(tt: float) -> float:
    """Mean obliquity of the ecliptic of date, degrees."""
    t = tt / 36525.0
    asec = (
        ((((-0.0000000434 * t
            - 0.000000576) * t
            + 0.00200340) * t
            - 0.0001831) * t
            - 46.836769) * t + 84381.406
    )
    return asec / 3600.0


@dataclass(frozen=True)
class EarthTilt:
    """
    dpsi, deps: nutation (arcsec); mobl, tobl: mean/true obliquity (deg);
    ee: equation of the equinoxes (seconds of time).
    """
    tt: float
    dpsi: float
    deps: float
    mobl: float
    tobl: float
    ee: float


def _compute_tilt(time: Instant) -> EarthTilt:
    dpsi, deps = iau2000b(time.tt)
    mobl = mean_obliquity(time.tt)
    return EarthTilt(
        tt=time.tt,
        dpsi=dpsi,
        deps=deps,
        mobl=mobl,
        tobl=mobl + deps / 3600.0,
        ee=dpsi * math.cos(math.radians(mobl)) / 15.0,
    )


def earth_tilt(time: Instant) -> EarthTilt:
    return time.derived("tilt", _compute_tilt)


def nutation_rotation(time: Instant, direction: PrecessDirection) -> RotationMatrix:
    tilt = earth_tilt(time)
    oblm = math.radians(tilt.mobl)
    oblt = math.radians(tilt.tobl)
    psi = tilt.dpsi * ASEC2RAD
    cobm = math.cos(oblm)
    sobm = math.sin(oblm)
    cobt = math.cos(oblt)
    sobt = math.sin(oblt)
    cpsi = math.cos(psi)
    spsi = math.sin(psi)

    xx = cpsi
    yx = -spsi * cobm
    zx = -spsi * sobm
    xy = spsi * cobt
    yy = cpsi * cobm * cobt + sobm * sobt
    zy = cpsi * sobm * cobt - cobm * sobt
    xz = spsi * sobt
    yz = cpsi * cobm * sobt - sobm * cobt
    zz = cpsi * sobm * sobt + cobm * cobt

    if direction is PrecessDirection.FROM_2000:
        return RotationMatrix.from_rows([[xx, xy, xz], [yx, yy, yz], [zx, zy, zz]])
    return RotationMatrix.from_rows([[xx, yx, zx], [xy, yy, zy], [xz, yz, zz]])


def ecliptic_to_equatorial_of_date(tt: float, ecl: Tuple[float, float, float]) -> Tuple[float, float, float]:
    """Rotate by the mean obliquity of date."""
    obl = math.radians(mean_obliquity(tt))
    cos_obl = math.cos(obl)
    sin_obl = math.sin(obl)
    return (
        ecl[0],
        ecl[1] * cos_obl - ecl[2] * sin_obl,
        ecl[1] * sin_obl + ecl[2] * cos_obl,
    )

"""
ephemcore.engines.lunar
-----------------------
Geocentric Moon from a condensed Brown lunar theory, plus libration.

Output is ecliptic of date (mean equinox): longitude/latitude in radians
and distance in au. Converting to J2000 equatorial coordinates is done by
the position layer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List

from ..core.angles import longitude_offset, normalize_longitude
from ..core.constants import ARC, EARTH_EQUATORIAL_RADIUS_AU, KM_PER_AU, MOON_MEAN_RADIUS_KM, PI2
from .tables.lunar_terms import LATITUDE_TERMS, LONG_PERIOD_TERMS, SOLAR_TERMS

# Highest harmonic needed for each mean argument (l, l', F, D).
_MAX_HARMONIC = (4, 3, 4, 6)


@dataclass(frozen=True)
class MoonPosition:
    """Geocentric ecliptic-of-date coordinates of the Moon."""
    lon: float          # radians, [0, 2π)
    lat: float          # radians
    distance_au: float


def _sine(phi: float) -> float:
    return math.sin(PI2 * phi)


def _frac(x: float) -> float:
    return x - math.floor(x)


def _harmonics(args, facs) -> List[Dict[int, complex]]:
    """
    For each mean argument, the complex powers fac^j * exp(i*j*arg), j = -max..max.
    """
    out = []
    for arg, fac, nmax in zip(args, facs, _MAX_HARMONIC):
        e1 = complex(fac * math.cos(arg), fac * math.sin(arg))
        h = {0: complex(1.0, 0.0), 1: e1}
        for j in range(2, nmax + 1):
            h[j] = h[j - 1] * e1
        for j in range(1, nmax + 1):
            h[-j] = h[j].conjugate()
        out.append(h)
    return out


def calc_moon(tt: float) -> MoonPosition:
    t = tt / 36525.0
    t2 = t * t

    s1 = _sine(0.19833 + 0.05611 * t)
    s2 = _sine(0.27869 + 0.04508 * t)
    s3 = _sine(0.16827 - 0.36903 * t)
    s4 = _sine(0.34734 - 5.37261 * t)
    s5 = _sine(0.10498 - 5.37899 * t)
    s6 = _sine(0.42681 - 0.41855 * t)
    s7 = _sine(0.14943 - 5.37511 * t)

    # long-period perturbations of the mean elements, arcseconds
    dl0 = 0.84 * s1 + 0.31 * s2 + 14.27 * s3 + 7.26 * s4 + 0.28 * s5 + 0.24 * s6
    dl = 2.94 * s1 + 0.31 * s2 + 14.27 * s3 + 9.34 * s4 + 1.12 * s5 + 0.83 * s6
    dls = -6.40 * s1 - 1.89 * s6
    df = 0.21 * s1 + 0.31 * s2 + 14.27 * s3 - 88.70 * s4 - 15.30 * s5 + 0.24 * s6 - 1.86 * s7
    dd = dl0 - dls
    dgam = (
        -3332e-9 * _sine(0.59734 - 5.37261 * t)
        - 539e-9 * _sine(0.35498 - 5.37899 * t)
        - 64e-9 * _sine(0.39943 - 5.37511 * t)
    )

    l0 = PI2 * _frac(0.60643382 + 1336.85522467 * t - 0.00000313 * t2) + dl0 / ARC
    l = PI2 * _frac(0.37489701 + 1325.55240982 * t + 0.00002565 * t2) + dl / ARC
    ls = PI2 * _frac(0.99312619 + 99.99735956 * t - 0.00000044 * t2) + dls / ARC
    f = PI2 * _frac(0.25909118 + 1342.22782980 * t - 0.00000892 * t2) + df / ARC
    d = PI2 * _frac(0.82736186 + 1236.85308708 * t - 0.00000397 * t2) + dd / ARC

    facs = (
        1.000002208,
        0.997504612 - 0.002495388 * t,
        1.000002708 + 139.978 * dgam,
        1.0,
    )
    ex = _harmonics((l, ls, f, d), facs)

    dlam = 0.0
    ds = 0.0
    gam1c = 0.0
    sinpi = 3422.7000
    for (c_lam, c_s, c_gam, c_pi, p, q, r, s) in SOLAR_TERMS:
        z = ex[0][p] * ex[1][q] * ex[2][r] * ex[3][s]
        dlam += c_lam * z.imag
        ds += c_s * z.imag
        gam1c += c_gam * z.real
        sinpi += c_pi * z.real

    n = 0.0
    for (coeff, p, q, r, s) in LATITUDE_TERMS:
        n += coeff * (ex[0][p] * ex[1][q] * ex[2][r] * ex[3][s]).imag

    for (amp, phase, rate) in LONG_PERIOD_TERMS:
        dlam += amp * _sine(phase + rate * t)

    s = f + ds / ARC
    lat_seconds = (1.000002708 + 139.978 * dgam) * (18518.511 + 1.189 + gam1c) * math.sin(s) - 6.24 * math.sin(3 * s) + n
    return MoonPosition(
        PI2 * _frac((l0 + dlam / ARC) / PI2),
        (math.pi / (180 * 3600)) * lat_seconds,
        (ARC * EARTH_EQUATORIAL_RADIUS_AU) / (0.999953253 * sinpi),
    )


def ecliptic_rect(m: MoonPosition):
    """Geocentric ecliptic-of-date rectangular coordinates (au)."""
    dist_cos_lat = m.distance_au * math.cos(m.lat)
    return (
        dist_cos_lat * math.cos(m.lon),
        dist_cos_lat * math.sin(m.lon),
        m.distance_au * math.sin(m.lat),
    )


# ============================================================
# Libration
# ============================================================

@dataclass(frozen=True)
class LibrationInfo:
    """
    Lunar libration angles (degrees): `elat`/`elon` are the sub-Earth
    selenographic latitude/longitude; `mlat`/`mlon` are the Moon's
    geocentric ecliptic coordinates of date.
    """
    elat: float
    elon: float
    mlat: float
    mlon: float
    dist_km: float
    diam_deg: float


def libration(tt: float) -> LibrationInfo:
    t = tt / 36525.0
    t2 = t * t
    t3 = t2 * t
    t4 = t2 * t2
    moon = calc_moon(tt)
    mlon = moon.lon
    mlat = moon.lat
    dist_km = moon.distance_au * KM_PER_AU
    diam_deg = 2.0 * math.degrees(math.atan(MOON_MEAN_RADIUS_KM / math.sqrt(dist_km * dist_km - MOON_MEAN_RADIUS_KM * MOON_MEAN_RADIUS_KM)))

    # inclination of the lunar equator to the ecliptic
    inc = math.radians(1.543)

    f = math.radians(normalize_longitude(93.2720950 + 483202.0175233 * t - 0.0036539 * t2 - t3 / 3526000 + t4 / 863310000))
    omega = math.radians(normalize_longitude(125.0445479 - 1934.1362891 * t + 0.0020754 * t2 + t3 / 467441 - t4 / 60616000))
    m = math.radians(normalize_longitude(357.5291092 + 35999.0502909 * t - 0.0001536 * t2 + t3 / 24490000))
    mdash = math.radians(normalize_longitude(134.9633964 + 477198.8675055 * t + 0.0087414 * t2 + t3 / 69699 - t4 / 14712000))
    d = math.radians(normalize_longitude(297.8501921 + 445267.1114034 * t - 0.0018819 * t2 + t3 / 545868 - t4 / 113065000))
    e = 1.0 - 0.002516 * t - 0.0000074 * t2

    # optical
    w = mlon - omega
    a = math.atan2(math.sin(w) * math.cos(mlat) * math.cos(inc) - math.sin(mlat) * math.sin(inc), math.cos(w) * math.cos(mlat))
    ldash = longitude_offset(math.degrees(a - f))
    bdash = math.asin(-math.sin(w) * math.cos(mlat) * math.sin(inc) - math.sin(mlat) * math.cos(inc))

    # physical
    k1 = math.radians(119.75 + 131.849 * t)
    k2 = math.radians(72.56 + 20.186 * t)

    rho = (
        -0.02752 * math.cos(mdash)
        - 0.02245 * math.sin(f)
        + 0.00684 * math.cos(mdash - 2 * f)
        - 0.00293 * math.cos(2 * f)
        - 0.00085 * math.cos(2 * f - 2 * d)
        - 0.00054 * math.cos(mdash - 2 * d)
        - 0.00020 * math.sin(mdash + f)
        - 0.00020 * math.cos(mdash + 2 * f)
        - 0.00020 * math.cos(mdash - f)
        + 0.00014 * math.cos(mdash + 2 * f - 2 * d)
    )

    sigma = (
        -0.02816 * math.sin(mdash)
        + 0.02244 * math.cos(f)
        - 0.00682 * math.sin(mdash - 2 * f)
        - 0.00279 * math.sin(2 * f)
        - 0.00083 * math.sin(2 * f - 2 * d)
        + 0.00069 * math.sin(mdash - 2 * d)
        + 0.00040 * math.cos(mdash + f)
        - 0.00025 * math.sin(2 * mdash)
        - 0.00023 * math.sin(mdash + 2 * f)
        + 0.00020 * math.cos(mdash - f)
        + 0.00019 * math.sin(mdash - f)
        + 0.00013 * math.sin(mdash + 2 * f - 2 * d)
        - 0.00010 * math.cos(mdash - 3 * f)
    )

    tau = (
        0.02520 * e * math.sin(m)
        + 0.00473 * math.sin(2 * mdash - 2 * f)
        - 0.00467 * math.sin(mdash)
        + 0.00396 * math.sin(k1)
        + 0.00276 * math.sin(2 * mdash - 2 * d)
        + 0.00196 * math.sin(omega)
        - 0.00183 * math.cos(mdash - f)
        + 0.00115 * math.sin(mdash - 2 * d)
        - 0.00096 * math.sin(mdash - d)
        + 0.00046 * math.sin(2 * f - 2 * d)
        - 0.00039 * math.sin(mdash - f)
        - 0.00032 * math.sin(mdash - m - d)
        + 0.00027 * math.sin(2 * mdash - m - 2 * d)
        + 0.00023 * math.sin(k2)
        - 0.00014 * math.sin(2 * d)
        + 0.00014 * math.cos(2 * mdash - 2 * f)
        - 0.00012 * math.sin(mdash - 2 * f)
        - 0.00012 * math.sin(2 * mdash)
        + 0.00011 * math.sin(2 * mdash - 2 * m - 2 * d)
    )

    ldash2 = -tau + (rho * math.cos(a) + sigma * math.sin(a)) * math.tan(bdash)
    bdash2 = sigma * math.cos(a) - rho * math.sin(a)
    return LibrationInfo(
        math.degrees(bdash) + bdash2,
        ldash + ldash2,
        math.degrees(mlat),
        math.degrees(mlon),
        dist_km,
        diam_deg,
    )

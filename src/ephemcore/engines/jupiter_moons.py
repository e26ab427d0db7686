"""
ephemcore.engines.jupiter_moons
-------------------------------
Jupiter-centred states of Io, Europa, Ganymede and Callisto.

Orbital elements come from the tabulated series; the Kepler equation is
solved in equinoctial form and the resulting state is rotated from
Jupiter's equator into EQJ.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from ..core.constants import PI2
from ..core.errors import NoConvergeError
from ._vec3 import BodyState, Vec3
from .tables.jupiter_moons import JUPITER_TO_EQJ, MODELS, NAMES

KEPLER_ITER_LIMIT = 50

# days from 1950-01-01T00:00 TT to J2000
_EPOCH_OFFSET = 18262.5


def _rotate(rot, v: Vec3) -> Vec3:
    return Vec3(
        rot[0][0] * v.x + rot[1][0] * v.y + rot[2][0] * v.z,
        rot[0][1] * v.x + rot[1][1] * v.y + rot[2][1] * v.z,
        rot[0][2] * v.x + rot[1][2] * v.y + rot[2][2] * v.z,
    )


def elements_to_state(tt: float, mu: float, a: float, al: float, k: float, h: float, q: float, p: float) -> BodyState:
    """Equinoctial elements -> state in the Jupiter equatorial frame."""
    an = math.sqrt(mu / (a * a * a))
    ee = al + k * math.sin(al) - h * math.cos(al)
    for _ in range(KEPLER_ITER_LIMIT):
        ce = math.cos(ee)
        se = math.sin(ee)
        de = (al - ee + k * se - h * ce) / (1.0 - k * ce - h * se)
        ee += de
        if abs(de) < 1.0e-12:
            break
    else:
        raise NoConvergeError("Kepler equation did not converge for Galilean moon")

    ce = math.cos(ee)
    se = math.sin(ee)
    dle = h * ce - k * se
    rsam1 = -k * ce - h * se
    asr = 1.0 / (1.0 + rsam1)
    phi = math.sqrt(1.0 - k * k - h * h)
    psi = 1.0 / (1.0 + phi)
    x1 = a * (ce - k - psi * h * dle)
    y1 = a * (se - h + psi * k * dle)
    vx1 = an * asr * a * (-se - psi * h * rsam1)
    vy1 = an * asr * a * (+ce + psi * k * rsam1)
    f2 = 2.0 * math.sqrt(1.0 - q * q - p * p)
    p2 = 1.0 - 2.0 * p * p
    q2 = 1.0 - 2.0 * q * q
    pq = 2.0 * p * q
    return BodyState(
        tt,
        Vec3(x1 * p2 + y1 * pq, x1 * pq + y1 * q2, (q * y1 - x1 * p) * f2),
        Vec3(vx1 * p2 + vy1 * pq, vx1 * pq + vy1 * q2, (q * vy1 - vx1 * p) * f2),
    )


def moon_state(tt: float, model) -> BodyState:
    mu, al0, al1, a_terms, l_terms, z_terms, zeta_terms = model
    t = tt + _EPOCH_OFFSET

    a = sum(amp * math.cos(phase + t * freq) for (amp, phase, freq) in a_terms)

    al = al0 + t * al1
    for (amp, phase, freq) in l_terms:
        al += amp * math.sin(phase + t * freq)
    al = math.fmod(al, PI2)
    if al < 0:
        al += PI2

    k = h = 0.0
    for (amp, phase, freq) in z_terms:
        arg = phase + t * freq
        k += amp * math.cos(arg)
        h += amp * math.sin(arg)

    q = p = 0.0
    for (amp, phase, freq) in zeta_terms:
        arg = phase + t * freq
        q += amp * math.cos(arg)
        p += amp * math.sin(arg)

    jup = elements_to_state(tt, mu, a, al, k, h, q, p)
    return BodyState(tt, _rotate(JUPITER_TO_EQJ, jup.r), _rotate(JUPITER_TO_EQJ, jup.v))


def all_moon_states(tt: float) -> List[Tuple[str, BodyState]]:
    return [(name, moon_state(tt, model)) for name, model in zip(NAMES, MODELS)]

"""
ephemcore.engines.gravsim
-------------------------
Barycentric corrections for the giant planets and the Pluto propagator.

Pluto is integrated with a single predictor-corrector pass per step
(second-order Taylor prediction, mean of endpoint accelerations, re-step)
under the attraction of the Sun and Jupiter..Neptune. Exact tabulated
states every 29200 days anchor 50 segments of 201 states each; a segment is
built once, on first use, by simulating forward from its start and backward
from its end and fading linearly between the two runs.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.bodies import Body
from ..core.constants import JUPITER_GM, NEPTUNE_GM, SATURN_GM, SUN_GM, URANUS_GM
from . import vsop
from ._vec3 import BodyState, Vec3
from .tables.pluto_states import STATES, TIME_STEP

logger = logging.getLogger(__name__)

PLUTO_DT = 146.0
PLUTO_NSTEPS = int(round(TIME_STEP / PLUTO_DT)) + 1      # 201

_GIANTS: Tuple[Tuple[Body, float], ...] = (
    (Body.JUPITER, JUPITER_GM),
    (Body.SATURN, SATURN_GM),
    (Body.URANUS, URANUS_GM),
    (Body.NEPTUNE, NEPTUNE_GM),
)


# ============================================================
# Major bodies
# ============================================================

def solar_system_barycenter(tt: float) -> Vec3:
    """Heliocentric position of the SSB from the four giant planets."""
    ssb = Vec3.zero()
    for body, gm in _GIANTS:
        ssb = ssb + vsop.helio_position(body, tt) * (gm / (gm + SUN_GM))
    return ssb


def _acceleration_increment(small_pos: Vec3, gm: float, major_pos: Vec3) -> Vec3:
    delta = major_pos - small_pos
    r2 = delta.quadrature()
    return delta * (gm / (r2 * math.sqrt(r2)))


class MajorBodies:
    """Barycentric states of the Sun and Jupiter..Neptune at one TT."""

    def __init__(self, tt: float):
        self.tt = tt
        helio = {}
        ssb_r = Vec3.zero()
        ssb_v = Vec3.zero()
        for body, gm in _GIANTS:
            planet = vsop.helio_state(body, tt)
            shift = gm / (gm + SUN_GM)
            ssb_r = ssb_r + planet.r * shift
            ssb_v = ssb_v + planet.v * shift
            helio[body] = planet
        self.states = {body: BodyState(tt, s.r - ssb_r, s.v - ssb_v) for body, s in helio.items()}
        self.sun = BodyState(tt, -ssb_r, -ssb_v)

    def state(self, body: Body) -> BodyState:
        if body == Body.SUN:
            return self.sun
        return self.states[body]

    def acceleration(self, pos: Vec3) -> Vec3:
        """Gravitational acceleration at barycentric `pos` (au/day^2)."""
        acc = _acceleration_increment(pos, SUN_GM, self.sun.r)
        for body, gm in _GIANTS:
            acc = acc + _acceleration_increment(pos, gm, self.states[body].r)
        return acc


# ============================================================
# Integrator
# ============================================================

@dataclass(frozen=True)
class GravState:
    tt: float
    r: Vec3     # au
    v: Vec3     # au/day
    a: Vec3     # au/day^2


def update_position(dt: float, r: Vec3, v: Vec3, a: Vec3) -> Vec3:
    return Vec3(
        r.x + dt * (v.x + dt * a.x / 2.0),
        r.y + dt * (v.y + dt * a.y / 2.0),
        r.z + dt * (v.z + dt * a.z / 2.0),
    )


def update_velocity(dt: float, v: Vec3, a: Vec3) -> Vec3:
    return Vec3(v.x + dt * a.x, v.y + dt * a.y, v.z + dt * a.z)


def grav_step(tt2: float, s1: GravState) -> Tuple[MajorBodies, GravState]:
    """Advance `s1` to `tt2` with one predictor-corrector pass."""
    dt = tt2 - s1.tt
    bary2 = MajorBodies(tt2)
    approx_pos = update_position(dt, s1.r, s1.v, s1.a)
    mean_acc = bary2.acceleration(approx_pos).mean(s1.a)
    pos = update_position(dt, s1.r, s1.v, mean_acc)
    vel = s1.v + mean_acc * dt
    return bary2, GravState(tt2, pos, vel, bary2.acceleration(pos))


def _table_state(entry) -> BodyState:
    tt, r, v = entry
    return BodyState(tt, Vec3(*r), Vec3(*v))


def grav_from_table(entry) -> Tuple[MajorBodies, GravState]:
    """Barycentric Pluto state (with acceleration) from a heliocentric table row."""
    state = _table_state(entry)
    bary = MajorBodies(state.tt)
    r = state.r + bary.sun.r
    v = state.v + bary.sun.v
    return bary, GravState(state.tt, r, v, bary.acceleration(r))


def _clamp_index(frac: float, nsteps: int) -> int:
    index = math.floor(frac)
    if index < 0:
        return 0
    if index >= nsteps:
        return nsteps - 1
    return index


# ============================================================
# Segment cache
# ============================================================

class PlutoSegmentCache:
    """
    Lazily built Pluto segments, one per pair of neighbouring table states.

    A single lock serializes segment construction, so concurrent callers
    never simulate the same segment twice.
    """

    def __init__(self, states: Sequence = STATES, time_step: float = TIME_STEP, dt: float = PLUTO_DT):
        self.states = states
        self.time_step = float(time_step)
        self.dt = float(dt)
        self.nsteps = int(round(self.time_step / self.dt)) + 1
        self._segments: List[Optional[List[GravState]]] = [None] * (len(states) - 1)
        self._lock = threading.Lock()
        self.builds = 0

    @property
    def tt_range(self) -> Tuple[float, float]:
        return (self.states[0][0], self.states[-1][0])

    def segment(self, tt: float) -> Optional[List[GravState]]:
        """Segment covering `tt`, or None outside the tabulated span."""
        lo, hi = self.tt_range
        if tt < lo or tt > hi:
            return None
        index = _clamp_index((tt - lo) / self.time_step, len(self._segments))
        seg = self._segments[index]
        if seg is None:
            with self._lock:
                seg = self._segments[index]
                if seg is None:
                    seg = self._build(index)
                    self._segments[index] = seg
        return seg

    def _build(self, index: int) -> List[GravState]:
        logger.debug("Building Pluto segment %d (tt %.1f .. %.1f)", index, self.states[index][0], self.states[index + 1][0])
        n = self.nsteps
        forward: List[GravState] = [grav_from_table(self.states[index])[1]]
        for i in range(1, n - 1):
            forward.append(grav_step(forward[0].tt + i * self.dt, forward[i - 1])[1])

        last = grav_from_table(self.states[index + 1])[1]
        reverse: List[Optional[GravState]] = [None] * n
        reverse[n - 1] = last
        for i in range(n - 2, 0, -1):
            reverse[i] = grav_step(last.tt - (n - 1 - i) * self.dt, reverse[i + 1])[1]

        seg = [forward[0]]
        for i in range(1, n - 1):
            ramp = i / (n - 1)
            f, b = forward[i], reverse[i]
            seg.append(GravState(
                f.tt,
                f.r * (1.0 - ramp) + b.r * ramp,
                f.v * (1.0 - ramp) + b.v * ramp,
                f.a * (1.0 - ramp) + b.a * ramp,
            ))
        seg.append(last)
        self.builds += 1
        return seg

    def clear(self) -> None:
        with self._lock:
            self._segments = [None] * (len(self.states) - 1)


DEFAULT_PLUTO_CACHE = PlutoSegmentCache()


def _crawl(entry, target_tt: float, dt: float) -> Tuple[MajorBodies, GravState]:
    """Integrate step by step from a table row to `target_tt` (no caching)."""
    bary, sim = grav_from_table(entry)
    n = math.ceil((target_tt - sim.tt) / dt)
    for i in range(n):
        bary, sim = grav_step(target_tt if (i + 1 == n) else (sim.tt + dt), sim)
    return bary, sim


def pluto_state(tt: float, helio: bool, cache: Optional[PlutoSegmentCache] = None) -> BodyState:
    """
    Pluto's state at `tt`: barycentric, or heliocentric when `helio` is true.
    """
    cache = cache or DEFAULT_PLUTO_CACHE
    bary: Optional[MajorBodies] = None
    seg = cache.segment(tt)
    if seg is None:
        lo, _ = cache.tt_range
        if tt < lo:
            bary, sim = _crawl(cache.states[0], tt, -cache.dt)
        else:
            bary, sim = _crawl(cache.states[-1], tt, +cache.dt)
        r, v = sim.r, sim.v
    else:
        left = _clamp_index((tt - seg[0].tt) / cache.dt, cache.nsteps - 1)
        s1 = seg[left]
        s2 = seg[left + 1]
        acc = s1.a.mean(s2.a)
        ra = update_position(tt - s1.tt, s1.r, s1.v, acc)
        va = update_velocity(tt - s1.tt, s1.v, acc)
        rb = update_position(tt - s2.tt, s2.r, s2.v, acc)
        vb = update_velocity(tt - s2.tt, s2.v, acc)
        ramp = (tt - s1.tt) / cache.dt
        r = ra * (1.0 - ramp) + rb * ramp
        v = va * (1.0 - ramp) + vb * ramp

    if helio:
        if bary is None:
            bary = MajorBodies(tt)
        r = r - bary.sun.r
        v = v - bary.sun.v

    return BodyState(tt, r, v)

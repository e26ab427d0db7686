"""
ephemcore.ephemeris.de422
-------------------------
Compare the built-in series against a JPL DE422 SPK kernel read with
jplephem.

    python -m ephemcore.ephemeris.de422 path/to/de422.bsp --body MARS --y0 1900 --y1 2100

Requires optional deps:
  pip install "ephemcore[ephemeris]"
"""

from __future__ import annotations

import argparse
import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

from ..core.bodies import Body, body_code
from ..core.constants import KM_PER_AU
from ..core.errors import InvalidBodyError
from ..core.time import Instant
from ..positions import geo_moon, helio_vector
from ..reference.time_scales import calendar_to_ut, jd_from_day_count
from . import require_ephemeris

logger = logging.getLogger(__name__)

# NAIF ids: (center, target) chains from the solar-system barycenter
_SSB = 0
_EMB = 3
_SUN = 10
_MOON = 301
_EARTH = 399

_BARYCENTER_IDS = {
    Body.MERCURY: 1,
    Body.VENUS: 2,
    Body.MARS: 4,
    Body.JUPITER: 5,
    Body.SATURN: 6,
    Body.URANUS: 7,
    Body.NEPTUNE: 8,
    Body.PLUTO: 9,
}


@dataclass(frozen=True)
class Residual:
    """Engine minus DE422: angular offset (arcsec) and distance offset (km)."""
    time: Instant
    angle_arcsec: float
    dist_km: float


@dataclass
class DE422Comparison:
    kernel: object

    @classmethod
    def load(cls, path: str) -> "DE422Comparison":
        require_ephemeris()
        from jplephem.spk import SPK

        logger.debug("Opening SPK kernel %s", path)
        return cls(kernel=SPK.open(path))

    def close(self) -> None:
        self.kernel.close()

    def _ssb_km(self, naif_id: int, jd_tt: float):
        if naif_id in (_EARTH, _MOON):
            return self.kernel[_SSB, _EMB].compute(jd_tt) + self.kernel[_EMB, naif_id].compute(jd_tt)
        return self.kernel[_SSB, naif_id].compute(jd_tt)

    def helio_position(self, body: Body, tt: float) -> Tuple[float, float, float]:
        """Heliocentric EQJ position of `body` in au."""
        jd = jd_from_day_count(tt)
        if body == Body.EARTH:
            naif_id = _EARTH
        elif body in _BARYCENTER_IDS:
            naif_id = _BARYCENTER_IDS[body]
        else:
            raise InvalidBodyError(body)
        v = (self._ssb_km(naif_id, jd) - self._ssb_km(_SUN, jd)) / KM_PER_AU
        return float(v[0]), float(v[1]), float(v[2])

    def geo_moon(self, tt: float) -> Tuple[float, float, float]:
        jd = jd_from_day_count(tt)
        v = (self.kernel[_EMB, _MOON].compute(jd) - self.kernel[_EMB, _EARTH].compute(jd)) / KM_PER_AU
        return float(v[0]), float(v[1]), float(v[2])

    def residual(self, body: Body, time: Instant) -> Residual:
        if body == Body.MOON:
            eng = geo_moon(time)
            ref = self.geo_moon(time.tt)
        else:
            eng = helio_vector(body, time)
            ref = self.helio_position(body, time.tt)
        e = (eng.x, eng.y, eng.z)
        return Residual(time, _angle_arcsec(e, ref), (_norm(e) - _norm(ref)) * KM_PER_AU)


def _norm(v) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def _angle_arcsec(a, b) -> float:
    dot = (a[0] * b[0] + a[1] * b[1] + a[2] * b[2]) / (_norm(a) * _norm(b))
    return 3600.0 * math.degrees(math.acos(max(-1.0, min(1.0, dot))))


def residual_series(cmp: DE422Comparison, body: Body, y0: int, y1: int, step_days: float) -> List[Residual]:
    require_ephemeris()
    import numpy as np

    uts = np.arange(calendar_to_ut(y0, 1, 1), calendar_to_ut(y1, 1, 1), step_days, dtype=float)
    return [cmp.residual(body, Instant.from_ut(float(ut))) for ut in uts]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare ephemcore positions with a JPL DE422 kernel.")
    p.add_argument("kernel", help="path to de422.bsp")
    p.add_argument("--body", default="MARS", help="body name (Mercury..Pluto, Earth or Moon)")
    p.add_argument("--y0", type=int, default=1900, help="start year")
    p.add_argument("--y1", type=int, default=2100, help="end year")
    p.add_argument("--step", type=float, default=30.0, help="sampling step in days")
    args = p.parse_args(argv)

    body = body_code(args.body)
    if body == Body.INVALID:
        raise SystemExit(f"Unknown body: {args.body}")

    cmp = DE422Comparison.load(args.kernel)
    try:
        rows = residual_series(cmp, body, args.y0, args.y1, args.step)
    finally:
        cmp.close()

    worst = max(rows, key=lambda r: r.angle_arcsec)
    rms = math.sqrt(sum(r.angle_arcsec ** 2 for r in rows) / len(rows))
    print(f"{body.name}: {len(rows)} samples, rms {rms:.3f}\", max {worst.angle_arcsec:.3f}\" at {worst.time}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

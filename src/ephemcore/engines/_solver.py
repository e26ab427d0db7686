from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Tuple

from ..core.errors import NoConvergeError
from ..core.time import Instant

logger = logging.getLogger(__name__)

SEARCH_ITER_LIMIT = 20

TimeFunc = Callable[[Instant], float]


def quad_interp(tm: float, dt: float, fa: float, fm: float, fb: float) -> Optional[Tuple[float, float]]:
    """
    Fit a parabola through (tm-dt, fa), (tm, fm), (tm+dt, fb).

    Returns (t, df/dt) at its unique root inside [tm-dt, tm+dt], or None
    when there is no root, two roots, or the curve is flat.
    """
    q = (fb + fa) / 2.0 - fm
    r = (fb - fa) / 2.0
    s = fm

    if q == 0.0:
        if r == 0.0:
            return None
        x = -s / r
        if not (-1.0 <= x <= 1.0):
            return None
    else:
        u = r * r - 4.0 * q * s
        if u <= 0.0:
            return None
        ru = math.sqrt(u)
        x1 = (-r + ru) / (2.0 * q)
        x2 = (-r - ru) / (2.0 * q)
        if -1.0 <= x1 <= 1.0:
            if -1.0 <= x2 <= 1.0:
                return None
            x = x1
        elif -1.0 <= x2 <= 1.0:
            x = x2
        else:
            return None

    return (tm + x * dt, (2.0 * q * x + r) / dt)


def search(func: TimeFunc, t1: Instant, t2: Instant, dt_tolerance_seconds: float) -> Optional[Instant]:
    """
    Find the ascending zero crossing of `func` between t1 and t2.

    Expects f(t1) < 0 <= f(t2) with exactly one crossing in between.
    Combines bisection with parabolic interpolation; when the parabola's
    root looks good, the bracket is shrunk around it.

    Returns None when the samples show no single ascending crossing.
    Raises NoConvergeError after SEARCH_ITER_LIMIT iterations.
    """
    dt_days = abs(dt_tolerance_seconds / 86400.0)
    f1 = func(t1)
    f2 = func(t2)
    fmid = 0.0
    calc_fmid = True

    for _ in range(SEARCH_ITER_LIMIT):
        dt = (t2.tt - t1.tt) / 2.0
        tmid = t1.add_days(dt)
        if abs(dt) < dt_days:
            return tmid

        if calc_fmid:
            fmid = func(tmid)
        else:
            calc_fmid = True

        q = quad_interp(tmid.ut, t2.ut - tmid.ut, f1, fmid, f2)
        if q is not None:
            q_ut, q_df_dt = q
            tq = Instant(q_ut)
            fq = func(tq)
            if q_df_dt != 0.0:
                dt_guess = abs(fq / q_df_dt)
                if dt_guess < dt_days:
                    return tq

                dt_guess *= 1.2
                if dt_guess < dt / 10.0:
                    tleft = tq.add_days(-dt_guess)
                    tright = tq.add_days(+dt_guess)
                    if (tleft.ut - t1.ut) * (tleft.ut - t2.ut) < 0.0 and (tright.ut - t1.ut) * (tright.ut - t2.ut) < 0.0:
                        fleft = func(tleft)
                        fright = func(tright)
                        if fleft < 0.0 <= fright:
                            t1, f1 = tleft, fleft
                            t2, f2 = tright, fright
                            fmid = fq
                            calc_fmid = False
                            continue

        if f1 < 0.0 <= fmid:
            t2, f2 = tmid, fmid
            continue

        if fmid < 0.0 <= f2:
            t1, f1 = tmid, fmid
            continue

        # no ascending crossing, or more than one
        return None

    logger.error("search exceeded %d iterations between %s and %s", SEARCH_ITER_LIMIT, t1, t2)
    raise NoConvergeError("Excessive iteration in search")

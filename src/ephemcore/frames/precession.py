"""
ephemcore.frames.precession
---------------------------
IAU 2006 precession (Capitaine et al. angles psi_A, omega_A, chi_A).
"""

from __future__ import annotations

import math

from ..core.constants import ASEC2RAD
from ..core.time import Instant
from ..core.types import RotationMatrix
from .matrix import PrecessDirection

EPS0_ARCSEC = 84381.406


def precession_rotation(time: Instant, direction: PrecessDirection) -> RotationMatrix:
    t = time.tt / 36525.0

    psia = (((((-0.0000000951 * t
                + 0.000132851) * t
                - 0.00114045) * t
                - 1.0790069) * t
                + 5038.481507) * t)

    omegaa = (((((+0.0000003337 * t
                  - 0.000000467) * t
                  - 0.00772503) * t
                  + 0.0512623) * t
                  - 0.025754) * t + EPS0_ARCSEC)

    chia = (((((-0.0000000560 * t
                + 0.000170663) * t
                - 0.00121197) * t
                - 2.3814292) * t
                + 10.556403) * t)

    eps0 = EPS0_ARCSEC * ASEC2RAD
    psia *= ASEC2RAD
    omegaa *= ASEC2RAD
    chia *= ASEC2RAD

    sa = math.sin(eps0)
    ca = math.cos(eps0)
    sb = math.sin(-psia)
    cb = math.cos(-psia)
    sc = math.sin(-omegaa)
    cc = math.cos(-omegaa)
    sd = math.sin(chia)
    cd = math.cos(chia)

    xx = cd * cb - sb * sd * cc
    yx = cd * sb * ca + sd * cc * cb * ca - sa * sd * sc
    zx = cd * sb * sa + sd * cc * cb * sa + ca * sd * sc
    xy = -sd * cb - sb * cd * cc
    yy = -sd * sb * ca + cd * cc * cb * ca - sa * cd * sc
    zy = -sd * sb * sa + cd * cc * cb * sa + ca * cd * sc
    xz = sb * sc
    yz = -sc * cb * ca - sa * cc
    zz = -sc * cb * sa + cc * ca

    if direction is PrecessDirection.INTO_2000:
        return RotationMatrix.from_rows([[xx, yx, zx], [xy, yy, zy], [xz, yz, zz]])
    return RotationMatrix.from_rows([[xx, xy, xz], [yx, yy, yz], [zx, zy, zz]])

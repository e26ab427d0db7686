"""
ephemcore.frames.rotation
-------------------------
Named rotations between the supported frames:

  EQJ  J2000 mean equator
  EQD  true equator of date
  ECL  J2000 mean ecliptic
  HOR  observer's horizon (x north, y west, z zenith)
  GAL  IAU galactic
"""

from __future__ import annotations

import math

from ..core.time import Instant
from ..core.types import Observer, RotationMatrix
from .earth import sidereal_time, spin
from .matrix import PrecessDirection, combine_rotation, inverse_rotation
from .nutation import nutation_rotation
from .precession import precession_rotation

# cos/sin of the J2000 mean obliquity
_COS_OB = 0.9174821430670688
_SIN_OB = 0.3977769691083922

_EQJ_GAL = (
    (-0.0548624779711344, +0.4941095946388765, -0.8676668813529025),
    (-0.8734572784246782, -0.4447938112296831, -0.1980677870294097),
    (-0.4838000529948520, +0.7470034631630423, +0.4559861124470794),
)


def rotation_eqj_ecl() -> RotationMatrix:
    c, s = _COS_OB, _SIN_OB
    return RotationMatrix.from_rows([[1, 0, 0], [0, +c, -s], [0, +s, +c]])


def rotation_ecl_eqj() -> RotationMatrix:
    c, s = _COS_OB, _SIN_OB
    return RotationMatrix.from_rows([[1, 0, 0], [0, +c, +s], [0, -s, +c]])


def rotation_eqj_eqd(time: Instant) -> RotationMatrix:
    prec = precession_rotation(time, PrecessDirection.FROM_2000)
    nut = nutation_rotation(time, PrecessDirection.FROM_2000)
    return combine_rotation(prec, nut)


def rotation_eqd_eqj(time: Instant) -> RotationMatrix:
    nut = nutation_rotation(time, PrecessDirection.INTO_2000)
    prec = precession_rotation(time, PrecessDirection.INTO_2000)
    return combine_rotation(nut, prec)


def rotation_eqd_hor(time: Instant, observer: Observer) -> RotationMatrix:
    sinlat = math.sin(math.radians(observer.latitude))
    coslat = math.cos(math.radians(observer.latitude))
    sinlon = math.sin(math.radians(observer.longitude))
    coslon = math.cos(math.radians(observer.longitude))
    uze = (coslat * coslon, coslat * sinlon, sinlat)
    une = (-sinlat * coslon, -sinlat * sinlon, coslat)
    uwe = (sinlon, -coslon, 0.0)
    spin_angle = -15.0 * sidereal_time(time)
    uz = spin(spin_angle, uze)
    un = spin(spin_angle, une)
    uw = spin(spin_angle, uwe)
    return RotationMatrix.from_rows([
        [un[0], uw[0], uz[0]],
        [un[1], uw[1], uz[1]],
        [un[2], uw[2], uz[2]],
    ])


def rotation_hor_eqd(time: Instant, observer: Observer) -> RotationMatrix:
    return inverse_rotation(rotation_eqd_hor(time, observer))


def rotation_hor_eqj(time: Instant, observer: Observer) -> RotationMatrix:
    return combine_rotation(rotation_hor_eqd(time, observer), rotation_eqd_eqj(time))


def rotation_eqj_hor(time: Instant, observer: Observer) -> RotationMatrix:
    return inverse_rotation(rotation_hor_eqj(time, observer))


def rotation_eqd_ecl(time: Instant) -> RotationMatrix:
    return combine_rotation(rotation_eqd_eqj(time), rotation_eqj_ecl())


def rotation_ecl_eqd(time: Instant) -> RotationMatrix:
    return inverse_rotation(rotation_eqd_ecl(time))


def rotation_ecl_hor(time: Instant, observer: Observer) -> RotationMatrix:
    return combine_rotation(rotation_ecl_eqd(time), rotation_eqd_hor(time, observer))


def rotation_hor_ecl(time: Instant, observer: Observer) -> RotationMatrix:
    return inverse_rotation(rotation_ecl_hor(time, observer))


def rotation_eqj_gal() -> RotationMatrix:
    return RotationMatrix.from_rows(_EQJ_GAL)


def rotation_gal_eqj() -> RotationMatrix:
    return inverse_rotation(rotation_eqj_gal())

# tests/test_rotations.py

import math
import random

import pytest

from ephemcore import (
    Instant,
    InvalidArgumentError,
    Observer,
    Refraction,
    Spherical,
    Vector,
    combine_rotation,
    horizon_from_vector,
    identity_matrix,
    inverse_rotation,
    pivot,
    rotate_vector,
    rotation_ecl_eqd,
    rotation_ecl_eqj,
    rotation_ecl_hor,
    rotation_eqd_ecl,
    rotation_eqd_eqj,
    rotation_eqd_hor,
    rotation_eqj_ecl,
    rotation_eqj_eqd,
    rotation_eqj_gal,
    rotation_eqj_hor,
    rotation_gal_eqj,
    rotation_hor_ecl,
    rotation_hor_eqd,
    rotation_hor_eqj,
    sphere_from_vector,
    vector_from_horizon,
    vector_from_sphere,
)

TIME = Instant.from_calendar(2021, 6, 21, 3, 30)
OBSERVER = Observer(28.6, -81.2, 30.0)


def _assert_identity(rot, tol=1e-12):
    for i in range(3):
        for j in range(3):
            assert rot.rot[i][j] == pytest.approx(1.0 if i == j else 0.0, abs=tol)


PAIRS = [
    (rotation_eqj_ecl(), rotation_ecl_eqj()),
    (rotation_eqj_eqd(TIME), rotation_eqd_eqj(TIME)),
    (rotation_eqd_hor(TIME, OBSERVER), rotation_hor_eqd(TIME, OBSERVER)),
    (rotation_eqj_hor(TIME, OBSERVER), rotation_hor_eqj(TIME, OBSERVER)),
    (rotation_eqd_ecl(TIME), rotation_ecl_eqd(TIME)),
    (rotation_ecl_hor(TIME, OBSERVER), rotation_hor_ecl(TIME, OBSERVER)),
    (rotation_eqj_gal(), rotation_gal_eqj()),
]


@pytest.mark.parametrize("forward, backward", PAIRS)
def test_named_rotations_are_inverse_pairs(forward, backward):
    _assert_identity(combine_rotation(forward, backward))
    _assert_identity(combine_rotation(forward, inverse_rotation(forward)))


def test_rotation_is_linear():
    random.seed(42)
    rot = rotation_eqj_hor(TIME, OBSERVER)
    for _ in range(50):
        a = random.uniform(-3.0, 3.0)
        v1 = Vector(random.uniform(-1, 1), random.uniform(-1, 1), random.uniform(-1, 1), TIME)
        v2 = Vector(random.uniform(-1, 1), random.uniform(-1, 1), random.uniform(-1, 1), TIME)
        lhs = rotate_vector(rot, a * v1 + v2)
        rhs = a * rotate_vector(rot, v1) + rotate_vector(rot, v2)
        assert lhs.x == pytest.approx(rhs.x, abs=1e-12)
        assert lhs.y == pytest.approx(rhs.y, abs=1e-12)
        assert lhs.z == pytest.approx(rhs.z, abs=1e-12)


def test_combine_applies_first_argument_first():
    a = pivot(identity_matrix(), 2, 90.0)
    b = pivot(identity_matrix(), 0, 90.0)
    v = Vector(1.0, 0.0, 0.0, TIME)
    chained = rotate_vector(b, rotate_vector(a, v))
    combined = rotate_vector(combine_rotation(a, b), v)
    assert (combined.x, combined.y, combined.z) == pytest.approx((chained.x, chained.y, chained.z), abs=1e-15)


def test_pivot_rejects_bad_axis():
    with pytest.raises(InvalidArgumentError):
        pivot(identity_matrix(), 3, 10.0)


def test_galactic_center_lies_on_galactic_equator():
    # Sgr A*: RA 17h45m40s, Dec -29°00'28" (J2000)
    ra_deg = 15.0 * (17.0 + 45.0 / 60.0 + 40.0 / 3600.0)
    dec_deg = -(29.0 + 28.0 / 3600.0)
    eqj = vector_from_sphere(Spherical(dec_deg, ra_deg, 1.0), TIME)
    gal = sphere_from_vector(rotate_vector(rotation_eqj_gal(), eqj))
    assert gal.lat == pytest.approx(-0.05, abs=0.1)
    assert math.remainder(gal.lon, 360.0) == pytest.approx(0.0, abs=0.1)


def test_horizon_vector_roundtrip_with_refraction():
    for alt in (-5.0, 0.0, 0.5, 10.0, 45.0, 89.0):
        sph = Spherical(alt, 123.0, 1.0)
        vec = vector_from_horizon(sph, TIME, Refraction.NORMAL)
        back = horizon_from_vector(vec, Refraction.NORMAL)
        assert back.lat == pytest.approx(alt, abs=1e-10)
        assert back.lon == pytest.approx(123.0, abs=1e-10)

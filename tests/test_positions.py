# tests/test_positions.py

import importlib
import math
import threading
from unittest.mock import patch

import pytest

from ephemcore import (
    BadVectorError,
    Body,
    Instant,
    InvalidBodyError,
    KM_PER_AU,
    Observer,
    Refraction,
    Vector,
    angle_between,
    bary_state,
    body_code,
    constellation,
    ecliptic_geo_moon,
    geo_moon,
    geo_moon_state,
    geo_vector,
    helio_distance,
    helio_state,
    helio_vector,
    inverse_refraction_angle,
    jupiter_moons,
    libration,
    observer_vector,
    refraction_angle,
    vector_observer,
)
from ephemcore.engines import gravsim


def test_earth_at_j2000():
    # heliocentric EQJ position of the Earth at TT = J2000.0, JPL DE ephemeris (au)
    e = helio_vector(Body.EARTH, Instant.from_tt(0.0))
    assert e.x == pytest.approx(-0.177135, abs=1e-4)
    assert e.y == pytest.approx(+0.887429, abs=1e-4)
    assert e.z == pytest.approx(+0.384743, abs=1e-4)


def test_helio_distance_matches_vector_length():
    t = Instant.from_calendar(2030, 5, 17)
    for body in (Body.MERCURY, Body.VENUS, Body.MARS, Body.JUPITER, Body.SATURN, Body.URANUS, Body.NEPTUNE):
        assert helio_distance(body, t) == pytest.approx(helio_vector(body, t).length(), rel=1e-9)


def test_helio_velocity_matches_finite_difference():
    t = Instant.from_calendar(2010, 1, 1)
    dt = 0.01
    s = helio_state(Body.MARS, t)
    a = helio_vector(Body.MARS, t.add_days(-dt))
    b = helio_vector(Body.MARS, t.add_days(+dt))
    assert s.vx == pytest.approx((b.x - a.x) / (2 * dt), rel=1e-5)
    assert s.vy == pytest.approx((b.y - a.y) / (2 * dt), rel=1e-5)


def test_sun_is_near_the_barycenter():
    sun = bary_state(Body.SUN, Instant.from_calendar(2000, 1, 1))
    # the Sun wanders at most about two solar radii from the barycenter
    assert 0.0 < math.sqrt(sun.x ** 2 + sun.y ** 2 + sun.z ** 2) < 0.011


def test_pluto_distance():
    d = helio_distance(Body.PLUTO, Instant.from_calendar(1989, 9, 5))
    # perihelion 1989: 29.66 au
    assert d == pytest.approx(29.66, abs=0.05)


def test_pluto_cache_builds_each_segment_once():
    cache = gravsim.PlutoSegmentCache()
    tt = 7300.0
    results = []

    def worker():
        results.append(gravsim.pluto_state(tt, True, cache).r)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert cache.builds == 1
    assert all(r == results[0] for r in results)


def test_moon_distance_and_velocity():
    t = Instant.from_calendar(2020, 4, 7, 18)
    m = geo_moon(t)
    # supermoon perigee 2020-04-07: 356,907 km
    assert m.length() * KM_PER_AU == pytest.approx(356907.0, abs=500.0)
    s = geo_moon_state(t)
    speed_km_s = math.sqrt(s.vx ** 2 + s.vy ** 2 + s.vz ** 2) * KM_PER_AU / 86400.0
    assert 0.9 < speed_km_s < 1.2


def test_ecliptic_moon_latitude_is_bounded():
    t = Instant.from_calendar(2000, 1, 1)
    for day in range(0, 60, 3):
        sph = ecliptic_geo_moon(t.add_days(day))
        assert abs(sph.lat) < 5.4
        assert 0.0 <= sph.lon < 360.0


def test_libration_ranges():
    t = Instant.from_calendar(2021, 5, 26)
    lib = libration(t)
    assert 356000.0 < lib.dist_km < 407000.0
    assert 0.48 < lib.diam_deg < 0.57
    assert abs(lib.elat) < 7.5
    assert abs(lib.elon) < 8.5


def test_jupiter_moon_orbit_sizes():
    info = jupiter_moons(Instant.from_calendar(2022, 9, 26))
    expected_km = {
        "io": 421700.0,
        "europa": 671034.0,
        "ganymede": 1070412.0,
        "callisto": 1882709.0,
    }
    for name, km in expected_km.items():
        s = getattr(info, name)
        r = math.sqrt(s.x ** 2 + s.y ** 2 + s.z ** 2) * KM_PER_AU
        assert r == pytest.approx(km, rel=0.02)


def test_geo_vector_is_tagged_with_observation_time():
    t = Instant.from_calendar(2018, 7, 27)
    v = geo_vector(Body.MARS, t, True)
    assert v.t == t
    # Mars was at opposition, about 0.386 au away
    assert v.length() == pytest.approx(0.386, abs=0.005)


def test_observer_roundtrip():
    t = Instant.from_calendar(2015, 3, 20, 9, 45)
    for obs in (Observer(0.0, 0.0, 0.0), Observer(51.48, -0.0015, 45.0), Observer(-33.9, 151.2, 1200.0), Observer(89.99, 20.0, 0.0)):
        back = vector_observer(observer_vector(t, obs, False), False)
        assert back.latitude == pytest.approx(obs.latitude, abs=1e-9)
        assert back.height == pytest.approx(obs.height, abs=1e-3)
        if abs(obs.latitude) < 89.0:
            assert back.longitude == pytest.approx(obs.longitude, abs=1e-9)


def test_body_codes():
    assert body_code("mars") is Body.MARS
    assert body_code(" Moon ") is Body.MOON
    assert body_code("Vulcan") is Body.INVALID


def test_invalid_body():
    with pytest.raises(InvalidBodyError):
        helio_vector(Body.INVALID, Instant.from_ut(0.0))


def test_angle_between_rejects_zero_vector():
    t = Instant.from_ut(0.0)
    with pytest.raises(BadVectorError):
        angle_between(Vector(0.0, 0.0, 0.0, t), Vector(1.0, 0.0, 0.0, t))
    assert angle_between(Vector(1.0, 0.0, 0.0, t), Vector(0.0, 2.0, 0.0, t)) == pytest.approx(90.0)


def test_refraction():
    assert refraction_angle(Refraction.AIRLESS, 0.0) == 0.0
    # about 29 arcminutes at the horizon
    assert refraction_angle(Refraction.NORMAL, 0.0) == pytest.approx(0.483, abs=0.005)
    assert refraction_angle(Refraction.NORMAL, 90.0) == pytest.approx(0.0, abs=1e-4)
    assert refraction_angle(Refraction.NORMAL, -90.0) == pytest.approx(0.0, abs=1e-12)
    assert refraction_angle(Refraction.JPL_HOR, -5.0) == pytest.approx(refraction_angle(Refraction.JPL_HOR, -1.0))
    for alt in (-3.0, 0.0, 5.0, 30.0):
        bent = alt + refraction_angle(Refraction.NORMAL, alt)
        assert bent + inverse_refraction_angle(Refraction.NORMAL, bent) == pytest.approx(alt, abs=1e-10)


@pytest.mark.parametrize("ra, dec, symbol", [
    (2.5303, 89.2641, "UMi"),    # Polaris
    (5.9195, 7.4071, "Ori"),     # Betelgeuse
    (6.7525, -16.7161, "CMa"),   # Sirius
    (14.6600, -60.8339, "Cen"),  # Alpha Centauri
    (-5.3844, 38.7837, "Lyr"),   # Vega, RA wrapped from 18.6156h
])
def test_constellation(ra, dec, symbol):
    assert constellation(ra, dec).symbol == symbol


def test_constellation_rotation_built_once():
    # the package re-exports the function under the module name
    const_mod = importlib.import_module("ephemcore.constellation")

    symbols = []

    def worker():
        symbols.append(constellation(2.5303, 89.2641).symbol)

    with patch.object(const_mod, "_b1875_rotation", None), \
            patch.object(const_mod, "rotation_eqj_eqd", wraps=const_mod.rotation_eqj_eqd) as build:
        threads = [threading.Thread(target=worker) for _ in range(4)]
        for th in threads:
            th.start()
        for th in threads:
            th.join()
        assert build.call_count == 1

    assert symbols == ["UMi"] * 4

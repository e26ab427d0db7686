# tests/test_visibility.py

import pytest

from ephemcore import (
    Body,
    EarthNotAllowedError,
    Instant,
    InvalidArgumentError,
    InvalidBodyError,
    Visibility,
    constellation,
    elongation,
    illumination,
    search_max_elongation,
    search_peak_magnitude,
    search_relative_longitude,
)


def _ut(text):
    return Instant.parse(text).ut


def test_mercury_greatest_elongation_2010():
    evt = search_max_elongation(Body.MERCURY, Instant.from_calendar(2010, 1, 1))
    assert evt.visibility is Visibility.MORNING
    assert evt.time.ut == pytest.approx(_ut("2010-01-27T05:22Z"), abs=3.0 / 24.0)
    assert evt.elongation == pytest.approx(24.80, abs=0.1)


def test_venus_evening_elongation():
    # greatest eastern elongation 2020-03-24, 46.1°
    evt = search_max_elongation(Body.VENUS, Instant.from_calendar(2020, 1, 1))
    assert evt.visibility is Visibility.EVENING
    assert evt.time.ut == pytest.approx(_ut("2020-03-24T22:00Z"), abs=1.0)
    assert evt.elongation == pytest.approx(46.1, abs=0.2)


def test_elongation_of_outer_planet_at_opposition():
    evt = elongation(Body.JUPITER, Instant.from_calendar(2022, 9, 26, 20))
    assert evt.elongation == pytest.approx(180.0, abs=2.0)


def test_mars_opposition_2018():
    t = search_relative_longitude(Body.MARS, 0.0, Instant.from_calendar(2018, 1, 1))
    assert t.ut == pytest.approx(_ut("2018-07-27T05:07Z"), abs=1.0)


def test_relative_longitude_rejects_sun_and_earth():
    start = Instant.from_calendar(2018, 1, 1)
    with pytest.raises(InvalidBodyError):
        search_relative_longitude(Body.SUN, 0.0, start)
    with pytest.raises(EarthNotAllowedError):
        search_relative_longitude(Body.EARTH, 0.0, start)


def test_venus_peak_magnitude_2020():
    # greatest illuminated extent 2020-04-28
    info = search_peak_magnitude(Body.VENUS, Instant.from_calendar(2020, 1, 1))
    assert info.time.ut == pytest.approx(_ut("2020-04-28T12:00Z"), abs=2.0)
    assert info.mag < -4.4
    before = illumination(Body.VENUS, info.time.add_days(-3.0))
    after = illumination(Body.VENUS, info.time.add_days(+3.0))
    assert before.mag > info.mag and after.mag > info.mag


def test_peak_magnitude_only_for_venus():
    with pytest.raises(InvalidBodyError):
        search_peak_magnitude(Body.MARS, Instant.from_calendar(2020, 1, 1))


def test_illumination_values():
    sun = illumination(Body.SUN, Instant.from_calendar(2021, 1, 1))
    assert sun.mag == pytest.approx(-26.75, abs=0.1)
    assert sun.phase_fraction == 1.0

    full = illumination(Body.MOON, Instant.parse("2000-01-21T04:40Z"))
    assert full.phase_angle < 2.0
    assert full.phase_fraction > 0.99
    assert full.mag < -12.0

    jupiter = illumination(Body.JUPITER, Instant.from_calendar(2022, 9, 26, 20))
    assert jupiter.mag == pytest.approx(-2.94, abs=0.15)

    saturn = illumination(Body.SATURN, Instant.from_calendar(2022, 8, 14))
    assert saturn.ring_tilt is not None
    assert abs(saturn.ring_tilt) < 28.1
    assert mercury_has_no_rings()


def mercury_has_no_rings():
    return illumination(Body.MERCURY, Instant.from_calendar(2022, 8, 14)).ring_tilt is None


def test_illumination_rejects_earth():
    with pytest.raises(EarthNotAllowedError):
        illumination(Body.EARTH, Instant.from_calendar(2022, 1, 1))


def test_constellation_rejects_bad_declination():
    with pytest.raises(InvalidArgumentError):
        constellation(1.0, 95.0)

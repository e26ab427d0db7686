# tests/test_events.py
#
# Reference times are from published almanac data (USNO / Espenak); the
# tolerances cover the truncated series used by the engine.

import pytest

from ephemcore import (
    ApsisKind,
    Body,
    Instant,
    NodeEventKind,
    ecliptic_geo_moon,
    moon_phase,
    next_lunar_apsis,
    next_moon_node,
    next_moon_quarter,
    next_planet_apsis,
    search_lunar_apsis,
    search_moon_node,
    search_moon_phase,
    search_moon_quarter,
    search_planet_apsis,
    search_sun_longitude,
    seasons,
)

MINUTE = 1.0 / 1440.0


def _ut(text):
    return Instant.parse(text).ut


def test_seasons_2000():
    s = seasons(2000)
    assert s.mar_equinox.ut == pytest.approx(_ut("2000-03-20T07:35Z"), abs=2 * MINUTE)
    assert s.jun_solstice.ut == pytest.approx(_ut("2000-06-21T01:48Z"), abs=2 * MINUTE)
    assert s.sep_equinox.ut == pytest.approx(_ut("2000-09-22T17:27Z"), abs=2 * MINUTE)
    assert s.dec_solstice.ut == pytest.approx(_ut("2000-12-21T13:37Z"), abs=2 * MINUTE)


def test_sun_longitude_outside_window_is_none():
    # the Sun reaches 0° near March 20, not within ten days of January 1
    assert search_sun_longitude(0.0, Instant.from_calendar(2000, 1, 1), 10.0) is None


def test_moon_phase_at_new_moon_and_over_lunation():
    new_moon = Instant.parse("2000-01-06T18:14Z")
    assert abs(((moon_phase(new_moon) + 180.0) % 360.0) - 180.0) < 0.1

    # unwrapped phase increases through 90, 180 and 270 degrees
    prev = moon_phase(new_moon)
    unwrapped = 0.0
    for hour in range(6, int(29.5 * 24), 6):
        ph = moon_phase(new_moon.add_days(hour / 24.0))
        step = (ph - prev) % 360.0
        assert 0.0 < step < 10.0
        unwrapped += step
        prev = ph
    assert 345.0 < unwrapped < 365.0


def test_moon_quarters_january_2000():
    expected = [
        (0, "2000-01-06T18:14Z"),
        (1, "2000-01-14T13:34Z"),
        (2, "2000-01-21T04:40Z"),
        (3, "2000-01-28T07:57Z"),
    ]
    mq = search_moon_quarter(Instant.from_calendar(2000, 1, 1))
    for quarter, text in expected:
        assert mq.quarter == quarter
        assert mq.time.ut == pytest.approx(_ut(text), abs=2 * MINUTE)
        mq = next_moon_quarter(mq)
    assert mq.quarter == 0
    assert mq.name == "new moon"


def test_moon_phase_backward_search():
    start = Instant.from_calendar(2000, 1, 10)
    t = search_moon_phase(0.0, start, -20.0)
    assert t.ut == pytest.approx(_ut("2000-01-06T18:14Z"), abs=2 * MINUTE)
    assert search_moon_phase(0.0, start, -1.0) is None


def test_lunar_apsides_alternate():
    apsis = search_lunar_apsis(Instant.from_calendar(2001, 1, 1))
    prev = None
    for _ in range(12):
        if apsis.kind is ApsisKind.PERICENTER:
            assert 356000.0 < apsis.dist_km < 371000.0
        else:
            assert apsis.kind is ApsisKind.APOCENTER
            assert 404000.0 < apsis.dist_km < 407000.0
        if prev is not None:
            assert apsis.kind is not prev.kind
            assert 10.0 < apsis.time.ut - prev.time.ut < 19.0
        prev = apsis
        apsis = next_lunar_apsis(apsis)


def test_earth_perihelion_2000():
    apsis = search_planet_apsis(Body.EARTH, Instant.from_calendar(2000, 1, 1))
    assert apsis.kind is ApsisKind.PERICENTER
    assert apsis.time.ut == pytest.approx(_ut("2000-01-03T05:18Z"), abs=0.5)
    assert apsis.dist_au == pytest.approx(0.98333, abs=1e-4)

    aphelion = next_planet_apsis(Body.EARTH, apsis)
    assert aphelion.kind is ApsisKind.APOCENTER
    assert aphelion.time.ut == pytest.approx(_ut("2000-07-04T00:00Z"), abs=1.0)


@pytest.mark.parametrize("body", [Body.MERCURY, Body.MARS, Body.NEPTUNE])
def test_planet_apsides_alternate(body):
    apsis = search_planet_apsis(body, Instant.from_calendar(2000, 1, 1))
    following = next_planet_apsis(body, apsis)
    assert following.kind is not apsis.kind
    assert following.time.tt > apsis.time.tt
    if apsis.kind is ApsisKind.PERICENTER:
        assert apsis.dist_au < following.dist_au
    else:
        assert apsis.dist_au > following.dist_au


def test_moon_nodes_alternate():
    node = search_moon_node(Instant.from_calendar(2010, 1, 1))
    for _ in range(8):
        assert abs(ecliptic_geo_moon(node.time).lat) < 1e-3
        following = next_moon_node(node)
        assert following.kind is not node.kind
        assert following.kind in (NodeEventKind.ASCENDING, NodeEventKind.DESCENDING)
        assert 11.5 < following.time.ut - node.time.ut < 16.0
        node = following

# tests/test_eclipses.py

import pytest

from ephemcore import (
    Body,
    EclipseKind,
    Instant,
    InvalidArgumentError,
    InvalidBodyError,
    Observer,
    next_lunar_eclipse,
    next_transit,
    search_global_solar_eclipse,
    search_local_solar_eclipse,
    search_lunar_eclipse,
    search_transit,
)
from ephemcore.events.eclipses import obscuration

MINUTE = 1.0 / 1440.0


def _ut(text):
    return Instant.parse(text).ut


def test_lunar_eclipses_from_1988():
    # 1988-03-03 grazing, 1988-08-27 partial, 1989-02-20 total.
    # Espenak lists 1988-03-03 as penumbral; the enlarged 6459 km shadow
    # radius turns the graze into a partial eclipse of almost no depth.
    ecl = search_lunar_eclipse(Instant.from_calendar(1988, 1, 1))
    assert ecl.kind is EclipseKind.PARTIAL
    assert ecl.peak.ut == pytest.approx(_ut("1988-03-03T16:13Z"), abs=5 * MINUTE)
    assert 0.0 < ecl.obscuration < 0.001
    assert ecl.sd_penum > ecl.sd_partial > 0.0
    assert ecl.sd_total == 0.0

    ecl = next_lunar_eclipse(ecl.peak)
    assert ecl.kind is EclipseKind.PARTIAL
    assert 0.0 < ecl.obscuration < 1.0

    ecl = next_lunar_eclipse(ecl.peak)
    assert ecl.kind is EclipseKind.TOTAL
    assert ecl.peak.ut == pytest.approx(_ut("1989-02-20T15:35Z"), abs=5 * MINUTE)
    assert ecl.obscuration == 1.0
    assert ecl.sd_total > 0.0
    assert ecl.sd_penum > ecl.sd_partial > ecl.sd_total


def test_total_lunar_eclipse_january_2000():
    ecl = search_lunar_eclipse(Instant.from_calendar(2000, 1, 1))
    assert ecl.kind is EclipseKind.TOTAL
    assert ecl.peak.ut == pytest.approx(_ut("2000-01-21T04:44Z"), abs=5 * MINUTE)
    # totality lasted 77 minutes
    assert ecl.sd_total == pytest.approx(38.5, abs=2.0)


def test_global_solar_eclipse_2017():
    ecl = search_global_solar_eclipse(Instant.from_calendar(2017, 7, 1))
    assert ecl.kind is EclipseKind.TOTAL
    assert ecl.obscuration == 1.0
    assert ecl.peak.ut == pytest.approx(_ut("2017-08-21T18:26Z"), abs=3 * MINUTE)
    assert ecl.latitude == pytest.approx(36.97, abs=1.0)
    assert ecl.longitude == pytest.approx(-87.67, abs=1.5)


def test_annular_eclipse_2017():
    ecl = search_global_solar_eclipse(Instant.from_calendar(2017, 1, 1))
    assert ecl.kind is EclipseKind.ANNULAR
    assert ecl.peak.ut == pytest.approx(_ut("2017-02-26T14:54Z"), abs=5 * MINUTE)
    assert 0.0 < ecl.obscuration < 1.0


def test_local_total_solar_eclipse():
    observer = Observer(36.97, -87.67, 0.0)
    ecl = search_local_solar_eclipse(Instant.from_calendar(2017, 7, 1), observer)
    assert ecl.kind is EclipseKind.TOTAL
    assert ecl.total_begin is not None and ecl.total_end is not None
    times = [ecl.partial_begin.time, ecl.total_begin.time, ecl.peak.time, ecl.total_end.time, ecl.partial_end.time]
    assert times == sorted(times)
    # about 2m40s of totality near the point of greatest eclipse
    assert (ecl.total_end.time.ut - ecl.total_begin.time.ut) == pytest.approx(160.0 / 86400.0, abs=20.0 / 86400.0)
    assert ecl.peak.altitude > 50.0


def test_local_partial_solar_eclipse():
    # Seattle: 92% partial eclipse
    observer = Observer(47.61, -122.33, 50.0)
    ecl = search_local_solar_eclipse(Instant.from_calendar(2017, 7, 1), observer)
    assert ecl.kind is EclipseKind.PARTIAL
    assert ecl.total_begin is None and ecl.total_end is None
    assert ecl.obscuration == pytest.approx(0.90, abs=0.05)


def test_mercury_transit_2019():
    tr = search_transit(Body.MERCURY, Instant.from_calendar(2019, 1, 1))
    assert tr.start.ut == pytest.approx(_ut("2019-11-11T12:35Z"), abs=3 * MINUTE)
    assert tr.peak.ut == pytest.approx(_ut("2019-11-11T15:20Z"), abs=3 * MINUTE)
    assert tr.finish.ut == pytest.approx(_ut("2019-11-11T18:04Z"), abs=3 * MINUTE)
    assert tr.separation == pytest.approx(1.27, abs=0.1)

    following = next_transit(Body.MERCURY, tr.peak)
    # the next one is 2032-11-13
    assert following.peak.ut == pytest.approx(_ut("2032-11-13T08:54Z"), abs=10 * MINUTE)


def test_transit_rejects_outer_planets():
    with pytest.raises(InvalidBodyError):
        search_transit(Body.MARS, Instant.from_calendar(2019, 1, 1))


def test_obscuration():
    assert obscuration(1.0, 1.0, 2.5) == 0.0
    assert obscuration(1.0, 2.0, 0.5) == 1.0
    assert obscuration(2.0, 1.0, 0.0) == pytest.approx(0.25)
    half = obscuration(1.0, 1000.0, 1000.0)
    assert half == pytest.approx(0.5, abs=1e-3)
    with pytest.raises(InvalidArgumentError):
        obscuration(0.0, 1.0, 1.0)
    with pytest.raises(InvalidArgumentError):
        obscuration(1.0, 1.0, -1.0)

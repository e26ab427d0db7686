# tests/test_search.py

import math

import pytest

from ephemcore import Instant, search
from ephemcore.engines._solver import quad_interp


def test_single_ascending_root():
    t = search(lambda t: math.sin(t.ut), Instant.from_ut(-1.0), Instant.from_ut(1.0), 1.0)
    assert t is not None
    # tolerance of one second
    assert t.ut == pytest.approx(0.0, abs=2.0 / 86400.0)


def test_shifted_root_with_fine_tolerance():
    target = 1234.5678
    t = search(lambda t: math.sin((t.ut - target) / 3.0), Instant.from_ut(target - 2.0), Instant.from_ut(target + 3.0), 0.01)
    assert t.ut == pytest.approx(target, abs=1e-6)


def test_no_root_returns_none():
    assert search(lambda t: t.ut * t.ut + 1.0, Instant.from_ut(-1.0), Instant.from_ut(1.0), 1.0) is None


def test_two_roots_with_bump_left_of_midpoint_returns_none():
    # roots at -0.7 and -0.3; both ends and the midpoint are negative
    def bump(t):
        return 1.0 - ((t.ut + 0.5) / 0.2) ** 2

    assert search(bump, Instant.from_ut(-1.0), Instant.from_ut(1.0), 1.0) is None


def test_two_roots_with_positive_midpoint_takes_the_ascending_one():
    # cos rises through zero at -pi/2 and falls through it at +pi/2; the
    # bisection keeps the half where the sample rises through zero, which
    # is the left half because the midpoint is positive
    t = search(lambda t: math.cos(t.ut), Instant.from_ut(-2.0), Instant.from_ut(2.0), 1.0)
    assert t is not None
    assert t.ut == pytest.approx(-math.pi / 2.0, abs=1e-4)


def test_quad_interp_linear_and_degenerate():
    # straight line through (-1,-1), (0,0), (1,1)
    x, slope = quad_interp(0.0, 1.0, -1.0, 0.0, 1.0)
    assert x == pytest.approx(0.0)
    assert slope == pytest.approx(1.0)
    # flat
    assert quad_interp(0.0, 1.0, 2.0, 2.0, 2.0) is None
    # parabola with both roots inside the interval
    assert quad_interp(0.0, 1.0, 1.0, -1.0, 1.0) is None

# tests/conftest.py

import pytest

from ephemcore.engines import deltat


@pytest.fixture
def fixed_delta_t():
    """
    Pin ΔT to 67 seconds for the duration of a test, then restore whatever
    model was active before.
    """
    previous = deltat.set_delta_t_model(deltat.ConstantDeltaT(67.0))
    try:
        yield 67.0
    finally:
        deltat.set_delta_t_model(previous)

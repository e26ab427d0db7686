"""Ephemeris adapters (optional).

Thin wrappers around JPL binary ephemerides used to check the built-in
series. Install with:
  pip install "ephemcore[ephemeris]"
"""


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import numpy  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "ephemcore[ephemeris]"') from e

from __future__ import annotations


def normalize_longitude(lon: float) -> float:
    """Wrap degrees into [0, 360)."""
    while lon < 0.0:
        lon += 360.0
    while lon >= 360.0:
        lon -= 360.0
    return lon


def longitude_offset(diff: float) -> float:
    """Wrap degrees into (-180, +180]."""
    offset = diff
    while offset <= -180.0:
        offset += 360.0
    while offset > 180.0:
        offset -= 360.0
    return offset

"""
ephemcore.core.time
-------------------
`Instant`: a moment carrying both civil (UT) and dynamical (TT) day counts
since J2000 (2000-01-01T12:00Z).
"""

from __future__ import annotations

import functools
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, TypeVar

from ..engines.deltat import DeltaTModel, terrestrial_time, universal_time
from ..reference import time_scales as ts

T = TypeVar("T")


@functools.total_ordering
class Instant:
    """
    Immutable time value. Ordering and equality use `tt`.

    Expensive quantities that depend only on the instant (nutation angles,
    sidereal time) are cached through `derived()`.
    """
    __slots__ = ("ut", "tt", "_derived")

    def __init__(self, ut: float, tt: Optional[float] = None, *, model: Optional[DeltaTModel] = None):
        object.__setattr__(self, "ut", float(ut))
        object.__setattr__(self, "tt", float(tt) if tt is not None else terrestrial_time(ut, model))
        object.__setattr__(self, "_derived", {})

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Instant is immutable")

    # ---------------------------------------------------------------
    # constructors
    # ---------------------------------------------------------------

    @classmethod
    def from_ut(cls, ut: float) -> "Instant":
        return cls(ut)

    @classmethod
    def from_tt(cls, tt: float) -> "Instant":
        return cls(universal_time(tt), tt)

    @classmethod
    def from_calendar(cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: float = 0.0) -> "Instant":
        """UTC calendar fields, proleptic Gregorian."""
        return cls(ts.calendar_to_ut(year, month, day, hour, minute, second))

    @classmethod
    def parse(cls, text: str) -> "Instant":
        return cls(ts.parse_iso(text))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        return cls(ts.datetime_to_ut(dt))

    @classmethod
    def now(cls) -> "Instant":
        return cls.from_datetime(datetime.now(timezone.utc))

    # ---------------------------------------------------------------
    # arithmetic / conversion
    # ---------------------------------------------------------------

    def add_days(self, days: float) -> "Instant":
        """Shift by civil days; TT is re-derived from the new UT."""
        return Instant(self.ut + days)

    def to_datetime(self) -> datetime:
        return ts.ut_to_datetime(self.ut)

    def derived(self, key: str, factory: Callable[["Instant"], T]) -> T:
        """Return the cached value for `key`, computing it on first use."""
        cache: Dict[str, Any] = self._derived
        if key not in cache:
            cache.setdefault(key, factory(self))
        return cache[key]

    # ---------------------------------------------------------------
    # dunder
    # ---------------------------------------------------------------

    def __str__(self) -> str:
        return ts.format_iso(self.ut)

    def __repr__(self) -> str:
        return f"Instant('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.tt == other.tt

    def __lt__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.tt < other.tt

    def __hash__(self) -> int:
        return hash(self.tt)

    def __reduce__(self):
        return (Instant, (self.ut, self.tt))

from __future__ import annotations

"""
ephemcore.reference.deltat

Reference ΔT (= TT − UT) data: the Espenak–Meeus (NASA) piecewise polynomial
and an optional table of observed values.

The polynomial is defined for every finite decimal year and is the default
model used by the time engine. An observed table, when one is configured,
replaces the polynomial inside its coverage and is blended into it just past
the final tabulated year.

Table lookup order
------------------
  1) EPHEMCORE_DELTAT_TABLE environment variable (path to CSV)
  2) user cache ($XDG_CACHE_HOME/ephemcore/deltat.csv or ~/.cache/ephemcore/deltat.csv)

Expected CSV columns: ``decimal_year, delta_t_seconds`` (extra columns ignored).
"""

import csv
import logging
import os
from bisect import bisect_right
from dataclasses import dataclass
from functools import lru_cache, reduce
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

TABLE_ENV_VAR = "EPHEMCORE_DELTAT_TABLE"
TABLE_FILENAME = "deltat.csv"


# ---------------------------------------------------------------------------
# Observed table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeltaTTable:
    """Observed ΔT samples, linearly interpolated between tabulated years."""
    x: Tuple[float, ...]   # decimal years, strictly increasing
    y: Tuple[float, ...]   # ΔT in seconds

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise ValueError("ΔT table columns differ in length")
        if len(self.x) < 2:
            raise ValueError("ΔT table needs at least two rows")
        if any(b <= a for a, b in zip(self.x, self.x[1:])):
            raise ValueError("ΔT table years are not strictly increasing")

    def __len__(self) -> int:
        return len(self.x)

    @property
    def range(self) -> Tuple[float, float]:
        return self.x[0], self.x[-1]

    def eval(self, year: float) -> float:
        first, last = self.range
        if year < first or year > last:
            raise ValueError(f"year {year} outside ΔT table [{first}, {last}]")
        # index of the segment [x[i-1], x[i]] holding `year`
        i = min(max(bisect_right(self.x, year), 1), len(self.x) - 1)
        frac = (year - self.x[i - 1]) / (self.x[i] - self.x[i - 1])
        return self.y[i - 1] + frac * (self.y[i] - self.y[i - 1])


def table_from_rows(rows: Iterable[dict], *, xcol: str = "decimal_year", ycol: str = "delta_t_seconds") -> DeltaTTable:
    """Build a table from CSV dict rows; blank rows are skipped."""
    pairs = [(float(r[xcol]), float(r[ycol])) for r in rows if (r.get(xcol) or "").strip()]
    years = tuple(p[0] for p in pairs)
    values = tuple(p[1] for p in pairs)
    return DeltaTTable(years, values)


def read_table(path: Path) -> DeltaTTable:
    with path.open("r", encoding="utf-8", newline="") as f:
        return table_from_rows(csv.DictReader(f))


def _candidate_paths() -> Iterator[Path]:
    p = os.environ.get(TABLE_ENV_VAR, "").strip()
    if p:
        yield Path(p).expanduser()
    xdg = os.environ.get("XDG_CACHE_HOME", "").strip()
    cache_dir = (Path(xdg).expanduser() / "ephemcore") if xdg else (Path.home() / ".cache" / "ephemcore")
    yield cache_dir / TABLE_FILENAME


@lru_cache(maxsize=1)
def load_observed_table() -> Optional[DeltaTTable]:
    """
    Load the first readable observed ΔT table, or None when none is configured.
    Unreadable files are logged and skipped.
    """
    for path in _candidate_paths():
        if not path.is_file():
            continue
        try:
            tbl = read_table(path)
        except (OSError, ValueError, KeyError) as e:
            logger.warning("Ignoring unreadable ΔT table %s: %s", path, e)
            continue
        logger.debug("Loaded ΔT table %s (%d rows, %.2f..%.2f)", path, len(tbl), *tbl.range)
        return tbl
    return None


# ---------------------------------------------------------------------------
# Espenak–Meeus piecewise polynomial
# ---------------------------------------------------------------------------

def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    # coeffs in ascending powers of u
    return reduce(lambda acc, c: acc * u + c, reversed(coeffs), 0.0)


# (end_year, origin, scale, coefficients): valid for y < end_year,
# evaluated at u = (y - origin) / scale.
_EM_BRANCHES: Tuple[Tuple[float, float, float, Tuple[float, ...]], ...] = (
    (-500.0, 1820.0, 100.0, (-20.0, 0.0, 32.0)),
    (500.0, 0.0, 100.0, (10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521)),
    (1600.0, 1000.0, 100.0, (1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073)),
    (1700.0, 1600.0, 1.0, (120.0, -0.9808, -0.01532, 1.0 / 7129.0)),
    (1800.0, 1700.0, 1.0, (8.83, 0.1603, -0.0059285, 0.00013336, -1.0 / 1174000.0)),
    (1860.0, 1800.0, 1.0, (13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436, 0.0000121272, -0.0000001699, 0.000000000875)),
    (1900.0, 1860.0, 1.0, (7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1.0 / 233174.0)),
    (1920.0, 1900.0, 1.0, (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197)),
    (1941.0, 1920.0, 1.0, (21.20, 0.84493, -0.076100, 0.0020936)),
    (1961.0, 1950.0, 1.0, (29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0)),
    (1986.0, 1975.0, 1.0, (45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0)),
    (2005.0, 2000.0, 1.0, (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599)),
    (2050.0, 2000.0, 1.0, (62.92, 0.32217, 0.005589)),
)


def delta_t_em2006(y: float) -> float:
    """
    Espenak–Meeus ΔT(y) in seconds for decimal year y.

    Before −500 and after 2150 the long-term parabola −20 + 32u²
    (u = (y − 1820)/100) applies; 2050..2150 carries the published
    continuity correction.
    """
    for end, origin, scale, coeffs in _EM_BRANCHES:
        if y < end:
            return _poly((y - origin) / scale, coeffs)
    u = (y - 1820.0) / 100.0
    if y < 2150.0:
        return -20.0 + 32.0 * u * u - 0.5628 * (2150.0 - y)
    return -20.0 + 32.0 * u * u


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

METHODS = ("best", "table", "em2006")


def _blend_past_table(tbl: DeltaTTable, y: float, blend_years: float) -> float:
    # carry the table/polynomial offset at the last row, fading over blend_years
    last = tbl.range[1]
    if blend_years <= 0.0:
        return delta_t_em2006(y)
    offset = tbl.eval(last) - delta_t_em2006(last)
    fade = max(0.0, 1.0 - (y - last) / blend_years)
    return delta_t_em2006(y) + fade * offset


def delta_t_seconds(y: float, *, method: str = "best", blend_years: float = 30.0) -> float:
    """ΔT in seconds at decimal year `y`.

    ``em2006`` uses the polynomial alone. ``table`` demands an observed table
    covering `y`. ``best`` (default) uses the table inside its coverage, the
    polynomial before it, and a faded table offset for ``blend_years`` after it.
    """
    method = method.strip().lower()
    if method not in METHODS:
        raise ValueError(f"method must be one of: {', '.join(METHODS)}")
    if method == "em2006":
        return delta_t_em2006(y)

    tbl = load_observed_table()
    if tbl is not None:
        first, last = tbl.range
        if first <= y <= last:
            return tbl.eval(y)
    if method == "table":
        if tbl is None:
            raise RuntimeError(f"No observed ΔT table configured. Set {TABLE_ENV_VAR} to a CSV file.")
        raise ValueError(f"year {y} outside ΔT table [{first}, {last}]")
    if tbl is not None and y > last:
        return _blend_past_table(tbl, y, blend_years)
    return delta_t_em2006(y)

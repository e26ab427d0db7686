from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Tuple

from ..core.errors import DateTimeFormatError

# ============================================================
# Epochs
# ============================================================

JD_J2000 = 2451545.0
J2000_UTC = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)


def jd_from_day_count(days: float) -> float:
    return days + JD_J2000


# ============================================================
# Proleptic Gregorian calendar <-> JDN (Fliegel–Van Flandern)
# ============================================================

def ymd_to_jdn(year: int, month: int, day: int) -> int:
    """
    Proleptic Gregorian date -> Julian Day Number. Any integer year;
    floor division keeps the formula valid before -4800.
    """
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


# ============================================================
# Calendar <-> day count since J2000 (UT)
# ============================================================

def calendar_to_ut(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: float = 0.0) -> float:
    """UTC calendar fields -> days since 2000-01-01T12:00Z."""
    jdn = ymd_to_jdn(int(year), int(month), int(day))
    return (jdn - JD_J2000 - 0.5) + hour / 24.0 + minute / 1440.0 + second / 86400.0


def ut_to_calendar(ut: float) -> Tuple[int, int, int, int, int, float]:
    """
    Days since J2000 -> (year, month, day, hour, minute, second), rounded
    to the nearest millisecond.
    """
    djd = ut + JD_J2000 + 0.5
    jdn = math.floor(djd)
    millis = round((djd - jdn) * 86400000.0)
    if millis >= 86400000:
        jdn += 1
        millis -= 86400000
    year, month, day = jdn_to_ymd(jdn)
    hour, millis = divmod(millis, 3600000)
    minute, millis = divmod(millis, 60000)
    return year, month, day, hour, minute, millis / 1000.0


# ============================================================
# ISO-8601 text
# ============================================================

_ISO_RE = re.compile(
    r"^([\+\-]?[0-9]+)-([0-9]{2})-([0-9]{2})"
    r"(T([0-9]{2}):([0-9]{2})(:([0-9]{2}(\.[0-9]+)?))?Z)?$"
)


def parse_iso(text: str) -> float:
    """
    'YYYY-MM-DD' or 'YYYY-MM-DDThh:mm[:ss[.fff]]Z' -> UT day count.
    Years may carry a sign and more than four digits.
    """
    m = _ISO_RE.match(text.strip())
    if m is None:
        raise DateTimeFormatError(text)
    year = int(m.group(1))
    month = int(m.group(2))
    day = int(m.group(3))
    hour = int(m.group(5) or "0")
    minute = int(m.group(6) or "0")
    second = float(m.group(8) or "0")
    if not (1 <= month <= 12 and 1 <= day <= 31 and 0 <= hour <= 23 and 0 <= minute <= 59):
        raise DateTimeFormatError(text)
    if not (0.0 <= second < 60.0):
        raise DateTimeFormatError(text)
    return calendar_to_ut(year, month, day, hour, minute, second)


def format_iso(ut: float) -> str:
    year, month, day, hour, minute, second = ut_to_calendar(ut)
    if year < 0:
        ytext = f"-{-year:06d}"
    elif year <= 9999:
        ytext = f"{year:04d}"
    else:
        ytext = f"+{year:06d}"
    return f"{ytext}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:06.3f}Z"


# ============================================================
# datetime(UTC) <-> UT day count
# ============================================================

def datetime_to_ut(dt: datetime) -> float:
    """Timezone-aware datetime -> UT day count."""
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return (dt.astimezone(timezone.utc) - J2000_UTC) / timedelta(days=1)


def ut_to_datetime(ut: float) -> datetime:
    """UT day count -> timezone-aware UTC datetime (years 1..9999 only)."""
    return J2000_UTC + timedelta(days=ut)


def decimal_year(ut: float) -> float:
    """Mean-tropical-year approximation with y = 2000.0 at 2000-01-15."""
    return 2000.0 + (ut - 14.0) / 365.24217

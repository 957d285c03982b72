from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import math


# JD of the first Gregorian day (1582-10-15) as seen by the forward transform,
# and the integer JD from which the inverse transform switches calendars.
REFORM_JD_FORWARD = 2299171
REFORM_JD_INVERSE = 2299161


@dataclass(frozen=True)
class CivilDate:
    """Civil calendar date; ``day`` carries the time of day as a fraction."""
    year: int
    month: int
    day: float

    @property
    def day_of_month(self) -> int:
        return int(math.floor(self.day))

    @property
    def day_fraction(self) -> float:
        return self.day - math.floor(self.day)

    @property
    def hour(self) -> int:
        return int(self.day_fraction * 24.0)

    @property
    def minute(self) -> int:
        return int((self.day_fraction * 24.0 - self.hour) * 60.0)

    @property
    def second(self) -> int:
        return int(((self.day_fraction * 24.0 - self.hour) * 60.0 - self.minute) * 60.0)


def civil_to_julian(month: int, day: float, year: int) -> float:
    """
    Civil date -> Julian Day (JD at local midnight plus the fraction in ``day``).

    Dates up to 1582-10-04 are read on the Julian calendar, later dates on the
    Gregorian one.
    """
    n = 12 * (year + 4800) + month - 3
    jd = (2 * (n - math.floor(n / 12) * 12) + 7 + 365 * n) / 12
    jd = math.floor(jd) + day + math.floor(n / 48) - 32083
    if jd > REFORM_JD_FORWARD:
        jd += math.floor(n / 4800) - math.floor(n / 1200) + 38
    return jd - 0.5


def julian_to_civil(jd: float) -> CivilDate:
    """Inverse of civil_to_julian (Meeus, Astronomical Algorithms ch. 7)."""
    z = math.floor(jd + 0.5)
    f = jd + 0.5 - z
    if z < REFORM_JD_INVERSE:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return CivilDate(year=int(year), month=int(month), day=float(day))


def weekday_index(jd: float) -> int:
    """0=Sunday .. 6=Saturday for the civil day containing ``jd``."""
    return int(math.floor(jd + 0.5) + 1) % 7


def decimal_year(jd: float) -> float:
    """Decimal year used by the ΔT model: year + (month-1)/12 + (day-1)/365.25."""
    c = julian_to_civil(jd)
    return c.year + (c.month - 1) / 12.0 + (c.day_of_month - 1) / 365.25


# ============================================================
# datetime helpers
# ============================================================

def utc_offset_hours(dt: datetime) -> float:
    """UTC offset of an aware datetime, in hours."""
    off = dt.utcoffset()
    if off is None:
        raise ValueError("datetime must be timezone-aware")
    return off.total_seconds() / 3600.0


def datetime_to_julian(dt: datetime) -> float:
    """Local JD of a datetime's wall-clock reading (tzinfo ignored)."""
    hours = dt.hour + dt.minute / 60.0 + (dt.second + dt.microsecond / 1e6) / 3600.0
    return civil_to_julian(dt.month, dt.day + hours / 24.0, dt.year)


def fixed_offset(tz_offset_hours: float) -> timezone:
    return timezone(timedelta(hours=tz_offset_hours))


def civil_to_datetime(c: CivilDate, tz_offset_hours: float) -> datetime:
    """CivilDate -> aware datetime carrying a fixed UTC offset."""
    base = datetime(c.year, c.month, c.day_of_month, tzinfo=fixed_offset(tz_offset_hours))
    return base + timedelta(days=c.day_fraction)


def julian_to_datetime(jd: float, tz_offset_hours: float) -> datetime:
    """Local JD -> aware datetime in the given fixed offset."""
    return civil_to_datetime(julian_to_civil(jd), tz_offset_hours)

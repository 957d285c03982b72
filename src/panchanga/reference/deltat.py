from __future__ import annotations

"""
panchanga.reference.deltat

ΔT (= TT − UT) model used by the almanac.

- 1620..2010: linear interpolation in a table of observed decade values.
- after 2010:  25.5 t² − 39
- 948..1620:   25.5 t²
- before 948:  1361.7 + 320 t + 44.3 t²

with t in Julian centuries from JD 2378497. Values outside the tabulated band
are extrapolations; a RangeWarning is issued for them.
"""

from dataclasses import dataclass
from typing import Tuple
import logging
import warnings

from ..core.errors import RangeWarning
from ..core.time import decimal_year

log = logging.getLogger(__name__)

DELTA_T_EPOCH_JD = 2378497.0

TABLE_START_YEAR = 1620.0
TABLE_STEP_YEARS = 10.0

# Observed ΔT (seconds) at 1620, 1630, ..., 2010.
DECADE_VALUES: Tuple[float, ...] = (
    124.0, 85.0, 62.0, 48.0, 37.0, 26.0, 16.0, 10.0, 9.0, 10.0,
    11.0, 11.0, 12.0, 13.0, 15.0, 16.0, 17.0, 17.0, 13.7, 12.5,
    12.0, 7.5, 5.7, 7.1, 7.9, 1.6, -5.4, -5.9, -2.7, 10.5,
    21.2, 24.0, 24.3, 29.2, 33.2, 40.2, 50.5, 56.9, 65.7, 75.5,
)


@dataclass(frozen=True)
class DeltaTTable:
    """
    Piecewise-linear ΔT table over decimal-year coordinate.
    """
    x: Tuple[float, ...]   # decimal years (strictly increasing)
    y: Tuple[float, ...]   # ΔT in seconds

    def __len__(self) -> int:
        return len(self.x)

    def eval(self, xq: float) -> float:
        if not (self.x[0] <= xq <= self.x[-1]):
            raise ValueError(f"x out of range [{self.x[0]}, {self.x[-1]}]: {xq}")
        # binary search
        lo, hi = 0, len(self.x) - 1
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if self.x[mid] <= xq:
                lo = mid
            else:
                hi = mid
        x0, x1 = self.x[lo], self.x[hi]
        y0, y1 = self.y[lo], self.y[hi]
        if x1 == x0:
            return y0
        t = (xq - x0) / (x1 - x0)
        return y0 + t * (y1 - y0)

    @property
    def range(self) -> Tuple[float, float]:
        return (self.x[0], self.x[-1])


DECADE_TABLE = DeltaTTable(
    x=tuple(TABLE_START_YEAR + TABLE_STEP_YEARS * i for i in range(len(DECADE_VALUES))),
    y=DECADE_VALUES,
)


def _centuries(jd: float) -> float:
    return (jd - DELTA_T_EPOCH_JD) / 36525.0


def delta_t_seconds(jd: float) -> float:
    """ΔT in seconds for a UT Julian Day."""
    y = decimal_year(jd)
    first, last = DECADE_TABLE.range
    if first <= y < last:
        return DECADE_TABLE.eval(y)

    t = _centuries(jd)
    if y >= last:
        dt = 25.5 * t * t - 39.0
    elif y >= 948.0:
        dt = 25.5 * t * t
    else:
        dt = 1361.7 + 320.0 * t + 44.3 * t * t

    log.debug("ΔT extrapolated for year %.2f: %.1f s", y, dt)
    warnings.warn(
        f"ΔT for year {y:.1f} is extrapolated outside {first:.0f}-{last:.0f}",
        RangeWarning,
        stacklevel=2,
    )
    return dt


def delta_t_hours(jd: float) -> float:
    """ΔT in hours for a UT Julian Day."""
    return delta_t_seconds(jd) / 3600.0

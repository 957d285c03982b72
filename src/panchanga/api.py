from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Optional

from .attributes.names import name_of
from .core.errors import InvalidInputError
from .core.time import datetime_to_julian, fixed_offset, utc_offset_hours, weekday_index
from .core.types import AlmanacElement, AlmanacResult, Ayanamsa, CalculationContext, SolverConfig
from .engines import elements as el
from .engines.solver import nakshatra_segment, tithi_segment, yoga_segment
from .reference.astro_args import ayanamsa, format_dms
from .reference.deltat import delta_t_hours
from .reference.lunar import moon_longitude
from .reference.solar import sun_longitude

log = logging.getLogger(__name__)

VERSION = "0.2"


def _resolve_offset(instant: datetime, tz_offset_hours: Optional[float]) -> float:
    if not isinstance(instant, datetime):
        raise InvalidInputError(f"instant must be a datetime, got {type(instant).__name__}")

    if instant.utcoffset() is not None:
        hours = utc_offset_hours(instant)
        if tz_offset_hours is not None and tz_offset_hours != hours:
            raise InvalidInputError(
                f"tz_offset_hours={tz_offset_hours} conflicts with the datetime's offset {hours}"
            )
        return hours

    if tz_offset_hours is None:
        raise InvalidInputError("naive datetime requires tz_offset_hours")
    try:
        hours = float(tz_offset_hours)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"tz_offset_hours is not a number: {tz_offset_hours!r}") from e
    if not math.isfinite(hours) or abs(hours) >= 24.0:
        raise InvalidInputError(f"tz_offset_hours out of range: {tz_offset_hours!r}")
    return hours


def calculate(
    instant: datetime,
    *,
    tz_offset_hours: Optional[float] = None,
    config: Optional[SolverConfig] = None,
) -> AlmanacResult:
    """
    Almanac elements in force at ``instant``.

    Aware datetimes supply their own UTC offset; naive ones are read as wall
    clock time at ``tz_offset_hours``. Interval boundaries are returned as
    aware datetimes at that same fixed offset.
    """
    tz = _resolve_offset(instant, tz_offset_hours)
    config = config or SolverConfig()
    ctx = CalculationContext()

    local_jd = datetime_to_julian(instant)
    weekday = weekday_index(local_jd)

    jd_ut = local_jd - tz / 24.0
    ctx.delta_t_hours = delta_t_hours(jd_ut)
    jd = jd_ut + ctx.delta_t_hours / 24.0
    ctx.ayanamsa_deg = ayanamsa(jd)

    moon = moon_longitude(jd, ctx)
    sun = sun_longitude(
        jd,
        ctx,
        kepler_tolerance_deg=config.kepler_tolerance_deg,
        kepler_max_iterations=config.kepler_max_iterations,
    )
    log.debug("JD %.6f: moon %.6f sun %.6f ayanamsa %.6f", jd, moon, sun, ctx.ayanamsa_deg)

    # All indices are read before the solvers overwrite the scratch values.
    raw_yoga = el.yoga_raw(ctx)
    yoga_idx = el.yoga_index(raw_yoga)
    sidereal_moon = el.sidereal(moon, ctx.ayanamsa_deg)
    nakshatra_idx = el.nakshatra_index(sidereal_moon)
    tithi_idx = el.tithi_index(moon, sun)
    karana_raw = el.karana_count(moon, sun)
    karana_idx = el.karana_index(karana_raw)
    raasi_idx = el.raasi_index(sidereal_moon)

    yoga_seg = yoga_segment(jd, raw_yoga, tz, ctx, config)
    nakshatra_seg = nakshatra_segment(jd, nakshatra_idx, tz, ctx, config)
    tithi_seg = tithi_segment(jd, tithi_idx, tz, el.TITHI_DEG, ctx, config)
    karana_seg = tithi_segment(jd, karana_raw, tz, el.KARANA_DEG, ctx, config)

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=fixed_offset(tz))

    return AlmanacResult(
        instant=instant,
        weekday=AlmanacElement(weekday, name_of("weekday", weekday)),
        tithi=AlmanacElement(tithi_idx, name_of("tithi", tithi_idx), tithi_seg.start, tithi_seg.end),
        nakshatra=AlmanacElement(
            nakshatra_idx, name_of("nakshatra", nakshatra_idx), nakshatra_seg.start, nakshatra_seg.end
        ),
        karana=AlmanacElement(karana_idx, name_of("karana", karana_idx), karana_seg.start, karana_seg.end),
        yoga=AlmanacElement(yoga_idx, name_of("yoga", yoga_idx), yoga_seg.start, yoga_seg.end),
        raasi=AlmanacElement(raasi_idx, name_of("raasi", raasi_idx)),
        ayanamsa=Ayanamsa(degrees=ctx.ayanamsa_deg, formatted=format_dms(ctx.ayanamsa_deg)),
        version=VERSION,
    )

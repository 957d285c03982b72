# reference/lunar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.types import CalculationContext
from . import astro_args as aa
from .series import BaseAngles, PerturbationTerm, sum_cosine_series, sum_sine_series
from .tables import (
    MOON_MEAN_MOTION,
    MOON_PLANETARY,
    MOON_PRIMARY,
    MOON_SECONDARY,
    MOON_VELOCITY,
    NEW_MOON_TERMS,
)


@dataclass(frozen=True)
class MoonPosition:
    """Apparent lunar longitude (degrees) and angular velocity (degrees/day)."""
    longitude_deg: float
    unreduced_deg: float
    velocity_deg_per_day: float


@dataclass(frozen=True)
class LongPeriodTerms:
    """Long-period corrections (arc-seconds) fed back into the mean elements."""
    longitude: float
    perigee: float
    node: float
    sun: float
    gravity: float  # dimensionless scale for F-dependent rows


def long_period_terms(days: float) -> LongPeriodTerms:
    t1 = days * 1e-12
    t2 = days * days * 1e-16

    s1 = aa.sin_turn(0.53733431 - 10104982 * t1 + 191 * t2)
    a2 = 0.71995354 - 147094228 * t1 + 43 * t2
    s2, c2 = aa.sin_turn(a2), aa.cos_turn(a2)
    s3 = aa.sin_turn(0.14222222 + 1536238 * t1)
    a4 = 0.48398132 - 147269147 * t1 + 43 * t2
    s4, c4 = aa.sin_turn(a4), aa.cos_turn(a4)
    s5 = aa.sin_turn(0.52453688 - 147162675 * t1 + 43 * t2)
    s6 = aa.sin_turn(0.84536324 - 11459387 * t1)
    s7 = aa.sin_turn(0.23363774 + 1232723 * t1 + 191 * t2)
    s8 = aa.sin_turn(0.5875 + 9050118 * t1)
    s9 = aa.sin_turn(0.61043085 - 67718733 * t1)

    gravity = 1.000002708 + 139.978 * (-4.318 * c2 - 0.698 * c4) / (3600.0 * 360.0)

    return LongPeriodTerms(
        longitude=0.84 * s3 + 0.31 * s7 + 14.27 * s1 + 7.261 * s2 + 0.282 * s4 + 0.237 * s6,
        perigee=-2.1 * s3 - 2.076 * s2 - 0.84 * s4 - 0.593 * s6,
        node=0.63 * s3 + 95.96 * s2 + 15.58 * s4 + 1.86 * s5,
        sun=-6.4 * s3 - 0.27 * s8 - 1.89 * s6 + 0.2 * s9,
        gravity=gravity,
    )


def moon_longitude(jd: float, ctx: CalculationContext) -> float:
    """
    Apparent ecliptic longitude of the Moon (degrees, [0,360)) at dynamical JD.

    Side effects on ``ctx``: the unreduced longitude is stored in
    ``moon_longitude_for_yoga`` and the instantaneous angular velocity in
    ``moon_angular_velocity``.
    """
    days = aa.days_since_epoch(jd)
    T = days / 36525.0
    T2 = T * T
    T3 = T2 * T

    mean_longitude = 270.4337361 + 13.176396544528099 * days - 5.86 * T2 / 3600 + 0.0068 * T3 / 3600
    elongation = (
        350.7374861110581
        + 445267.1142166667 * T
        - 1.436111132303874e-3 * T2
        + 0.0000018888889 * T3
    )
    perigee = 334.329556 + 14648522.52 * T / 3600 - 37.17 * T2 / 3600 - 0.045 * T3 / 3600
    sun_anomaly = (
        358.4758333333334
        + 35999.04975 * T
        - 1.500000059604645e-4 * T2
        - 3.3333333623078e-6 * T3
    )
    node = 259.183275 - 6962911.23 * T / 3600 + 7.48 * T2 / 3600 + 0.008 * T3 / 3600

    moon_anomaly = aa.wrap_deg(mean_longitude - perigee)
    latitude_argument = aa.wrap_deg(mean_longitude - node)

    # Two-stage refinement: long-period terms shift the anomalies first.
    lp = long_period_terms(days)
    angles = BaseAngles(
        moon_anomaly=math.radians(moon_anomaly + (lp.longitude - lp.perigee) / 3600.0),
        sun_anomaly=math.radians(sun_anomaly + lp.sun / 3600.0),
        latitude_argument=math.radians(latitude_argument + (lp.longitude - lp.node) / 3600.0),
        elongation=math.radians(elongation + (lp.longitude - lp.sun) / 3600.0),
    )

    secular = 1.0 - 6.832e-8 * days
    gravity2 = lp.gravity * lp.gravity

    def weight(term: PerturbationTerm) -> float:
        w = 1.0
        if term.sun_anomaly != 0:
            w *= secular
            if abs(term.sun_anomaly) == 2:
                w *= secular
        if term.latitude_argument != 0:
            w *= gravity2
        return w

    primary = sum_sine_series(MOON_PRIMARY, angles, weight)
    secondary = sum_sine_series(MOON_SECONDARY, angles)
    planetary = sum(amp * aa.sin_turn(phase + rate * days) for amp, phase, rate in MOON_PLANETARY)

    longitude = (
        mean_longitude
        + aa.nutation(jd)
        + (lp.longitude + primary + secondary + planetary) / 3600.0
    )
    ctx.moon_longitude_for_yoga = longitude
    ctx.moon_angular_velocity = MOON_MEAN_MOTION + sum_cosine_series(MOON_VELOCITY, angles)

    return aa.wrap_deg(longitude)


def moon_position(jd: float) -> MoonPosition:
    """Convenience wrapper with its own scratch context."""
    ctx = CalculationContext()
    lon = moon_longitude(jd, ctx)
    return MoonPosition(
        longitude_deg=lon,
        unreduced_deg=ctx.moon_longitude_for_yoga,
        velocity_deg_per_day=ctx.moon_angular_velocity,
    )


# ------------------------------------------------------------
# New moon (closed form, no iteration)
# ------------------------------------------------------------

NEW_MOON_EPOCH_JD = 2415020.75933
SYNODIC_MONTH_DAYS = 29.53058868
LUNATIONS_PER_YEAR = 12.3685


def new_moon_jd(k: int) -> float:
    """
    Julian Day of the k-th new moon counted from the 1900 January epoch.
    """
    T = k / 1236.85
    T2 = T * T
    T3 = T2 * T

    jd = NEW_MOON_EPOCH_JD + SYNODIC_MONTH_DAYS * k + 0.0001178 * T2 - 0.000000155 * T3
    jd += 0.00033 * aa.sin_deg(166.56 + 132.87 * T - 0.009173 * T2)

    sun_anomaly = 359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3
    moon_anomaly = 306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3
    latitude_argument = 21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3

    angles = BaseAngles(
        moon_anomaly=math.radians(moon_anomaly),
        sun_anomaly=math.radians(sun_anomaly),
        latitude_argument=math.radians(latitude_argument),
        elongation=0.0,
    )
    correction = sum_sine_series(NEW_MOON_TERMS, angles)
    correction -= 0.000393 * T * math.sin(angles.sun_anomaly)
    return jd + correction


def lunation_estimate(jd: float) -> int:
    """Approximate lunation count since the 1900 epoch."""
    return int(math.floor((jd - aa.B1900_JD) / 365.25 * LUNATIONS_PER_YEAR))


def nearest_new_moon_jd(jd: float) -> float:
    """New moon closest in time to ``jd``."""
    k = lunation_estimate(jd)
    k += int(round((jd - new_moon_jd(k)) / SYNODIC_MONTH_DAYS))
    best = new_moon_jd(k)
    for cand in (new_moon_jd(k - 1), new_moon_jd(k + 1)):
        if abs(cand - jd) < abs(best - jd):
            best = cand
    return best

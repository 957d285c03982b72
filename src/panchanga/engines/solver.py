from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Callable, Tuple

from ..core.errors import ConvergenceError, InvalidInputError
from ..core.time import julian_to_datetime
from ..core.types import CalculationContext, SolverConfig, TimeSegment
from ..reference.astro_args import wrap180, wrap_deg
from ..reference.lunar import moon_longitude, nearest_new_moon_jd
from ..reference.solar import sun_longitude
from .elements import NAKSHATRA_DEG, YOGA_DEG, yoga_raw, yoga_segment_number

log = logging.getLogger(__name__)

# Sun's mean daily motion added to the Moon's rate for the yoga sum.
SUN_MEAN_MOTION = 1.0145616633

# (angular error in degrees, local rate in degrees/day)
ErrorAndRate = Callable[[float], Tuple[float, float]]


def converge(
    evaluate: ErrorAndRate,
    *,
    jd0: float,
    config: SolverConfig,
    label: str,
) -> float:
    """Fixed-point seek: jd_{n+1} = jd_n + error(jd_n) / rate(jd_n).

    Stops once |error| <= config.tolerance_deg. The motion is treated as
    locally linear, so each step uses the rate evaluated at the trial JD.
    """
    jd = jd0
    for i in range(config.max_iterations):
        error, rate = evaluate(jd)
        if abs(error) <= config.tolerance_deg:
            log.debug("%s converged in %d iterations at JD %.6f", label, i, jd)
            return jd
        if not math.isfinite(rate) or rate == 0.0:
            raise ConvergenceError(f"{label}: degenerate rate {rate!r} at JD {jd}")
        jd += error / rate
    raise ConvergenceError(
        f"{label}: no convergence within {config.max_iterations} iterations (start JD {jd0})"
    )


def _sun(jd: float, ctx: CalculationContext, config: SolverConfig) -> float:
    return sun_longitude(
        jd,
        ctx,
        kepler_tolerance_deg=config.kepler_tolerance_deg,
        kepler_max_iterations=config.kepler_max_iterations,
    )


def localize(jd: float, tz_offset_hours: float, ctx: CalculationContext) -> datetime:
    """Dynamical JD -> civil datetime at the caller's UTC offset.

    Raises InvalidInputError when the boundary falls outside the years
    ``datetime`` can represent (1..9999).
    """
    try:
        return julian_to_datetime(jd + (tz_offset_hours - ctx.delta_t_hours) / 24.0, tz_offset_hours)
    except (ValueError, OverflowError) as e:
        raise InvalidInputError(f"boundary at JD {jd:.5f} lies outside the datetime range") from e


# ============================================================
# Tithi / karana
# ============================================================

def elongation_boundary(
    jd: float,
    aspect_deg: float,
    ctx: CalculationContext,
    config: SolverConfig,
) -> float:
    """JD at which Moon - Sun equals ``aspect_deg``, searched near ``jd``."""
    if aspect_deg == 0.0 or aspect_deg == 360.0:
        # conjunction: closed-form new moon
        return nearest_new_moon_jd(jd)

    def evaluate(t: float) -> Tuple[float, float]:
        sun = _sun(t, ctx, config)
        moon = moon_longitude(t, ctx)
        target = wrap_deg(sun + aspect_deg)
        return wrap180(target - moon), ctx.moon_angular_velocity - 1.0

    return converge(evaluate, jd0=jd, config=config, label=f"elongation {aspect_deg:g}")


def tithi_segment(
    jd: float,
    index: int,
    tz_offset_hours: float,
    segment_deg: float,
    ctx: CalculationContext,
    config: SolverConfig,
) -> TimeSegment:
    """Start/end of tithi (segment 12) or karana (segment 6) number ``index``."""
    start = elongation_boundary(jd, segment_deg * index, ctx, config)
    end = elongation_boundary(jd, segment_deg * (index + 1), ctx, config)
    return TimeSegment(
        start=localize(start, tz_offset_hours, ctx),
        end=localize(end, tz_offset_hours, ctx),
    )


# ============================================================
# Nakshatra
# ============================================================

def sidereal_moon_boundary(
    jd: float,
    target_deg: float,
    ctx: CalculationContext,
    config: SolverConfig,
) -> float:
    target = wrap_deg(target_deg)

    def evaluate(t: float) -> Tuple[float, float]:
        moon = wrap_deg(moon_longitude(t, ctx) + ctx.ayanamsa_deg)
        return wrap180(target - moon), ctx.moon_angular_velocity

    return converge(evaluate, jd0=jd, config=config, label=f"nakshatra edge {target:.4f}")


def nakshatra_segment(
    jd: float,
    index: int,
    tz_offset_hours: float,
    ctx: CalculationContext,
    config: SolverConfig,
) -> TimeSegment:
    start = sidereal_moon_boundary(jd, index * NAKSHATRA_DEG, ctx, config)
    end = sidereal_moon_boundary(jd, (index + 1) * NAKSHATRA_DEG, ctx, config)
    return TimeSegment(
        start=localize(start, tz_offset_hours, ctx),
        end=localize(end, tz_offset_hours, ctx),
    )


# ============================================================
# Yoga
# ============================================================

def yoga_boundary(
    jd: float,
    edge: float,
    ctx: CalculationContext,
    config: SolverConfig,
) -> float:
    """JD at which the unreduced yoga sum reaches ``edge``."""

    def evaluate(t: float) -> Tuple[float, float]:
        _sun(t, ctx, config)
        moon_longitude(t, ctx)
        return wrap180(edge - yoga_raw(ctx)), ctx.moon_angular_velocity + SUN_MEAN_MOTION

    return converge(evaluate, jd0=jd, config=config, label=f"yoga edge {edge:.4f}")


def yoga_edges(raw: float) -> Tuple[float, float]:
    n = yoga_segment_number(raw)
    return n * YOGA_DEG, (n + 1) * YOGA_DEG


def yoga_segment(
    jd: float,
    raw: float,
    tz_offset_hours: float,
    ctx: CalculationContext,
    config: SolverConfig,
) -> TimeSegment:
    lower, upper = yoga_edges(raw)
    # both edges are sought independently from the request JD
    start = yoga_boundary(jd, lower, ctx, config)
    end = yoga_boundary(jd, upper, ctx, config)
    return TimeSegment(
        start=localize(start, tz_offset_hours, ctx),
        end=localize(end, tz_offset_hours, ctx),
    )

from __future__ import annotations

import math

from ..core.types import CalculationContext
from ..reference.astro_args import wrap_deg

TITHI_DEG = 12.0
KARANA_DEG = 6.0
NAKSHATRA_DEG = 80.0 / 6.0   # 360/27
YOGA_DEG = 80.0 / 6.0
RAASI_DEG = 30.0

TITHI_COUNT = 30
NAKSHATRA_COUNT = 27
YOGA_COUNT = 27
RAASI_COUNT = 12
KARANA_COUNT = 11

# Phase anchors of the unreduced Moon/Sun sums entering the yoga.
YOGA_MOON_ANCHOR = 491143.07698973856
YOGA_SUN_ANCHOR = 36976.91240579201

# Karana layout over the 60 half-tithis of a lunation:
#   half-tithi 0         -> the last fixed karana (index 10)
#   half-tithis 1..56    -> the seven movable karanas, repeating (0..6)
#   half-tithis 57..59   -> the first three fixed karanas (7, 8, 9)
KARANA_FIRST_FIXED = 10
KARANA_MOVABLE_CYCLE = 7
KARANA_TAIL_START = 57
KARANA_TAIL_OFFSET = 50


def elongation(moon_deg: float, sun_deg: float) -> float:
    """Moon - Sun in [0,360)."""
    return wrap_deg(moon_deg - sun_deg)


def tithi_index(moon_deg: float, sun_deg: float) -> int:
    return int(math.floor(elongation(moon_deg, sun_deg) / TITHI_DEG)) % TITHI_COUNT


def karana_count(moon_deg: float, sun_deg: float) -> int:
    """Half-tithis elapsed since new moon, 0..59."""
    return int(math.floor(elongation(moon_deg, sun_deg) / KARANA_DEG)) % (2 * TITHI_COUNT)


def karana_index(raw: int) -> int:
    """Name index (0..10) of the karana occupying half-tithi ``raw``."""
    if raw == 0:
        return KARANA_FIRST_FIXED
    if raw >= KARANA_TAIL_START:
        return raw - KARANA_TAIL_OFFSET
    return (raw - 1) % KARANA_MOVABLE_CYCLE


def sidereal(longitude_deg: float, ayanamsa_deg: float) -> float:
    return wrap_deg(longitude_deg + ayanamsa_deg)


def nakshatra_index(sidereal_moon_deg: float) -> int:
    return int(math.floor(sidereal_moon_deg * 6.0 / 80.0)) % NAKSHATRA_COUNT


def raasi_index(sidereal_moon_deg: float) -> int:
    return int(math.floor(abs(sidereal_moon_deg) / RAASI_DEG)) % RAASI_COUNT


def yoga_raw(ctx: CalculationContext) -> float:
    """Unreduced yoga angle from the longitudes last stored in ``ctx``."""
    moon = ctx.moon_longitude_for_yoga + ctx.ayanamsa_deg - YOGA_MOON_ANCHOR
    sun = ctx.sun_longitude_for_yoga + ctx.ayanamsa_deg - YOGA_SUN_ANCHOR
    return moon + sun


def yoga_segment_number(raw: float) -> int:
    """Unwrapped segment counter; may lie outside 0..26."""
    return int(math.floor(raw * 6.0 / 80.0))


def yoga_index(raw: float) -> int:
    return yoga_segment_number(raw) % YOGA_COUNT

# reference/solar.py

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..core.errors import ConvergenceError
from ..core.types import CalculationContext
from . import astro_args as aa

log = logging.getLogger(__name__)

ABERRATION_ARCSEC = 20.496


@dataclass(frozen=True)
class SunPosition:
    """Apparent solar longitude (degrees) and radius vector (AU)."""
    longitude_deg: float
    unreduced_deg: float
    radius_au: float


def solve_kepler(
    mean_anomaly_deg: float,
    eccentricity: float,
    tolerance_deg: float,
    max_iterations: int = 50,
) -> float:
    """
    Eccentric anomaly (radians) from M + e*sin(E) - E = 0 by Newton-Raphson.

    Raises ConvergenceError when the step is still above tolerance after
    ``max_iterations`` updates.
    """
    M = math.radians(mean_anomaly_deg)
    tol = math.radians(tolerance_deg)
    E = M
    for i in range(max_iterations):
        delta = (M + eccentricity * math.sin(E) - E) / (1.0 - eccentricity * math.cos(E))
        E += delta
        if abs(delta) < tol:
            log.debug("kepler converged in %d iterations", i + 1)
            return E
    raise ConvergenceError(
        f"Kepler solver did not converge in {max_iterations} iterations "
        f"(M={mean_anomaly_deg} deg, e={eccentricity})"
    )


def true_anomaly(E: float, eccentricity: float) -> float:
    """True anomaly (radians) from the eccentric anomaly."""
    # tan(E/2) blows up at E = pi, where true and eccentric anomaly coincide
    if abs(math.pi - E) < 1.0e-10:
        return E
    b = math.sqrt((1.0 + eccentricity) / (1.0 - eccentricity))
    return 2.0 * math.atan(b * math.tan(E / 2.0))


def _sun(jd: float, kepler_tolerance_deg: float, kepler_max_iterations: int) -> SunPosition:
    days = aa.days_since_epoch(jd)
    T = days / 36525.0
    T2 = T * T
    T3 = T2 * T

    mean_longitude = 279.696678 + 0.9856473354 * days + 1.089 * T2 / 3600
    perihelion = 101.220833 + 6189.03 * T / 3600 + 1.63 * T2 / 3600 + 0.012 * T3 / 3600
    mean_anomaly = aa.wrap_deg(mean_longitude - perihelion + 180.0)

    # small long-period shifts of the anomaly (arc-seconds)
    corrected_anomaly = mean_anomaly + (
        0.266 * aa.sin_deg(31.8 + 119.0 * T)
        + 6.4 * aa.sin_deg(231.19 + 20.2 * T)
        + (1.882 - 0.016 * T) * aa.sin_deg(57.24 + 150.27 * T)
    ) / 3600.0

    e = 0.01675104 - 0.0000418 * T - 0.000000126 * T2

    E = solve_kepler(corrected_anomaly, e, kepler_tolerance_deg, kepler_max_iterations)
    nu = true_anomaly(E, e)
    nu_deg = aa.wrap_deg(math.degrees(nu))

    # Periodic perturbations by Venus, Jupiter, the Moon and a long-period term.
    a1 = math.radians(153.23 + 22518.7541 * T)
    a2 = math.radians(216.57 + 45037.5082 * T)
    a3 = math.radians(312.69 + 32964.3577 * T)
    a4 = math.radians(350.74 + 445267.1142 * T - 0.00144 * T2)
    a5 = math.radians(315.6 + 893.3 * T)
    a6 = math.radians(353.4 + 65928.7155 * T)

    d_lon = (
        0.00134 * math.cos(a1)
        + 0.00154 * math.cos(a2)
        + 0.002 * math.cos(a3)
        + 0.00179 * math.sin(a4)
        + 0.202 * math.sin(a5) / 3600.0
    )
    d_radius = (
        0.00000543 * math.sin(a1)
        + 0.00001575 * math.sin(a2)
        + 0.00001627 * math.sin(a3)
        + 0.00003076 * math.cos(a4)
        + 9.27e-6 * math.sin(a6)
    )

    # equation of centre kept in (-180, 180] so the unreduced sum stays continuous
    longitude = mean_longitude + d_lon + aa.wrap180(nu_deg - mean_anomaly)

    radius = 1.0000002 * (1.0 - e * e) / (1.0 + e * math.cos(nu)) + d_radius
    aberration = ABERRATION_ARCSEC * (1.0 - e * e) / (radius * 3600.0)

    longitude = longitude + aa.nutation(jd) - aberration
    return SunPosition(
        longitude_deg=aa.wrap_deg(longitude),
        unreduced_deg=longitude,
        radius_au=radius,
    )


def sun_longitude(
    jd: float,
    ctx: CalculationContext,
    *,
    kepler_tolerance_deg: float = 0.0000003,
    kepler_max_iterations: int = 50,
) -> float:
    """
    Apparent ecliptic longitude of the Sun (degrees, [0,360)) at dynamical JD.

    Stores the unreduced longitude in ``ctx.sun_longitude_for_yoga``.
    """
    pos = _sun(jd, kepler_tolerance_deg, kepler_max_iterations)
    ctx.sun_longitude_for_yoga = pos.unreduced_deg
    return pos.longitude_deg


def sun_position(jd: float) -> SunPosition:
    return _sun(jd, 0.0000003, 50)

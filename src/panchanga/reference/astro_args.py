from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
from math import fmod

import math

from .series import SineTerm, sum_sine_terms
from .tables import NUTATION_TERMS


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TAU = 6.283185307179586

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    # fmod keeps precision for the large unreduced longitudes
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    if y >= 360.0:
        y -= 360.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0

def sin_turn(turn: float) -> float:
    return math.sin(TAU * turn)

def cos_turn(turn: float) -> float:
    return math.cos(TAU * turn)

def sin_deg(deg: float) -> float:
    return math.sin(math.radians(deg))

def format_dms(deg: float) -> str:
    """|deg| as ``D M'S"`` with whole seconds."""
    a = abs(deg)
    d = int(math.floor(a))
    total = int(round((a - d) * 3600.0))
    if total == 3600:
        d, total = d + 1, 0
    return f"{d} {total // 60}'{total % 60}\""

# ------------------------------------------------------------
# Time variable
# The engine's series are referred to 1900 January 0.5 (JD 2415020).
# ------------------------------------------------------------

B1900_JD = 2415020.0


def days_since_epoch(jd: float) -> float:
    return jd - B1900_JD


def T_centuries(jd: float) -> float:
    """Julian centuries from JD 2415020.0."""
    return (jd - B1900_JD) / 36525.0


# ------------------------------------------------------------
# Nutation in longitude
# ------------------------------------------------------------

@dataclass(frozen=True)
class NutationArgs:
    """Slowly varying angles of the nutation series (degrees)."""
    sun_longitude: float
    moon_longitude: float
    sun_anomaly: float
    moon_anomaly: float
    elongation: float
    node: float

    def radians(self) -> tuple:
        return tuple(math.radians(v) for v in (
            self.sun_longitude, self.moon_longitude, self.sun_anomaly,
            self.moon_anomaly, self.elongation, self.node,
        ))


def nutation_args(T: float) -> NutationArgs:
    T2 = T * T
    return NutationArgs(
        sun_longitude=279.6967 + 36000.7689 * T + 0.000303 * T2,
        moon_longitude=270.4341639 + 481267.8831417 * T - 0.0011333333 * T2,
        sun_anomaly=358.4758333333334 + 35999.04975 * T - 1.5e-4 * T2,
        moon_anomaly=296.1046083333757 + 477198.8491083336 * T + 0.0091916667090522 * T2,
        elongation=350.7374861110581 + 445267.1142166667 * T - 1.436111132303874e-3 * T2,
        node=259.1832750002543 - 1934.142008333206 * T + 0.0020777778 * T2,
    )


def nutation(jd: float) -> float:
    """Nutation in longitude (degrees)."""
    T = T_centuries(jd)
    args = nutation_args(T)
    ang = args.radians()
    # leading term carries a secular coefficient
    arcsec = -0.01737 * T * math.sin(ang[5])
    arcsec += sum_sine_terms(NUTATION_TERMS, ang)
    return arcsec_to_deg(arcsec)


# ------------------------------------------------------------
# Ayanamsa
# ------------------------------------------------------------

AYANAMSA_OFFSET_ARCSEC = 80861.27

_AYANAMSA_TERMS = (
    SineTerm((1, 0), 17.23),   # node
    SineTerm((0, 2), 1.27),    # 2 x solar longitude
)


def ayanamsa(jd: float) -> float:
    """
    Sidereal offset (degrees); sidereal longitude = tropical + ayanamsa.
    """
    T = T_centuries(jd)
    T2 = T * T
    node = 259.183275 - 1934.142008333206 * T + 0.0020777778 * T2 + 0.0000022222222 * T2 * T
    ls = 279.696678 + 36000.76892 * T + 0.0003025 * T2
    arcsec = sum_sine_terms(_AYANAMSA_TERMS, (math.radians(node), math.radians(ls)))
    arcsec -= (5025.64 + 1.11 * T) * T
    return arcsec_to_deg(arcsec - AYANAMSA_OFFSET_ARCSEC)


# ------------------------------------------------------------
# Precession to the ecliptic of date
# Only the DE422 comparison uses this; the vectors arrive in the J2000 frame.
# ------------------------------------------------------------

J2000_JD = 2451545.0

Matrix3 = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]
Vector3 = Tuple[float, float, float]


def mean_obliquity_deg(T2000: float) -> float:
    """Mean obliquity of the ecliptic (IAU 2006), T in centuries from J2000."""
    T = T2000
    return arcsec_to_deg(
        84381.406 - 46.836769 * T - 0.0001831 * T**2 + 0.00200340 * T**3
        - 0.000000576 * T**4 - 0.0000000434 * T**5
    )


def _matmul(A, B):
    return tuple(
        tuple(sum(A[i][k] * B[k][j] for k in range(3)) for j in range(3))
        for i in range(3)
    )


def _rot_x(a: float):
    c, s = math.cos(a), math.sin(a)
    return ((1.0, 0.0, 0.0), (0.0, c, s), (0.0, -s, c))


def _rot_y(a: float):
    c, s = math.cos(a), math.sin(a)
    return ((c, 0.0, -s), (0.0, 1.0, 0.0), (s, 0.0, c))


def _rot_z(a: float):
    c, s = math.cos(a), math.sin(a)
    return ((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0))


def precession_matrix(jd: float) -> Matrix3:
    """
    Rotation from the J2000 equator (ICRF) to the mean ecliptic of date.

    IAU 1976 precession angles followed by the obliquity of date.
    """
    T = (jd - J2000_JD) / 36525.0
    zeta = math.radians(arcsec_to_deg(2306.2181 * T + 0.30188 * T**2 + 0.017998 * T**3))
    z = math.radians(arcsec_to_deg(2306.2181 * T + 1.09468 * T**2 + 0.018203 * T**3))
    theta = math.radians(arcsec_to_deg(2004.3109 * T - 0.42665 * T**2 - 0.041833 * T**3))

    eq_precession = _matmul(_rot_z(-z), _matmul(_rot_y(theta), _rot_z(-zeta)))
    return _matmul(_rot_x(math.radians(mean_obliquity_deg(T))), eq_precession)


def apply_matrix(M: Matrix3, v) -> Vector3:
    return (
        M[0][0] * v[0] + M[0][1] * v[1] + M[0][2] * v[2],
        M[1][0] * v[0] + M[1][1] * v[1] + M[1][2] * v[2],
        M[2][0] * v[0] + M[2][1] * v[1] + M[2][2] * v[2],
    )


def ecliptic_longitude_deg(v: Vector3) -> float:
    return wrap_deg(math.degrees(math.atan2(v[1], v[0])))

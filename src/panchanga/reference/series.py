from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple
import math


@dataclass(frozen=True)
class BaseAngles:
    """The four lunar base angles, in radians."""
    moon_anomaly: float
    sun_anomaly: float
    latitude_argument: float
    elongation: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.moon_anomaly, self.sun_anomaly, self.latitude_argument, self.elongation)


@dataclass(frozen=True)
class PerturbationTerm:
    """
    One periodic term: amplitude * trig(l*l' + m*M + f*F + d*D).

    The amplitude unit depends on the table (arc-seconds for longitudes,
    degrees/day for the velocity series, days for the new-moon series).
    """
    moon_anomaly: int
    sun_anomaly: int
    latitude_argument: int
    elongation: int
    amplitude: float

    @property
    def multipliers(self) -> Tuple[int, int, int, int]:
        return (self.moon_anomaly, self.sun_anomaly, self.latitude_argument, self.elongation)


@dataclass(frozen=True)
class SineTerm:
    """amplitude * sin(Σ multipliers[i] * angles[i]) over an arbitrary angle set."""
    multipliers: Tuple[int, ...]
    amplitude: float


Weight = Callable[[PerturbationTerm], float]


def lincomb(mult: Sequence[int], angles: Sequence[float]) -> float:
    s = 0.0
    for k, a in zip(mult, angles):
        if k:
            s += k * a
    return s


def sum_sine_series(
    terms: Iterable[PerturbationTerm],
    angles: BaseAngles,
    weight: Optional[Weight] = None,
) -> float:
    """Σ amplitude * weight(term) * sin(argument)."""
    a = angles.as_tuple()
    total = 0.0
    for term in terms:
        s = math.sin(lincomb(term.multipliers, a))
        if weight is not None:
            s *= weight(term)
        total += term.amplitude * s
    return total


def sum_cosine_series(terms: Iterable[PerturbationTerm], angles: BaseAngles) -> float:
    """Σ amplitude * cos(argument); used for rates."""
    a = angles.as_tuple()
    total = 0.0
    for term in terms:
        total += term.amplitude * math.cos(lincomb(term.multipliers, a))
    return total


def sum_sine_terms(terms: Iterable[SineTerm], angles: Sequence[float]) -> float:
    total = 0.0
    for term in terms:
        total += term.amplitude * math.sin(lincomb(term.multipliers, angles))
    return total

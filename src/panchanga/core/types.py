from __future__ import annotations
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class CalculationContext:
    """Scratch values shared between the stages of one ``calculate`` call.

    A fresh instance is created per call and passed explicitly to every
    sub-computation; it is never stored at module level.
    """
    delta_t_hours: float = 0.0
    ayanamsa_deg: float = 0.0
    moon_longitude_for_yoga: float = 0.0  # before reduction to [0,360)
    sun_longitude_for_yoga: float = 0.0   # before reduction to [0,360)
    moon_angular_velocity: float = 13.176397  # degrees/day


@dataclass(frozen=True)
class SolverConfig:
    """Numeric knobs for the iterative solvers."""
    tolerance_deg: float = 0.001
    max_iterations: int = 50
    kepler_tolerance_deg: float = 0.0000003
    kepler_max_iterations: int = 50


@dataclass(frozen=True)
class TimeSegment:
    start: datetime
    end: datetime


@dataclass(frozen=True)
class AlmanacElement:
    index: int
    name: str
    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True)
class Ayanamsa:
    degrees: float
    formatted: str


@dataclass(frozen=True)
class AlmanacResult:
    instant: datetime
    weekday: AlmanacElement
    tithi: AlmanacElement
    nakshatra: AlmanacElement
    karana: AlmanacElement
    yoga: AlmanacElement
    raasi: AlmanacElement
    ayanamsa: Ayanamsa
    version: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

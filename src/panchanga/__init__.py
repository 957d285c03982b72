"""panchanga public API.

Keep this surface small: users should mostly interact with ``calculate`` and
the result/error types re-exported here.
"""

from .api import VERSION, calculate
from .core.errors import ConvergenceError, InvalidInputError, PanchangaError, RangeWarning
from .core.types import AlmanacElement, AlmanacResult, Ayanamsa, SolverConfig, TimeSegment

__all__ = [
    "calculate",
    "VERSION",
    "AlmanacResult",
    "AlmanacElement",
    "Ayanamsa",
    "TimeSegment",
    "SolverConfig",
    "PanchangaError",
    "InvalidInputError",
    "ConvergenceError",
    "RangeWarning",
]

class PanchangaError(Exception):
    """Base error."""

class InvalidInputError(PanchangaError, ValueError):
    """Raised when the requested instant is missing, non-finite or unusable."""

class ConvergenceError(PanchangaError, RuntimeError):
    """Raised when an iterative solver exceeds its iteration cap."""

class RangeWarning(UserWarning):
    """ΔT was extrapolated outside its tabulated 1620-2010 band."""

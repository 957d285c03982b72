"""Ephemeris adapters (optional).

Thin wrappers around the JPL DE422 kernel, used only to check the analytical
Sun and Moon. Install with:
  pip install "panchanga[ephemeris]"
"""


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import de422  # noqa: F401
        import jplephem  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "panchanga[ephemeris]"') from e

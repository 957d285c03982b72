# ephemeris/de422.py
from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass

log = logging.getLogger(__name__)

# Earth/Moon mass ratio used when constants.npy is missing from the de422 package.
EMRAT_DEFAULT = 81.30056907419062

# JD coverage of the DE422 kernel.
DE422_MIN_JD = 625648.5
DE422_MAX_JD = 2816816.5


def _load_constants_dict(de422_mod) -> dict:
    # the de422 package usually ships constants.npy next to __file__
    import numpy as np

    p = pathlib.Path(de422_mod.__file__).resolve().parent / "constants.npy"
    if not p.exists():
        return {}
    c = np.load(str(p), allow_pickle=True)
    try:
        return dict(c.item())
    except (ValueError, TypeError):
        return {}


def _get_emrat(constants: dict) -> float:
    for k in ("EMRAT", "emrat"):
        if k in constants:
            return float(constants[k])
    return EMRAT_DEFAULT


@dataclass
class DE422Ephemeris:
    """
    Geocentric Sun and Moon vectors (km, J2000 equator) from DE422.

    Requires optional deps:
      pip install "panchanga[ephemeris]"
    """
    eph: object
    emrat: float

    @classmethod
    def load(cls) -> "DE422Ephemeris":
        try:
            import de422  # type: ignore
            from jplephem import Ephemeris  # type: ignore
        except ImportError as e:
            raise RuntimeError(
                "DE422 ephemeris not available. Install extras:\n"
                "  pip install \"panchanga[ephemeris]\""
            ) from e

        emrat = _get_emrat(_load_constants_dict(de422))
        log.debug("DE422 loaded, EMRAT=%.6f", emrat)
        return cls(eph=Ephemeris(de422), emrat=emrat)

    @staticmethod
    def covers(jd: float) -> bool:
        return DE422_MIN_JD < jd < DE422_MAX_JD

    def geocentric(self, jd: float):
        """(Earth->Sun, Earth->Moon) vectors at dynamical JD ``jd``."""
        r_emb = self.eph.compute("earthmoon", jd)[:3]
        r_em = self.eph.compute("moon", jd)[:3]
        r_sun = self.eph.compute("sun", jd)[:3]

        # Earth from the barycentre and the geocentric Moon
        r_earth = r_emb - r_em / (self.emrat + 1.0)
        return r_sun - r_earth, r_em

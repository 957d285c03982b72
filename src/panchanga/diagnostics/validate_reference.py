#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional, Sequence

from panchanga.ephemeris.de422 import DE422_MAX_JD, DE422_MIN_JD, DE422Ephemeris
from panchanga.reference import astro_args as aa
from panchanga.reference import lunar, solar

log = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "panchanga[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "panchanga[diagnostics]"') from e


def residual_arcsec(model_deg: float, reference_deg: float) -> float:
    """Signed model - reference difference in arc-seconds, wrapped to +-180 deg."""
    return aa.wrap180(model_deg - reference_deg) * 3600.0


def residual_summary(residuals: Sequence[float]) -> Dict[str, float]:
    np = _need_numpy()
    r = np.asarray(residuals, dtype=float)
    if r.size == 0:
        raise ValueError("no residuals to summarise")
    return {
        "mean": float(r.mean()),
        "rms": float(np.sqrt((r * r).mean())),
        "max_abs": float(np.abs(r).max()),
    }


def apparent_reference(eph: DE422Ephemeris, jd: float):
    """DE422 Sun and Moon longitudes reduced to the engine's apparent frame."""
    if not eph.covers(jd):
        raise ValueError(f"JD {jd} is outside the DE422 range [{DE422_MIN_JD}, {DE422_MAX_JD}]")
    r_es, r_em = eph.geocentric(jd)
    rot = aa.precession_matrix(jd)
    nut = aa.nutation(jd)
    sun = aa.ecliptic_longitude_deg(aa.apply_matrix(rot, r_es))
    moon = aa.ecliptic_longitude_deg(aa.apply_matrix(rot, r_em))
    return (
        aa.wrap_deg(sun + nut - solar.ABERRATION_ARCSEC / 3600.0),
        aa.wrap_deg(moon + nut),
    )


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the analytical Sun/Moon against DE422.")
    p.add_argument("--year-start", type=int, default=1800)
    p.add_argument("--year-end", type=int, default=2100)
    p.add_argument("--step-days", type=float, default=10.0)
    p.add_argument("--out-png", default=None, help="optional residual plot")
    args = p.parse_args(argv)

    np = _need_numpy()

    print("Loading DE422 Ephemeris...")
    eph = DE422Ephemeris.load()

    jd_start = max(aa.J2000_JD + (args.year_start - 2000) * 365.25, DE422_MIN_JD + 1.0)
    jd_end = min(aa.J2000_JD + (args.year_end - 2000) * 365.25, DE422_MAX_JD - 1.0)
    if jd_start > jd_end:
        raise ValueError(f"Requested range is outside valid ephemeris range [{DE422_MIN_JD}, {DE422_MAX_JD}]")

    jds = np.arange(jd_start, jd_end, args.step_days)
    years = 2000 + (jds - aa.J2000_JD) / 365.25
    print(f"Validating {len(jds)} points from {years[0]:.0f} to {years[-1]:.0f}...")

    err_sun: List[float] = []
    err_moon: List[float] = []
    for jd in jds:
        jd = float(jd)
        ref_sun, ref_moon = apparent_reference(eph, jd)
        err_sun.append(residual_arcsec(solar.sun_position(jd).longitude_deg, ref_sun))
        err_moon.append(residual_arcsec(lunar.moon_position(jd).longitude_deg, ref_moon))

    for label, errs in (("Sun", err_sun), ("Moon", err_moon)):
        s = residual_summary(errs)
        print(f"{label:<5} mean {s['mean']:9.2f}\"  rms {s['rms']:9.2f}\"  max {s['max_abs']:9.2f}\"")

    if args.out_png:
        plt = _need_matplotlib()
        fig, axs = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

        axs[0].scatter(years, err_sun, s=1, alpha=0.5, color="orange")
        axs[0].set_title("Solar Apparent Longitude Error (Analytical - DE422)")
        axs[0].set_ylabel("Error (arcsec)")
        axs[0].grid(True, alpha=0.3)

        axs[1].scatter(years, err_moon, s=1, alpha=0.5, color="blue")
        axs[1].set_title("Lunar Apparent Longitude Error (Analytical - DE422)")
        axs[1].set_ylabel("Error (arcsec)")
        axs[1].set_xlabel("Year")
        axs[1].grid(True, alpha=0.3)

        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

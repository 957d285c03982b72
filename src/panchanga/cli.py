from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import datetime
from typing import List, Optional


_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")


def _parse_instant(s: str) -> datetime:
    try:
        return datetime.fromisoformat(s)
    except ValueError as e:
        raise SystemExit(f"Not an ISO datetime: {s!r}") from e


def _run_module_main(modpath: str, argv: List[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _common_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return common


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fmt(dt: Optional[datetime]) -> str:
    return dt.strftime("%Y-%m-%d %H:%M:%S") if dt is not None else "-"


def cmd_day(argv: List[str]) -> int:
    import panchanga
    from panchanga.core.types import SolverConfig

    p = argparse.ArgumentParser(
        prog="panchanga day",
        description="Almanac elements in force at a local date/time",
        parents=[_common_parser()],
    )
    p.add_argument("instant", help="ISO datetime, e.g. 2024-03-15T06:30 (offset optional)")
    p.add_argument("--tz", type=float, default=None, help="UTC offset in hours for naive datetimes")
    p.add_argument("--tolerance", type=float, default=0.001, help="boundary tolerance in degrees")
    p.add_argument("--max-iterations", type=int, default=50)
    args = p.parse_args(argv)

    instant = _parse_instant(args.instant)
    tz = args.tz
    if instant.tzinfo is None and tz is None:
        tz = 0.0

    config = SolverConfig(tolerance_deg=args.tolerance, max_iterations=args.max_iterations)
    res = panchanga.calculate(instant, tz_offset_hours=tz, config=config)

    print(f"Instant   : {res.instant.isoformat()}")
    print(f"Weekday   : {res.weekday.name}")
    for label, e in (
        ("Tithi", res.tithi),
        ("Nakshatra", res.nakshatra),
        ("Karana", res.karana),
        ("Yoga", res.yoga),
    ):
        print(f"{label:<10}: {e.name:<14} {_fmt(e.start)} -> {_fmt(e.end)}")
    print(f"Raasi     : {res.raasi.name}")
    print(f"Ayanamsa  : {res.ayanamsa.formatted}")
    return 0


def cmd_solar(argv: List[str]) -> int:
    from panchanga.reference import solar

    p = argparse.ArgumentParser(
        prog="panchanga solar",
        description="Apparent solar longitude at a dynamical JD.",
        parents=[_common_parser()],
    )
    p.add_argument("--jd", type=float, default=2415020.0, help="Julian Date (default: B1900.0 = 2415020.0)")
    args = p.parse_args(argv)

    pos = solar.sun_position(args.jd)
    print(f"JD = {args.jd:.6f}")
    print(f"  Apparent Longitude = {pos.longitude_deg:.6f}")
    print(f"  Radius vector (AU) = {pos.radius_au:.8f}")
    return 0


def cmd_lunar(argv: List[str]) -> int:
    from panchanga.reference import astro_args as aa
    from panchanga.reference import lunar, solar

    p = argparse.ArgumentParser(
        prog="panchanga lunar",
        description="Apparent lunar longitude, velocity and elongation at a dynamical JD.",
        parents=[_common_parser()],
    )
    p.add_argument("--jd", type=float, default=2415020.0, help="Julian Date (default: B1900.0 = 2415020.0)")
    args = p.parse_args(argv)

    moon = lunar.moon_position(args.jd)
    sun = solar.sun_position(args.jd)
    print(f"JD = {args.jd:.6f}")
    print(f"  Apparent Longitude = {moon.longitude_deg:.6f}")
    print(f"  Velocity (deg/day) = {moon.velocity_deg_per_day:.6f}")
    print(f"  Elongation         = {aa.wrap_deg(moon.longitude_deg - sun.longitude_deg):.6f}")
    print(f"  Ayanamsa           = {aa.format_dms(aa.ayanamsa(args.jd))}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # -v may appear anywhere, including after the subcommand or the shorthand datetime
    opts, argv = _common_parser().parse_known_args(argv)
    _configure_logging(opts.verbose)

    # Shorthand: `panchanga 2024-03-15T06:30 ...`
    if argv and _DATETIME_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(
        prog="panchanga",
        description="Hindu almanac (panchanga) toolkit CLI.",
        parents=[_common_parser()],
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Almanac elements for a local date/time")
    sub.add_parser("solar", help="Apparent solar longitude at a JD.")
    sub.add_parser("lunar", help="Apparent lunar longitude and velocity at a JD.")
    sub.add_parser("validate", help="Compare the analytical Sun/Moon with DE422 (needs extras).")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "solar":
        return cmd_solar(rest)

    if args.cmd == "lunar":
        return cmd_lunar(rest)

    if args.cmd == "validate":
        return _run_module_main("panchanga.diagnostics.validate_reference", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())

# tests/test_solver.py

import pytest
from unittest.mock import patch

from panchanga.core.errors import ConvergenceError
from panchanga.core.types import CalculationContext, SolverConfig
from panchanga.engines import solver
from panchanga.reference import lunar


def test_converge_linear_motion():
    # error shrinks to zero at jd = 5 with unit rate
    jd = solver.converge(lambda t: (5.0 - t, 1.0), jd0=0.0, config=SolverConfig(), label="linear")
    assert jd == pytest.approx(5.0)


def test_converge_returns_start_when_already_within_tolerance():
    jd = solver.converge(lambda t: (0.0005, 1.0), jd0=42.0, config=SolverConfig(), label="noop")
    assert jd == 42.0


def test_converge_iteration_cap():
    config = SolverConfig(max_iterations=5)
    with pytest.raises(ConvergenceError):
        solver.converge(lambda t: (1.0, 1e12), jd0=0.0, config=config, label="stuck")


@pytest.mark.parametrize("rate", [0.0, float("nan"), float("inf")])
def test_converge_degenerate_rate(rate):
    with pytest.raises(ConvergenceError):
        solver.converge(lambda t: (1.0, rate), jd0=0.0, config=SolverConfig(), label="flat")


def test_elongation_boundary_with_zero_rate():
    ctx = CalculationContext()

    def frozen_moon(t, c):
        # Moon moving exactly as fast as the Sun
        c.moon_angular_velocity = 1.0
        return 0.0

    with patch("panchanga.engines.solver.moon_longitude", side_effect=frozen_moon), \
            patch("panchanga.engines.solver._sun", return_value=0.0):
        with pytest.raises(ConvergenceError):
            solver.elongation_boundary(2451545.0, 12.0, ctx, SolverConfig())


def test_conjunction_boundaries_use_new_moon():
    ctx = CalculationContext()
    jd = 2451552.0
    expected = lunar.nearest_new_moon_jd(jd)
    assert solver.elongation_boundary(jd, 0.0, ctx, SolverConfig()) == expected
    assert solver.elongation_boundary(jd, 360.0, ctx, SolverConfig()) == expected


def test_elongation_boundary_hits_target():
    from panchanga.reference import astro_args as aa
    from panchanga.reference.lunar import moon_position
    from panchanga.reference.solar import sun_position

    ctx = CalculationContext()
    jd = solver.elongation_boundary(2451555.0, 96.0, ctx, SolverConfig())
    elong = aa.wrap_deg(moon_position(jd).longitude_deg - sun_position(jd).longitude_deg)
    assert elong == pytest.approx(96.0, abs=0.01)


def test_yoga_edges():
    lower, upper = solver.yoga_edges(30.0)
    assert lower == pytest.approx(80.0 / 6.0 * 2)
    assert upper == pytest.approx(80.0 / 6.0 * 3)

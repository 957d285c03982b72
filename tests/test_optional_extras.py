# tests/test_optional_extras.py

import sys

import pytest

from panchanga import ephemeris
from panchanga.diagnostics import validate_reference as vr
from panchanga.ephemeris.de422 import DE422Ephemeris, _get_emrat


def test_require_ephemeris_without_packages(monkeypatch):
    monkeypatch.setitem(sys.modules, "de422", None)
    with pytest.raises(RuntimeError, match="panchanga\\[ephemeris\\]"):
        ephemeris.require_ephemeris()


def test_de422_load_without_packages(monkeypatch):
    monkeypatch.setitem(sys.modules, "jplephem", None)
    with pytest.raises(RuntimeError, match="DE422"):
        DE422Ephemeris.load()


def test_emrat_lookup():
    assert _get_emrat({"EMRAT": 81.3}) == 81.3
    assert _get_emrat({}) == pytest.approx(81.30056907419062)


def test_coverage_window():
    assert DE422Ephemeris.covers(2451545.0)
    assert not DE422Ephemeris.covers(100.0)


def test_apparent_reference_rejects_uncovered_dates():
    eph = DE422Ephemeris(eph=None, emrat=81.3)
    with pytest.raises(ValueError, match="outside the DE422 range"):
        vr.apparent_reference(eph, 100.0)


def test_residual_arcsec_wraps():
    assert vr.residual_arcsec(359.999, 0.001) == pytest.approx(-7.2)
    assert vr.residual_arcsec(10.0, 9.99) == pytest.approx(36.0)


def test_residual_summary():
    pytest.importorskip("numpy")
    s = vr.residual_summary([3.0, -4.0])
    assert s["mean"] == pytest.approx(-0.5)
    assert s["rms"] == pytest.approx((12.5) ** 0.5)
    assert s["max_abs"] == 4.0
    with pytest.raises(ValueError):
        vr.residual_summary([])


def test_validate_without_numpy(monkeypatch):
    monkeypatch.setitem(sys.modules, "numpy", None)
    with pytest.raises(RuntimeError, match="numpy"):
        vr.main([])

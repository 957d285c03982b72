# tests/test_deltat.py

import pytest

from panchanga.core.errors import RangeWarning
from panchanga.core.time import civil_to_julian
from panchanga.reference import deltat


def test_table_nodes():
    assert len(deltat.DECADE_TABLE) == 40
    assert deltat.DECADE_TABLE.range == (1620.0, 2010.0)
    assert deltat.delta_t_seconds(civil_to_julian(1, 1, 2000)) == pytest.approx(65.7)
    assert deltat.delta_t_seconds(civil_to_julian(1, 1, 1620)) == pytest.approx(124.0)


def test_table_interpolates_linearly():
    assert deltat.delta_t_seconds(civil_to_julian(1, 1, 1625)) == pytest.approx(104.5)
    assert deltat.delta_t_hours(civil_to_julian(1, 1, 2000)) == pytest.approx(65.7 / 3600.0)


def test_table_eval_rejects_out_of_range():
    with pytest.raises(ValueError):
        deltat.DECADE_TABLE.eval(1500.0)


def test_extrapolation_warns():
    jd = civil_to_julian(1, 1, 2050)
    with pytest.warns(RangeWarning):
        dt = deltat.delta_t_seconds(jd)
    t = (jd - deltat.DELTA_T_EPOCH_JD) / 36525.0
    assert dt == pytest.approx(25.5 * t * t - 39.0)


def test_ancient_branches():
    jd_medieval = civil_to_julian(1, 1, 1200)
    jd_ancient = civil_to_julian(1, 1, 500)
    with pytest.warns(RangeWarning):
        t = (jd_medieval - deltat.DELTA_T_EPOCH_JD) / 36525.0
        assert deltat.delta_t_seconds(jd_medieval) == pytest.approx(25.5 * t * t)
    with pytest.warns(RangeWarning):
        t = (jd_ancient - deltat.DELTA_T_EPOCH_JD) / 36525.0
        assert deltat.delta_t_seconds(jd_ancient) == pytest.approx(1361.7 + 320.0 * t + 44.3 * t * t)

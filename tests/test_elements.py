# tests/test_elements.py

import pytest

from panchanga.attributes import names
from panchanga.core.types import CalculationContext
from panchanga.engines import elements as el


@pytest.mark.parametrize(
    "raw, expected",
    [(0, 10), (1, 0), (7, 6), (8, 0), (56, 6), (57, 7), (58, 8), (59, 9)],
)
def test_karana_mapping(raw, expected):
    assert el.karana_index(raw) == expected


def test_every_half_tithi_maps_to_a_karana():
    seen = {el.karana_index(raw) for raw in range(60)}
    assert seen == set(range(el.KARANA_COUNT))


def test_tithi_and_karana_from_elongation():
    assert el.tithi_index(100.0, 88.0) == 1
    assert el.tithi_index(5.0, 10.0) == 29   # elongation 355
    assert el.karana_count(100.0, 88.0) == 2
    assert el.karana_count(5.0, 10.0) == 59


def test_nakshatra_and_raasi_ranges():
    step = 360.0 / 1000.0
    for i in range(1000):
        lon = i * step
        assert 0 <= el.nakshatra_index(lon) < 27
        assert 0 <= el.raasi_index(lon) < 12
    assert el.nakshatra_index(0.0) == 0
    assert el.nakshatra_index(5 * el.NAKSHATRA_DEG + 0.001) == 5
    assert el.nakshatra_index(359.999) == 26
    assert el.raasi_index(45.0) == 1


def test_sidereal_wraps():
    assert el.sidereal(10.0, -23.85) == pytest.approx(346.15)


def test_yoga_raw_uses_stored_longitudes():
    ctx = CalculationContext(
        ayanamsa_deg=-23.0,
        moon_longitude_for_yoga=el.YOGA_MOON_ANCHOR + 23.0 + 20.0,
        sun_longitude_for_yoga=el.YOGA_SUN_ANCHOR + 23.0 + 10.0,
    )
    assert el.yoga_raw(ctx) == pytest.approx(30.0)
    assert el.yoga_index(30.0) == 2


def test_yoga_index_of_negative_raw():
    assert el.yoga_segment_number(-1.0) == -1
    assert el.yoga_index(-1.0) == 26


def test_name_tables():
    assert len(names.WEEKDAYS) == 7
    assert len(names.TITHIS) == 30
    assert len(names.NAKSHATRAS) == 27
    assert len(names.KARANAS) == 11
    assert len(names.YOGAS) == 27
    assert len(names.ZODIAC_SIGNS) == 12
    assert names.name_of("weekday", 6) == "Saturday"
    assert names.name_of("tithi", 29) == "Amavasya"
    assert names.name_of("karana", 10) == "Kimstughana"
    assert names.name_of("yoga", 27) == "Vishkambha"


def test_unknown_name_table():
    with pytest.raises(KeyError):
        names.table("month")

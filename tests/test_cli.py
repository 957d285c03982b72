# tests/test_cli.py

import logging

import pytest
from unittest.mock import patch

from panchanga import cli


def test_day_command(capsys):
    assert cli.main(["day", "2000-01-07T12:00", "--tz", "0"]) == 0
    out = capsys.readouterr().out
    assert "Padyami" in out
    assert "Weekday   : Friday" in out
    assert "Ayanamsa" in out


def test_day_shorthand_with_offset_in_datetime(capsys):
    assert cli.main(["2000-01-07T17:30+05:30"]) == 0
    out = capsys.readouterr().out
    assert "Padyami" in out
    assert "+05:30" in out


def test_solar_and_lunar_commands(capsys):
    assert cli.main(["solar", "--jd", "2451545.0"]) == 0
    assert "Apparent Longitude" in capsys.readouterr().out
    assert cli.main(["-v", "lunar", "--jd", "2451545.0"]) == 0
    out = capsys.readouterr().out
    assert "Velocity" in out
    assert "Elongation" in out


def test_bad_datetime():
    with pytest.raises(SystemExit):
        cli.main(["day", "yesterday"])


def test_run_module_main_requires_main():
    with pytest.raises(SystemExit):
        cli._run_module_main("panchanga.core.errors", [])


@pytest.mark.parametrize(
    "argv",
    [
        ["-v", "day", "2000-01-07T12:00", "--tz", "0"],
        ["day", "2000-01-07T12:00", "--verbose", "--tz", "0"],
        ["2000-01-07T12:00", "-v"],
    ],
)
def test_verbose_anywhere_configures_debug_logging(argv, capsys):
    with patch("panchanga.cli.logging.basicConfig") as basic_config:
        assert cli.main(argv) == 0
    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert "Padyami" in capsys.readouterr().out


def test_shorthand_configures_logging(capsys):
    with patch("panchanga.cli.logging.basicConfig") as basic_config:
        assert cli.main(["2000-01-07T12:00"]) == 0
    assert basic_config.call_args.kwargs["level"] == logging.WARNING

"""Tests for light descriptor parsing."""

import pytest

from ceiling_light.errors import (
    ArgumentError,
    InvalidFormat,
    InvalidHue,
    InvalidNumber,
    InvalidSaturation,
    InvalidValue,
)
from ceiling_light.value_parsers import Mode, parse_ambient, parse_main


def test_main_off():
    assert parse_main("off") == (Mode.NORMAL, 0)


@pytest.mark.parametrize("level", [0, 1, 50, 99, 100])
def test_main_bare_number_is_moonlight(level):
    assert parse_main(str(level)) == (Mode.MOONLIGHT, level)


@pytest.mark.parametrize("level", [101, 150, 199, 200])
def test_main_bare_number_above_100_is_normal(level):
    assert parse_main(str(level)) == (Mode.NORMAL, level - 100)


@pytest.mark.parametrize("text", ["201", "255", "256", "1000", "-1"])
def test_main_bare_number_out_of_range(text):
    with pytest.raises(InvalidFormat):
        parse_main(text)


def test_main_explicit_modes():
    assert parse_main("moonlight:0") == (Mode.MOONLIGHT, 0)
    assert parse_main("moonlight:100") == (Mode.MOONLIGHT, 100)
    assert parse_main("normal:42") == (Mode.NORMAL, 42)


def test_main_explicit_value_too_high():
    with pytest.raises(InvalidValue):
        parse_main("moonlight:101")
    with pytest.raises(InvalidValue):
        parse_main("normal:255")


def test_main_unknown_kind():
    with pytest.raises(InvalidValue):
        parse_main("party:50")


@pytest.mark.parametrize("text", ["normal:abc", "normal:", "normal:256", "normal:-5"])
def test_main_explicit_value_not_a_number(text):
    with pytest.raises(InvalidNumber):
        parse_main(text)


@pytest.mark.parametrize("text", ["bright", "", "on", "normal:5:5", "OFF"])
def test_main_malformed(text):
    with pytest.raises(InvalidFormat):
        parse_main(text)


def test_main_error_message():
    with pytest.raises(ArgumentError, match="expected X or moonlight:V or normal:V or off"):
        parse_main("bright")


def test_mode_codes():
    assert int(Mode.NORMAL) == 1
    assert int(Mode.MOONLIGHT) == 5


def test_ambient_off():
    assert parse_ambient("off") == (0, 0, 0)


def test_ambient_hsv():
    light = parse_ambient("200,50,75")
    assert light == (200, 50, 75)
    assert light.hue == 200
    assert light.saturation == 50
    assert light.value == 75


def test_ambient_bounds():
    assert parse_ambient("359,100,100") == (359, 100, 100)
    assert parse_ambient("0,0,0") == (0, 0, 0)


@pytest.mark.parametrize(
    "text, error",
    [
        ("360,0,0", InvalidHue),
        ("0,101,0", InvalidSaturation),
        ("0,0,101", InvalidValue),
        ("1,2", InvalidFormat),
        ("1,2,3,4", InvalidFormat),
        ("red", InvalidFormat),
        ("a,0,0", InvalidNumber),
        ("0,,0", InvalidNumber),
        ("0,300,0", InvalidNumber),
        ("70000,0,0", InvalidNumber),
    ],
)
def test_ambient_errors(text, error):
    with pytest.raises(error):
        parse_ambient(text)


def test_ambient_error_message():
    with pytest.raises(InvalidHue, match="should be between 0 and 359"):
        parse_ambient("360,0,0")


def test_number_reasons():
    with pytest.raises(InvalidNumber, match="cannot parse integer from empty string"):
        parse_ambient(",0,0")
    with pytest.raises(InvalidNumber, match="invalid digit found in string"):
        parse_ambient("+,0,0")
    with pytest.raises(InvalidNumber, match="number too large to fit in target type"):
        parse_ambient("0,256,0")
    assert parse_ambient("+10,+20,+30") == (10, 20, 30)

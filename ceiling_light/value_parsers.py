"""
Light descriptor parsing
Turns command-line strings into validated mode/brightness and HSV values
"""

from enum import IntEnum
from typing import NamedTuple

from .errors import (
    InvalidFormat,
    InvalidHue,
    InvalidNumber,
    InvalidSaturation,
    InvalidValue,
)

MAIN_FORMAT = "X or moonlight:V or normal:V or off"
AMBIENT_FORMAT = "H,S,V or off"

U8_MAX = 0xFF
U16_MAX = 0xFFFF


class Mode(IntEnum):
    """Main light mode, valued with the device's mode code"""

    NORMAL = 1
    MOONLIGHT = 5


class MainLight(NamedTuple):
    mode: Mode
    brightness: int  # 0-100


class AmbientLight(NamedTuple):
    hue: int  # 0-359
    saturation: int  # 0-100
    value: int  # 0-100


def parse_uint(text: str, maximum: int) -> int:
    """
    Parse an unsigned integer that must fit 0..maximum
    Accepts an optional leading '+' followed by ASCII digits only
    """
    if not text:
        raise InvalidNumber("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not (digits and digits.isascii() and digits.isdigit()):
        raise InvalidNumber("invalid digit found in string")

    value = int(digits)
    if value > maximum:
        raise InvalidNumber("number too large to fit in target type")
    return value


def parse_main(text: str) -> MainLight:
    """
    Parse a main light descriptor
    off          -> normal mode, brightness 0
    0..100       -> moonlight mode, brightness X
    101..200     -> normal mode, brightness X-100
    moonlight:V  -> moonlight mode, brightness V
    normal:V     -> normal mode, brightness V
    """
    if text == "off":
        return MainLight(Mode.NORMAL, 0)

    try:
        level = parse_uint(text, U8_MAX)
    except InvalidNumber:
        pass
    else:
        if level <= 100:
            return MainLight(Mode.MOONLIGHT, level)
        if level <= 200:
            return MainLight(Mode.NORMAL, level - 100)
        raise InvalidFormat(MAIN_FORMAT)

    parts = text.split(":")
    if len(parts) != 2:
        raise InvalidFormat(MAIN_FORMAT)

    kind, raw_value = parts
    brightness = parse_uint(raw_value, U8_MAX)
    if brightness > 100:
        raise InvalidValue()

    if kind == "moonlight":
        return MainLight(Mode.MOONLIGHT, brightness)
    if kind == "normal":
        return MainLight(Mode.NORMAL, brightness)
    raise InvalidValue()


def parse_ambient(text: str) -> AmbientLight:
    """Parse an ambient light descriptor: 'H,S,V' or 'off'"""
    if text == "off":
        return AmbientLight(0, 0, 0)

    parts = text.split(",")
    if len(parts) != 3:
        raise InvalidFormat(AMBIENT_FORMAT)

    hue = parse_uint(parts[0], U16_MAX)
    saturation = parse_uint(parts[1], U8_MAX)
    value = parse_uint(parts[2], U8_MAX)

    if hue > 359:
        raise InvalidHue()
    if saturation > 100:
        raise InvalidSaturation()
    if value > 100:
        raise InvalidValue()

    return AmbientLight(hue, saturation, value)

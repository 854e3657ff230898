"""Exceptions raised by the ceiling light controller"""


class BulbError(Exception):
    """Base class for every controller failure"""


class ArgumentError(BulbError):
    """A light descriptor could not be parsed"""


class InvalidFormat(ArgumentError):
    def __init__(self, expected: str):
        super().__init__(f"invalid format: expected {expected}")


class InvalidNumber(ArgumentError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"invalid number: {reason}")


class InvalidValue(ArgumentError):
    def __init__(self):
        super().__init__("invalid value: should be between 0 and 100")


class InvalidHue(ArgumentError):
    def __init__(self):
        super().__init__("invalid hue: should be between 0 and 359")


class InvalidSaturation(ArgumentError):
    def __init__(self):
        super().__init__("invalid saturation: should be between 0 and 100")


class ProtocolError(BulbError):
    """Request could not be encoded or response could not be decoded"""


class ConfigError(BulbError):
    """Configuration file is unreadable or invalid"""

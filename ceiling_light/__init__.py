"""
Ceiling light controller
Drives main and ambient light of a smart ceiling lamp over its JSON line protocol
"""

from .bulb_manager import BulbManager, process
from .led_controller import LEDController
from .value_parsers import Mode, parse_ambient, parse_main

__version__ = "1.0.0"

__all__ = [
    "BulbManager",
    "LEDController",
    "Mode",
    "parse_ambient",
    "parse_main",
    "process",
]

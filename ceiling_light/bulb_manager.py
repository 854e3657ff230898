"""
Command sequencing for main and ambient light
Decides which protocol commands to send for each light descriptor
"""

import logging
import time
from typing import Optional

from .config import ConnectionSettings
from .led_controller import LEDController
from .value_parsers import parse_ambient, parse_main

log = logging.getLogger(__name__)


class BulbManager:
    """Applies parsed light descriptors through one command session"""

    def __init__(self, controller: LEDController):
        self.controller = controller

    def apply_main(self, descriptor: str):
        """Set the main light from an 'X|off|moonlight:V|normal:V' descriptor"""
        mode, brightness = parse_main(descriptor)
        log.debug("Main light: mode=%s brightness=%d", mode.name, brightness)

        if brightness == 0:
            self.controller.set_power(False)
            return

        self.controller.set_power(True, mode)
        self.controller.set_bright(brightness)

    def apply_ambient(self, descriptor: str):
        """Set the ambient light from an 'H,S,V|off' descriptor"""
        hue, saturation, value = parse_ambient(descriptor)
        log.debug("Ambient light: h=%d s=%d v=%d", hue, saturation, value)

        if value == 0:
            self.controller.bg_set_power(False)
            return

        self.controller.bg_set_power(True)
        self.controller.bg_set_hsv(hue, saturation)
        self.controller.bg_set_bright(value)

    def apply(self, main: Optional[str] = None, ambient: Optional[str] = None):
        # Main light first; an ambient parse failure does not undo it
        if main is not None:
            self.apply_main(main)
        if ambient is not None:
            self.apply_ambient(ambient)


def process(
    host: str,
    port: int,
    main: Optional[str] = None,
    ambient: Optional[str] = None,
    settings: Optional[ConnectionSettings] = None,
):
    """Connect to the bulb, let it settle, then send the requested changes"""
    settings = settings or ConnectionSettings()

    with LEDController.connect(host, port, settings) as controller:
        time.sleep(settings.settle_delay)
        BulbManager(controller).apply(main, ambient)

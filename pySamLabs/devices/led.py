# pySamLabs/devices/led.py

import logging

from pySamLabs.devices.cast import clamp, to_number

_LOGGER = logging.getLogger(__name__)


def encode_color(red, green, blue) -> bytes:
    """
    Encodes an RGB color as the 3-byte payload [R, G, B].
    Each channel is clamped to 0..255 and truncated to an integer.
    """
    return bytes(int(clamp(to_number(channel), 0.0, 255.0)) for channel in (red, green, blue))


class LED:
    """
    Represents one of a block's LEDs: the status LED every block has, or the
    RGB actor LED of the RGB block.
    """

    # Predefined main 8 colors (can be adjusted as needed)
    PREDEFINED_COLORS = {
        'red': (255, 0, 0),
        'green': (0, 255, 0),
        'blue': (0, 0, 255),
        'yellow': (255, 255, 0),
        'cyan': (0, 255, 255),
        'magenta': (255, 0, 255),
        'white': (255, 255, 255),
        'black': (0, 0, 0)
    }

    def __init__(self, session, actor: bool = False):
        """
        Initializes the LED on the given device session.
        With ``actor=True`` the colors go to the actor characteristic.
        """
        self.session = session
        self.actor = actor

    async def set_color_rgb(self, red, green, blue) -> bool:
        """
        Sets the LED color using RGB values.
        """
        payload = encode_color(red, green, blue)
        if self.actor:
            return await self.session.write_actor(payload)
        return await self.session.write_status_led(payload)

    async def set_color(self, color: str) -> bool:
        """
        Sets the LED to one of the predefined colors.
        """
        color_lower = color.lower()
        if color_lower not in self.PREDEFINED_COLORS:
            _LOGGER.warning("Color %r not defined. Available colors: %s",
                            color, list(self.PREDEFINED_COLORS))
            return False
        return await self.set_color_rgb(*self.PREDEFINED_COLORS[color_lower])

# pySamLabs/telemetry.py

import logging

_LOGGER = logging.getLogger(__name__)


class TelemetryCache:
    """
    Holds the latest sensor reading and battery percentage of one block.

    Each field is overwritten by the notification stream of its
    characteristic and read synchronously by any number of callers. Only
    the most recent value is kept; before the first notification the
    readers get 0.
    """
    def __init__(self):
        self.sensor_value = 0
        self.battery = 0

    def update_sensor(self, data: bytearray):
        if not data:
            _LOGGER.debug("Ignoring empty sensor notification")
            return
        self.sensor_value = data[0]

    def update_battery(self, data: bytearray):
        if not data:
            _LOGGER.debug("Ignoring empty battery notification")
            return
        self.battery = data[0]

    def get_sensor_value(self) -> int:
        return self.sensor_value

    def get_battery(self) -> int:
        return self.battery

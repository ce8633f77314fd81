# pySamLabs/__init__.py

"""
pySamLabs - A Python package to control SAM Labs blocks via BLE.
Version: 0.1.0
"""

__version__ = "0.1.0"

# Expose BLE-related functionality
from .ble import (
    SamScanner,
    SamClient,
    DiscoveryFilter,
    UUIDHelper,
    SAM_SERVICE_UUID,
    STATUS_LED_CHARACTERISTIC_UUID,
    ACTOR_CHARACTERISTIC_UUID,
    SENSOR_VALUE_CHARACTERISTIC_UUID,
    BATTERY_SERVICE_UUID,
    BATTERY_LEVEL_CHARACTERISTIC_UUID,
)

from .devices import *

from .exceptions import SamLabsError, DeviceConnectionError
from .telemetry import TelemetryCache
from .session import ConnectionState, DeviceSession
from .manager import Manager, DeviceEntry
from .blocks import Blocks

# pySamLabs/ble/__init__.py

"""
pySamLabs.ble - A package for handling Bluetooth Low Energy (BLE) communication with SAM Labs blocks.
Provides functionality for scanning, connecting, and interacting with SAM BLE blocks.
"""

from .scanner import SamScanner, DiscoveryFilter, prompt_selection
from .client import SamClient
from .utils import (
    UUIDHelper,
    SAM_SERVICE_UUID,
    STATUS_LED_CHARACTERISTIC_UUID,
    ACTOR_CHARACTERISTIC_UUID,
    SENSOR_VALUE_CHARACTERISTIC_UUID,
    BATTERY_SERVICE_UUID,
    BATTERY_LEVEL_CHARACTERISTIC_UUID,
    STOP_PAYLOAD,
)

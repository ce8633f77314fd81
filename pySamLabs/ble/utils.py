# pySamLabs/ble/utils.py

class UUIDHelper:
    UUID_STANDARD_BASE = "0000-1000-8000-00805f9b34fb"

    @staticmethod
    def add_leading_zeroes(prefix: str) -> str:
        """
        Removes the '0x' prefix (if present) and pads the value to ensure 8 digits.
        """
        if prefix.startswith("0x"):
            prefix = prefix[2:]
        return ("00000000" + prefix)[-8:]

    @staticmethod
    def uuid_with_prefix_standard_base(prefix: str) -> str:
        """
        Constructs a full UUID from a 16-bit assigned number using the Bluetooth base.
        """
        padding = UUIDHelper.add_leading_zeroes(prefix)
        return f"{padding}-{UUIDHelper.UUID_STANDARD_BASE.lower()}"

# SAM Labs service and characteristics
SAM_SERVICE_UUID = "3b989460-975f-11e4-a9fb-0002a5d5c51b"
STATUS_LED_CHARACTERISTIC_UUID = "5baab0a0-980c-11e4-b5e9-0002a5d5c51b"
ACTOR_CHARACTERISTIC_UUID = "84fc1520-980c-11e4-8bed-0002a5d5c51b"
SENSOR_VALUE_CHARACTERISTIC_UUID = "4c592e60-980c-11e4-959a-0002a5d5c51b"

# Standard battery service
BATTERY_SERVICE_UUID = UUIDHelper.uuid_with_prefix_standard_base("0x180F")
BATTERY_LEVEL_CHARACTERISTIC_UUID = UUIDHelper.uuid_with_prefix_standard_base("0x2A19")

DEFAULT_NAME_PREFIX = "SAM"
DEFAULT_SCAN_TIMEOUT = 5.0
DEFAULT_CONNECT_TIMEOUT = 10.0

STOP_PAYLOAD = bytes([0, 0, 0])

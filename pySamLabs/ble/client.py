# pySamLabs/ble/client.py

import asyncio
import logging

from bleak import BleakClient
from bleak.exc import BleakError

from pySamLabs.ble.utils import DEFAULT_CONNECT_TIMEOUT

_LOGGER = logging.getLogger(__name__)

# Errors the transport raises for failed or interrupted GATT operations
TRANSPORT_ERRORS = (BleakError, asyncio.TimeoutError, OSError)


class SamClient:
    """
    A class to manage the BLE connection and communication with one SAM block.
    """
    def __init__(self, device, disconnected_callback=None, timeout: float = DEFAULT_CONNECT_TIMEOUT,
                 services=None):
        """
        ``services`` limits GATT service discovery to the listed UUIDs;
        None (or empty) resolves every service.
        """
        self.device = device
        self.address = getattr(device, "address", device)
        self._disconnected_callback = disconnected_callback
        self.client = BleakClient(
            device,
            disconnected_callback=self._on_disconnected,
            services=list(services) if services else None,
            timeout=timeout,
        )
        self.connected = False

    def _on_disconnected(self, client):
        self.connected = False
        if self._disconnected_callback is not None:
            self._disconnected_callback(self)

    @property
    def is_connected(self) -> bool:
        return self.connected and self.client.is_connected

    async def connect(self) -> bool:
        try:
            await self.client.connect()
        except TRANSPORT_ERRORS as e:
            _LOGGER.error("Failed to connect to SAM block at %s: %s", self.address, e)
            return False
        self.connected = True
        _LOGGER.info("Connected to SAM block at %s", self.address)
        return True

    async def disconnect(self):
        if self.connected:
            self.connected = False
            await self.client.disconnect()
            _LOGGER.info("Disconnected from SAM block at %s", self.address)

    def has_characteristic(self, char_uuid) -> bool:
        """
        Checks whether the resolved GATT services expose the given characteristic.
        """
        return self.client.services.get_characteristic(char_uuid) is not None

    async def write_gatt_char(self, char_uuid, data, response: bool = True):
        """
        Delegates the write_gatt_char call to the underlying BleakClient instance.
        """
        return await self.client.write_gatt_char(char_uuid, data, response=response)

    async def start_notify(self, char_uuid, callback):
        """
        Delegates the start_notify call to the underlying BleakClient instance.
        """
        return await self.client.start_notify(char_uuid, callback)

    async def stop_notify(self, char_uuid):
        """
        Delegates the stop_notify call to the underlying BleakClient instance.
        """
        return await self.client.stop_notify(char_uuid)

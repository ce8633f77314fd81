from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import pytest
from bleak.exc import BleakError

from pySamLabs.ble.utils import (
    ACTOR_CHARACTERISTIC_UUID,
    BATTERY_LEVEL_CHARACTERISTIC_UUID,
    SENSOR_VALUE_CHARACTERISTIC_UUID,
    STATUS_LED_CHARACTERISTIC_UUID,
)
from pySamLabs.exceptions import DeviceConnectionError
from pySamLabs.manager import Manager

BASIC_CHARACTERISTICS = frozenset({
    STATUS_LED_CHARACTERISTIC_UUID,
    SENSOR_VALUE_CHARACTERISTIC_UUID,
    BATTERY_LEVEL_CHARACTERISTIC_UUID,
})
ACTOR_CHARACTERISTICS = BASIC_CHARACTERISTICS | {ACTOR_CHARACTERISTIC_UUID}


@dataclass
class FakeBLEDevice:
    address: str
    name: str | None = "SAM Block"
    characteristics: frozenset = ACTOR_CHARACTERISTICS
    connect_result: bool = True


class FakeClient:
    """Stands in for SamClient; records every GATT operation."""

    instances: list[FakeClient] = []

    def __init__(self, device, disconnected_callback=None, timeout=None, services=None) -> None:
        self.device = device
        self.address = device.address
        self.timeout = timeout
        self.services = services
        self._disconnected_callback = disconnected_callback
        self.connected = False
        self.writes: list[tuple[str, bytes, bool]] = []
        self.handlers: dict[str, object] = {}
        self.stopped: list[str] = []
        self.write_gate: asyncio.Event | None = None
        self.write_error: Exception | None = None
        self.notify_error: Exception | None = None
        self.on_connect = None
        FakeClient.instances.append(self)

    @property
    def is_connected(self) -> bool:
        return self.connected

    async def connect(self) -> bool:
        if not self.device.connect_result:
            return False
        self.connected = True
        if self.on_connect is not None:
            self.on_connect(self)
        return True

    async def disconnect(self) -> None:
        if self.connected:
            self.connected = False
            if self._disconnected_callback is not None:
                self._disconnected_callback(self)

    def has_characteristic(self, char_uuid) -> bool:
        return char_uuid in self.device.characteristics

    async def write_gatt_char(self, char_uuid, data, response: bool = True) -> None:
        self.writes.append((char_uuid, bytes(data), response))
        if self.write_gate is not None:
            await self.write_gate.wait()
        if self.write_error is not None:
            raise self.write_error

    async def start_notify(self, char_uuid, callback) -> None:
        if self.notify_error is not None:
            raise self.notify_error
        self.handlers[char_uuid] = callback

    async def stop_notify(self, char_uuid) -> None:
        self.stopped.append(char_uuid)
        self.handlers.pop(char_uuid, None)

    # Test helpers

    def notify(self, char_uuid, data) -> None:
        self.handlers[char_uuid](None, bytearray(data))

    def drop_link(self) -> None:
        self.connected = False
        if self._disconnected_callback is not None:
            self._disconnected_callback(self)


@dataclass
class FakeScanner:
    """Returns queued selections instead of scanning."""

    selections: list = field(default_factory=list)
    filters: list = field(default_factory=list)

    async def select_device(self, selection_filter):
        self.filters.append(selection_filter)
        selected = self.selections.pop(0)
        if isinstance(selected, Exception):
            raise selected
        return selected


@pytest.fixture(autouse=True)
def _reset_fake_clients():
    FakeClient.instances.clear()
    yield
    FakeClient.instances.clear()


@pytest.fixture
def scanner() -> FakeScanner:
    return FakeScanner()


@pytest.fixture
def manager(scanner: FakeScanner) -> Manager:
    return Manager(scanner=scanner, client_factory=FakeClient)


def no_block_found() -> DeviceConnectionError:
    return DeviceConnectionError("No SAM block found")


def transport_error(message: str = "link dropped") -> BleakError:
    return BleakError(message)

# pySamLabs/session.py

import enum
import logging

from pySamLabs.ble.client import SamClient, TRANSPORT_ERRORS
from pySamLabs.ble.utils import (
    ACTOR_CHARACTERISTIC_UUID,
    BATTERY_LEVEL_CHARACTERISTIC_UUID,
    DEFAULT_CONNECT_TIMEOUT,
    SENSOR_VALUE_CHARACTERISTIC_UUID,
    STATUS_LED_CHARACTERISTIC_UUID,
)
from pySamLabs.exceptions import DeviceConnectionError
from pySamLabs.telemetry import TelemetryCache

_LOGGER = logging.getLogger(__name__)


class ConnectionState(enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTING = "disconnecting"


class DeviceSession:
    """
    Owns the connection to one SAM block.

    A session connects exactly once. It goes DISCONNECTED -> CONNECTING ->
    CONNECTED -> DISCONNECTING -> DISCONNECTED; reconnecting a block means
    creating a new session. ``actor_available`` is decided when the
    characteristics are resolved and never changes afterwards.

    ``on_disconnect`` is called with the session once a CONNECTED session
    has been torn down, whether explicitly or because the link dropped.
    ``services`` are the GATT services to resolve while connecting.
    """
    def __init__(self, ble_device, on_disconnect=None, client_factory=SamClient,
                 connect_timeout: float = DEFAULT_CONNECT_TIMEOUT, services=None):
        self.id = getattr(ble_device, "address", str(ble_device))
        self.display_name = getattr(ble_device, "name", None) or self.id
        self.state = ConnectionState.DISCONNECTED
        self.actor_available = False
        self.telemetry = TelemetryCache()
        self._on_disconnect = on_disconnect
        self._subscriptions = []
        self._started = False
        self.client = client_factory(ble_device, self._on_link_lost, connect_timeout, services)

    def __repr__(self):
        return f"<DeviceSession {self.display_name} ({self.id}) {self.state.value}>"

    @property
    def is_connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    @property
    def last_sensor_value(self) -> int:
        return self.telemetry.get_sensor_value()

    @property
    def last_battery_value(self) -> int:
        return self.telemetry.get_battery()

    async def connect(self):
        """
        Opens the link, resolves the characteristics and subscribes to the
        sensor and battery notifications.
        Raises DeviceConnectionError if the block cannot reach CONNECTED.
        """
        if self._started:
            raise RuntimeError(f"{self!r} has already been used; create a new session to reconnect")
        self._started = True
        self.state = ConnectionState.CONNECTING
        _LOGGER.debug("Connecting to %s (%s)", self.display_name, self.id)

        try:
            if not await self.client.connect():
                raise DeviceConnectionError(f"Could not connect to {self.display_name} ({self.id})")
            await self._resolve_characteristics()
        except BaseException:
            # Covers cancellation too: the link must not outlive a failed handshake.
            await self._abort()
            raise

        if self.state is not ConnectionState.CONNECTING:
            # The link dropped while the characteristics were being resolved.
            self._subscriptions.clear()
            raise DeviceConnectionError(f"{self.display_name} ({self.id}) disconnected during the handshake")

        self.state = ConnectionState.CONNECTED
        _LOGGER.info("Block %s (%s) ready, actor available: %s",
                     self.display_name, self.id, self.actor_available)

    async def _resolve_characteristics(self):
        if not self.client.has_characteristic(STATUS_LED_CHARACTERISTIC_UUID):
            raise DeviceConnectionError(f"{self.display_name} ({self.id}) has no status LED characteristic")
        self.actor_available = self.client.has_characteristic(ACTOR_CHARACTERISTIC_UUID)

        notifications = (
            (SENSOR_VALUE_CHARACTERISTIC_UUID, self._on_sensor_notification),
            (BATTERY_LEVEL_CHARACTERISTIC_UUID, self._on_battery_notification),
        )
        for char_uuid, handler in notifications:
            if not self.client.has_characteristic(char_uuid):
                continue
            try:
                await self.client.start_notify(char_uuid, handler)
            except TRANSPORT_ERRORS as e:
                _LOGGER.warning("Could not subscribe to %s on %s: %s", char_uuid, self.id, e)
                continue
            self._subscriptions.append(char_uuid)

    async def _abort(self):
        try:
            await self.client.disconnect()
        except TRANSPORT_ERRORS as e:
            _LOGGER.debug("Error while aborting connection to %s: %s", self.id, e)
        self._subscriptions.clear()
        self.state = ConnectionState.DISCONNECTED

    def _accepts_notifications(self) -> bool:
        return self.state in (ConnectionState.CONNECTING, ConnectionState.CONNECTED)

    def _on_sensor_notification(self, sender, data: bytearray):
        if not self._accepts_notifications():
            return
        _LOGGER.debug("[Sensor Notification] %s: %s", self.id, list(data))
        self.telemetry.update_sensor(data)

    def _on_battery_notification(self, sender, data: bytearray):
        if not self._accepts_notifications():
            return
        _LOGGER.debug("[Battery Notification] %s: %s", self.id, list(data))
        self.telemetry.update_battery(data)

    def _on_link_lost(self, client):
        if self.state in (ConnectionState.DISCONNECTED, ConnectionState.DISCONNECTING):
            return
        was_connected = self.state is ConnectionState.CONNECTED
        self.state = ConnectionState.DISCONNECTING
        self._subscriptions.clear()
        self.state = ConnectionState.DISCONNECTED
        _LOGGER.info("Block %s (%s) lost its connection", self.display_name, self.id)
        if was_connected:
            self._closed()

    def _closed(self):
        if self._on_disconnect is not None:
            self._on_disconnect(self)

    async def disconnect(self):
        """
        Unsubscribes from notifications and closes the link.
        Does nothing unless the session is CONNECTED.
        """
        if self.state is not ConnectionState.CONNECTED:
            return
        self.state = ConnectionState.DISCONNECTING
        for char_uuid in self._subscriptions:
            try:
                await self.client.stop_notify(char_uuid)
            except TRANSPORT_ERRORS as e:
                _LOGGER.debug("Could not unsubscribe from %s on %s: %s", char_uuid, self.id, e)
        self._subscriptions.clear()
        try:
            await self.client.disconnect()
        except TRANSPORT_ERRORS as e:
            _LOGGER.warning("Error while disconnecting from %s: %s", self.id, e)
        self.state = ConnectionState.DISCONNECTED
        _LOGGER.info("Disconnected from block %s (%s)", self.display_name, self.id)
        self._closed()

    async def write_status_led(self, payload: bytes) -> bool:
        """
        Writes a 3-byte color to the status LED. Every block has one.
        """
        return await self._write(STATUS_LED_CHARACTERISTIC_UUID, payload, response=True)

    async def write_actor(self, payload: bytes, wait_for_ack: bool = True) -> bool:
        """
        Writes a 3-byte payload to the actor (motor, servo or RGB LED).

        With ``wait_for_ack=False`` the write is sent without response, which
        is what stop_all uses so a closing link cannot stall the shutdown.
        Blocks without an actor ignore the command.
        """
        if not self.actor_available:
            _LOGGER.debug("Block %s has no actor, ignoring %s", self.id, list(payload))
            return False
        return await self._write(ACTOR_CHARACTERISTIC_UUID, payload, response=wait_for_ack)

    async def _write(self, char_uuid, payload: bytes, response: bool) -> bool:
        if self.state is not ConnectionState.CONNECTED:
            _LOGGER.warning("Dropping write of %s to %s: block is %s",
                            list(payload), self.id, self.state.value)
            return False
        try:
            await self.client.write_gatt_char(char_uuid, payload, response=response)
        except TRANSPORT_ERRORS as e:
            _LOGGER.warning("Write of %s to %s failed: %s", list(payload), self.id, e)
            return False
        _LOGGER.debug("Sent %s to %s on %s", list(payload), char_uuid, self.id)
        return True

    def get_sensor_value(self) -> int:
        return self.telemetry.get_sensor_value()

    def get_battery(self) -> int:
        return self.telemetry.get_battery()

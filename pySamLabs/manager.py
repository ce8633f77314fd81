# pySamLabs/manager.py

import asyncio
import logging
from typing import List, NamedTuple, Optional

from pySamLabs.ble.client import SamClient
from pySamLabs.ble.scanner import DiscoveryFilter, SamScanner
from pySamLabs.ble.utils import DEFAULT_CONNECT_TIMEOUT, STOP_PAYLOAD
from pySamLabs.session import DeviceSession

_LOGGER = logging.getLogger(__name__)


class DeviceEntry(NamedTuple):
    id: str
    display_name: str


class Manager:
    """
    The registry of connected SAM blocks.

    Blocks are indexed by their canonical id (the BLE address). An alias map
    can redirect other identifiers to a canonical id; lookups try the alias
    first and fall back to the canonical id. A block is only registered once
    its session reached CONNECTED and is removed as soon as that session is
    torn down.

    Both maps are only mutated between awaits, so readers on the event loop
    never see a half-applied change.
    """
    def __init__(self, scanner: Optional[SamScanner] = None, client_factory=SamClient,
                 connect_timeout: float = DEFAULT_CONNECT_TIMEOUT, scan_timeout: Optional[float] = None):
        if scanner is None:
            scanner = SamScanner() if scan_timeout is None else SamScanner(timeout=scan_timeout)
        self.scanner = scanner
        self.client_factory = client_factory
        self.connect_timeout = connect_timeout
        self.devices = {}   # Maps canonical ids to DeviceSessions.
        self.aliases = {}   # Maps aliases to canonical ids.
        self._pending_stops = set()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.shutdown()

    async def connect(self, selection_filter: Optional[DiscoveryFilter] = None) -> Optional[DeviceSession]:
        """
        Lets the user pick a block, connects to it and registers it.
        Returns None if the selection was cancelled. Raises
        DeviceConnectionError if no block was found or the handshake failed.
        """
        if selection_filter is None:
            selection_filter = DiscoveryFilter()
        ble_device = await self.scanner.select_device(selection_filter)
        if ble_device is None:
            return None

        session = DeviceSession(
            ble_device,
            on_disconnect=self._on_session_closed,
            client_factory=self.client_factory,
            connect_timeout=self.connect_timeout,
            services=selection_filter.optional_services,
        )
        previous = self.devices.get(session.id)
        if previous is not None:
            _LOGGER.info("Block %s is already registered, replacing its session", session.id)
            await previous.disconnect()

        await session.connect()

        # Another connect to the same block may have registered while this
        # handshake was suspended; the newest session replaces it.
        previous = self.devices.get(session.id)
        self.devices[session.id] = session
        _LOGGER.info("Registered block %s (%s)", session.display_name, session.id)
        if previous is not None and previous is not session:
            _LOGGER.info("Block %s connected twice, dropping the older session", session.id)
            await previous.disconnect()
        return session

    def _on_session_closed(self, session: DeviceSession):
        if self.devices.get(session.id) is session:
            del self.devices[session.id]
            _LOGGER.info("Removed block %s (%s)", session.display_name, session.id)

    async def disconnect(self, device_id) -> bool:
        """
        Disconnects a registered block. Returns False for unknown ids.
        """
        session = self.resolve(device_id)
        if session is None:
            return False
        await session.disconnect()
        return True

    def resolve(self, device_id) -> Optional[DeviceSession]:
        """
        Returns the connected session for an alias or canonical id, or None.
        """
        canonical_id = self.aliases.get(device_id, device_id)
        session = self.devices.get(canonical_id)
        if session is None or not session.is_connected:
            return None
        return session

    def add_alias(self, alias, device_id):
        self.aliases[alias] = device_id

    def remove_alias(self, alias):
        self.aliases.pop(alias, None)

    def list(self) -> List[DeviceEntry]:
        return [DeviceEntry(session.id, session.display_name) for session in self.devices.values()]

    def stop_all(self) -> List[asyncio.Task]:
        """
        Sends the stop payload to every block's actor without waiting for it.

        Each write runs in its own task, so a block whose write hangs or
        fails does not hold up the others. Must be called from the event loop.
        """
        tasks = []
        for session in list(self.devices.values()):
            task = asyncio.ensure_future(session.write_actor(STOP_PAYLOAD, wait_for_ack=False))
            self._pending_stops.add(task)
            task.add_done_callback(self._stop_done)
            tasks.append(task)
        return tasks

    def _stop_done(self, task: asyncio.Task):
        self._pending_stops.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _LOGGER.warning("Stopping a block failed: %r", exc)

    async def shutdown(self):
        """
        Disconnects every block and forgets all ids and aliases.
        """
        sessions = list(self.devices.values())
        results = await asyncio.gather(*(session.disconnect() for session in sessions), return_exceptions=True)
        for session, result in zip(sessions, results):
            if isinstance(result, Exception):
                _LOGGER.warning("Disconnecting %s failed: %r", session.id, result)
        self.devices.clear()
        self.aliases.clear()

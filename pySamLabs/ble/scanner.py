# pySamLabs/ble/scanner.py

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Sequence

from bleak import BleakScanner
from bleak.backends.device import BLEDevice

from pySamLabs.ble.utils import (
    BATTERY_SERVICE_UUID,
    DEFAULT_NAME_PREFIX,
    DEFAULT_SCAN_TIMEOUT,
    SAM_SERVICE_UUID,
)
from pySamLabs.exceptions import DeviceConnectionError

_LOGGER = logging.getLogger(__name__)

Chooser = Callable[[Sequence[BLEDevice]], Awaitable[Optional[BLEDevice]]]


@dataclass(frozen=True)
class DiscoveryFilter:
    """
    Constrains which advertisements are offered for selection.

    ``service_uuids`` is handed to the scan unmodified, so only peripherals
    advertising all of them are reported. ``optional_services`` are the
    services resolved once connected; the characteristics the session
    uses must live in one of them. Leave it empty to resolve everything.
    """
    name_prefix: str = DEFAULT_NAME_PREFIX
    service_uuids: Sequence[str] = ()
    optional_services: Sequence[str] = field(
        default_factory=lambda: (BATTERY_SERVICE_UUID, SAM_SERVICE_UUID)
    )

    def matches(self, device: BLEDevice) -> bool:
        return bool(device.name) and device.name.startswith(self.name_prefix)


async def prompt_selection(candidates: Sequence[BLEDevice]) -> Optional[BLEDevice]:
    """
    Asks on the console which of several candidates to connect to.
    Returns None when the user cancels.
    """
    if len(candidates) == 1:
        return candidates[0]

    print(f"\nFound {len(candidates)} SAM blocks:")
    for idx, device in enumerate(candidates, 1):
        print(f"  {idx}. {device.name} - {device.address}")

    while True:
        try:
            choice = await asyncio.to_thread(input, f"Select block (1-{len(candidates)}, empty to cancel): ")
        except (EOFError, KeyboardInterrupt):
            return None
        if not choice.strip():
            return None
        try:
            choice_idx = int(choice) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= choice_idx < len(candidates):
            return candidates[choice_idx]
        print("Invalid selection. Try again.")


class SamScanner:
    """
    A class to handle scanning and discovering SAM Labs blocks.
    """
    def __init__(self, chooser: Chooser = prompt_selection, timeout: float = DEFAULT_SCAN_TIMEOUT):
        self.chooser = chooser
        self.timeout = timeout

    async def discover(self, selection_filter: DiscoveryFilter) -> List[BLEDevice]:
        """
        Scans for SAM blocks and returns every advertisement passing the filter.
        """
        _LOGGER.debug("Scanning for SAM blocks with prefix %r", selection_filter.name_prefix)
        found = await BleakScanner.discover(
            timeout=self.timeout,
            service_uuids=list(selection_filter.service_uuids) or None,
        )
        return [device for device in found if selection_filter.matches(device)]

    async def select_device(self, selection_filter: DiscoveryFilter) -> Optional[BLEDevice]:
        """
        Discovers matching blocks and lets the chooser pick one.
        Returns None on cancellation; raises DeviceConnectionError when no
        block matched at all.
        """
        candidates = await self.discover(selection_filter)
        if not candidates:
            raise DeviceConnectionError(f"No SAM block found with prefix {selection_filter.name_prefix!r}")
        selected = await self.chooser(candidates)
        if selected is None:
            _LOGGER.info("Block selection cancelled")
        else:
            _LOGGER.debug("Selected %s at %s", selected.name, selected.address)
        return selected

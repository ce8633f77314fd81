# pySamLabs/blocks.py

import logging

from pySamLabs.ble.scanner import DiscoveryFilter
from pySamLabs.devices import encode_color, encode_motor_speed, encode_servo_angle
from pySamLabs.exceptions import DeviceConnectionError
from pySamLabs.manager import Manager

_LOGGER = logging.getLogger(__name__)

# Host events after which every actor is stopped
STOP_EVENTS = ("PROJECT_STOP_ALL", "PROJECT_RUN_STOP")

# Menu entry shown while no block is connected
EMPTY_MENU = [{"text": "-", "value": "-"}]


class Blocks:
    """
    The command surface the block-programming host calls into.

    Every command takes the device id chosen in the device menu. Unknown ids,
    blocks without an actor and failed writes never raise: setters do
    nothing and readers return 0.
    """
    def __init__(self, manager: Manager = None, runtime=None, selection_filter: DiscoveryFilter = None):
        self.manager = manager if manager is not None else Manager()
        self.selection_filter = selection_filter or DiscoveryFilter()
        self.runtime = runtime
        if runtime is not None:
            for event in STOP_EVENTS:
                runtime.on(event, self.stop_all)

    async def connect_to_device(self):
        try:
            session = await self.manager.connect(self.selection_filter)
        except DeviceConnectionError as e:
            _LOGGER.error("Connecting a block failed: %s", e)
            return None
        return session

    def get_device_menu(self):
        menu = [{"text": entry.display_name, "value": entry.id} for entry in self.manager.list()]
        return menu or [dict(entry) for entry in EMPTY_MENU]

    async def set_led_color(self, device_id, red, green, blue):
        block = self.manager.resolve(device_id)
        if block is None:
            return
        await block.write_status_led(encode_color(red, green, blue))

    async def set_led_rgb_color(self, device_id, red, green, blue):
        block = self.manager.resolve(device_id)
        if block is None or not block.actor_available:
            return
        await block.write_actor(encode_color(red, green, blue))

    async def set_block_motor_speed(self, device_id, speed):
        block = self.manager.resolve(device_id)
        if block is None or not block.actor_available:
            return
        await block.write_actor(encode_motor_speed(speed))

    async def set_block_servo(self, device_id, angle):
        block = self.manager.resolve(device_id)
        if block is None or not block.actor_available:
            return
        await block.write_actor(encode_servo_angle(angle))

    def get_sensor_value(self, device_id):
        block = self.manager.resolve(device_id)
        if block is None:
            return 0
        return block.get_sensor_value()

    def get_battery(self, device_id):
        block = self.manager.resolve(device_id)
        if block is None:
            return 0
        return block.get_battery()

    def stop_all(self, *args):
        return self.manager.stop_all()

# sample_app.py

import asyncio
import logging

from pySamLabs import Blocks, Manager
from pySamLabs.devices import LED, Motor


async def motor_routine(session):
    """
    Runs the motor forward at 50%, then backward, then stops it.
    """
    if not session.actor_available:
        print(f"{session.display_name} has no actor, skipping the motor routine.")
        return
    motor = Motor(session)
    await motor.send_command(50)
    await asyncio.sleep(3)
    await motor.send_command(-50)
    await asyncio.sleep(3)
    await motor.stop()


async def main():
    async with Manager() as manager:
        blocks = Blocks(manager)
        session = await blocks.connect_to_device()
        if session is None:
            print("No SAM block connected. Exiting.")
            return

        print(f"Connected blocks: {blocks.get_device_menu()}")

        led = LED(session)
        await led.set_color("green")

        await motor_routine(session)

        # Give the block a moment to report its readings.
        await asyncio.sleep(2)
        print(f"Sensor value: {blocks.get_sensor_value(session.id)}")
        print(f"Battery: {blocks.get_battery(session.id)}%")

        await asyncio.gather(*blocks.stop_all())

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    asyncio.run(main())

# pySamLabs/devices/motor.py

from pySamLabs.devices.cast import clamp, to_number

MOTOR_SCALE = 1.27


def encode_motor_speed(speed) -> bytes:
    """
    Encodes a signed speed percentage as the 3-byte motor payload.

    The speed is clamped to -100..100 before scaling. Forward speeds map to
    0..127; reverse speeds put their magnitude in 128..255:
      0 -> 0, 100 -> 127, -50 -> 191, -100 -> 255
    The scaled value is truncated, as the firmware receives it through an
    unsigned 8-bit conversion.
    """
    speed = clamp(to_number(speed), -100.0, 100.0)
    if speed < 0:
        value = int(abs(speed) * MOTOR_SCALE) + 128
    else:
        value = int(speed * MOTOR_SCALE)
    return bytes([value, 0, 0])


class Motor:
    """
    Represents the DC motor output of a SAM motor block.
    """
    def __init__(self, session):
        self.session = session

    async def send_command(self, speed) -> bool:
        """
        Sends a motor command; negative speeds run the motor in reverse.
        """
        return await self.session.write_actor(encode_motor_speed(speed))

    async def stop(self) -> bool:
        return await self.send_command(0)

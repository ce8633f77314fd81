# pySamLabs/devices/servo.py

from pySamLabs.devices.cast import to_int


def encode_servo_angle(angle) -> bytes:
    """
    Encodes a servo angle as [angle, 0, 0].

    The angle is neither scaled nor clamped. Values outside 0..255 wrap
    modulo 256, so -1 is sent as 255 and 260 as 4.
    """
    return bytes([to_int(angle) % 256, 0, 0])


class Servo:
    """
    Represents the servo output of a SAM servo block.
    """
    def __init__(self, session):
        self.session = session

    async def set_angle(self, angle) -> bool:
        return await self.session.write_actor(encode_servo_angle(angle))

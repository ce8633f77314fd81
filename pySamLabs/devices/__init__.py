"""
pySamLabs.devices - A subpackage for the outputs of SAM blocks and their payload encoders.
"""

# Expose the device classes and encoders at the package level
from .led import LED, encode_color
from .motor import Motor, encode_motor_speed
from .servo import Servo, encode_servo_angle

__all__ = [
    "LED",
    "Motor",
    "Servo",
    "encode_color",
    "encode_motor_speed",
    "encode_servo_angle",
]

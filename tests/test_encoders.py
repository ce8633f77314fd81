import pytest

from pySamLabs.devices import encode_color, encode_motor_speed, encode_servo_angle
from pySamLabs.devices.cast import to_number


def test_encode_color_keeps_in_range_channels() -> None:
    assert encode_color(10, 20, 30) == bytes([10, 20, 30])
    assert encode_color(0, 128, 255) == bytes([0, 128, 255])


def test_encode_color_clamps_out_of_range_channels() -> None:
    assert encode_color(-5, 300, 255.9) == bytes([0, 255, 255])


def test_encode_color_coerces_host_arguments() -> None:
    assert encode_color("12", 7.8, "not a number") == bytes([12, 7, 0])


@pytest.mark.parametrize(
    "speed, expected",
    [
        (0, [0, 0, 0]),
        (100, [127, 0, 0]),
        (-100, [255, 0, 0]),
        (-50, [191, 0, 0]),
        (50, [63, 0, 0]),
    ],
)
def test_encode_motor_speed_known_values(speed, expected) -> None:
    assert encode_motor_speed(speed) == bytes(expected)


def test_encode_motor_speed_clamps_before_scaling() -> None:
    assert encode_motor_speed(150) == encode_motor_speed(100)
    assert encode_motor_speed(-1000) == encode_motor_speed(-100)


def test_encode_motor_speed_forward_range_is_monotonic() -> None:
    values = [encode_motor_speed(speed)[0] for speed in range(0, 101)]
    assert values == sorted(values)
    assert min(values) == 0 and max(values) == 127


def test_encode_motor_speed_reverse_magnitude_is_monotonic() -> None:
    values = [encode_motor_speed(-magnitude)[0] for magnitude in range(1, 101)]
    assert values == sorted(values)
    assert min(values) >= 128 and max(values) == 255


def test_encode_motor_speed_accepts_numeric_strings() -> None:
    assert encode_motor_speed("-50") == bytes([191, 0, 0])


def test_encode_servo_angle_passes_angle_through() -> None:
    assert encode_servo_angle(90) == bytes([90, 0, 0])
    assert encode_servo_angle(180.7) == bytes([180, 0, 0])


def test_encode_servo_angle_wraps_outside_byte_range() -> None:
    assert encode_servo_angle(260) == bytes([4, 0, 0])
    assert encode_servo_angle(-1) == bytes([255, 0, 0])


def test_to_number_falls_back_to_zero() -> None:
    assert to_number(None) == 0
    assert to_number("abc") == 0
    assert to_number(float("nan")) == 0
    assert to_number(" 42 ") == 42

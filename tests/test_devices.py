import pytest

from pySamLabs.ble.utils import ACTOR_CHARACTERISTIC_UUID, STATUS_LED_CHARACTERISTIC_UUID
from pySamLabs.devices import LED, Motor, Servo
from pySamLabs.session import DeviceSession
from tests.conftest import FakeBLEDevice, FakeClient


async def connected_session() -> DeviceSession:
    session = DeviceSession(FakeBLEDevice("AA:BB:CC:DD:EE:01"), client_factory=FakeClient)
    await session.connect()
    return session


@pytest.mark.asyncio
async def test_status_led_predefined_color() -> None:
    session = await connected_session()
    assert await LED(session).set_color("Magenta") is True
    assert session.client.writes == [(STATUS_LED_CHARACTERISTIC_UUID, bytes([255, 0, 255]), True)]


@pytest.mark.asyncio
async def test_unknown_color_is_rejected() -> None:
    session = await connected_session()
    assert await LED(session).set_color("chartreuse") is False
    assert session.client.writes == []


@pytest.mark.asyncio
async def test_actor_led_writes_to_actor() -> None:
    session = await connected_session()
    await LED(session, actor=True).set_color_rgb(1, 2, 3)
    assert session.client.writes == [(ACTOR_CHARACTERISTIC_UUID, bytes([1, 2, 3]), True)]


@pytest.mark.asyncio
async def test_motor_and_servo_route_through_encoders() -> None:
    session = await connected_session()
    motor = Motor(session)
    await motor.send_command(100)
    await motor.stop()
    await Servo(session).set_angle(45)
    assert [payload for _, payload, _ in session.client.writes] == [
        bytes([127, 0, 0]),
        bytes([0, 0, 0]),
        bytes([45, 0, 0]),
    ]

# pySamLabs/exceptions.py


class SamLabsError(Exception):
    """Base class for errors raised by pySamLabs."""


class DeviceConnectionError(SamLabsError):
    """
    Raised when no block could be discovered or the connection handshake
    failed or timed out. No device is registered when this is raised.
    """

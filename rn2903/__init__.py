"""RN2903 driver - line protocol engine for the Microchip LoRa/FSK transceiver."""

from .device import Rn2903
from .errors import (
    Rn2903Error,
    ConnectionFailed,
    WrongDevice,
    BadResponse,
    CannotPause,
    TransceiverBusy,
    Disconnected,
)
from .models import NvmAddress, ModulationMode, DigitalPin
from .transport import ByteStream, SerialStream, serial_config

__all__ = [
    "Rn2903",
    "Rn2903Error",
    "ConnectionFailed",
    "WrongDevice",
    "BadResponse",
    "CannotPause",
    "TransceiverBusy",
    "Disconnected",
    "NvmAddress",
    "ModulationMode",
    "DigitalPin",
    "ByteStream",
    "SerialStream",
    "serial_config",
]

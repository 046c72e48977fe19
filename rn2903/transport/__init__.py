"""Byte stream layer for RN2903 communication."""

from .base import ByteStream
from .serial import SerialStream, serial_config

__all__ = [
    "ByteStream",
    "SerialStream",
    "serial_config",
]

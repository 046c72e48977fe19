"""pyserial-backed byte stream for the RN2903.

The module's UART defaults (Microchip document 40001811 revision B) are
57600 baud, 8N1, no flow control. The read timeout is left unbounded: the
line reader re-polls on its own rather than relying on the port timeout to
bound normal operation.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import serial

from ..errors import ConnectionFailed
from .base import ByteStream

logger = logging.getLogger(__name__)

CONNECTION_BAUD = 57600
READ_TIMEOUT: Optional[float] = None  # block until data arrives
WRITE_TIMEOUT: Optional[float] = None


def serial_config() -> Dict[str, Any]:
    """Return the canonical pyserial settings for an RN2903.

    Use this to configure a ``serial.Serial`` yourself, or let
    ``SerialStream.open`` apply it.
    """
    return {
        "baudrate": CONNECTION_BAUD,
        "bytesize": serial.EIGHTBITS,
        "parity": serial.PARITY_NONE,
        "stopbits": serial.STOPBITS_ONE,
        "xonxoff": False,
        "rtscts": False,
        "dsrdtr": False,
        "timeout": READ_TIMEOUT,
        "write_timeout": WRITE_TIMEOUT,
    }


class SerialStream(ByteStream):
    """ByteStream over an open ``serial.Serial`` port.

    Example:
        >>> stream = SerialStream.open("/dev/ttyUSB0")
        >>> stream.write(b"sys get ver\\r\\n")
        13
        >>> stream.close()
    """

    def __init__(self, port: serial.Serial):
        """Wrap an already-open pyserial port.

        Args:
            port: Open ``serial.Serial`` instance; ownership passes to the stream
        """
        self._serial: Optional[serial.Serial] = port

    @classmethod
    def open(cls, port: str, **overrides: Any) -> SerialStream:
        """Open ``port`` with the canonical settings.

        Args:
            port: Serial port path (e.g. '/dev/ttyUSB0', 'COM3')
            **overrides: pyserial keyword arguments replacing the defaults

        Raises:
            ConnectionFailed: If the port could not be opened or configured
        """
        settings = serial_config()
        settings.update(overrides)
        try:
            sp = serial.Serial(port=port, **settings)
        except (serial.SerialException, ValueError) as e:
            raise ConnectionFailed(f"Failed to open {port}: {e}") from e

        logger.info(f"Opened {port} @ {settings['baudrate']} baud")
        return cls(sp)

    @property
    def serial(self) -> serial.Serial:
        """The underlying pyserial port, for line-signal toggling and reconfiguration."""
        if self._serial is None:
            raise serial.PortNotOpenError()
        return self._serial

    def write(self, data: bytes) -> int:
        written = self.serial.write(data)
        return len(data) if written is None else written

    def flush(self) -> None:
        self.serial.flush()

    def read(self, size: int) -> bytes:
        port = self.serial
        # Block for the first byte, then take whatever else is already buffered
        data = port.read(1)
        if not data:
            raise TimeoutError(f"No data within {port.timeout}s read timeout")
        if size > 1:
            pending = port.in_waiting
            if pending:
                data += port.read(min(pending, size - 1))
        return data

    def close(self) -> None:
        if self._serial is None:
            return
        try:
            self._serial.close()
        finally:
            self._serial = None
        logger.info("Serial port closed")

    @property
    def is_open(self) -> bool:
        return self._serial is not None and self._serial.is_open

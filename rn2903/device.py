"""Device handle for an RN2903 module.

Owns the byte stream, verifies the module's identity on open, and exposes the
transaction engine plus typed methods for the system, radio and MAC commands.

Every method that talks to the module may raise ``Disconnected``. The handle
does not track device-side state (MAC paused, modulation mode); it only
reports what the module replies.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Union

from .errors import BadResponse, CannotPause, WrongDevice
from .models import DigitalPin, ModulationMode, NvmAddress
from .protocol import commands
from .protocol.commands import CommandSerializer
from .protocol.framing import LineTransport, POLL_INTERVAL, READ_CHUNK_SIZE, SETTLE_DELAY
from .protocol.parser import OK, ResponseParser, decode_text
from .transport.base import ByteStream
from .transport.serial import SerialStream

logger = logging.getLogger(__name__)


class Rn2903:
    """A handle to a serial link connected to an RN2903 module.

    Single-threaded: one transaction (command, then its one reply line) at a
    time. Use external locking if the handle is shared between threads.

    Example:
        >>> with Rn2903.open_at("/dev/ttyUSB0") as txvr:
        ...     print(txvr.system_version())
        ...     txvr.mac_pause()
        ...     packet = txvr.radio_rx(0)
        RN2903 1.0.3 Aug  8 2017 15:11:09
    """

    def __init__(self,
                 stream: ByteStream,
                 settle_delay: float = SETTLE_DELAY,
                 poll_interval: float = POLL_INTERVAL,
                 chunk_size: int = READ_CHUNK_SIZE):
        """Wrap a stream without verifying the device. Prefer ``open``.

        Args:
            stream: Byte stream to the module; ownership passes to the handle
            settle_delay: Seconds to wait after each command
            poll_interval: Seconds between reads of a partial reply
            chunk_size: Maximum bytes per read
        """
        self._stream = stream
        self._transport = LineTransport(
            stream,
            settle_delay=settle_delay,
            poll_interval=poll_interval,
            chunk_size=chunk_size,
        )

    # --- Construction ---

    @classmethod
    def open_unchecked(cls, stream: ByteStream, **timing: Any) -> Rn2903:
        """Wrap ``stream`` with no identity check.

        Behaviour against a device that is not an RN2903 is up to that device.
        """
        return cls(stream, **timing)

    @classmethod
    def open(cls, stream: ByteStream, **timing: Any) -> Rn2903:
        """Wrap ``stream`` and verify that an RN2903 is on the other end.

        On any failure the stream is closed and no handle is returned.

        Raises:
            WrongDevice: If ``sys get ver`` does not start with ``RN2903``
            Disconnected: If the link failed during verification
        """
        device = cls(stream, **timing)
        verified = False
        try:
            version = device.transact(commands.SYS_GET_VER)
            if not ResponseParser.is_identity(version):
                raise WrongDevice(decode_text(version))
            verified = True
        finally:
            if not verified:
                try:
                    device.close()
                except OSError as e:
                    logger.warning(f"Error closing stream after failed open: {e}")

        logger.info(f"Connected to {decode_text(version)}")
        return device

    @classmethod
    def open_at(cls, port: str, **timing: Any) -> Rn2903:
        """Open a serial port with the canonical settings and verify the device.

        Args:
            port: Serial port path (e.g. '/dev/ttyUSB0', 'COM3')

        Raises:
            ConnectionFailed: If the port could not be opened
            WrongDevice: If the device is not an RN2903
        """
        return cls.open(SerialStream.open(port), **timing)

    # --- Lifecycle ---

    @property
    def stream(self) -> ByteStream:
        """The raw byte stream, for maintenance that bypasses the protocol.

        Anything done through it (line-signal toggling, reconfiguration) must
        leave the module ready for the next command.
        """
        return self._stream

    def close(self) -> None:
        """Close the underlying stream."""
        self._stream.close()

    def __enter__(self) -> Rn2903:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # --- Transaction engine ---

    def read_line(self) -> bytes:
        """Read one reply line without sending anything first.

        Useful to wait for an asynchronous result after a raw ``transact``.
        """
        return self._transport.read_line()

    def transact(self, command: bytes) -> bytes:
        """Send one command and return its single reply line."""
        self._transport.send_line(command)
        return self._transport.read_line()

    def transact_expecting(self, command: bytes, expected: bytes) -> None:
        """Send one command and require the reply to equal ``expected`` exactly.

        Raises:
            BadResponse: If the reply differs
        """
        response = self.transact(command)
        if response != expected:
            raise BadResponse(decode_text(expected), decode_text(response))

    # --- System ---

    def system_version(self) -> str:
        """Query the module for its firmware version information.

        Returns a string like ``RN2903 1.0.3 Aug  8 2017 15:11:09``.
        """
        return decode_text(self.transact(commands.SYS_GET_VER))

    def system_module_reset(self) -> str:
        """Reboot the module and return the version it announces on restart."""
        return decode_text(self.transact(commands.SYS_RESET))

    def system_factory_reset(self) -> str:
        """Restore factory settings and reboot.

        Discards all user LoRaWAN configuration; this cannot be undone.
        Returns the version the module announces on restart.
        """
        return decode_text(self.transact(commands.SYS_FACTORY_RESET))

    def system_set_nvm(self, address: NvmAddress, value: int) -> None:
        """Write one byte of user NVM."""
        self.transact_expecting(CommandSerializer.system_set_nvm(address, value), OK)

    def system_get_nvm(self, address: NvmAddress) -> int:
        """Read one byte of user NVM."""
        response = self.transact(CommandSerializer.system_get_nvm(address))
        return ResponseParser.parse_hex_byte(response)

    def system_set_pin_digital(self, pin: Union[DigitalPin, str], high: bool) -> None:
        """Drive a digital output pin high or low (e.g. the LoStik LED on GPIO10)."""
        self.transact_expecting(CommandSerializer.system_set_pin_digital(pin, high), OK)

    # --- Radio ---

    def radio_set_modulation_mode(self, mode: ModulationMode) -> None:
        """Select FSK or LoRa modulation."""
        self.transact_expecting(CommandSerializer.radio_set_modulation_mode(mode), OK)

    def radio_rx(self, timeout: int) -> Optional[bytes]:
        """Open a receive window and wait for it to close.

        The MAC must be paused first. ``timeout`` is in symbols in LoRa mode
        and milliseconds in FSK mode; the caller tracks which mode is active.
        0 keeps the window open until a packet arrives.

        Returns:
            The received packet, or None if the window closed without one

        Raises:
            TransceiverBusy: If the radio is already in use
            BadResponse: If either reply line is malformed
        """
        ack = self.transact(CommandSerializer.radio_rx(timeout))
        ResponseParser.check_rx_ack(ack)
        return ResponseParser.parse_rx_result(self.read_line())

    # --- MAC ---

    def mac_pause(self) -> int:
        """Pause the LoRaWAN stack so the radio can be used directly.

        Returns:
            Milliseconds the MAC will stay paused

        Raises:
            CannotPause: If the MAC refused to pause
        """
        duration = ResponseParser.parse_unsigned(self.transact(commands.MAC_PAUSE))
        if duration == 0:
            raise CannotPause()
        return duration

    def mac_resume(self) -> None:
        """Resume the LoRaWAN stack after ``mac_pause``."""
        self.transact_expecting(commands.MAC_RESUME, OK)

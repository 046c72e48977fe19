"""Line framing for the RN2903 text protocol.

Every command is sent as ASCII followed by CR LF, and every reply is one line
terminated by CR LF. The module's firmware is slow: it needs a settle delay
after each command, and replies arrive fragmented across several reads.

This module handles:
- Appending the terminator and writing the whole command
- Reassembling reply fragments into one line
- Trimming the terminator and any NUL padding from the reply
"""
from __future__ import annotations

import logging
import time

from ..errors import Disconnected
from ..transport.base import ByteStream

logger = logging.getLogger(__name__)

TERMINATOR = b"\r\n"
TRIM_BYTES = b"\x00\r\n"

SETTLE_DELAY = 0.012  # seconds after each command
POLL_INTERVAL = 0.012  # seconds between reads of an unterminated reply
READ_CHUNK_SIZE = 35  # bytes


def has_terminator(buffer: bytes) -> bool:
    """Check whether the most recent LF in ``buffer`` is preceded by CR."""
    idx = buffer.rfind(b"\n")
    return idx > 0 and buffer[idx - 1] == TERMINATOR[0]


def trim_trailing(data: bytes) -> bytes:
    """Strip every trailing NUL, CR and LF byte.

    Chunked reads can leave zero padding or a doubled terminator at the end
    of a reply, so this removes all of them, not just the final CR LF.

    Examples:
        >>> trim_trailing(b"ok\\r\\n")
        b'ok'
        >>> trim_trailing(b"ok\\r\\n\\x00\\x00")
        b'ok'
        >>> trim_trailing(b"\\x00\\r\\n")
        b''
    """
    return bytes(data).rstrip(TRIM_BYTES)


class LineTransport:
    """Converts between protocol lines and a raw ByteStream.

    Strictly half-duplex: callers must not interleave ``send_line`` and
    ``read_line`` calls belonging to different transactions.
    """

    def __init__(self,
                 stream: ByteStream,
                 settle_delay: float = SETTLE_DELAY,
                 poll_interval: float = POLL_INTERVAL,
                 chunk_size: int = READ_CHUNK_SIZE):
        """Initialize line transport.

        Args:
            stream: Byte stream to frame lines over
            settle_delay: Seconds to wait after each command is flushed
            poll_interval: Seconds to wait between reads of a partial reply
            chunk_size: Maximum bytes to read per chunk
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = stream
        self._settle_delay = settle_delay
        self._poll_interval = poll_interval
        self._chunk_size = chunk_size

    @property
    def stream(self) -> ByteStream:
        return self._stream

    def send_line(self, command: bytes) -> None:
        """Write ``command`` plus CR LF, flush, then wait for the module to settle.

        Raises:
            Disconnected: If the stream failed or stopped accepting bytes
        """
        logger.debug(f"TX {command!r}")
        data = bytes(command) + TERMINATOR
        try:
            while data:
                written = self._stream.write(data)
                if not written:
                    raise Disconnected(f"Stream accepted no bytes of {command!r}")
                data = data[written:]
            self._stream.flush()
        except OSError as e:
            raise Disconnected(f"Write failed: {e}") from e

        time.sleep(self._settle_delay)

    def read_line(self) -> bytes:
        """Block until a full reply line has arrived and return it trimmed.

        There is no overall timeout: the loop only ends when the terminator
        shows up or the stream raises (e.g. its own read timeout).

        Raises:
            Disconnected: If the stream failed while reading
        """
        buffer = bytearray()
        while True:
            try:
                chunk = self._stream.read(self._chunk_size)
            except OSError as e:
                raise Disconnected(f"Read failed: {e}") from e

            buffer.extend(chunk)
            if has_terminator(buffer):
                break
            time.sleep(self._poll_interval)

        line = trim_trailing(buffer)
        logger.debug(f"RX {line!r}")
        return line

"""Abstract base class for the byte stream under the line protocol.

The ByteStream interface is the only thing the protocol engine needs from the
link to the module: blocking writes, a flush, and chunked reads. Implementations
can be a real serial port, a TCP bridge, or a scripted fake in tests.

Key principles:
- Raw bytes only (no framing, no decoding)
- Failures surface as ``OSError`` (pyserial's ``SerialException`` is one)
- Exclusively owned by one device handle
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class ByteStream(ABC):
    """Abstract duplex byte stream.

    Streams are responsible for:
    1. Moving raw bytes to and from the device
    2. Enforcing their own per-read timeout, if any
    3. Releasing the underlying resource on close

    Streams should NOT know about line terminators or the command set.
    """

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write bytes to the device.

        May accept fewer bytes than given; the caller resumes with the rest.

        Args:
            data: Bytes to write

        Returns:
            Number of bytes accepted

        Raises:
            OSError: If the link failed
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Block until all written bytes have been transmitted.

        Raises:
            OSError: If the link failed
        """
        pass

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes.

        Blocks until at least one byte is available or the stream's own read
        timeout expires.

        Args:
            size: Maximum number of bytes to return

        Returns:
            Between 1 and ``size`` bytes. Fakes may return ``b""`` to
            simulate a read that delivered nothing yet.

        Raises:
            OSError: If the link failed or the read timed out
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resource.

        Should be safe to call multiple times.
        """
        pass

    def __enter__(self) -> ByteStream:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

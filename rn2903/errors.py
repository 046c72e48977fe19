"""Exception hierarchy for the RN2903 driver.

Every operation that talks to the module can discover that the serial link
is gone, so everything that does I/O may raise ``Disconnected``. Reply
decoding failures are reported as ``BadResponse`` and leave the handle usable.
"""
from __future__ import annotations


class Rn2903Error(Exception):
    """Base class for all driver errors."""
    pass


class ConnectionFailed(Rn2903Error):
    """The serial port could not be opened (bad path, permissions, busy)."""
    pass


class WrongDevice(Rn2903Error):
    """The connected device did not identify itself as an RN2903."""

    def __init__(self, version: str):
        super().__init__(
            f"Could not verify version string. Expected a RN2903 firmware "
            f"revision, got {version!r}"
        )
        self.version = version


class BadResponse(Rn2903Error):
    """A reply did not have the shape the protocol defines for the command.

    Attributes:
        expected: Description of the acceptable reply (e.g. ``"ok"``)
        actual: The reply text actually received
    """

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Bad response from module. Expected {expected!r}, got {actual!r}")
        self.expected = expected
        self.actual = actual


class CannotPause(Rn2903Error):
    """The LoRaWAN MAC refused to pause (``mac pause`` returned 0)."""

    def __init__(self):
        super().__init__("LoRaWAN MAC cannot be paused")


class TransceiverBusy(Rn2903Error):
    """The radio is already committed to another operation."""

    def __init__(self):
        super().__init__("Transceiver is busy")


class Disconnected(Rn2903Error):
    """An I/O error occurred on the serial link after it was opened.

    The handle should be considered dead; there is no reconnection.
    """
    pass

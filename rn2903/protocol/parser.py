"""Reply parser for the RN2903 text protocol.

Decodes trimmed reply lines into typed values. Pure functions with no side
effects; malformed replies raise ``BadResponse`` carrying the expected shape
and the actual text.
"""
from __future__ import annotations

import re
from typing import Optional

from ..errors import BadResponse, TransceiverBusy

DEVICE_IDENTITY = b"RN2903"

OK = b"ok"
BUSY = b"busy"
RADIO_ERR = b"radio_err"
RADIO_RX = b"radio_rx"

INTEGER_SHAPE = "<integer>"
RX_ACK_SHAPE = "ok | busy"
RX_RESULT_SHAPE = "radio_rx <hex data> | radio_err"

_HEX_BYTE = re.compile(rb"[0-9A-Fa-f]{1,2}")
_DECIMAL = re.compile(rb"[0-9]+")
_HEX_PAYLOAD = re.compile(rb"(?:[0-9A-Fa-f]{2})+")


def decode_text(line: bytes) -> str:
    """Decode a reply line for display, replacing undecodable bytes."""
    return bytes(line).decode("utf-8", errors="replace")


class ResponseParser:
    """Parser for RN2903 reply lines.

    Handles the reply shapes of the command set:
    - ``RN2903 1.0.3 Aug  8 2017 15:11:09`` - version banner
    - ``ab`` - one NVM byte in hex
    - ``1000`` - MAC pause duration in milliseconds
    - ``ok`` / ``busy`` - radio receive acknowledgement
    - ``radio_rx  <hex>`` / ``radio_err`` - radio receive result
    """

    @staticmethod
    def is_identity(line: bytes) -> bool:
        """Check that a version reply comes from an RN2903."""
        return bytes(line[:len(DEVICE_IDENTITY)]) == DEVICE_IDENTITY

    @staticmethod
    def parse_hex_byte(line: bytes) -> int:
        """Parse a 1-2 digit hexadecimal byte.

        Examples:
            >>> ResponseParser.parse_hex_byte(b"ab")
            171
        """
        if not _HEX_BYTE.fullmatch(line):
            raise BadResponse(INTEGER_SHAPE, decode_text(line))
        return int(line, 16)

    @staticmethod
    def parse_unsigned(line: bytes) -> int:
        """Parse an unsigned decimal integer."""
        if not _DECIMAL.fullmatch(line):
            raise BadResponse(INTEGER_SHAPE, decode_text(line))
        return int(line)

    @staticmethod
    def check_rx_ack(line: bytes) -> None:
        """Check the immediate acknowledgement of ``radio rx``.

        Raises:
            TransceiverBusy: If the module answered ``busy``
            BadResponse: For anything other than ``ok`` or ``busy``
        """
        if line == OK:
            return
        if line == BUSY:
            raise TransceiverBusy()
        raise BadResponse(RX_ACK_SHAPE, decode_text(line))

    @staticmethod
    def parse_rx_result(line: bytes) -> Optional[bytes]:
        """Parse the delayed result line of ``radio rx``.

        Returns:
            Received payload bytes, or None if the receive window closed
            without a packet. Any line starting with ``radio_err`` counts as no
            packet; a ``radio_rx`` line must carry at least one payload byte.

        Examples:
            >>> ResponseParser.parse_rx_result(b"radio_rx  41424344")
            b'ABCD'
            >>> ResponseParser.parse_rx_result(b"radio_err") is None
            True
        """
        if line.startswith(RADIO_ERR):
            return None

        if line.startswith(RADIO_RX):
            rest = line[len(RADIO_RX):]
            payload = rest.lstrip(b" ")
            # Separator and at least one byte required
            if payload == rest or not _HEX_PAYLOAD.fullmatch(payload):
                raise BadResponse(RX_RESULT_SHAPE, decode_text(line))
            return bytes.fromhex(payload.decode("ascii"))

        raise BadResponse(RX_RESULT_SHAPE, decode_text(line))

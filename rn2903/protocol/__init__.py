"""Protocol layer for the RN2903 line-oriented command set."""

from .framing import LineTransport, has_terminator, trim_trailing
from .commands import CommandSerializer
from .parser import ResponseParser, decode_text

__all__ = [
    "LineTransport",
    "has_terminator",
    "trim_trailing",
    "CommandSerializer",
    "ResponseParser",
    "decode_text",
]

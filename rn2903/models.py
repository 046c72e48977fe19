"""Immutable value types used by the RN2903 command set.

These models are validated on construction so the command layer can embed
them in command strings without re-checking ranges.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# User-accessible NVM window, inclusive
NVM_MIN_ADDRESS = 0x300
NVM_MAX_ADDRESS = 0x3FF


@dataclass(frozen=True)
class NvmAddress:
    """Address of a byte in the module's user nonvolatile memory.

    Attributes:
        value: Address in the inclusive range 0x300..0x3FF

    Raises:
        ValueError: If the address lies outside the user NVM window.

    Example:
        >>> NvmAddress(0x300)
        NvmAddress(value=768)
        >>> NvmAddress(0x400)
        Traceback (most recent call last):
        ...
        ValueError: NVM address 0x400 outside of 0x300..0x3ff
    """
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"NVM address must be an int, not {type(self.value).__name__}")
        if not NVM_MIN_ADDRESS <= self.value <= NVM_MAX_ADDRESS:
            raise ValueError(
                f"NVM address {self.value:#x} outside of "
                f"{NVM_MIN_ADDRESS:#x}..{NVM_MAX_ADDRESS:#x}"
            )

    def __int__(self) -> int:
        return self.value


class ModulationMode(Enum):
    """Radio symbol encoding, as named by ``radio set mod``."""
    FSK = "fsk"
    LORA = "lora"


class DigitalPin(Enum):
    """Digital pins accepted by ``sys set pindig``."""
    GPIO0 = "GPIO0"
    GPIO1 = "GPIO1"
    GPIO2 = "GPIO2"
    GPIO3 = "GPIO3"
    GPIO4 = "GPIO4"
    GPIO5 = "GPIO5"
    GPIO6 = "GPIO6"
    GPIO7 = "GPIO7"
    GPIO8 = "GPIO8"
    GPIO9 = "GPIO9"
    GPIO10 = "GPIO10"
    GPIO11 = "GPIO11"
    GPIO12 = "GPIO12"
    GPIO13 = "GPIO13"
    UART_CTS = "UART_CTS"
    UART_RTS = "UART_RTS"
    TEST0 = "TEST0"
    TEST1 = "TEST1"

"""Command builders for the RN2903 command set.

Builds the ASCII command lines (without terminator) the firmware understands.
Pure functions with no side effects; every call returns fresh bytes.
"""
from __future__ import annotations

from typing import Union

from ..models import DigitalPin, ModulationMode, NvmAddress

SYS_GET_VER = b"sys get ver"
SYS_RESET = b"sys reset"
SYS_FACTORY_RESET = b"sys factoryRESET"
MAC_PAUSE = b"mac pause"
MAC_RESUME = b"mac resume"

RX_TIMEOUT_MAX = 0xFFFF


class CommandSerializer:
    """Serializer for parameterized RN2903 commands.

    Parameters are substituted as lowercase hexadecimal (NVM) or decimal
    (timeouts, pin levels).
    """

    @staticmethod
    def system_get_nvm(address: NvmAddress) -> bytes:
        """Serialize an NVM read.

        Protocol: sys get nvm <address hex>

        Examples:
            >>> CommandSerializer.system_get_nvm(NvmAddress(0x3ab))
            b'sys get nvm 3ab'
        """
        return f"sys get nvm {address.value:x}".encode("ascii")

    @staticmethod
    def system_set_nvm(address: NvmAddress, value: int) -> bytes:
        """Serialize an NVM write.

        Protocol: sys set nvm <address hex> <value hex>

        Raises:
            ValueError: If ``value`` does not fit in one byte
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"NVM value must be a byte, got {value}")
        return f"sys set nvm {address.value:x} {value:x}".encode("ascii")

    @staticmethod
    def system_set_pin_digital(pin: Union[DigitalPin, str], high: bool) -> bytes:
        """Serialize a digital output write.

        Protocol: sys set pindig <pin> <0|1>
        """
        pin = DigitalPin(pin)
        return f"sys set pindig {pin.value} {1 if high else 0}".encode("ascii")

    @staticmethod
    def radio_set_modulation_mode(mode: ModulationMode) -> bytes:
        """Serialize a modulation change.

        Protocol: radio set mod <fsk|lora>
        """
        mode = ModulationMode(mode)
        return f"radio set mod {mode.value}".encode("ascii")

    @staticmethod
    def radio_rx(timeout: int) -> bytes:
        """Serialize a receive request.

        Protocol: radio rx <timeout decimal>

        ``timeout`` is in symbols (LoRa) or milliseconds (FSK); 0 listens
        until a packet arrives.
        """
        if not 0 <= timeout <= RX_TIMEOUT_MAX:
            raise ValueError(f"rx timeout must be within 0..{RX_TIMEOUT_MAX}, got {timeout}")
        return f"radio rx {timeout:d}".encode("ascii")

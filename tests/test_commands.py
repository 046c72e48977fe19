"""Unit tests for command serialization."""

import unittest

from rn2903.models import DigitalPin, ModulationMode, NvmAddress
from rn2903.protocol import commands
from rn2903.protocol.commands import CommandSerializer


class TestFixedCommands(unittest.TestCase):

    def test_literals(self):
        self.assertEqual(commands.SYS_GET_VER, b"sys get ver")
        self.assertEqual(commands.SYS_RESET, b"sys reset")
        self.assertEqual(commands.SYS_FACTORY_RESET, b"sys factoryRESET")
        self.assertEqual(commands.MAC_PAUSE, b"mac pause")
        self.assertEqual(commands.MAC_RESUME, b"mac resume")


class TestNvmCommands(unittest.TestCase):

    def test_get_uses_lowercase_hex(self):
        self.assertEqual(
            CommandSerializer.system_get_nvm(NvmAddress(0x3AB)),
            b"sys get nvm 3ab",
        )

    def test_set_uses_lowercase_hex(self):
        self.assertEqual(
            CommandSerializer.system_set_nvm(NvmAddress(0x300), 0xAB),
            b"sys set nvm 300 ab",
        )
        self.assertEqual(
            CommandSerializer.system_set_nvm(NvmAddress(0x3FF), 0x05),
            b"sys set nvm 3ff 5",
        )

    def test_set_rejects_values_outside_a_byte(self):
        for value in (-1, 0x100):
            with self.assertRaises(ValueError):
                CommandSerializer.system_set_nvm(NvmAddress(0x300), value)


class TestPinCommands(unittest.TestCase):

    def test_enum_pin(self):
        self.assertEqual(
            CommandSerializer.system_set_pin_digital(DigitalPin.GPIO10, True),
            b"sys set pindig GPIO10 1",
        )
        self.assertEqual(
            CommandSerializer.system_set_pin_digital(DigitalPin.UART_RTS, False),
            b"sys set pindig UART_RTS 0",
        )

    def test_pin_by_name(self):
        self.assertEqual(
            CommandSerializer.system_set_pin_digital("GPIO11", 1),
            b"sys set pindig GPIO11 1",
        )

    def test_unknown_pin(self):
        with self.assertRaises(ValueError):
            CommandSerializer.system_set_pin_digital("GPIO99", True)


class TestRadioCommands(unittest.TestCase):

    def test_modulation_mode(self):
        self.assertEqual(
            CommandSerializer.radio_set_modulation_mode(ModulationMode.FSK),
            b"radio set mod fsk",
        )
        self.assertEqual(
            CommandSerializer.radio_set_modulation_mode(ModulationMode.LORA),
            b"radio set mod lora",
        )

    def test_rx_uses_decimal(self):
        self.assertEqual(CommandSerializer.radio_rx(0), b"radio rx 0")
        self.assertEqual(CommandSerializer.radio_rx(65535), b"radio rx 65535")

    def test_rx_rejects_out_of_range_timeouts(self):
        for timeout in (-1, 65536):
            with self.assertRaises(ValueError):
                CommandSerializer.radio_rx(timeout)

    def test_builds_fresh_bytes(self):
        first = CommandSerializer.radio_rx(10)
        second = CommandSerializer.radio_rx(10)
        self.assertIsInstance(first, bytes)
        self.assertEqual(first, second)


if __name__ == '__main__':
    unittest.main()

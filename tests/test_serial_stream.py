"""Unit tests for the pyserial-backed byte stream."""

import unittest
from unittest.mock import MagicMock, patch

import serial

from rn2903.errors import ConnectionFailed
from rn2903.transport.serial import SerialStream, serial_config


class TestSerialConfig(unittest.TestCase):

    def test_canonical_settings(self):
        config = serial_config()

        self.assertEqual(config["baudrate"], 57600)
        self.assertEqual(config["bytesize"], serial.EIGHTBITS)
        self.assertEqual(config["parity"], serial.PARITY_NONE)
        self.assertEqual(config["stopbits"], serial.STOPBITS_ONE)
        self.assertFalse(config["xonxoff"])
        self.assertFalse(config["rtscts"])
        self.assertFalse(config["dsrdtr"])
        self.assertIsNone(config["timeout"])

    def test_returns_fresh_dict(self):
        serial_config()["baudrate"] = 9600
        self.assertEqual(serial_config()["baudrate"], 57600)


class TestSerialStreamOpen(unittest.TestCase):

    @patch('rn2903.transport.serial.serial.Serial')
    def test_open_applies_canonical_settings(self, mock_serial_class):
        stream = SerialStream.open("/dev/ttyUSB0")

        mock_serial_class.assert_called_once_with(port="/dev/ttyUSB0", **serial_config())
        self.assertIs(stream.serial, mock_serial_class.return_value)

    @patch('rn2903.transport.serial.serial.Serial')
    def test_open_overrides(self, mock_serial_class):
        SerialStream.open("/dev/ttyUSB0", timeout=2.0)

        kwargs = mock_serial_class.call_args.kwargs
        self.assertEqual(kwargs["timeout"], 2.0)
        self.assertEqual(kwargs["baudrate"], 57600)

    @patch('rn2903.transport.serial.serial.Serial')
    def test_open_serial_exception(self, mock_serial_class):
        mock_serial_class.side_effect = serial.SerialException("Port not found")

        with self.assertRaises(ConnectionFailed) as ctx:
            SerialStream.open("/dev/ttyUSB99")
        self.assertIsInstance(ctx.exception.__cause__, serial.SerialException)

    @patch('rn2903.transport.serial.serial.Serial')
    def test_open_bad_settings(self, mock_serial_class):
        mock_serial_class.side_effect = ValueError("Not a valid baudrate")

        with self.assertRaises(ConnectionFailed):
            SerialStream.open("/dev/ttyUSB0", baudrate=-1)


class TestSerialStreamIO(unittest.TestCase):

    def setUp(self):
        self.port = MagicMock()
        self.port.timeout = None
        self.stream = SerialStream(self.port)

    def test_write_and_flush(self):
        self.port.write.return_value = 13

        self.assertEqual(self.stream.write(b"sys get ver\r\n"), 13)
        self.stream.flush()

        self.port.write.assert_called_once_with(b"sys get ver\r\n")
        self.port.flush.assert_called_once()

    def test_write_without_count(self):
        self.port.write.return_value = None
        self.assertEqual(self.stream.write(b"ok"), 2)

    def test_read_takes_buffered_bytes(self):
        self.port.read.side_effect = [b"o", b"k\r\n"]
        self.port.in_waiting = 3

        self.assertEqual(self.stream.read(35), b"ok\r\n")
        self.port.read.assert_any_call(1)
        self.port.read.assert_any_call(3)

    def test_read_caps_at_size(self):
        self.port.read.side_effect = [b"r", b"adi"]
        self.port.in_waiting = 100

        self.assertEqual(self.stream.read(4), b"radi")
        self.port.read.assert_called_with(3)

    def test_read_single_byte_when_nothing_buffered(self):
        self.port.read.return_value = b"o"
        self.port.in_waiting = 0

        self.assertEqual(self.stream.read(35), b"o")
        self.port.read.assert_called_once_with(1)

    def test_read_timeout(self):
        self.port.read.return_value = b""
        self.port.timeout = 1.0

        with self.assertRaises(TimeoutError):
            self.stream.read(35)

    def test_read_error_propagates_as_oserror(self):
        self.port.read.side_effect = serial.SerialException("device reports readiness to read but returned no data")

        with self.assertRaises(OSError):
            self.stream.read(35)

    def test_close_is_idempotent(self):
        self.stream.close()
        self.stream.close()

        self.port.close.assert_called_once()
        self.assertFalse(self.stream.is_open)

    def test_io_after_close(self):
        self.stream.close()

        with self.assertRaises(serial.SerialException):
            self.stream.write(b"ok")

    def test_context_manager(self):
        with self.stream as s:
            self.assertIs(s, self.stream)
        self.port.close.assert_called_once()


if __name__ == '__main__':
    unittest.main()

"""Tests for I2C register access."""
import unittest
from unittest.mock import patch, MagicMock

from rpi_ina219.I2CRegister import I2CRegister
from rpi_ina219.RegisterAddress import RegisterAddress
from rpi_ina219.custom_types import Address


class TestI2CRegister(unittest.TestCase):
    """Test I2CRegister with mocked SMBus."""

    def setUp(self):
        """Set up test fixtures with mocked SMBus."""
        self.mock_smbus_patcher = patch('rpi_ina219.I2CRegister.SMBus')
        self.mock_smbus_class = self.mock_smbus_patcher.start()
        self.mock_bus = MagicMock()
        self.mock_smbus_class.return_value = self.mock_bus

    def tearDown(self):
        """Clean up patches."""
        self.mock_smbus_patcher.stop()

    def test_initialization_default_bus(self):
        """Test bus 1 is opened by default."""
        register = I2CRegister(Address.ADDR_40)

        assert register.address == Address.ADDR_40
        self.mock_smbus_class.assert_called_once_with(1)

    def test_initialization_custom_values(self):
        """Test custom address and bus."""
        register = I2CRegister(Address.ADDR_45, bus=0)

        assert register.address == 0x45
        self.mock_smbus_class.assert_called_once_with(0)

    def test_initialization_rejects_unknown_address(self):
        """Test addresses outside the enumeration are rejected."""
        with self.assertRaises(ValueError):
            I2CRegister(0x42)

    def test_open_failure_propagates(self):
        """Test OSError from opening the bus is re-raised unchanged."""
        error = FileNotFoundError(2, "No such file or directory")
        self.mock_smbus_class.side_effect = error

        with self.assertLogs(level='ERROR'):
            with self.assertRaises(FileNotFoundError) as ctx:
                I2CRegister(Address.ADDR_40, bus=7)

        assert ctx.exception is error

    def test_byte_swapping(self):
        """Test byte swapping between SMBus words and big-endian registers."""
        register = I2CRegister(Address.ADDR_40)

        assert register._swap_bytes(0x1234) == 0x3412
        assert register._swap_bytes(0xABCD) == 0xCDAB
        assert register._swap_bytes(0x0000) == 0x0000
        assert register._swap_bytes(0xFF00) == 0x00FF

    def test_write_register_sends_msb_first(self):
        """Test 16-bit writes are byte swapped for the SMBus word call."""
        register = I2CRegister(Address.ADDR_41)

        register.write_register(RegisterAddress.CALIBRATION, 0x1000)

        self.mock_bus.write_word_data.assert_called_once_with(
            Address.ADDR_41, RegisterAddress.CALIBRATION, 0x0010
        )

    def test_write_register_truncates_to_16_bits(self):
        """Test values wider than 16 bits are truncated."""
        register = I2CRegister(Address.ADDR_40)

        register.write_register(RegisterAddress.CONFIGURATION, 0x1399F)

        self.mock_bus.write_word_data.assert_called_once_with(
            Address.ADDR_40, RegisterAddress.CONFIGURATION, 0x9F39
        )

    def test_read_register_unsigned(self):
        """Test reads compose high << 8 | low."""
        register = I2CRegister(Address.ADDR_40)
        self.mock_bus.read_word_data.return_value = 0x1E83  # Swaps to 0x831E

        value = register.read_register(RegisterAddress.POWER)

        assert value == 0x831E
        self.mock_bus.read_word_data.assert_called_once_with(Address.ADDR_40, RegisterAddress.POWER)

    def test_read_signed_register_negative(self):
        """Test signed reads interpret the value as two's complement."""
        register = I2CRegister(Address.ADDR_40)
        self.mock_bus.read_word_data.return_value = 0x0083  # Swaps to 0x8300

        assert register.read_signed_register(RegisterAddress.SHUNT_VOLTAGE) == -32000

    def test_read_signed_register_positive(self):
        """Test signed reads leave positive values untouched."""
        register = I2CRegister(Address.ADDR_40)
        self.mock_bus.read_word_data.return_value = 0xD007  # Swaps to 0x07D0

        assert register.read_signed_register(RegisterAddress.SHUNT_VOLTAGE) == 2000

    def test_every_read_is_a_transaction(self):
        """Test reads are not cached."""
        register = I2CRegister(Address.ADDR_40)
        self.mock_bus.read_word_data.return_value = 0x0000

        register.read_register(RegisterAddress.CONFIGURATION)
        register.read_register(RegisterAddress.CONFIGURATION)

        assert self.mock_bus.read_word_data.call_count == 2

    def test_read_error_propagates(self):
        """Test transport errors are not swallowed."""
        register = I2CRegister(Address.ADDR_40)
        self.mock_bus.read_word_data.side_effect = OSError(121, "Remote I/O error")

        with self.assertRaises(OSError):
            register.read_register(RegisterAddress.BUS_VOLTAGE)

    def test_context_manager_closes_bus(self):
        """Test the bus is closed on exit."""
        with I2CRegister(Address.ADDR_40):
            pass

        self.mock_bus.close.assert_called_once()


if __name__ == '__main__':
    unittest.main()

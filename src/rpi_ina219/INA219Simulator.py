"""
Software model of the INA219 register file.

Register values are derived from an injected shunt and bus voltage using the
same fixed width integer arithmetic as the chip: 32-bit intermediate values,
division truncating toward zero and 16-bit register results. Out of range
shunt voltages wrap around instead of saturating, as on the hardware.
"""
import math

from rpi_ina219.RegisterAddress import RegisterAddress
from rpi_ina219.helper import to_signed

SHUNT_VOLTAGE_LSB = 10e-6
BUS_VOLTAGE_LSB = 4e-3

# Power on defaults
DEFAULT_CONFIGURATION = 0x399F
DEFAULT_CALIBRATION = 0

CONFIGURATION_MASK = 0xBFFF  # bit 14 is reserved
CALIBRATION_MASK = 0xFFFE  # bit 0 is always 0

# Overflow flag is raised before the shunt register saturates
OVERFLOW_THRESHOLD = 32000


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    if value & 0x80000000:
        return value - 0x100000000

    return value


def _div(dividend: int, divisor: int) -> int:
    # Integer division truncating toward zero
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient

    return quotient


class INA219Simulator:
    """Simulates an INA219 without requiring I2C hardware."""

    def __init__(self, shunt_voltage: float, bus_voltage: float) -> None:
        """
        shunt_voltage: Voltage across the shunt resistor in V
        bus_voltage: Bus voltage in V
        """
        self.shunt_voltage = shunt_voltage
        self.bus_voltage = bus_voltage

        self._configuration = DEFAULT_CONFIGURATION
        self._calibration = DEFAULT_CALIBRATION

    def _shunt_code(self) -> int:
        # Round half up
        return _int32(math.floor(self.shunt_voltage / SHUNT_VOLTAGE_LSB + 0.5))

    def _bus_code(self) -> int:
        return _int32(int(self.bus_voltage / BUS_VOLTAGE_LSB) << 3)

    def _current_code(self) -> int:
        return _div(_int32(self._shunt_code() * self._calibration), 4096)

    def _power_code(self) -> int:
        return _div(_int32(self._current_code() * (self._bus_code() >> 3)), 5000)

    def write_register(self, address: RegisterAddress, value: int) -> None:
        if address == RegisterAddress.CONFIGURATION:
            self._configuration = value & CONFIGURATION_MASK
        elif address == RegisterAddress.CALIBRATION:
            self._calibration = value & CALIBRATION_MASK

    def read_signed_register(self, address: RegisterAddress) -> int:
        if address == RegisterAddress.CONFIGURATION:
            value = self._configuration
        elif address == RegisterAddress.SHUNT_VOLTAGE:
            value = self._shunt_code()
        elif address == RegisterAddress.BUS_VOLTAGE:
            value = self._bus_code()
            if abs(self._shunt_code()) > OVERFLOW_THRESHOLD:
                value |= 0x1
        elif address == RegisterAddress.POWER:
            value = self._power_code()
        elif address == RegisterAddress.CURRENT:
            value = self._current_code()
        elif address == RegisterAddress.CALIBRATION:
            value = self._calibration
        else:
            value = 0

        return to_signed(value)

    def read_register(self, address: RegisterAddress) -> int:
        return self.read_signed_register(address) & 0xFFFF

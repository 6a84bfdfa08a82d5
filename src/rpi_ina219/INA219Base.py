import logging

from rpi_ina219.RegisterAddress import RegisterAddress
from rpi_ina219.RegisterPort import RegisterPort
from rpi_ina219.custom_types import Adc, Brng, Pga, pack_configuration

SHUNT_VOLTAGE_LSB = 10e-6
BUS_VOLTAGE_LSB = 4e-3
POWER_LSB_SCALE = 20
BUS_VOLTAGE_OVERFLOW = 0x1


class INA219Base:
    """
    INA219 driver independent of the transport.

    Register access goes through a RegisterPort so the driver can run
    against INA219Simulator without I2C hardware.

    Configuration and calibration are written once on construction. To
    re-calibrate, create a new instance.
    """

    def __init__(
        self,
        register: RegisterPort,
        shunt_resistance: float,
        max_expected_current: float,
        bus_voltage_range: Brng,
        pga: Pga,
        badc: Adc,
        sadc: Adc
    ) -> None:
        """
        shunt_resistance: Shunt resistor in Ω
        max_expected_current: Maximum expected current in A

        Raises:
            ValueError: If shunt resistance or max current are not positive.
            OSError: If configuration or calibration could not be written.
        """
        if shunt_resistance <= 0:
            raise ValueError(f"Shunt resistance must be positive: {shunt_resistance}")
        if max_expected_current <= 0:
            raise ValueError(f"Max expected current must be positive: {max_expected_current}")

        self._register = register
        self._shunt_resistance = shunt_resistance

        # Full 15-bit range for the signed current register
        self._current_lsb = max_expected_current / 32768

        # From datasheet: CAL = trunc(0.04096 / (current_LSB * R_shunt))
        calibration = int((0.04096 * 32768) / (max_expected_current * shunt_resistance))
        self._calibration = calibration & 0xFFFF

        self._configuration = pack_configuration(
            Brng(bus_voltage_range),
            Pga(pga),
            Adc(badc),
            Adc(sadc)
        )

        logging.debug(
            "INA219 configuration: 0x%04X, calibration: %s, current LSB: %s A",
            self._configuration,
            self._calibration,
            self._current_lsb
        )

        self._register.write_register(RegisterAddress.CONFIGURATION, self._configuration)
        self._register.write_register(RegisterAddress.CALIBRATION, self._calibration)

    @property
    def shunt_resistance(self) -> float:
        return self._shunt_resistance

    @property
    def current_lsb(self) -> float:
        """Amps per bit of the current register."""
        return self._current_lsb

    @property
    def power_lsb(self) -> float:
        """Watts per bit of the power register, fixed at 20x current LSB."""
        return POWER_LSB_SCALE * self._current_lsb

    @property
    def calibration(self) -> int:
        return self._calibration

    @property
    def configuration(self) -> int:
        return self._configuration

    def get_shunt_voltage(self) -> float:
        # Returns shunt voltage in V
        raw = self._register.read_signed_register(RegisterAddress.SHUNT_VOLTAGE)

        return raw * SHUNT_VOLTAGE_LSB

    def get_bus_voltage(self) -> float:
        # Returns bus voltage in V, bits 2-0 are CNVR, OVF and reserved
        raw = self._register.read_register(RegisterAddress.BUS_VOLTAGE)
        if raw & BUS_VOLTAGE_OVERFLOW:
            logging.warning("INA219 math overflow, current and power are invalid")

        return (raw >> 3) * BUS_VOLTAGE_LSB

    def get_current(self) -> float:
        # Returns current in A
        raw = self._register.read_signed_register(RegisterAddress.CURRENT)

        return raw * self._current_lsb

    def get_power(self) -> float:
        # Returns power in W
        raw = self._register.read_register(RegisterAddress.POWER)

        return raw * POWER_LSB_SCALE * self._current_lsb

from types import TracebackType
from typing import Optional, Type

from rpi_ina219.I2CRegister import I2CRegister
from rpi_ina219.INA219Base import INA219Base
from rpi_ina219.custom_types import Adc, Address, Brng, Pga


class INA219(INA219Base):
    """
    Texas Instruments INA219 current monitor on the Raspberry Pi I2C bus.
    """

    def __init__(
        self,
        address: Address,
        shunt_resistance: float,
        max_expected_current: float,
        bus_voltage_range: Brng,
        pga: Pga,
        badc: Adc,
        sadc: Adc,
        bus: int = 1
    ) -> None:
        self._i2c = I2CRegister(address, bus)
        try:
            super().__init__(
                self._i2c,
                shunt_resistance,
                max_expected_current,
                bus_voltage_range,
                pga,
                badc,
                sadc
            )
        except Exception:
            self._i2c.close()
            raise

    @property
    def address(self) -> Address:
        return self._i2c.address

    def close(self) -> None:
        self._i2c.close()

    def __enter__(self) -> 'INA219':
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType]
    ) -> None:
        self.close()

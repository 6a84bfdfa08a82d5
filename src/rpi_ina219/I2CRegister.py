import logging
from types import TracebackType
from typing import Optional, Type

from smbus3 import SMBus

from rpi_ina219.RegisterAddress import RegisterAddress
from rpi_ina219.custom_types import Address
from rpi_ina219.helper import to_signed


class I2CRegister:
    """
    Register access to an INA219 on the Raspberry Pi I2C bus.

    Address can be verified with:
    > sudo i2cdetect -y 1
    """

    def __init__(self, address: Address, bus: int = 1) -> None:
        self.address = Address(address)

        try:
            self.bus = SMBus(bus)
        except OSError as e:
            logging.error("Failed to open I2C bus %s: %s", bus, e)
            raise

    def _swap_bytes(self, value: int) -> int:
        # SMBus words are little-endian, INA219 registers are big-endian
        return ((value & 0xFF) << 8) | ((value >> 8) & 0xFF)

    def write_register(self, address: RegisterAddress, value: int) -> None:
        value &= 0xFFFF
        logging.debug("Write 0x%04X to %s", value, address.name)

        self.bus.write_word_data(self.address, address, self._swap_bytes(value))

    def read_register(self, address: RegisterAddress) -> int:
        raw = self.bus.read_word_data(self.address, address)
        value = self._swap_bytes(raw)
        logging.debug("Read 0x%04X from %s", value, address.name)

        return value

    def read_signed_register(self, address: RegisterAddress) -> int:
        return to_signed(self.read_register(address))

    def close(self) -> None:
        self.bus.close()

    def __enter__(self) -> 'I2CRegister':
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType]
    ) -> None:
        self.close()

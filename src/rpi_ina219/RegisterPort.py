"""Protocol for INA219 register access."""
from typing import Protocol, runtime_checkable

from rpi_ina219.RegisterAddress import RegisterAddress


@runtime_checkable
class RegisterPort(Protocol):
    """Protocol for reading and writing the 16-bit INA219 registers.

    Implemented by I2CRegister for real hardware and by INA219Simulator for
    tests. Every call is a fresh transaction, nothing is cached.

    Implementations are not thread safe, callers have to serialize access.
    """

    def write_register(self, address: RegisterAddress, value: int) -> None:
        """Write a 16-bit value, MSB first.

        Raises:
            OSError: If the register could not be written.
        """
        ...

    def read_register(self, address: RegisterAddress) -> int:
        """Read a register as an unsigned 16-bit value.

        Raises:
            OSError: If the register could not be read.
        """
        ...

    def read_signed_register(self, address: RegisterAddress) -> int:
        """Read a register as a two's complement 16-bit value.

        Raises:
            OSError: If the register could not be read.
        """
        ...

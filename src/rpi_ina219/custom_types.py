from enum import IntEnum
from typing import Optional

# Mode bits 2-0: shunt and bus, continuous
CONTINUOUS_MODE = 0x7


class Address(IntEnum):
    """
    Valid I2C addresses of the INA219.

    Addresses that need A1 or A0 tied to SDA or SCL are not supported.
    """
    ADDR_40 = 0x40
    ADDR_41 = 0x41
    ADDR_44 = 0x44
    ADDR_45 = 0x45

    @classmethod
    def get_address(cls, value: int) -> Optional['Address']:
        try:
            return cls(value)
        except ValueError:
            return None


class Brng(IntEnum):
    """Bus voltage range."""
    V16 = 0
    V32 = 1


class Pga(IntEnum):
    """Shunt PGA gain, full scale is 40mV * gain."""
    GAIN_1 = 0
    GAIN_2 = 1
    GAIN_4 = 2
    GAIN_8 = 3


class Adc(IntEnum):
    """Bus and shunt ADC resolution or sample averaging."""
    BITS_9 = 0
    BITS_10 = 1
    BITS_11 = 2
    BITS_12 = 3
    SAMPLES_2 = 9
    SAMPLES_4 = 10
    SAMPLES_8 = 11
    SAMPLES_16 = 12
    SAMPLES_32 = 13
    SAMPLES_64 = 14
    SAMPLES_128 = 15


def pack_configuration(brng: Brng, pga: Pga, badc: Adc, sadc: Adc) -> int:
    """
    Build the configuration register word:

    bit 13     BRNG
    bits 12-11 PG
    bits 10-7  BADC
    bits 6-3   SADC
    bits 2-0   MODE
    """
    return (
        (brng << 13)
        | (pga << 11)
        | (badc << 7)
        | (sadc << 3)
        | CONTINUOUS_MODE
    )

from .RegisterAddress import RegisterAddress
from .RegisterPort import RegisterPort
from .custom_types import (
    Address,
    Brng,
    Pga,
    Adc,
    pack_configuration
)
from .INA219Base import INA219Base
from .INA219Simulator import INA219Simulator
from .I2CRegister import I2CRegister
from .INA219 import INA219

__all__ = [
  'RegisterAddress',
  'RegisterPort',
  'Address',
  'Brng',
  'Pga',
  'Adc',
  'pack_configuration',
  'INA219Base',
  'INA219Simulator',
  'I2CRegister',
  'INA219',
]

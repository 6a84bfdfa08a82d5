import argparse
import logging
from typing import List, Optional

from rpi_ina219 import INA219, Address, Brng, Pga, Adc


def _address(value: str) -> Address:
    address = Address.get_address(int(value, 0))
    if address is None:
        valid = ", ".join(hex(a) for a in Address)
        raise argparse.ArgumentTypeError(f"Invalid address {value}, valid: {valid}")

    return address


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Read voltage, current and power from an INA219.")

    parser.add_argument(
        "--address", type=_address, default=Address.ADDR_40,
        help="I2C address, one of 0x40, 0x41, 0x44, 0x45 (default: 0x40)"
    )
    parser.add_argument("--bus", type=int, default=1, help="I2C bus number (default: 1)")
    parser.add_argument(
        "--shunt", type=float, default=0.1,
        help="Shunt resistance in Ohm (default: 0.1)"
    )
    parser.add_argument(
        "--max-current", type=float, default=3.2,
        help="Maximum expected current in A (default: 3.2)"
    )
    parser.add_argument(
        "--brng", choices=[m.name for m in Brng], default=Brng.V32.name,
        help="Bus voltage range (default: V32)"
    )
    parser.add_argument(
        "--gain", choices=[m.name for m in Pga], default=Pga.GAIN_8.name,
        help="Shunt PGA gain (default: GAIN_8)"
    )
    parser.add_argument(
        "--badc", choices=[m.name for m in Adc], default=Adc.BITS_12.name,
        help="Bus ADC resolution/averaging (default: BITS_12)"
    )
    parser.add_argument(
        "--sadc", choices=[m.name for m in Adc], default=Adc.BITS_12.name,
        help="Shunt ADC resolution/averaging (default: BITS_12)"
    )
    parser.add_argument(
        "--log", default="ERROR",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). (default: ERROR)"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    level_name = args.log.upper()
    level = getattr(logging, level_name, None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {args.log}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    with INA219(
        args.address,
        args.shunt,
        args.max_current,
        Brng[args.brng],
        Pga[args.gain],
        Adc[args.badc],
        Adc[args.sadc],
        bus=args.bus
    ) as ina:
        print(f"Bus Voltage: {ina.get_bus_voltage():.3f} V")
        print(f"Shunt Voltage: {ina.get_shunt_voltage() * 1000:.2f} mV")
        print(f"Current: {ina.get_current() * 1000:.1f} mA")
        print(f"Power: {ina.get_power() * 1000:.1f} mW")


if __name__ == "__main__":
    main()

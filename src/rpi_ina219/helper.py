def to_signed(value: int) -> int:
    """Interpret the low 16 bits of value as two's complement."""
    value &= 0xFFFF
    if value & 0x8000:
        return value - 0x10000

    return value

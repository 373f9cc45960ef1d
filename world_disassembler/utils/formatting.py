"""Text formatting helpers for disassembly reports."""


def format_hex(value: int) -> str:
    """Render an integer as ``0x`` followed by uppercase hex digits.

    Negative values are shown as their 32-bit two's-complement pattern,
    so -1 renders as ``0xFFFFFFFF``.
    """
    return f"0x{value & 0xFFFFFFFF:X}"

# world_disassembler/reader.py
"""Bounds-checked little-endian reads over a raw world buffer."""
from construct import Int16sl, Int32sl


class WorldParsingError(Exception):
    """Raised when a world file cannot be decoded."""
    pass


class OutOfBoundsError(WorldParsingError):
    """Raised when a read would run past either end of the buffer."""

    def __init__(self, offset: int, width: int, length: int):
        self.offset = offset
        self.width = width
        self.length = length
        super().__init__(
            f"Read of {width} bytes at offset {offset} is outside buffer "
            f"of length {length}"
        )


def _read(subcon, buffer: bytes, offset: int) -> int:
    width = subcon.sizeof()
    if offset < 0 or offset + width > len(buffer):
        raise OutOfBoundsError(offset, width, len(buffer))
    return subcon.parse(buffer[offset:offset + width])


def read_int32_le(buffer: bytes, offset: int) -> int:
    """Read a signed 32-bit little-endian integer at ``offset``.

    Raises:
        OutOfBoundsError: If ``offset < 0`` or ``offset + 4 > len(buffer)``
    """
    return _read(Int32sl, buffer, offset)


def read_int16_le(buffer: bytes, offset: int) -> int:
    """Read a sign-extended 16-bit little-endian integer at ``offset``.

    Raises:
        OutOfBoundsError: If ``offset < 0`` or ``offset + 2 > len(buffer)``
    """
    return _read(Int16sl, buffer, offset)

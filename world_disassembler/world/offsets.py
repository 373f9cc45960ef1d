# world_disassembler/world/offsets.py
from dataclasses import dataclass, field
from typing import Dict, Any, Iterator, List
import logging

from ..reader import read_int16_le, read_int32_le
from .header import WorldHeader

logger = logging.getLogger(__name__)

OFFSET_SIZE = 4
SHORT_SIZE = 2


@dataclass
class OffsetEntry:
    """One offset table slot and the short array it points to."""
    index: int
    offset: int
    values: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary format."""
        return {
            'index': self.index,
            'offset': self.offset,
            'values': list(self.values)
        }


def read_terminated_shorts(data: bytes, offset: int) -> List[int]:
    """Read 16-bit values from ``offset`` up to the first negative one.

    The terminator is consumed but not returned. Any negative value ends
    the array, not only -1.

    Raises:
        OutOfBoundsError: If the array runs off the end of the buffer
    """
    values: List[int] = []
    cursor = offset
    value = read_int16_le(data, cursor)
    while value >= 0:
        values.append(value)
        cursor += SHORT_SIZE
        value = read_int16_le(data, cursor)
    return values


def iter_offset_table(data: bytes, header: WorldHeader) -> Iterator[OffsetEntry]:
    """Walk the ``rows * cols`` table at ``header.offset18``.

    Args:
        data: Complete world file contents
        header: Header already read from ``data``

    Yields:
        OffsetEntry for each table slot, in table order
    """
    for i in range(header.table_size):
        off = read_int32_le(data, header.offset18 + i * OFFSET_SIZE)
        yield OffsetEntry(i, off, read_terminated_shorts(data, off))


def read_offset_table(data: bytes, header: WorldHeader) -> List[OffsetEntry]:
    """Decode the whole offset table into a list."""
    entries = list(iter_offset_table(data, header))
    logger.debug(
        f"Decoded {len(entries)} offset entries "
        f"({sum(len(e.values) for e in entries)} values)"
    )
    return entries

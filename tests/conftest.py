import struct
from typing import Dict, List, Sequence

import pytest

HEADER_SIZE = 0x40
HEADER_OFFSETS: Dict[str, int] = {
    'num_elements': 0x00,
    'offset4': 0x04,
    'rows': 0x10,
    'cols': 0x14,
    'offset18': 0x18,
    'element_base': 0x24,
    'rows1': 0x30,
    'cols1': 0x34,
    'offset38': 0x38,
}


def build_world(arrays: Sequence[List[int]], **fields: int) -> bytes:
    """Build a world buffer with its offset table right after the header.

    Each array is packed as given, so it must carry its own terminator.
    ``rows`` defaults to len(arrays) and ``cols`` to 1.
    """
    fields.setdefault('rows', len(arrays))
    fields.setdefault('cols', 1)
    fields.setdefault('offset18', HEADER_SIZE)

    header = bytearray(HEADER_SIZE)
    for name, value in fields.items():
        struct.pack_into('<i', header, HEADER_OFFSETS[name], value)

    data_start = HEADER_SIZE + 4 * len(arrays)
    table = b''
    body = b''
    for values in arrays:
        table += struct.pack('<i', data_start + len(body))
        body += struct.pack(f'<{len(values)}h', *values)
    return bytes(header) + table + body


@pytest.fixture
def world_builder():
    """Factory for synthetic world buffers."""
    return build_world

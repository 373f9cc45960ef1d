# world_disassembler/world/__init__.py
"""World file structures and disassembler."""
from .header import HEADER_FIELDS, HeaderField, Rendering, WorldHeader
from .offsets import OffsetEntry, read_offset_table, read_terminated_shorts
from .disassembler import (
    WorldDisassembler,
    WorldLayout,
    decode_world,
    disassemble,
    disassemble_to,
)

__all__ = [
    'HEADER_FIELDS',
    'HeaderField',
    'Rendering',
    'WorldHeader',
    'OffsetEntry',
    'read_offset_table',
    'read_terminated_shorts',
    'WorldDisassembler',
    'WorldLayout',
    'decode_world',
    'disassemble',
    'disassemble_to',
]

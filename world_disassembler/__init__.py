# world_disassembler/__init__.py
"""World file disassembler package."""
from .reader import OutOfBoundsError, WorldParsingError
from .world import WorldDisassembler, decode_world, disassemble, disassemble_to

__version__ = '0.1.0'

__all__ = [
    'OutOfBoundsError',
    'WorldParsingError',
    'WorldDisassembler',
    'decode_world',
    'disassemble',
    'disassemble_to',
]

# world_disassembler/world/header.py
from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import Dict, Any, Tuple

from construct import Int32sl, Int32ul

from ..reader import read_int32_le


class Rendering(Enum):
    """How a header value is written in the report."""
    HEX = auto()
    DECIMAL = auto()


@dataclass(frozen=True)
class HeaderField:
    """Location and presentation of one fixed header value."""
    name: str
    label: str
    offset: int
    width: int
    rendering: Rendering
    group_break: bool = False  # Blank line after this field


HEADER_FIELDS: Tuple[HeaderField, ...] = (
    HeaderField('num_elements', 'Num Elements', 0x00, 4, Rendering.HEX),
    HeaderField('offset4', 'Offset4', 0x04, 4, Rendering.HEX, group_break=True),
    HeaderField('rows', 'Rows', 0x10, 4, Rendering.DECIMAL),
    HeaderField('cols', 'Cols', 0x14, 4, Rendering.DECIMAL),
    HeaderField('offset18', 'Offset18', 0x18, 4, Rendering.HEX, group_break=True),
    HeaderField('element_base', 'Element Base', 0x24, 4, Rendering.HEX, group_break=True),
    HeaderField('rows1', 'Rows1', 0x30, 4, Rendering.DECIMAL),
    HeaderField('cols1', 'Cols1', 0x34, 4, Rendering.DECIMAL),
    HeaderField('offset38', 'Offset38', 0x38, 4, Rendering.HEX),
)

@dataclass
class WorldHeader:
    """Fixed-offset fields at the start of a world file.

    ``offset18`` points at the ``rows * cols`` offset table. The other
    fields are reported but not followed.
    """
    num_elements: int
    offset4: int
    rows: int
    cols: int
    offset18: int
    element_base: int
    rows1: int
    cols1: int
    offset38: int

    @classmethod
    def from_bytes(cls, data: bytes) -> 'WorldHeader':
        """Read every field listed in HEADER_FIELDS.

        Raises:
            OutOfBoundsError: If the buffer is too short for a field
        """
        values = {
            field.name: read_int32_le(data, field.offset)
            for field in HEADER_FIELDS
        }
        return cls(**values)

    @property
    def table_size(self) -> int:
        """Number of offset table entries; never negative.

        The product wraps at 32 bits, as the engine's int arithmetic does.
        """
        product = Int32sl.parse(Int32ul.build((self.rows * self.cols) & 0xFFFFFFFF))
        return max(product, 0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert header to dictionary format."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

# world_disassembler/world/disassembler.py
"""World file disassembler.

Turns the raw bytes of a ``.world`` file into a text report listing the
header fields and every offset table entry with its short array.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, TextIO
import logging

from ..utils.formatting import format_hex
from .header import HEADER_FIELDS, Rendering, WorldHeader
from .offsets import OffsetEntry, read_offset_table

logger = logging.getLogger(__name__)

LINE_END = '\r\n'
SEPARATOR = '-' * 53
OFFSETS_TITLE = 'Offsets array '


@dataclass
class WorldLayout:
    """Everything decoded from one world file."""
    header: WorldHeader
    entries: List[OffsetEntry] = field(default_factory=list)
    file_size: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert layout to dictionary format."""
        return {
            'file_size': self.file_size,
            'header': self.header.to_dict(),
            'offsets': [entry.to_dict() for entry in self.entries]
        }


class WorldDisassembler:
    """Decodes and renders world files.

    Holds no state between calls, so one instance can be shared.
    """

    def decode(self, data: bytes) -> WorldLayout:
        """Read the header and walk the offset table.

        Raises:
            OutOfBoundsError: If any read falls outside ``data``
        """
        header = WorldHeader.from_bytes(data)
        logger.debug(
            f"Header: {header.rows}x{header.cols} table at "
            f"{format_hex(header.offset18)}"
        )
        entries = read_offset_table(data, header)
        return WorldLayout(header=header, entries=entries, file_size=len(data))

    def render(self, layout: WorldLayout) -> str:
        """Render a decoded layout as CRLF-terminated report text."""
        lines = self._header_lines(layout.header)
        lines.extend([SEPARATOR, '', OFFSETS_TITLE, ' '])
        lines.extend(self._entry_line(entry) for entry in layout.entries)
        return ''.join(line + LINE_END for line in lines)

    def disassemble(self, data: bytes) -> str:
        """Decode ``data`` and return the full report."""
        return self.render(self.decode(data))

    def disassemble_to(self, data: bytes, sink: TextIO) -> int:
        """Write the report for ``data`` to ``sink``.

        The report is built completely before anything is written, so a
        failed decode leaves ``sink`` untouched.

        Returns:
            Number of characters written
        """
        report = self.disassemble(data)
        sink.write(report)
        return len(report)

    @staticmethod
    def _header_lines(header: WorldHeader) -> List[str]:
        lines = []
        for hf in HEADER_FIELDS:
            value = getattr(header, hf.name)
            text = format_hex(value) if hf.rendering is Rendering.HEX else str(value)
            lines.append(f"{hf.label}: {text}")
            if hf.group_break:
                lines.append('')
        return lines

    @staticmethod
    def _entry_line(entry: OffsetEntry) -> str:
        values = ', '.join(str(v) for v in entry.values)
        return f"{entry.index} : {format_hex(entry.offset)} -> {values}"


_default = WorldDisassembler()


def decode_world(data: bytes) -> WorldLayout:
    """Decode a world file into a WorldLayout."""
    return _default.decode(data)


def disassemble(data: bytes) -> str:
    """Disassemble a world file into report text."""
    return _default.disassemble(data)


def disassemble_to(data: bytes, sink: TextIO) -> int:
    """Disassemble a world file and write the report to ``sink``."""
    return _default.disassemble_to(data, sink)

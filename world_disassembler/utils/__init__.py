# world_disassembler/utils/__init__.py
"""Shared helpers."""
from .formatting import format_hex
from .logging import setup_logging

__all__ = ['format_hex', 'setup_logging']

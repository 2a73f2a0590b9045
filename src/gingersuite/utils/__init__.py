"""Binary helpers shared by the format parsers."""
from .binary import IoBuffer, ByteOrder, ShortReadError, read_u32_le, hex_preview, hex_dump

__all__ = ['IoBuffer', 'ByteOrder', 'ShortReadError', 'read_u32_le', 'hex_preview', 'hex_dump']

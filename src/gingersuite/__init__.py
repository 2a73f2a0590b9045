"""
Ginger Suite - channel group (.cgr) reader, writer and inspector.

Channel groups are the tagged binary containers an engine uses to persist
runtime state. Files come plain (QVRS) or wrapped (ACTF: zlib compressed,
optionally XOR protected).
"""

__version__ = "0.3.0"

from .formats.cgr import (
    ChannelGroup, FlatChannelGroup, Channel, Tag, GroupHeader, ContainerKind,
    ParseError, decode, decode_flat, encode,
)

__all__ = [
    '__version__',
    'ChannelGroup', 'FlatChannelGroup', 'Channel', 'Tag', 'GroupHeader', 'ContainerKind',
    'ParseError', 'decode', 'decode_flat', 'encode',
]

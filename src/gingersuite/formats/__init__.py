"""Ginger Suite formats package - file format parsers."""
from .cgr import (
    ChannelGroup, FlatChannelGroup, Channel, Tag, GroupHeader, ContainerKind,
    ParseError, decode, decode_flat, encode,
)

__all__ = [
    'ChannelGroup', 'FlatChannelGroup', 'Channel', 'Tag', 'GroupHeader', 'ContainerKind',
    'ParseError', 'decode', 'decode_flat', 'encode',
]

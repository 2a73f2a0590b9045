"""Channel group (.cgr) format package - tagged containers of engine state."""
from .errors import (
    ParseError, InvalidFileType, DecompressionError, UnprotectError,
    StructuralParseError, TruncatedInput, IoError,
)
from .tags import Tag, TagReader, iter_tags, decode_tags, encode_tags, tag_summary
from .transform import TransformResult, unwrap, compress, decompress, xor_mask
from .container import ContainerKind, Container, open_container
from .header import GroupHeader, HEADER_STEPS, NIL_GUID, extract_header, has_header
from .channelgroup import Channel, ChannelGroup, FlatChannelGroup, decode, decode_flat, encode

__all__ = [
    # Errors
    'ParseError', 'InvalidFileType', 'DecompressionError', 'UnprotectError',
    'StructuralParseError', 'TruncatedInput', 'IoError',
    # Tag codec
    'Tag', 'TagReader', 'iter_tags', 'decode_tags', 'encode_tags', 'tag_summary',
    # Layers
    'TransformResult', 'unwrap', 'compress', 'decompress', 'xor_mask',
    # Dispatch
    'ContainerKind', 'Container', 'open_container',
    # Header
    'GroupHeader', 'HEADER_STEPS', 'NIL_GUID', 'extract_header', 'has_header',
    # Model
    'Channel', 'ChannelGroup', 'FlatChannelGroup', 'decode', 'decode_flat', 'encode',
]

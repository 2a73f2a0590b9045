"""
Transform Pipeline

Wrapped (ACTF) files hide the logical tag stream behind two layers:

    outer stream:         <tag>, <tag>, ZICB{zlib(...)}
    decompressed stream:  <tag>, <tag>, <tag>, <tag>, NECB{xor(...)}

The ZICB layer is mandatory. The NECB layer is optional: when the fifth tag
of the decompressed stream is not NECB, the decompressed stream already is
the logical stream. Layers are always undone in this order.
"""

import logging
import zlib
from dataclasses import dataclass, field
from typing import List

from .constants import (
    TAG_COMPRESSED,
    TAG_PROTECTED,
    PROTECTION_KEY,
    TAGS_BEFORE_COMPRESSED,
    TAGS_BEFORE_PROTECTED,
)
from .errors import DecompressionError, UnprotectError
from .steps import Step, skip, run_steps
from .tags import Tag, iter_tags, decode_tags

logger = logging.getLogger(__name__)


COMPRESSION_STEPS = skip(TAGS_BEFORE_COMPRESSED) + (
    Step(TAG_COMPRESSED, "compressed"),
)

OBFUSCATION_STEPS = skip(TAGS_BEFORE_PROTECTED) + (
    Step(TAG_PROTECTED, "protected"),
)


@dataclass
class TransformResult:
    """Innermost tags plus a record of which layers were undone."""
    tags: List[Tag] = field(default_factory=list)
    compressed: bool = False
    obfuscated: bool = False
    compressed_size: int = 0
    decompressed_size: int = 0
    protected_size: int = 0


def decompress(data: bytes) -> bytes:
    """Inflate a complete zlib stream."""
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise DecompressionError(f"Failed to decompress: {e}") from e


def compress(data: bytes, level: int = 9) -> bytes:
    """Deflate data into a zlib stream (the inverse of decompress)."""
    return zlib.compress(data, level)


# Translation table for the fixed-key XOR
_XOR_TABLES = {}


def xor_mask(data: bytes, key: int = PROTECTION_KEY) -> bytes:
    """XOR every byte with key. Applying it twice gives the input back."""
    table = _XOR_TABLES.get(key)
    if table is None:
        table = _XOR_TABLES[key] = bytes(i ^ key for i in range(256))
    return bytes(data).translate(table)


def is_protected(tags: List[Tag]) -> bool:
    """True when the tag after the positional prefix is NECB."""
    return len(tags) > TAGS_BEFORE_PROTECTED and tags[TAGS_BEFORE_PROTECTED].name == TAG_PROTECTED


def unprotect(tags: List[Tag]) -> bytes:
    """Unmask the NECB payload of a decompressed stream."""
    logger.debug("Unprotecting channel group")
    captured = run_steps(tags, OBFUSCATION_STEPS, "protection layer")
    payload = captured["protected"].data
    if not payload:
        raise UnprotectError("Protected layer carries no data", tag=TAG_PROTECTED)
    return xor_mask(payload)


def unwrap(data: bytes, offset: int = 0) -> TransformResult:
    """
    Recover the logical tag stream of a wrapped file.

    Args:
        data: the whole file
        offset: position just after the entry tag

    Raises:
        InvalidFileType: the third tag is not ZICB
        DecompressionError: the ZICB payload does not inflate
        UnprotectError: the NECB payload is empty
        StructuralParseError: a stream ends early or a tag is cut short
    """
    logger.debug("Decompressing channel group")
    captured = run_steps(iter_tags(data, offset), COMPRESSION_STEPS, "compression layer")
    packed = captured["compressed"].data
    inflated = decompress(packed)

    result = TransformResult(
        compressed=True,
        compressed_size=len(packed),
        decompressed_size=len(inflated),
    )

    stream = decode_tags(inflated)
    if is_protected(stream):
        plain = unprotect(stream)
        result.obfuscated = True
        result.protected_size = len(plain)
        result.tags = decode_tags(plain)
    else:
        logger.debug("No protection layer, using decompressed stream as-is")
        result.tags = stream

    logger.debug("Unwrapped %d logical tags", len(result.tags))
    return result

"""
Tag Codec

A channel group stream is a flat run of tags:

    name[4] + len[4] (u32 little endian) + payload[len]

Some tags carry no length field at all ("marker" tags). The format has no
type table saying which ones, so a marker is recognised by:

  1. its name - A3DG is always a marker (it is the magic sentinel of the
     logical stream and its name contains a digit, so rule 2 cannot see it);
  2. the next 4 bytes being uppercase ASCII letters - those bytes are then
     the name of the following tag, not a length.

Rule 2 is a format quirk that real files depend on. It must be applied the
same way on every parse. Any other name needs a complete length field, so a
buffer that stops right after a name is truncated.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List

from ...utils.binary import IoBuffer, ByteOrder, ShortReadError, hex_preview
from .constants import MARKER_TAGS, TAG_NAME_LEN, TAG_LENGTH_LEN
from .errors import TruncatedInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tag:
    """A named chunk of a tag stream."""
    name: str
    data: bytes = b""

    def __post_init__(self):
        # One byte per character on the wire
        try:
            raw_name = self.name.encode('latin-1')
        except UnicodeEncodeError:
            raise ValueError(f"Tag name must be single-byte characters: {self.name!r}") from None
        if len(raw_name) != TAG_NAME_LEN:
            raise ValueError(f"Tag name must be {TAG_NAME_LEN} bytes: {self.name!r}")
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @property
    def is_marker(self) -> bool:
        """True when the tag has no payload (and is written without a length)."""
        return not self.data

    @property
    def size(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return tag_summary(self)


def _is_length_less(length_bytes: bytes) -> bool:
    return len(length_bytes) == TAG_LENGTH_LEN and all(
        0x41 <= b <= 0x5A for b in length_bytes
    )


class TagReader:
    """Reads tags one at a time from a byte buffer."""

    def __init__(self, data: bytes, offset: int = 0):
        self.io = IoBuffer.from_bytes(bytes(data), ByteOrder.LITTLE_ENDIAN)
        self.io.seek(offset)

    @property
    def position(self) -> int:
        return self.io.position

    @property
    def has_more(self) -> bool:
        return self.io.has_more

    def peek_name(self) -> str:
        """Name of the next tag, without consuming it."""
        start = self.io.position
        try:
            return self.io.read_tag_name()
        except ShortReadError as e:
            raise TruncatedInput("Incomplete tag name", offset=start) from e
        finally:
            self.io.seek(start)

    def read_tag(self) -> Tag:
        """Read one tag at the cursor."""
        io = self.io
        start = io.position
        try:
            name = io.read_tag_name()
        except ShortReadError as e:
            raise TruncatedInput("Incomplete tag name", offset=start) from e

        if name in MARKER_TAGS:
            logger.debug("Parsing: %s (marker)", name)
            return Tag(name)

        if _is_length_less(io.peek_bytes(TAG_LENGTH_LEN)):
            # Those bytes are the next tag's name; leave them for the next read
            logger.debug("Parsing: %s (marker)", name)
            return Tag(name)

        try:
            length = io.read_uint32()
        except ShortReadError as e:
            raise TruncatedInput("Incomplete length field", offset=start, tag=name) from e

        try:
            data = io.read_bytes(length)
        except ShortReadError as e:
            raise TruncatedInput(
                f"Payload of {length} bytes runs past the end of the buffer",
                offset=start,
                tag=name,
            ) from e

        logger.debug("Parsing: %s (%d bytes)", name, length)
        return Tag(name, data)

    def __iter__(self) -> Iterator[Tag]:
        while self.io.has_more:
            yield self.read_tag()


def iter_tags(data: bytes, offset: int = 0) -> Iterator[Tag]:
    """Yield tags from offset until the buffer is exhausted."""
    return iter(TagReader(data, offset))


def decode_tags(data: bytes, offset: int = 0) -> List[Tag]:
    """Parse the whole buffer from offset into a list of tags."""
    return list(iter_tags(data, offset))


def encode_tags(tags: Iterable[Tag]) -> bytes:
    """
    Serialize tags back to bytes.

    Tags with an empty payload are written as the bare name, so a non-marker
    tag that had a zero length field comes back as a marker. A bare name reads
    back only as A3DG or when the next tag's name is uppercase letters.
    """
    io = IoBuffer.for_writing(ByteOrder.LITTLE_ENDIAN)
    for tag in tags:
        io.write_tag_name(tag.name)
        if tag.data:
            io.write_uint32(len(tag.data))
            io.write_bytes(tag.data)
    return io.getvalue()


def tag_summary(tag: Tag) -> str:
    """One-line description used by the CLI and the GUI."""
    if tag.is_marker:
        return f"{tag.name}  (marker)"
    return f"{tag.name}  {tag.size:>8} bytes  {hex_preview(tag.data)}"

"""
Container Dispatcher

The first four bytes of a channel group file decide how the rest is read:

    QVRS - plain file, the buffer is the logical tag stream
    ACTF - wrapped file, the logical stream sits behind the transform layers

Anything else is not a channel group file.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .constants import TAG_PLAIN, TAG_WRAPPED, TAG_NAME_LEN
from .errors import InvalidFileType, TruncatedInput
from .tags import Tag, TagReader, decode_tags
from .transform import TransformResult, unwrap

logger = logging.getLogger(__name__)


class ContainerKind(Enum):
    """Container variants, keyed by entry tag."""
    PLAIN = TAG_PLAIN
    WRAPPED = TAG_WRAPPED

    @classmethod
    def from_entry(cls, data: bytes) -> 'ContainerKind':
        """Identify the variant from the entry tag name alone."""
        if len(data) < TAG_NAME_LEN:
            raise TruncatedInput("Buffer too short for an entry tag", offset=0)
        name = bytes(data[:TAG_NAME_LEN]).decode('latin-1')
        try:
            return cls(name)
        except ValueError:
            raise InvalidFileType("Invalid file type", offset=0, tag=name) from None

    @property
    def label(self) -> str:
        return "plain" if self is ContainerKind.PLAIN else "wrapped"


@dataclass
class Container:
    """A dispatched file: its variant and its logical tag stream."""
    kind: ContainerKind
    tags: List[Tag] = field(default_factory=list)
    transform: Optional[TransformResult] = None

    @property
    def compressed(self) -> bool:
        return bool(self.transform and self.transform.compressed)

    @property
    def obfuscated(self) -> bool:
        return bool(self.transform and self.transform.obfuscated)

    @property
    def layers(self) -> str:
        """Short description of the undone layers: none, zlib or zlib + xor."""
        if not self.compressed:
            return "none"
        return "zlib + xor" if self.obfuscated else "zlib"


def open_container(data: bytes) -> Container:
    """Dispatch on the entry tag and return the logical tag stream."""
    logger.debug("Parsing file (%d bytes)", len(data))
    kind = ContainerKind.from_entry(data)

    if kind is ContainerKind.PLAIN:
        if len(data) == TAG_NAME_LEN:
            # Entry tag only, the group carries nothing but defaults
            return Container(kind=kind, tags=[Tag(TAG_PLAIN)])
        # The entry tag is also the version tag of the logical stream
        return Container(kind=kind, tags=decode_tags(data))

    reader = TagReader(data)
    reader.read_tag()
    transform = unwrap(data, reader.position)
    return Container(kind=kind, tags=transform.tags, transform=transform)

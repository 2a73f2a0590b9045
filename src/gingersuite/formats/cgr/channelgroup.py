"""
Channel group files (.cgr)

The engine persists arbitrary runtime state as channel groups. Two views
are offered:

- ChannelGroup: read-only, structured (engine version, guid, channels)
- FlatChannelGroup: the logical tag list, which can be written back

Writing a FlatChannelGroup never re-applies compression or protection. A
wrapped (ACTF) file that goes through decode_flat -> encode comes out as a
plain QVRS file with the same logical tags.
"""

import logging
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .container import Container, ContainerKind, open_container
from .errors import IoError
from .header import GroupHeader, NIL_GUID, extract_header, default_header, has_header
from .tags import Tag, encode_tags

logger = logging.getLogger(__name__)


@dataclass
class Channel:
    """
    A channel: a node of the engine's visual scripting graph.

    Channel bodies are not decoded yet, so ChannelGroup.channels stays empty.
    """
    guid: uuid.UUID = NIL_GUID
    name: str = ""
    tags: List[Tag] = field(default_factory=list)


def _read_file(path: Union[str, Path]) -> bytes:
    logger.debug("Opening file: %s", path)
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise IoError(f"Cannot read {path}: {e.strerror or e}") from e


@dataclass
class ChannelGroup:
    """Structured, read-only view of a channel group file."""
    engine_version: int = 0
    guid: uuid.UUID = NIL_GUID
    name: str = ""
    channels: List[Channel] = field(default_factory=list)
    channel_count: int = 0
    kind: Optional[ContainerKind] = None
    body: List[Tag] = field(default_factory=list, repr=False)

    @classmethod
    def from_container(cls, container: Container) -> 'ChannelGroup':
        tags = container.tags
        if container.kind is ContainerKind.WRAPPED or has_header(tags):
            header = extract_header(tags)
        else:
            header = default_header(tags)
        return cls.from_header(header, kind=container.kind)

    @classmethod
    def from_header(cls, header: GroupHeader, kind: Optional[ContainerKind] = None) -> 'ChannelGroup':
        return cls(
            engine_version=header.engine_version,
            guid=header.guid,
            channel_count=header.channel_count,
            kind=kind,
            body=list(header.body),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> 'ChannelGroup':
        """Decode a channel group, undoing compression and protection."""
        return cls.from_container(open_container(data))

    @classmethod
    def read_from_file(cls, path: Union[str, Path]) -> 'ChannelGroup':
        """Read and decode a channel group file from disk."""
        return cls.from_bytes(_read_file(path))

    @property
    def header(self) -> GroupHeader:
        return GroupHeader(self.engine_version, self.guid, self.channel_count)


@dataclass
class FlatChannelGroup:
    """The logical tag stream of a channel group file."""
    tags: List[Tag] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'FlatChannelGroup':
        return cls(tags=list(open_container(data).tags))

    @classmethod
    def read_from_file(cls, path: Union[str, Path]) -> 'FlatChannelGroup':
        return cls.from_bytes(_read_file(path))

    def to_bytes(self) -> bytes:
        return encode_tags(self.tags)

    def save_to_file(self, path: Union[str, Path]) -> None:
        """Write the tags verbatim (no compression, no protection)."""
        data = self.to_bytes()
        logger.debug("Writing %d tags (%d bytes) to %s", len(self.tags), len(data), path)
        try:
            Path(path).write_bytes(data)
        except OSError as e:
            raise IoError(f"Cannot write {path}: {e.strerror or e}") from e

    def find(self, name: str) -> List[Tag]:
        """All tags with the given name, in stream order."""
        return [t for t in self.tags if t.name == name]

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)


def decode(data: bytes) -> ChannelGroup:
    """Full read path: dispatch, unwrap, extract the header."""
    return ChannelGroup.from_bytes(data)


def decode_flat(data: bytes) -> FlatChannelGroup:
    """Read path stopping at the logical tag list."""
    return FlatChannelGroup.from_bytes(data)


def encode(group: Union[FlatChannelGroup, Iterable[Tag]]) -> bytes:
    """Serialize a flat channel group (or any tag iterable) to bytes."""
    if isinstance(group, FlatChannelGroup):
        return group.to_bytes()
    return encode_tags(group)

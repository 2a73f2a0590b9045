"""
Header Extractor

The logical tag stream opens with a fixed header:

    QVRS   u32 engine version
    A3DG   magic marker, no payload
    CGGG   group marker, payload unused
    <tag>  16-byte guid
    <tag>  skipped (CGUC by convention)
    <tag>  skipped (CHCO by convention)
    <tag>  u32 channel count

Everything after it is channel data, returned untouched as the body.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import List, Sequence

from ...utils.binary import read_u32_le
from .constants import (
    TAG_VERSION,
    TAG_MAGIC,
    TAG_GROUP,
    GUID_LEN,
    U32_LEN,
    DEFAULT_ENGINE_VERSION,
)
from .errors import StructuralParseError
from .steps import Step, skip, run_steps
from .tags import Tag

logger = logging.getLogger(__name__)


HEADER_STEPS = (
    Step(TAG_VERSION, "engine_version"),
    Step(TAG_MAGIC),
    Step(TAG_GROUP),
    Step(None, "guid"),
) + skip(2) + (
    Step(None, "channel_count"),
)

# Named prefix that identifies a stream carrying a header
HEADER_SIGNATURE = tuple(s.expected for s in HEADER_STEPS if s.expected)

NIL_GUID = uuid.UUID(int=0)


@dataclass(frozen=True)
class GroupHeader:
    """Structured view of the header tags."""
    engine_version: int = DEFAULT_ENGINE_VERSION
    guid: uuid.UUID = NIL_GUID
    channel_count: int = 0
    body: List[Tag] = field(default_factory=list, compare=False, repr=False)


def _u32(tag: Tag, field_name: str) -> int:
    if len(tag.data) != U32_LEN:
        raise StructuralParseError(
            f"{field_name} needs a {U32_LEN}-byte payload, got {len(tag.data)}",
            tag=tag.name,
        )
    return read_u32_le(tag.data)


def _guid(tag: Tag) -> uuid.UUID:
    if len(tag.data) != GUID_LEN:
        raise StructuralParseError(
            f"guid needs a {GUID_LEN}-byte payload, got {len(tag.data)}",
            tag=tag.name,
        )
    return uuid.UUID(bytes=tag.data)


def has_header(tags: Sequence[Tag]) -> bool:
    """True when the stream starts with the named header tags."""
    names = tuple(t.name for t in tags[:len(HEADER_SIGNATURE)])
    return names == HEADER_SIGNATURE


def extract_header(tags: Sequence[Tag]) -> GroupHeader:
    """
    Read the header from the front of a logical tag stream.

    Raises:
        InvalidFileType: QVRS, A3DG or CGGG is missing from its position
        StructuralParseError: the stream is too short, or a field has the
            wrong payload size
    """
    captured = run_steps(tags, HEADER_STEPS, "header")
    header = GroupHeader(
        engine_version=_u32(captured["engine_version"], "engine_version"),
        guid=_guid(captured["guid"]),
        channel_count=_u32(captured["channel_count"], "channel_count"),
        body=list(tags[len(HEADER_STEPS):]),
    )
    logger.debug(
        "Header: engine %d, guid %s, %d channels",
        header.engine_version, header.guid, header.channel_count,
    )
    return header


def default_header(tags: Sequence[Tag]) -> GroupHeader:
    """Header for a plain stream that does not carry one."""
    return GroupHeader(body=list(tags))

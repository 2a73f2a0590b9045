"""
Synthetic channel group files shared by the test modules.

Builds plain (QVRS) and wrapped (ACTF) files from tag lists so the tests
need no real game data.
"""

import string
import struct
import sys
import uuid
from pathlib import Path

from hypothesis import strategies as st

# Path setup
TESTS_DIR = Path(__file__).parent
DEV_DIR = TESTS_DIR.parent
SUITE_DIR = DEV_DIR.parent
SRC_DIR = SUITE_DIR / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from gingersuite.formats.cgr import Tag, encode_tags, compress, xor_mask  # noqa: E402


GUID_BYTES = bytes(range(16))
GUID = uuid.UUID(bytes=GUID_BYTES)


def u32(value: int) -> bytes:
    return struct.pack("<I", value)


def raw_tag(name: bytes, payload: bytes) -> bytes:
    """A tag with an explicit length field, written by hand."""
    return name + u32(len(payload)) + payload


def header_tags(engine_version=7, guid=GUID_BYTES, channel_count=3):
    """The seven header tags of a logical stream."""
    return [
        Tag("QVRS", u32(engine_version)),
        Tag("A3DG"),
        Tag("CGGG"),
        Tag("GUID", guid),
        Tag("CGUC", u32(1)),
        Tag("CHCO", u32(0)),
        Tag("CHAN", u32(channel_count)),
    ]


def body_tags():
    return [
        Tag("CHNL", b"\x01\x02\x03"),
        Tag("NAME", b"Idle"),
    ]


def logical_stream(**header):
    return encode_tags(header_tags(**header) + body_tags())


def wrap(logical: bytes, obfuscate: bool = False) -> bytes:
    """Wrap a logical stream in the ACTF layers."""
    if obfuscate:
        inner = encode_tags([
            Tag("VERS", u32(1)),
            Tag("SIZE", u32(len(logical))),
            Tag("FLAG", u32(0)),
            Tag("CRCS", u32(0)),
            Tag("NECB", xor_mask(logical)),
        ])
    else:
        inner = logical

    return encode_tags([
        Tag("ACTF"),
        Tag("HEAD", u32(1)),
        Tag("LENS", u32(len(inner))),
        Tag("ZICB", compress(inner)),
    ])


def wrapped_file(obfuscate: bool = False, **header) -> bytes:
    return wrap(logical_stream(**header), obfuscate=obfuscate)


# ═══════════════════════════════════════════════════════════════════════════
# HYPOTHESIS STRATEGIES
# ═══════════════════════════════════════════════════════════════════════════

# Names the length heuristic reads as the start of a following tag
upper_names = st.text(alphabet=string.ascii_uppercase, min_size=4, max_size=4)

# Any 4 bytes except the magic marker, which never carries a length
any_names = (
    st.binary(min_size=4, max_size=4)
    .map(lambda raw: raw.decode("latin-1"))
    .filter(lambda name: name != "A3DG")
)

payloads = st.binary(min_size=1, max_size=64)


def is_upper_name(name: str) -> bool:
    return all("A" <= ch <= "Z" for ch in name)


@st.composite
def tag_streams(draw, max_tags=8):
    """
    Tag lists that survive encode -> decode.

    Built back to front so an empty tag is only placed where it reads back
    as a marker: before an uppercase name, or as A3DG.
    """
    count = draw(st.integers(min_value=0, max_value=max_tags))
    tags = []
    for _ in range(count):
        following = tags[0] if tags else None
        payload = draw(st.binary(max_size=64))
        if payload or (following is not None and is_upper_name(following.name)):
            name = draw(any_names)
        else:
            name = "A3DG"
        tags.insert(0, Tag(name, payload))
    return tags

"""
Channel group (.cgr) format constants.

Single source of truth for tag names and layer parameters.

Layout of a wrapped file:
    ACTF, <tag>, <tag>, ZICB{zlib(decompressed stream)}
Decompressed stream:
    <tag>, <tag>, <tag>, <tag>, NECB{xor(0x04)(logical stream)}
    (or, without NECB at position five, the logical stream itself)
Logical stream:
    QVRS(u32 engine version), A3DG, CGGG, <guid tag>(16 bytes),
    <tag>, <tag>, <channel count tag>(u32), channel tags...
"""

# Entry tags (offset 0)
TAG_PLAIN = "QVRS"
TAG_WRAPPED = "ACTF"

# Layer tags
TAG_COMPRESSED = "ZICB"
TAG_PROTECTED = "NECB"

# Logical header tags
TAG_VERSION = "QVRS"
TAG_MAGIC = "A3DG"
TAG_GROUP = "CGGG"

TAG_NAME_LEN = 4
TAG_LENGTH_LEN = 4
GUID_LEN = 16
U32_LEN = 4

# Never followed by a length field
MARKER_TAGS = frozenset({TAG_MAGIC})

PROTECTION_KEY = 0x04

# Plain QVRS files do not say which engine wrote them
DEFAULT_ENGINE_VERSION = 60

# Positional tags ahead of each layer tag
TAGS_BEFORE_COMPRESSED = 2
TAGS_BEFORE_PROTECTED = 4

FILE_EXTENSION = ".cgr"

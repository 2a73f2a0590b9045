"""Clean binary I/O utilities for tag stream parsing."""

import struct
from enum import Enum
from io import BytesIO
from typing import BinaryIO


class ByteOrder(Enum):
    """Byte order enum for struct packing/unpacking."""
    BIG_ENDIAN = ">"
    LITTLE_ENDIAN = "<"


class ShortReadError(EOFError):
    """Raised when fewer bytes remain than a read asked for."""

    def __init__(self, position: int, wanted: int, available: int):
        super().__init__(
            f"wanted {wanted} bytes at offset {position}, only {available} left"
        )
        self.position = position
        self.wanted = wanted
        self.available = available


class IoBuffer:
    """Binary reader/writer with endian support and strict bounds."""
    
    def __init__(self, stream: BinaryIO, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN):
        self.stream = stream
        self.byte_order = byte_order
        # Reads never move past this offset
        current = stream.tell()
        stream.seek(0, 2)
        self._end = stream.tell()
        stream.seek(current)
    
    @classmethod
    def from_bytes(cls, data: bytes, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'IoBuffer':
        """Create from bytes."""
        return cls(BytesIO(data), byte_order)
    
    @classmethod
    def for_writing(cls, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'IoBuffer':
        """Create an empty buffer to write into."""
        return cls(BytesIO(), byte_order)
    
    @property
    def position(self) -> int:
        """Current position in stream."""
        return self.stream.tell()
    
    @position.setter
    def position(self, value: int):
        """Seek to position."""
        self.stream.seek(value)
    
    @property
    def remaining(self) -> int:
        """Bytes left between the cursor and the end of the buffer."""
        return max(self._end - self.stream.tell(), 0)
    
    @property
    def has_more(self) -> bool:
        """Check if there are more bytes to read."""
        return self.remaining > 0
    
    def has_bytes(self, num_bytes: int) -> bool:
        """Check if there are at least num_bytes remaining."""
        return self.remaining >= num_bytes
    
    def skip(self, num_bytes: int):
        """Skip bytes from current position."""
        self._require(num_bytes)
        self.stream.seek(num_bytes, 1)
    
    def seek(self, offset: int, whence: int = 0):
        """Seek in stream (whence: 0=start, 1=current, 2=end)."""
        self.stream.seek(offset, whence)
    
    def _require(self, count: int):
        if count > self.remaining:
            raise ShortReadError(self.position, count, self.remaining)
    
    def read_bytes(self, count: int) -> bytes:
        """Read exactly count raw bytes."""
        self._require(count)
        return self.stream.read(count)
    
    def peek_bytes(self, count: int) -> bytes:
        """Read up to count bytes without moving the cursor."""
        current = self.stream.tell()
        data = self.stream.read(min(count, self.remaining))
        self.stream.seek(current)
        return data
    
    def read_uint32(self) -> int:
        """Read unsigned 32-bit integer."""
        fmt = f"{self.byte_order.value}I"
        return struct.unpack(fmt, self.read_bytes(4))[0]
    
    def read_tag_name(self) -> str:
        """Read a 4-byte tag name, one character per byte."""
        return self.read_bytes(4).decode('latin-1')
    
    def write_bytes(self, data: bytes):
        """Write raw bytes."""
        self.stream.write(data)
        self._end = max(self._end, self.stream.tell())
    
    def write_uint32(self, value: int):
        """Write unsigned 32-bit integer."""
        fmt = f"{self.byte_order.value}I"
        self.write_bytes(struct.pack(fmt, value))
    
    def write_tag_name(self, name: str):
        """Write a 4-character tag name."""
        self.write_bytes(name.encode('latin-1'))
    
    def getvalue(self) -> bytes:
        """Everything written so far (BytesIO-backed buffers only)."""
        return self.stream.getvalue()


def read_u32_le(data: bytes) -> int:
    """Decode a little-endian u32 from a payload of at least 4 bytes."""
    return struct.unpack_from("<I", data)[0]


def hex_preview(data: bytes, limit: int = 16) -> str:
    """Space separated hex of the first bytes, with an ellipsis past limit."""
    shown = " ".join(f"{b:02X}" for b in data[:limit])
    if len(data) > limit:
        shown += " ..."
    return shown


def hex_dump(data: bytes, width: int = 16, limit: int = 512) -> str:
    """Classic offset / hex / ascii dump of the first limit bytes."""
    lines = []
    for offset in range(0, min(len(data), limit), width):
        row = data[offset:offset + width]
        hex_part = " ".join(f"{b:02X}" for b in row)
        text = "".join(chr(b) if 32 <= b < 127 else "." for b in row)
        lines.append(f"{offset:08X}  {hex_part:<{width * 3}} {text}")
    if len(data) > limit:
        lines.append(f"... ({len(data) - limit} more bytes)")
    return "\n".join(lines)

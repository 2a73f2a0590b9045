"""Errors raised while decoding channel group files."""

from typing import Optional


class ParseError(ValueError):
    """Base class for every channel group decoding failure."""

    def __init__(self, message: str, offset: Optional[int] = None, tag: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.tag = tag

    def __str__(self) -> str:
        parts = [self.message]
        if self.tag is not None:
            parts.append(f"tag {self.tag!r}")
        if self.offset is not None:
            parts.append(f"offset {self.offset}")
        return ", ".join(parts)


class InvalidFileType(ParseError):
    """Entry tag or a required tag name is not the expected one."""


class DecompressionError(ParseError):
    """The ZICB payload is not a valid zlib stream."""


class UnprotectError(ParseError):
    """The NECB layer is structurally broken."""


class StructuralParseError(ParseError):
    """A field has the wrong size or the stream ends before the layout does."""


class TruncatedInput(StructuralParseError):
    """The buffer ends in the middle of a tag."""


class IoError(ParseError):
    """Reading or writing the file itself failed."""


__all__ = [
    'ParseError',
    'InvalidFileType',
    'DecompressionError',
    'UnprotectError',
    'StructuralParseError',
    'TruncatedInput',
    'IoError',
]

"""
Positional layouts.

Both the layer unwrapping and the header read walk a fixed sequence of
tags. A layout is written down as a tuple of Steps; a Step either checks a
tag name, captures the tag under a field name, or both. A new format
variant is a new tuple, not a new parser.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

from .errors import InvalidFileType, StructuralParseError
from .tags import Tag


@dataclass(frozen=True)
class Step:
    """One position in a layout."""
    expected: Optional[str] = None  # None: any name
    capture: Optional[str] = None   # None: skip the tag

    def describe(self) -> str:
        name = self.expected or "<any>"
        return f"{name} -> {self.capture}" if self.capture else f"{name} (skip)"


def skip(count: int) -> tuple:
    """count positional steps that neither check nor keep their tag."""
    return tuple(Step() for _ in range(count))


def run_steps(tags: Iterable[Tag], steps: Sequence[Step], stage: str) -> Dict[str, Tag]:
    """
    Walk tags against steps and return the captured tags by field name.

    Only as many tags as there are steps are pulled from the iterable.

    Raises:
        InvalidFileType: a tag name differs from the step's expected name
        StructuralParseError: the tags run out before the steps do
    """
    captured: Dict[str, Tag] = {}
    iterator = iter(tags)
    for index, step in enumerate(steps):
        tag = next(iterator, None)
        if tag is None:
            raise StructuralParseError(
                f"{stage}: stream ended at step {index} ({step.describe()})"
            )
        if step.expected is not None and tag.name != step.expected:
            raise InvalidFileType(
                f"{stage}: expected {step.expected!r} at step {index}",
                tag=tag.name,
            )
        if step.capture:
            captured[step.capture] = tag
    return captured

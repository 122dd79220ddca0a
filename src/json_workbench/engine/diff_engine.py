"""Diff Engine - compares two raw inputs.

When both inputs parse to structured data the comparison is structural: both
values are serialized canonically (sorted keys, fixed indentation) so that
formatting and key order do not show up as changes. Otherwise the raw texts
are compared line by line.
"""

import difflib
import json
import logging
from enum import Enum
from typing import Any, Callable, Iterator

from pydantic import BaseModel, Field

from json_workbench.parsing.detector import FormatDetector

logger = logging.getLogger(__name__)

CANONICAL_INDENT = 2


class DiffMode(str, Enum):
    """How two inputs were compared."""

    STRUCTURAL = "structural"
    LINES = "lines"


class DiffSegment(BaseModel):
    """A run of consecutive lines sharing one status."""

    content: str = Field(..., description="Text of the segment, newline terminators included")
    added: bool = Field(default=False, description="Present only in the second input")
    removed: bool = Field(default=False, description="Present only in the first input")

    @property
    def unchanged(self) -> bool:
        return not self.added and not self.removed


class DiffResult(BaseModel):
    """Ordered segments covering both inputs."""

    mode: DiffMode = Field(..., description="Comparison mode used")
    segments: list[DiffSegment] = Field(default_factory=list, description="Diff segments in order")

    def __iter__(self) -> Iterator[DiffSegment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def added_count(self) -> int:
        return sum(1 for s in self.segments if s.added)

    @property
    def removed_count(self) -> int:
        return sum(1 for s in self.segments if s.removed)

    @property
    def has_changes(self) -> bool:
        return any(not s.unchanged for s in self.segments)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "segments": [s.model_dump() for s in self.segments],
        }


def canonical_json(value: Any) -> str:
    """Serialize a value with sorted keys and fixed indentation."""
    return json.dumps(value, indent=CANONICAL_INDENT, sort_keys=True, ensure_ascii=False, default=str)


def _structural_key(line: str) -> str:
    # A trailing comma only says whether a sibling follows
    return line.rstrip("\r\n").rstrip(",")


def diff_lines(
    old_text: str,
    new_text: str,
    key: Callable[[str], str] | None = None,
) -> list[DiffSegment]:
    """Line-oriented diff of two texts.

    Args:
        old_text: First text
        new_text: Second text
        key: Optional normalization applied to lines before comparing them

    Returns:
        Segments in order; removed lines precede the lines added in their place
    """
    old_lines = old_text.splitlines(keepends=True)
    new_lines = new_text.splitlines(keepends=True)

    if key is None:
        old_keys, new_keys = old_lines, new_lines
    else:
        old_keys = [key(line) for line in old_lines]
        new_keys = [key(line) for line in new_lines]

    matcher = difflib.SequenceMatcher(None, old_keys, new_keys, autojunk=False)
    segments = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            segments.append(DiffSegment(content="".join(new_lines[j1:j2])))
            continue
        if tag in ("replace", "delete"):
            segments.append(DiffSegment(content="".join(old_lines[i1:i2]), removed=True))
        if tag in ("replace", "insert"):
            segments.append(DiffSegment(content="".join(new_lines[j1:j2]), added=True))

    return segments


class DiffEngine:
    """Engine comparing two raw inputs structurally or line by line."""

    def __init__(self, detector: FormatDetector | None = None):
        self.detector = detector or FormatDetector()

    def diff(self, text_a: str, text_b: str) -> DiffResult:
        """Compare two raw texts.

        Args:
            text_a: Original input
            text_b: Modified input

        Returns:
            DiffResult in structural mode when both inputs parse, otherwise
            in line mode over the raw texts
        """
        parsed_a = self.detector.detect(text_a)
        parsed_b = self.detector.detect(text_b)

        if parsed_a.data is not None and parsed_b.data is not None:
            return self.diff_values(parsed_a.data, parsed_b.data)

        logger.debug("Falling back to line diff (formats: %s, %s)", parsed_a.format.value, parsed_b.format.value)
        return DiffResult(mode=DiffMode.LINES, segments=diff_lines(text_a, text_b))

    def diff_values(self, value_a: Any, value_b: Any) -> DiffResult:
        """Structural diff of two already parsed values."""
        segments = diff_lines(canonical_json(value_a), canonical_json(value_b), key=_structural_key)
        return DiffResult(mode=DiffMode.STRUCTURAL, segments=segments)


def diff(text_a: str, text_b: str) -> DiffResult:
    """Convenience function to diff two raw inputs.

    Args:
        text_a: Original input
        text_b: Modified input

    Returns:
        DiffResult
    """
    return DiffEngine().diff(text_a, text_b)

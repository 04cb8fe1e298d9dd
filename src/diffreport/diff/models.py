"""Data models for edit operations and annotated rows."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Union


class EditKind(str, Enum):
    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"


class RowStatus(str, Enum):
    UNCHANGED = "unchanged"
    CHANGED = "changed"
    DELETED = "deleted"
    INSERTED = "inserted"


@dataclass(frozen=True, slots=True)
class EditOperation:
    """One insert/delete/replace block reported by a diff.

    ``source_start`` indexes the original, unshifted source sequence.
    A payload of ``None`` means the diff did not supply the block's lines.
    """

    kind: EditKind
    source_start: int
    source_lines: Optional[Tuple[str, ...]]
    target_start: int
    target_lines: Optional[Tuple[str, ...]]


@dataclass(frozen=True, slots=True)
class AnnotatedRow:
    """A single display line paired with its change status."""

    text: str
    status: RowStatus = RowStatus.UNCHANGED


@dataclass(frozen=True)
class DiffFailed:
    """Marker for a comparison direction whose diff could not be annotated."""

    reason: str


Rows = Tuple[AnnotatedRow, ...]
AnnotatedView = Union[Rows, DiffFailed]


def count_statuses(rows: Sequence[AnnotatedRow]) -> Dict[str, int]:
    """Return ``{status: count}`` with every status present."""
    counts = Counter(row.status for row in rows)
    return {status.value: counts.get(status, 0) for status in RowStatus}


@dataclass
class Comparison:
    """Both annotated views of a two-file comparison."""

    original_rows: AnnotatedView
    revised_rows: AnnotatedView
    original_name: str = "original"
    revised_name: str = "revised"
    original_lines: Tuple[str, ...] = ()
    revised_lines: Tuple[str, ...] = ()

    @property
    def failed(self) -> bool:
        return isinstance(self.original_rows, DiffFailed) or isinstance(
            self.revised_rows, DiffFailed
        )

    @property
    def has_changes(self) -> bool:
        for view in (self.original_rows, self.revised_rows):
            if isinstance(view, DiffFailed):
                continue
            if any(row.status is not RowStatus.UNCHANGED for row in view):
                return True
        return False

    def summary(self) -> Dict[str, Optional[Dict[str, int]]]:
        """Per-side status counts; ``None`` for a side whose diff failed."""
        return {
            "original": None
            if isinstance(self.original_rows, DiffFailed)
            else count_statuses(self.original_rows),
            "revised": None
            if isinstance(self.revised_rows, DiffFailed)
            else count_statuses(self.revised_rows),
        }

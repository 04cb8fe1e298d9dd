"""Line diff via difflib: converts SequenceMatcher opcodes to edit operations."""

from __future__ import annotations

from difflib import SequenceMatcher
from typing import List, Sequence

from diffreport.diff.models import EditKind, EditOperation

_OPCODE_KIND = {
    "insert": EditKind.INSERT,
    "delete": EditKind.DELETE,
    "replace": EditKind.REPLACE,
}


def compute_edits(
    source: Sequence[str],
    target: Sequence[str],
    *,
    autojunk: bool = False,
) -> List[EditOperation]:
    """Return the edits turning *source* into *target*, ascending by position."""
    matcher = SequenceMatcher(None, source, target, autojunk=autojunk)
    edits: List[EditOperation] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        kind = _OPCODE_KIND.get(tag)
        if kind is None:  # equal
            continue
        edits.append(
            EditOperation(
                kind=kind,
                source_start=i1,
                source_lines=tuple(source[i1:i2]),
                target_start=j1,
                target_lines=tuple(target[j1:j2]),
            )
        )
    return edits

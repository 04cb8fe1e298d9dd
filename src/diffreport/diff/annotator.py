"""Row annotator: turns a line sequence plus its edit list into display rows.

Edits are applied from the highest ``source_start`` down. Every position an
edit refers to is in the original index space, and an insertion only shifts
rows at or after its own position, so working backwards keeps the positions
of the edits still to be applied valid.

A replacement of unequal size is aligned from the start of the block: the
shared prefix is marked changed and the excess trails as pure deletions
(source longer) or pure insertions (target longer).
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from diffreport.diff.models import AnnotatedRow, EditKind, EditOperation, Rows, RowStatus

logger = logging.getLogger(__name__)


class DiffComputationError(Exception):
    """Raised when an edit operation cannot be applied to the line sequence."""


def _validate(edit: EditOperation, line_count: int) -> None:
    """Reject operations with a missing payload or out-of-range positions."""
    if edit.source_lines is None or edit.target_lines is None:
        raise DiffComputationError(
            f"{edit.kind.value} at line {edit.source_start} is missing its line content"
        )
    if edit.source_start < 0:
        raise DiffComputationError(f"negative source position {edit.source_start}")
    if edit.kind == EditKind.INSERT:
        end = edit.source_start
    else:
        end = edit.source_start + len(edit.source_lines)
    if end > line_count:
        raise DiffComputationError(
            f"{edit.kind.value} at line {edit.source_start} runs past the end "
            f"of a {line_count}-line sequence"
        )


def _mark(rows: List[AnnotatedRow], position: int, status: RowStatus) -> None:
    rows[position] = AnnotatedRow(rows[position].text, status)


def _splice(rows: List[AnnotatedRow], position: int, text: str) -> None:
    rows.insert(position, AnnotatedRow(text, RowStatus.INSERTED))


def _apply_replace(
    rows: List[AnnotatedRow],
    position: int,
    source_lines: Sequence[str],
    target_lines: Sequence[str],
) -> None:
    """Mark a replaced block: changed prefix, then trailing deletes or inserts."""
    source_count = len(source_lines)
    target_count = len(target_lines)
    shared = min(source_count, target_count)

    for i in range(shared):
        _mark(rows, position + i, RowStatus.CHANGED)

    if source_count > target_count:
        for i in range(shared, source_count):
            _mark(rows, position + i, RowStatus.DELETED)
    elif target_count > source_count:
        for i in range(shared, target_count):
            _splice(rows, position + i, target_lines[i])


def annotate(original: Sequence[str], edits: Sequence[EditOperation]) -> Rows:
    """Return *original* as annotated rows with *edits* applied.

    Raises DiffComputationError if any edit is malformed; no partial result
    is returned in that case.
    """
    for edit in edits:
        _validate(edit, len(original))

    rows: List[AnnotatedRow] = [AnnotatedRow(line) for line in original]

    # Stable ascending sort reversed: ties are applied in reverse input order.
    ordered = reversed(sorted(edits, key=lambda e: e.source_start))

    for edit in ordered:
        position = edit.source_start
        source_lines = edit.source_lines or ()
        target_lines = edit.target_lines or ()

        if edit.kind == EditKind.DELETE:
            for i in range(len(source_lines)):
                _mark(rows, position + i, RowStatus.DELETED)
        elif edit.kind == EditKind.INSERT:
            for i, text in enumerate(target_lines):
                _splice(rows, position + i, text)
        else:
            _apply_replace(rows, position, source_lines, target_lines)

    logger.debug("Annotated %d lines with %d edits -> %d rows", len(original), len(edits), len(rows))
    return tuple(rows)

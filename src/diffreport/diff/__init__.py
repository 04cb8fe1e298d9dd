"""Diff annotation: edit operations, row annotator, dual-view comparator."""

from diffreport.diff.annotator import DiffComputationError, annotate
from diffreport.diff.comparator import compare, compare_files
from diffreport.diff.differ import compute_edits
from diffreport.diff.models import (
    AnnotatedRow,
    Comparison,
    DiffFailed,
    EditKind,
    EditOperation,
    RowStatus,
)

__all__ = [
    "AnnotatedRow",
    "Comparison",
    "DiffComputationError",
    "DiffFailed",
    "EditKind",
    "EditOperation",
    "RowStatus",
    "annotate",
    "compare",
    "compare_files",
    "compute_edits",
]

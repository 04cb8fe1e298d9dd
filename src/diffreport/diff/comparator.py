"""Dual-view comparator: annotates each file against the other.

The diff is computed twice with the roles swapped rather than inverting one
result: a delete in one direction does not map onto an insert in the other
once block boundaries differ.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from diffreport.config.schema import DiffReportConfig
from diffreport.diff.annotator import DiffComputationError, annotate
from diffreport.diff.differ import compute_edits
from diffreport.diff.models import AnnotatedView, Comparison, DiffFailed, EditOperation
from diffreport.files.reader import read_lines

logger = logging.getLogger(__name__)

DiffFunc = Callable[[Sequence[str], Sequence[str]], List[EditOperation]]


def annotate_direction(
    source: Sequence[str],
    target: Sequence[str],
    diff: DiffFunc = compute_edits,
) -> AnnotatedView:
    """Annotate *source* against *target*; DiffFailed if the edits are malformed."""
    edits = diff(source, target)
    try:
        return annotate(source, edits)
    except DiffComputationError as exc:
        logger.warning("Diff computation failed: %s", exc)
        return DiffFailed(reason=str(exc))


def compare(
    a: Sequence[str],
    b: Sequence[str],
    *,
    diff: DiffFunc = compute_edits,
    a_name: str = "original",
    b_name: str = "revised",
) -> Comparison:
    """Return the annotated view of *a* (against *b*) and of *b* (against *a*)."""
    return Comparison(
        original_rows=annotate_direction(a, b, diff),
        revised_rows=annotate_direction(b, a, diff),
        original_name=a_name,
        revised_name=b_name,
        original_lines=tuple(a),
        revised_lines=tuple(b),
    )


def compare_files(
    original_path: Union[str, Path],
    revised_path: Union[str, Path],
    config: Optional[DiffReportConfig] = None,
) -> Optional[Comparison]:
    """Read and compare two files. None if either file could not be read."""
    cfg = config or DiffReportConfig()
    original_lines = read_lines(original_path, cfg.diff.encoding)
    revised_lines = read_lines(revised_path, cfg.diff.encoding)
    if original_lines is None or revised_lines is None:
        return None

    logger.info(
        "Comparing %s (%d lines) with %s (%d lines)",
        original_path, len(original_lines), revised_path, len(revised_lines),
    )
    return compare(
        original_lines,
        revised_lines,
        diff=partial(compute_edits, autojunk=cfg.diff.autojunk),
        a_name=Path(original_path).name,
        b_name=Path(revised_path).name,
    )

"""JSON reporter: machine-readable annotated views."""

from __future__ import annotations

import json
from typing import Any, Dict

from diffreport.diff.models import AnnotatedView, Comparison, DiffFailed, count_statuses


def _view_to_dict(name: str, view: AnnotatedView) -> Dict[str, Any]:
    if isinstance(view, DiffFailed):
        return {"file": name, "status": "failed", "reason": view.reason}
    return {
        "file": name,
        "status": "ok",
        "rows": [
            {"line": idx, "text": row.text, "status": row.status.value}
            for idx, row in enumerate(view, start=1)
        ],
        "summary": count_statuses(view),
    }


def to_dict(comparison: Comparison) -> Dict[str, Any]:
    """Convert a Comparison to a JSON-serialisable dict."""
    return {
        "version": "1.0",
        "identical": not comparison.failed and not comparison.has_changes,
        "original": _view_to_dict(comparison.original_name, comparison.original_rows),
        "revised": _view_to_dict(comparison.revised_name, comparison.revised_rows),
    }


def render(comparison: Comparison) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(comparison), indent=2)

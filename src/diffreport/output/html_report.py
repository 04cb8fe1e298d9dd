"""HTML reporter: side-by-side original and annotated tables via Jinja2."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from diffreport.config.schema import ReportConfig
from diffreport.diff.models import AnnotatedView, Comparison, DiffFailed, RowStatus

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error occurred while calculating diff"

_STATUS_CLASS = {
    RowStatus.UNCHANGED: None,
    RowStatus.CHANGED: "diff-changed",
    RowStatus.DELETED: "diff-deleted",
    RowStatus.INSERTED: "diff-inserted",
}

_LEGEND = (
    ("Changed", "diff-changed"),
    ("Deleted", "diff-deleted"),
    ("Added", "diff-inserted"),
)

_CSS = """\
body { font-family: monospace; }
.whole-div { display: flex; flex-wrap: wrap; align-items: flex-start; gap: 1em; }
table { border-collapse: collapse; min-width: 20em; }
caption { font-weight: bold; padding: 0.3em; }
td { white-space: pre; padding: 0 0.5em; border-bottom: 1px solid #eee; }
.diff-changed { background: #fff3bf; }
.diff-deleted { background: #ffc9c9; }
.diff-inserted { background: #b2f2bb; }
.diff-error { color: #c92a2a; font-weight: bold; }
.legend td { border: none; }
.rect { padding: 0.2em 0.6em; }
"""


class ReportError(Exception):
    """Raised when the HTML report cannot be rendered or written."""


_env: Optional[Environment] = None


def _environment() -> Environment:
    global _env
    if _env is None:
        _env = Environment(
            loader=PackageLoader("diffreport.output", "templates"),
            autoescape=select_autoescape(["html", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
    return _env


def _diff_table(name: str, view: AnnotatedView) -> Dict[str, Any]:
    if isinstance(view, DiffFailed):
        return {"name": name, "failed": True, "rows": []}
    return {
        "name": name,
        "failed": False,
        "rows": [{"text": row.text, "css_class": _STATUS_CLASS[row.status]} for row in view],
    }


def render(comparison: Comparison, config: Optional[ReportConfig] = None) -> str:
    """Return the full HTML document for *comparison*."""
    cfg = config or ReportConfig()

    original_tables: List[Dict[str, Any]] = []
    if cfg.show_originals:
        original_tables = [
            {"name": comparison.original_name, "lines": comparison.original_lines},
            {"name": comparison.revised_name, "lines": comparison.revised_lines},
        ]

    try:
        template = _environment().get_template("report.html.j2")
        return template.render(
            title=cfg.title,
            stylesheet=cfg.stylesheet,
            css=_CSS,
            original_tables=original_tables,
            diff_tables=[
                _diff_table(comparison.original_name, comparison.original_rows),
                _diff_table(comparison.revised_name, comparison.revised_rows),
            ],
            error_message=ERROR_MESSAGE,
            show_legend=cfg.show_legend,
            legend=_LEGEND,
        )
    except TemplateError as exc:
        raise ReportError(f"Failed to render HTML report: {exc}") from exc


def write(
    comparison: Comparison,
    path: Union[str, Path],
    config: Optional[ReportConfig] = None,
) -> Path:
    """Render *comparison* and write it to *path*. Returns the written path."""
    out = Path(path)
    html = render(comparison, config)
    try:
        out.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"Could not write {out}: {exc}") from exc
    logger.info("HTML report written to %s", out)
    return out

"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

ReportFormat = Literal["html", "json", "terminal"]

REPORT_FORMATS: tuple[str, ...] = ("html", "json", "terminal")


@dataclass
class DiffConfig:
    autojunk: bool = False  # difflib's popular-line heuristic; off for exact line diffs
    encoding: str = "utf-8"


@dataclass
class ReportConfig:
    format: ReportFormat = "html"
    output: str = "diff-report.html"
    title: str = "Diff report"
    show_originals: bool = True
    show_legend: bool = True
    stylesheet: Optional[str] = None  # link instead of inline CSS when set


@dataclass
class DiffReportConfig:
    version: str = "1.0"
    diff: DiffConfig = field(default_factory=DiffConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

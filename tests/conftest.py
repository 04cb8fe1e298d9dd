"""Shared test fixtures: sample line sequences and files on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest


@pytest.fixture
def original_lines() -> list[str]:
    return ["A", "B", "C", "D"]


@pytest.fixture
def revised_lines() -> list[str]:
    return ["A", "X", "D", "E", "F"]


@pytest.fixture
def sample_files(tmp_path: Path, original_lines, revised_lines) -> Tuple[Path, Path]:
    """Write the original/revised samples to disk and return their paths."""
    original = tmp_path / "original.txt"
    revised = tmp_path / "revised.txt"
    original.write_text("\n".join(original_lines) + "\n", encoding="utf-8")
    revised.write_text("\n".join(revised_lines) + "\n", encoding="utf-8")
    return original, revised


@pytest.fixture
def identical_files(tmp_path: Path) -> Tuple[Path, Path]:
    """Two files with the same content."""
    content = "line one\nline two\nline three\n"
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_text(content, encoding="utf-8")
    second.write_text(content, encoding="utf-8")
    return first, second

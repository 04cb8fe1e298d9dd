"""Read a text file into a line sequence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def _strip_bom(line: str) -> str:
    """Remove a single leading UTF-8 BOM if present."""
    return line[1:] if line.startswith(_BOM) else line


def read_lines(path: Union[str, Path], encoding: str = "utf-8") -> Optional[List[str]]:
    """Return the lines of *path* without terminators, or None if unreadable.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line; form feeds and other
    Unicode separators stay part of the line text.
    """
    p = Path(path)
    if not p.is_file():
        logger.warning("File %s not found", p)
        return None
    try:
        # newline=None folds \r\n and \r into \n
        with open(p, encoding=encoding, errors="replace", newline=None) as f:
            text = f.read()
    except OSError as exc:
        logger.warning("Could not read %s: %s", p, exc)
        return None

    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    lines[0] = _strip_bom(lines[0])
    return lines

"""diffreport: side-by-side annotated line diffs of two text files."""

__version__ = "0.1.0"

"""File input: reading the two sides of a comparison."""

from diffreport.files.reader import read_lines

__all__ = ["read_lines"]

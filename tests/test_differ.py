"""Tests for the difflib-backed edit computation."""

from diffreport.diff.differ import compute_edits
from diffreport.diff.models import EditKind, EditOperation


class TestComputeEdits:
    def test_identical_has_no_edits(self):
        assert compute_edits(["a", "b"], ["a", "b"]) == []

    def test_replace_then_insert(self, original_lines, revised_lines):
        edits = compute_edits(original_lines, revised_lines)
        assert edits == [
            EditOperation(EditKind.REPLACE, 1, ("B", "C"), 1, ("X",)),
            EditOperation(EditKind.INSERT, 4, (), 3, ("E", "F")),
        ]

    def test_reverse_direction(self, original_lines, revised_lines):
        edits = compute_edits(revised_lines, original_lines)
        assert edits == [
            EditOperation(EditKind.REPLACE, 1, ("X",), 1, ("B", "C")),
            EditOperation(EditKind.DELETE, 3, ("E", "F"), 4, ()),
        ]

    def test_empty_source(self):
        edits = compute_edits([], ["x", "y"])
        assert edits == [EditOperation(EditKind.INSERT, 0, (), 0, ("x", "y"))]

    def test_ascending_positions(self):
        source = ["a", "b", "c", "d", "e", "f"]
        target = ["a", "B", "c", "e", "f", "g"]
        positions = [e.source_start for e in compute_edits(source, target)]
        assert positions == sorted(positions)

    def test_payload_always_present(self):
        for edit in compute_edits(["a", "b", "c"], ["c", "b", "a", "d"]):
            assert edit.source_lines is not None
            assert edit.target_lines is not None

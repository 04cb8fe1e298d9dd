"""Tests for the row annotator: splice, classify, and ordering rules."""

import pytest

from diffreport.diff.annotator import DiffComputationError, annotate
from diffreport.diff.models import AnnotatedRow, EditKind, EditOperation, RowStatus

U = RowStatus.UNCHANGED
C = RowStatus.CHANGED
D = RowStatus.DELETED
I = RowStatus.INSERTED  # noqa: E741


def _op(kind, source_start, source_lines, target_lines, target_start=0):
    return EditOperation(
        kind=kind,
        source_start=source_start,
        source_lines=tuple(source_lines) if source_lines is not None else None,
        target_start=target_start,
        target_lines=tuple(target_lines) if target_lines is not None else None,
    )


def _statuses(rows):
    return [row.status for row in rows]


def _texts(rows):
    return [row.text for row in rows]


class TestNoEdits:
    def test_all_unchanged(self):
        rows = annotate(["one", "two", "three"], [])
        assert _statuses(rows) == [U, U, U]
        assert _texts(rows) == ["one", "two", "three"]

    def test_empty_input(self):
        assert annotate([], []) == ()

    def test_returns_immutable_rows(self):
        rows = annotate(["a"], [])
        assert isinstance(rows, tuple)
        assert rows[0] == AnnotatedRow("a", U)


class TestDelete:
    def test_marks_rows_deleted_keeping_text(self):
        rows = annotate(["a", "b", "c"], [_op(EditKind.DELETE, 1, ["b"], [])])
        assert _statuses(rows) == [U, D, U]
        assert _texts(rows) == ["a", "b", "c"]

    def test_delete_block_at_tail(self):
        rows = annotate(["a", "b", "c"], [_op(EditKind.DELETE, 1, ["b", "c"], [])])
        assert _statuses(rows) == [U, D, D]


class TestInsert:
    def test_splices_rows_in_order(self):
        rows = annotate(["a", "b"], [_op(EditKind.INSERT, 1, [], ["x", "y"])])
        assert _texts(rows) == ["a", "x", "y", "b"]
        assert _statuses(rows) == [U, I, I, U]

    def test_insert_at_end(self):
        rows = annotate(["a", "b"], [_op(EditKind.INSERT, 2, [], ["z"])])
        assert _texts(rows) == ["a", "b", "z"]
        assert _statuses(rows) == [U, U, I]

    def test_insert_into_empty(self):
        rows = annotate([], [_op(EditKind.INSERT, 0, [], ["x", "y"])])
        assert _texts(rows) == ["x", "y"]
        assert _statuses(rows) == [I, I]


class TestReplace:
    def test_equal_lengths_only_change(self):
        rows = annotate(["a", "b"], [_op(EditKind.REPLACE, 0, ["a", "b"], ["x", "y"])])
        assert _statuses(rows) == [C, C]
        assert _texts(rows) == ["a", "b"]

    def test_longer_source_trails_deletes(self):
        rows = annotate(
            ["a", "b", "c", "d"],
            [_op(EditKind.REPLACE, 1, ["b", "c"], ["x"])],
        )
        assert _statuses(rows) == [U, C, D, U]
        assert _texts(rows) == ["a", "b", "c", "d"]

    def test_longer_target_trails_inserts(self):
        rows = annotate(
            ["a", "b", "c"],
            [_op(EditKind.REPLACE, 1, ["b"], ["x", "y", "z"])],
        )
        assert _texts(rows) == ["a", "b", "y", "z", "c"]
        assert _statuses(rows) == [U, C, I, I, U]

    @pytest.mark.parametrize("p,q", [(1, 1), (3, 1), (1, 3), (2, 5), (4, 2)])
    def test_length_law(self, p, q):
        source_block = [f"s{i}" for i in range(p)]
        target_block = [f"t{i}" for i in range(q)]
        original = ["pre", *source_block, "post"]
        rows = annotate(original, [_op(EditKind.REPLACE, 1, source_block, target_block)])

        block = rows[1:-1]
        assert len(block) == max(p, q)
        assert _statuses(block).count(C) == min(p, q)
        if p > q:
            assert _statuses(block).count(D) == p - q
        elif q > p:
            assert _statuses(block).count(I) == q - p
        assert rows[0] == AnnotatedRow("pre", U)
        assert rows[-1] == AnnotatedRow("post", U)


class TestOrdering:
    def _edits(self):
        return [
            _op(EditKind.INSERT, 1, [], ["x"]),
            _op(EditKind.REPLACE, 2, ["c"], ["y", "z"]),
            _op(EditKind.DELETE, 3, ["d"], []),
        ]

    def test_later_edits_do_not_shift_earlier_positions(self):
        rows = annotate(["a", "b", "c", "d", "e"], self._edits())
        assert _texts(rows) == ["a", "x", "b", "c", "z", "d", "e"]
        assert _statuses(rows) == [U, I, U, C, I, D, U]

    def test_input_order_does_not_matter(self):
        edits = self._edits()
        forward = annotate(["a", "b", "c", "d", "e"], edits)
        shuffled = annotate(["a", "b", "c", "d", "e"], [edits[2], edits[0], edits[1]])
        assert forward == shuffled

    def test_input_edit_list_untouched(self):
        edits = self._edits()
        before = list(edits)
        annotate(["a", "b", "c", "d", "e"], edits)
        assert edits == before

    def test_every_original_line_kept(self):
        original = ["a", "b", "c", "d", "e"]
        rows = annotate(original, self._edits())
        kept = [r.text for r in rows if r.status is not I]
        assert kept == original


class TestMalformed:
    def test_missing_source_payload(self):
        with pytest.raises(DiffComputationError):
            annotate(["a"], [_op(EditKind.DELETE, 0, None, [])])

    def test_missing_target_payload(self):
        with pytest.raises(DiffComputationError):
            annotate(["a"], [_op(EditKind.REPLACE, 0, ["a"], None)])

    def test_block_past_end(self):
        with pytest.raises(DiffComputationError):
            annotate(["a", "b"], [_op(EditKind.DELETE, 1, ["b", "c"], [])])

    def test_insert_past_end(self):
        with pytest.raises(DiffComputationError):
            annotate(["a"], [_op(EditKind.INSERT, 2, [], ["x"])])

    def test_negative_position(self):
        with pytest.raises(DiffComputationError):
            annotate(["a"], [_op(EditKind.DELETE, -1, ["a"], [])])

    def test_no_partial_result_when_later_edit_is_bad(self):
        good = _op(EditKind.DELETE, 0, ["a"], [])
        bad = _op(EditKind.INSERT, 1, [], None)
        with pytest.raises(DiffComputationError, match="missing"):
            annotate(["a", "b"], [good, bad])

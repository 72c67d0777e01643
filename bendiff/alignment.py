"""Row alignment of a diff result for side-by-side display."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from bendiff.diff import DiffResult, LineOp


@dataclass(frozen=True)
class AlignedRow:
    """One display row; the missing side of an insert or delete is None."""

    left: int | None
    right: int | None
    op: LineOp = LineOp.EQUAL


def _equal_run(left_pos: int, right_pos: int, count: int) -> Iterator[AlignedRow]:
    for offset in range(count):
        yield AlignedRow(left_pos + offset, right_pos + offset, LineOp.EQUAL)


def build_aligned_rows(result: DiffResult) -> list[AlignedRow]:
    """Expand hunks into a full row stream including equal runs.

    Raises ValueError when the hunks do not fit the recorded line counts.
    """
    rows: list[AlignedRow] = []
    left_pos = right_pos = 0

    for hunk in result.hunks:
        gap_left = hunk.left_start - left_pos
        gap_right = hunk.right_start - right_pos
        if gap_left < 0 or gap_right < 0 or gap_left != gap_right:
            raise ValueError("hunk start does not follow the previous hunk")
        rows.extend(_equal_run(left_pos, right_pos, gap_left))
        left_pos += gap_left
        right_pos += gap_right

        for line in hunk.lines:
            if line.op is LineOp.DELETE:
                rows.append(AlignedRow(line.left_index, None, LineOp.DELETE))
                left_pos += 1
            elif line.op is LineOp.INSERT:
                rows.append(AlignedRow(None, line.right_index, LineOp.INSERT))
                right_pos += 1
            else:
                rows.append(AlignedRow(line.left_index, line.right_index, LineOp.EQUAL))
                left_pos += 1
                right_pos += 1

        if (left_pos, right_pos) != (
            hunk.left_start + hunk.left_count,
            hunk.right_start + hunk.right_count,
        ):
            raise ValueError("hunk counts do not match its lines")

    tail_left = result.left_line_count - left_pos
    tail_right = result.right_line_count - right_pos
    if tail_left < 0 or tail_right < 0 or tail_left != tail_right:
        raise ValueError("hunks do not fit the line counts")
    rows.extend(_equal_run(left_pos, right_pos, tail_left))
    return rows


def left_line_classification(result: DiffResult) -> list[LineOp]:
    """Per left line: DELETE if removed, otherwise EQUAL."""
    out = [LineOp.EQUAL] * result.left_line_count
    for hunk in result.hunks:
        for line in hunk.lines:
            if line.op is LineOp.DELETE and line.left_index is not None:
                out[line.left_index] = LineOp.DELETE
    return out


def right_line_classification(result: DiffResult) -> list[LineOp]:
    """Per right line: INSERT if added, otherwise EQUAL."""
    out = [LineOp.EQUAL] * result.right_line_count
    for hunk in result.hunks:
        for line in hunk.lines:
            if line.op is LineOp.INSERT and line.right_index is not None:
                out[line.right_index] = LineOp.INSERT
    return out
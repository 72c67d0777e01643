"""Render documents built from a line diff."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from bendiff.alignment import AlignedRow, build_aligned_rows
from bendiff.diff import DiffResult, LineOp
from bendiff.loaded_text_file import LoadedTextFile, LoadStatus


class RenderBlockSide(Enum):
    """Which side a block of lines belongs to."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


@dataclass
class RenderLine:
    """A rendered row; line numbers are 1-based and None where absent."""

    left_line: int | None = None
    right_line: int | None = None
    op: LineOp = LineOp.EQUAL
    left_text: str = ""
    right_text: str = ""


@dataclass
class RenderBlock:
    """A run of rendered lines sharing one side."""

    side: RenderBlockSide = RenderBlockSide.BOTH
    lines: list[RenderLine] = field(default_factory=list)


@dataclass
class RenderDocument:
    """The blocks that make up a rendered diff."""

    blocks: list[RenderBlock] = field(default_factory=list)


def _text_at(lines: Sequence[str], index: int) -> str:
    return lines[index] if 0 <= index < len(lines) else ""


def _line_from_row(left: LoadedTextFile, right: LoadedTextFile, row: AlignedRow) -> RenderLine:
    line = RenderLine(op=row.op)
    if row.left is not None:
        line.left_line = row.left + 1
        line.left_text = _text_at(left.lines, row.left)
    if row.right is not None:
        line.right_line = row.right + 1
        line.right_text = _text_at(right.lines, row.right)
    return line


def _all_deleted(lines: Sequence[str]) -> list[RenderLine]:
    return [
        RenderLine(left_line=number, op=LineOp.DELETE, left_text=text)
        for number, text in enumerate(lines, start=1)
    ]


def _all_inserted(lines: Sequence[str]) -> list[RenderLine]:
    return [
        RenderLine(right_line=number, op=LineOp.INSERT, right_text=text)
        for number, text in enumerate(lines, start=1)
    ]


def _one_sided(
    left: LoadedTextFile,
    right: LoadedTextFile,
    deleted_side: RenderBlockSide,
    inserted_side: RenderBlockSide,
) -> RenderDocument | None:
    left_ok = left.status is LoadStatus.OK
    right_ok = right.status is LoadStatus.OK
    if left_ok and not right_ok:
        return RenderDocument([RenderBlock(deleted_side, _all_deleted(left.lines))])
    if right_ok and not left_ok:
        return RenderDocument([RenderBlock(inserted_side, _all_inserted(right.lines))])
    if not (left_ok and right_ok):
        return RenderDocument()
    return None


def build_side_by_side_render(
    left: LoadedTextFile, right: LoadedTextFile, result: DiffResult
) -> RenderDocument:
    """Build a single block of aligned rows for side-by-side display.

    When only one side loaded, its lines are all deletions or insertions;
    when neither did, the document is empty.
    """
    special = _one_sided(left, right, RenderBlockSide.BOTH, RenderBlockSide.BOTH)
    if special is not None:
        return special
    lines = [_line_from_row(left, right, row) for row in build_aligned_rows(result)]
    return RenderDocument([RenderBlock(RenderBlockSide.BOTH, lines)])


_SIDE_FOR_OP = {
    LineOp.EQUAL: RenderBlockSide.BOTH,
    LineOp.DELETE: RenderBlockSide.LEFT,
    LineOp.INSERT: RenderBlockSide.RIGHT,
}


def build_inline_render(
    left: LoadedTextFile, right: LoadedTextFile, result: DiffResult
) -> RenderDocument:
    """Build blocks for inline display.

    Equal lines go into BOTH blocks, deletions into LEFT blocks and
    insertions into RIGHT blocks; consecutive lines of one side share a block.
    """
    special = _one_sided(left, right, RenderBlockSide.LEFT, RenderBlockSide.RIGHT)
    if special is not None:
        return special

    doc = RenderDocument()
    for row in build_aligned_rows(result):
        side = _SIDE_FOR_OP[row.op]
        if not doc.blocks or doc.blocks[-1].side is not side:
            doc.blocks.append(RenderBlock(side))
        doc.blocks[-1].lines.append(_line_from_row(left, right, row))
    return doc
"""Line diff based on the Myers O(ND) algorithm."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from bendiff.whitespace import WhitespaceMode, make_comparison_key


class LineOp(Enum):
    """Edit operation for a single line."""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class DiffLine:
    """One step of the edit script.

    Indices refer to the input sequences; an insertion has no left index and
    a deletion has no right index.
    """

    op: LineOp
    left_index: int | None
    right_index: int | None


@dataclass
class DiffHunk:
    """A contiguous run of edits without context lines."""

    left_start: int = 0
    left_count: int = 0
    right_start: int = 0
    right_count: int = 0
    lines: list[DiffLine] = field(default_factory=list)


@dataclass
class DiffResult:
    """Hunks of a line diff plus the sizes of both inputs."""

    mode: WhitespaceMode = WhitespaceMode.EXACT
    hunks: list[DiffHunk] = field(default_factory=list)
    left_line_count: int = 0
    right_line_count: int = 0


def _myers_ops(left: Sequence[str], right: Sequence[str]) -> list[DiffLine]:
    n, m = len(left), len(right)
    v: dict[int, int] = {1: 0}
    trace: list[dict[int, int]] = []
    end_x = end_y = 0
    found = False

    for d in range(n + m + 1):
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[k - 1] < v[k + 1]):
                x = v[k + 1]
            else:
                x = v[k - 1] + 1
            y = x - k
            while x < n and y < m and left[x] == right[y]:
                x += 1
                y += 1
            v[k] = x
            if x >= n and y >= m:
                end_x, end_y = x, y
                found = True
                break
        trace.append(dict(v))
        if found:
            break

    x, y = end_x, end_y
    reversed_ops: list[DiffLine] = []

    for d in range(len(trace) - 1, 0, -1):
        v_prev = trace[d - 1]
        k = x - y
        if k == -d or (k != d and v_prev[k - 1] < v_prev[k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = v_prev[prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            reversed_ops.append(DiffLine(LineOp.EQUAL, x - 1, y - 1))
            x -= 1
            y -= 1

        if x == prev_x:
            reversed_ops.append(DiffLine(LineOp.INSERT, None, y - 1))
            y -= 1
        else:
            reversed_ops.append(DiffLine(LineOp.DELETE, x - 1, None))
            x -= 1

    while x > 0 and y > 0:
        reversed_ops.append(DiffLine(LineOp.EQUAL, x - 1, y - 1))
        x -= 1
        y -= 1
    while x > 0:
        reversed_ops.append(DiffLine(LineOp.DELETE, x - 1, None))
        x -= 1
    while y > 0:
        reversed_ops.append(DiffLine(LineOp.INSERT, None, y - 1))
        y -= 1

    reversed_ops.reverse()
    return reversed_ops


def _edit_hunks(ops: Sequence[DiffLine]) -> list[DiffHunk]:
    hunks: list[DiffHunk] = []
    current: DiffHunk | None = None
    left_pos = right_pos = 0

    for line in ops:
        if line.op is LineOp.EQUAL:
            if current is not None:
                hunks.append(current)
                current = None
            left_pos += 1
            right_pos += 1
            continue

        if current is None:
            current = DiffHunk(left_start=left_pos, right_start=right_pos)
        current.lines.append(line)
        if line.op is LineOp.DELETE:
            current.left_count += 1
            left_pos += 1
        else:
            current.right_count += 1
            right_pos += 1

    if current is not None:
        hunks.append(current)
    return hunks


def diff_lines(
    left: Sequence[str],
    right: Sequence[str],
    mode: WhitespaceMode = WhitespaceMode.EXACT,
) -> DiffResult:
    """Diff two sequences of lines into zero-context edit hunks."""
    left_keys = [make_comparison_key(line, mode) for line in left]
    right_keys = [make_comparison_key(line, mode) for line in right]
    return DiffResult(
        mode=mode,
        hunks=_edit_hunks(_myers_ops(left_keys, right_keys)),
        left_line_count=len(left),
        right_line_count=len(right),
    )
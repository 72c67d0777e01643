"""Render model for a file that was deleted."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from bendiff.loaded_text_file import LoadedTextFile


class RenderLineKind(Enum):
    """How a rendered line is shown."""

    CONTEXT = "context"
    ADDED = "added"
    DELETED = "deleted"


@dataclass
class RenderLine:
    """A single rendered line of text."""

    kind: RenderLineKind = RenderLineKind.CONTEXT
    text: str = ""


@dataclass
class RenderPane:
    """A titled column of rendered lines."""

    title: str = ""
    lines: list[RenderLine] = field(default_factory=list)


class DiffViewMode(Enum):
    """Layout of the diff view."""

    INLINE = "inline"
    SIDE_BY_SIDE = "side_by_side"


@dataclass
class DiffRenderModel:
    """Panes to display; inline mode uses ``inline_pane``, side-by-side the others."""

    mode: DiffViewMode = DiffViewMode.INLINE
    inline_pane: RenderPane = field(default_factory=RenderPane)
    left_pane: RenderPane = field(default_factory=RenderPane)
    right_pane: RenderPane = field(default_factory=RenderPane)
    is_deleted_file: bool = False


def build_deleted_file_render_model(
    committed: LoadedTextFile, mode: DiffViewMode
) -> DiffRenderModel:
    """Show every committed line as deleted.

    Side-by-side mode leaves the working-tree pane empty.
    """
    model = DiffRenderModel(mode=mode, is_deleted_file=True)

    def deleted_lines() -> list[RenderLine]:
        return [RenderLine(RenderLineKind.DELETED, text) for text in committed.lines]

    if mode is DiffViewMode.INLINE:
        model.inline_pane = RenderPane("Deleted file", deleted_lines())
        return model

    model.left_pane = RenderPane("Deleted file (committed)", deleted_lines())
    model.right_pane = RenderPane("Deleted file (working tree)", [])
    return model
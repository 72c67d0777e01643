"""Loading UTF-8 text with newline normalisation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LoadStatus(Enum):
    """Outcome of loading a text file."""

    OK = "ok"
    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"
    NOT_UTF8 = "not_utf8"


@dataclass
class LoadedTextFile:
    """Lines of a text file, without their line terminators."""

    absolute_path: Path = field(default_factory=Path)
    status: LoadStatus = LoadStatus.OK
    lines: list[str] = field(default_factory=list)
    had_final_newline: bool = False


@dataclass
class SplitLinesResult:
    """Lines of a text plus whether it ended with a line break."""

    lines: list[str] = field(default_factory=list)
    had_final_newline: bool = False


def split_lines_normalize_newlines(text: str) -> SplitLinesResult:
    """Split ``text`` on CRLF, LF and lone CR.

    Returned lines carry no terminators; ``had_final_newline`` is true when
    the text ends with a line break.
    """
    if not text:
        return SplitLinesResult()
    lines = _LINE_BREAK.split(text)
    had_final_newline = text[-1] in "\r\n"
    if had_final_newline:
        lines.pop()
    return SplitLinesResult(lines=lines, had_final_newline=had_final_newline)


def is_valid_utf8(data: bytes) -> bool:
    """Return True if ``data`` is well-formed UTF-8.

    Overlong forms, surrogate halves and code points above U+10FFFF are
    rejected.
    """
    try:
        bytes(data).decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return False
    return True


def load_utf8_text_from_bytes(data: bytes, source_label: Path | str) -> LoadedTextFile:
    """Decode ``data`` as UTF-8 and split it into lines."""
    label = Path(source_label)
    try:
        text = bytes(data).decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return LoadedTextFile(absolute_path=label, status=LoadStatus.NOT_UTF8)
    split = split_lines_normalize_newlines(text)
    return LoadedTextFile(
        absolute_path=label,
        status=LoadStatus.OK,
        lines=split.lines,
        had_final_newline=split.had_final_newline,
    )


def is_unsupported_text(loaded: LoadedTextFile) -> bool:
    """Return True when the file could not be treated as UTF-8 text."""
    return loaded.status is LoadStatus.NOT_UTF8


def load_utf8_text_file(path: Path | str) -> LoadedTextFile:
    """Load a file from disk as UTF-8 text.

    Missing files give NOT_FOUND, other read failures UNREADABLE and
    malformed content NOT_UTF8.
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except FileNotFoundError:
        return LoadedTextFile(absolute_path=file_path, status=LoadStatus.NOT_FOUND)
    except OSError:
        return LoadedTextFile(absolute_path=file_path, status=LoadStatus.UNREADABLE)
    return load_utf8_text_from_bytes(data, file_path)
# bendiff

The core of a diff viewer, as a library. It provides:

- a line diff based on Myers' algorithm, with three whitespace modes (`WhitespaceMode.EXACT`, `IGNORE_TRAILING` and `IGNORE_ALL`; whitespace here means space, tab and carriage return);
- aligned rows and render documents for inline and side-by-side views;
- UTF-8 validation, plus text loading that normalises CR, LF and CRLF line endings;
- recursive directory comparison that reports same, different, left-only, right-only and unreadable files;
- git working-tree status through `git status --porcelain=v1 -z`, plus the committed side of a file through `git show HEAD:<path>`;
- grouping of changed files into a flat list with one header row per directory.

It uses only the standard library. The repository functions run `git`, which must be on your `PATH`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Diffing lines

```python
from bendiff.diff import diff_lines
from bendiff.whitespace import WhitespaceMode
from bendiff.alignment import build_aligned_rows, left_line_classification

left = ["a", "b", "c"]
right = ["a", "x", "c"]

result = diff_lines(left, right, WhitespaceMode.EXACT)
for hunk in result.hunks:
    print(hunk.left_start, hunk.left_count, hunk.right_start, hunk.right_count)

for row in build_aligned_rows(result):
    print(row.op, row.left, row.right)

print(left_line_classification(result))
```

Hunks carry no context lines. Each hunk is a contiguous run of deletions and insertions. `DiffLine.left_index` is `None` for an insertion, and `right_index` is `None` for a deletion. `build_aligned_rows` fills in the equal runs between hunks. It raises `ValueError` if the hunks do not fit the line counts recorded in the result.

## Loading text and rendering

```python
from bendiff.diff import diff_lines
from bendiff.whitespace import WhitespaceMode
from bendiff.loaded_text_file import load_utf8_text_file, LoadStatus
from bendiff.diff_render import build_inline_render, build_side_by_side_render

old = load_utf8_text_file("old.txt")
new = load_utf8_text_file("new.txt")
result = diff_lines(old.lines, new.lines, WhitespaceMode.IGNORE_TRAILING)

doc = build_side_by_side_render(old, new, result)
for block in doc.blocks:
    for line in block.lines:
        print(line.op, line.left_line, line.left_text, line.right_line, line.right_text)
```

`load_utf8_text_file` reports one of four statuses in `LoadStatus`: `OK`, `NOT_FOUND`, `UNREADABLE` or `NOT_UTF8`. `load_utf8_text_from_bytes` does the same job for bytes already in memory.

Line numbers in render lines start at 1. If only one side loaded, that side is rendered as wholly deleted or wholly inserted. If neither side loaded, the document is empty. In inline mode, equal lines go into `BOTH` blocks, deletions into `LEFT` blocks and insertions into `RIGHT` blocks.

`bendiff.render_model.build_deleted_file_render_model` builds a simpler pane model for a deleted file. It takes the committed text and a `DiffViewMode`.

## Comparing directories

```python
from bendiff.dir_diff import diff_directories

for entry in diff_directories("left_dir", "right_dir").entries:
    print(entry.status, entry.relative_path)
```

Entries are sorted by relative path, and their paths use `/` as the separator. Nothing is skipped by name, so `.git` directories are included. You can also call the building blocks directly: `bendiff.dir_walk.list_files_recursive` and `bendiff.file_compare.compare_files_bytewise`.

## Repository status

```python
from bendiff.repo_discovery import find_git_repo_root
from bendiff.repo_status import get_repo_status_with_diagnostics
from bendiff.file_list_rows import build_grouped_file_list_rows
from bendiff.content_sources import resolve_repo_content

root = find_git_repo_root(".")
outcome = get_repo_status_with_diagnostics(root)
if outcome.process.exit_code != 0:
    print(outcome.process.stderr)

for row in build_grouped_file_list_rows(outcome.status.files):
    print(row.display_text)

sides = resolve_repo_content(root, outcome.status.files[0])
print(sides.left.kind, sides.right.kind, sides.right.absolute_path)
```

`find_git_repo_root` returns the root only where `.git` is a directory. It does not recognise worktrees that use a `.git` file.

Ignored entries and submodules are left out of the status. For a rename, `rename_from` holds the old path. You can parse output you already have with `bendiff.porcelain.parse_porcelain_v1`.

In repository mode, the left side is the output of `git show HEAD:<path>`, read from the old path for renames. That output is held as bytes in `ContentSource.data`, together with the `ProcessResult` that produced it. The right side is the file in the working tree; for a deletion its kind is `MISSING`.

`bendiff.process.run_process` runs a command and captures its output. It returns exit code 127, with a message in `stderr`, when the command cannot be started.

## What it does not do

This is a library only. It has no graphical viewer and no command-line program. Displaying the render documents is left to the caller.
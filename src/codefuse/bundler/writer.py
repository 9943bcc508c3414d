"""Streaming bundle writer and pipeline runner."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from codefuse.bundler.models import (
    INVALID_INPUT,
    OUTPUT_DIR_NOT_FOUND,
    BundleError,
    BundleOutcome,
    BundleResult,
)
from codefuse.config import BundleOptions, SelectionConfig
from codefuse.selection import order_paths, select_files

COMMENT_PREFIX = "// "


def write_bundle(
    output_path: Path,
    paths: Iterable[Path],
    options: BundleOptions,
    *,
    root: Path,
) -> BundleResult:
    """Stream every path's lines into output_path, truncating it first.

    Paths must live under root; provenance comments use their root-relative
    POSIX form. Each source file is closed before the next one is opened.
    """
    files_written = 0
    lines_written = 0
    selected: list[str] = []
    with output_path.open("w", encoding="utf-8", newline="\n") as out:
        if options.author is not None:
            out.write(f"{COMMENT_PREFIX}Created by: {options.author}\n")
            lines_written += 1
        for path in paths:
            relative_path = path.relative_to(root).as_posix()
            if options.note:
                out.write(f"{COMMENT_PREFIX}Source code from: {relative_path}\n")
                lines_written += 1
            lines_written += _copy_lines(path, out, options.remove_empty_lines)
            out.write("\n")
            lines_written += 1
            files_written += 1
            selected.append(relative_path)
    return BundleResult(
        output_path=output_path,
        files_written=files_written,
        lines_written=lines_written,
        selected_paths=tuple(selected),
    )


def _copy_lines(path: Path, out: TextIO, remove_empty_lines: bool) -> int:
    copied = 0
    with path.open("r", encoding="utf-8-sig", errors="replace") as handle:
        for raw_line in handle:
            line = raw_line.rstrip("\n")
            if remove_empty_lines and not line.strip():
                continue
            out.write(f"{line}\n")
            copied += 1
    return copied


def run_bundle(
    options: BundleOptions,
    *,
    root: Path,
    selection: SelectionConfig,
) -> BundleOutcome:
    """Select, order and write files, reporting failures as values."""
    root = root.resolve()
    if options.output is None:
        return BundleOutcome(
            error=BundleError(code=INVALID_INPUT, message="the input not valid!")
        )
    output_path = (root / options.output).resolve()
    if not output_path.parent.is_dir():
        return BundleOutcome(
            error=BundleError(code=OUTPUT_DIR_NOT_FOUND, message="File path is invalid")
        )
    try:
        paths = select_files(root, options.language, selection, skip=(output_path,))
        ordered = order_paths(paths, options.sort)
        result = write_bundle(output_path, ordered, options, root=root)
    except (OSError, ValueError):
        return BundleOutcome(
            error=BundleError(code=INVALID_INPUT, message="the input not valid!")
        )
    return BundleOutcome(result=result)

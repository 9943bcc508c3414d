"""Deterministic source file discovery."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path, PurePosixPath

from codefuse.config import SelectionConfig
from codefuse.languages import classify_path, matches_request, parse_language_request


def is_excluded_directory(relative_dir: str, config: SelectionConfig) -> bool:
    """Return True when a root-relative POSIX directory path is build output."""
    lowered = relative_dir.lower()
    names = [name.lower() for name in config.exclude_dirs]
    if config.exclude_match == "substring":
        return any(name in lowered for name in names)
    return any(segment in names for segment in PurePosixPath(lowered).parts)


def select_files(
    root: Path,
    language: str | None,
    config: SelectionConfig,
    *,
    skip: Iterable[Path] = (),
) -> Iterator[Path]:
    """Yield files under root whose language is requested, in walk order.

    Files directly inside a directory are yielded before descending into its
    subdirectories; entries are visited in name order. Excluded directories are
    pruned together with everything below them.
    """
    root = root.resolve()
    requested = parse_language_request(language)
    if not requested:
        return
    skipped = {path.resolve() for path in skip}
    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        with os.scandir(current) as entries:
            ordered_entries = sorted(entries, key=lambda item: item.name)
        subdirs: list[Path] = []
        for entry in ordered_entries:
            full_path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                relative = full_path.relative_to(root).as_posix()
                if not is_excluded_directory(relative, config):
                    subdirs.append(full_path)
                continue
            if not entry.is_file(follow_symlinks=False) or full_path in skipped:
                continue
            if matches_request(classify_path(full_path), requested):
                yield full_path
        stack.extend(reversed(subdirs))

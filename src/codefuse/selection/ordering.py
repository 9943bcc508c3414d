"""Ordering policy for selected files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from codefuse.languages import classify_path

SORT_BY_NAME = "name"
SORT_BY_TYPE = "type"


def resolve_sort_mode(value: str | None) -> str | None:
    """Normalize a sort option: None keeps walk order, "type" sorts by language, else name."""
    if value is None:
        return None
    if value.lower() == SORT_BY_TYPE:
        return SORT_BY_TYPE
    return SORT_BY_NAME


def order_paths(paths: Iterable[Path], mode: str | None) -> Iterable[Path]:
    """Apply the ordering policy; sorted modes materialize the sequence."""
    resolved = resolve_sort_mode(mode)
    if resolved is None:
        return paths
    if resolved == SORT_BY_TYPE:
        return sorted(paths, key=classify_path)
    return sorted(paths, key=lambda path: path.name)

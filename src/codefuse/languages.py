"""Extension to language tag classification."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePath
from types import MappingProxyType
from typing import Final

ALL_LANGUAGES_TOKEN: Final[str] = "all"

LANGUAGE_BY_EXTENSION: Final[Mapping[str, str]] = MappingProxyType(
    {
        ".cs": "csharp",
        ".sql": "sql",
        ".html": "html",
        ".js": "javascript",
        ".py": "python",
        ".java": "java",
        ".cpp": "cpp",
        ".ts": "typescript",
        ".asm": "assembly",
        ".c": "c",
        ".jsx": "react",
    }
)


def classify(extension: str) -> str:
    """Return the language tag for an extension, or "" when unknown."""
    return LANGUAGE_BY_EXTENSION.get(extension, "")


def classify_path(path: PurePath | str) -> str:
    """Classify a path by its final suffix."""
    return classify(PurePath(path).suffix)


def parse_language_request(value: str | None) -> frozenset[str]:
    """Split a comma-delimited language request into tokens."""
    if value is None:
        return frozenset()
    return frozenset(token.strip() for token in value.split(",") if token.strip())


def matches_request(tag: str, requested: frozenset[str]) -> bool:
    """Return True when a classified tag is selected by the request."""
    if not tag:
        return False
    if ALL_LANGUAGES_TOKEN in requested:
        return True
    return tag in requested

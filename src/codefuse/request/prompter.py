"""Line-oriented prompts with default values."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TextIO, TypeVar

from codefuse.config import BundleOptions

T = TypeVar("T")

OUTPUT_LABEL = "Output file path and name: "
LANGUAGE_LABEL = "Programming languages (comma-separated): "
NOTE_LABEL = "Include source code comments (true/false): "
AUTHOR_LABEL = "Name of the creator of the file: "
REMOVE_EMPTY_LINES_LABEL = "Remove empty lines from the source code (true/false): "
SORT_LABEL = "Sort order (name/type): "


def parse_string(value: str) -> str:
    return value


def parse_bool(value: str) -> bool:
    """Parse "true"/"false" case-insensitively."""
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ValueError(f"String '{value}' was not recognized as a valid Boolean.")


def parse_path(value: str) -> Path:
    return Path(value)


def prompt(
    label: str,
    default: T,
    parse: Callable[[str], T],
    *,
    in_stream: TextIO,
    out_stream: TextIO,
) -> T:
    """Show label and read one line; blank input keeps the default."""
    out_stream.write(label)
    out_stream.flush()
    line = in_stream.readline().rstrip("\r\n")
    if not line.strip():
        return default
    return parse(line)


def prompt_for_options(
    defaults: BundleOptions, *, in_stream: TextIO, out_stream: TextIO
) -> BundleOptions:
    """Ask for every bundle option, seeded with defaults."""
    streams = {"in_stream": in_stream, "out_stream": out_stream}
    return BundleOptions(
        output=prompt(OUTPUT_LABEL, defaults.output, parse_path, **streams),
        language=prompt(LANGUAGE_LABEL, defaults.language, parse_string, **streams),
        note=prompt(NOTE_LABEL, defaults.note, parse_bool, **streams),
        author=prompt(AUTHOR_LABEL, defaults.author, parse_string, **streams),
        remove_empty_lines=prompt(
            REMOVE_EMPTY_LINES_LABEL, defaults.remove_empty_lines, parse_bool, **streams
        ),
        sort=prompt(SORT_LABEL, defaults.sort, parse_string, **streams),
    )

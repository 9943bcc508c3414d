"""Serialize bundle options as a replayable command line."""

from __future__ import annotations

import shlex
from pathlib import Path

from codefuse.config import BundleOptions

RESPONSE_FILE_NAME = "response_file.rsp"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def build_bundle_command(options: BundleOptions) -> str:
    """Return a single-line `bundle` invocation; unset options are omitted."""
    parts = ["bundle"]
    if options.output is not None:
        parts.extend(["--output", shlex.quote(str(options.output))])
    if options.language is not None:
        parts.extend(["--language", shlex.quote(options.language)])
    parts.extend(["--note", _format_bool(options.note)])
    if options.author is not None:
        parts.extend(["--author", shlex.quote(options.author)])
    parts.extend(["--remove-empty-lines", _format_bool(options.remove_empty_lines)])
    if options.sort is not None:
        parts.extend(["--sort", shlex.quote(options.sort)])
    return " ".join(parts)


def write_response_file(root: Path, options: BundleOptions) -> Path:
    """Write the command to root/response_file.rsp and return its path."""
    path = root / RESPONSE_FILE_NAME
    path.write_text(build_bundle_command(options), encoding="utf-8")
    return path

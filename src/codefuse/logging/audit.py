"""Structured JSONL audit log of command runs."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from datetime import UTC, datetime
from pathlib import Path

from codefuse.config import BundleOptions


@dataclass(slots=True, frozen=True)
class RunEvent:
    """Sanitized representation of a single command run."""

    timestamp: str
    command: str
    ok: bool
    error_code: str | None
    metadata: dict[str, object]


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sanitize_options(options: BundleOptions) -> dict[str, object]:
    """Sanitize options so free-text values are logged by presence and length only."""
    sanitized: dict[str, object] = {}
    for field in sorted(fields(options), key=lambda item: item.name):
        key = field.name
        value = getattr(options, key)
        if key in {"language", "sort"} and isinstance(value, str):
            sanitized[key] = value
            continue
        if isinstance(value, bool) or value is None:
            sanitized[key] = value
            continue
        if isinstance(value, Path):
            sanitized[key] = value.as_posix()
            continue
        sanitized[f"{key}_present"] = True
        sanitized[f"{key}_length"] = len(str(value))
    return sanitized


class JsonlAuditLogger:
    """Append-only JSONL audit logger."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    def append(self, event: RunEvent) -> None:
        """Append an event as one JSON object per line."""
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(event), sort_keys=True))
            handle.write("\n")

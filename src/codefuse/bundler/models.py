"""Typed results for bundle runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

OUTPUT_DIR_NOT_FOUND = "OUTPUT_DIR_NOT_FOUND"
INVALID_INPUT = "INVALID_INPUT"


@dataclass(slots=True, frozen=True)
class BundleResult:
    """Totals for one written bundle."""

    output_path: Path
    files_written: int
    lines_written: int
    selected_paths: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class BundleError:
    """Recovered bundle failure with a user-facing message."""

    code: str
    message: str


@dataclass(slots=True, frozen=True)
class BundleOutcome:
    """Either a bundle result or the error that stopped the run."""

    result: BundleResult | None = None
    error: BundleError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the bundle was written."""
        return self.error is None

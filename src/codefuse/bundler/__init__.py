"""Bundle writing interfaces."""

from .models import (
    INVALID_INPUT,
    OUTPUT_DIR_NOT_FOUND,
    BundleError,
    BundleOutcome,
    BundleResult,
)
from .writer import run_bundle, write_bundle

__all__ = [
    "INVALID_INPUT",
    "OUTPUT_DIR_NOT_FOUND",
    "BundleError",
    "BundleOutcome",
    "BundleResult",
    "run_bundle",
    "write_bundle",
]

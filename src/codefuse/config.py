"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

CONFIG_FILE_NAME = "codefuse.toml"

DEFAULT_EXCLUDE_DIRS = ("bin", "debug")
EXCLUDE_MATCH_MODES = ("segment", "substring")


@dataclass(slots=True, frozen=True)
class BundleOptions:
    """Options shared by the bundle and create-rsp commands."""

    output: Path | None = None
    language: str | None = None
    note: bool = False
    author: str | None = None
    remove_empty_lines: bool = False
    sort: str | None = None


@dataclass(slots=True, frozen=True)
class SelectionConfig:
    """Build-output directory exclusion settings."""

    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    exclude_match: str = "segment"


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Fully merged configuration for one invocation."""

    root: Path
    defaults: BundleOptions
    selection: SelectionConfig
    audit_log: Path | None

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot."""
        return {
            "root": str(self.root),
            "bundle": {
                "output": str(self.defaults.output) if self.defaults.output else None,
                "language": self.defaults.language,
                "note": self.defaults.note,
                "author": self.defaults.author,
                "remove_empty_lines": self.defaults.remove_empty_lines,
                "sort": self.defaults.sort,
            },
            "selection": {
                "exclude_dirs": list(self.selection.exclude_dirs),
                "exclude_match": self.selection.exclude_match,
            },
            "audit": {"path": str(self.audit_log) if self.audit_log else None},
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional command-line values applied at highest precedence."""

    output: Path | None = None
    language: str | None = None
    note: bool | None = None
    author: str | None = None
    remove_empty_lines: bool | None = None
    sort: str | None = None
    audit_log: Path | None = None


def default_config(root: Path) -> AppConfig:
    """Build default config for a given root directory."""
    return AppConfig(
        root=root.resolve(),
        defaults=BundleOptions(),
        selection=SelectionConfig(),
        audit_log=None,
    )


def load_repo_config_file(root: Path) -> dict[str, object]:
    """Load optional codefuse.toml from the root directory."""
    config_path = root / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _optional_string(table: dict[str, object], section: str, field: str) -> str | None:
    value = table.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Config field '{section}.{field}' must be a string.")
    return value


def _optional_bool(table: dict[str, object], section: str, field: str) -> bool | None:
    value = table.get(field)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ValueError(f"Config field '{section}.{field}' must be a boolean.")
    return value


def _tuple_of_strings(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"Config field '{section}.{field}' must contain only strings.")
        output.append(item)
    return tuple(output)


def merge_config(
    base: AppConfig, repo_payload: dict[str, object], overrides: CliOverrides
) -> AppConfig:
    """Merge defaults, repo config, then command-line overrides."""
    bundle_payload = _get_table(repo_payload, "bundle")
    selection_payload = _get_table(repo_payload, "selection")
    audit_payload = _get_table(repo_payload, "audit")

    output = _optional_string(bundle_payload, "bundle", "output")
    file_layer = CliOverrides(
        output=Path(output) if output is not None else None,
        language=_optional_string(bundle_payload, "bundle", "language"),
        note=_optional_bool(bundle_payload, "bundle", "note"),
        author=_optional_string(bundle_payload, "bundle", "author"),
        remove_empty_lines=_optional_bool(bundle_payload, "bundle", "remove_empty_lines"),
        sort=_optional_string(bundle_payload, "bundle", "sort"),
    )
    defaults = _layer_options(base.defaults, file_layer)

    exclude_dirs = base.selection.exclude_dirs
    if "exclude_dirs" in selection_payload:
        exclude_dirs = _tuple_of_strings(
            selection_payload["exclude_dirs"], "selection", "exclude_dirs"
        )
    exclude_match = (
        _optional_string(selection_payload, "selection", "exclude_match")
        or base.selection.exclude_match
    )
    if exclude_match not in EXCLUDE_MATCH_MODES:
        raise ValueError(
            "Config field 'selection.exclude_match' must be one of: "
            + ", ".join(EXCLUDE_MATCH_MODES)
            + "."
        )

    audit_path = _optional_string(audit_payload, "audit", "path")
    audit_log = base.root / audit_path if audit_path is not None else base.audit_log

    merged = AppConfig(
        root=base.root,
        defaults=defaults,
        selection=SelectionConfig(exclude_dirs=exclude_dirs, exclude_match=exclude_match),
        audit_log=audit_log,
    )
    return apply_cli_overrides(merged, overrides)


def _layer_options(current: BundleOptions, layer: CliOverrides) -> BundleOptions:
    return replace(
        current,
        output=layer.output if layer.output is not None else current.output,
        language=layer.language if layer.language is not None else current.language,
        note=layer.note if layer.note is not None else current.note,
        author=layer.author if layer.author is not None else current.author,
        remove_empty_lines=(
            layer.remove_empty_lines
            if layer.remove_empty_lines is not None
            else current.remove_empty_lines
        ),
        sort=layer.sort if layer.sort is not None else current.sort,
    )


def apply_cli_overrides(config: AppConfig, overrides: CliOverrides) -> AppConfig:
    """Apply command-line values at highest precedence."""
    audit_log = overrides.audit_log or config.audit_log
    return AppConfig(
        root=config.root,
        defaults=_layer_options(config.defaults, overrides),
        selection=config.selection,
        audit_log=audit_log.resolve() if audit_log is not None else None,
    )


def load_effective_config(root: Path, overrides: CliOverrides | None = None) -> AppConfig:
    """Load effective config using merge order defaults -> codefuse.toml -> overrides."""
    base = default_config(root)
    payload = load_repo_config_file(base.root)
    return merge_config(base, payload, overrides or CliOverrides())

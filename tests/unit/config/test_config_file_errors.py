from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

from codefuse.config import load_effective_config


def _write(tmp_path: Path, text: str) -> None:
    (tmp_path / "codefuse.toml").write_text(text, encoding="utf-8")


def test_boolean_field_type_is_checked(tmp_path: Path) -> None:
    _write(tmp_path, '[bundle]\nnote = "yes"\n')

    with pytest.raises(ValueError, match="Config field 'bundle.note' must be a boolean."):
        load_effective_config(tmp_path)


def test_section_must_be_table(tmp_path: Path) -> None:
    _write(tmp_path, 'bundle = "python"\n')

    with pytest.raises(ValueError, match="Config section 'bundle' must be a table."):
        load_effective_config(tmp_path)


def test_exclude_dirs_must_be_strings(tmp_path: Path) -> None:
    _write(tmp_path, "[selection]\nexclude_dirs = [1, 2]\n")

    with pytest.raises(ValueError, match="must contain only strings"):
        load_effective_config(tmp_path)


def test_unknown_exclude_match_is_rejected(tmp_path: Path) -> None:
    _write(tmp_path, '[selection]\nexclude_match = "glob"\n')

    with pytest.raises(ValueError, match="selection.exclude_match"):
        load_effective_config(tmp_path)


def test_malformed_toml_raises_decode_error(tmp_path: Path) -> None:
    _write(tmp_path, "[bundle\n")

    with pytest.raises(tomllib.TOMLDecodeError):
        load_effective_config(tmp_path)

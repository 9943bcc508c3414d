from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/codefuse/cli.py",
        "src/codefuse/config.py",
        "src/codefuse/languages.py",
        "src/codefuse/selection/__init__.py",
        "src/codefuse/bundler/__init__.py",
        "src/codefuse/request/__init__.py",
        "src/codefuse/logging/__init__.py",
    ]
    for rel in required:
        assert (root / rel).exists(), rel

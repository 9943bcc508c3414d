from __future__ import annotations

import pytest

from codefuse.languages import (
    LANGUAGE_BY_EXTENSION,
    classify,
    classify_path,
    matches_request,
    parse_language_request,
)


@pytest.mark.parametrize(
    ("extension", "tag"),
    [
        (".cs", "csharp"),
        (".sql", "sql"),
        (".html", "html"),
        (".js", "javascript"),
        (".py", "python"),
        (".java", "java"),
        (".cpp", "cpp"),
        (".ts", "typescript"),
        (".asm", "assembly"),
        (".c", "c"),
        (".jsx", "react"),
    ],
)
def test_known_extensions_map_to_documented_tags(extension: str, tag: str) -> None:
    assert classify(extension) == tag


@pytest.mark.parametrize("extension", ["", ".txt", ".tsx", ".PY", ".Cs", "py", ".h"])
def test_unknown_extensions_map_to_empty_tag(extension: str) -> None:
    assert classify(extension) == ""


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        LANGUAGE_BY_EXTENSION[".rs"] = "rust"  # type: ignore[index]


def test_classify_path_uses_final_suffix() -> None:
    assert classify_path("src/app.min.js") == "javascript"
    assert classify_path("Makefile") == ""


def test_language_request_parsing_splits_and_trims() -> None:
    assert parse_language_request("python, csharp,,java ") == frozenset(
        {"python", "csharp", "java"}
    )
    assert parse_language_request("") == frozenset()
    assert parse_language_request(None) == frozenset()


def test_request_membership_is_token_based_and_case_sensitive() -> None:
    requested = parse_language_request("javascript")
    assert matches_request("javascript", requested) is True
    assert matches_request("java", requested) is False
    assert matches_request("javascript", parse_language_request("JavaScript")) is False


def test_all_token_matches_every_known_tag_but_not_unknown() -> None:
    requested = parse_language_request("all")
    assert all(matches_request(tag, requested) for tag in LANGUAGE_BY_EXTENSION.values())
    assert matches_request("", requested) is False
    assert matches_request("", parse_language_request("python")) is False

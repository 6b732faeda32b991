"""Tests for selection parsing and branch matching."""

import pytest

from git_cp.cli.prompts import match_branch, parse_selection


def test_parse_all() -> None:
    assert parse_selection("all", 3) == [0, 1, 2]
    assert parse_selection(" ALL ", 2) == [0, 1]


def test_parse_list_and_ranges() -> None:
    assert parse_selection("1,3", 5) == [0, 2]
    assert parse_selection("2-4", 5) == [1, 2, 3]
    assert parse_selection("5, 1-2", 5) == [0, 1, 4]


def test_parse_collapses_duplicates() -> None:
    assert parse_selection("1,1,1-2", 3) == [0, 1]


def test_blank_selects_nothing() -> None:
    assert parse_selection("", 3) == []
    assert parse_selection("   ", 3) == []


@pytest.mark.parametrize("text", ["0", "4", "1-9", "x", "3-1", "a-b", "1,,x"])
def test_parse_rejects_invalid_input(text: str) -> None:
    with pytest.raises(ValueError):
        parse_selection(text, 3)


BRANCHES = ["main", "feature/login", "feature/logout", "origin/release"]


def test_match_by_number() -> None:
    assert match_branch(BRANCHES, "2") == "feature/login"
    assert match_branch(BRANCHES, "9") is None


def test_match_by_exact_name() -> None:
    assert match_branch(BRANCHES, "main") == "main"


def test_match_by_unique_substring() -> None:
    assert match_branch(BRANCHES, "RELEASE") == "origin/release"
    assert match_branch(BRANCHES, "logout") == "feature/logout"


def test_ambiguous_or_blank_answer_does_not_match() -> None:
    assert match_branch(BRANCHES, "feature") is None
    assert match_branch(BRANCHES, "") is None

"""Tests for branch name validation and error types."""

from pathlib import Path

import pytest

from git_cp.core.command_runner import CommandResult
from git_cp.core.errors import (
    BranchNameValidationError,
    CommandFailure,
    ConflictDetected,
    NotARepositoryError,
    classify_pick_failure,
)
from git_cp.core.validation import require_repository, validate_branch_name
from tests.fakes.git import FakeGit


def test_valid_names_pass_through() -> None:
    assert validate_branch_name("release/1.2") == "release/1.2"
    assert validate_branch_name("hotfix-42") == "hotfix-42"


def test_name_with_space_is_rejected() -> None:
    with pytest.raises(BranchNameValidationError, match="cannot contain spaces"):
        validate_branch_name("my branch")


def test_name_with_tab_is_rejected() -> None:
    with pytest.raises(BranchNameValidationError):
        validate_branch_name("my\tbranch")


@pytest.mark.parametrize("name", ["", "   "])
def test_empty_name_is_rejected(name: str) -> None:
    with pytest.raises(BranchNameValidationError, match="cannot be empty"):
        validate_branch_name(name)


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_branch_name("")


def test_command_failure_from_result_uses_combined_output() -> None:
    failure = CommandFailure.from_result(
        CommandResult(success=False, stdout="out", stderr="err", exit_code=3)
    )

    assert failure.exit_code == 3
    assert failure.output == "out\nerr"
    assert str(failure) == "out\nerr"


def test_command_failure_without_output_mentions_exit_code() -> None:
    assert "code 5" in str(CommandFailure(5, ""))


def test_require_repository() -> None:
    require_repository(FakeGit(is_repo=True), Path("/repo"))

    with pytest.raises(NotARepositoryError) as exc_info:
        require_repository(FakeGit(is_repo=False), Path("/tmp/x"))

    assert exc_info.value.path == "/tmp/x"


def test_classify_pick_failure_by_unmerged_paths() -> None:
    result = CommandResult.failed("error: could not apply abc")

    conflict = classify_pick_failure(result, ["a.txt", "b.txt"])
    other = classify_pick_failure(result, [])

    assert isinstance(conflict, ConflictDetected)
    assert conflict.files == ["a.txt", "b.txt"]
    assert isinstance(other, CommandFailure)
    assert other.output == "error: could not apply abc"

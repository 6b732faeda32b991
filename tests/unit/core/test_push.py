"""Tests for pushing the target branch."""

from pathlib import Path

from git_cp.core.command_runner import CommandResult
from git_cp.core.errors import CommandFailure, NoUpstreamConfigured
from git_cp.core.push import is_no_upstream_error, push_branch, should_offer_push
from tests.fakes.git import FakeGit

REPO = Path("/repo")
NO_UPSTREAM = CommandResult.failed(
    "fatal: The current branch release has no upstream branch.", exit_code=128
)


def test_successful_push_is_single_attempt() -> None:
    git = FakeGit()

    outcome = push_branch(git, REPO, "origin", "release")

    assert outcome.success
    assert not outcome.used_upstream_retry
    assert outcome.failure() is None
    assert git.push_calls == [("push", "origin", "release")]


def test_no_upstream_retries_once_with_set_upstream() -> None:
    git = FakeGit(push_results=[NO_UPSTREAM])

    outcome = push_branch(git, REPO, "origin", "release")

    assert outcome.success
    assert outcome.used_upstream_retry
    assert git.push_calls == [
        ("push", "origin", "release"),
        ("push", "--set-upstream", "origin", "release"),
    ]


def test_retry_failure_is_reported_without_third_attempt() -> None:
    rejected = CommandResult.failed("! [rejected] release -> release (fetch first)")
    git = FakeGit(push_results=[NO_UPSTREAM], push_upstream_results=[rejected])

    outcome = push_branch(git, REPO, "origin", "release")

    assert not outcome.success
    assert len(outcome.attempts) == 2
    assert len(git.push_calls) == 2
    failure = outcome.failure()
    assert isinstance(failure, CommandFailure)
    assert not isinstance(failure, NoUpstreamConfigured)


def test_other_push_failure_is_not_retried() -> None:
    denied = CommandResult.failed("remote: Permission denied", exit_code=128)
    git = FakeGit(push_results=[denied])

    outcome = push_branch(git, REPO, "origin", "release")

    assert not outcome.success
    assert git.push_calls == [("push", "origin", "release")]
    failure = outcome.failure()
    assert isinstance(failure, CommandFailure)
    assert failure.exit_code == 128
    assert "Permission denied" in str(failure)


def test_no_upstream_marker_only_checked_in_stderr() -> None:
    stdout_only = CommandResult.failed("", stdout="no upstream mentioned here")
    git = FakeGit(push_results=[stdout_only])

    outcome = push_branch(git, REPO, "origin", "release")

    assert len(outcome.attempts) == 1


def test_failure_classifies_no_upstream() -> None:
    git = FakeGit(push_results=[NO_UPSTREAM], push_upstream_results=[NO_UPSTREAM])

    outcome = push_branch(git, REPO, "origin", "release")

    assert isinstance(outcome.failure(), NoUpstreamConfigured)


def test_is_no_upstream_error() -> None:
    assert is_no_upstream_error("fatal: The current branch x has no upstream branch.")
    assert not is_no_upstream_error("fatal: No Upstream")
    assert not is_no_upstream_error("")


def test_should_offer_push() -> None:
    assert should_offer_push(1, remote_exists=True)
    assert not should_offer_push(0, remote_exists=True)
    assert not should_offer_push(3, remote_exists=False)

"""Pushing the target branch after a session.

A plain push is tried first. A newly created branch has no upstream, so when
that push fails for exactly that reason one more push is made with
--set-upstream. Any other failure is returned without retrying.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from git_cp.core.command_runner import CommandResult
from git_cp.core.errors import CommandFailure, NoUpstreamConfigured
from git_cp.core.git.abc import Git

logger = logging.getLogger(__name__)

NO_UPSTREAM_MARKER = "no upstream"


def is_no_upstream_error(error_text: str) -> bool:
    """Check whether push error output says the branch has no upstream."""
    return NO_UPSTREAM_MARKER in error_text


def should_offer_push(applied_count: int, *, remote_exists: bool) -> bool:
    """Push is only offered when something was applied and the remote exists."""
    return applied_count >= 1 and remote_exists


@dataclass(frozen=True)
class PushOutcome:
    """Result of pushing the target branch, with every attempt made."""

    remote: str
    branch: str
    attempts: tuple[CommandResult, ...]

    @property
    def success(self) -> bool:
        return self.attempts[-1].success

    @property
    def final_result(self) -> CommandResult:
        return self.attempts[-1]

    @property
    def used_upstream_retry(self) -> bool:
        return len(self.attempts) > 1

    def failure(self) -> CommandFailure | None:
        """Classify the final failure, or None if the push succeeded."""
        result = self.final_result
        if result.success:
            return None
        if is_no_upstream_error(result.stderr):
            return NoUpstreamConfigured(result.exit_code, result.combined_output)
        return CommandFailure.from_result(result)


def push_branch(git: Git, repo_root: Path, remote: str, branch: str) -> PushOutcome:
    """Push branch to remote, retrying once with --set-upstream if needed.

    At most two push commands are issued.
    """
    first = git.push(repo_root, remote, branch)
    if first.success or not is_no_upstream_error(first.stderr):
        logger.debug("Push of %s to %s: one attempt, success=%s", branch, remote, first.success)
        return PushOutcome(remote=remote, branch=branch, attempts=(first,))

    logger.debug("Push of %s has no upstream; retrying with --set-upstream", branch)
    second = git.push_set_upstream(repo_root, remote, branch)
    return PushOutcome(remote=remote, branch=branch, attempts=(first, second))

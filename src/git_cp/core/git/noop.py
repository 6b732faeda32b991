"""No-op Git wrapper for dry-run mode.

This module provides a Git wrapper that prevents execution of mutating
operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from git_cp.core.command_runner import CommandResult
from git_cp.core.git.abc import Commit, Git

# ============================================================================
# No-op Wrapper
# ============================================================================


class NoopGit(Git):
    """No-op wrapper that prevents execution of mutating operations.

    Mutating operations return a successful CommandResult without touching the
    repository, so a dry run walks the happy path of every cherry-pick.
    Read-only operations are delegated to the wrapped implementation.

    Usage:
        real_ops = RealGit()
        noop_ops = NoopGit(real_ops)

        # Reports success without cherry-picking anything
        noop_ops.cherry_pick(repo_root, sha)
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
        """
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def is_repository(self, repo_root: Path) -> bool:
        return self._wrapped.is_repository(repo_root)

    def get_current_branch(self, repo_root: Path) -> str:
        return self._wrapped.get_current_branch(repo_root)

    def list_branches(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_branches(repo_root)

    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        return self._wrapped.branch_exists(repo_root, branch)

    def list_commits(self, repo_root: Path, branch: str, *, limit: int) -> list[Commit]:
        return self._wrapped.list_commits(repo_root, branch, limit=limit)

    def conflicted_files(self, repo_root: Path) -> list[str]:
        return self._wrapped.conflicted_files(repo_root)

    def conflict_diff(self, repo_root: Path, path: str) -> str:
        return self._wrapped.conflict_diff(repo_root, path)

    def remote_exists(self, repo_root: Path, remote: str) -> bool:
        return self._wrapped.remote_exists(repo_root, remote)

    # Mutating operations: report success without executing

    def stage_all(self, repo_root: Path) -> CommandResult:
        return CommandResult.ok()

    def checkout_branch(self, repo_root: Path, branch: str) -> CommandResult:
        return CommandResult.ok()

    def create_branch(self, repo_root: Path, branch: str) -> CommandResult:
        return CommandResult.ok()

    def cherry_pick(self, repo_root: Path, sha: str) -> CommandResult:
        return CommandResult.ok()

    def cherry_pick_continue(self, repo_root: Path) -> CommandResult:
        return CommandResult.ok()

    def cherry_pick_skip(self, repo_root: Path) -> CommandResult:
        return CommandResult.ok()

    def cherry_pick_abort(self, repo_root: Path) -> CommandResult:
        return CommandResult.ok()

    def push(self, repo_root: Path, remote: str, branch: str) -> CommandResult:
        return CommandResult.ok()

    def push_set_upstream(self, repo_root: Path, remote: str, branch: str) -> CommandResult:
        return CommandResult.ok()

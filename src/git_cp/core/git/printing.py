"""Printing Git wrapper for verbose output.

This module provides a Git wrapper that prints styled output for mutating
operations before delegating to the wrapped implementation.
"""

from pathlib import Path

from git_cp.core.command_runner import CommandResult
from git_cp.core.git.abc import Commit, Git
from git_cp.core.printing_base import PrintingBase

# ============================================================================
# Printing Wrapper Implementation
# ============================================================================


class PrintingGit(PrintingBase, Git):
    """Wrapper that prints operations before delegating to inner implementation.

    This wrapper prints styled output for operations, then delegates to the
    wrapped implementation (which could be Real or Noop).

    Usage:
        # For verbose production runs
        printing_ops = PrintingGit(real_ops, dry_run=False)

        # For dry-run
        noop_inner = NoopGit(real_ops)
        printing_ops = PrintingGit(noop_inner, dry_run=True)
    """

    # Inherits __init__, _emit, and _format_command from PrintingBase

    # Read-only operations: delegate without printing

    def is_repository(self, repo_root: Path) -> bool:
        """Check repository (read-only, no printing)."""
        return self._wrapped.is_repository(repo_root)

    def get_current_branch(self, repo_root: Path) -> str:
        """Get current branch (read-only, no printing)."""
        return self._wrapped.get_current_branch(repo_root)

    def list_branches(self, repo_root: Path) -> list[str]:
        """List branches (read-only, no printing)."""
        return self._wrapped.list_branches(repo_root)

    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check branch existence (read-only, no printing)."""
        return self._wrapped.branch_exists(repo_root, branch)

    def list_commits(self, repo_root: Path, branch: str, *, limit: int) -> list[Commit]:
        """List commits (read-only, no printing)."""
        return self._wrapped.list_commits(repo_root, branch, limit=limit)

    def conflicted_files(self, repo_root: Path) -> list[str]:
        """List conflicted files (read-only, no printing)."""
        return self._wrapped.conflicted_files(repo_root)

    def conflict_diff(self, repo_root: Path, path: str) -> str:
        """Get conflict diff (read-only, no printing)."""
        return self._wrapped.conflict_diff(repo_root, path)

    def remote_exists(self, repo_root: Path, remote: str) -> bool:
        """Check remote existence (read-only, no printing)."""
        return self._wrapped.remote_exists(repo_root, remote)

    # Operations that need printing

    def stage_all(self, repo_root: Path) -> CommandResult:
        """Stage all changes with printed output."""
        self._emit(self._format_command("git add -A"))
        return self._wrapped.stage_all(repo_root)

    def checkout_branch(self, repo_root: Path, branch: str) -> CommandResult:
        """Checkout branch with printed output."""
        self._emit(self._format_command(f"git checkout {branch}"))
        return self._wrapped.checkout_branch(repo_root, branch)

    def create_branch(self, repo_root: Path, branch: str) -> CommandResult:
        """Create branch with printed output."""
        self._emit(self._format_command(f"git checkout -b {branch}"))
        return self._wrapped.create_branch(repo_root, branch)

    def cherry_pick(self, repo_root: Path, sha: str) -> CommandResult:
        """Cherry-pick with printed output."""
        self._emit(self._format_command(f"git cherry-pick {sha}"))
        return self._wrapped.cherry_pick(repo_root, sha)

    def cherry_pick_continue(self, repo_root: Path) -> CommandResult:
        """Continue cherry-pick with printed output."""
        self._emit(self._format_command("git cherry-pick --continue"))
        return self._wrapped.cherry_pick_continue(repo_root)

    def cherry_pick_skip(self, repo_root: Path) -> CommandResult:
        """Skip cherry-pick with printed output."""
        self._emit(self._format_command("git cherry-pick --skip"))
        return self._wrapped.cherry_pick_skip(repo_root)

    def cherry_pick_abort(self, repo_root: Path) -> CommandResult:
        """Abort cherry-pick with printed output."""
        self._emit(self._format_command("git cherry-pick --abort"))
        return self._wrapped.cherry_pick_abort(repo_root)

    def push(self, repo_root: Path, remote: str, branch: str) -> CommandResult:
        """Push with printed output."""
        self._emit(self._format_command(f"git push {remote} {branch}"))
        return self._wrapped.push(repo_root, remote, branch)

    def push_set_upstream(self, repo_root: Path, remote: str, branch: str) -> CommandResult:
        """Push with upstream tracking and printed output."""
        self._emit(self._format_command(f"git push --set-upstream {remote} {branch}"))
        return self._wrapped.push_set_upstream(repo_root, remote, branch)

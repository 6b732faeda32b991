"""Production Git implementation using the command runner.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

from pathlib import Path

from git_cp.core.command_runner import CommandResult, run_command
from git_cp.core.git.abc import DETACHED_HEAD, Commit, Git
from git_cp.core.git.parsing import (
    LOG_FORMAT,
    parse_branch_list,
    parse_commit_log,
    parse_path_list,
)

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via run_command().
    """

    def _run(self, repo_root: Path, *args: str) -> CommandResult:
        return run_command(["git", *args], cwd=repo_root)

    def is_repository(self, repo_root: Path) -> bool:
        """Check whether repo_root is inside a git working tree."""
        result = self._run(repo_root, "rev-parse", "--is-inside-work-tree")
        return result.success and result.stdout.strip() == "true"

    def get_current_branch(self, repo_root: Path) -> str:
        """Get the checked-out branch name, or DETACHED_HEAD if there is none."""
        result = self._run(repo_root, "branch", "--show-current")
        if not result.success:
            return DETACHED_HEAD

        # `--show-current` prints nothing on a detached HEAD
        branch = result.stdout.strip()
        return branch or DETACHED_HEAD

    def list_branches(self, repo_root: Path) -> list[str]:
        """List local and remote branch short names."""
        result = self._run(repo_root, "branch", "-a", "--format=%(refname:short)")
        if not result.success:
            return []
        return parse_branch_list(result.stdout)

    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check whether a local branch with exactly this name exists."""
        result = self._run(repo_root, "branch", "--list", branch)
        return result.success and bool(result.stdout.strip())

    def list_commits(self, repo_root: Path, branch: str, *, limit: int) -> list[Commit]:
        """List commits on a branch, newest first."""
        result = self._run(
            repo_root,
            "log",
            branch,
            f"--max-count={limit}",
            f"--pretty=format:{LOG_FORMAT}",
            "--date=short",
        )
        if not result.success or not result.stdout.strip():
            return []
        return parse_commit_log(result.stdout)

    def conflicted_files(self, repo_root: Path) -> list[str]:
        """List paths currently marked as unmerged."""
        result = self._run(repo_root, "diff", "--name-only", "--diff-filter=U")
        if not result.success or not result.stdout.strip():
            return []
        return parse_path_list(result.stdout)

    def conflict_diff(self, repo_root: Path, path: str) -> str:
        """Get the raw diff text for one path, or an empty string."""
        result = self._run(repo_root, "diff", "--", path)
        if not result.success:
            return ""
        return result.stdout

    def remote_exists(self, repo_root: Path, remote: str) -> bool:
        """Check whether a remote with this name is configured."""
        result = self._run(repo_root, "remote")
        if not result.success:
            return False
        return remote in [line.strip() for line in result.stdout.split("\n")]

    def stage_all(self, repo_root: Path) -> CommandResult:
        """Stage every pending change in the working tree."""
        return self._run(repo_root, "add", "-A")

    def checkout_branch(self, repo_root: Path, branch: str) -> CommandResult:
        """Check out an existing branch."""
        return self._run(repo_root, "checkout", branch)

    def create_branch(self, repo_root: Path, branch: str) -> CommandResult:
        """Create a branch from HEAD and check it out."""
        return self._run(repo_root, "checkout", "-b", branch)

    def cherry_pick(self, repo_root: Path, sha: str) -> CommandResult:
        """Apply the changes of one commit onto the current branch."""
        return self._run(repo_root, "cherry-pick", sha)

    def cherry_pick_continue(self, repo_root: Path) -> CommandResult:
        """Commit the resolved in-progress cherry-pick."""
        return self._run(repo_root, "cherry-pick", "--continue")

    def cherry_pick_skip(self, repo_root: Path) -> CommandResult:
        """Drop the in-progress cherry-pick and move on."""
        return self._run(repo_root, "cherry-pick", "--skip")

    def cherry_pick_abort(self, repo_root: Path) -> CommandResult:
        """Cancel the in-progress cherry-pick and restore the previous state."""
        return self._run(repo_root, "cherry-pick", "--abort")

    def push(self, repo_root: Path, remote: str, branch: str) -> CommandResult:
        """Push a branch to a remote."""
        return self._run(repo_root, "push", remote, branch)

    def push_set_upstream(self, repo_root: Path, remote: str, branch: str) -> CommandResult:
        """Push a branch to a remote and record it as the upstream."""
        return self._run(repo_root, "push", "--set-upstream", remote, branch)

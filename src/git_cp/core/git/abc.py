"""High-level git operations interface.

This module provides a clean abstraction over the git calls git-cp makes,
keeping the cherry-pick session testable without a real repository.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using the command runner
- NoopGit: Dry-run wrapper that delegates reads and fakes mutations
- PrintingGit: Wrapper that echoes mutating commands before delegating

Read operations are best-effort: they degrade to an empty or sentinel value
when git fails instead of raising. Mutating operations return the
CommandResult untouched so the caller decides whether failure is recoverable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from git_cp.core.command_runner import CommandResult

# Returned by get_current_branch() when HEAD is detached or git fails
DETACHED_HEAD = "HEAD"


@dataclass(frozen=True)
class Commit:
    """A commit listed from the source branch.

    Identity is the full hash; two records with the same hash describe the
    same commit.
    """

    sha: str
    short_sha: str
    author: str
    date: str  # YYYY-MM-DD
    subject: str

    def __str__(self) -> str:
        return f"{self.short_sha} {self.date} {self.author:<20} {self.subject}"


# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    # Repository inspection (read-only, never raises on git failure)

    @abstractmethod
    def is_repository(self, repo_root: Path) -> bool:
        """Check whether repo_root is inside a git working tree."""
        ...

    @abstractmethod
    def get_current_branch(self, repo_root: Path) -> str:
        """Get the checked-out branch name, or DETACHED_HEAD if there is none."""
        ...

    @abstractmethod
    def list_branches(self, repo_root: Path) -> list[str]:
        """List local and remote branch short names.

        Names are trimmed and de-duplicated in first-seen order.

        Returns:
            Branch names, or an empty list if git fails
        """
        ...

    @abstractmethod
    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check whether a local branch with exactly this name exists."""
        ...

    @abstractmethod
    def list_commits(self, repo_root: Path, branch: str, *, limit: int) -> list[Commit]:
        """List commits on a branch, newest first.

        Args:
            repo_root: Path to the repository root
            branch: Branch (or any revision) to read history from
            limit: Maximum number of commits to return

        Returns:
            Parsed commits; malformed log lines are dropped individually and
            any git failure yields an empty list
        """
        ...

    @abstractmethod
    def conflicted_files(self, repo_root: Path) -> list[str]:
        """List paths currently marked as unmerged."""
        ...

    @abstractmethod
    def conflict_diff(self, repo_root: Path, path: str) -> str:
        """Get the raw diff text for one path, or an empty string."""
        ...

    @abstractmethod
    def remote_exists(self, repo_root: Path, remote: str) -> bool:
        """Check whether a remote with this name is configured."""
        ...

    # Mutating operations (return CommandResult untouched)

    @abstractmethod
    def stage_all(self, repo_root: Path) -> CommandResult:
        """Stage every pending change in the working tree."""
        ...

    @abstractmethod
    def checkout_branch(self, repo_root: Path, branch: str) -> CommandResult:
        """Check out an existing branch."""
        ...

    @abstractmethod
    def create_branch(self, repo_root: Path, branch: str) -> CommandResult:
        """Create a branch from HEAD and check it out."""
        ...

    @abstractmethod
    def cherry_pick(self, repo_root: Path, sha: str) -> CommandResult:
        """Apply the changes of one commit onto the current branch."""
        ...

    @abstractmethod
    def cherry_pick_continue(self, repo_root: Path) -> CommandResult:
        """Commit the resolved in-progress cherry-pick."""
        ...

    @abstractmethod
    def cherry_pick_skip(self, repo_root: Path) -> CommandResult:
        """Drop the in-progress cherry-pick and move on."""
        ...

    @abstractmethod
    def cherry_pick_abort(self, repo_root: Path) -> CommandResult:
        """Cancel the in-progress cherry-pick and restore the previous state."""
        ...

    @abstractmethod
    def push(self, repo_root: Path, remote: str, branch: str) -> CommandResult:
        """Push a branch to a remote."""
        ...

    @abstractmethod
    def push_set_upstream(self, repo_root: Path, remote: str, branch: str) -> CommandResult:
        """Push a branch to a remote and record it as the upstream."""
        ...

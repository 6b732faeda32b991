"""Error kinds surfaced by git-cp.

Repository reads never raise these; they degrade to empty values instead.
Mutating operations return CommandResult and callers build a CommandFailure
from it when they need to report or classify the failure.
"""

from git_cp.core.command_runner import CommandResult


class GitCpError(Exception):
    """Base class for git-cp errors."""


class NotARepositoryError(GitCpError):
    """The working directory is not inside a git working tree."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not inside a git repository: {path}")
        self.path = path


class CommandFailure(GitCpError):
    """A git command exited non-zero."""

    def __init__(self, exit_code: int, output: str) -> None:
        super().__init__(output.strip() or f"git exited with code {exit_code}")
        self.exit_code = exit_code
        self.output = output

    @classmethod
    def from_result(cls, result: CommandResult) -> "CommandFailure":
        return cls(result.exit_code, result.combined_output)


class NoUpstreamConfigured(CommandFailure):
    """A push failed because the branch has no upstream tracking branch."""


class ConflictDetected(GitCpError):
    """A cherry-pick stopped on unmerged paths.

    Returned rather than raised: a conflict is an expected branch that asks
    the user for a resolution, unlike a CommandFailure.
    """

    def __init__(self, files: list[str]) -> None:
        super().__init__(f"Conflicts in: {', '.join(files)}")
        self.files = list(files)


def classify_pick_failure(
    result: CommandResult, conflicted_files: list[str]
) -> ConflictDetected | CommandFailure:
    """Tell a conflict apart from any other failed cherry-pick.

    Only the presence of unmerged paths decides; the output text is not
    inspected.
    """
    if conflicted_files:
        return ConflictDetected(conflicted_files)
    return CommandFailure.from_result(result)


class BranchNameValidationError(GitCpError, ValueError):
    """A user-supplied target branch name is not acceptable."""

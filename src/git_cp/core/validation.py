"""Validation of the working directory and user-supplied branch names."""

from pathlib import Path

from git_cp.core.errors import BranchNameValidationError, NotARepositoryError
from git_cp.core.git.abc import Git


def require_repository(git: Git, repo_root: Path) -> None:
    """Check that repo_root is inside a git working tree.

    Raises:
        NotARepositoryError: If it is not
        FileNotFoundError: If the git binary is not installed
    """
    if not git.is_repository(repo_root):
        raise NotARepositoryError(str(repo_root))


def validate_branch_name(name: str) -> str:
    """Validate a target branch name.

    Only the checks the tool relies on are made: the name must be non-empty
    and must not contain whitespace. git itself rejects other malformed names
    when the branch is created.

    Args:
        name: Branch name as typed by the user

    Returns:
        The name unchanged

    Raises:
        BranchNameValidationError: If the name is empty or contains whitespace
    """
    if not name or not name.strip():
        raise BranchNameValidationError("Branch name cannot be empty.")
    if any(ch.isspace() for ch in name):
        raise BranchNameValidationError("Branch name cannot contain spaces.")
    return name

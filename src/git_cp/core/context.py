"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from git_cp.core.config import GlobalConfig, load_global_config
from git_cp.core.git.abc import Git
from git_cp.core.git.noop import NoopGit
from git_cp.core.git.printing import PrintingGit
from git_cp.core.git.real import RealGit


@dataclass(frozen=True)
class GitCpContext:
    """Immutable context holding all dependencies for git-cp operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    cwd: Path  # Repository working directory; every git command runs here
    global_config: GlobalConfig
    dry_run: bool


def wrap_git(git: Git, *, dry_run: bool, verbose: bool) -> Git:
    """Layer dry-run and printing wrappers over a Git implementation.

    Dry runs always print, since the echoed commands are the only output of
    the mutations they replace.
    """
    inner = NoopGit(git) if dry_run else git
    if dry_run or verbose:
        return PrintingGit(inner, dry_run=dry_run)
    return inner


def create_context(*, dry_run: bool, cwd: Path | None = None) -> GitCpContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Raises:
        ValueError: If the global config file is invalid
    """
    return GitCpContext(
        git=RealGit(),
        cwd=cwd if cwd is not None else Path.cwd(),
        global_config=load_global_config(),
        dry_run=dry_run,
    )

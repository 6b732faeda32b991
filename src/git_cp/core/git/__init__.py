"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes and dry-run via wrappers.
"""

from git_cp.core.git.abc import DETACHED_HEAD, Commit, Git
from git_cp.core.git.noop import NoopGit
from git_cp.core.git.printing import PrintingGit
from git_cp.core.git.real import RealGit

__all__ = [
    "DETACHED_HEAD",
    "Commit",
    "Git",
    "NoopGit",
    "PrintingGit",
    "RealGit",
]

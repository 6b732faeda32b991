"""Subprocess execution returning captured results instead of raising.

Every git invocation made by git-cp goes through run_command(). Unlike a
check=True wrapper, failures are reported through the returned CommandResult
so callers can decide whether a non-zero exit is recoverable.
"""

import logging
import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# `git cherry-pick --continue` opens an editor for the commit message. `true`
# exits 0 immediately, which accepts the message git prepared.
EDITOR_BYPASS_ENV = {"GIT_EDITOR": "true"}


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single external command invocation."""

    success: bool
    stdout: str
    stderr: str
    exit_code: int

    @property
    def combined_output(self) -> str:
        """Stdout and stderr joined for error display.

        Returns stdout followed by stderr when both have content, otherwise
        whichever one is non-blank.
        """
        if not self.stderr.strip():
            return self.stdout
        if not self.stdout.strip():
            return self.stderr
        return f"{self.stdout}\n{self.stderr}"

    @staticmethod
    def ok(stdout: str = "") -> "CommandResult":
        """Build a successful result (used by dry-run and test doubles)."""
        return CommandResult(success=True, stdout=stdout, stderr="", exit_code=0)

    @staticmethod
    def failed(stderr: str, *, exit_code: int = 1, stdout: str = "") -> "CommandResult":
        """Build a failed result (used by test doubles)."""
        return CommandResult(success=False, stdout=stdout, stderr=stderr, exit_code=exit_code)


def run_command(cmd: Sequence[str], cwd: Path) -> CommandResult:
    """Run a command to completion and capture its output.

    subprocess.run() with capture_output drains stdout and stderr concurrently
    via communicate(), so a child producing large output on either stream
    cannot stall. No timeout is applied.

    The editor bypass is merged into a copy of the current environment and
    passed to the child only; os.environ is left untouched.

    Args:
        cmd: Command and arguments to execute
        cwd: Working directory for command execution

    Returns:
        CommandResult with captured stdout, stderr and exit code

    Raises:
        FileNotFoundError: If the command binary is not installed
    """
    env = {**os.environ, **EDITOR_BYPASS_ENV}
    logger.debug("Running: %s (cwd=%s)", " ".join(cmd), cwd)

    result = subprocess.run(
        list(cmd),
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
        env=env,
    )

    logger.debug("Exit code %d for: %s", result.returncode, " ".join(cmd))
    return CommandResult(
        success=result.returncode == 0,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        exit_code=result.returncode,
    )

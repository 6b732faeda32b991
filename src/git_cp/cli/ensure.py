"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

import logging
from pathlib import Path
from typing import TypeVar

import click

from git_cp.cli.output import user_output
from git_cp.core.errors import NotARepositoryError
from git_cp.core.git.abc import Git
from git_cp.core.validation import require_repository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def truthy(value: T, error_message: str) -> T:
        """Ensure value is truthy, otherwise output styled error and exit.

        Returns:
            The value unchanged if truthy

        Raises:
            SystemExit: If value is falsy (with exit code 1)
        """
        if not value:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        This method provides type narrowing: it takes `T | None` and returns `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def in_repository(git: Git, cwd: Path) -> None:
        """Ensure cwd is inside a git working tree.

        A missing git binary is reported the same way rather than as a
        traceback.

        Raises:
            SystemExit: If cwd is not in a repository or git is not installed
        """
        try:
            require_repository(git, cwd)
        except FileNotFoundError:
            user_output(click.style("Error: ", fg="red") + "git executable not found.")
            raise SystemExit(1) from None
        except NotARepositoryError as e:
            logger.debug("%s", e)
            user_output(click.style("Error: ", fg="red") + "Not inside a git repository.")
            raise SystemExit(1) from None

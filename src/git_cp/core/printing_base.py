"""Base class for wrappers that echo operations before delegating."""

from typing import Any

import click

from git_cp.cli.output import user_output


class PrintingBase:
    """Shared plumbing for Printing* wrappers.

    Subclasses call self._emit(self._format_command(...)) before delegating
    to self._wrapped, which may be a real or a no-op implementation.
    """

    def __init__(self, wrapped: Any, *, dry_run: bool) -> None:
        """Wrap an implementation.

        Args:
            wrapped: Implementation to delegate to (Real, Noop or Fake)
            dry_run: Whether the wrapped implementation is a no-op, which
                is shown in the echoed command
        """
        self._wrapped = wrapped
        self._dry_run = dry_run

    def _emit(self, message: str) -> None:
        user_output(message)

    def _format_command(self, cmd: str) -> str:
        styled = click.style(cmd, dim=True)
        if self._dry_run:
            return f"{styled} {click.style('(dry run)', fg='yellow')}"
        return styled

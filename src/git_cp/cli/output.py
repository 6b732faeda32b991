"""Output utilities for CLI commands with clear intent."""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a message meant for the person at the terminal.

    Routed to stderr so stdout stays free for machine-readable output such as
    `git-cp config get`.
    """
    click.echo(message, err=True, nl=nl)


def machine_output(message: str) -> None:
    """Write a value meant to be consumed by scripts (stdout)."""
    click.echo(message)

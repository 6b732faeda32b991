import logging
import os

import click

from git_cp.cli.commands.config import config_group
from git_cp.cli.commands.pick import pick_cmd
from git_cp.cli.output import user_output
from git_cp.core.context import create_context

DEBUG_ENV = "GIT_CP_DEBUG"

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _configure_logging() -> None:
    # Enable debug logging if GIT_CP_DEBUG environment variable is set
    if os.getenv(DEBUG_ENV):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="git-cp")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Interactive git cherry-pick helper.

    Run without a subcommand to start `pick`.
    """
    _configure_logging()

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=False)
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    if ctx.invoked_subcommand is None:
        ctx.invoke(pick_cmd)


cli.add_command(pick_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `git-cp` console script."""
    cli()

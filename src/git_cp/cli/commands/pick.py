"""Pick command implementation - interactive cherry-pick onto a target branch."""

import dataclasses
import logging

import click
from rich.console import Console
from rich.markup import escape

from git_cp.cli import rendering
from git_cp.cli.ensure import Ensure
from git_cp.cli.output import user_output
from git_cp.cli.prompts import ClickPrompter, InteractiveSessionDriver, Prompter
from git_cp.core.context import GitCpContext, wrap_git
from git_cp.core.errors import BranchNameValidationError
from git_cp.core.git.abc import Commit
from git_cp.core.push import push_branch, should_offer_push
from git_cp.core.sequencer import order_for_application
from git_cp.core.session import CherryPickSession, SessionDriver
from git_cp.core.summary import SessionSummary
from git_cp.core.validation import validate_branch_name

logger = logging.getLogger(__name__)


def _resolve_source_branch(
    ctx: GitCpContext, prompter: Prompter, console: Console, source: str | None
) -> str:
    current = ctx.git.get_current_branch(ctx.cwd)
    branches = ctx.git.list_branches(ctx.cwd)
    console.print(f"[grey50]Current branch:[/] [bold]{escape(current)}[/]")
    logger.debug("Branches available: %d", len(branches))

    if source is not None:
        Ensure.invariant(source in branches, f"Source branch '{source}' not found.")
        return source

    Ensure.truthy(branches, "No branches found.")
    return prompter.select_source_branch(branches, current)


def _validate_target_option(target: str) -> str:
    try:
        return validate_branch_name(target)
    except BranchNameValidationError as e:
        user_output(click.style("Error: ", fg="red") + f"Invalid target branch '{target}': {e}")
        raise SystemExit(1) from None


def _checkout_target(
    ctx: GitCpContext, prompter: Prompter, console: Console, target: str
) -> bool:
    """Check out or create the target branch.

    Returns:
        False if the user declined to create a missing branch

    Raises:
        SystemExit: If checkout or creation fails (exit code 1)
    """
    heading = f"[{rendering.ACCENT}]Targeting branch:[/] [bold]{escape(target)}[/]"
    console.print(rendering.section_rule(heading))

    if ctx.git.branch_exists(ctx.cwd, target):
        console.print(f"Branch [bold]{escape(target)}[/] exists. Checking out…")
        result = ctx.git.checkout_branch(ctx.cwd, target)
        title = "Checkout failed"
    else:
        if not prompter.confirm_create_branch(target):
            return False
        console.print(f"Creating [bold]{escape(target)}[/]…")
        result = ctx.git.create_branch(ctx.cwd, target)
        title = "Branch creation failed"

    if not result.success:
        console.print(rendering.error_panel(title, result))
        raise SystemExit(1)

    console.print(f"[green]✓[/] Now on [bold]{escape(target)}[/]\n")
    return True


def _offer_push(
    ctx: GitCpContext,
    prompter: Prompter,
    console: Console,
    summary: SessionSummary,
    push: bool | None,
) -> None:
    remote = ctx.global_config.remote
    remote_exists = ctx.git.remote_exists(ctx.cwd, remote)
    if push is False or not should_offer_push(summary.applied, remote_exists=remote_exists):
        return

    if push is None:
        command = f"git push {remote} {summary.target_branch}"
        if not prompter.confirm_push(command, default=ctx.global_config.confirm_push_default):
            return

    outcome = push_branch(ctx.git, ctx.cwd, remote, summary.target_branch)
    logger.debug("Push attempts: %d, success=%s", len(outcome.attempts), outcome.success)
    message = rendering.push_result_line(outcome)
    if message is not None:
        console.print(message)
    else:
        console.print(rendering.error_panel("Push failed", outcome.final_result))


def run_pick(
    ctx: GitCpContext,
    *,
    prompter: Prompter,
    driver: SessionDriver,
    console: Console,
    source: str | None,
    target: str | None,
    limit: int | None,
    push: bool | None,
) -> SessionSummary | None:
    """Run the whole interactive flow.

    Returns:
        The session summary, or None when the flow ended before a session ran
        (no commits, nothing selected, or branch creation declined)
    """
    Ensure.in_repository(ctx.git, ctx.cwd)
    if target is not None:
        target = _validate_target_option(target)

    source_branch = _resolve_source_branch(ctx, prompter, console, source)

    commit_limit = limit if limit is not None else ctx.global_config.commit_limit
    commits: list[Commit] = ctx.git.list_commits(ctx.cwd, source_branch, limit=commit_limit)
    if not commits:
        console.print("[yellow]No commits found on that branch.[/]")
        return None

    console.print(rendering.commit_table(commits))
    selected = prompter.select_commits(commits)
    if not selected:
        console.print("[yellow]No commits selected. Exiting.[/]")
        return None
    console.print(f"\n[green]{len(selected)}[/] commit(s) selected.\n")

    target_branch = target if target is not None else prompter.ask_target_branch()
    if not _checkout_target(ctx, prompter, console, target_branch):
        return None

    session = CherryPickSession(ctx.git, ctx.cwd, order_for_application(selected), driver)
    session.run()
    summary = SessionSummary.from_session(session, target_branch)

    console.print()
    console.print(rendering.section_rule(f"[{rendering.ACCENT}]Summary[/]"))
    console.print(rendering.summary_table(summary))
    console.print(f"\n[grey50]Branch:[/] [bold]{escape(target_branch)}[/]")

    _offer_push(ctx, prompter, console, summary, push)
    return summary


@click.command("pick")
@click.option("--source", "-s", help="Branch to cherry-pick from (prompted if omitted).")
@click.option("--target", "-t", help="Branch to apply commits onto (prompted if omitted).")
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(min=1),
    help="Number of commits to list from the source branch.",
)
@click.option(
    "--push/--no-push",
    default=None,
    help="Push the target branch without asking, or never push.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    # dry_run=False: Run git mutations by default
    default=False,
    help="Print git commands instead of changing the repository.",
)
@click.option("--verbose", "-v", is_flag=True, help="Print each git command before running it.")
@click.pass_obj
def pick_cmd(
    ctx: GitCpContext,
    source: str | None,
    target: str | None,
    limit: int | None,
    push: bool | None,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Cherry-pick selected commits from one branch onto another.

    Steps:
    1. Choose the source branch
    2. Select commits from its recent history
    3. Name the target branch (created on request)
    4. Apply the commits oldest first, resolving conflicts as they appear
    5. Optionally push the target branch
    """
    dry_run = dry_run or ctx.dry_run
    ctx = dataclasses.replace(
        ctx, git=wrap_git(ctx.git, dry_run=dry_run, verbose=verbose), dry_run=dry_run
    )
    logger.debug("pick invoked: source=%s target=%s dry_run=%s", source, target, dry_run)

    console = rendering.get_console()
    summary = run_pick(
        ctx,
        prompter=ClickPrompter(console, page_size=ctx.global_config.page_size),
        driver=InteractiveSessionDriver(console),
        console=console,
        source=source,
        target=target,
        limit=limit,
        push=push,
    )
    if summary is not None:
        console.print("[green]Done![/]")

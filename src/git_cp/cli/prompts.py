"""Interactive prompts and the interactive session driver.

Prompter collects the choices made before a session starts (source branch,
commits, target branch, confirmations). InteractiveSessionDriver answers the
session's questions while commits are being applied. Both are abstract at the
seams tests need, so CLI tests can script answers without a terminal.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import click
from rich.console import Console
from rich.markup import escape

from git_cp.cli import rendering
from git_cp.core.command_runner import CommandResult
from git_cp.core.errors import BranchNameValidationError
from git_cp.core.git.abc import Commit
from git_cp.core.session import (
    Aborted,
    Applied,
    Applying,
    ConflictInspector,
    ConflictResolution,
    FailureAction,
    Resolving,
    SessionDriver,
    SessionState,
    Skipped,
)
from git_cp.core.validation import validate_branch_name

# ============================================================================
# Selection parsing
# ============================================================================


def parse_selection(text: str, count: int) -> list[int]:
    """Parse a commit selection such as "1,3", "2-4" or "all".

    Numbers are 1-based positions in the displayed list. The result holds
    0-based indices in display order without duplicates. A blank answer
    selects nothing.

    Raises:
        ValueError: If a token is not a number or range within 1..count
    """
    text = text.strip().lower()
    if not text:
        return []
    if text == "all":
        return list(range(count))

    chosen: set[int] = set()
    for token in text.replace(" ", ",").split(","):
        if not token:
            continue
        if "-" in token:
            start_text, _, end_text = token.partition("-")
            if not (start_text.isdigit() and end_text.isdigit()):
                raise ValueError(f"'{token}' is not a valid range")
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError(f"'{token}' is not a valid range")
            numbers = range(start, end + 1)
        else:
            if not token.isdigit():
                raise ValueError(f"'{token}' is not a number")
            numbers = range(int(token), int(token) + 1)

        for number in numbers:
            if not 1 <= number <= count:
                raise ValueError(f"{number} is out of range (1-{count})")
            chosen.add(number - 1)

    return sorted(chosen)


def match_branch(branches: Sequence[str], answer: str) -> str | None:
    """Resolve a branch prompt answer.

    Accepts a 1-based number, an exact name, or text contained in exactly
    one branch name.
    """
    answer = answer.strip()
    if not answer:
        return None
    if answer.isdigit():
        index = int(answer)
        if 1 <= index <= len(branches):
            return branches[index - 1]
        return None
    if answer in branches:
        return answer

    matches = [b for b in branches if answer.lower() in b.lower()]
    if len(matches) == 1:
        return matches[0]
    return None


def _branch_name_value(value: str) -> str:
    try:
        return validate_branch_name(value)
    except BranchNameValidationError as e:
        raise click.BadParameter(str(e)) from None


# ============================================================================
# Prompter
# ============================================================================


class Prompter(ABC):
    """Questions asked before the session starts."""

    @abstractmethod
    def select_source_branch(self, branches: Sequence[str], current: str) -> str:
        """Pick the branch to cherry-pick from."""
        ...

    @abstractmethod
    def select_commits(self, commits: Sequence[Commit]) -> list[Commit]:
        """Pick commits to apply; returned in display order (newest first)."""
        ...

    @abstractmethod
    def ask_target_branch(self) -> str:
        """Ask for a valid target branch name."""
        ...

    @abstractmethod
    def confirm_create_branch(self, branch: str) -> bool:
        """Ask whether a missing target branch should be created."""
        ...

    @abstractmethod
    def confirm_push(self, command: str, *, default: bool) -> bool:
        """Ask whether to push the target branch."""
        ...


class ClickPrompter(Prompter):
    """Prompter reading answers from the terminal via click."""

    def __init__(self, console: Console, *, page_size: int) -> None:
        self._console = console
        self._page_size = page_size

    def select_source_branch(self, branches: Sequence[str], current: str) -> str:
        for index, branch in enumerate(branches[: self._page_size], start=1):
            marker = " [grey50](current)[/]" if branch == current else ""
            self._console.print(f"  [grey50]{index:>3}[/]  {escape(branch)}{marker}")
        hidden = len(branches) - self._page_size
        if hidden > 0:
            self._console.print(f"  [grey50]… {hidden} more; type a name or search text[/]")

        def _convert(value: str) -> str:
            branch = match_branch(branches, value)
            if branch is None:
                raise click.BadParameter(f"No single branch matches '{value}'.")
            return branch

        return click.prompt(
            "Pick the source branch to cherry-pick from (number, name or search text)",
            value_proc=_convert,
            err=True,
        )

    def select_commits(self, commits: Sequence[Commit]) -> list[Commit]:
        def _convert(value: str) -> list[int]:
            try:
                return parse_selection(value, len(commits))
            except ValueError as e:
                raise click.BadParameter(str(e)) from None

        indices = click.prompt(
            "Select commits to cherry-pick (e.g. 1,3 or 2-4 or all; blank for none)",
            default="",
            show_default=False,
            value_proc=_convert,
            err=True,
        )
        return [commits[i] for i in indices]

    def ask_target_branch(self) -> str:
        return click.prompt(
            "Enter the target branch name",
            value_proc=_branch_name_value,
            err=True,
        )

    def confirm_create_branch(self, branch: str) -> bool:
        return click.confirm(f"Branch {branch} doesn't exist. Create it?", err=True)

    def confirm_push(self, command: str, *, default: bool) -> bool:
        return click.confirm(f"Push to remote? ({command})", default=default, err=True)


# ============================================================================
# Session driver
# ============================================================================

_FAILURE_CHOICES = {"s": FailureAction.SKIP, "a": FailureAction.ABORT}
_CONFLICT_CHOICES = {
    "c": ConflictResolution.CONTINUE,
    "s": ConflictResolution.SKIP,
    "a": ConflictResolution.ABORT,
}


class InteractiveSessionDriver(SessionDriver):
    """Reports session progress and asks for decisions on the terminal."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def on_transition(self, state: SessionState) -> None:
        console = self._console
        match state:
            case Applying(commit=commit):
                console.print(
                    rendering.section_rule(
                        f"[grey50]Cherry-picking[/] [{rendering.ACCENT}]"
                        f"{escape(commit.short_sha)}[/] {escape(commit.subject)}"
                    )
                )
            case Applied(commit=commit):
                console.print(f"[green]✓[/] Applied [{rendering.ACCENT}]{commit.short_sha}[/]")
            case Skipped(commit=commit, result=result):
                console.print(f"[yellow]⊘[/] Skipped [{rendering.ACCENT}]{commit.short_sha}[/]")
                if not result.success:
                    console.print(rendering.error_panel("Skip failed", result))
            case Resolving(result=result):
                console.print(rendering.error_panel("Continue failed", result))
                console.print("[yellow]You may need to resolve more conflicts.[/]")
            case Aborted(result=result):
                console.print("[red]Aborted.[/] Returning to original state.")
                if not result.success:
                    console.print(rendering.error_panel("Abort failed", result))
            case _:
                pass

    def choose_failure_action(self, commit: Commit, result: CommandResult) -> FailureAction:
        title = f"Cherry-pick failed for {commit.short_sha}"
        self._console.print(rendering.error_panel(title, result))
        self._console.print("  [bold]s[/]  Skip this commit")
        self._console.print("  [bold]a[/]  Abort all")
        answer = click.prompt(
            "What do you want to do?",
            type=click.Choice(list(_FAILURE_CHOICES)),
            err=True,
        )
        return _FAILURE_CHOICES[answer]

    def choose_conflict_resolution(
        self, commit: Commit, inspector: ConflictInspector
    ) -> ConflictResolution:
        console = self._console
        console.print(rendering.conflict_panel(commit, inspector.files))
        self._view_diffs(inspector)

        console.print("  [bold]c[/]  I fixed it manually, stage & continue")
        console.print("  [bold]s[/]  Skip this commit")
        console.print("  [bold]a[/]  Abort all remaining cherry-picks")
        answer = click.prompt(
            "How do you want to resolve the conflict?",
            type=click.Choice(list(_CONFLICT_CHOICES)),
            err=True,
        )
        return _CONFLICT_CHOICES[answer]

    def _view_diffs(self, inspector: ConflictInspector) -> None:
        """Show diffs on request until the user answers blank."""
        files = inspector.files
        while True:
            answer = click.prompt(
                "Show conflict diff for file number (blank when done)",
                default="",
                show_default=False,
                err=True,
            ).strip()
            if not answer:
                return
            if not answer.isdigit() or not 1 <= int(answer) <= len(files):
                self._console.print(f"[red]Enter a number between 1 and {len(files)}.[/]")
                continue

            path = files[int(answer) - 1]
            self._console.print(rendering.section_rule(f"[yellow]{escape(path)}[/]"))
            self._console.print(rendering.colored_diff(inspector.diff(path)))

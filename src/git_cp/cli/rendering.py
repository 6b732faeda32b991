"""Rich renderables for commits, conflicts, diffs and the final summary."""

from collections.abc import Sequence

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from git_cp.core.command_runner import CommandResult
from git_cp.core.git.abc import Commit
from git_cp.core.push import PushOutcome
from git_cp.core.summary import SessionSummary

ACCENT = "cornflower_blue"
AUTHOR_WIDTH = 20
MESSAGE_WIDTH = 70


def get_console() -> Console:
    """Console bound to stderr, matching user_output()."""
    return Console(stderr=True, highlight=False)


def truncate(text: str, width: int, *, ellipsis: bool = True) -> str:
    """Shorten text to width characters, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[:width] + ("…" if ellipsis else "")


def commit_table(commits: Sequence[Commit]) -> Table:
    """Numbered table of commits as listed from the source branch."""
    table = Table(border_style="grey50")
    table.add_column("#", justify="right", style="grey50")
    table.add_column("Hash", justify="center")
    table.add_column("Date", justify="center")
    table.add_column("Author")
    table.add_column("Message")

    for index, commit in enumerate(commits, start=1):
        table.add_row(
            str(index),
            f"[{ACCENT}]{escape(commit.short_sha)}[/]",
            f"[grey50]{escape(commit.date)}[/]",
            escape(truncate(commit.author, AUTHOR_WIDTH, ellipsis=False)),
            escape(truncate(commit.subject, MESSAGE_WIDTH)),
        )
    return table


def error_panel(title: str, result: CommandResult) -> Panel:
    """Panel showing a failed command's combined output verbatim."""
    body = result.combined_output.strip() or f"exit code {result.exit_code}"
    return Panel(
        Text(body, style="red"),
        title=f"[red] {escape(title)} [/]",
        border_style="red",
    )


def conflict_panel(commit: Commit, files: Sequence[str]) -> Group:
    """Header panel plus the list of conflicted files."""
    header = Panel(
        f"[red]Conflicts detected[/] in [bold]{escape(commit.short_sha)}[/]"
        f": {escape(commit.subject)}",
        border_style="red",
    )
    file_table = Table(border_style="red", show_edge=False)
    file_table.add_column("#", justify="right", style="grey50")
    file_table.add_column("[red]Conflicted files[/]")
    for index, path in enumerate(files, start=1):
        file_table.add_row(str(index), escape(path))
    return Group(header, file_table)


def colored_diff(diff: str) -> Text:
    """Color additions, removals and hunk headers of a unified diff."""
    if not diff.strip():
        return Text("(empty diff)", style="grey50")

    text = Text()
    lines = diff.split("\n")
    for i, line in enumerate(lines):
        if line.startswith("+"):
            style = "green"
        elif line.startswith("-"):
            style = "red"
        elif line.startswith("@"):
            style = ACCENT
        else:
            style = ""
        text.append(line, style=style)
        if i < len(lines) - 1:
            text.append("\n")
    return text


def section_rule(title: str) -> Rule:
    return Rule(title, style="grey50")


def summary_table(summary: SessionSummary) -> Table:
    """Applied/skipped/total counts for a finished session."""
    table = Table(border_style="grey50")
    table.add_column("Result")
    table.add_column("Count", justify="right")
    table.add_row("[green]Applied[/]", f"[green]{summary.applied}[/]")
    table.add_row("[yellow]Skipped[/]", f"[yellow]{summary.skipped}[/]")
    table.add_row("Total selected", str(summary.total_selected))
    return table


def push_result_line(outcome: PushOutcome) -> str | None:
    """One-line success message, or None when the push failed."""
    if not outcome.success:
        return None
    suffix = " (upstream set)" if outcome.used_upstream_retry else ""
    return (
        f"[green]✓[/] Pushed [bold]{escape(outcome.branch)}[/] "
        f"to {escape(outcome.remote)}{suffix}."
    )

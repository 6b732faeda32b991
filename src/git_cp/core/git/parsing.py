"""Parsers for git command output."""

from git_cp.core.git.abc import Commit

# Field delimiter used in LOG_FORMAT. The subject is last so a "|" inside it
# survives the split.
LOG_FIELD_SEPARATOR = "|"
LOG_FORMAT = "%H|%h|%an|%ad|%s"
_LOG_FIELD_COUNT = 5


def parse_commit_line(line: str) -> Commit | None:
    """Parse one line produced by `git log --pretty=format:LOG_FORMAT`.

    The line is split on the first four separators only.

    Returns:
        Commit, or None if the line does not have five fields
    """
    parts = line.split(LOG_FIELD_SEPARATOR, _LOG_FIELD_COUNT - 1)
    if len(parts) != _LOG_FIELD_COUNT:
        return None

    sha, short_sha, author, date, subject = parts
    return Commit(sha=sha, short_sha=short_sha, author=author, date=date, subject=subject)


def parse_commit_log(output: str) -> list[Commit]:
    """Parse `git log` output into commits, dropping malformed lines."""
    commits: list[Commit] = []
    for line in output.split("\n"):
        if not line:
            continue
        commit = parse_commit_line(line)
        if commit is not None:
            commits.append(commit)
    return commits


def parse_branch_list(output: str) -> list[str]:
    """Parse `git branch -a --format=%(refname:short)` output.

    Strips the current-branch marker, drops blank lines and removes
    duplicates while keeping first-seen order.
    """
    seen: set[str] = set()
    branches: list[str] = []
    for line in output.split("\n"):
        name = line.strip().lstrip("*").strip()
        if not name or name in seen:
            continue
        seen.add(name)
        branches.append(name)
    return branches


def parse_path_list(output: str) -> list[str]:
    """Parse newline-separated paths (e.g. `git diff --name-only`)."""
    return [line for line in output.split("\n") if line.strip()]

"""Ordering of selected commits for application."""

from collections.abc import Sequence

from git_cp.core.git.abc import Commit


def order_for_application(selected: Sequence[Commit]) -> list[Commit]:
    """Return the selection in the order it must be cherry-picked.

    Commits are listed (and therefore selected) newest first. Applying them
    oldest first keeps the original chronological order on the target branch.
    Duplicates are kept; the selection step is responsible for uniqueness.
    """
    return list(reversed(selected))

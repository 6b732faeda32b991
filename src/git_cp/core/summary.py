"""Summary of a finished cherry-pick session."""

from dataclasses import dataclass

from git_cp.core.session import CherryPickSession


@dataclass(frozen=True)
class SessionSummary:
    """Counts reported once a session ends.

    applied + skipped == total_selected unless the session was aborted or a
    `--continue` failure left a commit unresolved.
    """

    applied: int
    skipped: int
    total_selected: int
    target_branch: str
    aborted: bool

    @staticmethod
    def from_session(session: CherryPickSession, target_branch: str) -> "SessionSummary":
        return SessionSummary(
            applied=session.applied_count,
            skipped=session.skipped_count,
            total_selected=session.total_selected,
            target_branch=target_branch,
            aborted=session.was_aborted,
        )

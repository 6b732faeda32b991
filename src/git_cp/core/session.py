"""Cherry-pick session: the per-commit state machine.

A session owns the ordered commits still to apply and the applied/skipped
counters for one run. Each call to step() performs exactly one transition;
run() steps until a terminal state is reached.

Transitions:

    Ready ──(commits left)──> Applying(c) ──(exit 0)──> Applied(c) ──> Ready
      │                           │
      └─(exhausted)─> Completed   └─(non-zero)─┬─(no unmerged paths)─> OtherFailure(c)
                                               └─(unmerged paths)─> Conflicted(c)

    OtherFailure(c) ──skip──> Skipped(c) ──> Ready
                    └─abort─> Aborted

    Conflicted(c) ──continue ok───> Applied(c)
                  ├─continue fail─> Resolving(c) ──> Ready   (no counter changes)
                  ├─skip──────────> Skipped(c)
                  └─abort─────────> Aborted

Decisions are delegated to a SessionDriver. While a commit is conflicted the
driver may read conflict diffs any number of times through a ConflictInspector;
those reads never change session state.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from git_cp.core.command_runner import CommandResult
from git_cp.core.errors import ConflictDetected, classify_pick_failure
from git_cp.core.git.abc import Commit, Git

logger = logging.getLogger(__name__)


class FailureAction(Enum):
    """Choices offered when a cherry-pick fails without conflicts."""

    SKIP = "skip"
    ABORT = "abort"


class ConflictResolution(Enum):
    """Choices offered when a cherry-pick stops on conflicts."""

    CONTINUE = "continue"
    SKIP = "skip"
    ABORT = "abort"


# ============================================================================
# States
# ============================================================================


@dataclass(frozen=True)
class Ready:
    """Waiting to pick up the next commit."""


@dataclass(frozen=True)
class Applying:
    """The next commit has been selected and is about to be cherry-picked."""

    commit: Commit


@dataclass(frozen=True)
class Applied:
    """The commit landed on the target branch."""

    commit: Commit
    result: CommandResult


@dataclass(frozen=True)
class Conflicted:
    """The cherry-pick stopped with unmerged paths."""

    commit: Commit
    files: tuple[str, ...]
    result: CommandResult


@dataclass(frozen=True)
class OtherFailure:
    """The cherry-pick failed and git reports no unmerged paths."""

    commit: Commit
    result: CommandResult


@dataclass(frozen=True)
class Resolving:
    """`cherry-pick --continue` failed after a manual fix.

    The commit is neither applied nor skipped; the session moves on to the
    next commit without re-entering conflict resolution.
    """

    commit: Commit
    result: CommandResult


@dataclass(frozen=True)
class Skipped:
    """The commit was dropped with `cherry-pick --skip`."""

    commit: Commit
    result: CommandResult


@dataclass(frozen=True)
class Aborted:
    """`cherry-pick --abort` was issued; remaining commits are not processed."""

    commit: Commit
    result: CommandResult


@dataclass(frozen=True)
class Completed:
    """Every commit in the sequence reached an outcome."""


SessionState = (
    Ready
    | Applying
    | Applied
    | Conflicted
    | OtherFailure
    | Resolving
    | Skipped
    | Aborted
    | Completed
)


# ============================================================================
# Driver interface
# ============================================================================


class ConflictInspector:
    """Read-only access to the conflicts of the commit being resolved."""

    def __init__(self, git: Git, repo_root: Path, files: Sequence[str]) -> None:
        self._git = git
        self._repo_root = repo_root
        self._files = tuple(files)

    @property
    def files(self) -> tuple[str, ...]:
        return self._files

    def diff(self, path: str) -> str:
        """Return the diff of one conflicted path (empty if unavailable)."""
        return self._git.conflict_diff(self._repo_root, path)


class SessionDriver(ABC):
    """Makes the decisions a session cannot make on its own.

    The CLI implements this with interactive prompts; tests use a scripted fake.
    """

    @abstractmethod
    def choose_failure_action(self, commit: Commit, result: CommandResult) -> FailureAction:
        """Decide what to do after a cherry-pick failed without conflicts."""
        ...

    @abstractmethod
    def choose_conflict_resolution(
        self, commit: Commit, inspector: ConflictInspector
    ) -> ConflictResolution:
        """Decide how to resolve a conflicted cherry-pick.

        The inspector may be used to read diffs before answering.
        """
        ...

    def on_transition(self, state: SessionState) -> None:
        """Called after every transition. Default does nothing."""
        return None


# ============================================================================
# Session
# ============================================================================


class CherryPickSession:
    """Applies an ordered sequence of commits one at a time.

    The sequence must already be in application order (see
    order_for_application). Commits are never reordered or retried.
    """

    def __init__(
        self,
        git: Git,
        repo_root: Path,
        commits: Sequence[Commit],
        driver: SessionDriver,
    ) -> None:
        self._git = git
        self._repo_root = repo_root
        self._driver = driver
        self._remaining: deque[Commit] = deque(commits)
        self.total_selected = len(commits)
        self.applied_count = 0
        self.skipped_count = 0
        self.state: SessionState = Ready()
        self.history: list[SessionState] = [self.state]

    @property
    def is_finished(self) -> bool:
        return isinstance(self.state, Completed | Aborted)

    @property
    def was_aborted(self) -> bool:
        return isinstance(self.state, Aborted)

    @property
    def remaining(self) -> tuple[Commit, ...]:
        """Commits not yet picked up by the session."""
        return tuple(self._remaining)

    def run(self) -> SessionState:
        """Step until the session completes or is aborted."""
        while not self.is_finished:
            self.step()
        return self.state

    def step(self) -> SessionState:
        """Perform one transition and return the new state.

        Raises:
            RuntimeError: If the session is already finished
        """
        state = self.state
        match state:
            case Ready():
                next_state = self._next_commit()
            case Applying(commit=commit):
                next_state = self._apply(commit)
            case Applied() | Skipped() | Resolving():
                next_state = Ready()
            case OtherFailure(commit=commit, result=result):
                next_state = self._handle_failure(commit, result)
            case Conflicted(commit=commit, files=files):
                next_state = self._handle_conflict(commit, files)
            case Completed() | Aborted():
                raise RuntimeError(f"Session already finished in state {type(state).__name__}")

        self._enter(next_state)
        return next_state

    def _enter(self, state: SessionState) -> None:
        if isinstance(state, Applied):
            self.applied_count += 1
        elif isinstance(state, Skipped):
            self.skipped_count += 1

        logger.debug("Session transition: %s -> %s", type(self.state).__name__, state)
        self.state = state
        self.history.append(state)
        self._driver.on_transition(state)

    def _next_commit(self) -> SessionState:
        if not self._remaining:
            return Completed()
        return Applying(self._remaining.popleft())

    def _apply(self, commit: Commit) -> SessionState:
        result = self._git.cherry_pick(self._repo_root, commit.sha)
        if result.success:
            return Applied(commit, result)

        failure = classify_pick_failure(result, self._git.conflicted_files(self._repo_root))
        logger.debug("Cherry-pick of %s failed: %s", commit.short_sha, failure)
        if isinstance(failure, ConflictDetected):
            return Conflicted(commit, tuple(failure.files), result)
        return OtherFailure(commit, result)

    def _handle_failure(self, commit: Commit, result: CommandResult) -> SessionState:
        action = self._driver.choose_failure_action(commit, result)
        if action is FailureAction.ABORT:
            return Aborted(commit, self._git.cherry_pick_abort(self._repo_root))
        return Skipped(commit, self._git.cherry_pick_skip(self._repo_root))

    def _handle_conflict(self, commit: Commit, files: tuple[str, ...]) -> SessionState:
        inspector = ConflictInspector(self._git, self._repo_root, files)
        resolution = self._driver.choose_conflict_resolution(commit, inspector)

        if resolution is ConflictResolution.ABORT:
            return Aborted(commit, self._git.cherry_pick_abort(self._repo_root))
        if resolution is ConflictResolution.SKIP:
            return Skipped(commit, self._git.cherry_pick_skip(self._repo_root))

        stage_result = self._git.stage_all(self._repo_root)
        if not stage_result.success:
            logger.warning("Staging failed before continue: %s", stage_result.combined_output)

        continue_result = self._git.cherry_pick_continue(self._repo_root)
        if continue_result.success:
            return Applied(commit, continue_result)
        return Resolving(commit, continue_result)

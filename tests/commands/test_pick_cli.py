"""Tests for the pick command through the click entry point."""

from click.testing import CliRunner

from git_cp.cli.cli import cli
from git_cp.core.command_runner import CommandResult
from git_cp.core.config import GlobalConfig
from tests.fakes.context import create_test_context, make_commit
from tests.fakes.git import FakeGit

NEWEST = make_commit(3, subject="add endpoint")
MIDDLE = make_commit(2, subject="refactor handler")
OLDEST = make_commit(1, subject="fix typo")


def _git(**kwargs) -> FakeGit:
    kwargs.setdefault("branches", ["main", "feature-x", "release"])
    kwargs.setdefault("commits", {"feature-x": [NEWEST, MIDDLE, OLDEST]})
    return FakeGit(**kwargs)


def test_pick_with_options_applies_selection() -> None:
    git = _git()
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["pick", "--source", "feature-x", "--target", "release"],
        obj=create_test_context(git=git),
        input="1,3\n",
    )

    assert result.exit_code == 0, result.output
    assert git.cherry_picked == [OLDEST.sha, NEWEST.sha]
    assert "2 commit(s) selected." in result.output
    assert "Done!" in result.output


def test_no_subcommand_runs_interactive_pick() -> None:
    git = _git()
    runner = CliRunner()

    # source branch, commit selection, target branch
    result = runner.invoke(
        cli, [], obj=create_test_context(git=git), input="feature-x\n2\nrelease\n"
    )

    assert result.exit_code == 0, result.output
    assert git.cherry_picked == [MIDDLE.sha]
    assert "Current branch:" in result.output


def test_invalid_target_option_exits_1() -> None:
    git = _git()
    runner = CliRunner()

    result = runner.invoke(
        cli, ["pick", "--target", "fix me"], obj=create_test_context(git=git)
    )

    assert result.exit_code == 1
    assert "Invalid target branch 'fix me'" in result.output
    assert git.operations == []


def test_prompted_target_is_validated_until_valid() -> None:
    git = _git()
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["pick", "--source", "feature-x"],
        obj=create_test_context(git=git),
        input="1\nfix me\nrelease\n",
    )

    assert result.exit_code == 0, result.output
    assert "cannot contain spaces" in result.output
    assert git.operations[0] == ("checkout", "release")


def test_outside_repository_exits_1() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["pick"], obj=create_test_context(git=FakeGit(is_repo=False)))

    assert result.exit_code == 1
    assert "Not inside a git repository." in result.output


def test_creation_declined_exits_0_without_changes() -> None:
    git = _git(branches=["main", "feature-x"])
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["pick", "-s", "feature-x", "-t", "hotfix"],
        obj=create_test_context(git=git),
        input="1\nn\n",
    )

    assert result.exit_code == 0, result.output
    assert "doesn't exist. Create it?" in result.output
    assert git.operations == []
    assert "Done!" not in result.output


def test_branch_creation_failure_exits_1() -> None:
    git = _git(
        branches=["main", "feature-x"],
        create_results={"hotfix": CommandResult.failed("fatal: not a valid branch name")},
    )
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["pick", "-s", "feature-x", "-t", "hotfix"],
        obj=create_test_context(git=git),
        input="1\ny\n",
    )

    assert result.exit_code == 1
    assert "Branch creation failed" in result.output
    assert git.cherry_picked == []


def test_conflict_resolution_through_prompts() -> None:
    """View one diff, then stage and continue."""
    git = _git(
        cherry_pick_results={NEWEST.sha: CommandResult.failed("CONFLICT (content)")},
        conflicts={NEWEST.sha: ["api.py"]},
        diffs={"api.py": "@@ -1 +1 @@\n-old\n+new"},
    )
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["pick", "-s", "feature-x", "-t", "release"],
        obj=create_test_context(git=git),
        input="1\n1\n\nc\n",
    )

    assert result.exit_code == 0, result.output
    assert "Conflicts detected" in result.output
    assert "+new" in result.output
    assert git.diff_requests == ["api.py"]
    assert ("cherry-pick", "--continue") in git.operations
    assert "Applied" in result.output


def test_failure_abort_through_prompts() -> None:
    git = _git(cherry_pick_results={OLDEST.sha: CommandResult.failed("fatal: bad object")})
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["pick", "-s", "feature-x", "-t", "release"],
        obj=create_test_context(git=git),
        input="1,3\na\n",
    )

    assert result.exit_code == 0, result.output
    assert "Cherry-pick failed" in result.output
    assert "Aborted." in result.output
    assert git.cherry_picked == [OLDEST.sha]
    assert git.operations[-1] == ("cherry-pick", "--abort")


def test_dry_run_prints_commands_without_mutating() -> None:
    git = _git(remotes=["origin"])
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["pick", "-s", "feature-x", "-t", "release", "--dry-run", "--push"],
        obj=create_test_context(git=git),
        input="1\n",
    )

    assert result.exit_code == 0, result.output
    assert f"git cherry-pick {NEWEST.sha}" in result.output
    assert "(dry run)" in result.output
    assert "git push origin release" in result.output
    assert git.operations == []


def test_push_prompt_accepted() -> None:
    git = _git(remotes=["origin"])
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["pick", "-s", "feature-x", "-t", "release"],
        obj=create_test_context(git=git),
        input="1\ny\n",
    )

    assert result.exit_code == 0, result.output
    assert "Push to remote? (git push origin release)" in result.output
    assert git.push_calls == [("push", "origin", "release")]


def test_branch_list_is_paged_and_searchable() -> None:
    branches = ["main", "develop", "feature-x", "release"]
    git = _git(branches=branches)
    ctx = create_test_context(git=git, global_config=GlobalConfig(page_size=2))
    runner = CliRunner()

    # "feature" is not listed on the first page but matches exactly one branch
    result = runner.invoke(cli, ["pick", "-t", "release"], obj=ctx, input="feat\n1\n")

    assert result.exit_code == 0, result.output
    assert "2 more; type a name or search text" in result.output
    assert git.list_commits_calls == [("feature-x", 60)]

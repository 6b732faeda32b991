"""Tests for the config command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from git_cp.cli.cli import cli
from git_cp.core.config import CONFIG_PATH_ENV, GlobalConfig, load_global_config
from tests.fakes.context import create_test_context


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "config.toml"
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))
    return path


def test_config_list_displays_global_config(config_path: Path) -> None:
    """Test that config list displays every key."""
    runner = CliRunner()
    test_ctx = create_test_context(global_config=GlobalConfig(confirm_push_default=True))

    result = runner.invoke(cli, ["config", "list"], obj=test_ctx)

    assert result.exit_code == 0, result.output
    assert "Global configuration" in result.output
    assert "commit_limit=60" in result.output
    assert "remote=origin" in result.output
    assert "confirm_push_default=true" in result.output
    assert "page_size=15" in result.output


def test_config_get_prints_value(config_path: Path) -> None:
    runner = CliRunner()
    test_ctx = create_test_context(global_config=GlobalConfig(remote="upstream"))

    result = runner.invoke(cli, ["config", "get", "remote"], obj=test_ctx)

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "upstream"


def test_config_get_invalid_key(config_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "get", "nope"], obj=create_test_context())

    assert result.exit_code == 1
    assert "Invalid key: nope" in result.output


def test_config_set_writes_file(config_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["config", "set", "commit_limit", "25"], obj=create_test_context()
    )

    assert result.exit_code == 0, result.output
    assert "Set commit_limit=25" in result.output
    assert load_global_config(config_path).commit_limit == 25


def test_config_set_bool(config_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["config", "set", "confirm_push_default", "yes"], obj=create_test_context()
    )

    assert result.exit_code == 0, result.output
    assert "Set confirm_push_default=true" in result.output
    assert load_global_config(config_path).confirm_push_default is True


def test_config_set_rejects_invalid_value(config_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["config", "set", "commit_limit", "0"], obj=create_test_context()
    )

    assert result.exit_code == 1
    assert "positive integer" in result.output
    assert not config_path.exists()


def test_malformed_config_file_exits_1(config_path: Path) -> None:
    """Without a test context the CLI loads the config file itself."""
    config_path.write_text("commit_limit = [\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "list"])

    assert result.exit_code == 1
    assert "Malformed config" in result.output

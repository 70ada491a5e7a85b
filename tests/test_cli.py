"""Tests for CLI functionality."""
import warnings

import pytest
from click.testing import CliRunner
from muselet.cli import main


@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()


def test_check_passes_with_required_sections(cli_runner, tmp_path):
    result = cli_runner.invoke(
        main, ["check", "-p", str(tmp_path), "--type", "fix"],
        input="### Why\nreasons\n### Cause\nc\n### Approach\na\n",
    )
    assert result.exit_code == 0
    assert "0 errors, 0 warnings" in result.output


def test_check_fails_without_required_sections(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["check", "-p", str(tmp_path), "-t", "refactor"], input="no context\n")
    assert result.exit_code == 1
    assert "refactor commits should include: Why, Approach" in result.output


def test_check_warning_does_not_fail(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["check", "-p", str(tmp_path), "-t", "fix"], input="### Why\nr\n")
    assert result.exit_code == 0
    assert "fix commits: consider adding: Cause, Approach" in result.output


def test_check_reads_body_file(cli_runner, tmp_path):
    body_file = tmp_path / "body.txt"
    body_file.write_text("Here's ### Why\nreasons\n")
    result = cli_runner.invoke(main, ["check", "-p", str(tmp_path), "-t", "fix", "-b", str(body_file)])
    assert result.exit_code == 1
    assert "fix commits should include: Why" in result.output


@pytest.mark.parametrize("flag", ["--merge", "--revert"])
def test_check_exempt_commits(cli_runner, tmp_path, flag):
    result = cli_runner.invoke(main, ["check", "-p", str(tmp_path), "-t", "fix", flag], input="")
    assert result.exit_code == 0


def test_check_uses_repository_config(cli_runner, repo_with_config):
    result = cli_runner.invoke(main, ["check", "-p", str(repo_with_config), "-t", "docs"], input="update readme\n")
    assert result.exit_code == 1
    assert "docs commits should include: Context" in result.output

    result = cli_runner.invoke(main, ["check", "-p", str(repo_with_config), "-t", "fix"], input="### Why\nr\n")
    assert "consider adding: Cause" in result.output
    assert "Approach" not in result.output


def test_check_writes_log_file(cli_runner, tmp_path):
    log_file = tmp_path / "lint.log"
    result = cli_runner.invoke(
        main, ["check", "-p", str(tmp_path), "-t", "fix", "-l", str(log_file)], input="nothing\n",
    )
    assert result.exit_code == 1
    assert "ERROR context-by-type (fix)" in log_file.read_text()


def test_rules_lists_defaults(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["rules", "-p", str(tmp_path)])
    assert result.exit_code == 0
    assert "Using default values" in result.output
    assert "context-by-type (level 2, always)" in result.output
    assert "context-recommended (level 1, always)" in result.output
    assert "Invariants" in result.output


def test_rules_lists_configured_sections(cli_runner, repo_with_config):
    result = cli_runner.invoke(main, ["rules", "-p", str(repo_with_config)])
    assert result.exit_code == 0
    assert "Config file:" in result.output
    assert "Context" in result.output
    assert "refactor" not in result.output


def test_check_reads_stdin_by_default(cli_runner, tmp_path):
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        result = cli_runner.invoke(main, ["check", "-p", str(tmp_path), "-t", "fix"], input="### Why\nr\n")
    assert result.exit_code == 0
    assert "0 errors, 1 warnings" in result.output

"""Unit tests for the tix CLI entry point."""

from unittest.mock import AsyncMock, MagicMock, patch

import click
import pytest
from click.testing import CliRunner

from tix.exceptions import ConfigurationError, IssueHostError
from tix.git.exceptions import BranchExistsError
from tix.main import cli
from tix.utils.logging_config import level_for_verbosity

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def mock_configure_logging():
    """Keep structlog from binding the runner's temporary stderr."""
    with patch("tix.main.configure_logging") as configure:
        yield configure


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """Create a minimal configuration file."""
    path = tmp_path / "tix.yml"
    path.write_text(
        """
repositories:
  - name: api
    directory: /srv/src/api
    github_repo: acme/api
"""
    )
    return path


@pytest.fixture
def mock_workflow():
    """Patch CreateWorkflow so no real work happens."""
    with patch("tix.main.CreateWorkflow") as workflow_class:
        workflow = MagicMock()
        workflow.run = AsyncMock()
        workflow_class.return_value = workflow
        yield workflow_class


# =============================================================================
# Group options
# =============================================================================


class TestCliGroup:
    """Tests for the top-level group."""

    def test_help(self, cli_runner):
        result = cli_runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "create" in result.output
        assert "--config" in result.output

    def test_version(self, cli_runner):
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "tix" in result.output

    def test_missing_config(self, cli_runner, tmp_path):
        """A missing configuration file exits 1 before the workflow."""
        result = cli_runner.invoke(cli, ["--config", str(tmp_path / "nope.yml"), "create"])

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output

    def test_invalid_config(self, cli_runner, tmp_path, mock_workflow):
        path = tmp_path / "bad.yml"
        path.write_text("repositories: [unclosed\n")

        result = cli_runner.invoke(cli, ["--config", str(path), "create"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        mock_workflow.assert_not_called()

    def test_config_from_environment(self, cli_runner, config_file, mock_workflow):
        """TIX_CONFIG selects the configuration file."""
        result = cli_runner.invoke(cli, ["create", "-t", "Fix login bug"], env={"TIX_CONFIG": str(config_file)})

        assert result.exit_code == 0
        settings = mock_workflow.call_args.args[0]
        assert settings.repository_names() == ["api"]


# =============================================================================
# create
# =============================================================================


class TestCreateCommand:
    """Tests for the create command."""

    def test_runs_workflow_with_title(self, cli_runner, config_file, mock_workflow):
        result = cli_runner.invoke(cli, ["--config", str(config_file), "create", "--title", "Fix login bug"])

        assert result.exit_code == 0
        mock_workflow.return_value.run.assert_awaited_once_with("Fix login bug")

    def test_runs_workflow_without_title(self, cli_runner, config_file, mock_workflow):
        result = cli_runner.invoke(cli, ["--config", str(config_file), "create"])

        assert result.exit_code == 0
        mock_workflow.return_value.run.assert_awaited_once_with(None)

    @pytest.mark.parametrize(
        "error,expected",
        [
            (ConfigurationError("Repository 'api' must set exactly one"), "Error: Repository 'api'"),
            (IssueHostError("rejected", host="github", status_code=422), "Error: rejected (HTTP 422)"),
            (BranchExistsError("42-fix"), "Hint:"),
        ],
    )
    def test_tix_errors_exit_1(self, cli_runner, config_file, mock_workflow, error, expected):
        """Known errors print a message and exit 1."""
        mock_workflow.return_value.run.side_effect = error

        result = cli_runner.invoke(cli, ["--config", str(config_file), "create", "-t", "x"])

        assert result.exit_code == 1
        assert expected in result.output

    def test_abort_exits_130(self, cli_runner, config_file, mock_workflow):
        mock_workflow.return_value.run.side_effect = click.Abort()

        result = cli_runner.invoke(cli, ["--config", str(config_file), "create"])

        assert result.exit_code == 130

    def test_keyboard_interrupt_exits_130(self, cli_runner, config_file, mock_workflow):
        mock_workflow.return_value.run.side_effect = KeyboardInterrupt()

        result = cli_runner.invoke(cli, ["--config", str(config_file), "create"])

        assert result.exit_code == 130
        assert "Interrupted" in result.output

    def test_unexpected_error(self, cli_runner, config_file, mock_workflow):
        mock_workflow.return_value.run.side_effect = RuntimeError("kaboom")

        result = cli_runner.invoke(cli, ["--config", str(config_file), "create"])

        assert result.exit_code == 1
        assert "Unexpected error: kaboom" in result.output


class TestLogLevel:
    """Tests for verbosity handling."""

    @pytest.mark.parametrize(
        "verbose,log_level,expected",
        [
            (0, None, "WARNING"),
            (1, None, "INFO"),
            (2, None, "DEBUG"),
            (5, None, "DEBUG"),
            (2, "error", "ERROR"),
        ],
    )
    def test_level_for_verbosity(self, verbose, log_level, expected):
        assert level_for_verbosity(verbose, log_level) == expected

    def test_verbose_flag(self, cli_runner, config_file, mock_workflow, mock_configure_logging):
        result = cli_runner.invoke(cli, ["-vv", "--config", str(config_file), "create", "-t", "x"])

        assert result.exit_code == 0
        mock_configure_logging.assert_called_once_with("DEBUG")

    def test_default_level(self, cli_runner, config_file, mock_workflow, mock_configure_logging):
        cli_runner.invoke(cli, ["--config", str(config_file), "create", "-t", "x"])

        mock_configure_logging.assert_called_once_with("WARNING")

    def test_log_level_option(self, cli_runner, config_file, mock_workflow, mock_configure_logging):
        cli_runner.invoke(cli, ["--log-level", "info", "-v", "--config", str(config_file), "create", "-t", "x"])

        mock_configure_logging.assert_called_once_with("INFO")

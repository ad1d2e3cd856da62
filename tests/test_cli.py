"""Tests for the cooldown CLI layer."""

from __future__ import annotations

import click.testing
import pytest

import cooldown
from cooldown.cli.main import cli


@pytest.fixture()
def runner() -> click.testing.CliRunner:
    """Return a Click CliRunner for invoking CLI commands."""
    return click.testing.CliRunner()


# ---------------------------------------------------------------------------
# cooldown run
# ---------------------------------------------------------------------------


class TestRunCommand:
    """Tests for ``cooldown run <duration>``."""

    def test_run_default_steps(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "4"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "step   1  running  remaining 3  progress  25%"
        assert lines[3] == "step   4  ready    remaining 0  progress 100%  complete"
        assert lines[4] == "step   5  ready    remaining 0  progress 100%"
        assert lines[-1] == "Completed 1 time(s)"

    def test_run_with_steps(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "10", "--steps", "2"])
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 3
        assert "Completed 0 time(s)" in result.output

    def test_run_with_schedule(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(
            cli, ["run", "2", "--steps", "4", "--at", "1:start", "--at", "2:pause"]
        )
        assert result.exit_code == 0
        assert "step   2  paused   remaining 1" in result.output
        assert "Completed 0 time(s)" in result.output

    def test_run_non_positive_duration(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "--", "-3"])
        assert result.exit_code == 0
        assert "step   1  ready    remaining 0  progress 100%" in result.output

    def test_run_missing_argument(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run"])
        assert result.exit_code != 0

    def test_run_invalid_duration(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "abc"])
        assert result.exit_code != 0

    def test_run_negative_steps(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "3", "--steps", "-1"])
        assert result.exit_code != 0

    def test_run_invalid_schedule(self, runner: click.testing.CliRunner) -> None:
        """A bad STEP:ACTION entry is printed to stderr and exits 1."""
        result = runner.invoke(cli, ["run", "3", "--at", "2:jump"])
        assert result.exit_code == 1
        assert "unknown action 'jump'" in result.output


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


class TestGlobalOptions:
    def test_version(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert cooldown.__version__ in result.output

    def test_invalid_log_level(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "LOUD", "run", "3"])
        assert result.exit_code != 0

    def test_log_level_from_environment(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "1"], env={"COOLDOWN_LOG_LEVEL": "debug"})
        assert result.exit_code == 0

    def test_help_lists_run(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "run" in result.output

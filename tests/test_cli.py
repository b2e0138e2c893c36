"""Tests for CLI interface."""

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from node_cleaner.cli import app
from node_cleaner.display import console
from node_cleaner.walker import WalkError

runner = CliRunner()


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "node-cleaner version" in result.stdout


class TestHelp:
    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--path" in result.stdout
        assert "--workers" in result.stdout
        assert "--dry-run" in result.stdout


class TestDryRun:
    def test_dry_run_keeps_directories(self, project_tree):
        result = runner.invoke(
            app, ["--path", str(project_tree), "--dry-run", "--no-notify", "-w", "2"]
        )

        assert result.exit_code == 0
        assert "DRY RUN" in result.stdout
        assert "Dry Run Complete" in result.stdout
        assert (project_tree / "a" / "node_modules").exists()

    @patch("node_cleaner.cli.get_notifier")
    def test_notifies_on_completion(self, mock_get_notifier, project_tree):
        result = runner.invoke(app, ["--path", str(project_tree), "--dry-run"])

        assert result.exit_code == 0
        summary = mock_get_notifier.return_value.notify.call_args.args[0]
        assert summary.found == 2
        assert summary.dry_run is True
        assert mock_get_notifier.call_args.kwargs["console"] is console


class TestDelete:
    def test_confirmed_deletion(self, project_tree):
        result = runner.invoke(
            app, ["--path", str(project_tree), "--no-notify"], input="yes\n"
        )

        assert result.exit_code == 0
        assert "Cleanup Complete" in result.stdout
        assert not (project_tree / "a" / "node_modules").exists()
        assert not (project_tree / "b" / "c" / "node_modules").exists()

    def test_declined_deletion(self, project_tree):
        result = runner.invoke(
            app, ["--path", str(project_tree), "--no-notify"], input="no\n"
        )

        assert result.exit_code == 0
        assert "Cancelled" in result.stdout
        assert (project_tree / "a" / "node_modules").exists()

    def test_yes_skips_confirmation(self, project_tree):
        result = runner.invoke(app, ["--path", str(project_tree), "--no-notify", "-y"])

        assert result.exit_code == 0
        assert "Type 'yes'" not in result.stdout
        assert not (project_tree / "a" / "node_modules").exists()


class TestInteractive:
    @patch("node_cleaner.cli.get_notifier")
    def test_prompts_for_settings(self, mock_get_notifier, project_tree):
        result = runner.invoke(app, [], input=f"{project_tree}\n1\n2\n")

        assert result.exit_code == 0
        assert "Interactive Mode" in result.stdout
        assert "Selected: Dry Run" in result.stdout
        assert "Selected: 2 workers" in result.stdout
        assert (project_tree / "a" / "node_modules").exists()

    @patch("node_cleaner.cli.get_notifier")
    def test_reprompts_for_missing_path(self, mock_get_notifier, project_tree):
        missing = project_tree / "missing"
        result = runner.invoke(app, [], input=f"{missing}\n{project_tree}\n1\n1\n")

        assert result.exit_code == 0
        assert "Path does not exist" in result.stdout


class TestErrors:
    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, ["--path", str(tmp_path / "missing"), "--dry-run"])
        assert result.exit_code == 1
        assert "Path does not exist" in result.stdout

    def test_invalid_worker_count(self, tmp_path):
        result = runner.invoke(app, ["--path", str(tmp_path), "--dry-run", "-w", "0"])
        assert result.exit_code == 1
        assert "Error" in result.stdout

    @patch("node_cleaner.cli.run_scan", side_effect=WalkError(Path("/locked"), "Permission denied"))
    def test_unreadable_root(self, mock_run_scan, tmp_path):
        result = runner.invoke(app, ["--path", str(tmp_path), "--dry-run", "--no-notify"])
        assert result.exit_code == 1
        assert "Permission denied" in result.stdout

    @patch("node_cleaner.cli.run_scan", side_effect=KeyboardInterrupt)
    def test_interrupted(self, mock_run_scan, tmp_path):
        result = runner.invoke(app, ["--path", str(tmp_path), "--dry-run", "--no-notify"])
        assert result.exit_code == 130
        assert "Interrupted" in result.stdout

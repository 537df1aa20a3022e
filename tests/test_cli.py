"""Tests for the vercel-to-netlify CLI."""

import json
import subprocess
import sys

import pytest


def run_cli(*args, cwd=None):
    return subprocess.run(
        [sys.executable, "-m", "vercel_to_netlify.cli", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
    )


class TestCLI:
    """Test CLI entry points and basic functionality."""

    def test_version(self):
        """Test --version flag."""
        result = run_cli("--version")
        assert result.returncode == 0
        assert "version" in result.stdout.lower()

    def test_help(self):
        """Test --help lists the commands."""
        result = run_cli("--help")
        assert result.returncode == 0
        for command in ("migrate", "convert-config", "env-migrate", "checklist", "serve"):
            assert command in result.stdout

    def test_migrate_help(self):
        """Test migrate --help."""
        result = run_cli("migrate", "--help")
        assert result.returncode == 0
        assert "--answers" in result.stdout
        assert "--path" in result.stdout

    def test_help_topics(self):
        """Test help topic listing and content."""
        result = run_cli("help")
        assert result.returncode == 0
        assert "env" in result.stdout

        result = run_cli("help", "env")
        assert result.returncode == 0
        assert "NEXT_PUBLIC_" in result.stdout

    def test_unknown_help_topic(self):
        """Test unknown help topics exit non-zero."""
        result = run_cli("help", "nope")
        assert result.returncode == 1


class TestCommands:
    """Test the file-writing commands."""

    @pytest.fixture
    def project(self, tmp_path):
        (tmp_path / "vercel.json").write_text(json.dumps({
            "buildCommand": "npm run build",
            "outputDirectory": "out",
        }))
        (tmp_path / ".env").write_text("NEXT_PUBLIC_X=1\nY=2\n")
        return tmp_path

    def test_convert_config(self, project):
        """Test convert-config writes netlify.toml."""
        result = run_cli("convert-config", "--path", str(project))
        assert result.returncode == 0
        assert 'publish = "out"' in (project / "netlify.toml").read_text()

    def test_convert_config_defaults_to_cwd(self, project):
        """Test convert-config uses the working directory."""
        result = run_cli("convert-config", cwd=str(project))
        assert result.returncode == 0
        assert (project / "netlify.toml").exists()

    def test_env_migrate(self, project):
        """Test env-migrate writes the env documents."""
        result = run_cli("env-migrate", "-p", str(project))
        assert result.returncode == 0
        assert (project / ".env.netlify").exists()
        assert (project / "ENV_MIGRATION_INSTRUCTIONS.md").exists()
        assert (project / "netlify-env-commands.sh").exists()

    def test_checklist(self, project):
        """Test checklist writes MIGRATION_CHECKLIST.md."""
        result = run_cli("checklist", "-p", str(project), "-f", "Vue")
        assert result.returncode == 0
        assert "**Framework:** Vue" in (project / "MIGRATION_CHECKLIST.md").read_text()

    def test_missing_project_exit_code(self, tmp_path):
        """Test a missing project directory exits with the path error code."""
        result = run_cli("convert-config", "--path", str(tmp_path / "missing"))
        assert result.returncode == 11
        assert "not found" in result.stdout

    def test_migrate_with_answers(self, project):
        """Test a silent migration from an answers file."""
        answers = project / "answers.yaml"
        answers.write_text(
            "has_vercel_json: true\nmigrate_env: true\nframework: Vite\ngenerate_checklist: false\n"
        )

        result = run_cli("migrate", "--path", str(project), "--answers", str(answers))

        assert result.returncode == 0, result.stdout + result.stderr
        assert (project / "netlify.toml").exists()
        assert (project / ".env.netlify").exists()
        assert not (project / "MIGRATION_CHECKLIST.md").exists()

    def test_migrate_with_bad_answers(self, project):
        """Test an invalid answers file exits with the answers error code."""
        answers = project / "answers.yaml"
        answers.write_text("migrate_env: maybe-later\n")

        result = run_cli("migrate", "--path", str(project), "--answers", str(answers))
        assert result.returncode == 13

    def test_migrate_yes(self, project):
        """Test --yes accepts defaults."""
        result = run_cli("migrate", "--path", str(project), "--yes")
        assert result.returncode == 0, result.stdout + result.stderr
        assert (project / "MIGRATION_CHECKLIST.md").exists()

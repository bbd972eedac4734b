"""Tests for shell action execution."""

import shutil
import subprocess

import pytest

from drako.models import ActionStatus
from drako.reporter import Level
from drako.runner import run_shell_action

from .conftest import FakeRunner


def test_runs_through_shell_in_directory(temp_dir, reporter, fake_runner):
    """Test the command runs via `sh -c` with the directory as cwd."""
    result = run_shell_action(
        str(temp_dir), "git init", False, reporter, runner=fake_runner, flag="--git", action="git"
    )

    assert result.status is ActionStatus.SUCCEEDED
    assert result.ok
    assert result.flag == "--git"
    assert result.action == "git"
    args, kwargs = fake_runner.calls[0]
    assert args == ["sh", "-c", "git init"]
    assert kwargs["cwd"] == str(temp_dir)
    assert kwargs["capture_output"] is True
    assert "timeout" not in kwargs
    assert reporter.entries == []


def test_verbose_success(temp_dir, reporter, fake_runner):
    """Test verbose runs confirm the command."""
    run_shell_action(str(temp_dir), "npm init -y", True, reporter, runner=fake_runner)

    assert reporter.messages(Level.SUCCESS) == [f"Ran npm init -y in {temp_dir}"]


def test_custom_shell_and_timeout(temp_dir, reporter, fake_runner):
    """Test shell and timeout are passed through."""
    run_shell_action(
        str(temp_dir), "true", False, reporter, runner=fake_runner, shell="bash", timeout=5
    )

    args, kwargs = fake_runner.calls[0]
    assert args[0] == "bash"
    assert kwargs["timeout"] == 5


def test_nonzero_exit_reports_stderr(temp_dir, reporter):
    """Test a failing command is FAILED with its standard error."""
    runner = FakeRunner(returncode=128, stderr="fatal: not allowed\n")

    result = run_shell_action(str(temp_dir), "git init", True, reporter, runner=runner)

    assert result.status is ActionStatus.FAILED
    assert result.reason == "fatal: not allowed"
    assert reporter.messages(Level.ERROR) == [f"Failed: git init in {temp_dir}"]
    assert reporter.entries[0].detail == "fatal: not allowed"
    assert reporter.messages(Level.SUCCESS) == []


def test_nonzero_exit_without_stderr(temp_dir, reporter):
    """Test the exit status is the reason when nothing was written to stderr."""
    runner = FakeRunner(returncode=3)

    result = run_shell_action(str(temp_dir), "false", False, reporter, runner=runner)

    assert result.reason == "exit status 3"


def test_spawn_failure(temp_dir, reporter):
    """Test an OSError while spawning is captured."""
    runner = FakeRunner(raises=FileNotFoundError(2, "No such file or directory", "sh"))

    result = run_shell_action(str(temp_dir), "cargo init", False, reporter, runner=runner)

    assert result.status is ActionStatus.FAILED
    assert "No such file or directory" in result.reason
    assert reporter.messages(Level.ERROR) == [f"Error running cargo init in {temp_dir}"]


def test_timeout(temp_dir, reporter):
    """Test a timed out command is FAILED, not raised."""
    runner = FakeRunner(raises=subprocess.TimeoutExpired(["sh"], 2))

    result = run_shell_action(str(temp_dir), "yarn init -y", False, reporter, runner=runner, timeout=2)

    assert result.status is ActionStatus.FAILED
    assert result.reason == "timed out after 2s"


@pytest.mark.skipif(shutil.which("sh") is None, reason="sh not available")
def test_real_process(temp_dir, reporter):
    """Test a real shell command runs in the target directory."""
    result = run_shell_action(str(temp_dir), "echo hi > marker", False, reporter)

    assert result.ok
    assert (temp_dir / "marker").read_text() == "hi\n"


@pytest.mark.skipif(shutil.which("sh") is None, reason="sh not available")
def test_real_process_failure_captures_stderr(temp_dir, reporter):
    """Test stderr from a real failing command is captured."""
    result = run_shell_action(str(temp_dir), "echo broken >&2; exit 1", False, reporter)

    assert result.status is ActionStatus.FAILED
    assert result.reason == "broken"

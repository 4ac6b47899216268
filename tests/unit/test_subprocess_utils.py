"""Tests for subprocess_utils module."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from prflow.subprocess_utils import (
    copied_env_for_git_subprocess,
    format_command,
    run_subprocess_with_context,
)


def test_format_command_quotes_arguments_with_spaces() -> None:
    """Multi-word arguments are shell-quoted so the line can be pasted."""
    cmd = ["git", "merge", "pr_42", "--no-ff", "-m", "Fix bug"]
    assert format_command(cmd) == "git merge pr_42 --no-ff -m 'Fix bug'"


def test_format_command_leaves_plain_arguments_alone() -> None:
    assert format_command(("git", "status", "--porcelain")) == "git status --porcelain"


def test_copied_env_for_git_subprocess_sets_git_terminal_prompt() -> None:
    """copied_env_for_git_subprocess sets GIT_TERMINAL_PROMPT=0."""
    env = copied_env_for_git_subprocess()
    assert env["GIT_TERMINAL_PROMPT"] == "0"


def test_copied_env_for_git_subprocess_preserves_existing_env() -> None:
    """copied_env_for_git_subprocess preserves existing environment variables."""
    with patch.dict("os.environ", {"PRFLOW_TEST_MARKER": "1"}):
        env = copied_env_for_git_subprocess()
    assert env["PRFLOW_TEST_MARKER"] == "1"


def test_run_subprocess_with_context_returns_completed_process(tmp_path: Path) -> None:
    result = run_subprocess_with_context(
        cmd=[sys.executable, "-c", "print('hello')"],
        operation_context="print hello",
        cwd=tmp_path,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "hello"


def test_run_subprocess_with_context_wraps_nonzero_exit(tmp_path: Path) -> None:
    """A failing command raises RuntimeError with context, exit code and stderr."""
    script = "import sys; sys.stderr.write('boom'); sys.exit(3)"
    with pytest.raises(RuntimeError) as exc_info:
        run_subprocess_with_context(
            cmd=[sys.executable, "-c", script],
            operation_context="run failing script",
            cwd=tmp_path,
        )

    message = str(exc_info.value)
    assert "Failed to run failing script" in message
    assert "Exit code: 3" in message
    assert "stderr: boom" in message
    assert isinstance(exc_info.value.__cause__, subprocess.CalledProcessError)


def test_run_subprocess_with_context_missing_executable(tmp_path: Path) -> None:
    """A missing program is reported as RuntimeError, not FileNotFoundError."""
    with pytest.raises(RuntimeError, match="command not found: prflow-no-such-program"):
        run_subprocess_with_context(
            cmd=["prflow-no-such-program", "--version"],
            operation_context="run missing program",
            cwd=tmp_path,
        )

"""Subprocess helpers with consistent error reporting.

Every git invocation in prflow goes through run_subprocess_with_context() so
failures carry the operation being attempted, the command line, the exit code
and whatever git wrote to stderr.
"""

import os
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path


def format_command(cmd: Sequence[str]) -> str:
    """Render an argument vector as a copy-pasteable shell command line."""
    return shlex.join(cmd)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Copy of os.environ that stops git from prompting for credentials.

    Without GIT_TERMINAL_PROMPT=0 a fetch or push against a remote that needs
    authentication blocks forever waiting on a terminal nobody is watching.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    *,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, converting failures into RuntimeError with context.

    Args:
        cmd: Argument vector, program first. Never interpreted by a shell.
        operation_context: Human description used in error messages
            (e.g. "checkout branch 'main'")
        cwd: Working directory for the command
        env: Environment for the child process

    Returns:
        The completed process with text stdout/stderr

    Raises:
        RuntimeError: If the command exits non-zero or the executable cannot
            be found
    """
    try:
        return subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            env=env,
        )
    except subprocess.CalledProcessError as e:
        message = f"Failed to {operation_context}"
        message += f"\nCommand: {format_command(cmd)}"
        message += f"\nExit code: {e.returncode}"
        stderr = e.stderr.strip() if e.stderr else ""
        if stderr:
            message += f"\nstderr: {stderr}"
        raise RuntimeError(message) from e
    except FileNotFoundError as e:
        raise RuntimeError(
            f"Failed to {operation_context}: command not found: {cmd[0]}"
        ) from e
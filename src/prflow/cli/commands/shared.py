"""Shared utilities for workflow commands (merge, sync)."""

import click

from prflow.gateway.process.types import SequenceResult
from prflow.output.output import user_output
from prflow.subprocess_utils import format_command


def exit_on_sequence_failure(result: SequenceResult, *, action: str) -> None:
    """Report a failed workflow and exit with status 1.

    Prints the command that failed, git's error output and any recovery steps
    that failed too, so the user knows what state the repository may be in.

    Raises:
        SystemExit: If result is a failure (with exit code 1)
    """
    failure = result.failure
    if failure is None:
        return

    user_output(click.style("Error: ", fg="red") + f"{action} failed")
    user_output(f"  Failed command: {format_command(failure.command)}")
    for line in failure.message.splitlines():
        user_output(f"    {line}")

    if result.failed_index is not None:
        user_output("  Recovery commands were run to restore the previous state.")

    for recovery_failure in result.recovery_failures:
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"recovery step failed: {format_command(recovery_failure.command)}"
        )
    if result.recovery_failures:
        user_output("  The repository may be partially recovered; check `git status`.")

    raise SystemExit(1)

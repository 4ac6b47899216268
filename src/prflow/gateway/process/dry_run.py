"""No-op ProcessRunner wrapper for dry-run mode.

Single commands are the read-only queries (current branch, status, rev-parse)
that workflows use to decide what to do, so they are delegated. Command
sequences are the mutations and are recorded instead of executed.
"""

from collections.abc import Sequence

import click

from prflow.gateway.process.abc import ProcessRunner
from prflow.gateway.process.types import (
    Command,
    CommandFailed,
    CommandSucceeded,
    SequenceResult,
)
from prflow.output.output import user_output
from prflow.subprocess_utils import format_command


class DryRunProcessRunner(ProcessRunner):
    """Wrapper that prevents execution of command sequences.

    Usage:
        real_runner = RealProcessRunner(cwd)
        noop_runner = DryRunProcessRunner(real_runner)

        # Queries work normally
        branch = noop_runner.run(["git", "rev-parse", "--abbrev-ref", "HEAD"])

        # Sequences are printed, recorded and reported as successful
        noop_runner.run_sequence(commands, recovery)
    """

    def __init__(self, wrapped: ProcessRunner) -> None:
        """Create a dry-run wrapper around a ProcessRunner implementation.

        Args:
            wrapped: The runner used for read-only queries
        """
        self._wrapped = wrapped
        self._planned: list[tuple[tuple[Command, ...], tuple[Command, ...]]] = []

    def execute(self, cmd: Sequence[str]) -> CommandSucceeded | CommandFailed:
        return self._wrapped.execute(cmd)

    def run(self, cmd: Sequence[str]) -> str | None:
        return self._wrapped.run(cmd)

    def run_sequence(
        self, commands: Sequence[Sequence[str]], recovery: Sequence[Sequence[str]]
    ) -> SequenceResult:
        """Print and record the sequence without executing anything."""
        for cmd in commands:
            user_output(click.style("[dry-run] ", fg="yellow") + format_command(cmd))
        self._planned.append(
            (tuple(tuple(c) for c in commands), tuple(tuple(c) for c in recovery))
        )
        return SequenceResult()

    @property
    def planned_sequences(self) -> list[tuple[tuple[Command, ...], tuple[Command, ...]]]:
        """Sequences that would have run, as (commands, recovery) tuples."""
        return list(self._planned)

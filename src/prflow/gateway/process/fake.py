"""Fake implementation of ProcessRunner for testing."""

from __future__ import annotations

from collections.abc import Sequence

from prflow.gateway.process.abc import ProcessRunner
from prflow.gateway.process.sequence import run_with_recovery
from prflow.gateway.process.types import (
    Command,
    CommandFailed,
    CommandSucceeded,
    SequenceResult,
)


class FakeProcessRunner(ProcessRunner):
    """In-memory fake implementation of ProcessRunner.

    This fake accepts pre-configured state in its constructor and tracks
    executions for test assertions.

    Constructor Injection:
    ---------------------
    - outputs: Mapping of command -> stdout for commands that succeed
    - failures: Mapping of command -> error message for commands that fail

    Commands in neither mapping succeed with empty output.

    Mutation Tracking:
    -----------------
    - executed_commands: Every command executed, in order
    - sequences: (commands, recovery) pairs passed to run_sequence()
    """

    def __init__(
        self,
        *,
        outputs: dict[Command, str] | None = None,
        failures: dict[Command, str] | None = None,
    ) -> None:
        """Create FakeProcessRunner with pre-configured state.

        Args:
            outputs: Mapping of command tuple -> stdout
            failures: Mapping of command tuple -> error message
        """
        self._outputs = outputs or {}
        self._failures = failures or {}

        self._executed_commands: list[Command] = []
        self._sequences: list[tuple[tuple[Command, ...], tuple[Command, ...]]] = []

    def execute(self, cmd: Sequence[str]) -> CommandSucceeded | CommandFailed:
        command = tuple(cmd)
        self._executed_commands.append(command)
        if command in self._failures:
            return CommandFailed(command=command, message=self._failures[command])
        return CommandSucceeded(output=self._outputs.get(command, "").strip())

    def run(self, cmd: Sequence[str]) -> str | None:
        result = self.execute(cmd)
        if isinstance(result, CommandFailed):
            return None
        return result.output

    def run_sequence(
        self, commands: Sequence[Sequence[str]], recovery: Sequence[Sequence[str]]
    ) -> SequenceResult:
        self._sequences.append(
            (tuple(tuple(c) for c in commands), tuple(tuple(c) for c in recovery))
        )
        return run_with_recovery(self.execute, commands, recovery)

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def executed_commands(self) -> list[Command]:
        """Read-only access to executed commands for test assertions."""
        return list(self._executed_commands)

    @property
    def sequences(self) -> list[tuple[tuple[Command, ...], tuple[Command, ...]]]:
        """Read-only access to run_sequence() calls.

        Returns list of (commands, recovery) tuples.
        """
        return list(self._sequences)

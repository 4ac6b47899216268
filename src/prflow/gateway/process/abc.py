"""Abstract interface for running external commands.

Architecture:
- ProcessRunner: Abstract base class defining the interface
- RealProcessRunner: Production implementation using subprocess
- FakeProcessRunner: In-memory implementation for tests
- DryRunProcessRunner: Wrapper that never executes command sequences
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from prflow.gateway.process.types import CommandFailed, CommandSucceeded, SequenceResult


class ProcessRunner(ABC):
    """Abstract interface for executing commands in one working directory.

    All implementations (real, fake, dry-run) must implement this interface.
    Commands are argument vectors and are never passed through a shell.
    """

    @abstractmethod
    def execute(self, cmd: Sequence[str]) -> CommandSucceeded | CommandFailed:
        """Run one command to completion.

        Args:
            cmd: Argument vector, program first

        Returns:
            CommandSucceeded with trimmed stdout, or CommandFailed with the
            captured error output
        """
        ...

    @abstractmethod
    def run(self, cmd: Sequence[str]) -> str | None:
        """Run one command and return its trimmed output.

        Returns:
            Trimmed stdout ("" if the command printed nothing), or None if the
            command failed
        """
        ...

    @abstractmethod
    def run_sequence(
        self, commands: Sequence[Sequence[str]], recovery: Sequence[Sequence[str]]
    ) -> SequenceResult:
        """Run commands in order, running the recovery list on the first failure.

        Execution stops at the first failing command. Every recovery command is
        then run exactly once, in order, regardless of its own outcome. When all
        commands succeed the recovery list is never touched.

        Args:
            commands: Main command list, in execution order
            recovery: Commands that undo state the main list may have created

        Returns:
            SequenceResult describing the outcome
        """
        ...

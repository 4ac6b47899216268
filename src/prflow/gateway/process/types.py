"""Result types for process runner operations.

CommandSucceeded | CommandFailed is a discriminated union: callers narrow with
isinstance() rather than catching exceptions.
"""

from dataclasses import dataclass

# Argument vector, program first.
Command = tuple[str, ...]


@dataclass(frozen=True)
class CommandSucceeded:
    """Command exited zero. output is trimmed stdout and may be empty."""

    output: str


@dataclass(frozen=True)
class CommandFailed:
    """Command exited non-zero or could not be started."""

    command: Command
    message: str


@dataclass(frozen=True)
class SequenceResult:
    """Outcome of running a command list with a recovery list.

    Attributes:
        failure: The main-list command that failed, or None if all succeeded
        failed_index: Position of the failed command in the main list. None when
            the sequence succeeded or was refused before any command ran.
        recovery_failures: Recovery commands that failed. These never change
            the overall outcome; they are diagnostics only.
    """

    failure: CommandFailed | None = None
    failed_index: int | None = None
    recovery_failures: tuple[CommandFailed, ...] = ()

    @property
    def success(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.success

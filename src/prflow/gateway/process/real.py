"""Production implementation of ProcessRunner using subprocess."""

import logging
from collections.abc import Sequence
from pathlib import Path

from prflow.gateway.process.abc import ProcessRunner
from prflow.gateway.process.sequence import run_with_recovery
from prflow.gateway.process.types import CommandFailed, CommandSucceeded, SequenceResult
from prflow.subprocess_utils import (
    copied_env_for_git_subprocess,
    format_command,
    run_subprocess_with_context,
)

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Runs commands as child processes in a fixed working directory.

    Each command blocks until it exits. There is no timeout: a hung command
    hangs the caller.
    """

    def __init__(self, cwd: Path) -> None:
        self._cwd = cwd

    def execute(self, cmd: Sequence[str]) -> CommandSucceeded | CommandFailed:
        command = tuple(cmd)
        logger.debug("Running: %s", format_command(command))
        try:
            result = run_subprocess_with_context(
                cmd=command,
                operation_context=f"run '{format_command(command)}'",
                cwd=self._cwd,
                env=copied_env_for_git_subprocess(),
            )
        except RuntimeError as e:
            logger.debug("Command failed: %s", e)
            return CommandFailed(command=command, message=str(e))
        return CommandSucceeded(output=result.stdout.strip())

    def run(self, cmd: Sequence[str]) -> str | None:
        result = self.execute(cmd)
        if isinstance(result, CommandFailed):
            return None
        return result.output

    def run_sequence(
        self, commands: Sequence[Sequence[str]], recovery: Sequence[Sequence[str]]
    ) -> SequenceResult:
        return run_with_recovery(self.execute, commands, recovery)

"""Sequential execution with best-effort recovery.

Used by the real and fake runners. The dry-run runner never executes a
sequence and does not use it.
"""

import logging
from collections.abc import Callable, Sequence

from prflow.gateway.process.types import CommandFailed, CommandSucceeded, SequenceResult
from prflow.subprocess_utils import format_command

logger = logging.getLogger(__name__)


def run_with_recovery(
    execute: Callable[[Sequence[str]], CommandSucceeded | CommandFailed],
    commands: Sequence[Sequence[str]],
    recovery: Sequence[Sequence[str]],
) -> SequenceResult:
    """Run commands until one fails, then run every recovery command once.

    Recovery commands are not guarded by further recovery. Their failures are
    logged and collected but never change the outcome.
    """
    for index, cmd in enumerate(commands):
        result = execute(cmd)
        if isinstance(result, CommandSucceeded):
            continue

        logger.info("Step %d failed: %s", index + 1, format_command(cmd))
        recovery_failures: list[CommandFailed] = []
        for recovery_cmd in recovery:
            recovery_result = execute(recovery_cmd)
            if isinstance(recovery_result, CommandFailed):
                logger.warning(
                    "Recovery step failed: %s: %s",
                    format_command(recovery_cmd),
                    recovery_result.message,
                )
                recovery_failures.append(recovery_result)

        return SequenceResult(
            failure=result,
            failed_index=index,
            recovery_failures=tuple(recovery_failures),
        )

    return SequenceResult()

"""Application context with dependency injection."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import click

from prflow.cli.config import LoadedConfig, load_config, resolve_config_dir
from prflow.gateway.process.abc import ProcessRunner
from prflow.gateway.process.dry_run import DryRunProcessRunner
from prflow.gateway.process.real import RealProcessRunner
from prflow.git.helper import GitHelper
from prflow.output.output import user_output


@dataclass(frozen=True)
class PrflowContext:
    """Immutable context holding all dependencies for prflow commands.

    Created at CLI entry point and threaded through the application.
    Tests build one with fake implementations and pass it as `obj=`.
    """

    git: GitHelper
    config: LoadedConfig
    dry_run: bool

    @staticmethod
    def for_test(
        runner: ProcessRunner,
        *,
        config: LoadedConfig | None = None,
        dry_run: bool = False,
    ) -> "PrflowContext":
        """Create test context around a pre-configured runner.

        Args:
            runner: Usually a FakeProcessRunner with configured outputs
            config: Defaults to LoadedConfig() when None
            dry_run: Wrap the runner in DryRunProcessRunner
        """
        if dry_run:
            runner = DryRunProcessRunner(runner)
        return PrflowContext(
            git=GitHelper(runner),
            config=config if config is not None else LoadedConfig(),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> PrflowContext:
    """Create production context with real implementations.

    Args:
        dry_run: If True, wrap the runner so command sequences are printed
                 instead of executed

    Returns:
        PrflowContext rooted at the current working directory
    """
    try:
        cwd = Path(os.getcwd())
    except FileNotFoundError:
        user_output(click.style("Error: ", fg="red") + "Current directory no longer exists")
        raise SystemExit(1) from None

    config_dir = resolve_config_dir(cwd)
    try:
        config = load_config(config_dir)
    except tomllib.TOMLDecodeError as e:
        user_output(click.style("Error: ", fg="red") + f"Invalid prflow.toml in {config_dir}: {e}")
        raise SystemExit(1) from e

    runner: ProcessRunner = RealProcessRunner(cwd)
    if dry_run:
        runner = DryRunProcessRunner(runner)

    return PrflowContext(
        git=GitHelper(runner),
        config=config,
        dry_run=dry_run,
    )

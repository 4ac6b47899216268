"""prflow CLI entry point.

This package provides a Click-based CLI for merging pull requests and syncing
branches through git. See `prflow --help` for details.
"""

from prflow.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `prflow` console script."""
    cli()

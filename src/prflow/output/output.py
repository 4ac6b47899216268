"""User-facing output.

Messages for people go to stderr through click so they never mix with
machine-readable results printed to stdout.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message for the user on stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Print a result on stdout (tag names, changelog lines, PR numbers)."""
    click.echo(message)

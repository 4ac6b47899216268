"""Sync a branch from one remote to another.

An existing local branch is rebased onto <username>/<branch>; a missing one is
created from it. The result is pushed to <remote>, which is then fetched.
"""

import click

from prflow.cli.commands.shared import exit_on_sequence_failure
from prflow.core.context import PrflowContext
from prflow.git.types import SyncBranchRequest
from prflow.output.output import user_output


@click.command("sync")
@click.argument("branch")
@click.option("-u", "--username", help="Remote to take BRANCH from (default from prflow.toml)")
@click.option("-r", "--remote", help="Remote to push BRANCH to (default from prflow.toml)")
@click.pass_obj
def sync_cmd(
    ctx: PrflowContext, branch: str, username: str | None, remote: str | None
) -> None:
    """Update BRANCH from one remote and push it to another.

    Examples:

        # Bring develop from upstream into your fork
        prflow sync develop -u upstream -r origin
    """
    request = SyncBranchRequest(
        username=username or ctx.config.username,
        branch=branch,
        remote=remote or ctx.config.push_remote,
    )

    user_output(f"Syncing {branch} from {request.username} to {request.remote}...")
    result = ctx.git.sync_branch(request)
    exit_on_sequence_failure(result, action=f"Syncing {branch}")

    if ctx.dry_run:
        user_output("Dry run: no changes were made")
        return

    user_output(click.style("✓", fg="green") + f" {request.remote}/{branch} is up to date")

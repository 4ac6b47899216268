"""Merge a pull request from a remote with an explicit merge commit.

Flow:
1. Read the current branch and whether tracked files are dirty
2. Stash local changes
3. Fetch the PR head into pr_<n> and refresh <remote>/<target>
4. Rebase pr_<n> onto tmp_<target> and merge it with --no-ff
5. Push to <remote>/<target>, delete the temporary branches
6. Return to the previous branch and restore stashed changes

If any step fails, recovery commands return to the previous branch and
restore the stash.
"""

import click

from prflow.cli.commands.shared import exit_on_sequence_failure
from prflow.core.context import PrflowContext
from prflow.git.types import MergeRemoteRequest
from prflow.output.output import user_output


@click.command("merge")
@click.argument("pr_number", type=click.IntRange(min=1))
@click.option(
    "-u", "--username", help="Remote holding the pull request (default from prflow.toml)"
)
@click.option("-t", "--target", help="Branch to merge into (default from prflow.toml)")
@click.option("-m", "--message", help="Merge commit message")
@click.pass_obj
def merge_cmd(
    ctx: PrflowContext,
    pr_number: int,
    username: str | None,
    target: str | None,
    message: str | None,
) -> None:
    """Merge pull request PR_NUMBER into the target branch of a remote.

    Examples:

        # Merge PR 42 into upstream/main
        prflow merge 42 -u upstream -t main -m "Fix bug"
    """
    request = MergeRemoteRequest(
        username=username or ctx.config.username,
        target_branch=target or ctx.config.target,
        pr_number=pr_number,
        message=message if message and message.strip() else f"Merge pull request #{pr_number}",
    )

    user_output(
        f"Merging PR #{pr_number} into {request.username}/{request.target_branch}..."
    )
    result = ctx.git.merge_remote_pull_request(request)
    exit_on_sequence_failure(result, action=f"Merging PR #{pr_number}")

    if ctx.dry_run:
        user_output("Dry run: no changes were made")
        return

    user_output(
        click.style("✓", fg="green")
        + f" Merged PR #{pr_number} into {request.username}/{request.target_branch}"
    )

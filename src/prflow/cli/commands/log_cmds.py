"""Read-only history commands: changelog, last-tag, pr-for-sha.

Results go to stdout so they can be piped; messages go to stderr.
"""

import click

from prflow.core.context import PrflowContext
from prflow.git.helper import parse_pr_number
from prflow.output.output import machine_output, user_output


@click.command("changelog")
@click.option(
    "--since",
    "since",
    help="Revision to start from (default: the last tag; all merges if there is none)",
)
@click.pass_obj
def changelog_cmd(ctx: PrflowContext, since: str | None) -> None:
    """Print the subjects of merge commits, newest first."""
    if since is None:
        since = ctx.git.get_last_tag()

    reference = f"{since}..HEAD" if since is not None else None
    changelog = ctx.git.show_changelog(reference)
    if changelog is None:
        user_output("No merge commits found")
        return

    machine_output(changelog)


@click.command("last-tag")
@click.pass_obj
def last_tag_cmd(ctx: PrflowContext) -> None:
    """Print the most recent tag reachable from HEAD."""
    tag = ctx.git.get_last_tag()
    if tag is None:
        user_output(click.style("Error: ", fg="red") + "No tags found")
        raise SystemExit(1)

    machine_output(tag)


@click.command("pr-for-sha")
@click.argument("sha")
@click.option(
    "-b", "--branch", help="Branch the commit was merged into (default from prflow.toml)"
)
@click.pass_obj
def pr_for_sha_cmd(ctx: PrflowContext, sha: str, branch: str | None) -> None:
    """Print the pull request number that brought SHA into a branch."""
    branch = branch or ctx.config.target
    merge_commit = ctx.git.get_pr_for_sha(sha, branch)
    if merge_commit is None:
        user_output(
            click.style("Error: ", fg="red") + f"No merge commit found for {sha} on {branch}"
        )
        raise SystemExit(1)

    pr_number = parse_pr_number(merge_commit)
    if pr_number is None:
        user_output(
            click.style("Error: ", fg="red")
            + f"Merge commit is not a pull request merge: {merge_commit}"
        )
        raise SystemExit(1)

    machine_output(str(pr_number))

import click

from prflow.core.context import PrflowContext
from prflow.output.output import user_output


@click.command("setup")
@click.pass_obj
def setup_cmd(ctx: PrflowContext) -> None:
    """Add the remotes listed in prflow.toml that are not configured yet."""
    if not ctx.config.remotes:
        user_output("No remotes configured in prflow.toml")
        return

    failed = False
    for remote, url in sorted(ctx.config.remotes.items()):
        if ctx.git.remote_exists(remote):
            user_output(f"Remote {remote} already configured")
            continue

        if ctx.git.add_remote(remote, url):
            user_output(click.style("✓", fg="green") + f" Added remote {remote} ({url})")
        else:
            user_output(click.style("Error: ", fg="red") + f"Could not add remote {remote}")
            failed = True

    if failed:
        raise SystemExit(1)

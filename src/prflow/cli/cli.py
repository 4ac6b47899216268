import logging

import click

from prflow.cli.commands.log_cmds import changelog_cmd, last_tag_cmd, pr_for_sha_cmd
from prflow.cli.commands.merge_cmd import merge_cmd
from prflow.cli.commands.setup_cmd import setup_cmd
from prflow.cli.commands.sync_cmd import sync_cmd
from prflow.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="prflow")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print git commands instead of running them")
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool) -> None:
    """Merge pull requests and sync branches through git."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)


cli.add_command(merge_cmd)
cli.add_command(sync_cmd)
cli.add_command(setup_cmd)
cli.add_command(changelog_cmd)
cli.add_command(last_tag_cmd)
cli.add_command(pr_for_sha_cmd)

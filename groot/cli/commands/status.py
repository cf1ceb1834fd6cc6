"""Status command - show the staging area."""

import click
from groot.core.errors import GrootError
from groot.cli.context import open_repository
from groot.cli.output import error, info


@click.command('status')
def status_cmd():
    """
    Show staged files and the current HEAD.

    Examples:
        groot status
    """
    repo = open_repository()

    try:
        head = repo.head()
        entries = repo.index.current()
    except GrootError as e:
        click.echo(error(f"Status failed: {e}"))
        raise click.Abort()

    click.echo(info(f"HEAD: {head if head else '(no commits yet)'}"))

    if not entries:
        click.echo(info("Nothing staged"))
        return

    click.echo(info(f"Staged for commit ({len(entries)}):"))
    for entry in entries:
        click.echo(f"  {entry.hash[:7]}  {entry.path}")

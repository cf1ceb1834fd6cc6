"""Commit command - create a commit from staged changes."""

import click
from groot.core.errors import EmptyCommit, GrootError
from groot.cli.context import open_repository
from groot.cli.output import success, error, info


@click.command('commit')
@click.option('-m', '--message', required=True, help='Commit message')
def commit_cmd(message):
    """
    Record changes to the repository.

    Creates a commit from the staged files, links it to the current
    HEAD and clears the staging area.

    Examples:
        groot commit -m "Initial commit"
    """
    repo = open_repository()

    try:
        files = repo.index.current()
        parent = repo.head()
        commit_hash = repo.commit(message)
    except EmptyCommit as e:
        click.echo(error(str(e)))
        click.echo(info("Use 'groot add <file>' to stage changes"))
        raise click.Abort()
    except (GrootError, ValueError) as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()

    click.echo(success(f"Created commit {commit_hash}"))
    click.echo(info(f"Message: {message}"))
    if parent:
        click.echo(info(f"Parent: {parent[:7]}"))
    else:
        click.echo(info("(root commit)"))
    click.echo(info(f"Files: {len(files)}"))

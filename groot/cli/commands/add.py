"""Add command - stage files for commit."""

import click
from groot.core.errors import FileNotFound, GrootError
from groot.cli.context import open_repository
from groot.cli.output import success, error, info


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Each file's content is stored in the object store and an entry is
    appended to the staging area. Modified files must be added again to
    stage the new content.

    Examples:
        groot add file.txt
        groot add a.txt b.txt
    """
    repo = open_repository()

    added_files = []
    failed_files = []

    for path in paths:
        try:
            obj_hash = repo.index.stage(path)
            added_files.append((path, obj_hash))
        except FileNotFound as e:
            failed_files.append((path, str(e)))
        except (GrootError, ValueError) as e:
            click.echo(error(f"Failed to stage {path}: {e}"))
            raise click.Abort()

    if added_files:
        click.echo(success(f"Added {len(added_files)} file(s) to staging area"))
        for path, obj_hash in added_files:
            click.echo(info(f"  {path} ({obj_hash[:7]})"))

    if failed_files:
        click.echo(error(f"Failed to add {len(failed_files)} file(s):"))
        for path, reason in failed_files:
            click.echo(error(f"  {reason}"))
        raise click.Abort()

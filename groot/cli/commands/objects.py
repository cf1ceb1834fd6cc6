"""Plumbing commands - inspect the object store."""

import click
from groot.core.errors import GrootError
from groot.cli.context import open_repository
from groot.cli.output import error, info


@click.command('cat-file')
@click.argument('object_hash')
def cat_file_cmd(object_hash):
    """
    Print the raw content of a stored object.

    Examples:
        groot cat-file a1b2c3d4
    """
    repo = open_repository()

    try:
        matches = repo.store.resolve_prefix(object_hash) if len(object_hash) >= 4 else []
        if len(matches) != 1:
            reason = "ambiguous" if matches else "not found"
            click.echo(error(f"Object {object_hash} {reason}"))
            raise click.Abort()
        content = repo.store.get(matches[0])
    except GrootError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(content, nl=False)


@click.command('count-objects')
def count_objects_cmd():
    """
    Count stored objects and their total size.

    Examples:
        groot count-objects
    """
    repo = open_repository()

    count = 0
    size = 0
    for obj_hash in repo.store:
        count += 1
        size += repo.store.path(obj_hash).stat().st_size

    click.echo(info(f"{count} objects, {size} bytes"))

"""Show command - display the changes introduced by a commit."""

import click
from groot.core.errors import GrootError
from groot.cli.context import open_repository, use_color
from groot.cli.output import error, info


@click.command('show')
@click.argument('commit', default='HEAD')
@click.option('--no-color', is_flag=True, help='Disable colored output')
def show_cmd(commit, no_color):
    """
    Show the line changes a commit made against its parent.

    COMMIT may be a full hash, a unique prefix of at least 4
    characters, or HEAD (the default).

    Examples:
        groot show                 # Changes in the newest commit
        groot show a1b2c3d         # Changes in commit a1b2c3d
        groot diff a1b2c3d         # Same as show
    """
    repo = open_repository()

    try:
        commit_hash = repo.resolve_commit(commit)
        commit_diff = repo.diff.diff(commit_hash)
    except GrootError as e:
        click.echo(error(f"Cannot show {commit}: {e}"))
        raise click.Abort()

    click.echo(info(f"commit {commit_hash}"))
    click.echo(repo.diff.format_diff(commit_diff, color=use_color(repo, no_color)))

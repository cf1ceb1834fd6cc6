"""Shared helpers for CLI commands."""

import click

from groot.core.errors import GrootError, RepositoryNotFound
from groot.core.repository import Repository
from groot.cli.output import error, warning


def open_repository() -> Repository:
    """
    Find the enclosing repository and finish any interrupted commit.

    Aborts the command if no repository is found.
    """
    try:
        repo = Repository.open()
    except RepositoryNotFound:
        click.echo(error("Not a groot repository (run 'groot init' first)"))
        raise click.Abort()

    try:
        recovered = repo.recover()
    except (GrootError, ValueError) as e:
        click.echo(error(f"Repository recovery failed: {e}"))
        raise click.Abort()

    if recovered:
        click.echo(warning(f"Finished interrupted commit {recovered[:7]}"), err=True)
    return repo


def use_color(repo, no_color: bool = False) -> bool:
    """Decide whether to color output, honouring color.ui."""
    if no_color:
        return False
    try:
        return repo.config.get_bool('color', 'ui', True)
    except ValueError:
        return True

"""Initialize a new Groot repository."""

import click
from pathlib import Path
from groot.core.errors import GrootError
from groot.core.repository import Repository
from groot.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Groot repository.

    Creates a .groot directory holding the object store, an empty
    staging area and an empty HEAD.

    Examples:
        groot init                  # Initialize in current directory
        groot init my-project       # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()

    if (repo_path / '.groot').exists():
        click.echo(error(f"Repository already exists at {repo_path}"))
        raise click.Abort()

    try:
        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))

        repo = Repository(str(repo_path))
        repo.init()
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"))
        raise click.Abort()
    except (GrootError, OSError) as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()

    click.echo(success(f"Initialized empty Groot repository in {repo.groot_dir}"))
    click.echo(info("  .groot/objects/  - Object database"))
    click.echo(info("  .groot/index     - Staging area"))
    click.echo(info("  .groot/HEAD      - Newest commit"))
    click.echo(info("  .groot/config    - Repository configuration"))

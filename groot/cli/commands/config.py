"""Config command - manage repository configuration."""

import click
from groot.core.config import Config, split_key
from groot.core.repository import Repository
from groot.cli.output import success, error, info


def load_config(is_global):
    """Return a Config for the current repository, or global-only."""
    if is_global:
        return Config()
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository (use --global for global config)"))
        raise click.Abort()
    return Config(repo.config_file)


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        groot config set core.allowempty false
        groot config set core.stagemode replace
        groot config set --global color.ui false
    """
    config = load_config(is_global)
    section, option = split_key(key)
    config.set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.

    Examples:
        groot config get core.stagemode
    """
    if is_global:
        config = Config()
    else:
        repo = Repository.find_repository()
        config = Config(repo.config_file if repo else None)

    section, option = split_key(key)
    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """
    Remove a config value.

    Examples:
        groot config unset core.allowempty
    """
    config = load_config(is_global)
    section, option = split_key(key)
    if not config.unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(success(f"Removed {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        groot config list
        groot config list --global
    """
    if is_global:
        config = Config()
    else:
        repo = Repository.find_repository()
        config = Config(repo.config_file if repo else None)

    values = config.list_all(global_only=is_global)
    if not values:
        click.echo(info("No configuration set"))
        return

    for section, items in values.items():
        for key, value in items.items():
            click.echo(f"{section}.{key}={value}")

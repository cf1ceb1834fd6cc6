"""Log command - show commit history."""

import click
from colorama import Fore, Style
from groot.core.errors import GrootError
from groot.cli.context import open_repository, use_color
from groot.cli.output import error, warning


def format_date(commit):
    """Format a commit's timestamp for display."""
    try:
        return commit.timestamp.strftime("%a %b %d %H:%M:%S %Y %z")
    except ValueError:
        return commit.date


def display_commit_oneline(commit, color=True):
    """Display commit in one-line format."""
    message = commit.message.split('\n')[0]
    if len(message) > 60:
        message = message[:57] + "..."

    short_hash = commit.hash[:7]
    if color:
        short_hash = f"{Fore.YELLOW}{short_hash}{Style.RESET_ALL}"
    click.echo(f"{short_hash} {message}")


def display_commit_full(commit, color=True):
    """Display commit in full format."""
    header = f"commit {commit.hash}"
    if color:
        header = f"{Fore.YELLOW}{header}{Style.RESET_ALL}"
    click.echo(header)

    if commit.parent:
        click.echo(f"Parent: {commit.parent}")
    click.echo(f"Date:   {format_date(commit)}")
    click.echo(f"Files:  {len(commit.files)}")
    click.echo()
    for line in commit.message.split('\n'):
        click.echo(f"    {line}")
    click.echo()


@click.command('log')
@click.option('-n', '--max-count', type=int, help='Limit number of commits to show')
@click.option('--oneline', is_flag=True, help='Show commits in one-line format')
@click.option('--no-color', is_flag=True, help='Disable colored output')
def log_cmd(max_count, oneline, no_color):
    """
    Show commit logs.

    Displays commit history from HEAD back to the root commit.

    Examples:
        groot log                  # Show all commits from HEAD
        groot log -n 10            # Show last 10 commits
        groot log --oneline        # Show compact one-line format
    """
    repo = open_repository()
    color = use_color(repo, no_color)

    try:
        if repo.head() is None:
            click.echo(warning("No commits yet"))
            return

        for commit in repo.history.walk(max_count=max_count):
            if oneline:
                display_commit_oneline(commit, color)
            else:
                display_commit_full(commit, color)
    except GrootError as e:
        click.echo(error(f"Log failed: {e}"))
        raise click.Abort()

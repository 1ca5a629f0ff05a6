"""Config inspection commands."""

import json
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ilo_config.config import Config
from ilo_config.errors import ConfigError
from ilo_config.paths import resolve_path, resolve_root

console = Console()


def fail(error: ConfigError) -> NoReturn:
    """Report a config error and exit with a non-zero status."""
    console.print(f"[red]{escape(str(error))}[/red]", soft_wrap=True)
    raise typer.Exit(code=1) from error


def root_command() -> None:
    """Print the config root directory."""
    try:
        console.print(str(resolve_root()), highlight=False, soft_wrap=True)
    except ConfigError as e:
        fail(e)


def path_command(
    key: str = typer.Argument(..., help="Config key, e.g. jira for <root>/jira.json"),
) -> None:
    """Print the file path for a config key."""
    try:
        console.print(str(resolve_path(key)), highlight=False, soft_wrap=True)
    except ConfigError as e:
        fail(e)


def show_command(
    key: str = typer.Argument(..., help="Config key to display"),
) -> None:
    """Display the stored contents of a config."""
    try:
        config_file = resolve_path(key)
        if not config_file.is_file():
            console.print("[yellow]No configuration found.[/yellow]")
            console.print(f"Config file: [dim]{config_file}[/dim]")
            return
        config: Config[Any] = Config.load(key, Any)
    except ConfigError as e:
        fail(e)

    data = config.data
    if isinstance(data, dict):
        table = Table(title=f"Config: {key}", show_header=True, header_style="bold magenta")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        for name, value in sorted(data.items()):
            table.add_row(escape(name), escape(value if isinstance(value, str) else json.dumps(value)))

        console.print(table)
    else:
        console.print_json(json.dumps(data))

    console.print(f"\nConfig file: [dim]{config_file}[/dim]")

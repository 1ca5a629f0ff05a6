"""Main CLI application using Typer."""

import typer
from rich.console import Console

from ilo_config import __version__
from ilo_config.cli.commands.config import path_command, root_command, show_command
from ilo_config.cli.commands.quickstart import quickstart_command
from ilo_config.cli.commands.todo import todo_app

app = typer.Typer(
    name="ilo-config",
    help="ilo-config - Strongly-typed configs stored as JSON on disk",
    add_completion=False,
)
console = Console()

# Register commands
app.command("root")(root_command)
app.command("path")(path_command)
app.command("show")(show_command)
app.command("quickstart")(quickstart_command)
app.add_typer(todo_app, name="todo")


def version_callback(value: bool) -> None:
    """Show version information."""
    if value:
        console.print(f"ilo-config version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    )
) -> None:
    """ilo-config CLI - Inspect and use configs stored under $ILO_CONFIG_HOME."""
    pass


if __name__ == "__main__":
    app()

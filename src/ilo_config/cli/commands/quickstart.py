"""Quickstart: load a typed config, use it for a request, save it back."""

import httpx
import typer
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

from ilo_config.cli.commands.config import fail
from ilo_config.config import Config
from ilo_config.errors import ConfigError

QUICKSTART_KEY = "example-config"
DEFAULT_URL = "https://httpbin.org/get"
DEFAULT_COMMENT = "Created by the ilo-config package's quickstart example."

console = Console()


class QuickstartConfig(BaseModel):
    """Config data for the quickstart command."""

    url: str | None = Field(None, description="URL to which a GET request should be made")
    comment: str | None = Field(
        None, description="Reminder of how the file got created, or any other note"
    )


def create_client() -> httpx.Client:
    """Create the HTTP client used for the configured request."""
    return httpx.Client(timeout=10.0, follow_redirects=True)


def quickstart_command() -> None:
    """Make a GET request to the configured URL and print the response.

    Edit the url in <root>/example-config.json and run again to see the
    change picked up.
    """
    try:
        config = Config.load(QUICKSTART_KEY, QuickstartConfig)
    except ConfigError as e:
        fail(e)

    data = config.data
    if data.comment is None:
        data.comment = DEFAULT_COMMENT
    if data.url is None:
        data.url = DEFAULT_URL

    try:
        with create_client() as client:
            response = client.get(data.url)
    except httpx.HTTPError as exc:
        console.print(f"[red]Unable to reach {escape(data.url)}.[/red]", soft_wrap=True)
        console.print(f"[dim]{escape(str(exc))}[/dim]")
        raise typer.Exit(code=1) from exc

    console.print("Response from configured URL:", response.text, highlight=False, markup=False)

    try:
        config.save()
    except ConfigError as e:
        fail(e)

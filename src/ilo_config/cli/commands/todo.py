"""To-do list commands backed by a config file.

Configs usually hold links and credentials for other data stores, but for a
small program they work as a data store directly. Delete protection and
backups are left to the caller.
"""

import typer
from rich.console import Console

from ilo_config.cli.commands.config import fail
from ilo_config.config import Config
from ilo_config.errors import ConfigError

TODO_KEY = "axesilo-example-todo-list"

TodoList = list[tuple[str, bool]]

todo_app = typer.Typer(name="todo", help="Keep a to-do list in a config file")
console = Console()


def _load() -> Config[TodoList]:
    try:
        return Config.load(TODO_KEY, TodoList)
    except ConfigError as e:
        fail(e)


def _save(config: Config[TodoList]) -> None:
    try:
        config.save()
    except ConfigError as e:
        fail(e)


@todo_app.command("add")
def todo_add(
    item: str | None = typer.Argument(None, help="Description of the item"),
) -> None:
    """Add an item to the to-do list."""
    if item is None:
        console.print(
            'Please enter the description of the item, e.g. `add "Finish sketch of skyeels"`'
        )
        return

    config = _load()
    todo_list = config.data
    todo_list.append((item, False))
    _save(config)
    console.print(
        f'Added "{item}" to the todo list at position {len(todo_list)}.',
        highlight=False,
        markup=False,
    )


@todo_app.command("list")
def todo_list() -> None:
    """List all items."""
    config = _load()
    for i, (item, done) in enumerate(config.data, start=1):
        console.print(
            f"{'(DONE)' if done else '':8} | {i:>6} | {item}", highlight=False, markup=False
        )


@todo_app.command("do")
def todo_do(
    number: int | None = typer.Argument(None, help="Position of the item to mark as done"),
) -> None:
    """Mark an item as done."""
    if number is None:
        console.print("Please enter the index of the item to mark as done, e.g. `1`.")
        return

    config = _load()
    todo_list = config.data
    if number < 1 or number > len(todo_list) or todo_list[number - 1][1]:
        console.print("Please enter the index of an incomplete item.")
        return

    item, _ = todo_list[number - 1]
    todo_list[number - 1] = (item, True)
    _save(config)
    console.print(f'Marked "{item}" as complete!', highlight=False, markup=False)

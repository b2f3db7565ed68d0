"""Command-line interface for Task List CLI.

Each command turns its arguments into a ``Command`` and hands it to the
``TaskManager``. Task numbers on the command line are 1-based.
"""

import sys
import logging
from pathlib import Path
from typing import Optional
import click
from rich.text import Text

from ..config import ConfigModel, load_config
from ..domain import Command, CommandKind, NO_INDEX
from ..exceptions import TaskListError
from ..manager import TaskManager
from ..storage import Storage
from ..theme import get_themed_console, print_result, print_error, print_warning


logger = logging.getLogger(__name__)

TASK_NUMBER = click.IntRange(min=1)


def get_console(ctx: click.Context):
    """Get a themed console honouring the no_color setting."""
    config: ConfigModel = ctx.obj["config"]
    return get_themed_console(no_color=config.no_color)


def get_manager(ctx: click.Context) -> TaskManager:
    """Build the task manager on first use and report skipped lines once."""
    manager = ctx.obj.get("manager")
    if manager is None:
        manager = TaskManager.from_config(ctx.obj["config"])
        ctx.obj["manager"] = manager
        if manager.load_errors:
            console = get_console(ctx)
            print_warning(console, f"Skipped {len(manager.load_errors)} unreadable line(s) in {manager.storage.path}:")
            for error in manager.load_errors:
                print_warning(console, f"  {error}")
    return manager


def run_command(ctx: click.Context, cmd: Command) -> None:
    """Execute a command, print its result, exit 1 on failure."""
    console = get_console(ctx)
    logger.debug(f"Running {cmd.kind.value} command")
    try:
        manager = get_manager(ctx)
        result = manager.execute(cmd)
    except TaskListError as e:
        print_error(console, str(e))
        sys.exit(1)
    except OSError as e:
        print_error(console, f"Could not read tasks: {e}")
        sys.exit(1)

    print_result(console, result)
    if manager.last_save_error is not None:
        print_warning(console, f"Something went wrong: {manager.last_save_error}")


def _join(words) -> str:
    return " ".join(words)


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), envvar="TASKLIST_CONFIG", help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False), help="Task file to use instead of the configured one")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx, config_path: Optional[str], data_file: Optional[str], verbose: bool):
    """Task List CLI - keep to-dos, deadlines and events in a text file."""
    ctx.ensure_object(dict)

    config = load_config(Path(config_path) if config_path else None)
    if data_file:
        config.data_file = str(Path(data_file).expanduser().resolve())

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    ctx.obj["config"] = config


@cli.command()
@click.argument("description", nargs=-1, required=True)
@click.pass_context
def add(ctx, description):
    """Add a plain task."""
    run_command(ctx, Command(CommandKind.ADD, _join(description)))


@cli.command()
@click.argument("description", nargs=-1, required=True)
@click.pass_context
def todo(ctx, description):
    """Add a to-do."""
    run_command(ctx, Command(CommandKind.TODO, _join(description)))


@cli.command()
@click.argument("description", nargs=-1, required=True)
@click.option("--by", "due", required=True, help="Due date, YYYY-MM-DD HHMM")
@click.pass_context
def deadline(ctx, description, due):
    """Add a deadline.

    Example:
      tasklist deadline return book --by "2019-12-02 1800"
    """
    run_command(ctx, Command(CommandKind.DEADLINE, _join(description), due))


@cli.command()
@click.argument("description", nargs=-1, required=True)
@click.option("--at", "when", required=True, help="Date of the event, YYYY-MM-DD HHMM")
@click.pass_context
def event(ctx, description, when):
    """Add an event."""
    run_command(ctx, Command(CommandKind.EVENT, _join(description), when))


@cli.command("list")
@click.pass_context
def list_tasks(ctx):
    """Show every task."""
    run_command(ctx, Command(CommandKind.LIST))


@cli.command()
@click.argument("number", type=TASK_NUMBER)
@click.pass_context
def mark(ctx, number):
    """Mark task NUMBER as done."""
    run_command(ctx, Command(CommandKind.MARK, index=number - 1))


@cli.command()
@click.argument("number", type=TASK_NUMBER)
@click.pass_context
def unmark(ctx, number):
    """Mark task NUMBER as not done."""
    run_command(ctx, Command(CommandKind.UNMARK, index=number - 1))


@cli.command()
@click.argument("number", type=TASK_NUMBER, required=False)
@click.pass_context
def delete(ctx, number):
    """Remove task NUMBER."""
    index = number - 1 if number is not None else NO_INDEX
    run_command(ctx, Command(CommandKind.DELETE, index=index))


@cli.command()
@click.argument("keyword", nargs=-1, required=True)
@click.pass_context
def find(ctx, keyword):
    """Show tasks whose listing contains KEYWORD."""
    run_command(ctx, Command(CommandKind.FIND, _join(keyword)))


@cli.command()
@click.argument("method")
@click.pass_context
def sort(ctx, method):
    """Sort tasks by METHOD: name or date."""
    run_command(ctx, Command(CommandKind.SORT, method))


@cli.command()
@click.pass_context
def backup(ctx):
    """Copy the task file into the backup directory."""
    console = get_console(ctx)
    storage = Storage.from_config(ctx.obj["config"])
    try:
        backup_path = storage.backup()
    except OSError as e:
        print_error(console, f"Backup failed: {e}")
        sys.exit(1)

    if backup_path is None:
        print_warning(console, "Nothing to back up yet.")
    else:
        console.print(Text(f"Backed up tasks to {backup_path}", style="success"))


main = cli


if __name__ == "__main__":
    main()

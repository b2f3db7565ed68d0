"""Task manager: owns the task list and turns commands into changes.

Every successful change rewrites the whole task file. A failed write is
logged and remembered in ``last_save_error`` but never undoes the change,
so memory stays authoritative until the next successful save.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .domain import Task, Command, CommandKind, by_description, by_date_time
from .exceptions import IllegalActionError, IllegalContentError
from .storage import Storage, TaskFileFormat, LineError
from .utils.datetime import parse_date_time


logger = logging.getLogger(__name__)

SORT_KEYS: Dict[str, Callable[[Task], object]] = {
    "name": by_description,
    "date": by_date_time,
}

SORT_NOT_FOUND_MESSAGE = "☹ OOPS!!! The input sorting method is not found."


def _numbered(tasks: Sequence[Task]) -> str:
    return "".join(f"{number}.{task.render_display()}\n" for number, task in enumerate(tasks, start=1))


class TaskManager:
    """Holds the ordered task list for one run of the application."""

    def __init__(self, storage: Storage, strict_load: bool = False):
        self.storage = storage
        self._tasks: List[Task] = []
        self.load_errors: List[LineError] = []
        self.last_save_error: Optional[OSError] = None
        self._load(strict_load)

    @classmethod
    def from_config(cls, config) -> "TaskManager":
        """Build a manager over the task file named in the configuration."""
        return cls(Storage.from_config(config), strict_load=config.strict_load)

    # -------------------- loading / saving --------------------
    def _load(self, strict: bool) -> None:
        result = TaskFileFormat.decode_all(self.storage.read_lines(), strict=strict)
        self._tasks = result.tasks
        self.load_errors = result.errors
        for error in result.errors:
            logger.warning(f"Skipped unreadable task in {self.storage.path}, {error}")
        logger.debug(f"Loaded {len(self._tasks)} tasks from {self.storage.path}")

    def _on_task_list_changed(self) -> None:
        try:
            self.storage.write(TaskFileFormat.encode_all(self._tasks))
            self.last_save_error = None
        except OSError as e:
            self.last_save_error = e
            logger.warning(f"Could not save tasks to {self.storage.path}: {e}")

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def _task_at(self, cmd: Command) -> Task:
        """Bounds-checked lookup of ``cmd.index``."""
        if not 0 <= cmd.index < len(self._tasks):
            raise IllegalContentError(
                f"☹ OOPS!!! There is no task number {cmd.index + 1}; "
                f"the list has {len(self._tasks)} tasks."
            )
        return self._tasks[cmd.index]

    def list_all(self) -> str:
        return "Here are the tasks in your list:\n" + _numbered(self._tasks)

    def find(self, cmd: Command) -> str:
        """List tasks whose display text contains ``cmd.description``.

        Matching is a plain case-sensitive substring test on the rendered
        line, so an empty query matches (and lists) every task.
        """
        matches = [task for task in self._tasks if cmd.description in task.render_display()]
        return "Here are the matching tasks in your list:\n" + _numbered(matches)

    # -------------------- task operations --------------------
    def add(self, cmd: Command) -> str:
        """Append a new task built from an add-type command."""
        if cmd.kind == CommandKind.ADD:
            task = Task(cmd.description)
        elif cmd.kind == CommandKind.TODO:
            task = Task.todo(cmd.description)
        elif cmd.kind == CommandKind.DEADLINE:
            task = Task.deadline(cmd.description, parse_date_time(cmd.datetime_text))
        elif cmd.kind == CommandKind.EVENT:
            task = Task.event(cmd.description, parse_date_time(cmd.datetime_text))
        else:
            raise IllegalActionError(f"☹ OOPS!!! A {cmd.kind.value} command cannot add a task.")

        self._tasks.append(task)
        self._on_task_list_changed()
        logger.debug(f"Added {task.kind.name} task at position {len(self._tasks)}")
        return (
            "Got it. I've added this task:\n"
            f"{task.render_display()}\n"
            f"Now you have {len(self._tasks)} tasks in the list."
        )

    def delete(self, cmd: Command) -> str:
        """Remove the task at ``cmd.index``."""
        if not cmd.has_index:
            raise IllegalContentError(
                f"☹ OOPS!!! The description of a {cmd.kind.value} must be a number."
            )
        if cmd.index >= len(self._tasks) or cmd.index < 0:
            raise IllegalContentError(
                f"☹ OOPS!!! The description of a {cmd.kind.value} must be a number "
                "that is not larger than the list size."
            )

        task = self._tasks.pop(cmd.index)
        self._on_task_list_changed()
        return (
            "Noted. I've removed this task:\n"
            f"{task.render_display()}\n"
            f"Now you have {len(self._tasks)} tasks in the list."
        )

    def update_status(self, cmd: Command) -> str:
        """Mark or unmark the task at ``cmd.index``; no index means no-op."""
        if not cmd.has_index:
            return ""
        if cmd.kind not in (CommandKind.MARK, CommandKind.UNMARK):
            raise IllegalActionError(f"☹ OOPS!!! A {cmd.kind.value} command cannot change a task status.")

        task = self._task_at(cmd)
        if cmd.kind == CommandKind.MARK and task.done:
            raise IllegalActionError("☹ OOPS!!! This task already been marked as completed.")
        if cmd.kind == CommandKind.UNMARK and not task.done:
            raise IllegalActionError("☹ OOPS!!! This task already been marked as incomplete.")

        task.update_status()
        self._on_task_list_changed()
        if task.done:
            return "Nice! I've marked this task as done:\n" + task.render_display()
        return "OK, I've marked this task as not done yet:\n" + task.render_display()

    def sort(self, cmd: Command) -> str:
        """Reorder the list by ``name`` or ``date``; other methods change nothing."""
        key = SORT_KEYS.get(cmd.description)
        if key is None:
            return SORT_NOT_FOUND_MESSAGE

        self._tasks.sort(key=key)
        self._on_task_list_changed()
        return f"Noted. I've sorted tasks by {cmd.description}.\n" + self.list_all()

    def execute(self, cmd: Command) -> str:
        """Run any command and return the message to show the user."""
        if cmd.kind.adds_task:
            return self.add(cmd)
        if cmd.kind in (CommandKind.MARK, CommandKind.UNMARK):
            return self.update_status(cmd)
        if cmd.kind == CommandKind.DELETE:
            return self.delete(cmd)
        if cmd.kind == CommandKind.FIND:
            return self.find(cmd)
        if cmd.kind == CommandKind.SORT:
            return self.sort(cmd)
        return self.list_all()

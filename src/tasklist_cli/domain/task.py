"""Task model for the Task List CLI application."""

from dataclasses import dataclass
from typing import Optional, Tuple
from datetime import datetime
from enum import Enum

from ..exceptions import IllegalContentError
from ..utils.datetime import format_display, format_machine


FIELD_SEPARATOR = " | "


class TaskKind(Enum):
    """Task variants; the value is the tag written to the task file."""
    PLAIN = ""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def is_dated(self) -> bool:
        return self in (TaskKind.DEADLINE, TaskKind.EVENT)

    @classmethod
    def from_tag(cls, tag: str) -> "TaskKind":
        """Look up a kind by its file tag; unknown tags mean a plain task."""
        for kind in cls:
            if kind.value == tag:
                return kind
        return cls.PLAIN


# Display suffix label per dated kind
_DATE_LABELS = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


@dataclass
class Task:
    """A single entry in the task list.

    Plain tasks and to-dos carry no date; deadlines carry a due date and
    events the instant they happen at. Both dates live in ``date_time``.
    """

    description: str
    done: bool = False
    kind: TaskKind = TaskKind.PLAIN
    date_time: Optional[datetime] = None

    def __post_init__(self):
        """Validate description and date against the task kind."""
        if self.description is None or not self.description.strip():
            raise IllegalContentError(
                f"☹ OOPS!!! The description of a {self._kind_name()} cannot be empty."
            )
        if "\n" in self.description or "\r" in self.description:
            raise IllegalContentError(
                f"☹ OOPS!!! The description of a {self._kind_name()} must fit on one line."
            )

        if self.kind.is_dated:
            if not isinstance(self.date_time, datetime):
                raise IllegalContentError(
                    f"☹ OOPS!!! A {self._kind_name()} needs a date and time."
                )
        elif self.date_time is not None:
            raise IllegalContentError(
                f"☹ OOPS!!! A {self._kind_name()} does not take a date."
            )

    # -------------------- variant constructors --------------------
    @classmethod
    def todo(cls, description: str, done: bool = False) -> "Task":
        return cls(description, done, TaskKind.TODO)

    @classmethod
    def deadline(cls, description: str, due: Optional[datetime], done: bool = False) -> "Task":
        return cls(description, done, TaskKind.DEADLINE, due)

    @classmethod
    def event(cls, description: str, when: Optional[datetime], done: bool = False) -> "Task":
        return cls(description, done, TaskKind.EVENT, when)

    # -------------------- accessors --------------------
    @property
    def tag(self) -> str:
        return self.kind.value

    @property
    def due(self) -> Optional[datetime]:
        """Due date of a deadline, None for other kinds."""
        return self.date_time if self.kind == TaskKind.DEADLINE else None

    @property
    def when(self) -> Optional[datetime]:
        """Instant of an event, None for other kinds."""
        return self.date_time if self.kind == TaskKind.EVENT else None

    def _kind_name(self) -> str:
        if self.kind == TaskKind.PLAIN:
            return "task"
        return self.kind.name.lower()

    # -------------------- mutation --------------------
    def update_status(self) -> None:
        """Flip the done flag. Callers decide whether the flip is allowed."""
        self.done = not self.done

    # -------------------- rendering --------------------
    def render_display(self) -> str:
        """Render for people, e.g. ``[D][X] return book (by: Dec 02 2019 18:00)``."""
        marker = "X" if self.done else " "
        text = f"[{self.tag}][{marker}] {self.description}"
        if self.kind.is_dated:
            text += f" ({_DATE_LABELS[self.kind]}: {format_display(self.date_time)})"
        return text

    def render_persisted(self) -> str:
        """Render one newline-terminated line of the task file."""
        fields = [self.tag, "1" if self.done else "0", self.description]
        if self.kind.is_dated:
            fields.append(format_machine(self.date_time))
        return FIELD_SEPARATOR.join(fields) + "\n"

    def __str__(self) -> str:
        return self.render_display()


def by_description(task: Task) -> str:
    """Sort key: lexicographic, case-sensitive description."""
    return task.description


def by_date_time(task: Task) -> Tuple[int, datetime]:
    """Sort key: undated tasks first, then dated tasks in ascending date order."""
    if task.date_time is None:
        return (0, datetime.min)
    return (1, task.date_time)

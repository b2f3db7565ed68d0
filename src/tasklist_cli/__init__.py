"""Task List CLI - a small personal task-list manager backed by a flat text file."""

__version__ = "0.1.0"

from .domain import (
    Task,
    TaskKind,
    Command,
    CommandKind,
)
from .exceptions import (
    TaskListError,
    IllegalContentError,
    IllegalActionError,
    DateFormatError,
)

__all__ = [
    "Task",
    "TaskKind",
    "Command",
    "CommandKind",
    "TaskListError",
    "IllegalContentError",
    "IllegalActionError",
    "DateFormatError",
    "__version__",
]

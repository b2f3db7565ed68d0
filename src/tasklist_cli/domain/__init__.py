"""Domain models for Task List CLI."""

from .task import Task, TaskKind, by_description, by_date_time
from .command import Command, CommandKind, NO_INDEX

__all__ = [
    "Task",
    "TaskKind",
    "by_description",
    "by_date_time",
    "Command",
    "CommandKind",
    "NO_INDEX",
]

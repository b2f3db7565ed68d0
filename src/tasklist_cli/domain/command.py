"""Structured commands handed to the task manager."""

from dataclasses import dataclass
from typing import Optional
from enum import Enum


NO_INDEX = -1


class CommandKind(Enum):
    """What a command asks the task manager to do."""
    ADD = "add"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    SORT = "sort"
    LIST = "list"

    @property
    def adds_task(self) -> bool:
        return self in ADD_KINDS


ADD_KINDS = frozenset({
    CommandKind.ADD,
    CommandKind.TODO,
    CommandKind.DEADLINE,
    CommandKind.EVENT,
})


@dataclass(frozen=True)
class Command:
    """A parsed user request.

    ``index`` is 0-based; ``NO_INDEX`` (-1) means the user gave no index.
    """

    kind: CommandKind
    description: str = ""
    datetime_text: Optional[str] = None
    index: int = NO_INDEX

    @property
    def has_index(self) -> bool:
        return self.index != NO_INDEX

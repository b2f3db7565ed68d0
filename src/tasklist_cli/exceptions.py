"""Exception types raised by the task list core."""

from typing import Optional


class TaskListError(Exception):
    """Base exception for task list operations."""
    pass


class IllegalContentError(TaskListError):
    """Malformed input: empty description, bad index, unreadable saved line."""
    pass


class IllegalActionError(TaskListError):
    """A well-formed request that is not allowed in the current state."""
    pass


class DateFormatError(IllegalContentError):
    """Date text does not match the accepted date-time format."""

    def __init__(self, text: str, message: Optional[str] = None):
        self.text = text
        super().__init__(
            message
            or f"☹ OOPS!!! '{text}' is not a valid date. Use YYYY-MM-DD HHMM, e.g. 2019-12-02 1800."
        )

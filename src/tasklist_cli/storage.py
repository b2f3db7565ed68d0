"""Storage layer for Task List CLI using a pipe-delimited text file.

Each task occupies one line::

    <T|D|E|> | <0|1> | <description>[ | <YYYY-MM-DD HHMM>]

Plain tasks have an empty tag. The whole file is rewritten on every save.
"""

import shutil
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from .domain import Task, TaskKind
from .domain.task import FIELD_SEPARATOR
from .exceptions import IllegalContentError
from .utils.datetime import parse_date_time


logger = logging.getLogger(__name__)


@dataclass
class LineError:
    """A task file line that could not be decoded."""
    line_number: int
    line: str
    error: IllegalContentError

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.error}"


@dataclass
class DecodeResult:
    """Tasks recovered from a task file plus the lines that were skipped."""
    tasks: List[Task] = field(default_factory=list)
    errors: List[LineError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class TaskFileFormat:
    """Handles conversion between Task objects and task file lines."""

    @staticmethod
    def encode_line(task: Task) -> str:
        """Convert a Task to its newline-terminated file line."""
        return task.render_persisted()

    @staticmethod
    def encode_all(tasks: Iterable[Task]) -> str:
        """Convert tasks to the full file content, in collection order."""
        return "".join(TaskFileFormat.encode_line(task) for task in tasks)

    @staticmethod
    def decode_line(line: str) -> Task:
        """Parse one file line back to a Task.

        Raises:
            IllegalContentError: If the line is missing fields or has a bad date
        """
        line = line.rstrip("\r\n")
        parts = line.split(FIELD_SEPARATOR, 2)
        if len(parts) < 3:
            raise IllegalContentError(f"☹ OOPS!!! Cannot read saved task '{line}'.")

        tag, status, rest = parts
        kind = TaskKind.from_tag(tag.strip())
        done = status.strip() == "1"

        if not kind.is_dated:
            return Task(rest, done, kind)

        # The date is always the last field, so a description may contain the separator
        description, sep, date_text = rest.rpartition(FIELD_SEPARATOR)
        if not sep:
            raise IllegalContentError(
                f"☹ OOPS!!! Saved {kind.name.lower()} '{line}' has no date."
            )
        return Task(description, done, kind, parse_date_time(date_text))

    @staticmethod
    def decode_all(lines: Iterable[str], strict: bool = False) -> DecodeResult:
        """Parse every non-blank line.

        Args:
            lines: Task file lines
            strict: Raise on the first bad line instead of skipping it

        Returns:
            DecodeResult with decoded tasks in file order and the skipped lines

        Raises:
            IllegalContentError: In strict mode, for the first bad line
        """
        result = DecodeResult()
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                result.tasks.append(TaskFileFormat.decode_line(line))
            except IllegalContentError as e:
                if strict:
                    raise IllegalContentError(f"line {line_number}: {e}") from e
                result.errors.append(LineError(line_number, line.rstrip("\r\n"), e))
        return result


class Storage:
    """File-based storage for the task list."""

    def __init__(self, path: Path, backup_dir: Optional[Path] = None):
        self.path = Path(path)
        self.backup_dir = Path(backup_dir) if backup_dir else self.path.parent / "backups"

    @classmethod
    def from_config(cls, config) -> "Storage":
        return cls(config.get_data_path(), config.get_backup_path())

    def exists(self) -> bool:
        return self.path.exists()

    def read_lines(self) -> List[str]:
        """Read the task file; a missing file reads as empty."""
        if not self.path.exists():
            logger.debug(f"No task file at {self.path}, starting empty")
            return []

        with open(self.path, "r", encoding="utf-8") as f:
            return [line.rstrip("\r") for line in f.read().split("\n")]

    def write(self, content: str) -> None:
        """Replace the task file with ``content``."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.debug(f"Wrote {len(content)} characters to {self.path}")

    def backup(self) -> Optional[Path]:
        """Copy the task file into the backup directory.

        Returns:
            Path of the backup copy, or None when there is no task file yet
        """
        if not self.path.exists():
            return None

        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        self.backup_dir.mkdir(parents=True, exist_ok=True)
        backup_path = self.backup_dir / f"{self.path.stem}_{timestamp}{self.path.suffix}"

        shutil.copy2(self.path, backup_path)
        logger.info(f"Backed up {self.path} to {backup_path}")
        return backup_path

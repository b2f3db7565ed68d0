"""Pytest configuration and shared fixtures."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tasklist_cli.domain import Task  # noqa: E402
from tasklist_cli.storage import Storage  # noqa: E402


@pytest.fixture
def task_file(tmp_path) -> Path:
    """Path of a task file that does not exist yet."""
    return tmp_path / "data" / "tasks.txt"


@pytest.fixture
def storage(task_file) -> Storage:
    return Storage(task_file, task_file.parent / "backups")


@pytest.fixture
def sample_tasks():
    """One task of every kind, in insertion order."""
    return [
        Task("buy milk"),
        Task.todo("read duke book"),
        Task.deadline("return book", datetime(2019, 12, 2, 18, 0)),
        Task.event("project meeting", datetime(2019, 10, 15, 14, 0), done=True),
    ]

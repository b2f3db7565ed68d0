"""Tests for the Task model."""

import pytest
from datetime import datetime

from tasklist_cli.domain import Task, TaskKind, by_description, by_date_time
from tasklist_cli.exceptions import IllegalContentError


DUE = datetime(2019, 12, 2, 18, 0)


class TestTaskCreation:
    """Test construction and validation of every task kind."""

    def test_plain_task_defaults(self):
        """Test basic task creation."""
        task = Task("buy milk")

        assert task.description == "buy milk"
        assert task.done is False
        assert task.kind == TaskKind.PLAIN
        assert task.date_time is None

    def test_variant_constructors(self):
        todo = Task.todo("read book", done=True)
        deadline = Task.deadline("return book", DUE)
        event = Task.event("meeting", DUE)

        assert todo.kind == TaskKind.TODO and todo.done
        assert deadline.due == DUE and deadline.when is None
        assert event.when == DUE and event.due is None

    @pytest.mark.parametrize("description", ["", "   ", None])
    def test_empty_description_rejected(self, description):
        with pytest.raises(IllegalContentError):
            Task.todo(description)

    def test_multiline_description_rejected(self):
        """A description must fit on one line of the task file."""
        with pytest.raises(IllegalContentError):
            Task.todo("first\nsecond")

    def test_dated_kinds_need_a_date(self):
        with pytest.raises(IllegalContentError):
            Task.deadline("return book", None)
        with pytest.raises(IllegalContentError):
            Task.event("meeting", None)

    def test_undated_kinds_reject_a_date(self):
        with pytest.raises(IllegalContentError):
            Task("buy milk", False, TaskKind.TODO, DUE)


class TestTaskStatus:
    """Test status toggling."""

    def test_update_status_flips(self):
        task = Task.todo("read book")

        task.update_status()
        assert task.done is True

        task.update_status()
        assert task.done is False


class TestTaskRendering:
    """Test display and file renderings."""

    def test_display_plain(self):
        assert Task("buy milk").render_display() == "[][ ] buy milk"

    def test_display_todo_done(self):
        assert Task.todo("read book", done=True).render_display() == "[T][X] read book"

    def test_display_deadline(self):
        task = Task.deadline("return book", DUE)
        assert task.render_display() == "[D][ ] return book (by: Dec 02 2019 18:00)"

    def test_display_event(self):
        task = Task.event("meeting", DUE)
        assert str(task) == "[E][ ] meeting (at: Dec 02 2019 18:00)"

    def test_persisted_plain_has_blank_tag(self):
        assert Task("buy milk", done=True).render_persisted() == " | 1 | buy milk\n"

    def test_persisted_todo(self):
        assert Task.todo("read book").render_persisted() == "T | 0 | read book\n"

    def test_persisted_dated_uses_machine_format(self):
        assert Task.deadline("return book", DUE).render_persisted() == "D | 0 | return book | 2019-12-02 1800\n"
        assert Task.event("meeting", DUE, done=True).render_persisted() == "E | 1 | meeting | 2019-12-02 1800\n"


class TestSortKeys:
    """Test the ordering helpers."""

    def test_by_description_is_case_sensitive(self):
        tasks = [Task.todo("banana"), Task.todo("Apple"), Task.todo("apple")]
        ordered = sorted(tasks, key=by_description)
        assert [t.description for t in ordered] == ["Apple", "apple", "banana"]

    def test_by_date_time_puts_undated_first(self):
        late = Task.deadline("late", datetime(2020, 1, 1))
        early = Task.event("early", datetime(2019, 1, 1))
        plain = Task("plain")
        todo = Task.todo("todo")

        ordered = sorted([late, plain, early, todo], key=by_date_time)
        assert ordered == [plain, todo, early, late]

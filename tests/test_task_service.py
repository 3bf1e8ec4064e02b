"""Tests for TaskService."""

from datetime import date

import pytest
from pydantic import ValidationError

from conftest import layout_of
from kanboard.errors import NotFoundError
from kanboard.models import Attachment, ChecklistItem, Priority, Task
from kanboard.services import TaskDraft, TaskService


class TestAddTask:
    """Tests for task creation."""

    def test_appends_to_column(self, task_service: TaskService, make_board):
        state = make_board({"a": ["t1"], "b": []})

        new_state, task = task_service.add_task(state, "a", TaskDraft(title="Fix login"))

        assert task.id == "t-1"
        assert task.column_id == "a"
        assert layout_of(new_state) == {"a": ["t1", "t-1"], "b": []}
        assert new_state.tasks["t-1"] is task
        assert state.task_count == 1

    def test_copies_draft_fields(self, task_service: TaskService, make_board):
        draft = TaskDraft(
            title="Plan sprint",
            description="Pick stories",
            priority=Priority.HIGH,
            assignees=["m1", "m2"],
            due_date=date(2024, 5, 1),
            checklist=[
                ChecklistItem(id="ci-a", title="a", checked=True),
                ChecklistItem(id="ci-b", title="b"),
            ],
            attachments=[Attachment(id="att-a", name="x.pdf", url="/x.pdf")],
        )

        _, task = task_service.add_task(make_board({"a": []}), "a", draft)

        assert task.title == "Plan sprint"
        assert task.description == "Pick stories"
        assert task.priority is Priority.HIGH
        assert task.assignees == ("m1", "m2")
        assert task.due_date == date(2024, 5, 1)
        assert task.progress == 50
        assert task.has_attachments

    def test_missing_column(self, task_service: TaskService, make_board):
        with pytest.raises(NotFoundError, match="Column not found: zzz"):
            task_service.add_task(make_board({"a": []}), "zzz", TaskDraft(title="x"))

    def test_draft_requires_title(self):
        with pytest.raises(ValidationError):
            TaskDraft(title="")


class TestEditTask:
    """Tests for task edits."""

    def test_replaces_task(self, task_service: TaskService, make_board):
        state = make_board({"a": ["t1", "t2"]})
        edited = state.tasks["t1"].with_changes(title="Renamed", priority="low")

        new_state = task_service.edit_task(state, edited)

        assert new_state.tasks["t1"].title == "Renamed"
        assert new_state.tasks["t1"].priority is Priority.LOW
        assert layout_of(new_state) == {"a": ["t1", "t2"]}
        assert state.tasks["t1"].title == "T1"

    def test_column_change_ignored(self, task_service: TaskService, make_board):
        """Editing cannot move a task; the stored column wins."""
        state = make_board({"a": ["t1"], "b": []})
        edited = state.tasks["t1"].with_changes(column_id="b", title="Moved?")

        new_state = task_service.edit_task(state, edited)

        assert new_state.tasks["t1"].column_id == "a"
        assert new_state.tasks["t1"].title == "Moved?"
        assert layout_of(new_state) == {"a": ["t1"], "b": []}

    def test_progress_rederived_from_edited_checklist(
        self, task_service: TaskService, make_board
    ):
        """A copied task with a new checklist gets a fresh progress on save."""
        state = make_board({"a": ["t1"]})
        edited = state.tasks["t1"].model_copy(
            update={
                "checklist": (
                    ChecklistItem(id="ci-1", title="Draft", checked=True),
                    ChecklistItem(id="ci-2", title="Review", checked=True),
                )
            }
        )
        assert edited.progress == 0

        new_state = task_service.edit_task(state, edited)

        assert new_state.tasks["t1"].progress == 100
        assert new_state.tasks["t1"].checked_count == 2

    def test_missing_task(self, task_service: TaskService, make_board):
        ghost = Task(id="ghost", title="Ghost", column_id="a")
        with pytest.raises(NotFoundError):
            task_service.edit_task(make_board({"a": []}), ghost)


class TestDeleteTask:
    """Tests for task deletion."""

    def test_removes_from_column_and_tasks(self, task_service: TaskService, make_board):
        state = make_board({"a": ["t1", "t2", "t3"], "b": ["t4"]})

        new_state = task_service.delete_task(state, "t2")

        assert layout_of(new_state) == {"a": ["t1", "t3"], "b": ["t4"]}
        assert "t2" not in new_state.tasks
        assert new_state.get_column("b") is state.get_column("b")

    def test_missing_task(self, task_service: TaskService, make_board):
        with pytest.raises(NotFoundError):
            task_service.delete_task(make_board({"a": ["t1"]}), "t9")


class TestChecklist:
    """Tests for checklist editing."""

    @pytest.fixture
    def task(self) -> Task:
        return Task(id="t1", title="Release", column_id="a", progress=20)

    def test_add_item(self, task_service: TaskService, task: Task):
        updated = task_service.add_checklist_item(task, "  Tag version  ")

        assert len(updated.checklist) == 1
        assert updated.checklist[0].title == "Tag version"
        assert updated.checklist[0].checked is False
        assert updated.checklist[0].id.startswith("ci-")
        assert updated.progress == 0

    def test_blank_item_ignored(self, task_service: TaskService, task: Task):
        assert task_service.add_checklist_item(task, "   ") is task

    def test_toggle_updates_progress(self, task_service: TaskService, task: Task):
        task = task_service.add_checklist_item(task, "one")
        task = task_service.add_checklist_item(task, "two")

        toggled = task_service.toggle_checklist_item(task, task.checklist[0].id)

        assert toggled.checklist[0].checked is True
        assert toggled.progress == 50

        untoggled = task_service.toggle_checklist_item(toggled, task.checklist[0].id)
        assert untoggled.progress == 0

    def test_remove_item(self, task_service: TaskService, task: Task):
        task = task_service.add_checklist_item(task, "one")
        task = task_service.add_checklist_item(task, "two")
        task = task_service.toggle_checklist_item(task, task.checklist[0].id)

        remaining = task_service.remove_checklist_item(task, task.checklist[1].id)

        assert [i.title for i in remaining.checklist] == ["one"]
        assert remaining.progress == 100

    def test_unknown_item(self, task_service: TaskService, task: Task):
        with pytest.raises(NotFoundError, match="Checklist item"):
            task_service.toggle_checklist_item(task, "ci-missing")
        with pytest.raises(NotFoundError):
            task_service.remove_checklist_item(task, "ci-missing")


class TestAttachments:
    """Tests for attachment editing."""

    def test_add_and_remove(self, task_service: TaskService):
        task = Task(id="t1", title="Design", column_id="a")

        with_file = task_service.add_attachment(task, "mock.png", "/mock.png", "image")
        assert with_file.has_attachments
        assert with_file.attachments[0].type == "image"

        removed = task_service.remove_attachment(with_file, with_file.attachments[0].id)
        assert removed.attachments == ()

    def test_remove_unknown(self, task_service: TaskService):
        task = Task(id="t1", title="Design", column_id="a")
        with pytest.raises(NotFoundError):
            task_service.remove_attachment(task, "att-x")

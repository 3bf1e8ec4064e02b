"""Service for task CRUD operations."""

from __future__ import annotations

import logging
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from ..errors import NotFoundError
from ..models import Attachment, BoardState, ChecklistItem, Priority, Task
from ..utils import IdGenerator, now_utc

logger = logging.getLogger(__name__)


class TaskDraft(BaseModel):
    """Fields supplied by the task creation form."""

    title: str = Field(..., min_length=1)
    description: str = ""
    priority: Priority = Priority.MEDIUM
    assignees: list[str] = Field(default_factory=list)
    due_date: date | None = None
    checklist: list[ChecklistItem] = Field(default_factory=list)
    attachments: list[Attachment] = Field(default_factory=list)


class TaskService:
    """Service for task CRUD operations."""

    def __init__(self, id_generator: IdGenerator | None = None) -> None:
        self.ids = id_generator or IdGenerator()

    def add_task(
        self, state: BoardState, column_id: str, draft: TaskDraft
    ) -> tuple[BoardState, Task]:
        """
        Create a task from draft at the end of column_id.

        Raises NotFoundError if the column does not exist.
        """
        column = state.get_column(column_id)
        if column is None:
            raise NotFoundError("Column", column_id)

        taken = set(state.tasks) | set(state.column_ids)
        task = Task(
            id=self.ids.task_id(taken),
            title=draft.title,
            description=draft.description,
            column_id=column_id,
            priority=draft.priority,
            assignees=tuple(draft.assignees),
            checklist=tuple(draft.checklist),
            created_at=now_utc(),
            due_date=draft.due_date,
            attachments=tuple(draft.attachments),
        )

        grown = column.model_copy(update={"task_ids": (*column.task_ids, task.id)})
        logger.info("Task created: %s in %s", task.id, column_id)
        return (
            state.replace(columns=state.with_column(grown), tasks={**state.tasks, task.id: task}),
            task,
        )

    def edit_task(self, state: BoardState, task: Task) -> BoardState:
        """
        Replace the stored task with the same id.

        Column membership is owned by the move engine, so the stored
        column_id always wins over the one on the edited value. The task is
        revalidated before it is stored.
        """
        current = state.get_task(task.id)
        if current is None:
            raise NotFoundError("Task", task.id)

        if task.column_id != current.column_id:
            logger.debug(
                "edit_task: ignoring column change for %s (%s -> %s)",
                task.id,
                current.column_id,
                task.column_id,
            )
        # Revalidate so progress is rederived from the edited checklist
        task = task.with_changes(column_id=current.column_id)

        logger.info("Task updated: %s", task.id)
        return state.replace(tasks={**state.tasks, task.id: task})

    def delete_task(self, state: BoardState, task_id: str) -> BoardState:
        """Remove a task from the board."""
        if task_id not in state.tasks:
            raise NotFoundError("Task", task_id)

        columns = tuple(
            col.model_copy(update={"task_ids": tuple(t for t in col.task_ids if t != task_id)})
            if task_id in col.task_ids
            else col
            for col in state.columns
        )
        tasks = {tid: task for tid, task in state.tasks.items() if tid != task_id}
        logger.info("Task deleted: %s", task_id)
        return state.replace(columns=columns, tasks=tasks)

    # Checklist

    def add_checklist_item(self, task: Task, title: str) -> Task:
        """Append an unchecked item; blank titles are ignored."""
        title = title.strip()
        if not title:
            return task
        item = ChecklistItem(
            id=self.ids.checklist_item_id({i.id for i in task.checklist}),
            title=title,
        )
        return task.with_changes(checklist=(*task.checklist, item))

    def toggle_checklist_item(self, task: Task, item_id: str) -> Task:
        """Flip the checked flag of one checklist item."""
        self._require_item(task, item_id)
        checklist = tuple(
            item.model_copy(update={"checked": not item.checked}) if item.id == item_id else item
            for item in task.checklist
        )
        return task.with_changes(checklist=checklist)

    def remove_checklist_item(self, task: Task, item_id: str) -> Task:
        self._require_item(task, item_id)
        checklist = tuple(item for item in task.checklist if item.id != item_id)
        return task.with_changes(checklist=checklist)

    @staticmethod
    def _require_item(task: Task, item_id: str) -> None:
        if not any(item.id == item_id for item in task.checklist):
            raise NotFoundError("Checklist item", item_id)

    # Attachments

    def add_attachment(
        self,
        task: Task,
        name: str,
        url: str,
        type: Literal["image", "file"] = "file",
    ) -> Task:
        attachment = Attachment(
            id=self.ids.attachment_id({a.id for a in task.attachments}),
            name=name,
            url=url,
            type=type,
        )
        return task.with_changes(attachments=(*task.attachments, attachment))

    def remove_attachment(self, task: Task, attachment_id: str) -> Task:
        if not any(a.id == attachment_id for a in task.attachments):
            raise NotFoundError("Attachment", attachment_id)
        return task.with_changes(
            attachments=tuple(a for a in task.attachments if a.id != attachment_id)
        )

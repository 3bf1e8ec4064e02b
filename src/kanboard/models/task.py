"""Task domain model."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.datetime import now_utc


class Priority(str, Enum):
    """Priority levels for tasks."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ChecklistItem(BaseModel):
    """Single item of a task's checklist."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    checked: bool = False


class Attachment(BaseModel):
    """File or image attached to a task."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    url: str
    type: Literal["image", "file"] = "file"


def checklist_progress(checked: int, total: int) -> int:
    """
    Percentage of checked items, rounded half up.

    Example: 1 of 8 checked -> 13 (12.5 rounds up, unlike round()).
    """
    if total <= 0:
        return 0
    return (checked * 200 + total) // (2 * total)


class Task(BaseModel):
    """A card on the board.

    column_id mirrors the column whose task_ids owns this task; only the
    board engines change it.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = ""
    column_id: str
    priority: Priority = Priority.MEDIUM
    progress: int = Field(default=0, ge=0, le=100)
    assignees: tuple[str, ...] = ()
    checklist: tuple[ChecklistItem, ...] = ()
    created_at: datetime = Field(default_factory=now_utc)
    due_date: date | None = None
    attachments: tuple[Attachment, ...] = ()
    comments_count: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def derive_progress(cls, data: Any) -> Any:
        """Progress follows the checklist whenever it has items."""
        if not isinstance(data, dict):
            return data
        checklist = data.get("checklist") or ()
        if not checklist:
            return data
        checked = sum(
            1
            for item in checklist
            if (item.get("checked") if isinstance(item, dict) else item.checked)
        )
        return {**data, "progress": checklist_progress(checked, len(checklist))}

    @property
    def checked_count(self) -> int:
        """Number of checked checklist items."""
        return sum(1 for item in self.checklist if item.checked)

    @property
    def has_attachments(self) -> bool:
        return len(self.attachments) > 0

    def with_changes(self, **changes: Any) -> "Task":
        """Return a validated copy with the given fields replaced."""
        return Task.model_validate({**self.model_dump(), **changes})

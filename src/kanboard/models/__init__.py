"""Data models."""

from .board import DEFAULT_COLUMN_TITLE_KEY, BoardState, Column
from .events import DragEndEvent, DragStartEvent
from .kanboard_config import (
    BoardConfig,
    BoardItemConfig,
    ColumnConfig,
    KanboardConfig,
    MemberConfig,
)
from .task import Attachment, ChecklistItem, Priority, Task, checklist_progress

__all__ = [
    "DEFAULT_COLUMN_TITLE_KEY",
    "Attachment",
    "BoardConfig",
    "BoardItemConfig",
    "BoardState",
    "ChecklistItem",
    "Column",
    "ColumnConfig",
    "DragEndEvent",
    "DragStartEvent",
    "KanboardConfig",
    "MemberConfig",
    "Priority",
    "Task",
    "checklist_progress",
]

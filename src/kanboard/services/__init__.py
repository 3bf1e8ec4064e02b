"""Service layer for business logic."""

from .board_service import BoardService
from .config_service import ConfigService
from .filter_service import FilterCriteria, FilterService
from .task_service import TaskDraft, TaskService
from .workspace_service import BoardItem, WorkspaceService

__all__ = [
    "BoardItem",
    "BoardService",
    "ConfigService",
    "FilterCriteria",
    "FilterService",
    "TaskDraft",
    "TaskService",
    "WorkspaceService",
]

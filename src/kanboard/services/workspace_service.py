"""Caller-owned store for boards, the active drag and the current filter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import NotFoundError
from ..models import (
    BoardConfig,
    BoardItemConfig,
    BoardState,
    Column,
    DragEndEvent,
    DragStartEvent,
    KanboardConfig,
    Task,
)
from .board_service import BoardService
from .filter_service import FilterCriteria, FilterService
from .task_service import TaskDraft, TaskService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardItem:
    """Entry of the board switcher."""

    id: str
    name_key: str | None = None
    name: str | None = None

    @property
    def label(self) -> str:
        return self.name or self.name_key or self.id

    @classmethod
    def from_config(cls, item: BoardItemConfig) -> BoardItem:
        return cls(id=item.id, name_key=item.name_key, name=item.name)


class WorkspaceService:
    """
    Holds one BoardState per board and replaces it after each operation.

    This is the only mutable piece: the services it delegates to are
    stateless and never see the workspace.
    """

    def __init__(
        self,
        config: KanboardConfig | None = None,
        board_service: BoardService | None = None,
        task_service: TaskService | None = None,
        filter_service: FilterService | None = None,
    ) -> None:
        self.config = config or KanboardConfig.default()
        self.board_service = board_service or BoardService()
        self.task_service = task_service or TaskService(self.board_service.ids)
        self.filter_service = filter_service or FilterService()

        self.boards: list[BoardItem] = [BoardItem.from_config(b) for b in self.config.boards]
        self._states: dict[str, BoardState] = {
            b.id: self.board_config.empty_state() for b in self.boards
        }
        self.current_board_id: str = self.boards[0].id
        self.active_id: str | None = None
        self.filter: FilterCriteria = FilterCriteria()

    @property
    def board_config(self) -> BoardConfig:
        return self.config.board

    # Boards

    @property
    def state(self) -> BoardState:
        """Board state of the current board."""
        return self._states[self.current_board_id]

    def replace_state(self, state: BoardState) -> None:
        self._states[self.current_board_id] = state

    def state_of(self, board_id: str) -> BoardState:
        if board_id not in self._states:
            raise NotFoundError("Board", board_id)
        return self._states[board_id]

    @property
    def current_board(self) -> BoardItem:
        for board in self.boards:
            if board.id == self.current_board_id:
                return board
        raise NotFoundError("Board", self.current_board_id)

    def create_board(self, name: str) -> BoardItem:
        """Add an empty board with the configured columns and switch to it."""
        name = name.strip()
        if not name:
            raise ValueError("Board name is required")
        board = BoardItem(id=self.board_service.ids.board_id(self._states), name=name)
        self.boards.append(board)
        self._states[board.id] = self.board_config.empty_state()
        self._switch(board.id)
        logger.info("Board created: %s (%s)", board.id, name)
        return board

    def switch_board(self, board_id: str) -> None:
        if board_id not in self._states:
            raise NotFoundError("Board", board_id)
        self._switch(board_id)
        logger.info("Switched to board: %s", board_id)

    def delete_board(self) -> None:
        """Delete the current board and fall back to the first remaining one."""
        deleted = self.current_board_id
        self.boards = [b for b in self.boards if b.id != deleted]
        del self._states[deleted]
        logger.info("Board deleted: %s", deleted)

        if not self.boards:
            default = BoardItem.from_config(self.config.boards[0])
            self.boards.append(default)
            self._states[default.id] = self.board_config.empty_state()
            logger.info("Recreated default board: %s", default.id)

        self._switch(self.boards[0].id)

    def _switch(self, board_id: str) -> None:
        self.current_board_id = board_id
        self.active_id = None

    # Drag lifecycle

    def drag_start(self, event: DragStartEvent) -> None:
        self.active_id = event.active_id

    @property
    def active_task(self) -> Task | None:
        """Task being dragged, if the active item is a task."""
        if self.active_id is None:
            return None
        return self.state.get_task(self.active_id)

    def drag_end(self, event: DragEndEvent) -> BoardState:
        """Finish the current drag and apply it to the current board."""
        self.active_id = None
        self.replace_state(self.board_service.handle_drag_end(self.state, event))
        return self.state

    # Filter

    def apply_filter(self, criteria: FilterCriteria) -> None:
        self.filter = criteria
        logger.debug("Filter applied (%d active)", self.filter_service.active_count(criteria))

    def reset_filter(self) -> None:
        self.filter = FilterCriteria()

    def visible_board(self) -> dict[str, list[Task]]:
        """Filtered tasks per column of the current board."""
        return self.filter_service.visible_board(self.state, self.filter)

    # CRUD

    def add_task(self, column_id: str, draft: TaskDraft) -> Task:
        state, task = self.task_service.add_task(self.state, column_id, draft)
        self.replace_state(state)
        return task

    def edit_task(self, task: Task) -> None:
        self.replace_state(self.task_service.edit_task(self.state, task))

    def delete_task(self, task_id: str) -> None:
        self.replace_state(self.task_service.delete_task(self.state, task_id))

    def add_column(self, name: str) -> Column:
        state, column = self.board_service.add_column(self.state, name)
        self.replace_state(state)
        return column

    def rename_column(self, column_id: str, name: str) -> None:
        self.replace_state(self.board_service.rename_column(self.state, column_id, name))

    def delete_column(self, column_id: str) -> None:
        self.replace_state(self.board_service.delete_column(self.state, column_id))

"""Service for board structure: columns and drag-and-drop transitions."""

from __future__ import annotations

import logging

from ..errors import InvalidDragStateError, NotFoundError
from ..models import BoardState, Column, DragEndEvent
from ..utils import IdGenerator, array_move, insert_at, without

logger = logging.getLogger(__name__)


class BoardService:
    """
    Column CRUD plus the task move and column reorder engines.

    Every method takes the current BoardState and returns a new one; the
    service keeps no board between calls.
    """

    def __init__(self, id_generator: IdGenerator | None = None, strict: bool = False) -> None:
        self.ids = id_generator or IdGenerator()
        self.strict = strict

    # Column CRUD

    def add_column(self, state: BoardState, name: str) -> tuple[BoardState, Column]:
        """Append a new empty column named name."""
        name = name.strip()
        if not name:
            raise ValueError("Column name is required")
        taken = set(state.column_ids) | set(state.tasks)
        column = Column(id=self.ids.column_id(taken), name=name)
        logger.info("Column added: %s (%s)", column.id, name)
        return state.replace(columns=(*state.columns, column)), column

    def rename_column(self, state: BoardState, column_id: str, name: str) -> BoardState:
        """Replace the user-set name of a column."""
        column = state.get_column(column_id)
        if column is None:
            raise NotFoundError("Column", column_id)
        name = name.strip()
        if not name:
            raise ValueError("Column name is required")
        renamed = column.model_copy(update={"name": name})
        logger.info("Column renamed: %s -> %s", column_id, name)
        return state.replace(columns=state.with_column(renamed))

    def delete_column(self, state: BoardState, column_id: str) -> BoardState:
        """Remove a column and every task it holds."""
        column = state.get_column(column_id)
        if column is None:
            raise NotFoundError("Column", column_id)
        doomed = set(column.task_ids)
        tasks = {tid: task for tid, task in state.tasks.items() if tid not in doomed}
        columns = tuple(col for col in state.columns if col.id != column_id)
        logger.info("Column deleted: %s (%d tasks removed)", column_id, len(doomed))
        return state.replace(columns=columns, tasks=tasks)

    # Drag and drop

    def handle_drag_end(self, state: BoardState, event: DragEndEvent) -> BoardState:
        """
        Apply a drag-end event.

        A column dropped on a column reorders columns; anything else is
        treated as a task drag.
        """
        if event.over_id is None:
            logger.debug("Drag cancelled: %s", event.active_id)
            return state

        if state.is_column(event.active_id):
            if state.is_column(event.over_id):
                return self.move_column(state, event.active_id, event.over_id)
            logger.debug(
                "Column drag ignored, not over a column: %s -> %s",
                event.active_id,
                event.over_id,
            )
            return state

        return self.move_task(state, event.active_id, event.over_id)

    def move_task(
        self, state: BoardState, active_task_id: str, over_id: str | None
    ) -> BoardState:
        """
        Move or reorder a task after it was dropped on over_id.

        over_id may be a column (append to its end) or another task (take
        that task's position). Inputs that do not describe a valid move
        return state unchanged, or raise InvalidDragStateError in strict mode
        when the dragged task is not on the board.
        """
        if over_id is None:
            logger.debug("move_task: no drop target for %s", active_task_id)
            return state

        source = state.column_of(active_task_id)
        task = state.get_task(active_task_id)
        if source is None or task is None:
            if self.strict:
                raise InvalidDragStateError(active_task_id, over_id)
            logger.debug("move_task: task not on board: %s", active_task_id)
            return state

        target = state.get_column(over_id)
        if target is not None:
            if target.id == source.id:
                logger.debug("move_task: dropped on own column: %s", active_task_id)
                return state
            return self._transfer(state, active_task_id, source, target, len(target.task_ids))

        over_column = state.column_of(over_id)
        if over_column is None:
            logger.debug("move_task: unknown drop target: %s", over_id)
            return state

        over_index = over_column.index_of(over_id)
        if over_column.id == source.id:
            from_index = source.index_of(active_task_id)
            if from_index == over_index:
                return state
            reordered = source.model_copy(
                update={"task_ids": array_move(source.task_ids, from_index, over_index)}
            )
            logger.debug(
                "Task reordered in %s: %s (pos %d -> %d)",
                source.id,
                active_task_id,
                from_index,
                over_index,
            )
            return state.replace(columns=state.with_column(reordered))

        return self._transfer(state, active_task_id, source, over_column, over_index)

    def _transfer(
        self,
        state: BoardState,
        task_id: str,
        source: Column,
        target: Column,
        index: int,
    ) -> BoardState:
        """Move task_id from source into target at index and retag its column."""
        new_source = source.model_copy(update={"task_ids": without(source.task_ids, task_id)})
        new_target = target.model_copy(
            update={"task_ids": insert_at(target.task_ids, index, task_id)}
        )
        columns = state.with_column(new_source)
        columns = tuple(new_target if col.id == target.id else col for col in columns)

        task = state.tasks[task_id].model_copy(update={"column_id": target.id})
        tasks = {**state.tasks, task_id: task}

        logger.info("Task moved: %s (%s -> %s @ %d)", task_id, source.id, target.id, index)
        return state.replace(columns=columns, tasks=tasks)

    def move_column(
        self, state: BoardState, active_column_id: str, over_column_id: str
    ) -> BoardState:
        """Move the active column to the position of the over column."""
        from_index = state.column_index(active_column_id)
        to_index = state.column_index(over_column_id)
        if from_index == -1 or to_index == -1 or from_index == to_index:
            logger.debug("move_column: no-op %s -> %s", active_column_id, over_column_id)
            return state

        logger.info("Column moved: %s (pos %d -> %d)", active_column_id, from_index, to_index)
        return state.replace(columns=array_move(state.columns, from_index, to_index))

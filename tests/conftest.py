"""Shared fixtures for board tests."""

from collections.abc import Callable

import pytest

from kanboard.models import BoardState, Column, Task
from kanboard.services import BoardService, FilterService, TaskService
from kanboard.utils import IdGenerator, sequential_suffixes

BoardFactory = Callable[[dict[str, list[str]]], BoardState]


def build_board(layout: dict[str, list[str]]) -> BoardState:
    """Build a board from {column_id: [task_id, ...]} in insertion order."""
    columns = tuple(Column(id=col_id, task_ids=tuple(ids)) for col_id, ids in layout.items())
    tasks = {
        task_id: Task(id=task_id, title=task_id.upper(), column_id=col_id)
        for col_id, ids in layout.items()
        for task_id in ids
    }
    return BoardState(columns=columns, tasks=tasks)


def layout_of(state: BoardState) -> dict[str, list[str]]:
    """Inverse of build_board: {column_id: [task_id, ...]}."""
    return {col.id: list(col.task_ids) for col in state.columns}


@pytest.fixture
def make_board() -> BoardFactory:
    return build_board


@pytest.fixture
def ids() -> IdGenerator:
    """Id generator producing t-1, col-1, ... for predictable assertions."""
    return IdGenerator(sequential_suffixes())


@pytest.fixture
def board_service(ids: IdGenerator) -> BoardService:
    return BoardService(ids)


@pytest.fixture
def task_service(ids: IdGenerator) -> TaskService:
    return TaskService(ids)


@pytest.fixture
def filter_service() -> FilterService:
    return FilterService()

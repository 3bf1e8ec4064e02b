"""Board state models."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from .task import Task

DEFAULT_COLUMN_TITLE_KEY = "customColumn"


class Column(BaseModel):
    """An ordered bucket of task ids."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title_key: str = DEFAULT_COLUMN_TITLE_KEY
    name: str | None = None
    task_ids: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        """User-set name, falling back to the label key."""
        return self.name or self.title_key

    def index_of(self, task_id: str) -> int:
        """Position of task_id in this column, or -1 if absent."""
        try:
            return self.task_ids.index(task_id)
        except ValueError:
            return -1


class BoardState(BaseModel):
    """
    Full board at a point in time: columns in display order plus tasks by id.

    Construction checks the structural invariants:
    - every id in a column's task_ids exists in tasks
    - every task appears in exactly one column
    - a task's column_id names the column that holds it
    - column ids are unique and never collide with task ids

    Instances are frozen and tasks is a read-only mapping; operations build
    new states and carry unchanged columns and tasks over by reference.
    """

    model_config = ConfigDict(frozen=True)

    columns: tuple[Column, ...] = ()
    tasks: Mapping[str, Task] = Field(default_factory=dict, validate_default=True)

    @field_validator("tasks")
    @classmethod
    def freeze_tasks(cls, tasks: Mapping[str, Task]) -> Mapping[str, Task]:
        """Store a read-only view over a private copy of the mapping."""
        return MappingProxyType(dict(tasks))

    @field_serializer("tasks")
    def serialize_tasks(self, tasks: Mapping[str, Task]) -> dict[str, Task]:
        return dict(tasks)

    @model_validator(mode="after")
    def check_invariants(self) -> BoardState:
        problems = self.invariant_violations()
        if problems:
            raise ValueError("; ".join(problems))
        return self

    def invariant_violations(self) -> list[str]:
        """Describe every structural invariant this state breaks."""
        problems: list[str] = []

        column_counts = Counter(col.id for col in self.columns)
        for column_id, count in column_counts.items():
            if count > 1:
                problems.append(f"duplicate column id: {column_id}")
            if column_id in self.tasks:
                problems.append(f"column id collides with task id: {column_id}")

        owners: dict[str, list[str]] = {}
        for col in self.columns:
            for task_id in col.task_ids:
                owners.setdefault(task_id, []).append(col.id)

        for task_id, columns in owners.items():
            if task_id not in self.tasks:
                problems.append(f"column references unknown task: {task_id}")
            if len(columns) > 1:
                problems.append(f"task {task_id} appears {len(columns)} times")

        for task_id, task in self.tasks.items():
            if task.id != task_id:
                problems.append(f"task keyed as {task_id} has id {task.id}")
            holders = owners.get(task_id)
            if not holders:
                problems.append(f"task not in any column: {task_id}")
            elif task.column_id != holders[0]:
                problems.append(
                    f"task {task_id} says column {task.column_id} but is in {holders[0]}"
                )

        return problems

    @property
    def column_ids(self) -> list[str]:
        """Column ids in display order."""
        return [col.id for col in self.columns]

    @property
    def task_count(self) -> int:
        return len(self.tasks)

    def is_column(self, item_id: str) -> bool:
        return any(col.id == item_id for col in self.columns)

    def get_column(self, column_id: str) -> Column | None:
        """Get column by id."""
        for col in self.columns:
            if col.id == column_id:
                return col
        return None

    def column_index(self, column_id: str) -> int:
        """Display position of a column, or -1 if absent."""
        for idx, col in enumerate(self.columns):
            if col.id == column_id:
                return idx
        return -1

    def get_task(self, task_id: str) -> Task | None:
        return self.tasks.get(task_id)

    def column_of(self, task_id: str) -> Column | None:
        """The column whose task_ids holds task_id."""
        for col in self.columns:
            if task_id in col.task_ids:
                return col
        return None

    def tasks_in(self, column_id: str) -> list[Task]:
        """Tasks of a column in board order."""
        col = self.get_column(column_id)
        if col is None:
            return []
        return [self.tasks[task_id] for task_id in col.task_ids if task_id in self.tasks]

    def replace(
        self,
        columns: tuple[Column, ...] | None = None,
        tasks: Mapping[str, Task] | None = None,
    ) -> BoardState:
        """Build a new validated state, reusing the parts not given."""
        return BoardState(
            columns=self.columns if columns is None else columns,
            tasks=self.tasks if tasks is None else tasks,
        )

    def with_column(self, column: Column) -> tuple[Column, ...]:
        """Columns tuple with the column of the same id swapped for column."""
        return tuple(column if col.id == column.id else col for col in self.columns)
